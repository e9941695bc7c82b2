"""Enumerations for ftlextract type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Comment kinds come with the input AST (``ftllexengine.enums.CommentType``).

Python 3.13+.
"""

from enum import StrEnum


class TargetKind(StrEnum):
    """Which value source of an entry a lint target was flattened from."""

    VALUE = "value"
    """Entry value: greeting = Hello"""

    ATTRIBUTE = "attribute"
    """Entry attribute: .title = Hello"""

    VARIANT = "variant"
    """Variant of a VariantList value: *[nominative] Firefox"""


__all__ = [
    "TargetKind",
]
