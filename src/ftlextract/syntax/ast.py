"""Fluent AST input model.

Fluent 1.0 nodes are ftllexengine's own: its parser produces the trees the
extraction walk consumes, so they are re-exported here unchanged. Three node
kinds are added for trees that did not come from a Fluent 1.0 parser:

- VariantList / VariantExpression: legacy (pre-1.0) term syntax still found
  in older localization resources
- Unsupported: explicit stand-in for any node kind the walk does not model

Python 3.13+.
"""

from dataclasses import dataclass
from typing import TypeIs

from ftllexengine.syntax.ast import (
    Annotation,
    Attribute,
    CallArguments,
    Comment,
    FunctionReference,
    Identifier,
    Junk,
    Message,
    MessageReference,
    NamedArgument,
    NumberLiteral,
    Pattern,
    Placeable,
    Resource,
    SelectExpression,
    StringLiteral,
    Term,
    TermReference,
    TextElement,
    VariableReference,
    Variant,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fluent 1.0 nodes (ftllexengine)
    "Annotation",
    "Identifier",
    "Resource",
    "Message",
    "Term",
    "Attribute",
    "Comment",
    "Junk",
    "Pattern",
    "TextElement",
    "Placeable",
    "SelectExpression",
    "Variant",
    "StringLiteral",
    "NumberLiteral",
    "VariableReference",
    "MessageReference",
    "TermReference",
    "FunctionReference",
    "CallArguments",
    "NamedArgument",
    # Extension nodes
    "VariantList",
    "VariantExpression",
    "Unsupported",
    # Type aliases
    "Entry",
    "EntryValue",
    "PatternElement",
    "Expression",
    "InlineExpression",
    "VariantKey",
]


@dataclass(frozen=True, slots=True)
class VariantList:
    """Pattern-less value made only of variants (legacy term syntax).

    Example:
        -brand =
            {
               *[nominative] Firefox
                [locative] Firefoksie
            }
    """

    variants: tuple[Variant, ...]

    @staticmethod
    def guard(value: object) -> TypeIs["VariantList"]:
        """Type guard for VariantList."""
        return isinstance(value, VariantList)


@dataclass(frozen=True, slots=True)
class VariantExpression:
    """Reference to one variant of another entry (legacy syntax).

    Example:
        about = O { -brand[locative] }
    """

    reference: MessageReference | TermReference
    key: "VariantKey"


@dataclass(frozen=True, slots=True)
class Unsupported:
    """Node of a kind this package does not model.

    Stands in for any entry, value, pattern element, expression or variant key
    produced by a parser extension or a newer grammar. Extraction records a
    diagnostic naming ``kind`` and carries on.

    Example:
        Unsupported(kind="MathExpression")
    """

    kind: str

    @staticmethod
    def guard(node: object) -> TypeIs["Unsupported"]:
        """Type guard for Unsupported."""
        return isinstance(node, Unsupported)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Entry = Message | Term | Comment | Junk | Unsupported
type EntryValue = Pattern | VariantList | Unsupported
type PatternElement = TextElement | Placeable | Unsupported
type Expression = SelectExpression | VariantExpression | InlineExpression
type InlineExpression = (
    StringLiteral
    | NumberLiteral
    | VariableReference
    | MessageReference
    | TermReference
    | FunctionReference
    | Placeable
    | Unsupported
)
type VariantKey = Identifier | NumberLiteral | Unsupported
