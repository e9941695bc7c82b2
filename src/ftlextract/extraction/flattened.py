"""Flattening results: one literal string, or a tree of keyed variant branches.

A pattern flattens to FlatText when none of its placeables branch, and to
FlatVariants when a select expression fans it out. Branch values are
themselves Flattened, so nested selectors keep their structure until the
entry extractor turns every leaf into a lint target.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

__all__ = [
    "FlatText",
    "FlatVariants",
    "Flattened",
    "VariantBranch",
    "append_text",
    "default_text",
    "iter_leaves",
    "prepend_text",
    "strip_flattened",
]


@dataclass(frozen=True, slots=True)
class FlatText:
    """A fully rendered literal string."""

    value: str


@dataclass(frozen=True, slots=True)
class VariantBranch:
    """One variant of a fanned-out pattern.

    Attributes:
        key: Selector key of the variant (identifier name or number source)
        value: Flattened variant content
        default: Whether the variant was marked default (*[key])
    """

    key: str
    value: Flattened
    default: bool = False


@dataclass(frozen=True, slots=True)
class FlatVariants:
    """A pattern fanned out into one branch per select variant."""

    branches: tuple[VariantBranch, ...]


type Flattened = FlatText | FlatVariants


def append_text(flat: Flattened, text: str) -> Flattened:
    """Append text to every leaf of a flattened value."""
    if not text:
        return flat
    match flat:
        case FlatText(value=value):
            return FlatText(value + text)
        case FlatVariants(branches=branches):
            return FlatVariants(
                tuple(replace(branch, value=append_text(branch.value, text)) for branch in branches)
            )


def prepend_text(text: str, flat: Flattened) -> Flattened:
    """Prepend text to every leaf of a flattened value."""
    if not text:
        return flat
    match flat:
        case FlatText(value=value):
            return FlatText(text + value)
        case FlatVariants(branches=branches):
            return FlatVariants(
                tuple(replace(branch, value=prepend_text(text, branch.value)) for branch in branches)
            )


def strip_flattened(flat: Flattened) -> Flattened:
    """Strip leading and trailing whitespace from every leaf."""
    match flat:
        case FlatText(value=value):
            return FlatText(value.strip())
        case FlatVariants(branches=branches):
            return FlatVariants(
                tuple(replace(branch, value=strip_flattened(branch.value)) for branch in branches)
            )


def default_text(flat: Flattened) -> str:
    """Collapse a flattened value to a single string.

    Follows the branch marked default at every level, or the first branch
    when none is marked.
    """
    match flat:
        case FlatText(value=value):
            return value
        case FlatVariants(branches=()):
            return ""
        case FlatVariants(branches=branches):
            chosen = next((branch for branch in branches if branch.default), branches[0])
            return default_text(chosen.value)


def iter_leaves(flat: Flattened, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], str]]:
    """Yield (key path, text) for every leaf, depth-first in branch order.

    Example:
        >>> flat = FlatVariants((VariantBranch("one", FlatText("red")),))
        >>> list(iter_leaves(flat))
        [(('one',), 'red')]
    """
    match flat:
        case FlatText(value=value):
            yield path, value
        case FlatVariants(branches=branches):
            for branch in branches:
                yield from iter_leaves(branch.value, (*path, branch.key))
