"""Pattern flattening: fold a pattern's elements into text or variant branches.

The fold keeps an explicit Flattened accumulator:

- text pieces are appended to every leaf of the accumulator
- the first branching placeable fans the accumulated text out into one
  branch per variant; later elements are appended to every branch
- a second branching placeable does not cross-multiply: the earlier fan-out
  collapses to its default variant and the newer selector drives the
  branch structure (reported as SELECTOR_COLLAPSED)

Leaves are stripped once the whole pattern has been folded.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ftlextract.constants import PLACEHOLDER_UNKNOWN
from ftlextract.diagnostics import DepthLimitExceededError, ErrorTemplate
from ftlextract.syntax.ast import (
    Identifier,
    NumberLiteral,
    Pattern,
    Placeable,
    TextElement,
    Variant,
    VariantList,
)

from .context import ExtractionContext, node_kind
from .flattened import (
    FlatText,
    Flattened,
    FlatVariants,
    VariantBranch,
    append_text,
    default_text,
    prepend_text,
    strip_flattened,
)
from .placeables import resolve_placeable

__all__ = [
    "flatten_pattern",
    "flatten_value",
    "flatten_variants",
    "iter_variants",
    "variant_key",
]

logger = logging.getLogger(__name__)


def flatten_pattern(pattern: Pattern, *, context: ExtractionContext | None = None) -> Flattened:
    """Flatten a pattern into one string, or one string per variant.

    Args:
        pattern: Pattern to flatten
        context: Extraction pass state. A fresh one is created when omitted.

    Returns:
        FlatText when no placeable branches, otherwise FlatVariants tagged
        with the selector keys. Every leaf is stripped.

    Example:
        >>> flatten_pattern(Pattern(elements=(TextElement(value=" Hello "),)))
        FlatText(value='Hello')
    """
    ctx = context if context is not None else ExtractionContext()
    elements = pattern.elements
    if not isinstance(elements, (tuple, list)):
        ctx.report(ErrorTemplate.malformed_pattern(type(elements).__name__, ctx.entry_name))
        return FlatText(PLACEHOLDER_UNKNOWN)

    flat: Flattened = FlatText("")
    for element in elements:
        flat = _combine(flat, _render_element(element, ctx), ctx)
    return strip_flattened(flat)


def flatten_value(value: object, *, context: ExtractionContext | None = None) -> Flattened | None:
    """Flatten a Pattern or VariantList value.

    Returns:
        The flattened value, or None (with an UNKNOWN_VALUE diagnostic) for
        any other node.
    """
    ctx = context if context is not None else ExtractionContext()
    match value:
        case Pattern():
            return flatten_pattern(value, context=ctx)
        case VariantList(variants=variants):
            return flatten_variants(variants, context=ctx)
        case _:
            ctx.report(ErrorTemplate.unknown_value(node_kind(value), ctx.entry_name))
            return None


def flatten_variants(variants: object, *, context: ExtractionContext | None = None) -> Flattened:
    """Flatten select or variant-list variants into one branch per variant.

    An empty variant sequence flattens to empty text so the enclosing pattern
    keeps its remaining content. Nested variant lists count against the
    depth limit; past it the whole group renders as {?}.
    """
    ctx = context if context is not None else ExtractionContext()
    try:
        with ctx.depth_guard:
            return _flatten_variants(variants, ctx)
    except DepthLimitExceededError:
        ctx.report(ErrorTemplate.max_depth_exceeded(ctx.depth_guard.max_depth, ctx.entry_name))
        return FlatText(PLACEHOLDER_UNKNOWN)


def _flatten_variants(variants: object, ctx: ExtractionContext) -> Flattened:
    branches: list[VariantBranch] = []
    for key, value, default in iter_variants(variants, ctx):
        flat = flatten_value(value, context=ctx)
        branches.append(
            VariantBranch(
                key=key, value=flat if flat is not None else FlatText(""), default=default
            )
        )
    if not branches:
        return FlatText("")
    return FlatVariants(tuple(branches))


def iter_variants(variants: object, ctx: ExtractionContext) -> Iterator[tuple[str, object, bool]]:
    """Yield (rendered key, value, default) for every well-formed variant."""
    if not isinstance(variants, (tuple, list)):
        ctx.report(ErrorTemplate.unknown_value(type(variants).__name__, ctx.entry_name))
        return
    for variant in variants:
        match variant:
            case Variant(key=key, value=value, default=default):
                yield variant_key(key, ctx), value, bool(default)
            case _:
                ctx.report(ErrorTemplate.unknown_value(node_kind(variant), ctx.entry_name))


def variant_key(key: object, ctx: ExtractionContext) -> str:
    """Render a variant key: identifier name or number literal source."""
    match key:
        case Identifier(name=str() as name):
            return name
        case NumberLiteral(raw=str() as raw):
            return raw
        case _:
            ctx.report(ErrorTemplate.unknown_variant_key(node_kind(key), ctx.entry_name))
            return PLACEHOLDER_UNKNOWN


def _render_element(element: object, ctx: ExtractionContext) -> Flattened:
    match element:
        case TextElement(value=str() as text) if text:
            return FlatText(text)
        case TextElement(value=value):
            kind = "empty text" if value == "" else type(value).__name__
            ctx.report(ErrorTemplate.malformed_element(kind, ctx.entry_name))
            return FlatText(PLACEHOLDER_UNKNOWN)
        case Placeable(expression=expression):
            return resolve_placeable(expression, context=ctx)
        case _:
            ctx.report(ErrorTemplate.unknown_element(node_kind(element), ctx.entry_name))
            return FlatText(PLACEHOLDER_UNKNOWN)


def _combine(acc: Flattened, piece: Flattened, ctx: ExtractionContext) -> Flattened:
    if isinstance(piece, FlatText):
        return append_text(acc, piece.value)
    if isinstance(acc, FlatText):
        return prepend_text(acc.value, piece)
    collapsed = default_text(acc)
    ctx.report(ErrorTemplate.selector_collapsed(len(piece.branches), ctx.entry_name))
    logger.debug("Collapsed earlier selector to: %r", collapsed)
    return prepend_text(collapsed, piece)
