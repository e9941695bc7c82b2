"""Entry extraction: turn one top-level entry into lint targets.

Messages and terms contribute a target per flattened leaf of their value and
of every attribute, in that order. Comments contribute nothing. Junk and
unrecognized entries contribute nothing and record a diagnostic.

Naming:
    greeting = Hello            -> greeting
    color = { $n -> [one] ... } -> color[one]
    -brand = { *[nom] ... }     -> -brand, variant="nom"
    login = ... .title = Hi     -> login, attribute="title"

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ftlextract.constants import PLACEHOLDER_UNKNOWN, VARIANT_PATH_SEPARATOR
from ftlextract.diagnostics import DepthLimitExceededError, ErrorTemplate
from ftlextract.syntax.ast import (
    Attribute,
    Comment,
    Identifier,
    Junk,
    Message,
    Pattern,
    Term,
    VariantList,
)

from .context import ExtractionContext, node_kind, term_target_name
from .flattened import Flattened, iter_leaves
from .patterns import flatten_pattern, flatten_value, iter_variants
from .targets import LintTarget

__all__ = ["extract_entry"]

logger = logging.getLogger(__name__)


def extract_entry(entry: object, *, context: ExtractionContext | None = None) -> tuple[LintTarget, ...]:
    """Extract lint targets from a single resource entry.

    Args:
        entry: Message, Term, Comment, Junk or any other entry node
        context: Extraction pass state. A fresh one is created when omitted.

    Returns:
        Lint targets in document order: value targets first, then attribute
        targets. Empty for comments, junk, unknown entries and entries with
        neither value nor attributes.

    Example:
        >>> entry = Message(
        ...     id=Identifier(name="greeting"),
        ...     value=Pattern(elements=(TextElement(value="Hello"),)),
        ...     attributes=(),
        ... )
        >>> extract_entry(entry)
        (LintTarget(name='greeting', value='Hello', attribute=None, variant=None),)
    """
    ctx = context if context is not None else ExtractionContext()
    match entry:
        case Comment():
            return ()
        case Junk(content=content):
            ctx.report(ErrorTemplate.junk_entry(str(content)))
            return ()
        case Message(id=Identifier(name=str() as name)):
            return _extract_named(name, entry, ctx)
        case Term(id=Identifier(name=str() as name)):
            return _extract_named(term_target_name(name), entry, ctx)
        case _:
            ctx.report(ErrorTemplate.unknown_entry(node_kind(entry)))
            return ()


def _extract_named(name: str, entry: Message | Term, ctx: ExtractionContext) -> tuple[LintTarget, ...]:
    """Collect targets from the value and every attribute of a message or term."""
    targets: list[LintTarget] = []
    with ctx.entry(name):
        if entry.value is not None:
            targets.extend(_extract_value(name, entry.value, ctx, attribute=None))

        for attribute in entry.attributes or ():
            match attribute:
                case Attribute(id=Identifier(name=str() as attribute_name), value=value):
                    targets.extend(_extract_value(name, value, ctx, attribute=attribute_name))
                case _:
                    ctx.report(ErrorTemplate.unknown_value(node_kind(attribute), name))

    logger.debug("Extracted %d target(s) from %s", len(targets), name)
    return tuple(targets)


def _extract_value(
    name: str, value: object, ctx: ExtractionContext, *, attribute: str | None
) -> Iterator[LintTarget]:
    """Pattern values qualify the name per select key; variant lists fill ``variant``."""
    match value:
        case Pattern():
            yield from _leaf_targets(name, flatten_pattern(value, context=ctx), attribute, None)
        case VariantList(variants=variants):
            yield from _extract_variant_list(name, variants, ctx, attribute, ())
        case _:
            ctx.report(ErrorTemplate.unknown_value(node_kind(value), ctx.entry_name))


def _extract_variant_list(
    name: str,
    variants: object,
    ctx: ExtractionContext,
    attribute: str | None,
    path: tuple[str, ...],
) -> list[LintTarget]:
    """Targets for one variant-list level; overflowing levels collapse to {?}."""
    try:
        with ctx.depth_guard:
            return _variant_list_targets(name, variants, ctx, attribute, path)
    except DepthLimitExceededError:
        ctx.report(ErrorTemplate.max_depth_exceeded(ctx.depth_guard.max_depth, ctx.entry_name))
        variant = VARIANT_PATH_SEPARATOR.join(path) or None
        return [
            LintTarget(name=name, value=PLACEHOLDER_UNKNOWN, attribute=attribute, variant=variant)
        ]


def _variant_list_targets(
    name: str,
    variants: object,
    ctx: ExtractionContext,
    attribute: str | None,
    path: tuple[str, ...],
) -> list[LintTarget]:
    targets: list[LintTarget] = []
    for key, value, _default in iter_variants(variants, ctx):
        keys = (*path, key)
        if VariantList.guard(value):
            targets.extend(_extract_variant_list(name, value.variants, ctx, attribute, keys))
            continue
        flat = flatten_value(value, context=ctx)
        if flat is not None:
            targets.extend(_leaf_targets(name, flat, attribute, VARIANT_PATH_SEPARATOR.join(keys)))
    return targets


def _leaf_targets(
    name: str, flat: Flattened, attribute: str | None, variant: str | None
) -> Iterator[LintTarget]:
    for keys, text in iter_leaves(flat):
        qualified = name + "".join(f"[{key}]" for key in keys)
        yield LintTarget(name=qualified, value=text, attribute=attribute, variant=variant)
