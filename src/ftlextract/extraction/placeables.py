"""Placeable resolution: render one inline expression as text or variant branches.

References and function calls are never evaluated. They become placeholder
tokens that keep the surrounding markup readable for a linter. Select
expressions fan out into one branch per variant.

Python 3.13+.
"""

from __future__ import annotations

from ftlextract.constants import (
    PLACEHOLDER_UNKNOWN,
    TOKEN_FUNCTION,
    TOKEN_MESSAGE,
    TOKEN_VARIABLE,
)
from ftlextract.diagnostics import DepthLimitExceededError, ErrorTemplate
from ftlextract.syntax.ast import (
    FunctionReference,
    Identifier,
    MessageReference,
    NumberLiteral,
    Placeable,
    SelectExpression,
    StringLiteral,
    TermReference,
    VariableReference,
    VariantExpression,
)

from .context import ExtractionContext, node_kind
from .flattened import FlatText, Flattened

__all__ = ["resolve_placeable"]


def resolve_placeable(expression: object, *, context: ExtractionContext | None = None) -> Flattened:
    """Resolve a placeable's expression to a literal token or variant branches.

    Args:
        expression: Expression node (the ``expression`` of a Placeable, or a
            Placeable itself)
        context: Extraction pass state. A fresh one is created when omitted.

    Returns:
        FlatText for references, calls and literals; FlatVariants for
        select expressions. Never raises: unknown kinds resolve to an empty
        FlatText and record an UNKNOWN_EXPRESSION diagnostic.

    Example:
        >>> resolve_placeable(VariableReference(id=Identifier(name="count")))
        FlatText(value='$count ')
    """
    ctx = context if context is not None else ExtractionContext()
    try:
        with ctx.depth_guard:
            return _resolve(expression, ctx)
    except DepthLimitExceededError:
        ctx.report(ErrorTemplate.max_depth_exceeded(ctx.depth_guard.max_depth, ctx.entry_name))
        return FlatText(PLACEHOLDER_UNKNOWN)


def _resolve(expression: object, ctx: ExtractionContext) -> Flattened:
    match expression:
        case VariableReference(id=Identifier(name=name)):
            return FlatText(TOKEN_VARIABLE.format(name=name))

        case TermReference(id=Identifier(name=name), attribute=attribute):
            term = _qualified(name.removeprefix("-"), attribute)
            return FlatText(TOKEN_VARIABLE.format(name=term))

        case MessageReference(id=Identifier(name=name), attribute=attribute):
            return FlatText(TOKEN_MESSAGE.format(name=_qualified(name, attribute)))

        case FunctionReference(id=Identifier(name=name)):
            # Arguments are never rendered
            return FlatText(TOKEN_FUNCTION.format(name=name))

        case VariantExpression(
            reference=TermReference(id=Identifier(name=name))
            | MessageReference(id=Identifier(name=name))
        ):
            return FlatText(name.removeprefix("-"))

        case StringLiteral(value=str() as value):
            return FlatText(value)

        case NumberLiteral(raw=str() as raw):
            return FlatText(raw)

        case Placeable(expression=inner):
            return resolve_placeable(inner, context=ctx)

        case SelectExpression(variants=variants):
            from .patterns import flatten_variants  # noqa: PLC0415 - circular

            return flatten_variants(variants, context=ctx)

        case _:
            ctx.report(ErrorTemplate.unknown_expression(node_kind(expression), ctx.entry_name))
            return FlatText("")


def _qualified(name: str, attribute: object) -> str:
    """Append ".attr" for attribute references."""
    if Identifier.guard(attribute):
        return f"{name}.{attribute.name}"
    return name
