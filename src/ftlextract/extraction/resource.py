"""Resource walking: extract every entry of a resource in document order.

FTL source is parsed with ftllexengine's Fluent 1.0 parser; the resulting
Resource is walked as-is.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ftlextract.constants import MAX_DEPTH
from ftlextract.diagnostics import Diagnostic
from ftlextract.syntax import Resource, parse

from .context import ExtractionContext
from .entries import extract_entry
from .targets import LintTarget

__all__ = ["ExtractionResult", "extract_ftl", "extract_lint_targets", "walk_resource"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Outcome of one extraction pass.

    Attributes:
        targets: Lint targets in document order
        diagnostics: Everything that was degraded or skipped, in document order
    """

    targets: tuple[LintTarget, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_diagnostics(self) -> bool:
        """Whether any node was degraded or skipped."""
        return bool(self.diagnostics)

    @property
    def error_count(self) -> int:
        """Diagnostics that lost content (severity "error")."""
        return sum(1 for d in self.diagnostics if d.severity == "error")


def walk_resource(
    resource: Resource, *, context: ExtractionContext | None = None
) -> tuple[LintTarget, ...]:
    """Extract lint targets from every entry of a resource.

    Deterministic and order-preserving; entries without targets are skipped.

    Args:
        resource: Parsed resource
        context: Extraction pass state. A fresh one is created when omitted.

    Returns:
        Lint targets in document order

    Raises:
        TypeError: If resource is not a Resource AST node
    """
    # Validate input type at API boundary
    if not isinstance(resource, Resource):
        msg = f"Expected Resource, got {type(resource).__name__}"  # type: ignore[unreachable]
        raise TypeError(msg)

    ctx = context if context is not None else ExtractionContext()
    targets: list[LintTarget] = []
    for entry in resource.entries:
        targets.extend(extract_entry(entry, context=ctx))

    logger.debug(
        "Extracted %d target(s) from %d entries", len(targets), len(resource.entries)
    )
    return tuple(targets)


def extract_lint_targets(resource: Resource, *, max_depth: int = MAX_DEPTH) -> ExtractionResult:
    """Run one extraction pass and return targets together with diagnostics.

    Args:
        resource: Parsed resource
        max_depth: Nesting limit for placeables and select expressions

    Returns:
        ExtractionResult with targets and diagnostics

    Example:
        >>> result = extract_lint_targets(resource)
        >>> for target in result.targets:
        ...     print(target.label, "=", target.value)
    """
    context = ExtractionContext(max_depth=max_depth)
    targets = walk_resource(resource, context=context)
    return ExtractionResult(targets=targets, diagnostics=tuple(context.diagnostics))


def extract_ftl(source: str, *, max_depth: int = MAX_DEPTH) -> ExtractionResult:
    """Parse FTL source and extract its lint targets.

    Syntax errors never raise: the parser turns them into Junk entries,
    which are reported as JUNK_ENTRY diagnostics.

    Args:
        source: FTL source text
        max_depth: Nesting limit for placeables and select expressions

    Returns:
        ExtractionResult with targets and diagnostics

    Example:
        >>> extract_ftl("greeting = Hello, { $name }!").targets[0].value
        'Hello, $name !'
    """
    resource = parse(source)
    logger.debug("Parsed %d entries", len(resource.entries))
    return extract_lint_targets(resource, max_depth=max_depth)
