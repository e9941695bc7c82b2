"""Per-pass extraction state.

An ExtractionContext belongs to exactly one extraction pass. It carries the
depth guard, the name of the entry being walked, and the diagnostics recorded
so far. Nothing here is shared between passes, so independent resources can
be extracted concurrently with one context each.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ftlextract.constants import MAX_DEPTH, TERM_PREFIX
from ftlextract.core.depth_guard import DepthGuard
from ftlextract.diagnostics import Diagnostic
from ftlextract.syntax.ast import Unsupported

__all__ = ["ExtractionContext", "node_kind", "term_target_name"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtractionContext:
    """Mutable state for one extraction pass.

    Attributes:
        max_depth: Nesting limit for placeables and select expressions
        diagnostics: Diagnostics recorded in document order
        entry_name: Lint target name of the entry currently being extracted
    """

    max_depth: int = MAX_DEPTH
    diagnostics: list[Diagnostic] = field(default_factory=list)
    entry_name: str | None = None
    depth_guard: DepthGuard = field(init=False)

    def __post_init__(self) -> None:
        """Create the depth guard for this pass."""
        self.depth_guard = DepthGuard(max_depth=self.max_depth)

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic and write it to the log once.

        Lost content (severity "error") logs at WARNING, lossy but usable
        output at INFO.
        """
        self.diagnostics.append(diagnostic)
        level = logging.WARNING if diagnostic.severity == "error" else logging.INFO
        if diagnostic.entry_name:
            logger.log(level, "%s (in %s)", diagnostic.message, diagnostic.entry_name)
        else:
            logger.log(level, "%s", diagnostic.message)

    @contextmanager
    def entry(self, name: str) -> Iterator[ExtractionContext]:
        """Scope diagnostics to the named entry."""
        previous = self.entry_name
        self.entry_name = name
        try:
            yield self
        finally:
            self.entry_name = previous


def node_kind(node: object) -> str:
    """Kind name reported in diagnostics for an unrecognized node."""
    if Unsupported.guard(node):
        return node.kind
    return type(node).__name__


def term_target_name(name: str) -> str:
    """Render a term identifier with its sigil: "brand" -> "-brand"."""
    return TERM_PREFIX + name.removeprefix(TERM_PREFIX)
