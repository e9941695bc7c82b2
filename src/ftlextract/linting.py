"""Adapter between lint targets and an external markup linter.

ftlextract ships no markup rules. Callers supply any callable that takes a
newline-terminated string and returns problems carrying a code and a rule
name; lint_targets runs it over every target in document order and pairs
each problem with the target it came from.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from ftlextract.constants import LINT_INPUT_SUFFIX
from ftlextract.diagnostics import ErrorTemplate
from ftlextract.extraction.context import ExtractionContext
from ftlextract.extraction.targets import LintTarget

__all__ = ["LintFinding", "LintProblem", "MarkupLinter", "lint_targets"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintProblem:
    """One problem reported by a markup linter.

    Attributes:
        code: Linter-specific problem code (e.g. "E001")
        rule: Rule name (e.g. "tag-bans")
    """

    code: str
    rule: str


class MarkupLinter(Protocol):
    """Callable markup linter."""

    def __call__(self, text: str) -> Iterable[LintProblem]: ...


@dataclass(frozen=True, slots=True)
class LintFinding:
    """A linter problem attached to the lint target that triggered it."""

    target: LintTarget
    problem: LintProblem

    def format(self) -> str:
        """Report line.

        Example:
            [E001] tag-bans: "welcome = <i>Hi</i>"
        """
        return f'[{self.problem.code}] {self.problem.rule}: "{self.target.label} = {self.target.value}"'


def lint_targets(
    targets: Iterable[LintTarget],
    linter: MarkupLinter,
    *,
    context: ExtractionContext | None = None,
) -> tuple[LintFinding, ...]:
    """Run a markup linter over every target.

    A linter exception for one target is logged (and recorded as a
    LINTER_FAILED diagnostic when a context is given); the remaining targets
    are still linted.

    Args:
        targets: Lint targets, usually from walk_resource()
        linter: Markup linter callable
        context: Optional pass state receiving LINTER_FAILED diagnostics

    Returns:
        Findings in target order, then in the order the linter reported them
    """
    findings: list[LintFinding] = []
    for target in targets:
        try:
            problems = tuple(linter(target.value + LINT_INPUT_SUFFIX))
        except Exception as e:  # pylint: disable=broad-exception-caught
            if context is not None:
                context.report(ErrorTemplate.linter_failed(target.label, str(e)))
            else:
                logger.warning("Linter failed on '%s': %s", target.label, e)
            continue
        findings.extend(LintFinding(target=target, problem=problem) for problem in problems)

    logger.debug("Linter reported %d finding(s)", len(findings))
    return tuple(findings)
