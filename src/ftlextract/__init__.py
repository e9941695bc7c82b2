"""ftlextract - flatten Fluent (FTL) resources into strings for markup linting.

Walks a parsed Fluent resource and renders every message, term, attribute and
select variant as a plain, named string. References and function calls become
readable placeholder tokens, so an HTML/markup linter can check translations
without knowing anything about Fluent.

Public API:
    walk_resource - Lint targets for every entry of a Resource
    extract_lint_targets - Same, plus the diagnostics recorded on the way
    extract_ftl - Parse FTL source, then extract_lint_targets
    extract_entry - Lint targets for one Message or Term
    flatten_pattern - Pattern -> FlatText | FlatVariants
    resolve_placeable - Expression -> FlatText | FlatVariants
    lint_targets - Run an external markup linter over lint targets
    LintTarget - {name, attribute?, variant?, value} output record

Exceptions:
    ExtractionError - Base exception class
    DepthLimitExceededError - Nesting limit reached (handled internally)

Submodules:
    ftlextract.syntax.ast - AST node types (Resource, Message, Term, Pattern, etc.)
    ftlextract.extraction - Resolver, flattener, extractor and walker
    ftlextract.diagnostics - Diagnostic codes, templates and formatting
    ftlextract.linting - Markup linter adapter
"""

from .diagnostics import DepthLimitExceededError, Diagnostic, DiagnosticCode, ExtractionError
from .extraction import (
    ExtractionContext,
    ExtractionResult,
    FlatText,
    Flattened,
    FlatVariants,
    LintTarget,
    VariantBranch,
    extract_entry,
    extract_ftl,
    extract_lint_targets,
    flatten_pattern,
    resolve_placeable,
    walk_resource,
)
from .linting import LintFinding, LintProblem, MarkupLinter, lint_targets

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("ftlextract")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ExtractionContext",
    "ExtractionError",
    "ExtractionResult",
    "FlatText",
    "FlatVariants",
    "Flattened",
    "LintFinding",
    "LintProblem",
    "LintTarget",
    "MarkupLinter",
    "VariantBranch",
    "__version__",
    "extract_entry",
    "extract_ftl",
    "extract_lint_targets",
    "flatten_pattern",
    "lint_targets",
    "resolve_placeable",
    "walk_resource",
]
