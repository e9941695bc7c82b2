"""Extraction of lint targets from Fluent ASTs.

Data flows leaf-first:

    walk_resource -> extract_entry -> flatten_pattern -> resolve_placeable

with select expressions resolved back into variant branches that become
separately named targets.

Python 3.13+.
"""

from .context import ExtractionContext
from .entries import extract_entry
from .flattened import FlatText, Flattened, FlatVariants, VariantBranch, iter_leaves
from .patterns import flatten_pattern, flatten_value, flatten_variants
from .placeables import resolve_placeable
from .resource import ExtractionResult, extract_ftl, extract_lint_targets, walk_resource
from .targets import LintTarget

__all__ = [
    "ExtractionContext",
    "ExtractionResult",
    "FlatText",
    "FlatVariants",
    "Flattened",
    "LintTarget",
    "VariantBranch",
    "extract_entry",
    "extract_ftl",
    "extract_lint_targets",
    "flatten_pattern",
    "flatten_value",
    "flatten_variants",
    "iter_leaves",
    "resolve_placeable",
    "walk_resource",
]
