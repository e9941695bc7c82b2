"""Shared constants for ftlextract.

Centralized configuration used by the syntax, diagnostics and extraction
packages. Placing constants here avoids circular imports.

Constants are grouped by domain:
- Depth limits: Recursion protection for the flattening walk
- Placeholder tokens: Text substituted for expressions that are not text

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Placeholder tokens
    "PLACEHOLDER_UNKNOWN",
    "TOKEN_VARIABLE",
    "TOKEN_MESSAGE",
    "TOKEN_FUNCTION",
    # Naming
    "TERM_PREFIX",
    "VARIANT_PATH_SEPARATOR",
    "LINT_INPUT_SUFFIX",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of placeables, select expressions and variant lists.
# Parser-produced ASTs stay far below this; deeper trees are programmatic or
# adversarial and degrade to PLACEHOLDER_UNKNOWN instead of a RecursionError.
MAX_DEPTH: int = 100

# ============================================================================
# PLACEHOLDER TOKENS
# ============================================================================

# Substituted for empty or malformed text elements, unknown pattern elements and
# expressions nested beyond MAX_DEPTH.
PLACEHOLDER_UNKNOWN: str = "{?}"

# Format strings for expressions rendered inline. References are never
# evaluated; the token only keeps the surrounding markup readable.
# Variable and term references share one token; terms drop their "-" sigil.
TOKEN_VARIABLE: str = "${name} "  # e.g. "$count ", "$brand "
TOKEN_MESSAGE: str = " ${name} "  # e.g. " $menu-save "
TOKEN_FUNCTION: str = " {name}(...) "  # e.g. " NUMBER(...) "

# ============================================================================
# NAMING
# ============================================================================

# Terms are stored without their sigil; lint targets are named "-<id>".
TERM_PREFIX: str = "-"

# Joins keys of VariantList values nested inside VariantList variants.
VARIANT_PATH_SEPARATOR: str = "/"

# Markup linters expect newline-terminated input.
LINT_INPUT_SUFFIX: str = "\n"
