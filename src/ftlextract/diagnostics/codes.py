"""Diagnostic codes and data structures.

Defines the codes and the diagnostic record emitted when extraction meets a
node it cannot render as text.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Unrecognized node kinds (degrade to empty output)
        2000-2999: Malformed nodes (degrade to a placeholder)
        3000-3999: Structural limits and lossy flattening
        4000-4999: External linter failures
    """

    # Unrecognized node kinds (1000-1999)
    UNKNOWN_ENTRY = 1001
    UNKNOWN_VALUE = 1002
    UNKNOWN_ELEMENT = 1003
    UNKNOWN_EXPRESSION = 1004
    UNKNOWN_VARIANT_KEY = 1005

    # Malformed nodes (2000-2999)
    MALFORMED_ELEMENT = 2001
    MALFORMED_PATTERN = 2002
    JUNK_ENTRY = 2003

    # Structural limits (3000-3999)
    MAX_DEPTH_EXCEEDED = 3001
    SELECTOR_COLLAPSED = 3002

    # Linter (4000-4999)
    LINTER_FAILED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable description
        node_kind: Class name (or declared kind) of the offending node
        entry_name: Lint target name of the entry being extracted, if known
        hint: Suggestion for fixing the input
        severity: "error" for lost content, "warning" for lossy but usable output
    """

    code: DiagnosticCode
    message: str
    node_kind: str | None = None
    entry_name: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[UNKNOWN_EXPRESSION]: Unknown expression type: MathExpression
              --> entry: price
              = help: Upgrade ftlextract or drop the unsupported syntax

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
