"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unknown_entry("Section")))
        UNKNOWN_ENTRY: Unknown entry type: Section
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[SELECTOR_COLLAPSED]: Multiple selectors in one pattern
              --> entry: emails
              = kind: SelectExpression
              = help: Split the message so each pattern has one selector
        """
        severity = diagnostic.severity
        if self.color:
            color_code = "1;31" if severity == "error" else "1;33"
            severity_str = f"\033[{color_code}m{severity}\033[0m"
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {_escape(diagnostic.message)}"]

        if diagnostic.entry_name:
            parts.append(f"  --> entry: {_escape(diagnostic.entry_name)}")

        if diagnostic.node_kind:
            parts.append(f"  = kind: {_escape(diagnostic.node_kind)}")

        if diagnostic.hint:
            parts.append(f"  = help: {_escape(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Single-line format: CODE: message."""
        return f"{diagnostic.code.name}: {_escape(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """JSON object, one per diagnostic."""
        data = {
            "code": diagnostic.code.name,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
            "node_kind": diagnostic.node_kind,
            "entry_name": diagnostic.entry_name,
            "hint": diagnostic.hint,
        }
        return json.dumps(data, ensure_ascii=False)


def _escape(text: str) -> str:
    """Escape control characters so one diagnostic stays one log record."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
