"""Diagnostic system for ftlextract.

Provides structured diagnostics with codes, severities and hints for every
place where extraction degrades instead of failing.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DepthLimitExceededError, ExtractionError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExtractionError",
    "OutputFormat",
]
