"""ftlextract exception hierarchy with structured diagnostics.

Extraction itself degrades instead of raising; these types exist for the
few internal control-flow signals (depth limit) and for callers that want to
escalate diagnostics into exceptions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ExtractionError(Exception):
    """Base exception for all ftlextract errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ExtractionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DepthLimitExceededError(ExtractionError):
    """Raised when maximum expression depth is exceeded.

    Always caught inside the extraction walk, which substitutes a placeholder.
    """
