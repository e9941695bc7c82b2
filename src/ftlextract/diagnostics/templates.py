"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every degradation path in one place.
    """

    _UPGRADE_HINT = "Upgrade the parser and ftlextract together, or drop the unsupported syntax"

    @staticmethod
    def unknown_entry(kind: str) -> Diagnostic:
        """Top-level entry that is neither a message, term, comment nor junk.

        Args:
            kind: Node kind name

        Returns:
            Diagnostic for UNKNOWN_ENTRY
        """
        msg = f"Unknown entry type: {kind}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ENTRY,
            message=msg,
            node_kind=kind,
            hint=ErrorTemplate._UPGRADE_HINT,
        )

    @staticmethod
    def unknown_value(kind: str, entry_name: str | None) -> Diagnostic:
        """Entry, attribute or variant value that is neither Pattern nor VariantList.

        Args:
            kind: Node kind name
            entry_name: Entry being extracted

        Returns:
            Diagnostic for UNKNOWN_VALUE
        """
        msg = f"Unknown value type: {kind}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_VALUE,
            message=msg,
            node_kind=kind,
            entry_name=entry_name,
            hint=ErrorTemplate._UPGRADE_HINT,
        )

    @staticmethod
    def unknown_element(kind: str, entry_name: str | None) -> Diagnostic:
        """Pattern element that is neither text nor a placeable.

        Args:
            kind: Node kind name
            entry_name: Entry being extracted

        Returns:
            Diagnostic for UNKNOWN_ELEMENT
        """
        msg = f"Unknown value element type: {kind}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ELEMENT,
            message=msg,
            node_kind=kind,
            entry_name=entry_name,
            hint=ErrorTemplate._UPGRADE_HINT,
        )

    @staticmethod
    def unknown_expression(kind: str, entry_name: str | None) -> Diagnostic:
        """Placeable expression of an unrecognized kind.

        Args:
            kind: Node kind name
            entry_name: Entry being extracted

        Returns:
            Diagnostic for UNKNOWN_EXPRESSION
        """
        msg = f"Unknown element expression type: {kind}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_EXPRESSION,
            message=msg,
            node_kind=kind,
            entry_name=entry_name,
            hint=ErrorTemplate._UPGRADE_HINT,
        )

    @staticmethod
    def unknown_variant_key(kind: str, entry_name: str | None) -> Diagnostic:
        """Variant key that is neither an identifier nor a number literal.

        Args:
            kind: Node kind name
            entry_name: Entry being extracted

        Returns:
            Diagnostic for UNKNOWN_VARIANT_KEY
        """
        msg = f"Unknown variant key type: {kind}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_VARIANT_KEY,
            message=msg,
            node_kind=kind,
            entry_name=entry_name,
            hint="Variant keys must be identifiers or number literals",
        )

    @staticmethod
    def malformed_element(kind: str, entry_name: str | None) -> Diagnostic:
        """Text element without literal text content.

        Args:
            kind: Type name of the value found instead of a string
            entry_name: Entry being extracted

        Returns:
            Diagnostic for MALFORMED_ELEMENT
        """
        msg = f"Text element has no literal content (found {kind})"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_ELEMENT,
            message=msg,
            node_kind="TextElement",
            entry_name=entry_name,
            hint="Rendered as {?}; check the parser output for this entry",
        )

    @staticmethod
    def malformed_pattern(kind: str, entry_name: str | None) -> Diagnostic:
        """Pattern whose element sequence is missing or not iterable.

        Args:
            kind: Type name of the elements field
            entry_name: Entry being extracted

        Returns:
            Diagnostic for MALFORMED_PATTERN
        """
        msg = f"Pattern elements are not a sequence (found {kind})"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_PATTERN,
            message=msg,
            node_kind="Pattern",
            entry_name=entry_name,
            hint="Rendered as {?}; check the parser output for this entry",
        )

    @staticmethod
    def junk_entry(content: str) -> Diagnostic:
        """Parser error-recovery entry skipped during extraction.

        Args:
            content: Unparsed source text

        Returns:
            Diagnostic for JUNK_ENTRY
        """
        preview = content if len(content) <= 40 else content[:37] + "..."
        msg = f"Skipped unparseable content: {preview!r}"
        return Diagnostic(
            code=DiagnosticCode.JUNK_ENTRY,
            message=msg,
            node_kind="Junk",
            hint="Fix the syntax error so the entry can be linted",
            severity="warning",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int, entry_name: str | None) -> Diagnostic:
        """Nesting deeper than the configured limit.

        Args:
            max_depth: Configured limit
            entry_name: Entry being extracted

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum expression nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            entry_name=entry_name,
            hint="Nested content was rendered as {?}",
        )

    @staticmethod
    def selector_collapsed(kept_keys: int, entry_name: str | None) -> Diagnostic:
        """Second select expression in one pattern; the first collapsed to its default.

        Args:
            kept_keys: Branch count of the selector that now drives the fan-out
            entry_name: Entry being extracted

        Returns:
            Diagnostic for SELECTOR_COLLAPSED
        """
        msg = (
            "Multiple selectors in one pattern; earlier selector reduced to its default "
            f"variant, last selector kept with {kept_keys} variant(s)"
        )
        return Diagnostic(
            code=DiagnosticCode.SELECTOR_COLLAPSED,
            message=msg,
            node_kind="SelectExpression",
            entry_name=entry_name,
            hint="Split the pattern so each one contains a single selector",
            severity="warning",
        )

    @staticmethod
    def linter_failed(label: str, error_msg: str) -> Diagnostic:
        """External markup linter raised while checking one target.

        Args:
            label: Lint target label
            error_msg: Exception text

        Returns:
            Diagnostic for LINTER_FAILED
        """
        msg = f"Linter failed on '{label}': {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.LINTER_FAILED,
            message=msg,
            entry_name=label,
        )
