"""Lint target record: one flattened string and where it came from.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from ftlextract.enums import TargetKind

__all__ = ["LintTarget"]


@dataclass(frozen=True, slots=True)
class LintTarget:
    """A fully resolved string ready for markup validation.

    Attributes:
        name: Entry name, qualified with [key] for every select variant the
            value was fanned out over (e.g. "emails[one]")
        value: Flattened text; contains no placeable syntax
        attribute: Attribute name when extracted from an attribute
        variant: Variant key (or "/"-joined key path) when extracted from a
            VariantList value
    """

    name: str
    value: str
    attribute: str | None = None
    variant: str | None = None

    @property
    def kind(self) -> TargetKind:
        """Value source the target was extracted from."""
        if self.variant is not None:
            return TargetKind.VARIANT
        if self.attribute is not None:
            return TargetKind.ATTRIBUTE
        return TargetKind.VALUE

    @property
    def label(self) -> str:
        """Display form used in lint reports.

        Example:
            >>> LintTarget(name="-brand", value="masculine", attribute="gender").label
            '-brand[gender]'
        """
        parts = [self.name]
        if self.attribute is not None:
            parts.append(f"[{self.attribute}]")
        if self.variant is not None:
            parts.append(f"[{self.variant}]")
        return "".join(parts)

    def as_dict(self) -> dict[str, str]:
        """Plain mapping omitting absent optional keys."""
        data = {"name": self.name}
        if self.attribute is not None:
            data["attribute"] = self.attribute
        if self.variant is not None:
            data["variant"] = self.variant
        data["value"] = self.value
        return data
