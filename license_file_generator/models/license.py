"""License grouping Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from license_file_generator.constants import UNKNOWN_LICENSE

SUMMARY_MAX_LENGTH = 60


class LicenseGroup(BaseModel):
    """Dependencies that share byte-identical license content."""

    model_config = {"extra": "forbid"}

    content: str = Field(description="License text or placeholder used as group key")
    dependencies: list[str] = Field(
        default_factory=list,
        description="Dependency names in the order they were encountered",
    )

    @property
    def is_unknown(self) -> bool:
        """Check if this group holds dependencies without license information."""
        return self.content == UNKNOWN_LICENSE

    @property
    def summary(self) -> str:
        """Get a one-line label for the license.

        Returns:
            The identifier for "(MIT)"-style content, otherwise the first
            non-blank line of the license text, shortened to fit a table cell.
        """
        stripped = self.content.strip()
        if stripped.startswith("(") and stripped.endswith(")") and "\n" not in stripped:
            return stripped[1:-1]
        for line in stripped.splitlines():
            if line.strip():
                first_line = line.strip()
                if len(first_line) > SUMMARY_MAX_LENGTH:
                    return first_line[: SUMMARY_MAX_LENGTH - 3] + "..."
                return first_line
        return UNKNOWN_LICENSE


class LicenseReport(BaseModel):
    """Grouped licenses plus extra texts to append to generated files."""

    model_config = {"extra": "forbid"}

    groups: list[LicenseGroup] = Field(
        default_factory=list,
        description="License groups in first-seen order",
    )
    appendices: list[str] = Field(
        default_factory=list,
        description="Extra texts appended verbatim after the license groups",
    )

    @property
    def total_dependencies(self) -> int:
        """Count dependencies across all groups."""
        return sum(len(group.dependencies) for group in self.groups)

    @property
    def unknown_dependencies(self) -> list[str]:
        """Get names of dependencies with no license information."""
        return [
            name for group in self.groups if group.is_unknown for name in group.dependencies
        ]

    @property
    def has_unknown_licenses(self) -> bool:
        """Check if any dependency has no license information.

        Returns:
            True if at least one dependency resolved to the unknown placeholder.
        """
        return len(self.unknown_dependencies) > 0
