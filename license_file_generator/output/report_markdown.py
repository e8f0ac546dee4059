"""Markdown formatter for grouped license reports."""

from datetime import datetime, timezone

from license_file_generator.constants import LEGAL_DISCLAIMER
from license_file_generator.models.license import LicenseGroup, LicenseReport


class LicenseMarkdownFormatter:
    """Format grouped licenses as Markdown.

    Suitable for checking into a repository or attaching to release notes.
    """

    def format_report(self, report: LicenseReport) -> str:
        """Format a license report as a Markdown string.

        Args:
            report: The grouped licenses to format.

        Returns:
            Markdown string representation of the report.
        """
        lines: list[str] = []

        lines.append("# Third-Party Licenses")
        lines.append("")

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")

        lines.append(f"> {LEGAL_DISCLAIMER}")
        lines.append("")

        if not report.groups:
            lines.append("*No dependencies found.*")
            lines.append("")
            lines.extend(self._format_appendices(report))
            return "\n".join(lines)

        lines.extend(self._format_summary(report))
        lines.append("")

        for index, group in enumerate(report.groups, start=1):
            lines.extend(self._format_group(index, group))
            lines.append("")

        lines.extend(self._format_appendices(report))
        return "\n".join(lines)

    def _format_summary(self, report: LicenseReport) -> list[str]:
        lines = [
            "## Summary",
            "",
            f"- **Dependencies:** {report.total_dependencies}",
            f"- **Distinct licenses:** {len(report.groups)}",
        ]
        unknown = report.unknown_dependencies
        if unknown:
            lines.append(
                f"- **Without license information:** {len(unknown)} "
                f"({', '.join(unknown)})"
            )
        return lines

    def _format_group(self, index: int, group: LicenseGroup) -> list[str]:
        """Format one license group as a section.

        The license text is fenced so that Markdown in license files is
        shown literally.
        """
        fence = "````" if "```" in group.content else "```"
        lines = [f"## {index}. {group.summary}", ""]
        lines.extend(f"- `{name}`" for name in group.dependencies)
        lines.extend(["", fence + "text", group.content.rstrip(), fence])
        return lines

    def _format_appendices(self, report: LicenseReport) -> list[str]:
        lines: list[str] = []
        for appendix in report.appendices:
            lines.append("---")
            lines.append("")
            lines.append(appendix.rstrip())
            lines.append("")
        return lines
