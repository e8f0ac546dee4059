"""Plain text third-party licenses file formatter."""

from license_file_generator.constants import GROUP_SEPARATOR
from license_file_generator.models.license import LicenseGroup, LicenseReport

GENERATED_NOTICE = "This file was generated with license-file-generator."


class LicenseTextFormatter:
    """Format license groups as a third-party licenses text file.

    Each group lists its packages followed by the shared license text,
    so identical licenses are only included once.
    """

    def format_report(self, report: LicenseReport) -> str:
        """Format a license report as the text file content.

        Args:
            report: The grouped licenses to format.

        Returns:
            File content, ending with a newline.
        """
        lines: list[str] = [GENERATED_NOTICE, ""]

        for group in report.groups:
            lines.extend(self._format_group(group))

        for appendix in report.appendices:
            lines.append(appendix.rstrip())
            lines.append("")
            lines.append(GROUP_SEPARATOR)
            lines.append("")

        lines.append(GENERATED_NOTICE)
        return "\n".join(lines) + "\n"

    def _format_group(self, group: LicenseGroup) -> list[str]:
        if len(group.dependencies) == 1:
            intro = "The following Python package may be included in this product:"
            outro = "This package contains the following license and notice below:"
        else:
            intro = "The following Python packages may be included in this product:"
            outro = (
                "These packages each contain the following license and notice below:"
            )

        lines = [intro, ""]
        lines.extend(f" - {name}" for name in group.dependencies)
        lines.extend(["", outro, "", group.content.rstrip(), "", GROUP_SEPARATOR, ""])
        return lines
