"""JSON formatter for grouped license reports."""
import json
from datetime import datetime, timezone
from typing import Any

from license_file_generator import __version__
from license_file_generator.constants import LEGAL_DISCLAIMER
from license_file_generator.models.license import LicenseReport


class LicenseJsonFormatter:
    """Format grouped licenses as JSON for programmatic processing."""

    def format_report(self, report: LicenseReport) -> str:
        """Format a license report as a JSON string.

        Args:
            report: The grouped licenses to format.

        Returns:
            JSON string representation of the report.
        """
        return json.dumps(self._build_output(report), indent=2)

    def _build_output(self, report: LicenseReport) -> dict[str, Any]:
        return {
            "metadata": self._build_metadata(),
            "summary": self._build_summary(report),
            "groups": [
                {
                    "license": group.summary,
                    "content": group.content,
                    "dependencies": group.dependencies,
                }
                for group in report.groups
            ],
            "appendices": report.appendices,
        }

    def _build_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "disclaimer": LEGAL_DISCLAIMER,
        }

    def _build_summary(self, report: LicenseReport) -> dict[str, Any]:
        return {
            "total_dependencies": report.total_dependencies,
            "distinct_licenses": len(report.groups),
            "unknown_dependencies": report.unknown_dependencies,
            "has_unknown_licenses": report.has_unknown_licenses,
        }
