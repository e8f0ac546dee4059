"""Tests for the JSON license report formatter."""
import json

from license_file_generator import __version__
from license_file_generator.constants import LEGAL_DISCLAIMER, UNKNOWN_LICENSE
from license_file_generator.models.license import LicenseGroup, LicenseReport
from license_file_generator.output.report_json import LicenseJsonFormatter


class TestLicenseJsonFormatter:
    """Tests for LicenseJsonFormatter class."""

    def test_output_is_valid_json(self) -> None:
        """Test that output parses as JSON with the expected sections."""
        data = json.loads(LicenseJsonFormatter().format_report(LicenseReport()))

        assert set(data) == {"metadata", "summary", "groups", "appendices"}

    def test_metadata(self) -> None:
        """Test tool metadata."""
        data = json.loads(LicenseJsonFormatter().format_report(LicenseReport()))

        assert data["metadata"]["tool_version"] == __version__
        assert data["metadata"]["disclaimer"] == LEGAL_DISCLAIMER
        assert data["metadata"]["generated_at"].endswith("Z")

    def test_groups_and_summary(self) -> None:
        """Test group serialization and summary counts."""
        report = LicenseReport(
            groups=[
                LicenseGroup(content="(MIT)", dependencies=["a", "b"]),
                LicenseGroup(content=UNKNOWN_LICENSE, dependencies=["c"]),
            ],
            appendices=["Extra"],
        )

        data = json.loads(LicenseJsonFormatter().format_report(report))

        assert data["groups"][0] == {
            "license": "MIT",
            "content": "(MIT)",
            "dependencies": ["a", "b"],
        }
        assert data["summary"] == {
            "total_dependencies": 3,
            "distinct_licenses": 2,
            "unknown_dependencies": ["c"],
            "has_unknown_licenses": True,
        }
        assert data["appendices"] == ["Extra"]
