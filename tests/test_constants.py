"""Tests for constants module."""

from license_file_generator.constants import (
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    LINE_ENDINGS,
    UNKNOWN_LICENSE,
)


class TestExitCodes:
    """Tests for exit code constants."""

    def test_exit_codes_are_distinct(self) -> None:
        """Test that exit codes do not collide."""
        assert len({EXIT_SUCCESS, EXIT_ISSUES, EXIT_ERROR}) == 3

    def test_exit_success_is_zero(self) -> None:
        """Test that success exits with 0."""
        assert EXIT_SUCCESS == 0


def test_unknown_license_placeholder() -> None:
    """Test the placeholder text for dependencies without license data."""
    assert UNKNOWN_LICENSE == "Unknown license!"


def test_line_endings() -> None:
    """Test the supported line endings."""
    assert LINE_ENDINGS == {"lf": "\n", "crlf": "\r\n"}
