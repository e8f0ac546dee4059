"""Output formatters for license-file-generator."""

from license_file_generator.output.eol import apply_line_ending
from license_file_generator.output.report_json import LicenseJsonFormatter
from license_file_generator.output.report_markdown import LicenseMarkdownFormatter
from license_file_generator.output.report_text import LicenseTextFormatter
from license_file_generator.output.terminal import TerminalFormatter

__all__ = [
    "LicenseJsonFormatter",
    "LicenseMarkdownFormatter",
    "LicenseTextFormatter",
    "TerminalFormatter",
    "apply_line_ending",
]
