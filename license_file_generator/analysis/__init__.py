"""Snapshot adjustments driven by configuration."""

from license_file_generator.analysis.filtering import (
    FilterResult,
    filter_excluded_packages,
)
from license_file_generator.analysis.overrides import apply_license_replacements

__all__ = [
    "FilterResult",
    "apply_license_replacements",
    "filter_excluded_packages",
]
