"""Pydantic data models for license-file-generator."""

from license_file_generator.models.config import GeneratorConfig
from license_file_generator.models.dependency import (
    DependencyRecord,
    ProjectOptions,
    ProjectSnapshot,
)
from license_file_generator.models.license import LicenseGroup, LicenseReport

__all__ = [
    "DependencyRecord",
    "GeneratorConfig",
    "LicenseGroup",
    "LicenseReport",
    "ProjectOptions",
    "ProjectSnapshot",
]
