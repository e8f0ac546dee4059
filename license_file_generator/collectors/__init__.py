"""Dependency metadata collectors package."""

from license_file_generator.collectors.base import BaseCollector
from license_file_generator.collectors.dependency import DependencyResolver
from license_file_generator.collectors.environment import (
    EnvironmentCollector,
    get_project,
)

__all__ = [
    "BaseCollector",
    "DependencyResolver",
    "EnvironmentCollector",
    "get_project",
]
