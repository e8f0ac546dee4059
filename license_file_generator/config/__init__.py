"""Configuration handling for license-file-generator."""
from __future__ import annotations

from license_file_generator.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    get_default_config,
)
from license_file_generator.config.loader import (
    load_config,
    load_config_file,
)
from license_file_generator.models.config import GeneratorConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "GeneratorConfig",
    "get_default_config",
    "load_config",
    "load_config_file",
]
