"""Default configuration values for license-file-generator."""

from __future__ import annotations

from license_file_generator.models.config import GeneratorConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-file.yaml", ".license-file.yml"]


def get_default_config() -> GeneratorConfig:
    """Get the default configuration.

    Returns:
        GeneratorConfig with all defaults (all fields None).
    """
    return GeneratorConfig()
