"""Loading the `.license-file.yaml` configuration of a project."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_file_generator.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    get_default_config,
)
from license_file_generator.exceptions import ConfigurationError
from license_file_generator.models.config import GeneratorConfig


def load_config(
    project_dir: Path, config_path: str | Path | None = None
) -> GeneratorConfig:
    """Load the configuration that applies to a project.

    An explicit config_path is always used. Otherwise the first of
    `.license-file.yaml` and `.license-file.yml` found in project_dir is
    loaded; without either, every option keeps its default.

    Args:
        project_dir: Project directory being scanned.
        config_path: Configuration file given on the command line.

    Returns:
        Validated GeneratorConfig.

    Raises:
        ConfigurationError: If the selected file cannot be read, is not
            valid YAML, or fails validation.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    for name in DEFAULT_CONFIG_NAMES:
        candidate = project_dir / name
        if candidate.is_file():
            return load_config_file(candidate)

    return get_default_config()


def load_config_file(path: Path) -> GeneratorConfig:
    """Load and validate one configuration file.

    Empty files and files holding only comments yield the defaults.
    """
    data = _read_yaml_mapping(path)
    if data is None:
        return get_default_config()

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration in '{path}': {problems}") from e


def _read_yaml_mapping(path: Path) -> dict[str, Any] | None:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None or isinstance(data, dict):
        return data
    raise ConfigurationError(
        f"Invalid configuration in '{path}': "
        f"expected a mapping at root level, got {type(data).__name__}"
    )
