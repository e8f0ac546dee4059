"""License resolution and grouping for a project's dependencies."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, Optional, Union

from license_file_generator.analysis.filtering import filter_excluded_packages
from license_file_generator.analysis.overrides import apply_license_replacements
from license_file_generator.collectors.environment import get_project
from license_file_generator.constants import UNKNOWN_LICENSE
from license_file_generator.exceptions import (
    ConfigurationError,
    DirectoryNotFoundError,
)
from license_file_generator.models.config import GeneratorConfig
from license_file_generator.models.dependency import DependencyRecord, ProjectOptions
from license_file_generator.models.license import LicenseGroup
from license_file_generator.utils import console
from license_file_generator.utils.files import (
    does_file_exist,
    does_folder_exist,
    read_file_async,
)


async def get_project_licenses(
    project_path: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
) -> list[LicenseGroup]:
    """Group a project's production dependencies by license content.

    Args:
        project_path: Project directory to scan.
        config: Optional configuration for excluded packages and license
            file replacements.

    Returns:
        License groups in the order their content was first encountered.

    Raises:
        DirectoryNotFoundError: If project_path is not an existing directory.
        The exception is the only failure signal; it carries no details
        beyond the path.
    """
    if not await does_folder_exist(project_path):
        console.error(f"Cannot find directory {project_path}")
        raise DirectoryNotFoundError(str(project_path))

    options = ProjectOptions(
        start=Path(project_path),
        production=True,
        pypi_fallback=bool(config and config.pypi_fallback),
    )
    project = await get_project(options)

    if config is not None:
        project = filter_excluded_packages(project, config).snapshot
        project = apply_license_replacements(project, config, Path(project_path))

    contents = await asyncio.gather(
        *(resolve_license_content(name, record) for name, record in project.items())
    )
    return group_by_content(project.keys(), contents)


async def resolve_license_content(name: str, record: DependencyRecord) -> str:
    """Resolve the license content for one dependency.

    Resolution order:
    1. Full text of the license file, if it exists
    2. First license identifier, in parentheses
    3. The unknown-license placeholder, with a warning

    Args:
        name: Dependency name used in log messages.
        record: The dependency's license metadata.

    Returns:
        License content used to group the dependency.
    """
    if record.license_file and await does_file_exist(record.license_file):
        try:
            return await read_file_async(record.license_file)
        except OSError:
            console.warn(f"Cannot read license file {record.license_file} for {name}")

    license_type = record.first_license
    if license_type is not None:
        return f"({license_type})"

    console.warn(f"No license found for {name}!")
    return UNKNOWN_LICENSE


async def read_appendices(paths: Iterable[str], base_dir: Path) -> list[str]:
    """Read the files to append after the license groups.

    Args:
        paths: File paths, relative paths resolved against base_dir.
        base_dir: Project directory.

    Returns:
        File contents in the given order.

    Raises:
        ConfigurationError: If a file does not exist or cannot be read.
    """

    async def read_one(path: str) -> str:
        full_path = base_dir / path
        if not await does_file_exist(full_path):
            raise ConfigurationError(f"Cannot find file to append '{full_path}'")
        try:
            return await read_file_async(full_path)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read file to append '{full_path}': {e}"
            ) from e

    return list(await asyncio.gather(*(read_one(path) for path in paths)))


def group_by_content(names: Iterable[str], contents: Iterable[str]) -> list[LicenseGroup]:
    """Group dependency names by exact content.

    Args:
        names: Dependency names in encounter order.
        contents: Resolved content for each name, same order.

    Returns:
        One group per distinct content, in first-seen order.
    """
    groups: dict[str, list[str]] = {}
    for name, content in zip(names, contents):
        groups.setdefault(content, []).append(name)
    return [
        LicenseGroup(content=content, dependencies=dependencies)
        for content, dependencies in groups.items()
    ]
