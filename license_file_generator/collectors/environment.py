"""Dependency metadata collection from a Python environment."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from license_file_generator.collectors.base import BaseCollector
from license_file_generator.collectors.dependency import DependencyResolver
from license_file_generator.collectors.metadata import record_from_distribution
from license_file_generator.collectors.project import read_project_requirements
from license_file_generator.collectors.pypi import fill_missing_licenses
from license_file_generator.models.dependency import ProjectOptions, ProjectSnapshot

# Virtual environment directories looked for inside the project
VENV_DIRS = (".venv", "venv")


def find_site_packages(start: Path) -> Optional[list[str]]:
    """Find the site-packages directories of a project-local virtualenv.

    Args:
        start: Project directory.

    Returns:
        site-packages directories of the first virtualenv found, or None
        to use the running interpreter's environment.
    """
    for venv_name in VENV_DIRS:
        venv = start / venv_name
        if not (venv / "pyvenv.cfg").is_file():
            continue
        candidates = sorted(venv.glob("lib/python*/site-packages"))
        candidates.append(venv / "Lib" / "site-packages")  # Windows layout
        found = [str(path) for path in candidates if path.is_dir()]
        if found:
            return found
    return None


def build_snapshot(options: ProjectOptions) -> ProjectSnapshot:
    """Collect license metadata for a project's installed dependencies.

    Dependencies are resolved transitively from the project's declared
    requirements. A project that declares none is treated as depending on
    every installed distribution.

    Args:
        options: Project directory and dependency selection options.

    Returns:
        Snapshot sorted by case-insensitive dependency name.
    """
    start = Path(options.start)
    resolver = DependencyResolver(path=find_site_packages(start))
    declared = read_project_requirements(start, production=options.production)

    if declared is None:
        dists = resolver.get_installed_packages()
    else:
        dists = resolver.resolve(declared.requirements, exclude=declared.name)

    records = sorted(
        (record_from_distribution(dist) for dist in dists),
        key=lambda record: record.name.lower(),
    )
    return {record.name: record for record in records}


class EnvironmentCollector(BaseCollector):
    """Collector reading installed distribution metadata."""

    async def collect(self, options: ProjectOptions) -> ProjectSnapshot:
        """Collect license metadata, optionally completed from PyPI.

        Args:
            options: Project directory and dependency selection options.

        Returns:
            Mapping of dependency name to DependencyRecord.

        Raises:
            ConfigurationError: If the project's pyproject.toml is invalid.
        """
        snapshot = await asyncio.to_thread(build_snapshot, options)
        if options.pypi_fallback:
            snapshot = await fill_missing_licenses(snapshot)
        return snapshot


async def get_project(options: ProjectOptions) -> ProjectSnapshot:
    """Collect the dependency snapshot for a project directory."""
    return await EnvironmentCollector().collect(options)
