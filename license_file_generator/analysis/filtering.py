"""Package filtering for the exclude configuration."""

from __future__ import annotations

from typing import NamedTuple

from license_file_generator.models.config import GeneratorConfig
from license_file_generator.models.dependency import ProjectSnapshot


class FilterResult(NamedTuple):
    """Result of filtering a snapshot.

    Attributes:
        snapshot: Snapshot after filtering, original order preserved.
        excluded_names: Names of dependencies that were excluded.
    """

    snapshot: ProjectSnapshot
    excluded_names: list[str]


def filter_excluded_packages(
    snapshot: ProjectSnapshot,
    config: GeneratorConfig,
) -> FilterResult:
    """Drop excluded packages from a snapshot.

    Package name matching is case-sensitive. Use the exact package name as
    shown by pip list.

    Args:
        snapshot: Dependency snapshot to filter.
        config: Configuration with exclude list.

    Returns:
        FilterResult with the remaining dependencies. If exclude is None or
        empty, the snapshot is returned as-is.
    """
    if not config.exclude:
        return FilterResult(snapshot=snapshot, excluded_names=[])

    excluded = set(config.exclude)
    filtered: ProjectSnapshot = {}
    excluded_names: list[str] = []

    for name, record in snapshot.items():
        if name in excluded:
            excluded_names.append(name)
        else:
            filtered[name] = record

    return FilterResult(snapshot=filtered, excluded_names=excluded_names)
