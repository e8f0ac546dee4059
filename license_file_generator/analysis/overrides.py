"""License file replacements for manual license corrections."""
from __future__ import annotations

from pathlib import Path

from license_file_generator.models.config import GeneratorConfig
from license_file_generator.models.dependency import ProjectSnapshot


def apply_license_replacements(
    snapshot: ProjectSnapshot,
    config: GeneratorConfig,
    base_dir: Path,
) -> ProjectSnapshot:
    """Point dependencies at a replacement license file.

    Package name matching is case-sensitive. A replacement file that does
    not exist behaves like any other missing license file: the dependency's
    license identifiers are used instead.

    Args:
        snapshot: Dependency snapshot.
        config: Configuration with replace mapping.
        base_dir: Directory relative replacement paths are resolved against.

    Returns:
        New snapshot with replacements applied, original order preserved.
        If replace is None or empty, the snapshot is returned unchanged.
    """
    if not config.replace:
        return snapshot

    result: ProjectSnapshot = {}
    for name, record in snapshot.items():
        if name in config.replace:
            license_file = base_dir / config.replace[name]
            result[name] = record.model_copy(
                update={"license_file": str(license_file)}
            )
        else:
            result[name] = record
    return result
