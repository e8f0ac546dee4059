"""Fixtures building installed distributions on disk."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

DistFactory = Callable[..., Path]


def write_distribution(
    site_packages: Path,
    name: str,
    version: str = "1.0.0",
    headers: Optional[list[str]] = None,
    requires: Optional[list[str]] = None,
    files: Optional[dict[str, str]] = None,
) -> Path:
    """Write a minimal .dist-info distribution into site_packages.

    Args:
        site_packages: Directory to install into.
        name: Distribution name.
        version: Distribution version.
        headers: Extra METADATA lines, e.g. "License: MIT".
        requires: Requires-Dist entries.
        files: Files relative to site_packages, listed in RECORD.
            Paths may use {dist_info} for the metadata directory.

    Returns:
        The .dist-info directory.
    """
    dist_info_name = f"{name.replace('-', '_')}-{version}.dist-info"
    dist_info = site_packages / dist_info_name
    dist_info.mkdir(parents=True)

    metadata = ["Metadata-Version: 2.1", f"Name: {name}", f"Version: {version}"]
    metadata.extend(headers or [])
    metadata.extend(f"Requires-Dist: {req}" for req in requires or [])
    (dist_info / "METADATA").write_text("\n".join(metadata) + "\n\n")

    record = [f"{dist_info_name}/METADATA,,"]
    for relative, content in (files or {}).items():
        relative = relative.format(dist_info=dist_info_name)
        target = site_packages / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        record.append(f"{relative},,")
    record.append(f"{dist_info_name}/RECORD,,")
    (dist_info / "RECORD").write_text("\n".join(record) + "\n")
    return dist_info


@pytest.fixture
def site_packages(tmp_path: Path) -> Path:
    """Provide an empty site-packages directory."""
    path = tmp_path / "site-packages"
    path.mkdir()
    return path


@pytest.fixture
def make_dist(site_packages: Path) -> DistFactory:
    """Provide a factory installing distributions into site_packages."""

    def factory(name: str, **kwargs: object) -> Path:
        return write_distribution(site_packages, name, **kwargs)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def install_dist() -> DistFactory:
    """Provide write_distribution for any site-packages directory."""
    return write_distribution
