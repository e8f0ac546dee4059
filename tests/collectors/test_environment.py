"""Tests for environment-based dependency collection."""
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from license_file_generator.collectors.environment import (
    EnvironmentCollector,
    build_snapshot,
    find_site_packages,
    get_project,
)
from license_file_generator.models.dependency import DependencyRecord, ProjectOptions

PYPROJECT = """
[project]
name = "my-app"
dependencies = ["Requests>=2", "plugin"]

[project.optional-dependencies]
test = ["pytest"]
"""


def make_venv(project: Path, name: str = ".venv") -> Path:
    """Create a virtualenv skeleton and return its site-packages."""
    venv = project / name
    site_packages = venv / "lib" / "python3.12" / "site-packages"
    site_packages.mkdir(parents=True)
    (venv / "pyvenv.cfg").write_text("home = /usr/bin\n")
    return site_packages


@pytest.fixture
def project(tmp_path: Path, install_dist) -> Path:
    """Provide a project with a populated virtualenv."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text(PYPROJECT)
    site_packages = make_venv(project)

    install_dist(site_packages, "my-app")
    install_dist(
        site_packages,
        "requests",
        "2.31.0",
        headers=["License: Apache-2.0"],
        requires=["idna", "charset-normalizer"],
        files={"{dist_info}/LICENSE": "Apache License\nVersion 2.0\n"},
    )
    install_dist(site_packages, "idna", headers=["License-Expression: BSD-3-Clause"])
    install_dist(site_packages, "charset-normalizer", headers=["License: MIT"])
    install_dist(site_packages, "plugin", requires=["my-app"])
    install_dist(site_packages, "pytest", headers=["License: MIT"])
    return project


class TestFindSitePackages:
    """Tests for find_site_packages function."""

    def test_dot_venv(self, tmp_path: Path) -> None:
        site_packages = make_venv(tmp_path)
        assert find_site_packages(tmp_path) == [str(site_packages)]

    def test_venv(self, tmp_path: Path) -> None:
        site_packages = make_venv(tmp_path, "venv")
        assert find_site_packages(tmp_path) == [str(site_packages)]

    def test_windows_layout(self, tmp_path: Path) -> None:
        site_packages = tmp_path / ".venv" / "Lib" / "site-packages"
        site_packages.mkdir(parents=True)
        (tmp_path / ".venv" / "pyvenv.cfg").write_text("home = C:\\Python312\n")
        assert find_site_packages(tmp_path) == [str(site_packages)]

    def test_directory_without_pyvenv_cfg(self, tmp_path: Path) -> None:
        """Test that a plain .venv directory is not treated as a virtualenv."""
        (tmp_path / ".venv" / "lib" / "python3.12" / "site-packages").mkdir(parents=True)
        assert find_site_packages(tmp_path) is None

    def test_no_venv(self, tmp_path: Path) -> None:
        assert find_site_packages(tmp_path) is None


class TestBuildSnapshot:
    """Tests for build_snapshot function."""

    def test_production_dependencies(self, project: Path) -> None:
        """Test transitive resolution, sorting and exclusion of the project."""
        snapshot = build_snapshot(ProjectOptions(start=project))

        assert list(snapshot) == ["charset-normalizer", "idna", "plugin", "requests"]

    def test_records_carry_license_metadata(self, project: Path) -> None:
        snapshot = build_snapshot(ProjectOptions(start=project))

        requests = snapshot["requests"]
        assert requests.version == "2.31.0"
        assert requests.licenses == ["Apache-2.0"]
        assert requests.license_file is not None
        assert Path(requests.license_file).read_text() == "Apache License\nVersion 2.0\n"
        assert snapshot["idna"].licenses == ["BSD-3-Clause"]
        assert snapshot["plugin"].licenses is None
        assert snapshot["plugin"].license_file is None

    def test_optional_dependencies_when_not_production(self, project: Path) -> None:
        snapshot = build_snapshot(ProjectOptions(start=project, production=False))

        assert "pytest" in snapshot

    def test_no_manifest_uses_every_distribution(self, project: Path) -> None:
        (project / "pyproject.toml").unlink()

        snapshot = build_snapshot(ProjectOptions(start=project))

        assert list(snapshot) == [
            "charset-normalizer",
            "idna",
            "my-app",
            "plugin",
            "pytest",
            "requests",
        ]


class TestEnvironmentCollector:
    """Tests for EnvironmentCollector class."""

    @pytest.mark.asyncio
    async def test_collect_without_pypi(self, tmp_path: Path) -> None:
        snapshot = {"attrs": DependencyRecord(name="attrs")}

        with patch(
            "license_file_generator.collectors.environment.build_snapshot",
            return_value=snapshot,
        ), patch(
            "license_file_generator.collectors.environment.fill_missing_licenses",
            new_callable=AsyncMock,
        ) as mock_fill:
            result = await EnvironmentCollector().collect(ProjectOptions(start=tmp_path))

        assert result is snapshot
        mock_fill.assert_not_called()

    @pytest.mark.asyncio
    async def test_collect_with_pypi(self, tmp_path: Path) -> None:
        snapshot = {"attrs": DependencyRecord(name="attrs")}
        completed = {"attrs": DependencyRecord(name="attrs", licenses=["MIT"])}

        with patch(
            "license_file_generator.collectors.environment.build_snapshot",
            return_value=snapshot,
        ), patch(
            "license_file_generator.collectors.environment.fill_missing_licenses",
            new_callable=AsyncMock,
            return_value=completed,
        ) as mock_fill:
            result = await EnvironmentCollector().collect(
                ProjectOptions(start=tmp_path, pypi_fallback=True)
            )

        assert result is completed
        mock_fill.assert_awaited_once_with(snapshot)

    @pytest.mark.asyncio
    async def test_get_project(self, project: Path) -> None:
        snapshot = await get_project(ProjectOptions(start=project))

        assert list(snapshot) == ["charset-normalizer", "idna", "plugin", "requests"]
