"""Tests for exclude filtering."""

from license_file_generator.analysis.filtering import filter_excluded_packages
from license_file_generator.models.config import GeneratorConfig
from license_file_generator.models.dependency import DependencyRecord


def make_snapshot(*names: str) -> dict[str, DependencyRecord]:
    """Build a snapshot of bare records."""
    return {name: DependencyRecord(name=name) for name in names}


class TestFilterExcludedPackages:
    """Tests for filter_excluded_packages function."""

    def test_no_exclude_returns_snapshot(self) -> None:
        """Test that a config without exclude changes nothing."""
        snapshot = make_snapshot("a", "b")

        result = filter_excluded_packages(snapshot, GeneratorConfig())

        assert result.snapshot is snapshot
        assert result.excluded_names == []

    def test_empty_exclude_returns_snapshot(self) -> None:
        """Test that an empty exclude list changes nothing."""
        snapshot = make_snapshot("a")

        result = filter_excluded_packages(snapshot, GeneratorConfig(exclude=[]))

        assert result.snapshot is snapshot

    def test_excludes_named_packages(self) -> None:
        """Test that excluded packages are removed, order kept."""
        snapshot = make_snapshot("c", "a", "b")

        result = filter_excluded_packages(snapshot, GeneratorConfig(exclude=["a"]))

        assert list(result.snapshot) == ["c", "b"]
        assert result.excluded_names == ["a"]

    def test_matching_is_case_sensitive(self) -> None:
        """Test that names must match exactly."""
        snapshot = make_snapshot("Requests")

        result = filter_excluded_packages(
            snapshot, GeneratorConfig(exclude=["requests"])
        )

        assert list(result.snapshot) == ["Requests"]

    def test_unknown_names_are_ignored(self) -> None:
        """Test that excluding a missing package is harmless."""
        snapshot = make_snapshot("a")

        result = filter_excluded_packages(snapshot, GeneratorConfig(exclude=["zzz"]))

        assert list(result.snapshot) == ["a"]
        assert result.excluded_names == []
