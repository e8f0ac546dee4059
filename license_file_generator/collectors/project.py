"""Reading the dependencies a project declares.

Supports PEP 621 (`[project]`), Poetry (`[tool.poetry]`), and pip
requirements files, in that order of preference.
"""
from __future__ import annotations

import codecs
import tomllib
from pathlib import Path
from typing import Any, NamedTuple, Optional

from license_file_generator.exceptions import ConfigurationError

PYPROJECT_FILE = "pyproject.toml"
REQUIREMENTS_FILE = "requirements.txt"
DEV_REQUIREMENTS_FILE = "requirements-dev.txt"

# Byte order marks pip recognizes in requirements files
REQUIREMENTS_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


class ProjectRequirements(NamedTuple):
    """Requirements declared by a project.

    Attributes:
        name: The project's own distribution name, if declared.
        requirements: Requirement strings (PEP 508) to resolve from.
    """

    name: Optional[str]
    requirements: list[str]


def read_project_requirements(
    start: Path, production: bool = True
) -> Optional[ProjectRequirements]:
    """Read the requirements declared in a project directory.

    Args:
        start: Project directory.
        production: Only include runtime requirements. When False, optional
            dependencies, dependency groups and dev requirement files are
            included as well.

    Returns:
        ProjectRequirements, or None if the directory declares no
        dependencies in a format we understand.

    Raises:
        ConfigurationError: If pyproject.toml is not valid TOML, or a
            requirements file cannot be read or decoded.
    """
    pyproject_path = start / PYPROJECT_FILE
    if pyproject_path.is_file():
        result = _read_pyproject(pyproject_path, production)
        if result is not None:
            return result

    requirements_path = start / REQUIREMENTS_FILE
    if requirements_path.is_file():
        requirements = read_requirements_file(requirements_path)
        dev_path = start / DEV_REQUIREMENTS_FILE
        if not production and dev_path.is_file():
            requirements.extend(read_requirements_file(dev_path))
        return ProjectRequirements(name=None, requirements=requirements)

    return None


def _read_pyproject(path: Path, production: bool) -> Optional[ProjectRequirements]:
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{path}': {e}") from e

    project: dict[str, Any] = data.get("project") or {}
    if "dependencies" in project or "optional-dependencies" in project:
        requirements = list(project.get("dependencies") or [])
        if not production:
            for extra in (project.get("optional-dependencies") or {}).values():
                requirements.extend(extra)
            for group in (data.get("dependency-groups") or {}).values():
                # include-group tables are not followed
                requirements.extend(entry for entry in group if isinstance(entry, str))
        return ProjectRequirements(name=project.get("name"), requirements=requirements)

    poetry: dict[str, Any] = data.get("tool", {}).get("poetry") or {}
    if "dependencies" in poetry:
        requirements = _poetry_requirements(poetry.get("dependencies") or {})
        if not production:
            requirements.extend(
                _poetry_requirements(poetry.get("dev-dependencies") or {})
            )
            for group in (poetry.get("group") or {}).values():
                requirements.extend(
                    _poetry_requirements(group.get("dependencies") or {})
                )
        return ProjectRequirements(
            name=poetry.get("name") or project.get("name"),
            requirements=requirements,
        )

    return None


def _poetry_requirements(table: dict[str, Any]) -> list[str]:
    """Convert a Poetry dependency table to requirement strings.

    Version constraints are dropped; only the installed version matters.
    """
    requirements: list[str] = []
    for name, spec in table.items():
        if name.lower() == "python":
            continue
        extras = spec.get("extras") if isinstance(spec, dict) else None
        if extras:
            requirements.append(f"{name}[{','.join(extras)}]")
        else:
            requirements.append(name)
    return requirements


def read_requirements_file(
    path: Path, _seen: Optional[set[Path]] = None
) -> list[str]:
    """Read requirement strings from a pip requirements file.

    Follows `-r`/`--requirement` includes relative to the including file.
    Other pip options, editable installs and URLs are skipped.

    Args:
        path: Requirements file to read.

    Returns:
        Requirement strings in file order.

    Raises:
        ConfigurationError: If the file cannot be read or decoded.
    """
    seen = _seen if _seen is not None else set()
    resolved = path.resolve()
    if resolved in seen or not path.is_file():
        return []
    seen.add(resolved)

    requirements: list[str] = []
    for raw_line in _read_requirements_text(path).splitlines():
        line = raw_line.split(" #", 1)[0].strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith(("-r ", "--requirement ")):
            include = line.split(None, 1)[1].strip()
            requirements.extend(read_requirements_file(path.parent / include, seen))
            continue
        if line.startswith("-") or "://" in line:
            continue
        requirements.append(line)
    return requirements


def _read_requirements_text(path: Path) -> str:
    """Decode a requirements file, honoring a byte order mark.

    `pip freeze >` in Windows PowerShell writes UTF-16 with a BOM.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Cannot read requirements file '{path}': {e}") from e

    encoding = "utf-8"
    # UTF-32 LE starts with the UTF-16 LE mark, so it is checked first
    for bom, bom_encoding in REQUIREMENTS_BOMS:
        if data.startswith(bom):
            encoding = bom_encoding
            break

    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"Cannot decode requirements file '{path}' as {encoding}: {e}"
        ) from e
