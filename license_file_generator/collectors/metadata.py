"""License metadata extraction from installed distributions."""
from __future__ import annotations

import re
from importlib.metadata import Distribution, PackageMetadata, PackagePath
from typing import Optional

from license_file_generator.models.dependency import DependencyRecord

# LICENSE, LICENCE.txt, COPYING, NOTICE, LICENSE-MIT, ...
LICENSE_FILE_PATTERN = re.compile(r"^(licen[cs]e|copying|notice)([-_.].*)?$", re.IGNORECASE)

# Source and binary files that happen to match the pattern (license.py etc.)
NON_TEXT_SUFFIXES = frozenset(
    {".py", ".pyc", ".pyi", ".pyo", ".pyd", ".so", ".dll", ".dylib", ".json", ".html"}
)

# The License field sometimes holds the full license text; skip those
MAX_LICENSE_FIELD_LENGTH = 100

# Mapping of trove classifiers to SPDX identifiers
CLASSIFIER_TO_SPDX: dict[str, str] = {
    "License :: OSI Approved :: MIT License": "MIT",
    "License :: OSI Approved :: MIT No Attribution License (MIT-0)": "MIT-0",
    "License :: OSI Approved :: Apache Software License": "Apache-2.0",
    "License :: OSI Approved :: BSD License": "BSD-3-Clause",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)": "GPL-3.0",
    "License :: OSI Approved :: GNU General Public License v2 (GPLv2)": "GPL-2.0",
    "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)": (
        "LGPL-3.0"
    ),
    "License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)": (
        "LGPL-2.0"
    ),
    "License :: OSI Approved :: ISC License (ISCL)": "ISC",
    "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)": "MPL-2.0",
    "License :: OSI Approved :: Python Software Foundation License": "PSF-2.0",
    "License :: OSI Approved :: The Unlicense (Unlicense)": "Unlicense",
    "License :: OSI Approved :: zlib/libpng License": "Zlib",
}


def _in_metadata_dir(path: PackagePath) -> bool:
    return any(part.endswith((".dist-info", ".egg-info")) for part in path.parts[:-1])


def _is_license_file(path: PackagePath) -> bool:
    return (
        LICENSE_FILE_PATTERN.match(path.name) is not None
        and path.suffix.lower() not in NON_TEXT_SUFFIXES
    )


def find_license_file(dist: Distribution) -> Optional[str]:
    """Find the license file shipped with a distribution.

    Lookup order:
    1. Files declared with the `License-File` metadata field
    2. License-like files inside the .dist-info/.egg-info directory
    3. License-like files anywhere in the distribution, shallowest first

    Args:
        dist: Installed distribution.

    Returns:
        Absolute path of the license file, or None if the distribution
        ships none (or has no RECORD to list its files).
    """
    files = dist.files
    if not files:
        return None

    for entry in dist.metadata.get_all("License-File") or []:
        declared = tuple(entry.replace("\\", "/").split("/"))
        for path in files:
            if _in_metadata_dir(path) and path.parts[-len(declared):] == declared:
                return str(dist.locate_file(path))

    candidates = [path for path in files if _is_license_file(path)]
    if not candidates:
        return None
    candidates.sort(
        key=lambda p: (not _in_metadata_dir(p), len(p.parts), str(p).lower())
    )
    return str(dist.locate_file(candidates[0]))


def extract_license_types(metadata: PackageMetadata) -> list[str]:
    """Extract license identifiers from core metadata.

    Identifiers are returned in priority order: `License-Expression`
    (PEP 639), a short `License` field, then license classifiers.

    Args:
        metadata: Distribution core metadata.

    Returns:
        Distinct license identifiers, possibly empty.
    """
    found: list[str] = []

    def add(value: str) -> None:
        if value not in found:
            found.append(value)

    expression = metadata.get("License-Expression")
    if expression and expression.strip():
        add(expression.strip())

    license_str = metadata.get("License")
    if license_str and license_str.strip():
        cleaned = license_str.strip()
        if (
            cleaned.upper() not in ("UNKNOWN", "NONE")
            and "\n" not in cleaned
            and len(cleaned) <= MAX_LICENSE_FIELD_LENGTH
        ):
            add(cleaned)

    for classifier in metadata.get_all("Classifier") or []:
        if not classifier.startswith("License ::") or classifier.endswith(
            ":: OSI Approved"
        ):
            continue
        # Unmapped classifiers fall back to their last segment
        add(CLASSIFIER_TO_SPDX.get(classifier, classifier.split(" :: ")[-1]))

    return found


def record_from_distribution(dist: Distribution) -> DependencyRecord:
    """Build a DependencyRecord from an installed distribution."""
    license_types = extract_license_types(dist.metadata)
    return DependencyRecord(
        name=dist.metadata["Name"],
        version=dist.metadata.get("Version"),
        license_file=find_license_file(dist),
        licenses=license_types or None,
    )
