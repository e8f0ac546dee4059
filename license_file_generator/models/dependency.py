"""Dependency metadata Pydantic models."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class DependencyRecord(BaseModel):
    """License metadata for one installed dependency.

    A record may carry a license file, one or more license identifiers,
    both, or neither.
    """

    model_config = {"extra": "forbid"}

    name: str = Field(description="Distribution name, unique within a snapshot")
    version: Optional[str] = Field(default=None, description="Installed version")
    license_file: Optional[str] = Field(
        default=None, description="Path to the dependency's license file"
    )
    licenses: Optional[Union[str, List[str]]] = Field(
        default=None,
        description="License identifier, or identifiers in priority order",
    )

    @property
    def first_license(self) -> Optional[str]:
        """Get the authoritative license identifier.

        Only the first entry of a sequence is used; later entries are ignored.

        Returns:
            The license identifier, or None if there is none.
        """
        if isinstance(self.licenses, str):
            return self.licenses or None
        if self.licenses:
            return self.licenses[0]
        return None


# Dependency name -> record, in collector order
ProjectSnapshot = Dict[str, DependencyRecord]


class ProjectOptions(BaseModel):
    """Options passed to the dependency metadata collector."""

    model_config = {"extra": "forbid"}

    start: Path = Field(description="Project directory to traverse from")
    production: bool = Field(
        default=True,
        description="Only include runtime dependencies (exclude dev/optional)",
    )
    pypi_fallback: bool = Field(
        default=False,
        description="Query PyPI for packages without local license metadata",
    )
