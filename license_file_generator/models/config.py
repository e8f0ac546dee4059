"""Configuration Pydantic models for license-file-generator."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Configuration for license-file-generator.

    All fields are optional with None defaults to allow partial configuration.
    """

    model_config = {"extra": "forbid"}

    exclude: Optional[List[str]] = Field(
        default=None,
        description="Package names to leave out of the generated file.",
    )
    replace: Optional[Dict[str, str]] = Field(
        default=None,
        description="License file to use instead of the detected one, "
        "by package name. Relative paths are resolved against the project.",
    )
    append: Optional[List[str]] = Field(
        default=None,
        description="Files whose content is appended to the generated file.",
    )
    line_ending: Optional[Literal["lf", "crlf"]] = Field(
        default=None,
        description="Line ending for generated files (default: keep as-is).",
    )
    pypi_fallback: Optional[bool] = Field(
        default=None,
        description="Query PyPI for packages without local license metadata.",
    )
