"""Async filesystem helpers.

Blocking pathlib calls run in a worker thread so that per-dependency
checks and reads can be awaited concurrently.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


async def does_folder_exist(path: PathLike) -> bool:
    """Check whether a path is an existing directory."""
    return await asyncio.to_thread(Path(path).is_dir)


async def does_file_exist(path: PathLike) -> bool:
    """Check whether a path is an existing regular file."""
    return await asyncio.to_thread(Path(path).is_file)


async def read_file_async(path: PathLike) -> str:
    """Read a text file's full content.

    Undecodable bytes are replaced.
    Args:
        path: File to read.

    Returns:
        The file content.

    Raises:
        OSError: If the file cannot be read.
    """
    return await asyncio.to_thread(
        Path(path).read_text, encoding="utf-8", errors="replace"
    )
