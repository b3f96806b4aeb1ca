"""Directory validation and listing of candidate photo files."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from core.models import PhotoRecord, is_supported_file


def validate_directory(path: str | Path) -> Path:
    """Return `path` as a Path if it is an existing directory.

    Raises:
        FileNotFoundError: The path does not exist.
        NotADirectoryError: The path is not a folder.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Path {path} is not found.")
    if not p.is_dir():
        raise NotADirectoryError(f"Path {path} is not a folder.")
    return p


def list_photos(directory: str | Path) -> list[PhotoRecord]:
    """List supported photos directly under `directory` in filesystem order."""
    try:
        with os.scandir(directory) as it:
            entries = [Path(entry.path) for entry in it]
    except OSError as ex:
        logger.error("Listing {} failed: {}", directory, ex)
        raise OSError("Failed to list files.") from ex

    records = [PhotoRecord.from_path(p) for p in entries if is_supported_file(p)]
    logger.info("Found {} photos of {} entries in {}", len(records), len(entries), directory)
    return records
