"""Core service interfaces and shared data structures.

This module defines the error type and the simple dataclasses that describe
rename planning and results, used across the infrastructure and app layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class RenameError(Exception):
    """A single file could not be moved to its new name.

    Attributes:
        path: The original path of the file that failed.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class RenamePlanItem:
    """Planned name change for one file.

    Attributes:
        original_name: Current base name of the file.
        new_name: Target base name, or None when the file would be skipped.
        error: Why no target name could be computed, if that is the case.
    """

    original_name: str
    new_name: str | None
    error: str | None = None


@dataclass
class RenameResult:
    """Outcome of a rename or revert batch.

    Attributes:
        renamed: Tuples of (original path, new path) for files moved.
        skipped: Paths left untouched because they were never renamed.
        failed: Tuples of (path, reason) for failures.
    """

    renamed: list[tuple[str, str]] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no file failed."""
        return not self.failed
