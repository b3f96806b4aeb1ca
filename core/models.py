"""Core domain model for photo files and their sequence-prefixed names."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.services.interfaces import RenameError

SUPPORTED_EXTENSIONS = frozenset({"jpg", "jpeg", "heic", "heif"})
DEFAULT_DELIMITER = "__"
# Bytes stripped from the front of the delimiter match when reverting.
REVERT_OFFSET = 2


def is_supported_file(path: str | Path) -> bool:
    """True for regular files with a JPEG/HEIC family extension (any case)."""
    p = Path(path)
    if not p.is_file():
        return False
    return p.suffix[1:].lower() in SUPPORTED_EXTENSIONS


def validate_delimiter(delim: str | None) -> str:
    """Return `delim` unchanged, raising ValueError when it is empty."""
    if not delim:
        raise ValueError("Delimiter is too short.")
    return delim


def get_prefix_len(count: int) -> int:
    """Number of decimal digits needed to print `count`."""
    return len(str(count))


def create_prefix(num: int, length: int) -> str:
    """Zero-pad `num` to `length` digits; wider numbers are never truncated."""
    return str(num).rjust(length, "0")


def _move(src: Path, dst: Path, action: str) -> Path:
    # os.rename silently replaces an existing target on POSIX
    if dst.exists():
        raise RenameError(src, f"Failed to {action} {src} (target {dst.name} exists)")
    try:
        os.rename(src, dst)
    except OSError as ex:
        raise RenameError(src, f"Failed to {action} {src}") from ex
    return dst


@dataclass(frozen=True)
class PhotoRecord:
    """A single photo file found in the target directory."""

    file_path: str

    @classmethod
    def from_path(cls, path: str | Path) -> PhotoRecord:
        """Build a record, rejecting directories and unsupported extensions."""
        if not is_supported_file(path):
            raise ValueError(f"Not a supported photo file: {path}")
        return cls(file_path=str(path))

    @property
    def path(self) -> Path:
        return Path(self.file_path)

    @property
    def file_name(self) -> str:
        """Base name of the file path."""
        return self.path.name

    @property
    def folder_path(self) -> Path:
        """Parent directory of the file."""
        return self.path.parent

    def create_prefixed_name(self, index: int, prefix_len: int, delim: str) -> str:
        """Return the sequence-prefixed name for this file.

        Args:
            index: Zero-based position of the file in the sorted batch.
            prefix_len: Digit width shared by the whole batch.
            delim: Separator between the number and the original name.
        """
        prefix = create_prefix(index + 1, prefix_len)
        return f"{prefix}{delim}{self.file_name}"

    def rename_with_prefix(self, index: int, prefix_len: int, delim: str) -> Path:
        """Move the file to its prefixed name in the same folder.

        Returns the new path. Raises `RenameError` when the move fails.
        """
        new_name = self.create_prefixed_name(index, prefix_len, delim)
        return _move(self.path, self.folder_path / new_name, "rename file")

    def create_reverted_name(self, delim: str, exact: bool = False) -> str | None:
        """Return the pre-rename name, or None when `delim` is not in the name.

        Offsets are counted in UTF-8 bytes. Everything up to the first `delim`
        match plus REVERT_OFFSET bytes is dropped, whatever the delimiter
        length. Pass `exact=True` to drop the delimiter's byte length instead.

        Raises:
            RenameError: The cut falls inside a multi-byte character.
        """
        raw = self.file_name.encode("utf-8", "surrogateescape")
        needle = delim.encode("utf-8", "surrogateescape")
        pos = raw.find(needle)
        if pos < 0:
            return None
        cut = pos + (len(needle) if exact else REVERT_OFFSET)
        if cut < len(raw) and raw[cut] & 0xC0 == 0x80:
            raise RenameError(
                self.path, f"Failed to revert file name {self.path} (cut inside a character)"
            )
        return raw[cut:].decode("utf-8", "surrogateescape")

    def revert_name(self, delim: str, exact: bool = False) -> Path | None:
        """Move the file back to its reverted name.

        Returns the new path, or None when the file was never renamed.
        """
        new_name = self.create_reverted_name(delim, exact=exact)
        if new_name is None:
            return None
        if not new_name:
            raise RenameError(self.path, f"Failed to revert file name {self.path}")
        return _move(self.path, self.folder_path / new_name, "revert file name")
