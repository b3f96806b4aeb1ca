"""EXIF capture-time extraction for JPEG and HEIC/HEIF files.

Uses Pillow, with pillow-heif registered as the HEIF opener. Reading is
best-effort and never raises; callers get `None` when the timestamp is not
available.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from PIL import ExifTags, Image
from pillow_heif import register_heif_opener

register_heif_opener()


def read_capture_time(path: str | Path) -> str | None:
    """Return the primary image's EXIF DateTimeOriginal string.

    Returns None when the file cannot be opened, its metadata cannot be
    parsed, or the tag is absent.
    """
    try:
        with Image.open(path) as im:
            exif = im.getexif()
            # DateTimeOriginal lives in the Exif sub-IFD of IFD0, not IFD1 (thumbnail)
            val = exif.get_ifd(ExifTags.IFD.Exif).get(ExifTags.Base.DateTimeOriginal)
    except (OSError, ValueError, TypeError, SyntaxError, RuntimeError) as ex:
        logger.debug("EXIF read failed for {}: {}", path, ex)
        return None

    if isinstance(val, bytes):
        val = val.decode("ascii", errors="ignore")
    if not val:
        return None
    val_str = str(val).strip("\x00 ")
    return val_str or None
