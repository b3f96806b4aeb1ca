from __future__ import annotations

from pathlib import Path

from PIL import ExifTags, Image
from pillow_heif import register_heif_opener
import pytest

register_heif_opener()


def write_jpeg(path: Path, capture_time: str | None = None) -> Path:
    """Write a tiny JPEG, optionally carrying an EXIF DateTimeOriginal."""
    img = Image.new("RGB", (8, 8), "white")
    if capture_time is None:
        img.save(path, "JPEG")
    else:
        exif = Image.Exif()
        exif[ExifTags.IFD.Exif] = {ExifTags.Base.DateTimeOriginal: capture_time}
        img.save(path, "JPEG", exif=exif)
    return path


def write_heic(path: Path, capture_time: str) -> Path:
    """Write a tiny HEIF image carrying an EXIF DateTimeOriginal."""
    exif = Image.Exif()
    exif[ExifTags.IFD.Exif] = {ExifTags.Base.DateTimeOriginal: capture_time}
    Image.new("RGB", (16, 16), "gray").save(path, "HEIF", exif=exif.tobytes())
    return path


@pytest.fixture
def make_jpeg(tmp_path: Path):
    def _make(name: str, capture_time: str | None = None) -> Path:
        return write_jpeg(tmp_path / name, capture_time)

    return _make


@pytest.fixture
def make_heic(tmp_path: Path):
    def _make(name: str, capture_time: str) -> Path:
        return write_heic(tmp_path / name, capture_time)

    return _make


@pytest.fixture(autouse=True)
def _no_user_settings(tmp_path_factory, monkeypatch):
    # Keep a developer's ~/.photo-prefixer/settings.json out of the tests
    missing = tmp_path_factory.mktemp("home") / "settings.json"
    monkeypatch.setattr("infrastructure.settings.DEFAULT_SETTINGS_PATH", missing)
