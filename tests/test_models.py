from __future__ import annotations

from pathlib import Path

import pytest

from core.models import (
    PhotoRecord,
    create_prefix,
    get_prefix_len,
    is_supported_file,
    validate_delimiter,
)
from core.services.interfaces import RenameError


@pytest.mark.parametrize(
    ("count", "expected"), [(1, 1), (9, 1), (10, 2), (99, 2), (100, 3), (12345, 5)]
)
def test_prefix_len_is_digit_count(count, expected):
    assert get_prefix_len(count) == expected


def test_create_prefix():
    assert create_prefix(10, 3) == "010"
    assert create_prefix(5, 3) == "005"
    assert create_prefix(100, 2) == "100"


def test_validate_delimiter_rejects_empty():
    assert validate_delimiter("-") == "-"
    with pytest.raises(ValueError, match="too short"):
        validate_delimiter("")


@pytest.mark.parametrize("name", ["a.jpg", "b.JPEG", "c.heic", "d.HeIf"])
def test_supported_extensions(tmp_path: Path, name):
    path = tmp_path / name
    path.write_bytes(b"")
    assert is_supported_file(path)
    assert PhotoRecord.from_path(path).file_name == name


@pytest.mark.parametrize("name", ["a.png", "notes.txt", "jpg", "a.jpg.bak"])
def test_unsupported_files_rejected(tmp_path: Path, name):
    path = tmp_path / name
    path.write_bytes(b"")
    assert not is_supported_file(path)
    with pytest.raises(ValueError):
        PhotoRecord.from_path(path)


def test_directory_with_photo_extension_rejected(tmp_path: Path):
    folder = tmp_path / "album.jpg"
    folder.mkdir()
    assert not is_supported_file(folder)
    assert not is_supported_file(tmp_path / "missing.jpg")


def test_create_prefixed_name_is_pure(tmp_path: Path):
    path = tmp_path / "IMG_0001.jpg"
    path.write_bytes(b"x")
    rec = PhotoRecord.from_path(path)

    first = rec.create_prefixed_name(0, 3, "__")
    second = rec.create_prefixed_name(0, 3, "__")

    assert first == second == "001__IMG_0001.jpg"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["IMG_0001.jpg"]


def test_create_prefixed_name_does_not_truncate():
    rec = PhotoRecord("photos/a.jpg")
    assert rec.create_prefixed_name(99, 2, "-") == "100-a.jpg"


def test_reverted_name_uses_fixed_two_byte_offset():
    assert PhotoRecord("1__a.jpg").create_reverted_name("__") == "a.jpg"
    # one-character delimiter: the character after it is dropped too
    assert PhotoRecord("1_ab.jpg").create_reverted_name("_") == "b.jpg"
    # three-character delimiter: one character of it is left behind
    assert PhotoRecord("1---a.jpg").create_reverted_name("---") == "-a.jpg"


def test_reverted_name_exact_mode_strips_delimiter_length():
    assert PhotoRecord("1---a.jpg").create_reverted_name("---", exact=True) == "a.jpg"
    assert PhotoRecord("1_ab.jpg").create_reverted_name("_", exact=True) == "ab.jpg"


def test_reverted_name_counts_utf8_bytes():
    # "\u00a7" is two bytes in UTF-8, so the fixed offset removes exactly the delimiter
    assert PhotoRecord("1\u00a7a.jpg").create_reverted_name("\u00a7") == "a.jpg"
    assert PhotoRecord("\u00e9t\u00e9__1__x.jpg").create_reverted_name("__") == "1__x.jpg"


def test_reverted_name_exact_mode_multibyte_delimiter():
    assert PhotoRecord("1\u2192a.jpg").create_reverted_name("\u2192", exact=True) == "a.jpg"


@pytest.mark.parametrize(("name", "delim"), [("1\u2192a.jpg", "\u2192"), ("1_\u00e9.jpg", "_")])
def test_reverted_name_cut_inside_character(name, delim):
    with pytest.raises(RenameError, match="Failed to revert file name"):
        PhotoRecord(name).create_reverted_name(delim)


def test_reverted_name_uses_first_match():
    assert PhotoRecord("02__x__y.jpg").create_reverted_name("__") == "x__y.jpg"


def test_reverted_name_without_delimiter():
    assert PhotoRecord("a.jpg").create_reverted_name("__") is None


@pytest.mark.parametrize("delim", ["__", "--", "_.", "@@", "\u00a7"])
@pytest.mark.parametrize("name", ["a.jpg", "IMG__0001.HEIC", "1__already.jpeg"])
def test_rename_then_revert_round_trip(name, delim):
    renamed = PhotoRecord(name).create_prefixed_name(41, 3, delim)
    assert PhotoRecord(renamed).create_reverted_name(delim) == name


def test_rename_with_prefix_moves_file(tmp_path: Path):
    src = tmp_path / "a.jpg"
    src.write_bytes(b"data")

    new_path = PhotoRecord.from_path(src).rename_with_prefix(4, 2, "__")

    assert new_path == tmp_path / "05__a.jpg"
    assert new_path.read_bytes() == b"data"
    assert not src.exists()


def test_rename_with_prefix_refuses_to_overwrite(tmp_path: Path):
    src = tmp_path / "a.jpg"
    src.write_bytes(b"new")
    (tmp_path / "1__a.jpg").write_bytes(b"old")

    with pytest.raises(RenameError) as excinfo:
        PhotoRecord.from_path(src).rename_with_prefix(0, 1, "__")

    assert excinfo.value.path == src
    assert "Failed to rename file" in str(excinfo.value)
    assert src.read_bytes() == b"new"
    assert (tmp_path / "1__a.jpg").read_bytes() == b"old"


def test_rename_with_prefix_missing_source(tmp_path: Path):
    rec = PhotoRecord(str(tmp_path / "gone.jpg"))
    with pytest.raises(RenameError) as excinfo:
        rec.rename_with_prefix(0, 1, "__")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_revert_name_moves_file(tmp_path: Path):
    src = tmp_path / "3__b.jpg"
    src.write_bytes(b"b")

    assert PhotoRecord.from_path(src).revert_name("__") == tmp_path / "b.jpg"
    assert (tmp_path / "b.jpg").read_bytes() == b"b"


def test_revert_name_skips_unrenamed_file(tmp_path: Path):
    src = tmp_path / "b.jpg"
    src.write_bytes(b"b")

    assert PhotoRecord.from_path(src).revert_name("__") is None
    assert src.exists()


def test_revert_name_to_empty_name_fails(tmp_path: Path):
    rec = PhotoRecord(str(tmp_path / "1__"))
    with pytest.raises(RenameError, match="Failed to revert file name"):
        rec.revert_name("__")
