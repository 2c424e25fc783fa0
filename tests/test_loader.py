"""Test loading expressions from files and archives."""
import tarfile
import zipfile

import py7zr
import pytest

from infix_interpreter.batch.loader import _extract_archive, load_expressions


def test_load_txt(tmp_path) -> None:
    """Plain text files are read line by line, skipping blank lines."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1+1\n\n   \n  2*2  \n")

    assert load_expressions(input_file) == ["1+1", "2*2"]

def test_extract_zip(tmp_path) -> None:
    """Check that a .zip archive can be extracted and read correctly."""
    txt = tmp_path / "ops.txt"
    txt.write_text("3+3\n")

    zip_path = tmp_path / "ops.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.write(txt, arcname="ops.txt")

    assert _extract_archive(zip_path) == "3+3\n"
    assert load_expressions(zip_path) == ["3+3"]

def test_extract_tar_xz(tmp_path) -> None:
    """Check that a .tar.xz archive can be extracted and read correctly."""
    txt = tmp_path / "ops.txt"
    txt.write_text("4*4\n")

    tar_path = tmp_path / "ops.tar.xz"
    with tarfile.open(tar_path, "w:xz") as tf:
        tf.add(txt, arcname="ops.txt")

    assert _extract_archive(tar_path) == "4*4\n"

def test_extract_7z(tmp_path) -> None:
    """Check that a .7z archive can be extracted and read correctly."""
    txt = tmp_path / "ops.txt"
    txt.write_text("5-2\n-(1)\n")

    archive_path = tmp_path / "ops.7z"
    with py7zr.SevenZipFile(archive_path, "w") as archive:
        archive.write(txt, arcname="ops.txt")

    assert load_expressions(archive_path) == ["5-2", "-(1)"]

def test_extract_archive_no_txt(tmp_path) -> None:
    """Verify that extraction fails if no .txt file exists in the archive."""
    zip_path = tmp_path / "empty.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.writestr("data.bin", b"\x00\x01")

    with pytest.raises(ValueError):
        load_expressions(zip_path)

def test_extract_unsupported_format(tmp_path) -> None:
    """Ensure unsupported archive formats raise a ValueError."""
    file_path = tmp_path / "ops.rar"
    file_path.write_text("1+1")

    with pytest.raises(ValueError, match="Unsupported archive format"):
        load_expressions(file_path)
