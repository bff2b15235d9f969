"""Test the image scanner module."""

from pathlib import Path

import pytest

from image_dedup.core.errors import DirectoryScanError
from image_dedup.core.scanner import ImageScanner


@pytest.fixture
def temp_image_dir(tmp_path):
    """Create a temporary directory with test files."""
    (tmp_path / "a.png").touch()
    (tmp_path / "b.txt").touch()
    (tmp_path / "c.JPG").touch()  # Uppercase extension
    (tmp_path / "d.jpeg").touch()
    (tmp_path / "e.gif").touch()
    (tmp_path / "f.jpg").touch()
    (tmp_path / "noextension").touch()
    (tmp_path / ".png").touch()  # Dotfile, no extension

    # Subdirectory with an image-like name and an image inside
    subdir = tmp_path / "nested.png"
    subdir.mkdir()
    (subdir / "inner.png").touch()

    return tmp_path


def test_scanner_filters_by_extension(temp_image_dir):
    """Only allow-listed, case-sensitive extensions are candidates."""
    images = ImageScanner().scan_directory(temp_image_dir)

    names = [img.name for img in images]
    assert names == ["a.png", "d.jpeg", "e.gif", "f.jpg"]


def test_scanner_is_case_sensitive(tmp_path):
    """An uppercase extension is not a candidate."""
    (tmp_path / "a.png").touch()
    (tmp_path / "b.txt").touch()
    (tmp_path / "c.JPG").touch()

    images = ImageScanner().scan_directory(tmp_path)

    assert images == [tmp_path / "a.png"]


def test_scanner_non_recursive(temp_image_dir):
    """Files in sub-directories are never returned."""
    images = ImageScanner().scan_directory(temp_image_dir)

    assert all(img.parent == temp_image_dir for img in images)
    assert "inner.png" not in {img.name for img in images}
    assert "nested.png" not in {img.name for img in images}


def test_scanner_results_are_sorted(tmp_path):
    """Results come back sorted by path."""
    for name in ["c.png", "a.png", "b.png"]:
        (tmp_path / name).touch()

    images = ImageScanner().scan_directory(tmp_path)

    assert images == sorted(images)


def test_scanner_empty_directory(tmp_path):
    """An empty directory yields no candidates."""
    assert ImageScanner().scan_directory(tmp_path) == []


def test_scanner_nonexistent_directory():
    """Test that scanner raises error for nonexistent directory."""
    with pytest.raises(DirectoryScanError):
        ImageScanner().scan_directory(Path("/nonexistent/path"))


def test_scanner_not_a_directory(tmp_path):
    """A regular file cannot be scanned."""
    file_path = tmp_path / "file.png"
    file_path.touch()

    with pytest.raises(DirectoryScanError):
        ImageScanner().scan_directory(file_path)


def test_allow_list_is_immutable():
    """The extension allow-list cannot be modified."""
    assert ImageScanner.IMAGE_EXTENSIONS == frozenset({"png", "jpeg", "jpg", "gif"})
    with pytest.raises(AttributeError):
        ImageScanner.IMAGE_EXTENSIONS.add("bmp")
