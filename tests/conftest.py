"""Shared fixtures for image-dedup tests."""

import shutil
from pathlib import Path

import pytest
from PIL import Image

from image_dedup.core.models import ImageRecord
from image_dedup.utils.config import Config

SIZE = 64


def _pattern_image(kind: str) -> Image.Image:
    """Build a grayscale test image whose gradient hash is predictable."""
    img = Image.new("L", (SIZE, SIZE))
    pixels = img.load()
    for x in range(SIZE):
        if kind == "rising":
            value = x * 4
        elif kind == "falling":
            value = 255 - x * 4
        elif kind == "peak":
            value = max(0, 255 - abs(x - SIZE // 2) * 8)
        else:
            raise ValueError(kind)
        for y in range(SIZE):
            pixels[x, y] = value
    return img


def write_image(path: Path, kind: str = "rising", fmt: str = "PNG") -> Path:
    """Save a pattern image to ``path``."""
    image = _pattern_image(kind)
    if fmt == "JPEG":
        image = image.convert("RGB")
    image.save(path, fmt)
    return path


@pytest.fixture
def config():
    """Default configuration with progress bars disabled."""
    return Config({"show_progress": False})


@pytest.fixture
def duplicate_dir(tmp_path):
    """Directory with two byte-identical images and one distinct image."""
    directory = tmp_path / "photos"
    directory.mkdir()
    write_image(directory / "x.png", "rising")
    shutil.copy(directory / "x.png", directory / "y.png")
    write_image(directory / "z.png", "falling")
    return directory


@pytest.fixture
def distinct_dir(tmp_path):
    """Directory with three perceptually distinct images."""
    directory = tmp_path / "distinct"
    directory.mkdir()
    write_image(directory / "rising.png", "rising")
    write_image(directory / "falling.png", "falling")
    write_image(directory / "peak.png", "peak")
    return directory


def make_record(path: Path, fingerprint: int, size: int = 0) -> ImageRecord:
    """Create an ImageRecord without hashing anything."""
    return ImageRecord(path=path, size=size, fingerprint=fingerprint)
