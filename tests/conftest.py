"""
Pytest configuration and fixtures for ResizeKit tests.
"""
import pytest
import tempfile
import shutil
from io import BytesIO
from pathlib import Path
import numpy as np
from PIL import Image

from resizekit import CommandParser, FormattedImage, INVARIANT, OrientationMode


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="resizekit_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


@pytest.fixture
def culture():
    return INVARIANT


@pytest.fixture
def make_image():
    """Factory for in-memory images with an optional EXIF orientation."""
    def factory(width=1, height=1, orientation=None, mode="RGBA", color=0):
        formatted = FormattedImage(Image.new(mode, (width, height), color), "PNG")
        if orientation is not None:
            formatted.orientation = OrientationMode(orientation)
        return formatted
    return factory


@pytest.fixture
def two_pixel_image(make_image):
    """A 2x1 image: red on the left, blue on the right."""
    def factory(orientation):
        formatted = make_image(2, 1, orientation, mode="RGB", color=(255, 0, 0))
        formatted.image.putpixel((1, 0), (0, 0, 255))
        return formatted
    return factory


@pytest.fixture
def sample_image(temp_dir) -> Path:
    """Create a sample landscape JPEG."""
    image_path = temp_dir / "test_image.jpg"
    img = Image.new("RGB", (800, 600), color="blue")
    img.save(image_path, "JPEG", quality=90)
    return image_path


@pytest.fixture
def rotated_image(temp_dir) -> Path:
    """Create an 800x600 JPEG whose EXIF says it must be turned 90 degrees."""
    image_path = temp_dir / "rotated.jpg"
    img = Image.new("RGB", (800, 600), color="green")
    exif = Image.Exif()
    exif[0x0112] = int(OrientationMode.RIGHT_TOP)
    img.save(image_path, "JPEG", quality=90, exif=exif)
    return image_path


@pytest.fixture
def png_image(temp_dir) -> Path:
    """Create a PNG image with transparency."""
    image_path = temp_dir / "transparent.png"
    img = Image.new("RGBA", (400, 400), color=(255, 0, 0, 128))
    img.save(image_path, "PNG")
    return image_path


@pytest.fixture
def mpo_bytes() -> bytes:
    """A two frame multi-picture JPEG of random noise, as written by cameras."""
    rng = np.random.default_rng(0)
    first, second = (
        Image.fromarray(rng.integers(0, 256, (64, 64, 3), dtype=np.uint8))
        for _ in range(2)
    )
    buffer = BytesIO()
    first.save(buffer, "MPO", save_all=True, append_images=[second])
    return buffer.getvalue()
