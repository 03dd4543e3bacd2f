"""
Decoded image together with its format and metadata.
"""
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional, Union
from PIL import Image, ImageFile
import logging

from ..core.interfaces import OrientationMode, Size

logger = logging.getLogger(__name__)

ImageFile.LOAD_TRUNCATED_IMAGES = True

ORIENTATION_TAG = 0x0112

FORMATS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    # Multi-picture JPEGs from cameras decode as MPO
    "mpo": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "gif": "GIF",
    "bmp": "BMP",
    "tif": "TIFF",
    "tiff": "TIFF",
}


def find_format(name: str) -> Optional[str]:
    """Pillow format name for an extension or format name, None if unsupported."""
    key = name.strip().lstrip(".").lower()
    if key in FORMATS:
        return FORMATS[key]
    upper = key.upper()
    return upper if upper in FORMATS.values() else None


class FormattedImage:
    """
    A Pillow image, the format it will be encoded with and its EXIF block.

    The EXIF block is captured once so it survives operations that replace
    the underlying Pillow image.
    """

    DEFAULT_QUALITY = 90

    def __init__(self, image: Image.Image, format: str = "PNG", quality: Optional[int] = None):
        self.image = image
        self.format = find_format(format) or format.upper()
        self.quality = quality
        self.exif = image.getexif()

    @classmethod
    def open(cls, path: Union[str, Path]) -> "FormattedImage":
        """Decode an image file."""
        with Image.open(path) as img:
            return cls._detach(img, img.format or find_format(Path(path).suffix) or "PNG")

    @classmethod
    def from_bytes(cls, data: bytes) -> "FormattedImage":
        with Image.open(BytesIO(data)) as img:
            return cls._detach(img, img.format or "PNG")

    @classmethod
    def _detach(cls, img: Image.Image, format: str) -> "FormattedImage":
        img.load()
        formatted = cls(img.copy(), format)
        formatted.exif = img.getexif()
        return formatted

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Size:
        return Size(*self.image.size)

    @property
    def orientation(self) -> OrientationMode:
        return OrientationMode.from_code(self.exif.get(ORIENTATION_TAG))

    @orientation.setter
    def orientation(self, value: OrientationMode) -> None:
        self.exif[ORIENTATION_TAG] = int(value)

    def save(self, output: Union[str, Path, BinaryIO]) -> None:
        """Encode the image with its current format."""
        logger.debug(f"Encoding {self!r}")
        options = {}
        if self.format in ("JPEG", "PNG", "WEBP") and len(self.exif):
            options["exif"] = self.exif

        if self.format == "JPEG":
            self._prepare_for_jpeg(self.image).save(
                output,
                format="JPEG",
                quality=self.quality or self.DEFAULT_QUALITY,
                optimize=True,
                progressive=True,
                **options
            )
            return

        if self.quality is not None and self.format == "WEBP":
            options["quality"] = self.quality
        self._prepare_for_format(self.image).save(output, format=self.format, **options)

    def to_bytes(self) -> bytes:
        buffer = BytesIO()
        self.save(buffer)
        return buffer.getvalue()

    def _prepare_for_jpeg(self, img: Image.Image) -> Image.Image:
        """Convert image to RGB mode for JPEG saving."""
        if img.mode in ("RGBA", "LA"):
            background = Image.new("RGB", img.size, (255, 255, 255))
            alpha = img.split()[-1]
            background.paste(img.convert("RGB"), mask=alpha)
            return background
        if img.mode not in ("RGB", "L"):
            return img.convert("RGB")
        return img

    def _prepare_for_format(self, img: Image.Image) -> Image.Image:
        if self.format == "BMP" and img.mode not in ("RGB", "L", "1", "P"):
            return img.convert("RGB")
        return img

    def __repr__(self) -> str:
        return f"FormattedImage({self.width}x{self.height}, {self.format}, {self.orientation.name})"

