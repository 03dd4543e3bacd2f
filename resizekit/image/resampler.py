"""
Pillow-backed resampling capability.
"""
from typing import Tuple
from PIL import Image
import logging

from ..core.interfaces import (
    IResampler,
    Rectangle,
    ResizeMode,
    ResizeOptions,
    Resampler,
    Size,
)
from .resize_policy import calculate_target_location_and_bounds

logger = logging.getLogger(__name__)

Image.MAX_IMAGE_PIXELS = 1_000_000_000

# Closest Pillow kernel for each requested resampler
PILLOW_FILTERS = {
    Resampler.BICUBIC: Image.Resampling.BICUBIC,
    Resampler.BOX: Image.Resampling.BOX,
    Resampler.CATMULL_ROM: Image.Resampling.BICUBIC,
    Resampler.HERMITE: Image.Resampling.HAMMING,
    Resampler.LANCZOS2: Image.Resampling.LANCZOS,
    Resampler.LANCZOS3: Image.Resampling.LANCZOS,
    Resampler.LANCZOS5: Image.Resampling.LANCZOS,
    Resampler.LANCZOS8: Image.Resampling.LANCZOS,
    Resampler.MITCHELL_NETRAVALI: Image.Resampling.BICUBIC,
    Resampler.NEAREST_NEIGHBOR: Image.Resampling.NEAREST,
    Resampler.ROBIDOUX: Image.Resampling.BICUBIC,
    Resampler.ROBIDOUX_SHARP: Image.Resampling.BICUBIC,
    Resampler.SPLINE: Image.Resampling.BICUBIC,
    Resampler.TRIANGLE: Image.Resampling.BILINEAR,
    Resampler.WELCH: Image.Resampling.LANCZOS,
}

_PADDED_MODES = (ResizeMode.CROP, ResizeMode.PAD, ResizeMode.BOX_PAD)
_DIRECT_MODES = ("RGB", "RGBA", "L", "LA")

TRANSPARENT = (0, 0, 0, 0)


class PillowResampler(IResampler):
    """Resizes Pillow images according to ResizeOptions."""

    def resize(self, image: Image.Image, options: ResizeOptions) -> Tuple[Image.Image, Size, Rectangle]:
        """
        Resize image.

        Returns:
            (resized image, canvas size, placement rectangle)

        Raises:
            ValueError: If both requested dimensions are zero
        """
        source = Size(*image.size)
        canvas, rect = calculate_target_location_and_bounds(source, options)

        if canvas == source and rect == Rectangle(0, 0, source.width, source.height):
            return image, canvas, rect

        resample = PILLOW_FILTERS[options.sampler]

        if options.mode not in _PADDED_MODES or rect == Rectangle(0, 0, canvas.width, canvas.height):
            return image.resize((canvas.width, canvas.height), resample), canvas, rect

        if image.mode not in _DIRECT_MODES:
            image = image.convert("RGBA")

        scaled = image
        if rect.size != source:
            scaled = image.resize((rect.width, rect.height), resample)

        background = self._background(scaled.mode, canvas, options.pad_color)
        background.paste(scaled, (rect.x, rect.y))

        logger.debug(f"Resized {source.width}x{source.height} to {canvas.width}x{canvas.height} at {rect}")
        return background, canvas, rect

    def _background(self, mode: str, canvas: Size, color) -> Image.Image:
        fill = Image.new("RGBA", (canvas.width, canvas.height), color or TRANSPARENT)
        return fill if mode == "RGBA" else fill.convert(mode)
