"""
Resize geometry: how a source image is placed on the output canvas.

Every function returns (canvas, rectangle). The canvas is the size of the
output image; the rectangle is where the scaled source lands on it and may
extend past the canvas edges, in which case the overflow is cropped.
"""
import math
from typing import Tuple

from ..core.interfaces import AnchorPosition, Rectangle, ResizeMode, ResizeOptions, Size

_TOPS = (AnchorPosition.TOP, AnchorPosition.TOP_LEFT, AnchorPosition.TOP_RIGHT)
_BOTTOMS = (AnchorPosition.BOTTOM, AnchorPosition.BOTTOM_LEFT, AnchorPosition.BOTTOM_RIGHT)
_LEFTS = (AnchorPosition.LEFT, AnchorPosition.TOP_LEFT, AnchorPosition.BOTTOM_LEFT)
_RIGHTS = (AnchorPosition.RIGHT, AnchorPosition.TOP_RIGHT, AnchorPosition.BOTTOM_RIGHT)


def _sanitize(value: int) -> int:
    return max(1, value)


def _result(width: int, height: int, rect: Rectangle) -> Tuple[Size, Rectangle]:
    return (
        Size(_sanitize(width), _sanitize(height)),
        Rectangle(rect.x, rect.y, _sanitize(rect.width), _sanitize(rect.height)),
    )


def calculate_target_location_and_bounds(source: Size, options: ResizeOptions) -> Tuple[Size, Rectangle]:
    """
    Compute canvas size and placement for resizing source with options.

    A zero width or height is derived from the other axis and the source
    aspect ratio.

    Raises:
        ValueError: If both requested dimensions are zero or negative, or the
            source has no area
    """
    width = options.size.width
    height = options.size.height

    if width <= 0 and height <= 0:
        raise ValueError(f"Target width {width} and height {height} must be greater than zero.")
    if source.width <= 0 or source.height <= 0:
        raise ValueError(f"Source width {source.width} and height {source.height} must be greater than zero.")

    if width == 0 and height > 0:
        width = max(1, round(source.width * height / source.height))
    if height == 0 and width > 0:
        height = max(1, round(source.height * width / source.width))

    mode = options.mode
    if mode is ResizeMode.CROP:
        return _crop(source, options, width, height)
    if mode is ResizeMode.PAD:
        return _pad(source, options, width, height)
    if mode is ResizeMode.BOX_PAD:
        return _box_pad(source, options, width, height)
    if mode is ResizeMode.MAX:
        return _max(source, width, height)
    if mode is ResizeMode.MIN:
        return _min(source, width, height)

    return _result(width, height, Rectangle(0, 0, width, height))


def _crop(source: Size, options: ResizeOptions, width: int, height: int) -> Tuple[Size, Rectangle]:
    target_x = 0
    target_y = 0
    target_width = width
    target_height = height

    percent_height = abs(height / source.height)
    percent_width = abs(width / source.width)

    if percent_height < percent_width:
        ratio = percent_width
        overflow = round(height - source.height * ratio)

        if options.center is not None:
            center = -(ratio * source.height) * options.center[1]
            target_y = round(center + height / 2)
            target_y = max(overflow, min(0, target_y))
        elif options.position in _TOPS:
            target_y = 0
        elif options.position in _BOTTOMS:
            target_y = overflow
        else:
            target_y = round((height - source.height * ratio) / 2)

        target_height = math.ceil(source.height * percent_width)
    else:
        ratio = percent_height
        overflow = round(width - source.width * ratio)

        if options.center is not None:
            center = -(ratio * source.width) * options.center[0]
            target_x = round(center + width / 2)
            target_x = max(overflow, min(0, target_x))
        elif options.position in _LEFTS:
            target_x = 0
        elif options.position in _RIGHTS:
            target_x = overflow
        else:
            target_x = round((width - source.width * ratio) / 2)

        target_width = math.ceil(source.width * percent_height)

    return _result(width, height, Rectangle(target_x, target_y, target_width, target_height))


def _pad(source: Size, options: ResizeOptions, width: int, height: int) -> Tuple[Size, Rectangle]:
    percent_height = abs(height / source.height)
    percent_width = abs(width / source.width)

    box_height = height if height > 0 else round(source.height * percent_width)
    box_width = width if width > 0 else round(source.width * percent_height)

    target_x = 0
    target_y = 0

    if percent_height < percent_width:
        ratio = percent_height
        target_width = round(source.width * percent_height)
        target_height = box_height

        if options.position in _LEFTS:
            target_x = 0
        elif options.position in _RIGHTS:
            target_x = round(width - source.width * ratio)
        else:
            target_x = round((width - source.width * ratio) / 2)
    else:
        ratio = percent_width
        target_width = box_width
        target_height = round(source.height * percent_width)

        if options.position in _TOPS:
            target_y = 0
        elif options.position in _BOTTOMS:
            target_y = round(height - source.height * ratio)
        else:
            target_y = round((height - source.height * ratio) / 2)

    return _result(box_width, box_height, Rectangle(target_x, target_y, target_width, target_height))


def _box_pad(source: Size, options: ResizeOptions, width: int, height: int) -> Tuple[Size, Rectangle]:
    box_height = height if height > 0 else source.height
    box_width = width if width > 0 else source.width

    # Only upscaling keeps the source size; downscaling falls back to pad
    if not (source.width < box_width and source.height < box_height):
        return _pad(source, options, width, height)

    free_x = box_width - source.width
    free_y = box_height - source.height

    if options.position in _LEFTS:
        target_x = 0
    elif options.position in _RIGHTS:
        target_x = free_x
    else:
        target_x = free_x // 2

    if options.position in _TOPS:
        target_y = 0
    elif options.position in _BOTTOMS:
        target_y = free_y
    else:
        target_y = free_y // 2

    return _result(box_width, box_height, Rectangle(target_x, target_y, source.width, source.height))


def _max(source: Size, width: int, height: int) -> Tuple[Size, Rectangle]:
    target_width = width
    target_height = height

    percent_height = abs(height / source.height)
    percent_width = abs(width / source.width)

    if percent_height < percent_width:
        target_width = round(source.width * percent_height)
    else:
        target_height = round(source.height * percent_width)

    return _result(target_width, target_height, Rectangle(0, 0, target_width, target_height))


def _min(source: Size, width: int, height: int) -> Tuple[Size, Rectangle]:
    # Never upscale
    if width > source.width or height > source.height:
        return _result(source.width, source.height, Rectangle(0, 0, source.width, source.height))

    target_width = width
    target_height = height

    width_diff = source.width - width
    height_diff = source.height - height

    if width_diff < height_diff:
        target_height = round(width * source.height / source.width)
    elif width_diff > height_diff:
        target_width = round(height * source.width / source.height)
    elif height > width:
        target_height = round(source.height * width / source.width)
    else:
        target_width = round(source.width * height / source.height)

    return _result(target_width, target_height, Rectangle(0, 0, target_width, target_height))
