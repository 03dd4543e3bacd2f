"""
Resize driven by request commands, reconciling EXIF orientation with the
requested geometry.
"""
from dataclasses import replace
from typing import Optional
import logging

from ..commands.collection import CommandCollection
from ..commands.converters import ValueType
from ..commands.culture import Culture
from ..commands.parser import CommandParser
from ..core.interfaces import (
    AnchorPosition,
    IImageWebProcessor,
    IResampler,
    Resampler,
    ResizeMode,
    ResizeOptions,
    Size,
    TransformOutcome,
)
from ..image.formatted import FormattedImage
from ..image.orientation import IDENTITY, OrientationResolver, OrientationTransform
from ..image.resampler import PillowResampler

logger = logging.getLogger(__name__)


class ResizeWebProcessor(IImageWebProcessor):
    """
    Resizes images from the width, height, mode, anchor and sampler commands.

    Unless orient=false is given, the EXIF orientation is corrected first. A
    correction that rotates by 90 or 270 degrees swaps the requested width
    and height, so the request is read against the stored pixel grid.
    """

    WIDTH = "width"
    HEIGHT = "height"
    XY = "xy"
    XY_ALIAS = "rxy"
    MODE = "rmode"
    MODE_ALIAS = "mode"
    SAMPLER = "sampler"
    SAMPLER_ALIAS = "rsampler"
    ANCHOR = "ranchor"
    ANCHOR_ALIAS = "anchor"
    COLOR = "rcolor"
    ORIENT = "orient"
    ORIENT_ALIAS = "rorient"

    COMMANDS = (
        WIDTH, HEIGHT, XY, XY_ALIAS, MODE, MODE_ALIAS, SAMPLER, SAMPLER_ALIAS,
        ANCHOR, ANCHOR_ALIAS, COLOR, ORIENT, ORIENT_ALIAS,
    )

    DEFAULT_MODE = ResizeMode.CROP
    DEFAULT_SAMPLER = Resampler.BICUBIC
    DEFAULT_ANCHOR = AnchorPosition.CENTER

    def __init__(self, resampler: Optional[IResampler] = None):
        self.resampler = resampler or PillowResampler()

    def process(
        self,
        image: FormattedImage,
        commands: CommandCollection,
        parser: CommandParser,
        culture: Culture
    ) -> TransformOutcome:
        """
        Correct orientation and resize image in place.

        Returns:
            TransformOutcome describing the final geometry
        """
        orient = parser.get_value(commands, (self.ORIENT, self.ORIENT_ALIAS), ValueType.BOOL, True, culture)
        transform = OrientationResolver.fix(image) if orient else IDENTITY

        options = self.get_resize_options(commands, parser, culture)
        if not transform.is_identity:
            options = self._reorient(options, transform)

        outcome = dict(
            rotation=transform.rotation,
            flip_horizontal=transform.flip_horizontal,
            flip_vertical=transform.flip_vertical,
        )

        if options.size.width == 0 and options.size.height == 0:
            return TransformOutcome(image.width, image.height, **outcome)

        image.image, canvas, rect = self.resampler.resize(image.image, options)
        logger.debug(f"Resized to {image.width}x{image.height} ({options.mode.name}, {options.sampler.name})")
        return TransformOutcome(image.width, image.height, canvas=canvas, rectangle=rect, **outcome)

    def get_resize_options(
        self,
        commands: CommandCollection,
        parser: CommandParser,
        culture: Culture
    ) -> ResizeOptions:
        """Read the resize commands, falling back to defaults for bad values."""
        width = parser.get_value(commands, self.WIDTH, ValueType.UINT, 0, culture)
        height = parser.get_value(commands, self.HEIGHT, ValueType.UINT, 0, culture)
        xy = parser.get_value(commands, (self.XY, self.XY_ALIAS), ValueType.FLOAT_ARRAY, (), culture)

        return ResizeOptions(
            size=Size(width, height),
            mode=parser.get_value(commands, (self.MODE, self.MODE_ALIAS), ResizeMode, self.DEFAULT_MODE, culture),
            position=parser.get_value(
                commands, (self.ANCHOR, self.ANCHOR_ALIAS), AnchorPosition, self.DEFAULT_ANCHOR, culture
            ),
            center=tuple(xy) if len(xy) == 2 else None,
            sampler=parser.get_value(
                commands, (self.SAMPLER, self.SAMPLER_ALIAS), Resampler, self.DEFAULT_SAMPLER, culture
            ),
            pad_color=parser.get_value(commands, self.COLOR, ValueType.COLOR, None, culture),
        )

    @staticmethod
    def _reorient(options: ResizeOptions, transform: OrientationTransform) -> ResizeOptions:
        """Express options given for the stored grid against the corrected one."""
        center = options.center
        if center is not None:
            center = transform.map_point(*center)

        return replace(
            options,
            size=options.size.swapped() if transform.swaps_axes else options.size,
            position=transform.map_anchor(options.position),
            center=center,
        )
