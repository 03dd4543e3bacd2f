"""
Orientation correction without resizing.
"""
from typing import Optional
import logging

from ..commands.collection import CommandCollection
from ..commands.converters import ValueType
from ..commands.culture import Culture
from ..commands.parser import CommandParser
from ..core.interfaces import IImageWebProcessor, TransformOutcome
from ..image.formatted import FormattedImage
from ..image.orientation import OrientationResolver

logger = logging.getLogger(__name__)


class AutoOrientWebProcessor(IImageWebProcessor):
    """Applies the EXIF orientation to the pixels when autoorient=true."""

    AUTO_ORIENT = "autoorient"

    COMMANDS = (AUTO_ORIENT,)

    def process(
        self,
        image: FormattedImage,
        commands: CommandCollection,
        parser: CommandParser,
        culture: Culture
    ) -> Optional[TransformOutcome]:
        if not parser.get_value(commands, self.AUTO_ORIENT, ValueType.BOOL, False, culture):
            return None

        transform = OrientationResolver.fix(image)
        return TransformOutcome(
            image.width,
            image.height,
            rotation=transform.rotation,
            flip_horizontal=transform.flip_horizontal,
            flip_vertical=transform.flip_vertical,
        )
