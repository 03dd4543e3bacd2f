"""
Flattening of transparent images onto a solid color.
"""
from typing import Optional
from PIL import Image
import logging

from ..commands.collection import CommandCollection
from ..commands.converters import ValueType
from ..commands.culture import Culture
from ..commands.parser import CommandParser
from ..core.interfaces import IImageWebProcessor, TransformOutcome
from ..image.formatted import FormattedImage

logger = logging.getLogger(__name__)


class BackgroundColorWebProcessor(IImageWebProcessor):
    """Composites the image over the color given by bgcolor."""

    COLOR = "bgcolor"

    COMMANDS = (COLOR,)

    def process(
        self,
        image: FormattedImage,
        commands: CommandCollection,
        parser: CommandParser,
        culture: Culture
    ) -> Optional[TransformOutcome]:
        color = parser.get_value(commands, self.COLOR, ValueType.COLOR, None, culture)
        if color is None:
            return None

        source = image.image.convert("RGBA")
        background = Image.new("RGBA", source.size, color)
        flattened = Image.alpha_composite(background, source)

        # Keep the alpha channel only when the background itself is translucent
        image.image = flattened if color[3] < 255 else flattened.convert("RGB")
        logger.debug(f"Background color {color} applied")
        return None
