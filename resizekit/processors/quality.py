"""
Encoder quality selection.
"""
from typing import Optional

from ..commands.collection import CommandCollection
from ..commands.converters import ValueType
from ..commands.culture import Culture
from ..commands.parser import CommandParser
from ..core.interfaces import IImageWebProcessor, TransformOutcome
from ..image.formatted import FormattedImage


class QualityWebProcessor(IImageWebProcessor):
    """Sets the lossy encoder quality, clamped to 1-100."""

    QUALITY = "quality"

    COMMANDS = (QUALITY,)

    def process(
        self,
        image: FormattedImage,
        commands: CommandCollection,
        parser: CommandParser,
        culture: Culture
    ) -> Optional[TransformOutcome]:
        quality = parser.get_value(commands, self.QUALITY, ValueType.UINT, None, culture)
        if quality is not None:
            image.quality = min(100, max(1, quality))
        return None
