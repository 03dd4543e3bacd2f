"""
Output format selection.
"""
from typing import Optional
import logging

from ..commands.collection import CommandCollection
from ..commands.culture import Culture
from ..commands.parser import CommandParser
from ..core.interfaces import IImageWebProcessor, TransformOutcome
from ..image.formatted import FormattedImage, find_format

logger = logging.getLogger(__name__)


class FormatWebProcessor(IImageWebProcessor):
    """Switches the encoding format from the format command."""

    FORMAT = "format"

    COMMANDS = (FORMAT,)

    def process(
        self,
        image: FormattedImage,
        commands: CommandCollection,
        parser: CommandParser,
        culture: Culture
    ) -> Optional[TransformOutcome]:
        requested = commands.get(self.FORMAT, "")
        output_format = find_format(requested)
        if output_format is None:
            logger.debug(f"Unsupported output format ignored: {requested!r}")
            return None

        image.format = output_format
        return None
