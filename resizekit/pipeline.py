"""
ImagePipeline - Main facade for command driven image processing.
Orchestrates query parsing, processor selection and encoding.
Follows Facade Pattern for simplified API.
"""
from pathlib import Path
from typing import Dict, List, Optional, Union
from dataclasses import dataclass, field
import logging

from .commands.collection import CommandCollection
from .commands.culture import INVARIANT, Culture
from .commands.parser import CommandParser
from .commands.query import parse_query
from .core.interfaces import IImageWebProcessor, TransformOutcome
from .image.formatted import FormattedImage, find_format
from .processors import (
    AutoOrientWebProcessor,
    BackgroundColorWebProcessor,
    FormatWebProcessor,
    QualityWebProcessor,
    ResizeWebProcessor,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the processing pipeline."""
    culture: Culture = INVARIANT
    processors: List[IImageWebProcessor] = None
    presets: Optional[Dict[str, str]] = None

    def __post_init__(self):
        if self.processors is None:
            self.processors = [
                ResizeWebProcessor(),
                AutoOrientWebProcessor(),
                BackgroundColorWebProcessor(),
                FormatWebProcessor(),
                QualityWebProcessor(),
            ]


@dataclass
class ProcessingResult:
    """Processed image and the geometry changes applied to it."""
    image: FormattedImage
    outcomes: List[TransformOutcome] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


class ImagePipeline:
    """
    Main facade for processing images from request commands.

    Example:
        pipeline = ImagePipeline()

        # From a query string
        result = pipeline.process_query(image, "width=400&height=300&rmode=pad")

        # From file to file
        pipeline.process_file(Path("in.jpg"), Path("out.jpg"), "width=200")
    """

    def __init__(self, config: Optional[PipelineConfig] = None, parser: Optional[CommandParser] = None):
        self.config = config or PipelineConfig()
        self.parser = parser or CommandParser()

    def select_processors(self, commands: CommandCollection) -> List[IImageWebProcessor]:
        """
        Processors that recognise at least one command, ordered by where their
        first command appears in commands.
        """
        ranked = []
        for order, processor in enumerate(self.config.processors):
            positions = [commands.index_of(name) for name in processor.COMMANDS if name in commands]
            if positions:
                ranked.append((min(positions), order, processor))
        return [processor for _, _, processor in sorted(ranked, key=lambda item: item[:2])]

    def process(self, image: FormattedImage, commands: CommandCollection) -> ProcessingResult:
        """
        Run every matching processor against image.

        Args:
            image: Image to process, modified in place
            commands: Request commands

        Returns:
            ProcessingResult with the image and collected outcomes
        """
        result = ProcessingResult(image)
        for processor in self.select_processors(commands):
            outcome = processor.process(image, commands, self.parser, self.config.culture)
            if outcome is not None:
                result.outcomes.append(outcome)

        logger.debug(f"Processed {image!r} with {len(commands)} commands")
        return result

    def parse(self, query: str) -> CommandCollection:
        """Parse a query string using the configured presets."""
        return parse_query(query, self.config.presets)

    def process_query(self, image: FormattedImage, query: str) -> ProcessingResult:
        return self.process(image, self.parse(query))

    def process_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        query: str = ""
    ) -> Path:
        """
        Decode input_path, process it with query and encode to output_path.

        The output format follows the format command when given, otherwise the
        extension of output_path, otherwise the source format.

        Returns:
            Path to the written image
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        image = FormattedImage.open(input_path)
        commands = self.parse(query)
        if FormatWebProcessor.FORMAT not in commands:
            image.format = find_format(output_path.suffix) or image.format

        result = self.process(image, commands)
        result.image.save(output_path)

        logger.info(f"Processed {input_path.name} -> {output_path.name} ({result.width}x{result.height})")
        return output_path
