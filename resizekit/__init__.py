"""
ResizeKit - Query-driven image resizing.

Turns untyped request commands (as found in a URL query string) into typed,
validated parameters and applies them to images, including:
- Lenient command parsing with per-type converters
- EXIF orientation correction with width/height reconciliation
- Crop, pad, box-pad, max, min and stretch resize modes
- Background color, output format and quality selection

Example usage:
    from resizekit import ImagePipeline, FormattedImage

    pipeline = ImagePipeline()

    image = FormattedImage.open(Path("photo.jpg"))
    result = pipeline.process_query(image, "width=400&height=300&rmode=crop")
    print(f"Resized to {result.width}x{result.height}")
    result.image.save(Path("thumb.jpg"))

    # Typed access to individual commands
    from resizekit import CommandParser, ValueType, parse_query

    commands = parse_query("width=400")
    width = CommandParser().get_value(commands, "width", ValueType.UINT, 0)
"""

from .pipeline import ImagePipeline, PipelineConfig, ProcessingResult
from .core.interfaces import (
    OrientationMode,
    ResizeMode,
    AnchorPosition,
    Resampler,
    Size,
    Rectangle,
    ResizeOptions,
    TransformOutcome,
)
from .core.errors import (
    ResizeKitException,
    CommandError,
    FormatError,
    UnsupportedTypeError,
)
from .commands import (
    CommandParameter,
    CommandCollection,
    Culture,
    INVARIANT,
    ValueType,
    ConverterRegistry,
    default_registry,
    CommandParser,
    parse_query,
)
from .image import (
    FormattedImage,
    OrientationResolver,
    OrientationTransform,
    calculate_target_location_and_bounds,
    PillowResampler,
)
from .processors import (
    ResizeWebProcessor,
    AutoOrientWebProcessor,
    BackgroundColorWebProcessor,
    FormatWebProcessor,
    QualityWebProcessor,
)

__version__ = "1.0.0"

__all__ = [
    # Main facade
    "ImagePipeline",
    "PipelineConfig",
    "ProcessingResult",

    # Core types
    "OrientationMode",
    "ResizeMode",
    "AnchorPosition",
    "Resampler",
    "Size",
    "Rectangle",
    "ResizeOptions",
    "TransformOutcome",

    # Errors
    "ResizeKitException",
    "CommandError",
    "FormatError",
    "UnsupportedTypeError",

    # Commands
    "CommandParameter",
    "CommandCollection",
    "Culture",
    "INVARIANT",
    "ValueType",
    "ConverterRegistry",
    "default_registry",
    "CommandParser",
    "parse_query",

    # Image handling
    "FormattedImage",
    "OrientationResolver",
    "OrientationTransform",
    "calculate_target_location_and_bounds",
    "PillowResampler",

    # Processors
    "ResizeWebProcessor",
    "AutoOrientWebProcessor",
    "BackgroundColorWebProcessor",
    "FormatWebProcessor",
    "QualityWebProcessor",
]
