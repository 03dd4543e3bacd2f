"""
Example: Query-driven Resizing with ResizeKit

This example demonstrates how to:
- Resize a file from a URL style query string
- Use presets so only named sizes can be requested
- Read individual typed commands with the parser
"""
from pathlib import Path
from resizekit import (
    ImagePipeline,
    PipelineConfig,
    FormattedImage,
    CommandParser,
    Culture,
    ValueType,
    ResizeMode,
    parse_query,
)


def resize_file(source: Path, query: str):
    """Resize a single file using the facade."""
    pipeline = ImagePipeline()

    target = source.with_name(f"{source.stem}_resized{source.suffix}")
    pipeline.process_file(source, target, query)
    print(f"Written: {target}")

    return target


def resize_with_presets(source: Path):
    """Only allow the sizes named in the presets."""
    config = PipelineConfig(presets={
        "thumb": "width=150&height=150&rmode=crop",
        "banner": "width=1200&height=300&rmode=pad&rcolor=white",
    })
    pipeline = ImagePipeline(config)

    for name in config.presets:
        image = FormattedImage.open(source)
        result = pipeline.process_query(image, f"preset={name}")
        print(f"{name}: {result.width}x{result.height}")


def read_commands(query: str):
    """Parse individual commands leniently."""
    commands = parse_query(query)
    parser = CommandParser()
    german = Culture.get("de-DE")

    width = parser.get_value(commands, "width", ValueType.UINT, 0, german)
    mode = parser.get_value(commands, ("rmode", "mode"), ResizeMode, ResizeMode.CROP)
    print(f"Width: {width}, mode: {mode.value}")


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python resize_query.py <image_path> [query]")
        sys.exit(1)

    source = Path(sys.argv[1])
    if not source.exists():
        print(f"File not found: {source}")
        sys.exit(1)

    query = sys.argv[2] if len(sys.argv) > 2 else "width=400&height=300&rmode=max"
    resize_file(source, query)
    resize_with_presets(source)
    read_commands(query)
