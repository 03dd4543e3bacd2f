"""
Tests for ImagePipeline class.
"""
import pytest
from io import BytesIO
from PIL import Image

from resizekit import (
    Culture,
    CommandCollection,
    FormattedImage,
    ImagePipeline,
    OrientationMode,
    PipelineConfig,
    ResizeWebProcessor,
    QualityWebProcessor,
)
from resizekit.core.interfaces import IImageWebProcessor


class RecordingProcessor(IImageWebProcessor):
    """Appends its label to a shared log when run."""

    def __init__(self, label, commands, log):
        self.label = label
        self.COMMANDS = commands
        self.log = log

    def process(self, image, commands, parser, culture):
        self.log.append(self.label)
        return None


class TestPipelineConfig:
    """Tests for PipelineConfig dataclass."""

    def test_default_processors(self):
        config = PipelineConfig()

        assert len(config.processors) == 5
        assert isinstance(config.processors[0], ResizeWebProcessor)
        assert config.presets is None

    def test_custom_processors(self):
        processor = QualityWebProcessor()
        config = PipelineConfig(processors=[processor])

        assert config.processors == [processor]


class TestImagePipeline:
    """Tests for ImagePipeline class."""

    def test_init_default(self):
        pipeline = ImagePipeline()

        assert pipeline.config is not None
        assert pipeline.parser.registry.frozen is True

    def test_select_processors_by_command_position(self):
        log = []
        first = RecordingProcessor("resize", ("width", "height"), log)
        second = RecordingProcessor("bgcolor", ("bgcolor",), log)
        unused = RecordingProcessor("format", ("format",), log)
        pipeline = ImagePipeline(PipelineConfig(processors=[first, second, unused]))
        commands = CommandCollection.from_pairs([("bgcolor", "red"), ("height", "10"), ("width", "10")])

        assert pipeline.select_processors(commands) == [second, first]

    def test_process_runs_in_command_order(self, make_image):
        log = []
        processors = [
            RecordingProcessor("a", ("a",), log),
            RecordingProcessor("b", ("b",), log),
        ]
        pipeline = ImagePipeline(PipelineConfig(processors=processors))

        pipeline.process_query(make_image(), "b=1&a=1")

        assert log == ["b", "a"]

    def test_process_without_commands(self, make_image):
        image = make_image(3, 2)

        result = ImagePipeline().process(image, CommandCollection())

        assert result.outcomes == []
        assert (result.width, result.height) == (3, 2)

    def test_process_query(self, make_image):
        image = make_image(800, 600)

        result = ImagePipeline().process_query(image, "?width=400&height=400&rmode=max&quality=70")

        assert (result.width, result.height) == (400, 300)
        assert result.image.quality == 70
        assert len(result.outcomes) == 1
        assert result.outcomes[0].resized is True

    def test_bgcolor_before_resize_pads_transparent(self, make_image):
        image = make_image(100, 50, color=(255, 0, 0, 255))

        result = ImagePipeline().process_query(image, "bgcolor=white&width=100&height=100&rmode=pad")

        assert result.image.image.getpixel((50, 0)) == (0, 0, 0)

    def test_resize_before_bgcolor_fills_padding(self, make_image):
        image = make_image(100, 50, color=(255, 0, 0, 255))

        result = ImagePipeline().process_query(image, "width=100&height=100&rmode=pad&bgcolor=white")

        assert result.image.image.getpixel((50, 0)) == (255, 255, 255)

    def test_presets(self, make_image):
        config = PipelineConfig(presets={"Thumb": "width=20&height=10&rmode=stretch"})
        pipeline = ImagePipeline(config)

        result = pipeline.process_query(make_image(100, 100), "preset=thumb&width=500")

        assert (result.width, result.height) == (20, 10)

    def test_presets_ignore_raw_commands(self, make_image):
        pipeline = ImagePipeline(PipelineConfig(presets={"thumb": "width=20"}))

        result = pipeline.process_query(make_image(100, 100), "width=50")

        assert (result.width, result.height) == (100, 100)

    def test_culture(self, make_image):
        pipeline = ImagePipeline(PipelineConfig(culture=Culture.get("de-DE")))

        result = pipeline.process_query(make_image(10, 10), "width=4,4&height=4&rmode=stretch")

        assert (result.width, result.height) == (4, 4)


class TestProcessFile:
    """Tests for file to file processing."""

    def test_resize_jpeg(self, sample_image, temp_dir):
        output = temp_dir / "out.jpg"

        result = ImagePipeline().process_file(sample_image, output, "width=200")

        assert result == output
        with Image.open(output) as img:
            assert img.format == "JPEG"
            assert img.size == (200, 150)

    def test_output_format_from_extension(self, sample_image, temp_dir):
        output = temp_dir / "out.png"

        ImagePipeline().process_file(sample_image, output, "width=100")

        with Image.open(output) as img:
            assert img.format == "PNG"

    def test_format_command_wins(self, sample_image, temp_dir):
        output = temp_dir / "out.png"

        ImagePipeline().process_file(sample_image, output, "width=100&format=webp")

        with Image.open(output) as img:
            assert img.format == "WEBP"

    def test_rotated_source(self, rotated_image, temp_dir):
        output = temp_dir / "rotated_out.jpg"

        ImagePipeline().process_file(rotated_image, output, "width=300&height=400")

        with Image.open(output) as img:
            assert img.size == (400, 300)
            assert img.getexif().get(0x0112) == int(OrientationMode.TOP_LEFT)

    def test_transparent_png_to_jpeg(self, png_image, temp_dir):
        output = temp_dir / "flat.jpg"

        ImagePipeline().process_file(png_image, output, "width=100&height=100")

        with Image.open(output) as img:
            assert img.mode == "RGB"
            assert img.size == (100, 100)

    def test_no_query_copies_image(self, png_image, temp_dir):
        output = temp_dir / "copy.png"

        ImagePipeline().process_file(str(png_image), str(output))

        reopened = FormattedImage.open(output)
        assert (reopened.width, reopened.height) == (400, 400)
        assert reopened.format == "PNG"


class TestFormattedImage:
    """Tests for FormattedImage encoding helpers."""

    def test_round_trip_bytes(self, make_image):
        image = make_image(3, 2, orientation=OrientationMode.BOTTOM_RIGHT)

        decoded = FormattedImage.from_bytes(image.to_bytes())

        assert (decoded.width, decoded.height) == (3, 2)
        assert decoded.orientation is OrientationMode.BOTTOM_RIGHT

    def test_open_keeps_orientation(self, rotated_image):
        image = FormattedImage.open(rotated_image)

        assert image.format == "JPEG"
        assert image.orientation is OrientationMode.RIGHT_TOP

    def test_no_exif_orientation_is_unknown(self, sample_image):
        assert FormattedImage.open(sample_image).orientation is OrientationMode.UNKNOWN

    @pytest.mark.parametrize("name, expected", [("jpg", "JPEG"), ("Tiff", "TIFF"), ("mpo", "JPEG"), ("svg", None)])
    def test_find_format(self, name, expected):
        from resizekit.image import find_format

        assert find_format(name) == expected


class TestMultiPictureJpeg:
    """Tests for camera JPEGs that Pillow decodes as MPO."""

    def test_decodes_as_jpeg(self, mpo_bytes):
        with Image.open(BytesIO(mpo_bytes)) as img:
            assert img.format == "MPO"

        assert FormattedImage.from_bytes(mpo_bytes).format == "JPEG"

    def test_quality_honoured(self, mpo_bytes):
        pipeline = ImagePipeline()

        low = pipeline.process_query(FormattedImage.from_bytes(mpo_bytes), "width=32&quality=5")
        high = pipeline.process_query(FormattedImage.from_bytes(mpo_bytes), "width=32&quality=100")

        assert len(low.image.to_bytes()) < len(high.image.to_bytes())

    def test_translucent_background_still_encodes(self, mpo_bytes):
        result = ImagePipeline().process_query(FormattedImage.from_bytes(mpo_bytes), "bgcolor=ff000080")

        assert result.image.image.mode == "RGBA"
        with Image.open(BytesIO(result.image.to_bytes())) as img:
            assert img.format == "JPEG"
            assert img.mode == "RGB"
