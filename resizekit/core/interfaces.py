"""
Abstract interfaces following Interface Segregation Principle (SOLID).
Defines contracts and shared data types for all resizekit components.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from PIL import Image

    from ..commands.collection import CommandCollection
    from ..commands.culture import Culture
    from ..commands.parser import CommandParser
    from ..image.formatted import FormattedImage


class OrientationMode(IntEnum):
    """EXIF orientation codes."""
    UNKNOWN = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3
    BOTTOM_LEFT = 4
    LEFT_TOP = 5
    RIGHT_TOP = 6
    RIGHT_BOTTOM = 7
    LEFT_BOTTOM = 8

    @classmethod
    def from_code(cls, code: Any) -> "OrientationMode":
        """Map a raw EXIF value to a known mode, UNKNOWN for anything else."""
        try:
            return cls(int(code))
        except (TypeError, ValueError):
            return cls.UNKNOWN


class ResizeMode(Enum):
    """How mismatched aspect ratios are reconciled."""
    CROP = "Crop"
    PAD = "Pad"
    BOX_PAD = "BoxPad"
    MAX = "Max"
    MIN = "Min"
    STRETCH = "Stretch"


class AnchorPosition(Enum):
    """Region of the image kept by crop and pad based modes."""
    CENTER = "Center"
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"
    TOP_LEFT = "TopLeft"
    TOP_RIGHT = "TopRight"
    BOTTOM_RIGHT = "BottomRight"
    BOTTOM_LEFT = "BottomLeft"


class Resampler(Enum):
    """Resampling kernels accepted by the sampler command."""
    BICUBIC = "Bicubic"
    BOX = "Box"
    CATMULL_ROM = "CatmullRom"
    HERMITE = "Hermite"
    LANCZOS2 = "Lanczos2"
    LANCZOS3 = "Lanczos3"
    LANCZOS5 = "Lanczos5"
    LANCZOS8 = "Lanczos8"
    MITCHELL_NETRAVALI = "MitchellNetravali"
    NEAREST_NEIGHBOR = "NearestNeighbor"
    ROBIDOUX = "Robidoux"
    ROBIDOUX_SHARP = "RobidouxSharp"
    SPLINE = "Spline"
    TRIANGLE = "Triangle"
    WELCH = "Welch"


@dataclass(frozen=True)
class Size:
    """Width and height in pixels."""
    width: int
    height: int

    def swapped(self) -> "Size":
        return Size(self.height, self.width)


@dataclass(frozen=True)
class Rectangle:
    """Placement of the scaled source on the output canvas."""
    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass(frozen=True)
class ResizeOptions:
    """Everything the resampling capability needs for one resize."""
    size: Size
    mode: ResizeMode = ResizeMode.CROP
    position: AnchorPosition = AnchorPosition.CENTER
    center: Optional[Tuple[float, float]] = None
    sampler: Resampler = Resampler.BICUBIC
    pad_color: Optional[Tuple[int, int, int, int]] = None


@dataclass(frozen=True)
class TransformOutcome:
    """Final geometry of an image and the operations that produced it."""
    width: int
    height: int
    rotation: int = 0
    flip_horizontal: bool = False
    flip_vertical: bool = False
    canvas: Optional[Size] = None
    rectangle: Optional[Rectangle] = None

    @property
    def resized(self) -> bool:
        return self.canvas is not None


class ICommandConverter(ABC):
    """Interface for converting a raw command value into a typed value."""

    value_type = None

    @abstractmethod
    def convert(self, value: str, culture: "Culture", target: Any = None) -> Any:
        """Convert value or raise FormatError."""
        pass


class IResampler(ABC):
    """Interface for the pixel resampling capability."""

    @abstractmethod
    def resize(
        self,
        image: "Image.Image",
        options: ResizeOptions
    ) -> Tuple["Image.Image", Size, Rectangle]:
        """Resize image, returning it with the canvas size and placement used."""
        pass


class IImageWebProcessor(ABC):
    """Interface for processors driven by request commands."""

    COMMANDS: Tuple[str, ...] = ()

    @abstractmethod
    def process(
        self,
        image: "FormattedImage",
        commands: "CommandCollection",
        parser: "CommandParser",
        culture: "Culture"
    ) -> Optional[TransformOutcome]:
        """Apply the commands this processor understands to image."""
        pass
