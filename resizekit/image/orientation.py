"""
Image orientation correction using EXIF data.
Follows Single Responsibility Principle - only handles orientation.
"""
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
from PIL import Image
import logging

from ..core.interfaces import AnchorPosition, OrientationMode

if TYPE_CHECKING:
    from .formatted import FormattedImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrientationTransform:
    """Clockwise rotation followed by optional flips."""
    rotation: int = 0
    flip_horizontal: bool = False
    flip_vertical: bool = False

    @property
    def is_identity(self) -> bool:
        return self.rotation == 0 and not self.flip_horizontal and not self.flip_vertical

    @property
    def swaps_axes(self) -> bool:
        return self.rotation in (90, 270)

    def apply(self, img: Image.Image) -> Image.Image:
        """Return the corrected image, or img itself for the identity."""
        # Pillow's ROTATE_* constants turn counter-clockwise
        if self.rotation == 90:
            img = img.transpose(Image.Transpose.ROTATE_270)
        elif self.rotation == 180:
            img = img.transpose(Image.Transpose.ROTATE_180)
        elif self.rotation == 270:
            img = img.transpose(Image.Transpose.ROTATE_90)
        if self.flip_horizontal:
            img = img.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
        if self.flip_vertical:
            img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return img

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        """Map a normalized point of the stored image onto the corrected one."""
        if self.rotation == 90:
            x, y = 1 - y, x
        elif self.rotation == 180:
            x, y = 1 - x, 1 - y
        elif self.rotation == 270:
            x, y = y, 1 - x
        if self.flip_horizontal:
            x = 1 - x
        if self.flip_vertical:
            y = 1 - y
        return x, y

    def map_anchor(self, anchor: AnchorPosition) -> AnchorPosition:
        x, y = self.map_point(*_ANCHOR_POINTS[anchor])
        return _POINT_ANCHORS[(x, y)]


_ANCHOR_POINTS = {
    AnchorPosition.TOP_LEFT: (0.0, 0.0),
    AnchorPosition.TOP: (0.5, 0.0),
    AnchorPosition.TOP_RIGHT: (1.0, 0.0),
    AnchorPosition.LEFT: (0.0, 0.5),
    AnchorPosition.CENTER: (0.5, 0.5),
    AnchorPosition.RIGHT: (1.0, 0.5),
    AnchorPosition.BOTTOM_LEFT: (0.0, 1.0),
    AnchorPosition.BOTTOM: (0.5, 1.0),
    AnchorPosition.BOTTOM_RIGHT: (1.0, 1.0),
}
_POINT_ANCHORS = {point: anchor for anchor, point in _ANCHOR_POINTS.items()}

IDENTITY = OrientationTransform()


class OrientationResolver:
    """Resolves EXIF orientation codes to transforms and applies them."""

    _TRANSFORMS = {
        OrientationMode.UNKNOWN: IDENTITY,
        OrientationMode.TOP_LEFT: IDENTITY,
        OrientationMode.TOP_RIGHT: OrientationTransform(0, flip_horizontal=True),
        OrientationMode.BOTTOM_RIGHT: OrientationTransform(180),
        OrientationMode.BOTTOM_LEFT: OrientationTransform(180, flip_horizontal=True),
        OrientationMode.LEFT_TOP: OrientationTransform(90, flip_horizontal=True),
        OrientationMode.RIGHT_TOP: OrientationTransform(90),
        OrientationMode.RIGHT_BOTTOM: OrientationTransform(270, flip_horizontal=True),
        OrientationMode.LEFT_BOTTOM: OrientationTransform(270),
    }

    @classmethod
    def resolve(cls, code) -> OrientationTransform:
        """Get the correction for an orientation code."""
        return cls._TRANSFORMS[OrientationMode.from_code(code)]

    @classmethod
    def fix(cls, image: "FormattedImage") -> OrientationTransform:
        """
        Correct the pixels of image and mark its metadata as upright.

        Running fix a second time is a no-op.

        Returns:
            The transform that was applied
        """
        orientation = image.orientation
        transform = cls.resolve(orientation)
        if transform.is_identity:
            return transform

        image.image = transform.apply(image.image)
        image.orientation = OrientationMode.TOP_LEFT
        logger.debug(f"Corrected orientation {orientation.name}: {transform}")
        return transform
