"""
Tests for resize geometry per mode.
"""
import pytest

from resizekit.core.interfaces import AnchorPosition, Rectangle, ResizeMode, ResizeOptions, Size
from resizekit.image import calculate_target_location_and_bounds

LANDSCAPE = Size(800, 600)


def bounds(source, width, height, mode, **kwargs):
    return calculate_target_location_and_bounds(source, ResizeOptions(Size(width, height), mode, **kwargs))


class TestResizePolicy:
    """Tests for shared policy behaviour."""

    def test_both_zero_raises(self):
        with pytest.raises(ValueError, match="must be greater than zero"):
            bounds(LANDSCAPE, 0, 0, ResizeMode.STRETCH)

    @pytest.mark.parametrize("source", [Size(0, 0), Size(0, 10), Size(10, 0)])
    def test_source_without_area_raises(self, source):
        with pytest.raises(ValueError, match="Source width"):
            bounds(source, 4, 0, ResizeMode.CROP)

    def test_zero_width_derived_from_aspect_ratio(self):
        canvas, rect = bounds(LANDSCAPE, 0, 300, ResizeMode.STRETCH)
        assert canvas == Size(400, 300)

    def test_zero_height_derived_from_aspect_ratio(self):
        canvas, rect = bounds(LANDSCAPE, 200, 0, ResizeMode.CROP)
        assert canvas == Size(200, 150)
        assert rect == Rectangle(0, 0, 200, 150)

    def test_derived_dimension_at_least_one(self):
        canvas, _ = bounds(Size(1000, 1), 10, 0, ResizeMode.STRETCH)
        assert canvas == Size(10, 1)


class TestStretch:
    """Tests for ResizeMode.STRETCH."""

    def test_ignores_aspect_ratio(self):
        canvas, rect = bounds(Size(1, 1), 4, 6, ResizeMode.STRETCH)

        assert canvas == Size(4, 6)
        assert rect == Rectangle(0, 0, 4, 6)


class TestCrop:
    """Tests for ResizeMode.CROP."""

    def test_center(self):
        canvas, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.CROP)

        assert canvas == Size(400, 400)
        assert rect == Rectangle(-67, 0, 534, 400)

    @pytest.mark.parametrize("anchor, x", [
        (AnchorPosition.LEFT, 0),
        (AnchorPosition.TOP_LEFT, 0),
        (AnchorPosition.RIGHT, -133),
        (AnchorPosition.BOTTOM_RIGHT, -133),
        (AnchorPosition.TOP, -67),
    ])
    def test_anchor_horizontal(self, anchor, x):
        _, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.CROP, position=anchor)
        assert rect.x == x

    @pytest.mark.parametrize("anchor, y", [
        (AnchorPosition.TOP, 0),
        (AnchorPosition.BOTTOM, -100),
        (AnchorPosition.CENTER, -50),
    ])
    def test_anchor_vertical(self, anchor, y):
        _, rect = bounds(Size(600, 800), 300, 300, ResizeMode.CROP, position=anchor)

        assert rect.y == y
        assert (rect.width, rect.height) == (300, 400)

    @pytest.mark.parametrize("center, x", [
        ((0.0, 0.5), 0),
        ((1.0, 0.5), -133),
        ((0.5, 0.5), -67),
    ])
    def test_center_coordinates_clamped(self, center, x):
        _, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.CROP, center=center)
        assert rect.x == x

    def test_center_overrides_anchor(self):
        _, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.CROP, center=(0.0, 0.0), position=AnchorPosition.RIGHT)
        assert rect.x == 0


class TestPad:
    """Tests for ResizeMode.PAD."""

    def test_center(self):
        canvas, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.PAD)

        assert canvas == Size(400, 400)
        assert rect == Rectangle(0, 50, 400, 300)

    @pytest.mark.parametrize("anchor, y", [
        (AnchorPosition.TOP, 0),
        (AnchorPosition.BOTTOM_LEFT, 100),
    ])
    def test_anchor(self, anchor, y):
        _, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.PAD, position=anchor)
        assert rect.y == y

    def test_portrait_pads_horizontally(self):
        canvas, rect = bounds(Size(600, 800), 400, 400, ResizeMode.PAD, position=AnchorPosition.RIGHT)

        assert canvas == Size(400, 400)
        assert rect == Rectangle(100, 0, 300, 400)


class TestBoxPad:
    """Tests for ResizeMode.BOX_PAD."""

    def test_upscale_keeps_source_size(self):
        canvas, rect = bounds(Size(100, 50), 400, 400, ResizeMode.BOX_PAD)

        assert canvas == Size(400, 400)
        assert rect == Rectangle(150, 175, 100, 50)

    def test_upscale_anchor(self):
        _, rect = bounds(Size(100, 50), 400, 400, ResizeMode.BOX_PAD, position=AnchorPosition.BOTTOM_RIGHT)
        assert rect == Rectangle(300, 350, 100, 50)

    def test_downscale_falls_back_to_pad(self):
        assert bounds(LANDSCAPE, 400, 400, ResizeMode.BOX_PAD) == bounds(LANDSCAPE, 400, 400, ResizeMode.PAD)


class TestMax:
    """Tests for ResizeMode.MAX."""

    def test_fits_within(self):
        canvas, rect = bounds(LANDSCAPE, 400, 400, ResizeMode.MAX)

        assert canvas == Size(400, 300)
        assert rect == Rectangle(0, 0, 400, 300)

    def test_portrait(self):
        canvas, _ = bounds(Size(600, 800), 400, 400, ResizeMode.MAX)
        assert canvas == Size(300, 400)


class TestMin:
    """Tests for ResizeMode.MIN."""

    def test_never_upscales(self):
        canvas, rect = bounds(LANDSCAPE, 1000, 100, ResizeMode.MIN)

        assert canvas == LANDSCAPE
        assert rect == Rectangle(0, 0, 800, 600)

    def test_shortest_distance(self):
        canvas, _ = bounds(LANDSCAPE, 400, 400, ResizeMode.MIN)
        assert canvas == Size(533, 400)

    def test_width_closer(self):
        canvas, _ = bounds(LANDSCAPE, 700, 100, ResizeMode.MIN)
        assert canvas == Size(700, 525)

    def test_equal_distance(self):
        canvas, _ = bounds(Size(500, 400), 400, 300, ResizeMode.MIN)
        assert canvas == Size(375, 300)
