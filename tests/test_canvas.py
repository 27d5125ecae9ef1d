"""Tests for the palette canvas."""

import io

import pytest
from PIL import Image

from covergen.core.models import RGB
from covergen.exceptions import CanvasError
from covergen.render.canvas import MAX_COLORS, Canvas


@pytest.mark.parametrize("size", [0, -5])
def test_invalid_size_is_fatal(size):
    """A canvas that cannot be allocated raises CanvasError."""
    with pytest.raises(CanvasError):
        Canvas(size)


def test_first_color_is_background():
    """Palette index 0 fills every pixel of a fresh canvas."""
    with Canvas(16) as canvas:
        canvas.allocate((0, 0, 128))
        canvas.allocate((255, 0, 0))
        image = canvas.to_image()
    assert image.getpixel((0, 0)) == (0, 0, 128)
    assert image.getpixel((15, 15)) == (0, 0, 128)


def test_allocate_reuses_handles():
    """The same triple maps to the same handle."""
    with Canvas(8) as canvas:
        first = canvas.allocate((1, 2, 3))
        assert canvas.allocate(RGB(1, 2, 3)) is first
        assert canvas.colors == [RGB(1, 2, 3)]


def test_palette_limit():
    """A palette holds at most 256 colours."""
    with Canvas(4) as canvas:
        for i in range(MAX_COLORS):
            canvas.allocate((i, 0, 0))
        with pytest.raises(CanvasError):
            canvas.allocate((0, 1, 0))


def test_foreign_handle_is_rejected():
    """Handles cannot cross canvases."""
    with Canvas(8) as one, Canvas(8) as other:
        handle = one.allocate((255, 255, 255))
        with pytest.raises(CanvasError):
            other.fill_rect(0, 0, 1, 1, handle)


def test_fill_rect_is_inclusive():
    """Both corners of a filled rectangle are painted."""
    with Canvas(10) as canvas:
        canvas.allocate((255, 255, 255))
        black = canvas.allocate((0, 0, 0))
        canvas.fill_rect(2, 2, 4.9, 4.9, black)
        image = canvas.to_image()
    assert image.getpixel((2, 2)) == (0, 0, 0)
    assert image.getpixel((4, 4)) == (0, 0, 0)
    assert image.getpixel((5, 5)) == (255, 255, 255)


def test_encode_png():
    """Encoding yields a decodable PNG of the canvas size."""
    with Canvas(12) as canvas:
        canvas.allocate((10, 20, 30))
        data = canvas.encode()
    assert data.startswith(b"\x89PNG")
    with Image.open(io.BytesIO(data)) as image:
        assert image.size == (12, 12)
        assert image.convert("RGB").getpixel((6, 6)) == (10, 20, 30)


def test_closed_canvas_rejects_drawing():
    """A released canvas cannot be used again."""
    canvas = Canvas(8)
    canvas.close()
    assert canvas.closed
    with pytest.raises(CanvasError):
        canvas.allocate((0, 0, 0))
    canvas.close()
