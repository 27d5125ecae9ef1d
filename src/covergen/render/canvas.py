"""Palette raster surface backed by a Pillow "P" mode image."""

from __future__ import annotations

import io
import itertools
from typing import Any

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from covergen.core.models import RGB, ColorHandle
from covergen.exceptions import CanvasError, RenderError

MAX_COLORS = 256

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont

_canvas_ids = itertools.count(1)


class Canvas:
    """A square drawing surface with its own colour table.

    The first colour allocated becomes the background, since every pixel
    starts at palette index 0. Handles are only valid on the canvas that
    issued them.
    """

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or size <= 0:
            raise CanvasError(f"Cannot initialize a canvas of size {size!r}")
        try:
            self._image = Image.new("P", (size, size), 0)
        except (ValueError, TypeError, MemoryError) as exc:
            raise CanvasError(f"Cannot initialize a {size}x{size} canvas: {exc}") from exc
        self.size = size
        self.id = next(_canvas_ids)
        self._draw = ImageDraw.Draw(self._image)
        self._palette: list[RGB] = []
        self._handles: dict[RGB, ColorHandle] = {}
        self._closed = False
        logger.debug(f"Created canvas #{self.id} ({size}x{size})")

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def colors(self) -> list[RGB]:
        return list(self._palette)

    def _check_open(self) -> None:
        if self._closed:
            raise CanvasError(f"Canvas #{self.id} has been released")

    def _check_handle(self, handle: ColorHandle) -> None:
        if handle.canvas_id != self.id:
            raise CanvasError(
                f"Colour handle from canvas #{handle.canvas_id} used on canvas #{self.id}"
            )

    def _sync_palette(self) -> None:
        flat = [channel for rgb in self._palette for channel in rgb]
        self._image.putpalette(flat or [0, 0, 0])

    def allocate(self, rgb: RGB | tuple[int, int, int]) -> ColorHandle:
        """Register a colour, reusing the existing handle for a known triple."""
        self._check_open()
        rgb = RGB(*(max(0, min(255, int(c))) for c in rgb))
        handle = self._handles.get(rgb)
        if handle is not None:
            return handle
        if len(self._palette) >= MAX_COLORS:
            raise CanvasError(f"Canvas #{self.id} palette is full ({MAX_COLORS} colours)")
        handle = ColorHandle(rgb=rgb, index=len(self._palette), canvas_id=self.id)
        self._palette.append(rgb)
        self._handles[rgb] = handle
        self._sync_palette()
        return handle

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float, handle: ColorHandle) -> None:
        """Fill the rectangle with inclusive corners; coordinates are truncated."""
        self._check_open()
        self._check_handle(handle)
        self._draw.rectangle([int(x0), int(y0), int(x1), int(y1)], fill=handle.index)

    def text_width(self, text: str, font: Font) -> int:
        left, _, right, _ = font.getbbox(text)
        return int(right - left)

    def draw_text(self, x: float, y: float, text: str, font: Font, handle: ColorHandle) -> None:
        """Draw ``text`` with its baseline at ``y``."""
        self._check_open()
        self._check_handle(handle)
        if not text:
            return
        self._draw.text((int(x), int(y)), text, fill=handle.index, font=font, anchor="ls")

    def encode(self, fmt: str = "PNG") -> bytes:
        self._check_open()
        self._sync_palette()
        buf = io.BytesIO()
        try:
            self._image.save(buf, format=fmt)
        except (OSError, KeyError, ValueError) as exc:
            raise RenderError(f"Failed to encode canvas as {fmt}: {exc}") from exc
        return buf.getvalue()

    def to_image(self) -> Image.Image:
        """Return an RGB copy of the current surface."""
        self._check_open()
        self._sync_palette()
        return self._image.convert("RGB")

    def close(self) -> None:
        if not self._closed:
            self._image.close()
            self._closed = True
            logger.debug(f"Released canvas #{self.id}")

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
