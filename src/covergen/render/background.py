"""Background painters: mirrored grid and solid fill."""

from __future__ import annotations

from covergen.core.models import Color, ColorHandle
from covergen.render.canvas import Canvas


def grid_boxes(pattern: str, half: float, box: float, size: int) -> list[tuple[float, float]]:
    """Return the top-left corners of every box the pattern switches on.

    The 16 cells are walked once per quadrant. Quadrant 0 grows left and
    down from the centre, 1 right and down, 2 left and up, 3 right and up,
    so the result is mirrored across both axes.
    """
    boxes = []
    for k in range(4):
        start_x = half if k % 2 else half - box
        x = start_x
        y = half if k < 2 else half - box
        u = box if k % 2 else -box
        v = box if k < 2 else -box
        for cell in pattern[:16]:
            if cell == "1":
                boxes.append((x, y))
            x += u
            if x >= size or x < 0:
                x = start_x
                y += v
    return boxes


def render_grid(canvas: Canvas, pattern: str, color: Color, half: float, box: float) -> int:
    """Paint the mirrored grid; returns the number of boxes filled."""
    if not isinstance(color, ColorHandle):
        return 0
    boxes = grid_boxes(pattern, half, box, canvas.size)
    for x, y in boxes:
        canvas.fill_rect(x, y, x + box - 1, y + box - 1, color)
    return len(boxes)


def render_solid(canvas: Canvas, color: Color) -> bool:
    """Fill the whole canvas with ``color``."""
    if not isinstance(color, ColorHandle):
        return False
    canvas.fill_rect(0, 0, canvas.size - 1, canvas.size - 1, color)
    return True
