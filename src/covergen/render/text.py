"""Title wrapping, author fitting and outlined text drawing."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from covergen.core.config import CoverSettings
from covergen.core.models import (
    NO_COLOR,
    AuthorLayout,
    Color,
    ColorHandle,
    DrawOutcome,
    TextRun,
    TitleLayout,
)
from covergen.render.canvas import Canvas
from covergen.render.fonts import FontRef, load_font

ELLIPSIS = "..."

# One pixel in each cardinal direction: up, down, left, right.
OUTLINE_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class TextColors:
    title_fill: Color = NO_COLOR
    title_border: Color = NO_COLOR
    author_fill: Color = NO_COLOR
    author_border: Color = NO_COLOR


class TextLayoutEngine:
    """Places title and author text on a canvas."""

    def __init__(
        self,
        canvas: Canvas,
        settings: CoverSettings,
        title_font: FontRef,
        author_font: FontRef,
        colors: TextColors,
    ) -> None:
        self.canvas = canvas
        self.settings = settings
        self.title_font = title_font
        self.author_font = author_font
        self.colors = colors

    def text_width(self, text: str, font_ref: FontRef, size: int) -> int:
        """Pixel width of ``text``; 0 when the font cannot be loaded."""
        font = load_font(font_ref, size)
        if font is None:
            return 0
        return self.canvas.text_width(text, font)

    def draw_title(self, title: str, line_height: float) -> TitleLayout:
        """Greedy word wrap of the title, at most ``max_lines`` lines.

        When words are left over, an ellipsis one point larger is drawn on
        the line below the last one.
        """
        s = self.settings
        words = title.split(" ")
        line = ""
        line_count = 0
        i = 0
        runs: list[TextRun] = []
        while i < len(words) and line_count < s.max_lines - 1:
            previous = line
            line += words[i] + " "
            width = self.text_width(line.rstrip(" "), self.title_font, s.font_size)
            if width > s.wrap_width:
                runs.append(self._title_line(previous.rstrip(" "), line_height, line_count))
                line = words[i] + " "
                line_count += 1
            i += 1
        runs.append(self._title_line(line.rstrip(" "), line_height, line_count))

        layout = TitleLayout(lines=runs, truncated=i < len(words))
        if layout.truncated:
            logger.debug(f"Title truncated after {len(runs)} lines: {title!r}")
            layout.ellipsis = self.draw_text(
                ELLIPSIS,
                s.top_padding + s.max_lines * line_height,
                self.title_font,
                s.font_size + 1,
                self.colors.title_fill,
                self.colors.title_border,
            )
        return layout

    def _title_line(self, text: str, line_height: float, line_count: int) -> TextRun:
        return self.draw_text(
            text,
            self.settings.top_padding + line_height * line_count,
            self.title_font,
            self.settings.font_size,
            self.colors.title_fill,
            self.colors.title_border,
        )

    def draw_author(self, author: str) -> AuthorLayout:
        """Shrink the author line until it fits ``wrap_width`` or hits ``min_font_size``."""
        s = self.settings
        size = s.font_size
        while True:
            if size > s.min_font_size:
                size -= 1
            width = self.text_width(author, self.author_font, size)
            if width <= s.wrap_width or size <= s.min_font_size:
                break
        align = "left" if width > self.canvas.size else None
        run = self.draw_text(
            author,
            self.canvas.size - s.bottom_padding,
            self.author_font,
            size,
            self.colors.author_fill,
            self.colors.author_border,
            align,
        )
        return AuthorLayout(font_size=size, run=run)

    def draw_text(
        self,
        text: str,
        y: float,
        font_ref: FontRef,
        size: int,
        fill: Color,
        border: Color = NO_COLOR,
        align: str | None = None,
    ) -> TextRun:
        """Draw ``text`` with its baseline at ``y``, outlined when ``border`` is set."""
        font = load_font(font_ref, size)
        if font is None:
            logger.debug(f"No usable font {font_ref.name!r}, skipping {text!r}")
            return TextRun(text=text, y=y, font_size=size, outcome=DrawOutcome.SKIPPED_NO_FONT)

        width = self.canvas.text_width(text, font)
        if width > self.canvas.size:
            align = "left"
        if align is None:
            align = self.settings.text_align
        if align == "center":
            x = (self.canvas.size - width) / 2
        elif align == "right":
            x = self.canvas.size - width
        else:
            x = 0

        if not isinstance(fill, ColorHandle):
            outcome = DrawOutcome.SKIPPED_NO_COLOR
        else:
            if isinstance(border, ColorHandle):
                for dx, dy in OUTLINE_OFFSETS:
                    self.canvas.draw_text(x + dx, y + dy, text, font, border)
            self.canvas.draw_text(x, y, text, font, fill)
            outcome = DrawOutcome.DRAWN
        return TextRun(
            text=text, x=x, y=y, font_size=size, width=width, align=align, outcome=outcome
        )
