"""Cover generator: sequences seed, background and text onto one canvas."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

from loguru import logger

from covergen.core.config import AppConfig, CoverSettings, ThemeConfig
from covergen.core.models import Color, CoverResult, Mode
from covergen.render.background import render_grid, render_solid
from covergen.render.canvas import Canvas
from covergen.render.colors import resolve_color
from covergen.render.fonts import FontLocator, ThemeFontLocator, resolve_font
from covergen.render.hsb import hsb_to_rgb
from covergen.render.pattern import make_pattern
from covergen.render.seed import derive_seed
from covergen.render.text import TextColors, TextLayoutEngine


class CoverGenerator:
    """Builds placeholder covers from title, author and call number.

    Each call owns its own canvas, which is released before returning
    whether rendering succeeded or not.
    """

    def __init__(
        self,
        settings: CoverSettings | Mapping[str, Any] | None = None,
        *,
        locator: FontLocator | None = None,
        fallback_font: bool = True,
        strict_fonts: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        if not isinstance(settings, CoverSettings):
            settings = CoverSettings.from_overrides(settings)
        self.settings = settings
        self.locator = locator or ThemeFontLocator.from_config(ThemeConfig())
        self.fallback_font = fallback_font
        self.strict_fonts = strict_fonts
        self.rng = rng

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        overrides: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> CoverGenerator:
        """Create a generator from loaded app config plus per-call overrides."""
        kwargs.setdefault("locator", ThemeFontLocator.from_config(config.themes))
        kwargs.setdefault("fallback_font", config.themes.fallback_font)
        return cls(config.cover.merged(overrides), **kwargs)

    def accent_color(self, seed: int, canvas: Canvas) -> Color:
        s = self.settings
        if s.accent_color.lower() == "random":
            return canvas.allocate(hsb_to_rgb(seed % 256, s.saturation, s.lightness))
        return resolve_color(s.accent_color, canvas)

    def render(
        self,
        title: str | None,
        author: str | None,
        call_number: str | None = None,
    ) -> CoverResult:
        """Render a cover and report how each element was drawn."""
        s = self.settings
        title_font = resolve_font(s.title_font, self.locator, self.fallback_font, self.strict_fonts)
        author_font = resolve_font(s.author_font, self.locator, self.fallback_font, self.strict_fonts)

        with Canvas(s.size) as canvas:
            # Base colour first: palette index 0 is the background.
            resolve_color(s.base_color, canvas)
            colors = TextColors(
                title_fill=resolve_color(s.title_fill_color, canvas),
                title_border=resolve_color(s.title_border_color, canvas),
                author_fill=resolve_color(s.author_fill_color, canvas),
                author_border=resolve_color(s.author_border_color, canvas),
            )
            text = TextLayoutEngine(canvas, s, title_font, author_font, colors)

            box = s.size / 8
            seed = derive_seed(title, call_number, self.rng)
            accent = self.accent_color(seed, canvas)
            pattern = None
            if s.mode == Mode.SOLID.value:
                render_solid(canvas, accent)
            else:
                pattern = make_pattern(seed)
                render_grid(canvas, pattern, accent, s.size / 2, box)
            logger.debug(f"Cover seed={seed} mode={s.mode} pattern={pattern}")

            title_layout = text.draw_title(title, box) if title is not None else None
            author_layout = text.draw_author(author) if author is not None else None
            image = canvas.encode()

        return CoverResult(
            image=image,
            seed=seed,
            mode=Mode(s.mode),
            pattern=pattern,
            title=title_layout,
            author=author_layout,
        )

    def generate(
        self,
        title: str | None,
        author: str | None,
        call_number: str | None = None,
    ) -> bytes:
        """Return the PNG bytes of a cover."""
        return self.render(title, author, call_number).image


def generate_cover(
    title: str | None,
    author: str | None,
    call_number: str | None = None,
    **overrides: Any,
) -> bytes:
    """Generate a cover with default themes and the given setting overrides."""
    return CoverGenerator(overrides).generate(title, author, call_number)
