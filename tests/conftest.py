"""Pytest configuration and fixtures."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from covergen.core.config import CoverSettings
from covergen.render.canvas import Canvas
from covergen.render.colors import resolve_color
from covergen.render.fonts import FontRef, ThemeFontLocator
from covergen.render.generator import CoverGenerator
from covergen.render.text import TextColors, TextLayoutEngine


@pytest.fixture
def settings() -> CoverSettings:
    """Default cover settings."""
    return CoverSettings()


@pytest.fixture
def canvas(settings: CoverSettings):
    """A canvas with the default base colour registered first."""
    with Canvas(settings.size) as c:
        resolve_color(settings.base_color, c)
        yield c


@pytest.fixture
def bundled_font() -> FontRef:
    """A font reference that always falls back to Pillow's bundled font."""
    return FontRef(name="missing.ttf", path=None, fallback=True)


@pytest.fixture
def empty_locator(tmp_path: Path) -> ThemeFontLocator:
    """A theme locator pointing at an empty theme directory."""
    return ThemeFontLocator(tmp_path / "themes", ["default"])


@pytest.fixture
def engine(canvas: Canvas, settings: CoverSettings, bundled_font: FontRef) -> TextLayoutEngine:
    """A text engine with the default colours resolved on ``canvas``."""
    colors = TextColors(
        title_fill=resolve_color(settings.title_fill_color, canvas),
        title_border=resolve_color(settings.title_border_color, canvas),
        author_fill=resolve_color(settings.author_fill_color, canvas),
        author_border=resolve_color(settings.author_border_color, canvas),
    )
    return TextLayoutEngine(canvas, settings, bundled_font, bundled_font, colors)


@pytest.fixture
def generator(empty_locator: ThemeFontLocator) -> CoverGenerator:
    """A default generator that uses the bundled fallback font."""
    return CoverGenerator(locator=empty_locator, rng=random.Random(7))
