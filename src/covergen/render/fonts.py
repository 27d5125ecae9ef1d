"""Font lookup inside a theme hierarchy, and font loading."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from loguru import logger
from PIL import ImageFont

from covergen.core.config import ThemeConfig
from covergen.exceptions import FontError
from covergen.render.canvas import Font

FONT_SUBDIR = Path("css") / "font"


class FontLocator(Protocol):
    def find(self, font_name: str) -> Path | None:
        """Return the absolute path of ``font_name``, or None when missing."""


class ThemeFontLocator:
    """Finds fonts under ``<base_dir>/<theme>/css/font``, first theme wins."""

    def __init__(self, base_dir: Path, chain: list[str]) -> None:
        self.base_dir = Path(base_dir)
        self.chain = list(chain)

    @classmethod
    def from_config(cls, themes: ThemeConfig) -> ThemeFontLocator:
        return cls(themes.base_dir, themes.chain)

    def candidates(self, font_name: str) -> list[Path]:
        return [self.base_dir / theme / FONT_SUBDIR / font_name for theme in self.chain]

    def find(self, font_name: str) -> Path | None:
        direct = Path(font_name)
        if direct.is_file():
            return direct.resolve()
        for candidate in self.candidates(font_name):
            if candidate.is_file():
                return candidate.resolve()
        logger.warning(f"Font {font_name!r} not found in themes {self.chain} under {self.base_dir}")
        return None

    def require(self, font_name: str) -> Path:
        path = self.find(font_name)
        if path is None:
            raise FontError(f"Font {font_name!r} not found in any theme")
        return path


@dataclass(frozen=True)
class FontRef:
    """The font chosen for one text role."""

    name: str
    path: Path | None
    fallback: bool = False

    @property
    def usable(self) -> bool:
        return self.path is not None or self.fallback


def resolve_font(
    name: str, locator: FontLocator, fallback: bool = True, strict: bool = False
) -> FontRef:
    path = locator.find(name)
    if path is None and strict:
        raise FontError(f"Font {name!r} could not be resolved")
    return FontRef(name=name, path=path, fallback=fallback)


@lru_cache(maxsize=128)
def _truetype(path: str, size: int) -> Font | None:
    try:
        return ImageFont.truetype(path, size)
    except OSError as exc:
        logger.warning(f"Cannot load font {path}: {exc}")
        return None


@lru_cache(maxsize=32)
def _bundled(size: int) -> Font:
    return ImageFont.load_default(size=size)


def load_font(ref: FontRef, size: int) -> Font | None:
    """Load ``ref`` at ``size``; None means there is no usable font."""
    font = _truetype(str(ref.path), size) if ref.path is not None else None
    if font is None and ref.fallback:
        font = _bundled(size)
    return font
