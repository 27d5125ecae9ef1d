"""Value types shared by the rendering pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field


class RGB(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class ColorHandle:
    """A colour registered in one canvas palette."""

    rgb: RGB
    index: int
    canvas_id: int


class NoColor:
    """Sentinel for an unresolvable colour: drawing it is skipped."""

    _instance: NoColor | None = None

    def __new__(cls) -> NoColor:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_COLOR"


NO_COLOR = NoColor()

Color = ColorHandle | NoColor


class DrawOutcome(str, Enum):
    DRAWN = "drawn"
    SKIPPED_NO_COLOR = "skipped_no_color"
    SKIPPED_NO_FONT = "skipped_no_font"


class Mode(str, Enum):
    SOLID = "solid"
    GRID = "grid"


class TextRun(BaseModel):
    """One line of text as it was placed on the canvas."""

    text: str
    x: float = 0
    y: float = 0
    font_size: int
    width: int = 0
    align: str = "center"
    outcome: DrawOutcome = DrawOutcome.DRAWN


class TitleLayout(BaseModel):
    lines: list[TextRun] = Field(default_factory=list)
    truncated: bool = False
    ellipsis: TextRun | None = None


class AuthorLayout(BaseModel):
    font_size: int
    run: TextRun


class CoverResult(BaseModel):
    """Everything produced by one generation call."""

    image: bytes
    seed: int
    mode: Mode
    pattern: str | None = None
    title: TitleLayout | None = None
    author: AuthorLayout | None = None
