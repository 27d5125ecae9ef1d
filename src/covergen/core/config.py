"""Configuration management using pydantic, TOML files and platformdirs."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from covergen.exceptions import ConfigError

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

APP_NAME = "covergen"
CONFIG_FILENAME = "covergen.toml"


def config_dir() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME))


def data_dir() -> Path:
    return Path(platformdirs.user_data_dir(APP_NAME))


class CoverSettings(BaseModel):
    """Rendering options for a single cover.

    Field names are snake_case; the camelCase spelling (``wrapWidth``,
    ``titleFillColor``...) is accepted everywhere a setting is read.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    mode: Literal["solid", "grid"] = "grid"
    title_font: str = "DroidSerif-Bold.ttf"
    author_font: str = "DroidSerif-Bold.ttf"
    font_size: int = Field(default=7, gt=0)
    min_font_size: int = Field(default=5, gt=0)
    max_lines: int = Field(default=5, gt=0)
    size: int = Field(default=84, gt=0)
    wrap_width: int = 80
    top_padding: int = 19
    bottom_padding: int = 3
    text_align: Literal["left", "center", "right"] = "center"
    saturation: int = Field(default=80, ge=0, le=100)
    lightness: int = Field(default=220, ge=0, le=255)
    title_fill_color: str = "black"
    title_border_color: str = "none"
    author_fill_color: str = "white"
    author_border_color: str = "black"
    base_color: str = "white"
    accent_color: str = "random"

    @field_validator("mode", "text_align", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_font_sizes(self) -> CoverSettings:
        if self.min_font_size > self.font_size:
            raise ValueError(
                f"min_font_size ({self.min_font_size}) exceeds font_size ({self.font_size})"
            )
        return self

    @classmethod
    def field_name(cls, key: str) -> str:
        """Map a snake_case or camelCase key to the field name."""
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        raise ConfigError(f"Unknown cover setting: {key!r}")

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> CoverSettings:
        """Build settings from overrides merged onto the defaults."""
        return cls().merged(overrides)

    def merged(self, overrides: Mapping[str, Any] | None = None) -> CoverSettings:
        """Return a validated copy with ``overrides`` applied over these values."""
        data = self.model_dump()
        for key, value in (overrides or {}).items():
            data[self.field_name(key)] = value
        try:
            return type(self).model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid cover settings: {exc}") from exc


class ThemeConfig(BaseModel):
    base_dir: Path = Field(default_factory=lambda: data_dir() / "themes")
    chain: list[str] = Field(default_factory=lambda: ["default"])
    fallback_font: bool = True  # use Pillow's bundled font when lookup fails


class AppConfig(BaseModel):
    cover: CoverSettings = Field(default_factory=CoverSettings)
    themes: ThemeConfig = Field(default_factory=ThemeConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> AppConfig:
        """Load config from a TOML file, falling back to defaults."""
        config_path = path or config_dir() / CONFIG_FILENAME
        if not config_path.exists():
            if path is not None:
                raise ConfigError(f"Config file not found: {config_path}")
            return cls()
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Malformed config file {config_path}: {exc}") from exc
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file {config_path}: {exc}") from exc
