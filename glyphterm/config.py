"""
GlyphTerm — glyphterm/config.py
Window configuration: a validated settings model, a TOML loader and a
fluent Builder.
==========================================================================
Stack:       Python 3.11+ | Pydantic v2 | tomllib

TOML layout
-----------
  [terminal]
  title = "My App"
  inner_size = [1024, 768]
  font_path = "fonts/cp437_12x12.png"
  vsync = true
  log_level = "DEBUG"
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from glyphterm.errors import ConfigError
from glyphterm.font import FontData

MIN_CHARS: int = 20     # the window is never smaller than 20x20 characters


class TerminalConfig(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str = "glyphterm"
    inner_size: Tuple[int, int] = (800, 600)    # pixels inside the window frame
    font_path: Optional[Path] = None
    vsync: bool = True
    log_level: str = "INFO"
    # Pre-loaded font; takes precedence over font_path. Never read from TOML.
    font: Optional[FontData] = Field(default=None, exclude=True)

    @field_validator("inner_size")
    @classmethod
    def _positive_size(cls, value: Tuple[int, int]) -> Tuple[int, int]:
        if value[0] <= 0 or value[1] <= 0:
            raise ValueError("inner_size must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return value


def min_window_size(cell_size: Tuple[int, int]) -> Tuple[int, int]:
    return MIN_CHARS * cell_size[0], MIN_CHARS * cell_size[1]


def window_pixel_size(inner_size: Tuple[int, int], cell_size: Tuple[int, int]) -> Tuple[int, int]:
    """Round a requested window size down to whole glyph cells, no smaller than MIN_CHARS."""
    cell_w, cell_h = cell_size
    min_w, min_h = min_window_size(cell_size)
    width = max(min_w, inner_size[0]) // cell_w * cell_w
    height = max(min_h, inner_size[1]) // cell_h * cell_h
    return width, height


def load_config(path: Path) -> TerminalConfig:
    """Load TerminalConfig from the [terminal] table of a TOML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    section = data.get("terminal", {})
    try:
        config = TerminalConfig(**section)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    # Relative font paths are resolved against the config file.
    if config.font_path is not None and not config.font_path.is_absolute():
        config = config.model_copy(update={"font_path": path.parent / config.font_path})
    return config


class Builder:
    """
    Fluent construction of a TerminalConfig.

        config = Builder().with_inner_size(1024, 768).with_title("Hello!").build()
    """

    def __init__(self, base: Optional[TerminalConfig] = None):
        self._settings = (base or TerminalConfig()).model_dump()
        self._settings["font"] = base.font if base is not None else None

    def with_inner_size(self, width: int, height: int) -> "Builder":
        self._settings["inner_size"] = (width, height)
        return self

    def with_title(self, title: str) -> "Builder":
        self._settings["title"] = title
        return self

    def with_font(self, font: FontData) -> "Builder":
        self._settings["font"] = font
        return self

    def with_font_path(self, path: Path) -> "Builder":
        self._settings["font_path"] = Path(path)
        return self

    def with_vsync(self, vsync: bool) -> "Builder":
        self._settings["vsync"] = vsync
        return self

    def with_log_level(self, level: str) -> "Builder":
        self._settings["log_level"] = level
        return self

    def build(self) -> TerminalConfig:
        try:
            return TerminalConfig(**self._settings)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
