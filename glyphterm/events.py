"""
GlyphTerm — glyphterm/events.py
Backend-neutral input events consumed by the main loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# Key names follow tcod.event.KeySym member names.
KEY_ESCAPE = "ESCAPE"
KEY_RETURN = "RETURN"


@dataclass(frozen=True)
class KeyInput:
    pressed: bool
    key: Optional[str]


@dataclass(frozen=True)
class TextInput:
    char: str


@dataclass(frozen=True)
class ModifiersChanged:
    shift: bool
    ctrl: bool
    alt: bool


@dataclass(frozen=True)
class MouseMoved:
    x: int
    y: int


@dataclass(frozen=True)
class MouseButton:
    pressed: bool
    primary: bool
    x: int
    y: int


@dataclass(frozen=True)
class MouseHover:
    on_window: bool


@dataclass(frozen=True)
class Resized:
    """New inner size of the window in pixels."""
    width: int
    height: int


@dataclass(frozen=True)
class CloseRequested:
    pass


TermEvent = Union[
    KeyInput, TextInput, ModifiersChanged, MouseMoved, MouseButton, MouseHover, Resized, CloseRequested
]
