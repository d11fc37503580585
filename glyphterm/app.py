"""
GlyphTerm — glyphterm/app.py
Application contract for the main loop.
=======================================
Stack:       Python 3.11+ | numpy

An application implements two methods:

  tick(TickInput) -> TickResult
      Called once per loop iteration with the accumulated input state.
      Return TickResult.STOP to exit.

  present(PresentInput) -> PresentResult
      Called once per iteration after tick. PresentInput lends the live
      frame arrays for the duration of the call. Return
      PresentResult.CHANGED if anything was drawn so the window is redrawn.

Frame layout
------------
  ink    packed ink (foreground) colour per cell
  paper  packed paper (background) colour per cell
  code   glyph index per cell; only the low 8 bits are rendered, the
         upper bits are reserved for per-cell attributes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

import numpy as np

from glyphterm.errors import FrameReleasedError
from glyphterm.image import Image, Point, blit_image


class TickResult(Enum):
    CONTINUE = "continue"
    STOP = "stop"


class PresentResult(Enum):
    CHANGED = "changed"
    NO_CHANGES = "no_changes"


@dataclass
class KeyState:
    """
    Most recent key transition plus the held modifiers.

    pressed/key/char describe a single event and are cleared after every
    tick. shift/ctrl/alt track what is held right now and persist.
    """
    pressed: bool = False
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    key: Optional[str] = None
    char: Optional[str] = None

    def clear_one_shot(self) -> None:
        self.pressed = False
        self.key = None
        self.char = None


@dataclass
class MouseState:
    on_window: bool = False
    primary_pressed: bool = False
    secondary_pressed: bool = False
    x: int = 0     # pixels from the window's left edge
    y: int = 0     # pixels from the window's top edge


@dataclass(frozen=True)
class TickInput:
    dt: float                       # seconds since the previous tick
    width: int                      # window width in characters
    height: int                     # window height in characters
    key: KeyState
    mouse: Optional[MouseState] = None


class App(Protocol):
    def tick(self, tick_input: TickInput) -> TickResult: ...

    def present(self, present_input: "PresentInput") -> PresentResult: ...


class PresentInput:
    """
    Temporary, exclusive access to the live frame.

    Only valid inside the present() call that received it. The main loop
    releases it afterwards; any further use raises FrameReleasedError.
    """

    def __init__(self, width: int, height: int, ink: np.ndarray, paper: np.ndarray, code: np.ndarray):
        self.width = width
        self.height = height
        self._image: Optional[Image] = Image.wrap(width, height, ink, paper, code)

    @property
    def image(self) -> Image:
        """The live frame as an Image, for drawing in place."""
        if self._image is None:
            raise FrameReleasedError("frame used after present() returned")
        return self._image

    @property
    def fore_image(self) -> np.ndarray:
        return self.image.ink

    @property
    def back_image(self) -> np.ndarray:
        return self.image.paper

    @property
    def text_image(self) -> np.ndarray:
        return self.image.code

    @property
    def released(self) -> bool:
        return self._image is None

    def release(self) -> None:
        self._image = None

    def blit(self, p: Point, dst_width: int, dst_height: int, image: Image) -> None:
        """Copy image into the dst_width x dst_height region of the frame anchored at p."""
        blit_image(image, self.image, p, dst_width, dst_height)

    def blit_screen(self, image: Image) -> None:
        self.blit(Point(0, 0), self.width, self.height, image)
