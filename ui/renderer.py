"""
GlyphTerm — ui/renderer.py
TCOD Renderer: pushes the frame arrays to an SDL window through tcod.
=====================================================================
Stack:       Python 3.11+ | tcod | numpy

The frame arrays are converted into a tcod console on every render():

  console.ch  <- code & 0xFF     (glyph index, one tile per index)
  console.fg  <- ink unpacked to RGB
  console.bg  <- paper unpacked to RGB

Tiles are registered in the tileset at codepoints 0..255 so glyph index i
always shows atlas cell i, whatever that codepoint means in Unicode.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import tcod.console
import tcod.context
import tcod.tileset

from glyphterm.colour import unpack_rgb_array
from glyphterm.errors import RendererOutOfMemoryError, RenderError
from glyphterm.font import GRID, FontData
from glyphterm.render import RenderState


def tileset_from_font(font: FontData) -> tcod.tileset.Tileset:
    """Build a tcod tileset with atlas cell i mapped to codepoint i."""
    tileset = tcod.tileset.Tileset(font.width, font.height)
    for code in range(GRID * GRID):
        tileset[code] = font.glyph(code)
    return tileset


class TcodRenderer(RenderState):
    """
    Owns the live frame buffers and presents them via a tcod context.
    The context may be None for headless use (frame_console() still works).
    """
    def __init__(
        self,
        context: Optional[tcod.context.Context],
        font: FontData,
        pixel_size: Tuple[int, int],
    ):
        self.context = context
        self._console: Optional[tcod.console.Console] = None
        super().__init__(font.cell_size, pixel_size)

    def frame_console(self) -> tcod.console.Console:
        """Copy the current frame arrays into the (cached) tcod console."""
        width, height = self.size
        console = self._console
        if console is None or (console.width, console.height) != (width, height):
            console = tcod.console.Console(width, height, order="C")
            self._console = console

        rgb = console.rgb
        rgb["ch"] = (self.text_image & 0xFF).astype(np.int32).reshape(height, width)
        rgb["fg"] = unpack_rgb_array(self.fore_image).reshape(height, width, 3)
        rgb["bg"] = unpack_rgb_array(self.back_image).reshape(height, width, 3)
        return console

    def render(self) -> None:
        width, height = self.size
        if self.context is None or width == 0 or height == 0:
            return

        console = self.frame_console()
        try:
            self.context.present(console, keep_aspect=False, integer_scaling=False)
        except MemoryError as exc:
            raise RendererOutOfMemoryError(str(exc)) from exc
        except RuntimeError as exc:
            raise RenderError(str(exc)) from exc
