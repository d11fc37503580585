"""
GlyphTerm — glyphterm/image.py
Grid Buffer: a rectangle of character cells with ink and paper colours.
=======================================================================
Stack:       Python 3.11+ | numpy

Storage is three parallel flat uint32 arrays (ink, paper, code) indexed
row-major, ``index = y * width + x``. They are always the same length.

Drawing is best-effort compositing. Anything that lands outside the
buffer is clipped or dropped, never raised, so callers can over-draw past
the edges freely (centring text, scrolling sprites, etc).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from glyphterm.blit import BlitOps, BlitRect, blit

TEXT_ENCODING = "cp437"
U32_MASK = 0xFFFF_FFFF     # cell values wrap to 32 bits


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Char:
    """A single cell: glyph index plus ink and paper colours."""
    ch: int
    ink: int
    paper: int

    @classmethod
    def glyph(cls, text: str, ink: int, paper: int) -> "Char":
        """Build a cell from a one-character string."""
        return cls(encode_text(text[:1])[0] if text else 0, ink, paper)


def encode_text(text: str) -> bytes:
    """Glyph indices for a string. Characters outside code page 437 become '?'."""
    return text.encode(TEXT_ENCODING, errors="replace")


class Image:
    """
    A width x height grid of character cells.

    Images are never resized in place. Make a new one instead.
    """

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        size = self.width * self.height
        self.ink = np.zeros(size, dtype=np.uint32)
        self.paper = np.zeros(size, dtype=np.uint32)
        self.code = np.zeros(size, dtype=np.uint32)

    @classmethod
    def wrap(
        cls,
        width: int,
        height: int,
        ink: np.ndarray,
        paper: np.ndarray,
        code: np.ndarray,
    ) -> "Image":
        """Build an Image over existing arrays without copying them."""
        size = width * height
        if not (len(ink) == len(paper) == len(code) == size):
            raise ValueError(
                f"arrays of length {len(ink)}/{len(paper)}/{len(code)} "
                f"do not match a {width}x{height} grid"
            )
        image = cls.__new__(cls)
        image.width = width
        image.height = height
        image.ink = ink
        image.paper = paper
        image.code = code
        return image

    def copy(self) -> "Image":
        return Image.wrap(self.width, self.height, self.ink.copy(), self.paper.copy(), self.code.copy())

    def coords_to_index(self, x: int, y: int) -> Optional[int]:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def clip(self, p: Point, width: int, height: int) -> Tuple[int, int, int, int]:
        """
        Clip a rectangle anchored at p to the image bounds.
        Returns (x, y, width, height); a non-positive width or height means
        the rectangle is entirely off the image.
        """
        x, y = p.x, p.y
        if x < 0:
            width += x
            x = 0
        if y < 0:
            height += y
            y = 0
        width = min(width, self.width - x)
        height = min(height, self.height - y)
        return x, y, width, height

    def get_char(self, p: Point) -> Optional[Char]:
        i = self.coords_to_index(p.x, p.y)
        if i is None:
            return None
        return Char(int(self.code[i]), int(self.ink[i]), int(self.paper[i]))

    def clear(self, ink: int, paper: int) -> None:
        self.draw_rect_filled(Point(0, 0), self.width, self.height, Char(ord(" "), ink, paper))

    def draw_char(self, p: Point, ch: Char) -> None:
        i = self.coords_to_index(p.x, p.y)
        if i is None:
            return
        self.ink[i] = ch.ink & U32_MASK
        self.paper[i] = ch.paper & U32_MASK
        self.code[i] = ch.ch & U32_MASK

    def draw_string(self, p: Point, text: str, ink: int, paper: int) -> None:
        data = encode_text(text)
        x, y, w, h = self.clip(p, len(data), 1)
        if w <= 0 or h <= 0:
            return

        # Characters hidden off the left edge are skipped.
        skip = x - p.x
        i = y * self.width + x
        self.ink[i:i + w] = ink & U32_MASK
        self.paper[i:i + w] = paper & U32_MASK
        self.code[i:i + w] = np.frombuffer(data, dtype=np.uint8)[skip:skip + w]

    def draw_rect(self, p: Point, width: int, height: int, ch: Char) -> None:
        """Draw a one-cell border. Anything thinner than 3 cells is filled instead."""
        if width < 3 or height < 3:
            self.draw_rect_filled(p, width, height, ch)
            return
        # Top and bottom
        self.draw_rect_filled(p, width, 1, ch)
        self.draw_rect_filled(Point(p.x, p.y + height - 1), width, 1, ch)
        # Left and right
        self.draw_rect_filled(Point(p.x, p.y + 1), 1, height - 2, ch)
        self.draw_rect_filled(Point(p.x + width - 1, p.y + 1), 1, height - 2, ch)

    def draw_rect_filled(self, p: Point, width: int, height: int, ch: Char) -> None:
        x, y, width, height = self.clip(p, width, height)
        if width <= 0 or height <= 0:
            return

        ink, paper, code = ch.ink & U32_MASK, ch.paper & U32_MASK, ch.ch & U32_MASK
        i = y * self.width + x
        for _ in range(height):
            self.ink[i:i + width] = ink
            self.paper[i:i + width] = paper
            self.code[i:i + width] = code
            i += self.width

    def blit(self, image: "Image", p: Point) -> None:
        """Draw another image onto this one with its top-left corner at p."""
        blit_image(image, self, p, image.width, image.height)


def blit_image(src: Image, dst: Image, p: Point, dst_width: int, dst_height: int) -> None:
    """Blit the whole of src into the dst_width x dst_height region of dst anchored at p."""
    ops = BlitOps(
        src=BlitRect(0, 0, src.width, src.height),
        dst=BlitRect(0, 0, dst.width, dst.height),
        src_blit=BlitRect(0, 0, src.width, src.height),
        dst_blit=BlitRect(p.x, p.y, dst_width, dst_height),
    )
    blit(src.ink, dst.ink, ops)
    blit(src.paper, dst.paper, ops)
    blit(src.code, dst.code, ops)
