"""
GlyphTerm — glyphterm/font.py
Font atlas loading.
===================
Stack:       Python 3.11+ | numpy | Pillow

A font is a single image holding 256 glyphs in a 16x16 grid of equally
sized cells, in code page 437 order. Cell size is the image size divided
by 16 on each axis.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from glyphterm.errors import BadFontError

GRID = 16
DEFAULT_CELL: Tuple[int, int] = (8, 16)

_DEFAULT_FONT_CACHE: Optional["FontData"] = None


class FontData:
    """Decoded glyph atlas."""

    def __init__(self, width: int, height: int, pixels: np.ndarray):
        self.width = width          # glyph cell width in pixels
        self.height = height        # glyph cell height in pixels
        self.pixels = pixels        # (16 * height, 16 * width, 4) uint8 RGBA

    def __repr__(self) -> str:
        return f"FontData(width={self.width}, height={self.height})"

    @property
    def cell_size(self) -> Tuple[int, int]:
        return self.width, self.height

    def glyph(self, code: int) -> np.ndarray:
        """RGBA pixels of one glyph cell. Only the low 8 bits of code are used."""
        code &= 0xFF
        x0 = (code % GRID) * self.width
        y0 = (code // GRID) * self.height
        return self.pixels[y0:y0 + self.height, x0:x0 + self.width]


def _from_image(image: Image.Image) -> FontData:
    char_width = image.width // GRID
    char_height = image.height // GRID
    if char_width == 0 or char_height == 0:
        raise BadFontError(f"font atlas {image.width}x{image.height} is too small for a 16x16 grid")
    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    # Any remainder past the 16x16 grid is ignored.
    rgba = rgba[: char_height * GRID, : char_width * GRID].copy()
    return FontData(width=char_width, height=char_height, pixels=rgba)


def load_font_image(data: bytes, format: Optional[str] = None) -> FontData:
    """Decode a font atlas from encoded image bytes (PNG, BMP, ...)."""
    formats = [format.upper()] if format else None
    try:
        with Image.open(io.BytesIO(data), formats=formats) as image:
            image.load()
            return _from_image(image)
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise BadFontError(f"unable to read font data: {exc}") from exc


def load_font_file(path: Path) -> FontData:
    path = Path(path)
    if not path.exists():
        raise BadFontError(f"font file not found: {path}")
    return load_font_image(path.read_bytes())


def default_font() -> FontData:
    """
    The built-in font: Pillow's bundled default face rasterised into a
    16x16 code page 437 atlas of 8x16 cells. Built once and cached.
    """
    global _DEFAULT_FONT_CACHE
    if _DEFAULT_FONT_CACHE is not None:
        return _DEFAULT_FONT_CACHE

    cell_w, cell_h = DEFAULT_CELL
    face = ImageFont.load_default()
    atlas = Image.new("RGBA", (cell_w * GRID, cell_h * GRID), (0, 0, 0, 0))
    for code in range(33, 256):
        glyph = bytes([code]).decode("cp437")
        # Each glyph is drawn on its own cell so wide glyphs cannot bleed.
        cell = Image.new("RGBA", (cell_w, cell_h), (0, 0, 0, 0))
        try:
            ImageDraw.Draw(cell).text((0, 2), glyph, font=face, fill=(255, 255, 255, 255))
        except UnicodeEncodeError:
            # The bitmap fallback face only covers latin-1; leave the cell blank.
            continue
        atlas.paste(cell, ((code % GRID) * cell_w, (code // GRID) * cell_h))

    _DEFAULT_FONT_CACHE = _from_image(atlas)
    return _DEFAULT_FONT_CACHE
