"""
GlyphTerm — glyphterm/colour.py
Packed colour helpers.
======================

Colours cross the frame boundary as 32-bit values laid out ``0xAABBGGRR``:
red in the lowest byte, alpha in the highest.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np

ALPHA_OPAQUE: int = 0xFF000000


def colour(r: int, g: int, b: int) -> int:
    """Pack 8-bit components into a fully opaque colour."""
    return ALPHA_OPAQUE | ((b & 0xFF) << 16) | ((g & 0xFF) << 8) | (r & 0xFF)


def colour_rgba(r: int, g: int, b: int, a: int) -> int:
    return ((a & 0xFF) << 24) | ((b & 0xFF) << 16) | ((g & 0xFF) << 8) | (r & 0xFF)


def unpack(packed: int) -> Tuple[int, int, int, int]:
    """Return (r, g, b, a) for a packed colour."""
    return (
        packed & 0xFF,
        (packed >> 8) & 0xFF,
        (packed >> 16) & 0xFF,
        (packed >> 24) & 0xFF,
    )


def unpack_rgb_array(packed: np.ndarray) -> np.ndarray:
    """
    Vectorised unpack of a packed colour array.
    Returns an array of shape packed.shape + (3,) of uint8 RGB triples.
    Alpha is dropped.
    """
    packed = np.asarray(packed, dtype=np.uint32)
    rgb = np.empty(packed.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = packed & 0xFF
    rgb[..., 1] = (packed >> 8) & 0xFF
    rgb[..., 2] = (packed >> 16) & 0xFF
    return rgb


class Colour(IntEnum):
    """Basic palette. Members are packed colours and can be passed anywhere an int is expected."""

    BLACK = colour(0, 0, 0)
    RED = colour(255, 0, 0)
    GREEN = colour(0, 255, 0)
    YELLOW = colour(255, 255, 0)
    BLUE = colour(0, 0, 255)
    MAGENTA = colour(255, 0, 255)
    CYAN = colour(0, 255, 255)
    WHITE = colour(255, 255, 255)
