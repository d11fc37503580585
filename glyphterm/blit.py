"""
GlyphTerm — glyphterm/blit.py
Clipped rectangular copy between two character grids.
=====================================================

A blit is described by four rectangles:

  src       full source canvas (origin always 0, 0)
  dst       full destination canvas (origin always 0, 0)
  src_blit  region of the source to read
  dst_blit  region of the destination to write; the anchor may be negative
            or lie entirely off-canvas

Each axis is clipped independently. Whatever survives is copied row by row,
once per parallel array, so ink, paper and code stay in lock-step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class BlitRect:
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class BlitOps:
    src: BlitRect
    dst: BlitRect
    src_blit: BlitRect
    dst_blit: BlitRect


def _clip_axis(
    s: int, sw: int, d: int, dw: int, src_extent: int, dst_extent: int
) -> Tuple[int, int, int]:
    """Clip one axis. Returns (source start, destination start, copied extent)."""
    # Source region starting before the source canvas.
    if s < 0:
        sw += s
        dw += s
        d -= s
        s = 0
    # Destination anchor before the destination canvas: the visible part
    # starts partway into the source.
    if d < 0:
        s -= d
        sw += d
        dw += d
        d = 0
    if s + sw > src_extent:
        sw = src_extent - s
    if d + dw > dst_extent:
        dw = dst_extent - d
    return s, d, min(sw, dw)


def clip_blit(ops: BlitOps) -> Tuple[int, int, int, int, int, int]:
    """
    Resolve a BlitOps into (sx, sy, dx, dy, width, height).
    width or height <= 0 means there is nothing to copy.
    """
    sx, dx, width = _clip_axis(
        ops.src_blit.x, ops.src_blit.w, ops.dst_blit.x, ops.dst_blit.w, ops.src.w, ops.dst.w
    )
    sy, dy, height = _clip_axis(
        ops.src_blit.y, ops.src_blit.h, ops.dst_blit.y, ops.dst_blit.h, ops.src.h, ops.dst.h
    )
    return sx, sy, dx, dy, width, height


def blit(src: np.ndarray, dst: np.ndarray, ops: BlitOps) -> None:
    """Copy the clipped region of one flat row-major array into another."""
    sx, sy, dx, dy, width, height = clip_blit(ops)
    if width <= 0 or height <= 0:
        return

    si = sy * ops.src.w + sx
    di = dy * ops.dst.w + dx
    for _ in range(height):
        dst[di:di + width] = src[si:si + width]
        si += ops.src.w
        di += ops.dst.w
