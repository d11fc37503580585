"""
GlyphTerm — glyphterm/render.py
Renderer base: owns the live frame buffers and their resize policy.
===================================================================
Stack:       Python 3.11+ | numpy

Backends subclass RenderState and implement render(), which uploads the
current arrays and shows them. render() may raise SurfaceLostError
(retryable: the loop calls resize() and carries on) or
RendererOutOfMemoryError (fatal).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

import numpy as np

from glyphterm.app import PresentInput

logger = logging.getLogger(__name__)


def chars_for_pixels(pixel_size: Tuple[int, int], cell_size: Tuple[int, int]) -> Tuple[int, int]:
    """Character-grid dimensions for a window: pixel size over cell size, floored."""
    return (max(0, pixel_size[0]) // cell_size[0], max(0, pixel_size[1]) // cell_size[1])


class RenderState:
    def __init__(self, font_char_size: Tuple[int, int], pixel_size: Tuple[int, int]):
        self.font_char_size = font_char_size
        self.pixel_size = pixel_size
        self.size = chars_for_pixels(pixel_size, font_char_size)
        self._allocate()

    def _allocate(self) -> None:
        count = self.size[0] * self.size[1]
        self.fore_image = np.zeros(count, dtype=np.uint32)
        self.back_image = np.zeros(count, dtype=np.uint32)
        self.text_image = np.zeros(count, dtype=np.uint32)

    def chars_size(self) -> Tuple[int, int]:
        return self.size

    def images(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.fore_image, self.back_image, self.text_image

    def resize(self, pixel_size: Tuple[int, int]) -> bool:
        """
        Track a new window size. The frame buffers are replaced, zero
        filled, only when the character dimensions change. Returns True
        when that happened.
        """
        self.pixel_size = pixel_size
        chars_size = chars_for_pixels(pixel_size, self.font_char_size)
        if chars_size == self.size:
            return False

        logger.debug("frame resized %sx%s -> %sx%s", *self.size, *chars_size)
        self.size = chars_size
        self._allocate()
        return True

    @contextmanager
    def lend_frame(self) -> Iterator[PresentInput]:
        width, height = self.size
        frame = PresentInput(width, height, self.fore_image, self.back_image, self.text_image)
        try:
            yield frame
        finally:
            frame.release()

    def render(self) -> None:
        raise NotImplementedError
