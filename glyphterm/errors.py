"""
GlyphTerm — glyphterm/errors.py
Error taxonomy for startup, rendering and configuration failures.
=================================================================
Stack:       Python 3.11+

Drawing never raises: out-of-bounds and degenerate geometry are silent
no-ops. Everything below is either a startup failure (raised before the
main loop starts, never retried) or a renderer failure surfaced by
``RenderState.render()``.
"""

from __future__ import annotations


class TermError(Exception):
    """Base class for every error raised by glyphterm."""


class BadFontError(TermError):
    """The font atlas could not be decoded or has zero-sized glyph cells."""


class WindowError(TermError):
    """The window or rendering context could not be created."""


class ConfigError(TermError):
    """A configuration file is malformed or holds invalid values."""


class RenderError(TermError):
    """Generic renderer failure. The main loop logs it and carries on."""


class SurfaceLostError(RenderError):
    """The presentation surface is gone; recovered by re-running resize()."""


class RendererOutOfMemoryError(RenderError):
    """Unrecoverable renderer failure. Terminates the main loop."""


class FrameReleasedError(TermError):
    """A lent frame was used after the present call that received it returned."""
