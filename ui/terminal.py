"""
GlyphTerm — ui/terminal.py
Window host: opens the tcod context, translates tcod events and runs the
main loop.
========================================================================
Stack:       Python 3.11+ | tcod
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import tcod.context
import tcod.event
import tcod.sdl.video

from glyphterm.app import App
from glyphterm.config import TerminalConfig, min_window_size, window_pixel_size
from glyphterm.errors import WindowError
from glyphterm.events import (
    CloseRequested,
    KeyInput,
    ModifiersChanged,
    MouseButton,
    MouseHover,
    MouseMoved,
    Resized,
    TermEvent,
    TextInput,
)
from glyphterm.font import FontData, default_font, load_font_file
from glyphterm.logging_setup import configure_logging
from glyphterm.main_loop import MainLoop
from ui.renderer import TcodRenderer, tileset_from_font

logger = logging.getLogger("glyphterm.ui")


class TcodWindow:
    """Fullscreen control for the SDL window behind a tcod context."""

    def __init__(self, context: tcod.context.Context):
        self.context = context

    def toggle_fullscreen(self) -> None:
        window = self.context.sdl_window
        if window is None:
            return
        if window.fullscreen:
            window.fullscreen = False
        else:
            window.fullscreen = tcod.sdl.video.WindowFlags.FULLSCREEN_DESKTOP


def _key_name(sym: int) -> Optional[str]:
    try:
        return tcod.event.KeySym(sym).name
    except ValueError:
        return None


def translate_event(event: tcod.event.Event) -> List[TermEvent]:
    """Map one tcod event onto zero or more glyphterm events."""
    if isinstance(event, tcod.event.Quit):
        return [CloseRequested()]

    if isinstance(event, (tcod.event.KeyDown, tcod.event.KeyUp)):
        mod = event.mod
        return [
            ModifiersChanged(
                shift=bool(mod & tcod.event.Modifier.SHIFT),
                ctrl=bool(mod & tcod.event.Modifier.CTRL),
                alt=bool(mod & tcod.event.Modifier.ALT),
            ),
            KeyInput(pressed=isinstance(event, tcod.event.KeyDown), key=_key_name(event.sym)),
        ]

    if isinstance(event, tcod.event.TextInput):
        return [TextInput(char=event.text[:1])] if event.text else []

    if isinstance(event, tcod.event.MouseMotion):
        x, y = event.position
        return [MouseMoved(x=int(x), y=int(y))]

    if isinstance(event, (tcod.event.MouseButtonDown, tcod.event.MouseButtonUp)):
        if event.button not in (tcod.event.MouseButton.LEFT, tcod.event.MouseButton.RIGHT):
            return []
        x, y = event.position
        return [
            MouseButton(
                pressed=isinstance(event, tcod.event.MouseButtonDown),
                primary=event.button == tcod.event.MouseButton.LEFT,
                x=int(x),
                y=int(y),
            )
        ]

    if isinstance(event, tcod.event.WindowResized):
        return [Resized(width=event.width, height=event.height)]

    if isinstance(event, tcod.event.WindowEvent):
        if event.type == "WindowEnter":
            return [MouseHover(on_window=True)]
        if event.type == "WindowLeave":
            return [MouseHover(on_window=False)]

    return []


def poll_events() -> Iterator[TermEvent]:
    for event in tcod.event.get():
        yield from translate_event(event)


def _resolve_font(config: TerminalConfig) -> FontData:
    if config.font is not None:
        return config.font
    if config.font_path is not None:
        return load_font_file(config.font_path)
    return default_font()


def _enforce_min_size(context: tcod.context.Context, font: FontData) -> None:
    if context.sdl_window is not None:
        context.sdl_window.min_size = min_window_size(font.cell_size)


def run(app: App, config: Optional[TerminalConfig] = None) -> None:
    """
    Open a window and run app until it stops, the window closes or Escape
    is pressed. Startup failures (font, window) raise before the loop starts.
    """
    config = config or TerminalConfig()
    configure_logging(config.log_level)

    font = _resolve_font(config)
    width, height = window_pixel_size(config.inner_size, font.cell_size)
    logger.info("opening %sx%s window, %sx%s glyph cells", width, height, font.width, font.height)

    try:
        context = tcod.context.new(
            width=width,
            height=height,
            tileset=tileset_from_font(font),
            title=config.title,
            vsync=config.vsync,
            sdl_window_flags=tcod.context.SDL_WINDOW_RESIZABLE,
        )
    except RuntimeError as exc:
        raise WindowError(f"unable to create window: {exc}") from exc

    with context:
        _enforce_min_size(context, font)
        pixel_size = context.sdl_window.size if context.sdl_window is not None else (width, height)
        renderer = TcodRenderer(context, font, pixel_size)
        loop = MainLoop(app, renderer, TcodWindow(context))
        loop.run(poll_events)

    logger.info("main loop finished")
