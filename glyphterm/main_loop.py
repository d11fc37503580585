"""
GlyphTerm — glyphterm/main_loop.py
Frame loop: input accumulation, tick, present, render.
======================================================
Stack:       Python 3.11+

Iteration sequence
------------------
  1. events     handle_event() folds window events into KeyState /
                MouseState. Reserved keys are consumed here and never
                reach the application.
  2. tick       app.tick(TickInput). STOP ends the loop; no present follows.
                One-shot input (pressed, key, char, mouse) is cleared after.
  3. present    app.present(PresentInput) with the live frame lent for the
                duration of the call.
  4. render     only when present returned CHANGED.

Reserved keys
-------------
  Escape          exit immediately
  Alt+Return      toggle fullscreen
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Callable, Iterable, Optional, Protocol

from glyphterm.app import App, KeyState, MouseState, PresentResult, TickInput, TickResult
from glyphterm.errors import RendererOutOfMemoryError, RenderError, SurfaceLostError
from glyphterm.events import (
    KEY_ESCAPE,
    KEY_RETURN,
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
from glyphterm.render import RenderState

logger = logging.getLogger(__name__)


class Window(Protocol):
    def toggle_fullscreen(self) -> None: ...


class MainLoop:
    """
    Drives an App against a renderer. Single threaded: tick and present
    are plain calls and the window is unresponsive while they run.
    """

    def __init__(
        self,
        app: App,
        renderer: RenderState,
        window: Optional[Window] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.app = app
        self.renderer = renderer
        self.window = window
        self.clock = clock
        self.key_state = KeyState()
        self.mouse: Optional[MouseState] = None
        self.on_window = False
        self._mouse_pos = (0, 0)
        self.running = True
        self._last_tick: Optional[float] = None

    # ------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------

    def handle_event(self, event: TermEvent) -> None:
        if not self.running:
            return

        if isinstance(event, CloseRequested):
            logger.info("window close requested")
            self.running = False
        elif isinstance(event, KeyInput):
            if self._intercept_reserved(event):
                return
            self.key_state.pressed = event.pressed
            self.key_state.key = event.key
        elif isinstance(event, TextInput):
            self.key_state.char = event.char
        elif isinstance(event, ModifiersChanged):
            self.key_state.shift = event.shift
            self.key_state.ctrl = event.ctrl
            self.key_state.alt = event.alt
        elif isinstance(event, MouseMoved):
            self._mouse_pos = (event.x, event.y)
            mouse = self._mouse_snapshot()
            mouse.x, mouse.y = event.x, event.y
        elif isinstance(event, MouseButton):
            self._mouse_pos = (event.x, event.y)
            mouse = self._mouse_snapshot()
            mouse.x, mouse.y = event.x, event.y
            if event.pressed:
                if event.primary:
                    mouse.primary_pressed = True
                else:
                    mouse.secondary_pressed = True
        elif isinstance(event, MouseHover):
            self.on_window = event.on_window
            self._mouse_snapshot().on_window = event.on_window
        elif isinstance(event, Resized):
            self.renderer.resize((event.width, event.height))

    def _intercept_reserved(self, event: KeyInput) -> bool:
        if not event.pressed:
            return False
        ks = self.key_state
        if event.key == KEY_ESCAPE:
            logger.info("exit key pressed")
            self.running = False
            return True
        if event.key == KEY_RETURN and ks.alt and not ks.shift and not ks.ctrl:
            if self.window is not None:
                logger.info("toggling fullscreen")
                self.window.toggle_fullscreen()
            return True
        return False

    def _mouse_snapshot(self) -> MouseState:
        if self.mouse is None:
            x, y = self._mouse_pos
            self.mouse = MouseState(on_window=self.on_window, x=x, y=y)
        return self.mouse

    # ------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------

    def step(self) -> bool:
        """Run one tick/present/render iteration. Returns False once the loop has ended."""
        if not self.running:
            return False

        if self.tick() is TickResult.STOP:
            logger.info("application requested stop")
            self.running = False
            return False

        if self.present() is PresentResult.CHANGED:
            self._render()
        return self.running

    def tick(self) -> TickResult:
        now = self.clock()
        dt = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now

        width, height = self.renderer.chars_size()
        tick_input = TickInput(
            dt=dt,
            width=width,
            height=height,
            key=replace(self.key_state),
            mouse=self.mouse,
        )
        result = self.app.tick(tick_input)

        self.key_state.clear_one_shot()
        self.mouse = None
        return result

    def present(self) -> PresentResult:
        with self.renderer.lend_frame() as frame:
            return self.app.present(frame)

    def _render(self) -> None:
        try:
            self.renderer.render()
        except SurfaceLostError:
            logger.warning("render surface lost, reallocating")
            self.renderer.resize(self.renderer.pixel_size)
        except RendererOutOfMemoryError:
            logger.critical("renderer out of memory, stopping")
            self.running = False
            raise
        except RenderError as exc:
            logger.error("render failed: %s", exc)

    def run(self, poll_events: Callable[[], Iterable[TermEvent]]) -> None:
        """Pump events and iterate until the app stops, the window closes or Escape is pressed."""
        while self.running:
            for event in poll_events():
                self.handle_event(event)
                if not self.running:
                    break
            self.step()
