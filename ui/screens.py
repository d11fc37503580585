"""
GlyphTerm — ui/screens.py
Demo applications.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from glyphterm.app import PresentInput, PresentResult, TickInput, TickResult
from glyphterm.colour import Colour, colour
from glyphterm.image import Char, Image, Point


class HelloApp:
    """Hello in the top-left corner, World! in the bottom-right."""

    def tick(self, tick_input: TickInput) -> TickResult:
        return TickResult.CONTINUE

    def present(self, present_input: PresentInput) -> PresentResult:
        image = Image(present_input.width, present_input.height)
        image.clear(Colour.WHITE, Colour.BLACK)
        image.draw_string(Point(1, 1), "Hello", Colour.YELLOW, Colour.BLUE)
        image.draw_string(
            Point(present_input.width - 7, present_input.height - 2),
            "World!",
            Colour.BLUE,
            Colour.YELLOW,
        )
        present_input.blit_screen(image)
        return PresentResult.CHANGED


class InputEchoApp:
    """
    Shows the live key and mouse state inside a framed panel, plus a
    small sprite that follows the mouse. Redraws only when something
    changed since the last frame.
    """

    PANEL_INK = colour(200, 200, 200)
    PANEL_PAPER = colour(20, 20, 40)
    MAX_TYPED = 64

    def __init__(self) -> None:
        self.typed: List[str] = []
        self.last_key: Optional[str] = None
        self.modifiers: Tuple[bool, bool, bool] = (False, False, False)
        self.cursor: Optional[Tuple[int, int]] = None
        self.size: Tuple[int, int] = (0, 0)
        self.dirty = True
        self.sprite = self._make_sprite()

    @staticmethod
    def _make_sprite() -> Image:
        sprite = Image(3, 3)
        sprite.clear(Colour.BLACK, Colour.CYAN)
        sprite.draw_char(Point(1, 1), Char.glyph("@", Colour.RED, Colour.CYAN))
        return sprite

    def tick(self, tick_input: TickInput) -> TickResult:
        key = tick_input.key
        if (tick_input.width, tick_input.height) != self.size:
            self.size = (tick_input.width, tick_input.height)
            self.dirty = True

        modifiers = (key.shift, key.ctrl, key.alt)
        if modifiers != self.modifiers:
            self.modifiers = modifiers
            self.dirty = True

        if key.pressed and key.key is not None:
            self.last_key = key.key
            if key.key == "BACKSPACE" and self.typed:
                self.typed.pop()
            self.dirty = True
        if key.char:
            self.typed.append(key.char)
            del self.typed[:-self.MAX_TYPED]
            self.dirty = True

        if tick_input.mouse is not None:
            self.cursor = (tick_input.mouse.x, tick_input.mouse.y)
            self.dirty = True
        return TickResult.CONTINUE

    def present(self, present_input: PresentInput) -> PresentResult:
        if not self.dirty:
            return PresentResult.NO_CHANGES
        self.dirty = False

        frame = present_input.image
        frame.clear(Colour.WHITE, Colour.BLACK)
        border = Char.glyph("#", self.PANEL_INK, self.PANEL_PAPER)
        frame.draw_rect_filled(Point(2, 2), present_input.width - 4, 7, Char(ord(" "), self.PANEL_INK, self.PANEL_PAPER))
        frame.draw_rect(Point(2, 2), present_input.width - 4, 7, border)

        shift, ctrl, alt = self.modifiers
        flags = "".join(name for name, held in (("S", shift), ("C", ctrl), ("A", alt)) if held) or "-"
        frame.draw_string(Point(4, 3), f"key: {self.last_key or '-'}", Colour.YELLOW, self.PANEL_PAPER)
        frame.draw_string(Point(4, 4), f"mods: {flags}", Colour.YELLOW, self.PANEL_PAPER)
        frame.draw_string(Point(4, 5), "text: " + "".join(self.typed), Colour.GREEN, self.PANEL_PAPER)
        if self.cursor is not None:
            frame.draw_string(Point(4, 6), f"mouse: {self.cursor[0]},{self.cursor[1]}", Colour.CYAN, self.PANEL_PAPER)

        frame.draw_string(Point(1, present_input.height - 1), "[Esc] quit  [Alt+Enter] fullscreen", Colour.WHITE, Colour.BLACK)
        frame.blit(self.sprite, Point(present_input.width - 5, 10))
        return PresentResult.CHANGED
