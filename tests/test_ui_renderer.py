from types import SimpleNamespace

import numpy as np
import pytest

tcod = pytest.importorskip("tcod")
import tcod.event

from glyphterm.colour import Colour, colour
from glyphterm.events import (
    CloseRequested,
    KeyInput,
    ModifiersChanged,
    MouseButton,
    MouseMoved,
    Resized,
    TextInput,
)
from glyphterm.font import FontData
from glyphterm.image import Point
from ui.renderer import TcodRenderer, tileset_from_font
from ui.terminal import _enforce_min_size, translate_event


def _font(cell=(8, 8)) -> FontData:
    w, h = cell
    pixels = np.zeros((16 * h, 16 * w, 4), dtype=np.uint8)
    return FontData(w, h, pixels)


def test_renderer_initialization():
    r = TcodRenderer(None, _font(), (80, 48))
    assert r.chars_size() == (10, 6)
    assert len(r.images()[0]) == 60


def test_frame_console_mirrors_arrays():
    r = TcodRenderer(None, _font(), (80, 48))
    with r.lend_frame() as frame:
        frame.image.clear(Colour.WHITE, Colour.BLACK)
        frame.image.draw_string(Point(2, 1), "@", colour(10, 20, 30), Colour.BLUE)

    console = r.frame_console()
    assert (console.width, console.height) == (10, 6)
    assert console.rgb["ch"][1, 2] == ord("@")
    assert console.rgb["fg"][1, 2].tolist() == [10, 20, 30]
    assert console.rgb["bg"][1, 2].tolist() == [0, 0, 255]
    assert console.rgb["ch"][0, 0] == ord(" ")


def test_frame_console_uses_low_eight_bits():
    r = TcodRenderer(None, _font(), (80, 48))
    r.images()[2][0] = 0x1234_0041
    assert r.frame_console().rgb["ch"][0, 0] == 0x41


def test_frame_console_follows_resize():
    r = TcodRenderer(None, _font(), (80, 48))
    r.frame_console()
    r.resize((160, 48))
    assert r.frame_console().width == 20


def test_headless_render_is_noop():
    r = TcodRenderer(None, _font(), (80, 48))
    r.render()


def test_tileset_from_font():
    tileset = tileset_from_font(_font((6, 10)))
    assert (tileset.tile_width, tileset.tile_height) == (6, 10)


def test_translate_keydown():
    event = tcod.event.KeyDown(
        scancode=tcod.event.Scancode.A,
        sym=tcod.event.KeySym.A,
        mod=tcod.event.Modifier.LSHIFT,
    )
    assert translate_event(event) == [
        ModifiersChanged(shift=True, ctrl=False, alt=False),
        KeyInput(pressed=True, key="A"),
    ]


def test_translate_keyup_escape():
    event = tcod.event.KeyUp(
        scancode=tcod.event.Scancode.ESCAPE,
        sym=tcod.event.KeySym.ESCAPE,
        mod=tcod.event.Modifier.NONE,
    )
    assert translate_event(event)[-1] == KeyInput(pressed=False, key="ESCAPE")


def test_translate_misc_events():
    assert translate_event(tcod.event.Quit()) == [CloseRequested()]
    assert translate_event(tcod.event.TextInput(text="é")) == [TextInput("é")]
    assert translate_event(tcod.event.MouseMotion(position=(5, 7))) == [MouseMoved(5, 7)]
    assert translate_event(
        tcod.event.MouseButtonDown(position=(1, 2), button=tcod.event.MouseButton.RIGHT)
    ) == [MouseButton(pressed=True, primary=False, x=1, y=2)]
    resized = tcod.event.WindowResized(type="WindowResized", window_id=0, data=(640, 480))
    assert translate_event(resized) == [Resized(640, 480)]


def test_window_cannot_shrink_below_twenty_cells():
    context = SimpleNamespace(sdl_window=SimpleNamespace(min_size=(0, 0)))
    _enforce_min_size(context, _font((8, 16)))
    assert context.sdl_window.min_size == (160, 320)

    _enforce_min_size(SimpleNamespace(sdl_window=None), _font())


def test_tileset_holds_every_atlas_cell():
    font = _font((4, 4))
    font.pixels[0:4, 4:8] = 255     # cell 1
    tileset = tileset_from_font(font)
    assert tileset.get_tile(1).tolist() == font.glyph(1).tolist()
    assert not tileset.get_tile(0).any()
