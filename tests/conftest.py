"""
Shared fixtures: a renderer that records instead of drawing, and a
scripted application.
"""
from typing import Callable, List, Optional

import pytest

from glyphterm.app import PresentInput, PresentResult, TickInput, TickResult
from glyphterm.render import RenderState


class RecordingRenderer(RenderState):
    def __init__(self, cell=(8, 16), pixels=(80, 160)):
        super().__init__(cell, pixels)
        self.render_calls = 0
        self.resize_calls: List[tuple] = []
        self.fail_with: Optional[Exception] = None

    def resize(self, pixel_size):
        self.resize_calls.append(pixel_size)
        return super().resize(pixel_size)

    def render(self) -> None:
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc
        self.render_calls += 1


class ScriptedApp:
    """Returns queued results; records every input it sees."""

    def __init__(self, ticks=None, presents=None, on_present: Optional[Callable[[PresentInput], None]] = None):
        self.ticks = list(ticks or [])
        self.presents = list(presents or [])
        self.on_present = on_present
        self.tick_inputs: List[TickInput] = []
        self.present_count = 0

    def tick(self, tick_input: TickInput) -> TickResult:
        self.tick_inputs.append(tick_input)
        return self.ticks.pop(0) if self.ticks else TickResult.CONTINUE

    def present(self, present_input: PresentInput) -> PresentResult:
        self.present_count += 1
        if self.on_present is not None:
            self.on_present(present_input)
        return self.presents.pop(0) if self.presents else PresentResult.NO_CHANGES


@pytest.fixture
def renderer():
    return RecordingRenderer()
