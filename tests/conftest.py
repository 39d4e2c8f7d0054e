"""Shared test fixtures."""

from __future__ import annotations

import pytest

from borderkit.graphics.brush import SolidColor
from borderkit.graphics.canvas import RecordingCanvas
from borderkit.graphics.color import Color
from borderkit.units import Density, Size


class ContentProbe:
    """Stands in for the decorated element's own content."""

    def __init__(self, canvas: RecordingCanvas | None = None) -> None:
        self.calls = 0
        self.commands_before = -1
        self._canvas = canvas

    def __call__(self) -> None:
        self.calls += 1
        if self._canvas is not None:
            self.commands_before = len(self._canvas.commands)


@pytest.fixture
def density() -> Density:
    return Density(1.0)


@pytest.fixture
def size100() -> Size:
    return Size(100.0, 100.0)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def red() -> SolidColor:
    return SolidColor(Color.RED)


@pytest.fixture
def content(canvas: RecordingCanvas) -> ContentProbe:
    return ContentProbe(canvas)
