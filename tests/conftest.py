"""Shared fixtures: fixed RNG, small point sets and a surface that records draw calls."""
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.state import Point, DecisionLine
from core.surface import Surface


class RecordingSurface(Surface):
    def __init__(self, width=400, height=300):
        self._w, self._h = width, height
        self.calls = []

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    def clear(self):
        self.calls.append(("clear",))

    def circle(self, x, y, r, fill, outline=None, width=1):
        self.calls.append(("circle", x, y, r, fill, outline, width))

    def line(self, x1, y1, x2, y2, color, width=1):
        self.calls.append(("line", x1, y1, x2, y2, color, width))

    def text(self, x, y, text, color):
        self.calls.append(("text", x, y, text, color))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def rng():
    return np.random.RandomState(1234)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def diagonal():
    # opadająca przekątna (0,1) -> (1,0)
    return DecisionLine(0.0, 1.0, 1.0, 0.0)


@pytest.fixture
def sample_points():
    return [
        Point(0.9, 0.9, 1),
        Point(0.1, 0.1, 1),
        Point(0.9, 0.9, 0),
        Point(0.1, 0.1, 0),
        Point(0.2, 0.2, 0),
    ]
