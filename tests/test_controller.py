import pytest
from core.config import Settings
from core.controller import SessionController
from core.state import DecisionLine, DragTarget, INITIAL_LINE


@pytest.fixture
def ctrl():
    calls = []
    c = SessionController(Settings(seed=3, noise=10), listener=calls.append)
    c.calls = calls
    c.resize(400, 200)
    c.regenerate()
    return c


def test_regenerate_populates_points_and_metrics(ctrl):
    assert len(ctrl.state.points) == 200
    assert ctrl.state.confusion.total == 200
    assert ctrl.state.metrics is not None
    assert ctrl.calls[-1] is ctrl.state


def test_regeneration_keeps_line(ctrl):
    ctrl.state.line = DecisionLine(0.1, 0.1, 0.9, 0.9)
    ctrl.set_noise(80)
    assert ctrl.state.noise == 80
    assert ctrl.state.line == DecisionLine(0.1, 0.1, 0.9, 0.9)


def test_reset_replaces_points(ctrl):
    before = list(ctrl.state.points)
    ctrl.reset()
    assert ctrl.state.points != before
    assert ctrl.state.noise == 10


def test_set_noise_same_value_is_noop(ctrl):
    n = len(ctrl.calls)
    ctrl.set_noise(10.2)
    assert len(ctrl.calls) == n


def test_drag_endpoint_in_pixels_clamps(ctrl):
    x1, y1 = INITIAL_LINE[0] * 400, INITIAL_LINE[1] * 200
    ctrl.press(x1, y1)
    assert ctrl.state.drag is DragTarget.P1
    ctrl.move(-0.2 * 400, 1.3 * 200)
    assert ctrl.state.line.p1 == (0.0, 1.0)
    ctrl.release()
    assert ctrl.state.drag is DragTarget.NONE


def test_drag_recomputes_metrics(ctrl):
    before = ctrl.state.confusion
    ctrl.press(0.8 * 400, 0.2 * 200)
    # zwinięcie linii do punktu -> wszystko klasa 0
    ctrl.move(0.2 * 400, 0.8 * 200)
    assert ctrl.state.confusion.tp == 0 and ctrl.state.confusion.fp == 0
    assert ctrl.state.metrics.precision == 0.0
    assert ctrl.state.metrics.accuracy == pytest.approx(ctrl.state.confusion.tn / 200)
    assert ctrl.state.confusion != before


def test_press_away_from_handles_changes_nothing(ctrl):
    n = len(ctrl.calls)
    line = ctrl.state.line
    ctrl.press(200, 100)
    ctrl.move(10, 10)
    assert ctrl.state.drag is DragTarget.NONE
    assert ctrl.state.line == line
    assert len(ctrl.calls) == n


def test_resize_redraws_without_recompute(ctrl):
    cm = ctrl.state.confusion
    n = len(ctrl.calls)
    ctrl.resize(800, 600)
    assert (ctrl.state.width, ctrl.state.height) == (800, 600)
    assert ctrl.state.confusion is cm
    assert len(ctrl.calls) == n + 1


def test_seeded_sessions_match():
    a = SessionController(Settings(seed=11)); a.regenerate()
    b = SessionController(Settings(seed=11)); b.regenerate()
    assert a.state.points == b.state.points
