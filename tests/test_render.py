import pytest
from core.state import (
    Point, DecisionLine, POINT_RADIUS, HANDLE_RADIUS,
    COLOR_POSITIVE, COLOR_NEGATIVE, COLOR_FP, COLOR_FN, COLOR_CORRECT, COLOR_HANDLE,
)
from core.geometry import classify
from core.render import render, point_style, side_labels, LABEL_POS, LABEL_NEG


def test_render_order_and_counts(surface, sample_points, diagonal):
    render(surface, sample_points, diagonal)
    kinds = [c[0] for c in surface.calls]
    assert kinds[0] == "clear"
    assert kinds.count("circle") == len(sample_points) + 2
    assert kinds.count("line") == 1
    assert kinds.count("text") == 2
    # uchwyty rysowane na końcu
    last_two = surface.calls[-2:]
    assert all(c[0] == "circle" and c[3] == HANDLE_RADIUS and c[4] == COLOR_HANDLE for c in last_two)
    assert (last_two[0][1], last_two[0][2]) == (0, 300)
    assert (last_two[1][1], last_two[1][2]) == (400, 0)


def test_points_are_denormalized(surface, diagonal):
    render(surface, [Point(0.5, 0.25, 1)], diagonal)
    c = surface.of("circle")[0]
    assert (c[1], c[2], c[3]) == (200, 75, POINT_RADIUS)


def test_point_styles():
    assert point_style(1, 1) == (COLOR_POSITIVE, COLOR_CORRECT, 1)
    assert point_style(0, 0) == (COLOR_NEGATIVE, COLOR_CORRECT, 1)
    assert point_style(0, 1) == (COLOR_NEGATIVE, COLOR_FP, 2)
    assert point_style(1, 0) == (COLOR_POSITIVE, COLOR_FN, 2)


def test_error_outlines_in_render(surface, sample_points, diagonal):
    render(surface, sample_points, diagonal)
    outlines = [c[5] for c in surface.of("circle")[:len(sample_points)]]
    assert outlines == [COLOR_FN, COLOR_CORRECT, COLOR_CORRECT, COLOR_FP, COLOR_FP]


def test_side_labels_follow_classifier(diagonal):
    labels = side_labels(diagonal, 400, 300)
    (px, py, pos), (nx, ny, neg) = labels
    assert (pos, neg) == (LABEL_POS, LABEL_NEG)
    assert (px, py) == pytest.approx((182, 126))
    assert (nx, ny) == pytest.approx((218, 174))
    assert classify(Point(px / 400, py / 300, 0), diagonal) == 1
    assert classify(Point(nx / 400, ny / 300, 0), diagonal) == 0


def test_side_labels_flip_with_line_direction(diagonal):
    reversed_line = DecisionLine(diagonal.x2, diagonal.y2, diagonal.x1, diagonal.y1)
    for x, y, text in side_labels(reversed_line, 400, 300):
        expected = 1 if text == LABEL_POS else 0
        assert classify(Point(x / 400, y / 300, 0), reversed_line) == expected


def test_degenerate_line_skips_labels(surface, sample_points):
    line = DecisionLine(0.5, 0.5, 0.5, 0.5)
    assert side_labels(line, 400, 300) == []
    render(surface, sample_points, line)
    assert surface.of("text") == []
    assert len(surface.of("circle")) == len(sample_points) + 2
