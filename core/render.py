import math
from .geometry import classify, to_pixels, to_normalized
from .state import (
    Point, POINT_RADIUS, HANDLE_RADIUS, LABEL_OFFSET,
    COLOR_POSITIVE, COLOR_NEGATIVE, COLOR_FP, COLOR_FN, COLOR_CORRECT,
    COLOR_LINE, COLOR_HANDLE, COLOR_LABEL,
)

LABEL_POS = "Predicted (+)"
LABEL_NEG = "Predicted (-)"


def point_style(actual: int, pred: int):
    """(fill, outline, outline width) for a point."""
    fill = COLOR_POSITIVE if actual == 1 else COLOR_NEGATIVE
    if pred == actual:
        return fill, COLOR_CORRECT, 1
    if actual == 0:
        return fill, COLOR_FP, 2
    return fill, COLOR_FN, 2


def side_labels(line, width, height):
    """Label positions [(px, py, text), ...] on both sides of the line, [] for a degenerate line.

    The "+" side is found by classifying a probe point at the positive offset.
    """
    x1, y1 = to_pixels(*line.p1, width, height)
    x2, y2 = to_pixels(*line.p2, width, height)
    dx, dy = x2 - x1, y2 - y1
    length = math.hypot(dx, dy)
    if length == 0:
        return []
    mx, my = (x1 + x2) / 2, (y1 + y2) / 2
    nx = -dy / length * LABEL_OFFSET
    ny = dx / length * LABEL_OFFSET

    px, py = to_normalized(mx + nx, my + ny, width, height)
    if classify(Point(px, py, 0), line) == 1:
        pos, neg = (mx + nx, my + ny), (mx - nx, my - ny)
    else:
        pos, neg = (mx - nx, my - ny), (mx + nx, my + ny)
    return [(pos[0], pos[1], LABEL_POS), (neg[0], neg[1], LABEL_NEG)]


def render(surface, points, line):
    w, h = surface.width, surface.height
    surface.clear()

    for p in points:
        pred = classify(p, line)
        fill, outline, ow = point_style(p.actual, pred)
        cx, cy = to_pixels(p.x, p.y, w, h)
        surface.circle(cx, cy, POINT_RADIUS, fill, outline, ow)

    x1, y1 = to_pixels(*line.p1, w, h)
    x2, y2 = to_pixels(*line.p2, w, h)
    surface.line(x1, y1, x2, y2, COLOR_LINE, 3)

    for lx, ly, text in side_labels(line, w, h):
        surface.text(lx, ly, text, COLOR_LABEL)

    # uchwyty na wierzchu
    surface.circle(x1, y1, HANDLE_RADIUS, COLOR_HANDLE)
    surface.circle(x2, y2, HANDLE_RADIUS, COLOR_HANDLE)
