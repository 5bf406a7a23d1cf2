import math
import numpy as np
from .state import Point, DecisionLine


def side(px, py, line: DecisionLine):
    """Side of `line` for scalar or array coordinates: 1 where the cross product is > 0, else 0.

    cross = (px - x1)*(y2 - y1) - (py - y1)*(x2 - x1)
    The sign convention is arbitrary; a degenerate line gives cross == 0, i.e. class 0 everywhere.
    """
    vx = line.x2 - line.x1
    vy = line.y2 - line.y1
    cross = (np.asarray(px, dtype=float) - line.x1) * vy - (np.asarray(py, dtype=float) - line.y1) * vx
    return (cross > 0).astype(int)


def classify(point: Point, line: DecisionLine) -> int:
    return int(side(point.x, point.y, line))


def predict(points, line: DecisionLine) -> np.ndarray:
    if len(points) == 0:
        return np.zeros(0, dtype=int)
    xs = np.fromiter((p.x for p in points), dtype=float, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=float, count=len(points))
    return side(xs, ys, line)


def clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


def to_pixels(x: float, y: float, width, height) -> tuple[float, float]:
    return x * width, y * height


def to_normalized(px: float, py: float, width, height) -> tuple[float, float]:
    # powierzchnia o zerowym rozmiarze (np. przed pierwszym <Configure>)
    w = width if width > 0 else 1
    h = height if height > 0 else 1
    return px / w, py / h


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)
