import logging
import numpy as np
from .state import Point, TOTAL_POINTS

logger = logging.getLogger(__name__)

POSITIVE_CENTER = (0.7, 0.3)
NEGATIVE_CENTER = (0.3, 0.7)
BASE_SPREAD = 0.3


def spread_for(noise_level) -> float:
    return BASE_SPREAD + noise_level / 200


def _cluster(rng, n, center, spread, label):
    offsets = (rng.random_sample((n, 2)) - 0.5) * spread
    cx, cy = center
    return [Point(float(cx + dx), float(cy + dy), label) for dx, dy in offsets]


def generate_points(noise_level, n=TOTAL_POINTS, rng=None) -> list[Point]:
    """Two uniform clusters: class 1 around (0.7, 0.3), class 0 around (0.3, 0.7).

    noise_level 0..100 widens each cluster by noise_level/200. Coordinates are not
    clamped, so with high noise some points land outside [0, 1].
    """
    if rng is None:
        rng = np.random.RandomState()
    spread = spread_for(noise_level)
    half = n // 2
    points = _cluster(rng, half, POSITIVE_CENTER, spread, 1)
    points += _cluster(rng, half, NEGATIVE_CENTER, spread, 0)
    logger.info("Generated %d points (noise=%s, spread=%.3f)", len(points), noise_level, spread)
    return points
