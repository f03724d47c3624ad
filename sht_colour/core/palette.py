"""Palette helpers built on the converter: ramps, distances, ranked nearest codes."""

import numpy as np

from sht_colour.core.convert import candidates, grid_distances
from sht_colour.core.model import MAX_DEPTH, Modifier, Rgb, ShtCode


def ramp(code: ShtCode, modifier: Modifier, steps: int) -> list[ShtCode]:
    """`code` followed by up to `steps` further applications of `modifier`.

    Stops early at MAX_DEPTH. Raises InvalidCode when the modifier conflicts
    with one already on the code (tint on a shaded code and vice versa).
    """
    if steps < 0:
        raise ValueError(f'steps must be non-negative, got {steps}')
    start = code.count(modifier)
    last = min(start + steps, MAX_DEPTH)
    return [code.with_modifier(modifier, count) for count in range(start, last + 1)]


def rgb_distance(a: Rgb, b: Rgb, precision: int) -> int:
    """Chebyshev distance between two colours in grid units at `precision`."""
    return max(abs(x - y) for x, y in zip(a.grid(precision), b.grid(precision)))


def nearest(rgb: Rgb, precision: int, limit: int = 5) -> list[tuple[ShtCode, int]]:
    """The `limit` closest codes with their distances, best first, ties in tie-break order."""
    if limit < 1:
        raise ValueError(f'limit must be positive, got {limit}')
    distances = grid_distances(rgb, precision)
    order = np.argsort(distances, kind='stable')[:limit]
    codes = candidates()
    return [(codes[int(i)], int(distances[i])) for i in order]
