"""SHT <-> RGB conversion.

Forward: start from the hue's base triple, apply tone, then shade or tint, each
step halving the remaining distance to the modifier's pole, then round every
channel to the grid of `precision` hex digits (half to even).

Inverse: exhaustive search over every valid code. Candidates are kept sorted by
(total modifier steps, hue index, canonical modifier letters) and their
quantized triples are stored in a numpy integer array per precision, so the
first minimum of the Chebyshev distance is also the tie-break winner.

All channel arithmetic is exact: Fractions for values, integers for grid units.
"""

from fractions import Fraction
from functools import lru_cache

import numpy as np

from sht_colour.core.model import MAX_DEPTH, Hue, Rgb, ShtCode, check_precision, grid_denominator

_INT64_MAX = int(np.iinfo(np.int64).max)


def sht_to_rgb_exact(code: ShtCode) -> Rgb:
    """Unrounded RGB for a code."""
    if not isinstance(code, ShtCode):
        raise TypeError(f'expected ShtCode, got {type(code).__name__}')
    channels = code.hue.base
    for modifier, count in code.modifiers.items():
        if count:
            channels = tuple(modifier.apply(value, count) for value in channels)
    return Rgb(*channels)


def sht_to_rgb(code: ShtCode, precision: int) -> Rgb:
    """RGB for a code, rounded to the grid of `precision` hex digits."""
    denominator = grid_denominator(precision)
    exact = sht_to_rgb_exact(code)
    return Rgb(*(Fraction(round(value * denominator), denominator) for value in exact.components()))


@lru_cache(maxsize=None)
def candidates() -> tuple[ShtCode, ...]:
    """Every valid code, in tie-break order."""
    codes = []
    for hue in Hue:
        for tone in range(MAX_DEPTH + 1):
            codes.append(ShtCode(hue, tone=tone))
            for count in range(1, MAX_DEPTH + 1):
                codes.append(ShtCode(hue, tone=tone, shade=count))
                codes.append(ShtCode(hue, tone=tone, tint=count))
    return tuple(sorted(codes, key=lambda code: code.sort_key))


@lru_cache(maxsize=None)
def _exact_table() -> tuple[tuple[Fraction, Fraction, Fraction], ...]:
    return tuple(sht_to_rgb_exact(code).components() for code in candidates())


@lru_cache(maxsize=16)
def _grid_table(precision: int) -> np.ndarray:
    denominator = grid_denominator(precision)
    # int64 holds every grid value up to 15 hex digits; wider grids fall back to Python ints
    dtype = np.int64 if denominator <= _INT64_MAX else object
    rows = [[round(value * denominator) for value in channels] for channels in _exact_table()]
    table = np.array(rows, dtype=dtype)
    table.flags.writeable = False
    return table


def grid_table(precision: int) -> np.ndarray:
    """Read-only (candidates x 3) array of candidate channels in grid units."""
    return _grid_table(check_precision(precision))


def grid_distances(rgb: Rgb, precision: int) -> np.ndarray:
    """Chebyshev distance, in grid units, from `rgb` to every candidate."""
    if not isinstance(rgb, Rgb):
        rgb = Rgb(*rgb)
    table = grid_table(precision)
    target = np.array(rgb.grid(precision), dtype=table.dtype)
    return np.abs(table - target).max(axis=1)


def rgb_to_sht(rgb: Rgb, precision: int) -> ShtCode:
    """Nearest SHT code to `rgb` at `precision`. Raises OutOfRangeChannel outside [0, 1]."""
    distances = grid_distances(rgb, precision)
    return candidates()[int(np.argmin(distances))]
