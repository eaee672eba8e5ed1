"""Linear domain→pixel scales for the scene chart's plot area."""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from config import PLOT_WIDTH, PLOT_HEIGHT, VALUE_PADDING
from utils.errors import EmptySeriesError


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, v):
        d0, d1 = self.domain
        r0, r1 = self.range
        v = np.asarray(v, dtype=float)
        if d1 == d0:
            # degenerate domain maps everything to the middle of the range
            out = np.full_like(v, (r0 + r1) / 2.0)
        else:
            out = r0 + (v - d0) * (r1 - r0) / (d1 - d0)
        return out.item() if out.ndim == 0 else out


def extent(values: Sequence[float]) -> Tuple[float, float]:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise EmptySeriesError("Cannot compute the extent of an empty series")
    return float(arr.min()), float(arr.max())


def year_domain(years: Sequence[float]) -> Tuple[float, float]:
    return extent(years)


def value_domain(values: Sequence[float], padding: float = VALUE_PADDING) -> Tuple[float, float]:
    lo, hi = extent(values)
    return lo - padding, hi + padding


def build_scales(years, values, width: float = PLOT_WIDTH, height: float = PLOT_HEIGHT):
    """
    Return the (x, y) scales for a series.

    x maps the year extent onto [0, width]; y maps the padded value extent
    onto [height, 0] so that larger values sit higher on screen.
    """
    x = LinearScale(year_domain(years), (0.0, float(width)))
    y = LinearScale(value_domain(values), (float(height), 0.0))
    return x, y
