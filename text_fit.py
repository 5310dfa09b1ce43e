"""
Shrink-to-fit helpers for single lines of badge text.
"""

import math
from typing import Callable, Tuple

from badge_settings import MIN_FONT_SIZE

Measure = Callable[[str, float], float]


def measure_fitted(text: str, start_size: float, max_width: float, measure: Measure,
                   min_size: int = MIN_FONT_SIZE) -> Tuple[int, float]:
    """Return ``(size, width)`` for the largest whole size <= ``start_size`` that fits.

    Sizes step down by 1 while ``measure(text, size)`` is wider than ``max_width``.
    Text that is still too wide at ``min_size`` is left at ``min_size``; a start
    below ``min_size`` is never raised to it.
    """
    size = int(math.floor(start_size))
    floor = min(min_size, size)
    width = measure(text, size)
    while width > max_width and size > floor:
        size -= 1
        width = measure(text, size)
    return size, width


def fit_font_size(text: str, start_size: float, max_width: float, measure: Measure,
                  min_size: int = MIN_FONT_SIZE) -> int:
    size, _ = measure_fitted(text, start_size, max_width, measure, min_size)
    return size
