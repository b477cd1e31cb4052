"""Pivot selection for the logarithmic quantizer."""
from __future__ import annotations

import logging

import numpy as np

from .config import AUTO_PIVOT, PIVOT_NORMALIZATIONS, PIVOT_STRIDE
from .errors import ParameterError

logger = logging.getLogger(__name__)

Array = np.ndarray


def strided_sum(r: Array, g: Array, b: Array, stride: int = PIVOT_STRIDE) -> tuple[int, int]:
    """Sum every ``stride``-th sample of the three planes.

    Returns the total and the number of samples taken per channel.
    """
    total = 0
    count = 0
    for plane in (r, g, b):
        taps = np.asarray(plane, dtype=np.uint8)[::stride]
        total += int(taps.sum(dtype=np.int64))
        count = taps.size
    return total, count


def resolve_pivot(
    r: Array,
    g: Array,
    b: Array,
    mode: int,
    normalization: str = "mean",
) -> int:
    """Turn ``mode`` into a concrete pivot when it asks for one.

    Explicit pivots and the uniform flag pass through unchanged. For
    ``AUTO_PIVOT`` the pivot is derived from every 100th sample of all three
    planes.

    ``normalization="mean"`` divides the strided sum by the number of samples
    taken, giving the strided mean. ``"legacy"`` keeps the older integer chain
    ``(sum // (n // 5)) // 3`` where ``n`` is the plane length; it lands far
    below the mean on most images but is kept for matching earlier output.
    """
    if mode != AUTO_PIVOT:
        return mode
    if normalization not in PIVOT_NORMALIZATIONS:
        raise ParameterError(f"Unknown pivot normalization: {normalization}")

    total, count = strided_sum(r, g, b)
    n = np.asarray(r).size
    if count == 0:
        pivot = 0
    elif normalization == "mean":
        pivot = total // (count * 3)
    else:
        pivot = (total // max(1, n // 5)) // 3

    pivot = max(0, min(int(pivot), 255))
    logger.debug("Pivot calculated: %d", pivot)
    return pivot
