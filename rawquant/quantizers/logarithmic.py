"""Logarithmic quantization centred on a pivot value.

Samples are measured by their signed log distance from the pivot and the
range ``[log_scale(0), log_scale(255)]`` is cut into equal-width intervals.
In raw sample space that leaves narrow buckets next to the pivot and wide
ones towards 0 and 255, so tones near the pivot keep more detail.
"""
from __future__ import annotations

import math

import numpy as np

Array = np.ndarray


def log_scale(value: float, pivot: int, base: float = 2.0) -> float:
    """Signed ``log_base(1 + |value - pivot|)``, negative below the pivot."""
    distance = abs(value - pivot)
    scaled = math.log(1 + distance) / math.log(base)
    return -scaled if value < pivot else scaled


def quantize_log(value: int, pivot: int, num_intervals: int, base: float = 2.0) -> int:
    """Quantize ``value`` to the centre of its log-distance interval.

    Parameters
    ----------
    value : int
        Sample in [0, 255].
    pivot : int
        Centre of the scale, in [0, 255]. ``quantize_log(pivot, pivot, n)``
        is always ``pivot``.
    num_intervals : int
        Number of intervals the log range is split into.
    base : float
        Logarithm base (> 1).

    Returns
    -------
    int
        Quantized sample, clamped to [0, 255].
    """
    if value == pivot:
        return pivot

    log_min = log_scale(0, pivot, base)
    log_max = log_scale(255, pivot, base)
    interval_size = (log_max - log_min) / num_intervals
    index = math.floor((log_scale(value, pivot, base) - log_min) / interval_size)
    index = max(0, min(index, num_intervals - 1))

    quantized_log = log_min + (index + 0.5) * interval_size
    if quantized_log >= 0:
        distance = base ** quantized_log - 1
    else:
        distance = -(base ** -quantized_log - 1)

    return max(0, min(pivot + round(distance), 255))


def log_table(pivot: int, num_intervals: int, base: float = 2.0) -> Array:
    """Lookup table of :func:`quantize_log` for every sample value."""
    return np.array(
        [quantize_log(v, pivot, num_intervals, base) for v in range(256)],
        dtype=np.int32,
    )


def quantize_log_array(arr: Array, pivot: int, num_intervals: int, base: float = 2.0) -> Array:
    """Apply :func:`quantize_log` to an integer array of samples in [0, 255]."""
    return log_table(pivot, num_intervals, base)[np.asarray(arr, dtype=np.int64)]
