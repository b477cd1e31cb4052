"""Uniform quantization: equal-width buckets snapped to their midpoint."""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def quantize_uniform(value: int, num_intervals: int) -> int:
    """Snap ``value`` (0..255) to the midpoint of its bucket.

    ``[0, 255]`` is split into ``num_intervals`` buckets of ``256 //
    num_intervals`` values each.
    """
    bit_intervals = 256 // num_intervals
    return (int(value) // bit_intervals) * bit_intervals + bit_intervals // 2


def uniform_table(num_intervals: int) -> Array:
    """Lookup table mapping every sample value to its quantized value."""
    return np.array([quantize_uniform(v, num_intervals) for v in range(256)], dtype=np.int32)


def quantize_uniform_array(arr: Array, num_intervals: int) -> Array:
    """Uniformly quantize an integer array of samples in [0, 255]."""
    return uniform_table(num_intervals)[np.asarray(arr, dtype=np.int64)]
