"""Per-channel bit depth reduction and a unified entry-point.

Exported API
------------
- apply_quantization(samples, quant, mode, base=2.0)

Supported modes
---------------
- ``UNIFORM`` (-1) : equal-width buckets over [0, 255], snapped to midpoints
- ``0..255``       : logarithmic buckets centred on the given pivot

``AUTO_PIVOT`` (-2) must be resolved to a concrete pivot first, see
:func:`rawquant.pivot.resolve_pivot`.
"""
from __future__ import annotations

import numpy as np

from ..config import QUANT_MAX, QUANT_MIN, UNIFORM, is_explicit_pivot
from ..errors import ParameterError
from . import logarithmic, uniform

Array = np.ndarray


def intervals_from_quant(quant: int) -> int:
    """Number of representable levels for a ``quant``-bit channel."""
    if not QUANT_MIN <= quant <= QUANT_MAX:
        raise ParameterError(f"quant must be in {QUANT_MIN}..{QUANT_MAX}, got {quant}")
    return 2 ** quant


def quantization_table(quant: int, mode: int, base: float = 2.0) -> Array:
    """256-entry table mapping sample values to quantized values."""
    n = intervals_from_quant(quant)
    if mode == UNIFORM:
        return uniform.uniform_table(n)
    if is_explicit_pivot(mode):
        return logarithmic.log_table(mode, n, base)
    raise ParameterError(f"mode must be -1 or a pivot in 0..255, got {mode}")


def apply_quantization(samples: Array, quant: int, mode: int, base: float = 2.0) -> Array:
    """Quantize integer samples in [0, 255].

    Parameters
    ----------
    samples : np.ndarray
        Integer samples of any shape.
    quant : int
        Bits kept per channel (1..8).
    mode : int
        ``UNIFORM`` or a resolved pivot.
    base : float
        Logarithm base for the pivot-centred quantizer.

    Returns
    -------
    np.ndarray
        Quantized int32 samples, same shape as ``samples``.
    """
    arr = np.asarray(samples, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError("samples must lie in [0, 255]")
    n = intervals_from_quant(quant)
    if mode == UNIFORM:
        return uniform.quantize_uniform_array(arr, n)
    if is_explicit_pivot(mode):
        return logarithmic.quantize_log_array(arr, mode, n, base)
    raise ParameterError(f"mode must be -1 or a pivot in 0..255, got {mode}")


__all__ = ["apply_quantization", "intervals_from_quant", "quantization_table"]
