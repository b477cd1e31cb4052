"""Nearest-neighbor downscaling of planar images with a 3x3 box filter.

Each output pixel maps back to ``floor(col / scale), floor(row / scale)`` in
the source. When shrinking, pixels whose 3x3 neighbourhood lies fully inside
the source are replaced by the average of the nine taps; edge pixels and
``scale == 1`` take the single source sample.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from ..errors import ParameterError
from .loader import PlanarImage

logger = logging.getLogger(__name__)

Array = np.ndarray

# (row, col) offsets of the nine box filter taps
_TAPS = [(dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1)]


def output_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """Return ``(out_width, out_height)`` for ``scale``.

    Raises ParameterError when the scale is not positive or would produce an
    empty image.
    """
    if not scale > 0:
        raise ParameterError(f"scale must be > 0, got {scale}")
    out_w = int(math.floor(width * scale))
    out_h = int(math.floor(height * scale))
    if out_w < 1 or out_h < 1:
        raise ParameterError(
            f"scale {scale} too small for a {width}x{height} image"
        )
    return out_w, out_h


def resample_coordinate(output_index: int, out_width: int, width: int, scale: float) -> int:
    """Map a linear output index to the linear index of its source pixel."""
    out_row, out_col = divmod(output_index, out_width)
    src_row = int(math.floor(out_row / scale))
    src_col = int(math.floor(out_col / scale))
    return src_row * width + src_col


def is_interior(src_row: int, src_col: int, width: int, height: int) -> bool:
    """True when the 3x3 neighbourhood around the pixel is inside the image."""
    return 1 <= src_row <= height - 2 and 1 <= src_col <= width - 2


def box_filter(plane: Array, src_row: int, src_col: int, width: int) -> int:
    """Average the 3x3 neighbourhood of one pixel.

    Every tap is divided by 9 before summing, so the result can sit a few
    levels below the exact mean.
    """
    total = 0
    for dy, dx in _TAPS:
        total += int(plane[(src_row + dy) * width + src_col + dx]) // 9
    return total


def source_axes(image: PlanarImage, scale: float) -> tuple[Array, Array]:
    """Source row and column indices sampled by every output row and column."""
    out_w, out_h = output_size(image.width, image.height, scale)
    rows = np.floor(np.arange(out_h) / scale).astype(np.int64)
    cols = np.floor(np.arange(out_w) / scale).astype(np.int64)
    return np.minimum(rows, image.height - 1), np.minimum(cols, image.width - 1)


def resample_plane(plane: Array, width: int, height: int, rows: Array, cols: Array, filtered: bool) -> Array:
    """Resample a single plane onto the grid given by ``rows`` x ``cols``.

    Returns a flat int32 array of length ``rows.size * cols.size``.
    """
    src = np.asarray(plane).reshape(height, width).astype(np.int32)
    raw = src[rows[:, None], cols[None, :]]
    if not filtered:
        return raw.reshape(-1)

    # Pad by one so edge lookups stay in bounds; those pixels are masked out.
    ninths = np.pad(src // 9, 1, mode="edge")
    avg = np.zeros_like(raw)
    for dy, dx in _TAPS:
        avg += ninths[rows[:, None] + 1 + dy, cols[None, :] + 1 + dx]

    row_ok = (rows >= 1) & (rows <= height - 2)
    col_ok = (cols >= 1) & (cols <= width - 2)
    mask = row_ok[:, None] & col_ok[None, :]
    return np.where(mask, avg, raw).reshape(-1)


def resample_planes(image: PlanarImage, scale: float) -> tuple[Array, Array, Array]:
    """Downscale all three planes of ``image`` by ``scale``.

    Parameters
    ----------
    image : PlanarImage
        Source planes.
    scale : float
        Scale factor in (0, 1]. Values below 1 enable the box filter.

    Returns
    -------
    tuple of np.ndarray
        Flat int32 R, G and B samples of the output image, row-major, each of
        length ``out_width * out_height``.
    """
    rows, cols = source_axes(image, scale)
    filtered = scale < 1
    logger.debug(
        "resampling %dx%d -> %dx%d (filtered=%s)",
        image.width, image.height, cols.size, rows.size, filtered,
    )
    return tuple(
        resample_plane(plane, image.width, image.height, rows, cols, filtered)
        for plane in image.planes
    )
