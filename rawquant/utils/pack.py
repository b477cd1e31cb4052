"""Interleave quantized planes into the buffer handed to a display surface."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

Array = np.ndarray


@dataclass
class PixelBuffer:
    """Interleaved RGB bytes ``[R0, G0, B0, R1, ...]`` plus dimensions.

    Whoever receives a PixelBuffer owns it; the packer keeps no reference.
    """

    data: Array
    width: int
    height: int

    def __len__(self) -> int:
        return int(self.data.size)

    def to_array(self) -> Array:
        """View the buffer as an (H, W, 3) uint8 image."""
        return self.data.reshape(self.height, self.width, 3)

    def tobytes(self) -> bytes:
        return self.data.tobytes()


def pack_interleaved(r: Array, g: Array, b: Array, width: int, height: int) -> PixelBuffer:
    """Interleave three planes of ``width * height`` samples.

    Parameters
    ----------
    r, g, b : np.ndarray
        Flat per-channel samples in [0, 255].
    width, height : int
        Output image dimensions.

    Returns
    -------
    PixelBuffer
        A freshly allocated uint8 buffer of length ``3 * width * height``.
    """
    n = width * height
    for name, plane in (("r", r), ("g", g), ("b", b)):
        if np.asarray(plane).size != n:
            raise ValueError(f"{name} has {np.asarray(plane).size} samples, expected {n}")

    data = np.empty(3 * n, dtype=np.uint8)
    data[0::3] = np.clip(r, 0, 255)
    data[1::3] = np.clip(g, 0, 255)
    data[2::3] = np.clip(b, 0, 255)
    return PixelBuffer(data, width, height)
