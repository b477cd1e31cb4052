"""Raw planar RGB loading and image saving, with NumPy arrays.

Input files carry no header: ``width * height`` red samples, then the same
number of green and blue samples, each plane row-major. Pillow is used only
to write finished interleaved images.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..errors import ParameterError, TruncatedInputError

logger = logging.getLogger(__name__)

Array = np.ndarray


@dataclass(frozen=True)
class PlanarImage:
    """Three read-only uint8 planes of one source image."""

    r: Array
    g: Array
    b: Array
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def planes(self) -> tuple[Array, Array, Array]:
        return self.r, self.g, self.b

    @classmethod
    def from_planes(cls, r, g, b, width: int, height: int) -> "PlanarImage":
        """Build an image from array-likes, copying and freezing each plane."""
        frozen = []
        for plane in (r, g, b):
            arr = np.array(plane, dtype=np.uint8).reshape(-1)
            if arr.size != width * height:
                raise ValueError(
                    f"plane has {arr.size} samples, expected {width * height}"
                )
            arr.flags.writeable = False
            frozen.append(arr)
        return cls(frozen[0], frozen[1], frozen[2], width, height)


def _check_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ParameterError(f"image dimensions must be positive, got {width}x{height}")


def load_planar_rgb(
    path: Union[str, Path],
    width: int,
    height: int,
    strict: bool = False,
) -> PlanarImage:
    """Load a planar RGB file into a :class:`PlanarImage`.

    Parameters
    ----------
    path : str | Path
        Raw file holding the R plane, then G, then B.
    width, height : int
        Source dimensions; each plane is ``width * height`` bytes.
    strict : bool
        Raise :class:`TruncatedInputError` on a short file instead of
        zero-filling the missing samples.

    Returns
    -------
    PlanarImage
        The three planes, read-only.

    Raises
    ------
    OSError
        If the file cannot be opened.
    """
    _check_dimensions(width, height)
    p = Path(path)
    n = width * height

    with open(p, "rb") as f:
        chunks = [f.read(n) for _ in range(3)]
        trailing = len(f.read(1))

    got = sum(len(c) for c in chunks)
    if got < 3 * n:
        if strict:
            raise TruncatedInputError(str(p), 3 * n, got)
        logger.warning(
            "%s is truncated: read %d of %d bytes, missing samples set to 0",
            p, got, 3 * n,
        )
    elif trailing:
        logger.debug("%s has data past %d bytes, ignoring it", p, 3 * n)

    planes = []
    for chunk in chunks:
        plane = np.zeros(n, dtype=np.uint8)
        plane[: len(chunk)] = np.frombuffer(chunk, dtype=np.uint8)
        planes.append(plane)
    return PlanarImage.from_planes(*planes, width=width, height=height)


def save_planar_rgb(image: PlanarImage, path: Union[str, Path]) -> None:
    """Write ``image`` back out in the same planar layout it is read in."""
    p = Path(path)
    with open(p, "wb") as f:
        for plane in image.planes:
            f.write(plane.tobytes())


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGB NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 3), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")

    im = Image.fromarray(arr)
    im.save(Path(path))
