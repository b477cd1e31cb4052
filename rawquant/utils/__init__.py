"""Utility functions for RawQuant.

Modules:
- loader: planar RGB file IO and Pillow image saving.
- resample: nearest-neighbor downscaling with a 3x3 box filter.
- pack: interleaving planes into a display buffer.
"""
from .loader import PlanarImage, load_planar_rgb, save_planar_rgb, save_image
from .resample import output_size, resample_coordinate, resample_planes
from .pack import PixelBuffer, pack_interleaved

__all__ = [
    "PlanarImage",
    "load_planar_rgb",
    "save_planar_rgb",
    "save_image",
    "output_size",
    "resample_coordinate",
    "resample_planes",
    "PixelBuffer",
    "pack_interleaved",
]
