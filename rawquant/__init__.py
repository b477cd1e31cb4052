"""Raw planar RGB downscaling and quantization."""
from __future__ import annotations

from .config import AUTO_PIVOT, UNIFORM, PipelineParams  # noqa: F401
from .pipeline import PipelineResult, process_file, run_pipeline  # noqa: F401
from .pivot import resolve_pivot  # noqa: F401
from .quantizers import apply_quantization  # noqa: F401
from .quantizers.logarithmic import quantize_log  # noqa: F401
from .quantizers.uniform import quantize_uniform  # noqa: F401
from .utils.loader import PlanarImage, load_planar_rgb  # noqa: F401
from .utils.pack import PixelBuffer, pack_interleaved  # noqa: F401
from .utils.resample import resample_coordinate, resample_planes  # noqa: F401

__all__ = [
    "AUTO_PIVOT",
    "UNIFORM",
    "PipelineParams",
    "PipelineResult",
    "process_file",
    "run_pipeline",
    "resolve_pivot",
    "apply_quantization",
    "quantize_log",
    "quantize_uniform",
    "PlanarImage",
    "load_planar_rgb",
    "PixelBuffer",
    "pack_interleaved",
    "resample_coordinate",
    "resample_planes",
]
