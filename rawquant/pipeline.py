"""Single-pass resample and quantize pipeline.

load -> resolve pivot -> resample (box filter when shrinking) -> quantize ->
pack. Nothing is kept between runs; the returned buffer belongs to the
caller, normally a display surface.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, PipelineParams
from .pivot import resolve_pivot
from .quantizers import quantization_table
from .utils.loader import PlanarImage, load_planar_rgb
from .utils.pack import PixelBuffer, pack_interleaved
from .utils.resample import output_size, resample_planes

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    buffer: PixelBuffer
    pivot: int
    levels: set[int] = field(default_factory=set)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height


def run_pipeline(image: PlanarImage, params: PipelineParams) -> PipelineResult:
    """Resample and quantize ``image`` according to ``params``.

    ``levels`` in the result holds the distinct quantized red values, for
    checking how many levels a setting really produces.
    """
    params.validate()
    out_w, out_h = output_size(image.width, image.height, params.scale)
    logger.debug(
        "scale=%s quant=%d (%d levels) mode=%d -> %dx%d",
        params.scale, params.quant, params.num_intervals, params.mode, out_w, out_h,
    )

    pivot = resolve_pivot(
        image.r, image.g, image.b, params.mode, normalization=params.pivot_normalization
    )
    table = quantization_table(params.quant, pivot, params.log_base)

    r, g, b = (table[plane] for plane in resample_planes(image, params.scale))
    levels = set(r.tolist())
    logger.debug("Red values found: %s", sorted(levels))

    return PipelineResult(pack_interleaved(r, g, b, out_w, out_h), pivot, levels)


def process_file(
    path: Union[str, Path],
    params: PipelineParams,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    strict: bool = False,
) -> PipelineResult:
    """Validate ``params``, load ``path`` and run the pipeline on it."""
    params.validate()
    output_size(width, height, params.scale)
    image = load_planar_rgb(path, width, height, strict=strict)
    return run_pipeline(image, params)
