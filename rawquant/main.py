"""Command-line entry point for RawQuant.

This tool loads a raw planar RGB file, downscales it with a 3x3 box filter,
reduces each channel to ``2**quant`` levels (uniform or logarithmic around a
pivot) and hands the result to a display surface: an output image file, a
window, or both.

Usage example:
    python -m rawquant.main Lena_512_512.rgb 0.5 3 -1 -o lena.png
    python -m rawquant.main Lena_512_512.rgb 1.0 2 --show
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import AUTO_PIVOT, DEFAULT_HEIGHT, DEFAULT_WIDTH, PipelineParams
from .display import ImageFileSurface, WindowSurface
from .errors import ParameterError, TruncatedInputError
from .pipeline import process_file
from .utils.resample import output_size


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="rawquant",
        description=(
            "Downscale and quantize a raw planar RGB image. "
            "Mode -1 is uniform quantization, -2 picks a pivot from the image, "
            "0..255 uses that value as the logarithmic pivot."
        ),
    )

    parser.add_argument("image", help="Path to the raw planar RGB file")
    parser.add_argument("scale", type=float, help="Output scale (0.0-1.0]")
    parser.add_argument("quant", type=int, help="Bits per channel (1-8)")
    parser.add_argument(
        "mode",
        type=int,
        nargs="?",
        default=AUTO_PIVOT,
        help="-1 uniform, -2 auto pivot (default), 0..255 explicit pivot",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Source width")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Source height")
    parser.add_argument("-o", "--output", default=None, help="Write the result to this image file")
    parser.add_argument("--show", action="store_true", help="Open the result in a window")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on a truncated input file instead of zero-filling it",
    )
    parser.add_argument(
        "--legacy-pivot",
        action="store_true",
        help="Normalize the auto pivot with the older (sum/(n/5))/3 constant",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> PipelineParams:
    """Validate argument values and build the pipeline parameters.

    Raises ParameterError for invalid inputs.
    """
    if ns.width < 1 or ns.height < 1:
        raise ParameterError("--width and --height must be >= 1")
    params = PipelineParams(
        scale=ns.scale,
        quant=ns.quant,
        mode=ns.mode,
        pivot_normalization="legacy" if ns.legacy_pivot else "mean",
    )
    params.validate()
    output_size(ns.width, ns.height, params.scale)
    return params


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Returns
    -------
    int
        Exit status code: 0 on success, 1 if the input cannot be read,
        2 for invalid arguments.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = validate_args(args)
    except ParameterError as e:
        print(f"Argument error: {e}")
        return 2

    print(f"Image: {args.image}")
    print(f"Scale: {params.scale}  Quantization: {params.quant}  Mode: {params.mode}")

    try:
        result = process_file(args.image, params, args.width, args.height, strict=args.strict)
    except TruncatedInputError as e:
        print(f"Truncated input: {e}")
        return 1
    except OSError as e:
        print(f"Error opening file for reading: {e}")
        return 1

    if params.mode == AUTO_PIVOT:
        print(f"Pivot calculated: {result.pivot}")
    print("Red values found:")
    for v in sorted(result.levels):
        print(v)

    if args.output:
        ImageFileSurface(args.output).present(result.buffer)
        print(f"Wrote image: {args.output}")
    if args.show:
        WindowSurface().present(result.buffer)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
