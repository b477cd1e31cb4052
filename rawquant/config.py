"""Fixed image layout and the parameters that drive one pipeline run."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import ParameterError

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512

# Mode values shared with the command line
UNIFORM = -1
AUTO_PIVOT = -2

QUANT_MIN = 1
QUANT_MAX = 8

LOG_BASE = 2.0
PIVOT_STRIDE = 100

PIVOT_NORMALIZATIONS = ("mean", "legacy")


def is_explicit_pivot(mode: int) -> bool:
    return 0 <= mode <= 255


@dataclass(frozen=True)
class PipelineParams:
    """Parameters for a single resample + quantize pass.

    Attributes
    ----------
    scale : float
        Output size relative to the source, in (0, 1].
    quant : int
        Bits per channel kept after quantization (1..8).
    mode : int
        ``UNIFORM`` (-1), ``AUTO_PIVOT`` (-2) or an explicit pivot 0..255.
    log_base : float
        Logarithm base used by the nonuniform quantizer.
    pivot_normalization : str
        How the auto pivot divides the strided sample sum, see
        :func:`rawquant.pivot.resolve_pivot`.
    """

    scale: float
    quant: int
    mode: int = AUTO_PIVOT
    log_base: float = LOG_BASE
    pivot_normalization: str = "mean"

    @property
    def num_intervals(self) -> int:
        return 2 ** self.quant

    @property
    def uniform(self) -> bool:
        return self.mode == UNIFORM

    def validate(self) -> None:
        """Raise ParameterError for values the engine cannot process."""
        if not self.scale > 0:
            raise ParameterError(f"scale must be > 0, got {self.scale}")
        if self.scale > 1:
            raise ParameterError(f"scale must be <= 1, got {self.scale}")
        if isinstance(self.quant, bool) or not isinstance(self.quant, int):
            raise ParameterError(f"quant must be an integer, got {self.quant!r}")
        if not QUANT_MIN <= self.quant <= QUANT_MAX:
            raise ParameterError(
                f"quant must be in {QUANT_MIN}..{QUANT_MAX}, got {self.quant}"
            )
        if self.mode not in (UNIFORM, AUTO_PIVOT) and not is_explicit_pivot(self.mode):
            raise ParameterError(
                f"mode must be -1 (uniform), -2 (auto pivot) or 0..255, got {self.mode}"
            )
        if not self.log_base > 1.0:
            raise ParameterError(f"log_base must be > 1, got {self.log_base}")
        if self.pivot_normalization not in PIVOT_NORMALIZATIONS:
            raise ParameterError(
                f"pivot_normalization must be one of {PIVOT_NORMALIZATIONS}"
            )
