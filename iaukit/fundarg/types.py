from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

import numpy as np

from iaukit.constants import DAS2R


@dataclass(frozen=True)
class FundamentalArgument:
    """A fundamental argument as a polynomial in TDB Julian centuries.

    ``coefficients`` are in ascending powers of t. For ``unit="arcsec"``
    the polynomial is reduced modulo ``period`` in arcseconds and then
    converted to radians; for ``unit="rad"`` it is evaluated and reduced
    directly in radians. ``period=None`` leaves the value unreduced.

    The reduction is ``fmod``: the result carries the sign of the
    unreduced value, so negative angles are valid outputs.
    """

    name: str
    symbol: str
    description: str
    coefficients: tuple[float, ...]
    unit: str
    period: float | None

    def __post_init__(self):
        if self.unit not in ("arcsec", "rad"):
            raise ValueError(f"Unknown argument unit: {self.unit}")
        if not self.coefficients:
            raise ValueError("At least one coefficient is required")

    def polynomial(self, t: float) -> float:
        """Raw polynomial value (arcseconds or radians), before reduction."""
        acc = self.coefficients[-1]
        for c in reversed(self.coefficients[:-1]):
            acc = c + t * acc
        return acc

    def __call__(self, t: float) -> float:
        a = self.polynomial(t)
        if self.period is not None:
            # Overflowed polynomial: NaN, as C fmod gives
            a = math.fmod(a, self.period) if math.isfinite(a) else math.nan
        if self.unit == "arcsec":
            a *= DAS2R
        return a

    def evaluate_array(self, t: Sequence[float] | np.ndarray) -> np.ndarray:
        """Vectorized evaluation over an array of epochs."""
        t = np.asarray(t, dtype=float)
        acc = np.full_like(t, self.coefficients[-1])
        for c in reversed(self.coefficients[:-1]):
            acc = c + t * acc
        if self.period is not None:
            with np.errstate(invalid="ignore"):
                acc = np.fmod(acc, self.period)
        if self.unit == "arcsec":
            acc = acc * DAS2R
        return acc
