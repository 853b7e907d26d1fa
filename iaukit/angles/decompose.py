"""Decompose days or radians into sexagesimal fields.

The resolution ``ndp`` selects the decimal place of the fraction field:

    ndp         resolution
     :      ...0000 00 00
    -7         1000 00 00
    -6          100 00 00
    -5           10 00 00
    -4            1 00 00
    -3            0 10 00
    -2            0 01 00
    -1            0 00 10
     0            0 00 01
     1            0 00 00.1
     2            0 00 00.01
     3            0 00 00.001
     :            0 00 00.000...

Scaled values are truncated toward zero, not rounded to nearest.

The largest useful ndp depends on the magnitude of the input and on double
precision: for values up to one day (or one turn) it is about 12. Larger
ndp values are accepted and simply carry noise in the fraction field. When
the value in resolution units overflows a double, every field comes back
as zero.

Values at or beyond one full cycle are not normalized. A value that
truncates to exactly 24 hours (or 360 degrees) comes back with the units
field set to 24 (or 360); callers that need [0, 24) must test for that.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import NamedTuple

from iaukit.constants import D2PI, DAYSEC
from iaukit.errors import AngleError

logger = logging.getLogger(__name__)

# Hours to degrees times radians to turns
_RAD_TO_DEG_DAYS = 15.0 / D2PI


class Sexagesimal(NamedTuple):
    sign: str
    units: int
    minutes: int
    seconds: int
    fraction: int

    def value(self, ndp: int) -> float:
        """Unsigned magnitude in the large unit (hours or degrees)."""
        return (
            self.units
            + self.minutes / 60.0
            + self.seconds / 3600.0
            + self.fraction / 10 ** max(ndp, 0) / 3600.0
        )

    def signed_value(self, ndp: int) -> float:
        v = self.value(ndp)
        return -v if self.sign == "-" else v


def _coarse_quantum(steps: int) -> float:
    # Seconds per grid step: 10s, 1m, 10m, 1h, 10h, 100h, ... (inf when huge)
    q = 1.0
    for n in range(1, steps + 1):
        q *= 6.0 if n in (2, 4) else 10.0
    return q


def _degraded(sign: str, ndp: int, days: float) -> Sexagesimal:
    logger.debug("Resolution units overflow for ndp=%d, days=%r", ndp, days)
    return Sexagesimal(sign, 0, 0, 0, 0)


def decompose_days(ndp: int, days: float) -> Sexagesimal:
    """Decompose an interval in days into hours, minutes, seconds, fraction."""
    if not math.isfinite(days):
        raise AngleError(f"Cannot decompose non-finite value: {days!r}")

    sign = "+" if days >= 0.0 else "-"
    a = DAYSEC * abs(days)
    if not math.isfinite(a):
        return _degraded(sign, ndp, days)

    # Pre-round if resolution coarser than 1s
    if ndp < 0:
        quantum = _coarse_quantum(-ndp)
        w = math.trunc(a / quantum)
        a = quantum * w if w else 0.0

    # Unit of each field in resolution units
    rs = 10 ** max(ndp, 0)
    rm = 60 * rs
    rh = 60 * rm

    scale = float(rs) if ndp <= sys.float_info.max_10_exp else math.inf
    scaled = scale * a
    if not math.isfinite(scaled):
        return _degraded(sign, ndp, days)
    count = math.trunc(scaled)

    hours, count = divmod(count, rh)
    minutes, count = divmod(count, rm)
    seconds, fraction = divmod(count, rs)

    return Sexagesimal(sign, hours, minutes, seconds, fraction)


def decompose_radians(ndp: int, angle: float) -> Sexagesimal:
    """Decompose radians into degrees, arcminutes, arcseconds, fraction."""
    return decompose_days(ndp, angle * _RAD_TO_DEG_DAYS)


def decompose_radians_hours(ndp: int, angle: float) -> Sexagesimal:
    """Decompose radians into hours, minutes, seconds, fraction."""
    return decompose_days(ndp, angle / D2PI)
