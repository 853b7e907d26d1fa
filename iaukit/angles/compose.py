from __future__ import annotations

import logging

from iaukit.constants import DAS2R, DAYSEC, DS2R
from iaukit.errors import FieldRangeError

logger = logging.getLogger(__name__)


def _check_fields(
    units: int, units_max: int, minutes: int, seconds: float, strict: bool
) -> None:
    problems = []
    if units < 0 or units > units_max:
        problems.append(f"units {units} outside 0-{units_max}")
    if minutes < 0 or minutes > 59:
        problems.append(f"minutes {minutes} outside 0-59")
    if not (0.0 <= seconds < 60.0):
        problems.append(f"seconds {seconds} outside [0, 60)")
    if not problems:
        return
    message = "; ".join(problems)
    if strict:
        raise FieldRangeError(message)
    logger.warning("Composing out-of-range sexagesimal fields: %s", message)


def _total_seconds(units: int, minutes: int, seconds: float) -> float:
    return 60.0 * (60.0 * abs(units) + abs(minutes)) + abs(seconds)


def _sign_factor(sign: str) -> float:
    return -1.0 if sign == "-" else 1.0


def compose_days(
    sign: str, hours: int, minutes: int, seconds: float, strict: bool = True
) -> float:
    """Convert hours, minutes, seconds to days."""
    _check_fields(hours, 23, minutes, seconds, strict)
    return _sign_factor(sign) * _total_seconds(hours, minutes, seconds) / DAYSEC


def compose_radians_hours(
    sign: str, hours: int, minutes: int, seconds: float, strict: bool = True
) -> float:
    """Convert hours, minutes, seconds to radians."""
    _check_fields(hours, 23, minutes, seconds, strict)
    return _sign_factor(sign) * _total_seconds(hours, minutes, seconds) * DS2R


def compose_radians(
    sign: str, degrees: int, arcmin: int, arcsec: float, strict: bool = True
) -> float:
    """Convert degrees, arcminutes, arcseconds to radians."""
    _check_fields(degrees, 359, arcmin, arcsec, strict)
    return _sign_factor(sign) * _total_seconds(degrees, arcmin, arcsec) * DAS2R
