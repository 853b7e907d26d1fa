import math

from iaukit.angles import (
    Sexagesimal,
    decompose_days,
    decompose_radians,
    decompose_radians_hours,
)
from iaukit.constants import D2PI


def rad_to_deg(rad: float) -> float:
    return math.degrees(rad)


def rad_to_arcsec(rad: float) -> float:
    return math.degrees(rad) * 3600.0


def _wrap_turn(rad: float) -> float:
    return rad % D2PI


def format_sexagesimal(
    parts: Sexagesimal, ndp: int = 2, sep: str = ":", signed: bool = False
) -> str:
    if signed:
        sign = parts.sign
    else:
        sign = "-" if parts.sign == "-" else ""
    text = f"{sign}{parts.units:02d}{sep}{parts.minutes:02d}{sep}{parts.seconds:02d}"
    if ndp > 0:
        text += f".{parts.fraction:0{ndp}d}"
    return text


def rad_to_hms(rad: float, ndp: int = 2, sep: str = ":", wrap: bool = True) -> str:
    if wrap:
        rad = _wrap_turn(rad)
    parts = decompose_radians_hours(ndp, rad)
    if wrap and parts.units == 24:
        parts = Sexagesimal(parts.sign, 0, 0, 0, 0)
    return format_sexagesimal(parts, ndp=ndp, sep=sep)


def rad_to_dms(rad: float, ndp: int = 2, sep: str = ":") -> str:
    parts = decompose_radians(ndp, rad)
    return format_sexagesimal(parts, ndp=ndp, sep=sep, signed=True)


def days_to_hms(days: float, ndp: int = 2, sep: str = ":") -> str:
    parts = decompose_days(ndp, days)
    return format_sexagesimal(parts, ndp=ndp, sep=sep)


def format_angle(rad: float, style: str = "deg", ndp: int = 2, sep: str = ":") -> str:
    places = max(ndp, 0)
    if style == "rad":
        return f"{rad:.{places}f}"
    if style == "deg":
        return f"{rad_to_deg(rad):.{places}f}°"
    if style == "arcsec":
        return f'{rad_to_arcsec(rad):.{places}f}"'
    if style == "hms":
        return rad_to_hms(rad, ndp=ndp, sep=sep)
    if style == "dms":
        return rad_to_dms(rad, ndp=ndp, sep=sep)
    raise ValueError(f"Unknown angle style: {style}")
