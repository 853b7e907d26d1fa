import logging

from iaukit.constants import DJ00, DJC
from iaukit.errors import UnknownArgumentError
from .types import FundamentalArgument
from .iers2003 import (
    ARGUMENTS,
    moon_mean_anomaly,
    sun_mean_anomaly,
    moon_latitude_argument,
    moon_mean_elongation,
    moon_node_longitude,
    mercury_mean_longitude,
    venus_mean_longitude,
    earth_mean_longitude,
    mars_mean_longitude,
    jupiter_mean_longitude,
    saturn_mean_longitude,
    uranus_mean_longitude,
    neptune_mean_longitude,
    general_precession,
)

logger = logging.getLogger(__name__)


def julian_centuries(jd1: float, jd2: float = 0.0) -> float:
    """Julian centuries since J2000.0 for the two-part Julian Date jd1+jd2."""
    return ((jd1 - DJ00) + jd2) / DJC


def list_arguments() -> list[str]:
    return list(ARGUMENTS)


def get_argument(name: str) -> FundamentalArgument:
    try:
        return ARGUMENTS[name]
    except KeyError:
        raise UnknownArgumentError(
            f"Unknown fundamental argument: {name} "
            f"(expected one of: {', '.join(ARGUMENTS)})"
        ) from None


def evaluate_all(t: float, names=None) -> dict[str, float]:
    names = list(names) if names else list(ARGUMENTS)
    args = [get_argument(name) for name in names]
    logger.debug("Evaluating %d fundamental arguments at t=%r", len(args), t)
    return {arg.name: arg(t) for arg in args}


__all__ = [
    "ARGUMENTS",
    "FundamentalArgument",
    "evaluate_all",
    "get_argument",
    "julian_centuries",
    "list_arguments",
    "moon_mean_anomaly",
    "sun_mean_anomaly",
    "moon_latitude_argument",
    "moon_mean_elongation",
    "moon_node_longitude",
    "mercury_mean_longitude",
    "venus_mean_longitude",
    "earth_mean_longitude",
    "mars_mean_longitude",
    "jupiter_mean_longitude",
    "saturn_mean_longitude",
    "uranus_mean_longitude",
    "neptune_mean_longitude",
    "general_precession",
]
