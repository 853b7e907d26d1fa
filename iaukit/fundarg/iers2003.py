"""Fundamental arguments of the IERS Conventions (2003).

Every function takes ``t``, TDB Julian centuries since J2000.0 (TT may be
used instead without significant loss of accuracy), and returns radians.

The Delaunay arguments (l, l', F, D, Omega) come from Simon et al. (1994)
and are expressed in arcseconds; the planetary mean longitudes come from
Souchay et al. (1999) and are expressed in radians. The general
accumulated precession in longitude follows Kinoshita & Souchay (1990)
and is not range-reduced.
"""

from iaukit.constants import D2PI, TURNAS
from .types import FundamentalArgument

MOON_MEAN_ANOMALY = FundamentalArgument(
    name="moon_mean_anomaly",
    symbol="l",
    description="Mean anomaly of the Moon",
    coefficients=(485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470),
    unit="arcsec",
    period=TURNAS,
)

SUN_MEAN_ANOMALY = FundamentalArgument(
    name="sun_mean_anomaly",
    symbol="l'",
    description="Mean anomaly of the Sun",
    coefficients=(1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149),
    unit="arcsec",
    period=TURNAS,
)

MOON_LATITUDE_ARGUMENT = FundamentalArgument(
    name="moon_latitude_argument",
    symbol="F",
    description="Mean longitude of the Moon minus that of the ascending node",
    coefficients=(335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417),
    unit="arcsec",
    period=TURNAS,
)

MOON_MEAN_ELONGATION = FundamentalArgument(
    name="moon_mean_elongation",
    symbol="D",
    description="Mean elongation of the Moon from the Sun",
    coefficients=(1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169),
    unit="arcsec",
    period=TURNAS,
)

MOON_NODE_LONGITUDE = FundamentalArgument(
    name="moon_node_longitude",
    symbol="Om",
    description="Mean longitude of the Moon's ascending node",
    coefficients=(450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939),
    unit="arcsec",
    period=TURNAS,
)

MERCURY_MEAN_LONGITUDE = FundamentalArgument(
    name="mercury_mean_longitude",
    symbol="L_Me",
    description="Mean longitude of Mercury",
    coefficients=(4.402608842, 2608.7903141574),
    unit="rad",
    period=D2PI,
)

VENUS_MEAN_LONGITUDE = FundamentalArgument(
    name="venus_mean_longitude",
    symbol="L_Ve",
    description="Mean longitude of Venus",
    coefficients=(3.176146697, 1021.3285546211),
    unit="rad",
    period=D2PI,
)

EARTH_MEAN_LONGITUDE = FundamentalArgument(
    name="earth_mean_longitude",
    symbol="L_E",
    description="Mean longitude of Earth",
    coefficients=(1.753470314, 628.3075849991),
    unit="rad",
    period=D2PI,
)

MARS_MEAN_LONGITUDE = FundamentalArgument(
    name="mars_mean_longitude",
    symbol="L_Ma",
    description="Mean longitude of Mars",
    coefficients=(6.203480913, 334.0612426700),
    unit="rad",
    period=D2PI,
)

JUPITER_MEAN_LONGITUDE = FundamentalArgument(
    name="jupiter_mean_longitude",
    symbol="L_J",
    description="Mean longitude of Jupiter",
    coefficients=(0.599546497, 52.9690962641),
    unit="rad",
    period=D2PI,
)

SATURN_MEAN_LONGITUDE = FundamentalArgument(
    name="saturn_mean_longitude",
    symbol="L_Sa",
    description="Mean longitude of Saturn",
    coefficients=(0.874016757, 21.3299104960),
    unit="rad",
    period=D2PI,
)

URANUS_MEAN_LONGITUDE = FundamentalArgument(
    name="uranus_mean_longitude",
    symbol="L_U",
    description="Mean longitude of Uranus",
    coefficients=(5.481293872, 7.4781598567),
    unit="rad",
    period=D2PI,
)

NEPTUNE_MEAN_LONGITUDE = FundamentalArgument(
    name="neptune_mean_longitude",
    symbol="L_Ne",
    description="Mean longitude of Neptune",
    coefficients=(5.311886287, 3.8133035638),
    unit="rad",
    period=D2PI,
)

GENERAL_PRECESSION = FundamentalArgument(
    name="general_precession",
    symbol="p_A",
    description="General accumulated precession in longitude",
    coefficients=(0.0, 0.024381750, 0.00000538691),
    unit="rad",
    period=None,
)

ARGUMENTS = {
    arg.name: arg
    for arg in (
        MOON_MEAN_ANOMALY,
        SUN_MEAN_ANOMALY,
        MOON_LATITUDE_ARGUMENT,
        MOON_MEAN_ELONGATION,
        MOON_NODE_LONGITUDE,
        MERCURY_MEAN_LONGITUDE,
        VENUS_MEAN_LONGITUDE,
        EARTH_MEAN_LONGITUDE,
        MARS_MEAN_LONGITUDE,
        JUPITER_MEAN_LONGITUDE,
        SATURN_MEAN_LONGITUDE,
        URANUS_MEAN_LONGITUDE,
        NEPTUNE_MEAN_LONGITUDE,
        GENERAL_PRECESSION,
    )
}


def moon_mean_anomaly(t: float) -> float:
    return MOON_MEAN_ANOMALY(t)


def sun_mean_anomaly(t: float) -> float:
    return SUN_MEAN_ANOMALY(t)


def moon_latitude_argument(t: float) -> float:
    return MOON_LATITUDE_ARGUMENT(t)


def moon_mean_elongation(t: float) -> float:
    return MOON_MEAN_ELONGATION(t)


def moon_node_longitude(t: float) -> float:
    return MOON_NODE_LONGITUDE(t)


def mercury_mean_longitude(t: float) -> float:
    return MERCURY_MEAN_LONGITUDE(t)


def venus_mean_longitude(t: float) -> float:
    return VENUS_MEAN_LONGITUDE(t)


def earth_mean_longitude(t: float) -> float:
    return EARTH_MEAN_LONGITUDE(t)


def mars_mean_longitude(t: float) -> float:
    return MARS_MEAN_LONGITUDE(t)


def jupiter_mean_longitude(t: float) -> float:
    return JUPITER_MEAN_LONGITUDE(t)


def saturn_mean_longitude(t: float) -> float:
    return SATURN_MEAN_LONGITUDE(t)


def uranus_mean_longitude(t: float) -> float:
    return URANUS_MEAN_LONGITUDE(t)


def neptune_mean_longitude(t: float) -> float:
    return NEPTUNE_MEAN_LONGITUDE(t)


def general_precession(t: float) -> float:
    return GENERAL_PRECESSION(t)
