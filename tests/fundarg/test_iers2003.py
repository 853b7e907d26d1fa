import math

import numpy as np
import pytest

from iaukit.constants import D2PI, DAS2R, TURNAS
from iaukit.errors import IaukitError, UnknownArgumentError
from iaukit.fundarg import (
    ARGUMENTS,
    FundamentalArgument,
    evaluate_all,
    get_argument,
    julian_centuries,
    list_arguments,
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

# SOFA reference values at t = 0.8 Julian centuries
REFERENCE_AT_0_8 = [
    (moon_mean_anomaly, 5.132369751108684150),
    (sun_mean_anomaly, 6.226797973505507345),
    (moon_latitude_argument, 0.2597711366745499518),
    (moon_mean_elongation, 1.946709205396925672),
    (moon_node_longitude, -5.973618440951302183),
    (mercury_mean_longitude, 5.417338184297289661),
    (venus_mean_longitude, 3.424900460533758000),
    (earth_mean_longitude, 1.744713738913081846),
    (mars_mean_longitude, 3.275506840277781492),
    (jupiter_mean_longitude, 5.275711665202481138),
    (saturn_mean_longitude, 5.371574539440827046),
    (uranus_mean_longitude, 5.180636450180413523),
    (neptune_mean_longitude, 2.079343830860413523),
    (general_precession, 0.1950884762240000000e-1),
]

# erfa function name for each registered argument
ERFA_NAMES = {
    "moon_mean_anomaly": "fal03",
    "sun_mean_anomaly": "falp03",
    "moon_latitude_argument": "faf03",
    "moon_mean_elongation": "fad03",
    "moon_node_longitude": "faom03",
    "mercury_mean_longitude": "fame03",
    "venus_mean_longitude": "fave03",
    "earth_mean_longitude": "fae03",
    "mars_mean_longitude": "fama03",
    "jupiter_mean_longitude": "faju03",
    "saturn_mean_longitude": "fasa03",
    "uranus_mean_longitude": "faur03",
    "neptune_mean_longitude": "fane03",
    "general_precession": "fapa03",
}

SAMPLE_T = [-30.0, -5.5, -1.0, -0.077221081451, 0.0, 0.25, 0.8, 1.0, 7.3, 42.0]

MERCURY = get_argument("mercury_mean_longitude")
SUN = get_argument("sun_mean_anomaly")


@pytest.mark.parametrize("func,expected", REFERENCE_AT_0_8)
def test_reference_values(func, expected):
    assert func(0.8) == pytest.approx(expected, abs=1e-12)


def test_registry_covers_every_function():
    assert list_arguments() == list(ERFA_NAMES)
    for func, expected in REFERENCE_AT_0_8:
        assert ARGUMENTS[func.__name__](0.8) == func(0.8)


@pytest.mark.parametrize("name", list(ERFA_NAMES))
def test_matches_erfa(name):
    erfa = pytest.importorskip("erfa")
    erfa_func = getattr(erfa, ERFA_NAMES[name])
    for t in SAMPLE_T:
        assert get_argument(name)(t) == pytest.approx(float(erfa_func(t)), abs=1e-12)


def test_arcsecond_arguments_reduce_before_conversion():
    arg = get_argument("sun_mean_anomaly")
    for t in SAMPLE_T:
        raw = arg.polynomial(t)
        assert arg(t) == math.fmod(raw, TURNAS) * DAS2R
        assert -TURNAS < math.fmod(raw, TURNAS) < TURNAS


def test_radian_arguments_reduce_after_evaluation():
    arg = get_argument("mercury_mean_longitude")
    for t in SAMPLE_T:
        assert arg(t) == math.fmod(4.402608842 + 2608.7903141574 * t, D2PI)


@pytest.mark.parametrize(
    "name", [n for n in ERFA_NAMES if n != "general_precession"]
)
def test_reduced_arguments_stay_within_one_turn(name):
    arg = get_argument(name)
    for t in SAMPLE_T:
        assert abs(arg(t)) <= D2PI


def test_reduction_keeps_sign_of_dividend():
    # The node regresses, so its polynomial is negative for t > 0.065
    assert moon_node_longitude(0.8) < 0.0
    assert mercury_mean_longitude(-1.0) < 0.0
    assert sun_mean_anomaly(-1.0) < 0.0


def test_general_precession_is_not_reduced():
    t = 500.0
    assert general_precession(t) == pytest.approx(
        (0.024381750 + 0.00000538691 * t) * t, rel=1e-15
    )
    assert general_precession(t) > D2PI


def test_non_finite_input_propagates():
    assert math.isnan(sun_mean_anomaly(float("nan")))
    assert math.isnan(venus_mean_longitude(float("inf")))


def test_overflowing_polynomial_gives_nan():
    # Large finite epochs overflow the polynomial before reduction
    assert math.isnan(mercury_mean_longitude(1e306))
    assert math.isnan(sun_mean_anomaly(1e80))
    assert math.isnan(MERCURY.evaluate_array([1e306])[0])
    assert math.isnan(SUN.evaluate_array([1e80])[0])


def test_unreduced_argument_overflows_to_infinity():
    assert general_precession(1e306) == math.inf


def test_evaluate_array_matches_scalar():
    ts = np.array(SAMPLE_T)
    for arg in ARGUMENTS.values():
        vec = arg.evaluate_array(ts)
        assert vec.shape == ts.shape
        for t, v in zip(SAMPLE_T, vec):
            assert v == pytest.approx(arg(t), abs=1e-15)


def test_evaluate_all_default_and_subset():
    values = evaluate_all(0.8)
    assert list(values) == list(ARGUMENTS)
    subset = evaluate_all(0.8, ["moon_latitude_argument", "venus_mean_longitude"])
    assert subset == {
        "moon_latitude_argument": moon_latitude_argument(0.8),
        "venus_mean_longitude": venus_mean_longitude(0.8),
    }


def test_unknown_argument():
    with pytest.raises(UnknownArgumentError) as excinfo:
        get_argument("pluto_mean_longitude")
    assert isinstance(excinfo.value, IaukitError)
    assert isinstance(excinfo.value, KeyError)
    assert "pluto_mean_longitude" in str(excinfo.value)


def test_julian_centuries():
    assert julian_centuries(2451545.0) == 0.0
    assert julian_centuries(2451545.0 + 36525.0) == 1.0
    assert julian_centuries(2400000.5, 48724.0) == pytest.approx(-0.077221081451, abs=1e-12)


def test_argument_definition_validation():
    with pytest.raises(ValueError):
        FundamentalArgument("x", "x", "bad unit", (1.0,), "deg", None)
    with pytest.raises(ValueError):
        FundamentalArgument("x", "x", "no coefficients", (), "rad", None)
