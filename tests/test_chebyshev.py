import pytest

from adcs.chebyshev import ChebyshevInterpolator, split


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, (2.0, 0.5)),
        (-2.5, (-3.0, 0.5)),
        (-3.0, (-3.0, 0.0)),
        (0.0, (0.0, 0.0)),
        (2451545.25, (2451545.0, 0.25)),
    ],
)
def test_split(value, expected):
    assert split(value) == expected


@pytest.mark.parametrize("value", [0.1, -0.1, 7.75, -123.456, 2460000.6])
def test_split_round_trip(value):
    whole, fraction = split(value)
    assert whole + fraction == pytest.approx(value)
    assert 0.0 <= fraction < 1.0
    assert whole == int(whole)


def test_constant_series():
    interp = ChebyshevInterpolator()
    buf = [3.0, 0.0, 0.0, -2.0, 0.0, 0.0, 5.0, 0.0, 0.0]
    position, velocity = interp.interpolate(buf, (0.3, 32.0), 3, 1)
    assert position == pytest.approx((3.0, -2.0, 5.0))
    assert velocity == pytest.approx((0.0, 0.0, 0.0))


def test_linear_series():
    interp = ChebyshevInterpolator()
    buf = [1.0, 2.0, 0.0, 4.0, -1.0, 0.0, 0.0, 0.0, 0.0]
    t1 = 8.0
    position, velocity = interp.interpolate(buf, (0.75, t1), 3, 1)
    # tc = 2 * 0.75 - 1 = 0.5
    assert position == pytest.approx((1.0 + 2.0 * 0.5, 4.0 - 0.5, 0.0))
    assert velocity == pytest.approx((2.0 * 2.0 / t1, -1.0 * 2.0 / t1, 0.0))


def test_selects_subinterval():
    interp = ChebyshevInterpolator()
    first = [1.0, 0.0, 1.0, 0.0, 1.0, 0.0]
    second = [7.0, 0.0, 8.0, 0.0, 9.0, 0.0]
    position, _ = interp.interpolate(first + second, (0.75, 16.0), 2, 2)
    assert position == pytest.approx((7.0, 8.0, 9.0))


def _series(ncf):
    return [0.1 * (k + 1) * (-1) ** k for k in range(3 * ncf)]


def test_velocity_matches_numerical_derivative():
    ncf = 6
    buf = _series(ncf)
    t1 = 4.0
    t0 = 0.37
    step = 1e-6
    interp = ChebyshevInterpolator()
    _, velocity = interp.interpolate(buf, (t0, t1), ncf, 1)
    ahead, _ = ChebyshevInterpolator().interpolate(buf, (t0 + step, t1), ncf, 1)
    behind, _ = ChebyshevInterpolator().interpolate(buf, (t0 - step, t1), ncf, 1)
    for i in range(3):
        numeric = (ahead[i] - behind[i]) / (2 * step) / t1
        assert velocity[i] == pytest.approx(numeric, rel=1e-5)


def test_cached_state_gives_same_result():
    ncf = 8
    buf = _series(ncf)
    interp = ChebyshevInterpolator()
    first = interp.interpolate(buf, (0.2, 10.0), ncf, 1)
    interp.interpolate(buf, (0.9, 10.0), ncf, 1)
    again = interp.interpolate(buf, (0.2, 10.0), ncf, 1)
    fresh = ChebyshevInterpolator().interpolate(buf, (0.2, 10.0), ncf, 1)
    assert again[0] == pytest.approx(first[0])
    assert again[1] == pytest.approx(first[1])
    assert fresh[0] == pytest.approx(first[0])


def test_more_coefficients_than_before_extends_cache():
    interp = ChebyshevInterpolator()
    short = [1.0, 1.0, 1.0] * 3
    interp.interpolate(short, (0.6, 2.0), 3, 1)
    long_buf = _series(10)
    result = interp.interpolate(long_buf, (0.6, 2.0), 10, 1)
    expected = ChebyshevInterpolator().interpolate(long_buf, (0.6, 2.0), 10, 1)
    assert result[0] == pytest.approx(expected[0])
    assert result[1] == pytest.approx(expected[1])


@pytest.mark.parametrize("ncf", [0, 19])
def test_invalid_coefficient_count(ncf):
    with pytest.raises(ValueError):
        ChebyshevInterpolator().interpolate([0.0] * 60, (0.5, 1.0), ncf, 1)