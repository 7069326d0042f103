import math

import pytest

from adcs.quaternion import Quat
from adcs.vector import Vec3, ZeroLengthError

Q = Quat(0.5, Vec3(1.0, -2.0, 0.75))
P = Quat(-1.25, Vec3(0.5, 0.25, 3.0))


def _values(q):
    return (q.scalar, q.vector.x, q.vector.y, q.vector.z)


def test_rotate_x_about_z_quarter_turn():
    q = Quat.from_axis_angle(math.pi / 2, Vec3(0.0, 0.0, 1.0))
    assert tuple(q.rotate(Vec3(1.0, 0.0, 0.0))) == pytest.approx(
        (0.0, 1.0, 0.0), abs=1e-12
    )


def test_from_axis_angle_is_unit():
    q = Quat.from_axis_angle(1.1, Vec3(3.0, -4.0, 2.0))
    assert q.magnitude() == pytest.approx(1.0)


def test_zero_angle_is_identity_rotation():
    q = Quat.from_axis_angle(0.0, Vec3(3.0, -4.0, 2.0))
    v = Vec3(0.2, 1.5, -0.7)
    assert tuple(q.rotate(v)) == pytest.approx(tuple(v))


def test_rotation_preserves_length():
    q = Quat.from_axis_angle(2.3, Vec3(1.0, 1.0, -1.0))
    v = Vec3(0.2, 1.5, -0.7)
    assert q.rotate(v).magnitude() == pytest.approx(v.magnitude())


def test_rotation_leaves_axis_fixed():
    axis = Vec3(1.0, 2.0, -0.5)
    q = Quat.from_axis_angle(0.9, axis)
    assert tuple(q.rotate(axis)) == pytest.approx(tuple(axis))


def test_product_composes_rotations():
    a = Quat.from_axis_angle(0.4, Vec3(0.0, 1.0, 0.0))
    b = Quat.from_axis_angle(1.3, Vec3(1.0, 0.0, 1.0))
    v = Vec3(0.2, 1.5, -0.7)
    assert tuple((a * b).rotate(v)) == pytest.approx(tuple(a.rotate(b.rotate(v))))


def test_magnitude_is_multiplicative():
    assert (Q * P).magnitude() == pytest.approx(Q.magnitude() * P.magnitude())


def test_times_conjugate_is_squared_magnitude():
    r = Q * Q.conjugate()
    assert r.scalar == pytest.approx(Q.magnitude() ** 2)
    assert r.vector.magnitude() == pytest.approx(0.0, abs=1e-12)


def test_conjugate_twice_round_trips():
    assert Q.conjugate().conjugate() == Q


def test_normalized_is_unit():
    assert Q.normalized().magnitude() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroLengthError):
        Quat(0.0, Vec3(0.0, 0.0, 0.0)).normalized()


def test_inverse_of_unit_quaternion_undoes_it():
    u = Q.normalized()
    assert _values(u * u.inverse()) == pytest.approx((1.0, 0.0, 0.0, 0.0), abs=1e-12)


def test_inverse_is_normalized_conjugate():
    assert _values(Q.inverse()) == pytest.approx(_values(Q.conjugate().normalized()))


def test_scaled_scales_magnitude():
    assert Q.scaled(-2.0).magnitude() == pytest.approx(2.0 * Q.magnitude())


def test_zero_axis_gives_pure_scalar():
    q = Quat.from_axis_angle(0.8, Vec3(0.0, 0.0, 0.0))
    assert q.scalar == pytest.approx(math.cos(0.4))
    assert q.vector.magnitude() == 0.0