import math

import pytest

from enginemath.quaternion import Quaternion
from enginemath.vector import Vector3

Q = Quaternion(0.3, -0.7, 1.2, 0.5)
P = Quaternion(-1.1, 0.4, 0.2, 2.0)


def approx_q(q):
    return pytest.approx(list(q), abs=1e-9)


def test_default_is_identity():
    assert Quaternion() == Quaternion.identity()


def test_conjugate_twice_is_original():
    assert Q.conjugate().conjugate() == Q


def test_normalize_has_unit_norm():
    assert Q.normalize().norm() == pytest.approx(1.0)


def test_dot_with_self_is_norm_squared():
    assert Q.dot(Q) == pytest.approx(Q.norm() ** 2)


def test_add_sub_round_trip():
    assert list((Q + P) - P) == approx_q(Q)


def test_scalar_multiply():
    assert Q * 2 == Q + Q


def test_product_norm_is_product_of_norms():
    assert (Q * P).norm() == pytest.approx(Q.norm() * P.norm())


def test_quotient_norm_is_ratio_of_norms():
    assert (Q / P).norm() == pytest.approx(Q.norm() / P.norm())


def test_inverse_of_zero_is_identity():
    assert Quaternion(0.0, 0.0, 0.0, 0.0).inverse() == Quaternion.identity()


def test_inverse_norm_is_reciprocal():
    assert Q.inverse().norm() == pytest.approx(1.0 / Q.norm())


def test_from_to_same_direction_is_identity():
    v = Vector3(1.0, 2.0, 3.0)
    assert list(Quaternion.from_to(v, v * 5)) == approx_q(Quaternion.identity())


def test_from_to_is_unit():
    q = Quaternion.from_to(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 1.0))
    assert q.norm() == pytest.approx(1.0)


def test_from_to_opposite_raises():
    with pytest.raises(ValueError):
        Quaternion.from_to(Vector3(1.0, 0.0, 0.0), Vector3(-1.0, 0.0, 0.0))


@pytest.mark.parametrize("angles", [Vector3(), Vector3(0.4, -1.2, 2.5), Vector3(3.0, 0.1, -0.7)])
def test_from_euler_angles_is_unit(angles):
    assert Quaternion.from_euler_angles(angles).norm() == pytest.approx(1.0)


def test_identity_to_euler_is_zero():
    assert Quaternion.identity().to_euler_angles() == Vector3()


def test_to_euler_clamps_yaw():
    half = math.sqrt(0.5)
    angles = Quaternion(0.0, half, 0.0, half).to_euler_angles()
    assert abs(angles.y) == pytest.approx(math.pi / 2)


def test_from_look_rotation_is_unit():
    q = Quaternion.from_look_rotation(Vector3(1.0, 0.5, 2.0), Vector3(0.0, 1.0, 0.0))
    assert q.norm() == pytest.approx(1.0)


def test_sleap_endpoints():
    q1 = Quaternion.identity()
    q2 = Quaternion(0.0, 0.0, math.sin(0.5), math.cos(0.5))
    assert list(Quaternion.sleap(q1, q2, 0.0)) == approx_q(q1)
    assert list(Quaternion.sleap(q1, q2, 1.0)) == approx_q(q2)


def test_sleap_takes_short_path():
    q1 = Quaternion.identity()
    q2 = Quaternion(0.0, 0.0, math.sin(0.5), math.cos(0.5))
    assert list(Quaternion.sleap(q1, q2 * -1.0, 1.0)) == approx_q(q2)


def test_sleap_nearly_equal_is_normalized():
    q = Q.normalize()
    result = Quaternion.sleap(q, q, 0.5)
    assert list(result) == approx_q(q)


def test_sleap_midpoint_is_unit():
    q1 = Quaternion.identity()
    q2 = Quaternion(0.0, math.sin(1.0), 0.0, math.cos(1.0))
    assert Quaternion.sleap(q1, q2, 0.5).norm() == pytest.approx(1.0)