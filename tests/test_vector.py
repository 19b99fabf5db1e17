import pytest

from enginemath.vector import Vector2, Vector3, Vector4

A = Vector3(1.5, -2.0, 3.25)
B = Vector3(-4.0, 0.5, 2.0)


def test_vector3_add_sub_round_trip():
    assert (A + B) - B == A


def test_vector3_scalar_add_sub_round_trip():
    assert (A + 2.0) - 2.0 == A


def test_vector3_scalar_mul_matches_repeated_add():
    assert A * 2 == A + A
    assert 2 * A == A * 2


def test_vector3_componentwise_mul_by_ones_is_identity():
    assert A * Vector3(1.0, 1.0, 1.0) == A


def test_vector3_division_round_trip():
    assert (A * 4) / 4 == A
    assert (A * B) / B == A


def test_vector3_number_over_vector_divides_vector():
    assert 2.0 / A == A / 2.0


def test_vector3_negation_cancels():
    assert -A + A == Vector3()


def test_vector3_length_pythagorean():
    assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_vector3_length_sq_matches_length():
    assert A.length_sq() == pytest.approx(A.length() ** 2)
    assert A.dot(A) == pytest.approx(A.length_sq())


def test_vector3_normalize_gives_unit_length():
    assert A.normalize().length() == pytest.approx(1.0)


def test_vector3_normalize_zero_vector():
    assert Vector3().normalize() == Vector3(0.0, 0.0, 0.0)


def test_vector3_cross_is_perpendicular_and_anticommutative():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-12)
    assert c == -(B.cross(A))


def test_vector3_cross_of_parallel_vectors_is_zero():
    assert A.cross(A * 3) == Vector3()


def test_vector3_iteration():
    assert list(A) == [A.x, A.y, A.z]


def test_vector3_division_by_zero_raises():
    assert A / 0.5 == A * 2
    with pytest.raises(ZeroDivisionError):
        A / 0


def test_vector2_round_trips():
    a = Vector2(1.25, -3.0)
    b = Vector2(0.5, 7.0)
    assert (a + b) - b == a
    assert (a * 8) / 8 == a
    assert a * 2 == a + a


def test_vector2_unsupported_operand():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) * "x"


def test_vector4_fields_and_iteration():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert list(v) == [1.0, 2.0, 3.0, 4.0]
    assert list(Vector4()) == [0.0, 0.0, 0.0, 0.0]


def test_vector3_length_for_large_values():
    assert Vector3(3e100, 4e100, 0.0).length() == pytest.approx(5e100)