"""Interpolation, 4x4 transform matrices and rotation helpers."""

from __future__ import annotations

import math

from .matrix import Matrix4x4
from .quaternion import Quaternion
from .vector import Vector3, Vector4

_HALF_PI = math.pi / 2


def lerp(start, end, t: float):
    """Linear interpolation between two numbers, Vector3s or Vector4s."""
    if isinstance(start, Vector3) and isinstance(end, Vector3):
        return Vector3(
            (1.0 - t) * start.x + end.x * t,
            (1.0 - t) * start.y + end.y * t,
            (1.0 - t) * start.z + end.z * t,
        )
    if isinstance(start, Vector4) and isinstance(end, Vector4):
        return Vector4(
            (1.0 - t) * start.x + end.x * t,
            (1.0 - t) * start.y + end.y * t,
            (1.0 - t) * start.z + end.z * t,
            (1.0 - t) * start.w + end.w * t,
        )
    if isinstance(start, (int, float)) and isinstance(end, (int, float)):
        return (1.0 - t) * start + end * t
    raise TypeError(
        f"cannot interpolate {type(start).__name__} and {type(end).__name__}"
    )


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Translation matrix; the offset sits in the last row."""
    return Matrix4x4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (translate.x, translate.y, translate.z, 1.0),
        )
    )


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Scale matrix."""
    return Matrix4x4(
        (
            (scale.x, 0.0, 0.0, 0.0),
            (0.0, scale.y, 0.0, 0.0),
            (0.0, 0.0, scale.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def transformation(vector, matrix: Matrix4x4):
    """Transform a point (Vector3, w = 1) or a Vector4 and divide by w.

    Raises ValueError when the resulting w is zero.
    """
    m = matrix.m
    if isinstance(vector, Vector3):
        x, y, z, vw = vector.x, vector.y, vector.z, 1.0
    elif isinstance(vector, Vector4):
        x, y, z, vw = vector.x, vector.y, vector.z, vector.w
    else:
        raise TypeError(f"cannot transform {type(vector).__name__}")
    rx, ry, rz, w = (
        x * m[0][c] + y * m[1][c] + z * m[2][c] + vw * m[3][c] for c in range(4)
    )
    if w == 0.0:
        raise ValueError("transformed w component is zero")
    if isinstance(vector, Vector3):
        return Vector3(rx / w, ry / w, rz / w)
    return Vector4(rx / w, ry / w, rz / w, 1.0)


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction, ignoring translation."""
    a = m.m
    return Vector3(
        v.x * a[0][0] + v.y * a[1][0] + v.z * a[2][0],
        v.x * a[0][1] + v.y * a[1][1] + v.z * a[2][1],
        v.x * a[0][2] + v.y * a[1][2] + v.z * a[2][2],
    )


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Inverse by cofactor expansion; raises ValueError for a singular matrix."""
    (
        (m00, m01, m02, m03),
        (m10, m11, m12, m13),
        (m20, m21, m22, m23),
        (m30, m31, m32, m33),
    ) = m.m

    det = (
        m00 * m11 * m22 * m33 + m00 * m12 * m23 * m31 + m00 * m13 * m21 * m32
        - m00 * m13 * m22 * m31 - m00 * m12 * m21 * m33 - m00 * m11 * m23 * m32
        - m01 * m10 * m22 * m33 - m02 * m10 * m23 * m31 - m03 * m10 * m21 * m32
        + m03 * m10 * m22 * m31 + m02 * m10 * m21 * m33 + m01 * m10 * m23 * m32
        + m01 * m12 * m20 * m33 + m02 * m13 * m20 * m31 + m03 * m11 * m20 * m32
        - m03 * m12 * m20 * m31 - m02 * m11 * m20 * m33 - m01 * m13 * m20 * m32
        - m01 * m12 * m23 * m30 - m02 * m13 * m21 * m30 - m03 * m11 * m22 * m30
        + m03 * m12 * m21 * m30 + m02 * m11 * m23 * m30 + m01 * m13 * m22 * m30
    )
    if det == 0.0:
        raise ValueError("matrix is singular")

    cofactors = (
        (
            m11 * m22 * m33 + m12 * m23 * m31 + m13 * m21 * m32
            - m13 * m22 * m31 - m12 * m21 * m33 - m11 * m23 * m32,
            -m01 * m22 * m33 - m02 * m23 * m31 - m03 * m21 * m32
            + m03 * m22 * m31 + m02 * m21 * m33 + m01 * m23 * m32,
            m01 * m12 * m33 + m02 * m13 * m31 + m03 * m11 * m32
            - m03 * m12 * m31 - m02 * m11 * m33 - m01 * m13 * m32,
            -m01 * m12 * m23 - m02 * m13 * m21 - m03 * m11 * m22
            + m03 * m12 * m21 + m02 * m11 * m23 + m01 * m13 * m22,
        ),
        (
            -m10 * m22 * m33 - m12 * m23 * m30 - m13 * m20 * m32
            + m13 * m22 * m30 + m12 * m20 * m33 + m10 * m23 * m32,
            m00 * m22 * m33 + m02 * m23 * m30 + m03 * m20 * m32
            - m03 * m22 * m30 - m02 * m20 * m33 - m00 * m23 * m32,
            -m00 * m12 * m33 - m02 * m13 * m30 - m03 * m10 * m32
            + m03 * m12 * m30 + m02 * m10 * m33 + m00 * m13 * m32,
            m00 * m12 * m23 + m02 * m13 * m20 + m03 * m10 * m22
            - m03 * m12 * m20 - m01 * m10 * m23 - m00 * m13 * m22,
        ),
        (
            m10 * m21 * m33 + m11 * m23 * m30 + m13 * m20 * m31
            - m13 * m21 * m30 - m11 * m20 * m33 - m10 * m23 * m31,
            -m00 * m21 * m33 - m01 * m23 * m30 - m03 * m20 * m31
            + m03 * m21 * m30 + m01 * m20 * m33 + m00 * m23 * m31,
            m00 * m11 * m33 + m01 * m13 * m30 + m03 * m10 * m31
            - m03 * m11 * m30 - m01 * m10 * m33 - m00 * m13 * m31,
            -m00 * m11 * m23 - m01 * m13 * m20 - m03 * m10 * m21
            + m03 * m11 * m20 + m01 * m10 * m23 + m00 * m13 * m21,
        ),
        (
            -m10 * m21 * m32 - m11 * m22 * m30 - m12 * m20 * m31
            + m12 * m21 * m30 + m11 * m20 * m32 + m10 * m22 * m31,
            m00 * m21 * m32 + m01 * m22 * m30 + m02 * m20 * m31
            - m02 * m21 * m30 - m01 * m20 * m32 - m00 * m22 * m31,
            -m00 * m11 * m32 - m01 * m12 * m30 - m02 * m10 * m31
            + m02 * m11 * m30 + m01 * m10 * m32 + m00 * m12 * m31,
            m00 * m11 * m22 + m01 * m12 * m20 + m02 * m10 * m21
            - m02 * m11 * m20 - m01 * m10 * m22 - m00 * m12 * m21,
        ),
    )
    return Matrix4x4(tuple(tuple(value / det for value in row) for row in cofactors))


def transpose(m: Matrix4x4) -> Matrix4x4:
    """Rows and columns swapped."""
    return Matrix4x4(tuple(zip(*m.m)))


def make_identity4x4() -> Matrix4x4:
    """The 4x4 identity."""
    return Matrix4x4(
        tuple(tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4))
    )


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, s, 0.0),
            (0.0, -s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        (
            (c, 0.0, -s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        (
            (c, s, 0.0, 0.0),
            (-s, c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_xyz_matrix(rotation) -> Matrix4x4:
    """Rotation matrix from Euler angles (Vector3, X then Y then Z) or a Quaternion."""
    if isinstance(rotation, Vector3):
        return (
            make_rotate_x_matrix(rotation.x)
            * make_rotate_y_matrix(rotation.y)
            * make_rotate_z_matrix(rotation.z)
        )
    if isinstance(rotation, Quaternion):
        x, y, z, w = rotation.x, rotation.y, rotation.z, rotation.w
        return Matrix4x4(
            (
                (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w), 0.0),
                (2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w), 0.0),
                (2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )
    raise TypeError(f"cannot build a rotation from {type(rotation).__name__}")


def make_affine_matrix(scale: Vector3, rotate, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate (Euler Vector3 or Quaternion), then translate."""
    if isinstance(rotate, Quaternion):
        rotate_matrix = quaternion_to_matrix4x4(rotate)
    elif isinstance(rotate, Vector3):
        rotate_matrix = make_rotate_xyz_matrix(rotate)
    else:
        raise TypeError(f"cannot build a rotation from {type(rotate).__name__}")
    return make_scale_matrix(scale) * rotate_matrix * make_translate_matrix(translate)


def cotf(theta: float) -> float:
    """Cotangent."""
    return 1.0 / math.tan(theta)


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Left-handed perspective projection mapping depth to [0, 1]."""
    cot = cotf(fov_y / 2.0)
    depth = far_clip / (far_clip - near_clip)
    return Matrix4x4(
        (
            (1.0 / aspect_ratio * cot, 0.0, 0.0, 0.0),
            (0.0, cot, 0.0, 0.0),
            (0.0, 0.0, depth, 1.0),
            (0.0, 0.0, -near_clip * far_clip / (far_clip - near_clip), 0.0),
        )
    )


def make_orthographic_matrix(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Orthographic projection."""
    return Matrix4x4(
        (
            (2.0 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0),
            (
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1.0,
            ),
        )
    )


def make_viewport_matrix(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    """Viewport transform from normalized device coordinates to the screen."""
    return Matrix4x4(
        (
            (width / 2.0, 0.0, 0.0, 0.0),
            (0.0, -height / 2.0, 0.0, 0.0),
            (0.0, 0.0, max_depth - min_depth, 0.0),
            (left + width / 2.0, top + height / 2.0, min_depth, 1.0),
        )
    )


def quaternion_to_axis(q: Quaternion) -> Vector3:
    """Unit rotation axis of a quaternion."""
    n = q.normalize()
    return Vector3(n.x, n.y, n.z).normalize()


def quaternion_to_matrix4x4(q: Quaternion) -> Matrix4x4:
    """Left-handed rotation matrix of a quaternion."""
    xx, yy, zz = q.x * q.x, q.y * q.y, q.z * q.z
    xy, xz, yz = q.x * q.y, q.x * q.z, q.y * q.z
    wx, wy, wz = q.w * q.x, q.w * q.y, q.w * q.z
    return Matrix4x4(
        (
            (1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0),
            (2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0),
            (2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def lerp_short_angle(a: float, b: float, t: float) -> float:
    """Interpolate between two angles along the shorter way round."""
    pi = 3.141592
    diff = math.fmod(b - a, 2.0 * pi)
    if diff > pi:
        diff -= 2.0 * pi
    elif diff < -pi:
        diff += 2.0 * pi
    return a + diff * t


def get_euler_angles_from_matrix(mat: Matrix4x4) -> Vector3:
    """Euler angles of the rotation part, with the gimbal-lock case handled."""
    m = mat.m
    if abs(m[2][0]) < 1.0:
        return Vector3(
            math.atan2(-m[2][1], m[2][2]),
            math.asin(m[2][0]),
            math.atan2(-m[1][0], m[0][0]),
        )
    return Vector3(
        math.atan2(m[1][2], m[1][1]),
        _HALF_PI if m[2][0] > 0.0 else -_HALF_PI,
        0.0,
    )


def radians_to_degrees(radians: float) -> float:
    """Radians to degrees."""
    return radians * (180.0 / math.pi)


def degrees_to_radians(degrees: float) -> float:
    """Degrees to radians."""
    return degrees * (math.pi / 180.0)


def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """Spherical interpolation, falling back to linear for nearly equal inputs."""
    dot = q0.dot(q1)
    if dot < 0.0:
        q0 = q0 * -1.0
        dot = -dot
    theta = math.acos(min(dot, 1.0))
    sin_theta = math.sin(theta)
    if sin_theta > 0.001:
        scale0 = math.sin((1 - t) * theta) / sin_theta
        scale1 = math.sin(t * theta) / sin_theta
        return q0 * scale0 + q1 * scale1
    return q0 * (1 - t) + q1 * t