# enginemath

Small, dependency-free math helpers for 3D game code: vectors, 4x4 matrices,
quaternions, transformation builders, random ranges and the building blocks
for easing.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

- `enginemath.vector`: immutable `Vector2`, `Vector3` and `Vector4`
  dataclasses, all iterable over their components. `Vector2` adds and
  subtracts other `Vector2`s and multiplies or divides by a number. `Vector3`
  supports negation, `+` and `-` with a vector or a number, component-wise
  `*` and `/` with a vector, scaling by a number on either side, and
  `length`, `length_sq`, `normalize` (the zero vector stays zero), `dot` and
  `cross`.
- `enginemath.matrix`: `Matrix3x3` and `Matrix4x4`, holding their rows in
  `m`; a wrong shape raises `ValueError`. `Matrix4x4` has `+`, `-`,
  `*` (matrix or scalar), `/` (scalar) and `column(col)`, which returns the
  first three entries of a column as a `Vector3`.
- `enginemath.quaternion`: `Quaternion(x, y, z, w)`, defaulting to the
  identity. It supports `*` (quaternion or scalar), `+`, `-`, `/` (multiply by
  the inverse), `conjugate`, `normalize`, `norm`, `dot`, `inverse` (the zero
  quaternion gives the identity) and `to_euler_angles`, and the class methods
  `identity`, `from_to` (raises `ValueError` for opposite directions),
  `from_euler_angles` and `from_look_rotation`. The static method
  `Quaternion.sleap(q1, q2, t)` interpolates spherically, falling back to a
  normalized linear blend when the two are very close.
- `enginemath.random_range`: `Random(seed=None)`, a Mersenne Twister source,
  with `range(low, high)`. Two integers give an integer in `[low, high]`;
  otherwise a float in `[low, high)`. `low > high` raises `ValueError`.
  `random_range(low, high)` draws from a shared generator.
- `enginemath.mymath`: `lerp` for numbers, `Vector3` and `Vector4`;
  `make_translate_matrix`, `make_scale_matrix`, `make_rotate_x_matrix`,
  `make_rotate_y_matrix`, `make_rotate_z_matrix`, `make_rotate_xyz_matrix`
  (Euler `Vector3` or `Quaternion`), `make_affine_matrix`,
  `make_perspective_fov_matrix`, `make_orthographic_matrix`,
  `make_viewport_matrix`, `make_identity4x4`; `transformation` (point or
  `Vector4`, divided by w; a zero w raises `ValueError`), `transform_normal`,
  `inverse` (a singular matrix raises `ValueError`), `transpose`, `cotf`,
  `quaternion_to_axis`, `quaternion_to_matrix4x4`, `slerp`,
  `lerp_short_angle`, `get_euler_angles_from_matrix`, `radians_to_degrees` and
  `degrees_to_radians`.
- `enginemath.easing_core`: the `Easing` state dataclass (`time`, `max_time`,
  `increment_time`, `amplitude`, `period`); `lerp_e` for numbers, `Vector2`
  and `Vector3`; `slerp_e`, which interpolates direction spherically and
  length linearly; `ease_in_elastic_amplitude`, `ease_out_elastic_amplitude`
  and `ease_in_out_elastic_amplitude`, which are zero outside
  `(0, total_time)`; `ease_amplitude_scale` for squash-and-stretch scaling of
  a number, `Vector2` or `Vector3`; and `bounce_ease_out`, the bounce curve
  over `[0, 1]`.

Matrices use row vectors: a point is transformed as `v * M`, and the
translation sits in the last row.

## What it does not do

There are no ready-made named easing curves (sine, back, quint, circ, expo,
cubic, quad, quart, bounce or elastic in/out). To ease a value, compute the
eased parameter yourself, for example with `bounce_ease_out`, and pass it to
`lerp_e`. There is also no rendering, camera or scene handling; the package
only computes values.

## Example

    from enginemath.vector import Vector3
    from enginemath.mymath import make_affine_matrix, transformation
    from enginemath.easing_core import bounce_ease_out, lerp_e

    world = make_affine_matrix(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(0, 0, 5))
    print(transformation(Vector3(1, 2, 3), world))   # Vector3(x=1.0, y=2.0, z=8.0)

    print(lerp_e(0.0, 10.0, bounce_ease_out(1.0)))