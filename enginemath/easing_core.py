"""Interpolation primitives and elastic-amplitude helpers used by the easings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .vector import Vector2, Vector3

_TWO_PI = 2.0 * math.pi


@dataclass(slots=True)
class Easing:
    """Running state of an easing: elapsed time, duration, step and wobble shape."""

    time: float = 0.0
    max_time: float = 0.0
    increment_time: float = 0.0
    amplitude: float = 0.0
    period: float = 0.0


def lerp_e(start, end, t: float):
    """Linear interpolation between two numbers, Vector2s or Vector3s."""
    if isinstance(start, Vector3) and isinstance(end, Vector3):
        return Vector3(
            (1.0 - t) * start.x + end.x * t,
            (1.0 - t) * start.y + end.y * t,
            (1.0 - t) * start.z + end.z * t,
        )
    if isinstance(start, Vector2) and isinstance(end, Vector2):
        return Vector2(
            (1.0 - t) * start.x + end.x * t,
            (1.0 - t) * start.y + end.y * t,
        )
    if isinstance(start, Real) and isinstance(end, Real):
        return (1.0 - t) * start + end * t
    raise TypeError(
        f"cannot interpolate {type(start).__name__} and {type(end).__name__}"
    )


def slerp_e(start: Vector3, end: Vector3, t: float) -> Vector3:
    """Spherical interpolation of direction, linear interpolation of length."""
    n_start = start.normalize()
    n_end = end.normalize()
    dot = max(-1.0, min(1.0, n_start.dot(n_end)))
    theta = math.acos(dot)
    sin_theta = math.sin(theta)
    if sin_theta < 1.0e-5:
        direction = n_start
    else:
        sin_from = math.sin((1.0 - t) * theta)
        sin_to = math.sin(t * theta)
        direction = Vector3(
            (sin_from * n_start.x + sin_to * n_end.x) / sin_theta,
            (sin_from * n_start.y + sin_to * n_end.y) / sin_theta,
            (sin_from * n_start.z + sin_to * n_end.z) / sin_theta,
        )
    length = lerp_e(start.length(), end.length(), t)
    return direction * length


def ease_in_elastic_amplitude(
    t: float, total_time: float, amplitude: float, period: float
) -> float:
    """Growing elastic wobble; zero outside the open interval (0, total_time)."""
    if t <= 0.0 or t >= total_time:
        return 0.0
    s = period / _TWO_PI * math.asin(1.0)
    t /= total_time
    return (
        -amplitude
        * math.pow(2.0, 10.0 * (t - 1.0))
        * math.sin((t - 1.0 - s) * _TWO_PI / period)
    )


def ease_out_elastic_amplitude(
    t: float, total_time: float, amplitude: float, period: float
) -> float:
    """Decaying elastic wobble; zero outside the open interval (0, total_time)."""
    if t <= 0.0 or t >= total_time:
        return 0.0
    s = period / _TWO_PI * math.asin(1.0)
    t /= total_time
    return amplitude * math.pow(2.0, -10.0 * t) * math.sin((t - s) * _TWO_PI / period)


def ease_in_out_elastic_amplitude(
    t: float, total_time: float, amplitude: float, period: float
) -> float:
    """Decaying wobble for the first half of the normalized time, growing after."""
    if t <= 0.0 or t >= total_time:
        return 0.0
    back_point = 0.5
    t /= total_time
    if t < back_point:
        return ease_out_elastic_amplitude(t, total_time, amplitude, period)
    return ease_in_elastic_amplitude(
        t - back_point, total_time - back_point, amplitude, period
    )


def ease_amplitude_scale(
    init_scale, ease_t: float, total_time: float, amplitude: float, period: float
):
    """Squash-and-stretch scale: x (and z) shrink while y grows, and back."""
    wobble = ease_out_elastic_amplitude(ease_t, total_time, amplitude, period)
    if isinstance(init_scale, Vector3):
        return Vector3(
            init_scale.x - wobble, init_scale.y + wobble, init_scale.z - wobble
        )
    if isinstance(init_scale, Vector2):
        return Vector2(init_scale.x - wobble, init_scale.y + wobble)
    if isinstance(init_scale, Real):
        return init_scale - wobble
    raise TypeError(f"cannot scale {type(init_scale).__name__}")


def bounce_ease_out(x: float) -> float:
    """Bounce curve from 0 to 1 over x in [0, 1]."""
    n1 = 7.5625
    d1 = 2.75
    if x < 1.0 / d1:
        return n1 * x * x
    if x < 2.0 / d1:
        x -= 1.5 / d1
        return n1 * x * x + 0.75
    if x < 2.5 / d1:
        x -= 2.25 / d1
        return n1 * x * x + 0.9375
    x -= 2.625 / d1
    return n1 * x * x + 0.984375