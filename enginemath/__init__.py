"""Vectors, matrices, quaternions, transforms, random ranges and easing helpers."""

__version__ = "0.1.0"