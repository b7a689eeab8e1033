"""Numeric helpers shared by the extractor, generators and checks."""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

Vec3 = Tuple[float, float, float]

Converter = Callable[[Sequence], Vec3]

# rounding used when positions are compared as dictionary keys
KEY_DIGITS = 6


def to_vec3(point_like: Sequence) -> Vec3:
    """Return the XYZ components of a position as a tuple of floats.

    Works for any element type ``float()`` accepts (numpy scalars of any
    float dtype, ``Fraction``, ``Decimal``...).  Component order is kept,
    and NaN or infinite values are passed through unchanged.
    """

    if len(point_like) < 3:
        raise ValueError("value must have at least three components")
    return float(point_like[0]), float(point_like[1]), float(point_like[2])


def position_key(point_like: Sequence, digits: int = KEY_DIGITS) -> Vec3:
    """Return a hashable, rounded XYZ key for matching coincident vertices."""

    x, y, z = to_vec3(point_like)
    return round(x, digits), round(y, digits), round(z, digits)


__all__ = [
    "Vec3",
    "Converter",
    "KEY_DIGITS",
    "to_vec3",
    "position_key",
]
