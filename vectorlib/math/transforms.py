"""Geometry helpers built on Vec2."""

from __future__ import annotations

from .errors import ZeroLengthVectorError
from .vec2 import Vec2


def rotate_point(point: Vec2, origin: Vec2, angle_rad: float) -> Vec2:
    """Rotate a point around an origin by angle_rad (radians)."""
    return origin + (point - origin).rotate(angle_rad)


def project_onto(vec: Vec2, onto: Vec2) -> Vec2:
    """Vector projection of vec onto the direction of onto.

    Raises ZeroLengthVectorError when onto is the zero vector.
    """
    vec._check_pair(onto, "project_onto")
    denom = onto.dot_product(onto)
    if denom == 0:
        raise ZeroLengthVectorError("Cannot project onto a zero-length vector.")
    return onto.scale(vec.dot_product(onto) / denom)


def reject_from(vec: Vec2, onto: Vec2) -> Vec2:
    """Component of vec orthogonal to onto."""
    return vec - project_onto(vec, onto)
