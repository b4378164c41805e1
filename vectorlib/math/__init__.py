"""Vector math primitives."""

from .errors import MixedAxisTypeError, ScalarDivisionError, VectorError, ZeroLengthVectorError
from .transforms import project_onto, reject_from, rotate_point
from .vec2 import Vec2

__all__ = [
    "MixedAxisTypeError",
    "ScalarDivisionError",
    "Vec2",
    "VectorError",
    "ZeroLengthVectorError",
    "project_onto",
    "reject_from",
    "rotate_point",
]
