"""Generic 2D vector value type."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

import numpy as np

from .errors import MixedAxisTypeError, ScalarDivisionError, ZeroLengthVectorError

T = TypeVar("T")
U = TypeVar("U")


def _numeric_kind(value: Any) -> type:
    """Collapse numpy and builtin scalars of the same family onto one type."""
    if isinstance(value, (float, np.floating)):
        return float
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return int
    return type(value)


def _quotient(numerator: Any, denominator: Any) -> Any:
    """True division that keeps IEEE results when either operand is a float.

    Exact types (int, Fraction, Decimal) still raise ZeroDivisionError.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if not (isinstance(numerator, float) or isinstance(denominator, float)):
            raise
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Vec2(Generic[T, U]):
    """2D vector whose axes may carry the same or different numeric types.

    Component-wise arithmetic, scaling, magnitude, normalize and rotate need
    both axes to share one numeric kind (numpy and builtin floats count as
    one kind, as do numpy and builtin ints). dot_product and cross accept
    any mix.
    """

    x: T
    y: U

    @classmethod
    def zero(cls) -> "Vec2[float, float]":
        return cls(0.0, 0.0)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def _require_homogeneous(self, operation: str) -> None:
        if _numeric_kind(self.x) is not _numeric_kind(self.y):
            raise MixedAxisTypeError(operation, type(self.x), type(self.y))

    def _check_pair(self, other: "Vec2", operation: str) -> None:
        self._require_homogeneous(operation)
        other._require_homogeneous(operation)

    def add(self, other: "Vec2") -> "Vec2":
        self._check_pair(other, "add")
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vec2") -> "Vec2":
        self._check_pair(other, "sub")
        return Vec2(self.x - other.x, self.y - other.y)

    def mul(self, other: "Vec2") -> "Vec2":
        """Component-wise (Hadamard) product ``(x1 * x2, y1 * y2)``.

        This is not the dot product; use dot_product() for the scalar sum.
        """
        self._check_pair(other, "mul")
        return Vec2(self.x * other.x, self.y * other.y)

    def div(self, other: "Vec2") -> Optional["Vec2"]:
        """Component-wise quotient, or None when both divisor axes are zero.

        A single zero axis passes the guard. That axis becomes inf/nan for
        float components and raises ZeroDivisionError for exact ones.
        """
        self._check_pair(other, "div")
        if other.x != 0 or other.y != 0:
            return Vec2(_quotient(self.x, other.x), _quotient(self.y, other.y))
        return None

    def scale(self, factor: Any) -> "Vec2":
        self._require_homogeneous("scale")
        return Vec2(self.x * factor, self.y * factor)

    def divide_by_scalar(self, divisor: Any) -> "Vec2":
        self._require_homogeneous("divide_by_scalar")
        if divisor == 0:
            raise ScalarDivisionError()
        return Vec2(self.x / divisor, self.y / divisor)

    def magnitude_squared(self) -> Any:
        self._require_homogeneous("magnitude_squared")
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> np.float32:
        self._require_homogeneous("magnitude")
        return np.float32(math.sqrt(self.magnitude_squared()))

    def _as_component_float(self, value: np.float32) -> Any:
        kind = type(self.x)
        if issubclass(kind, (float, np.floating)):
            return kind(value)
        return float(value)

    def normalize(self) -> "Vec2":
        """Return the unit vector with the same direction.

        Raises ZeroLengthVectorError when the magnitude is exactly zero.
        """
        m = self.magnitude()
        if m == 0:
            raise ZeroLengthVectorError()
        length = self._as_component_float(m)
        return Vec2(self.x / length, self.y / length)

    def rotate(self, theta: Any) -> "Vec2":
        """Rotate counter-clockwise about the origin by theta radians."""
        self._require_homogeneous("rotate")
        cos_theta = math.cos(theta)
        sin_theta = math.sin(theta)
        return Vec2(
            self.x * cos_theta - self.y * sin_theta,
            self.x * sin_theta + self.y * cos_theta,
        )

    def dot_product(self, other: "Vec2") -> Any:
        """Scalar product ``x1 * x2 + y1 * y2``.

        Zero means the vectors are orthogonal, a positive value that they
        point in a broadly similar direction, a negative value broadly
        opposite directions.
        """
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> Any:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def __add__(self, other: "Vec2") -> "Vec2":
        return self.add(other)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return self.sub(other)

    def __mul__(self, other: Any) -> "Vec2":
        if isinstance(other, Vec2):
            return self.mul(other)
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, scalar: Any) -> "Vec2":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return self.scale(scalar)

    def __truediv__(self, other: Any) -> Optional["Vec2"]:
        """Divide by a vector or a scalar.

        A vector divisor yields None unless both of its axes are nonzero,
        which is stricter than div(). A scalar divisor delegates to
        divide_by_scalar().
        """
        if not isinstance(other, Vec2):
            if not isinstance(other, numbers.Number):
                return NotImplemented
            return self.divide_by_scalar(other)
        self._check_pair(other, "div")
        if other.x != 0 and other.y != 0:
            return Vec2(self.x / other.x, self.y / other.y)
        return None

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)
