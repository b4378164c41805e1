"""Exceptions raised by vector operations."""

from __future__ import annotations


class VectorError(ValueError):
    """Base class for vector operation failures."""


class ZeroLengthVectorError(VectorError):
    """Raised when an operation needs a direction but the vector has none."""

    def __init__(self, message: str = "Cannot normalize a zero-length vector.") -> None:
        super().__init__(message)


class ScalarDivisionError(VectorError):
    """Raised when a vector is divided by a zero scalar."""

    def __init__(self, message: str = "Cannot divide by zero.") -> None:
        super().__init__(message)


class MixedAxisTypeError(VectorError, TypeError):
    """Raised when an operation needs both axes to share one numeric type."""

    def __init__(self, operation: str, x_type: type, y_type: type) -> None:
        super().__init__(
            f"{operation}() needs matching axis types, got x: {x_type.__name__}, y: {y_type.__name__}"
        )
        self.operation = operation
        self.x_type = x_type
        self.y_type = y_type
