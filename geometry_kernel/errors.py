"""Error taxonomy raised by the geometry kernel."""


class GeometryError(Exception):
    """Base class for every error raised by the kernel."""


class UnsupportedOperationError(GeometryError, TypeError):
    """Raised when a shape pair has no defined meaning for a predicate."""

    def __init__(self, operation: str, subject: object, other: object = None):
        subject_name = type(subject).__name__
        if other is None:
            message = f"{operation} is not supported for {subject_name}"
        else:
            message = f"{operation} is not supported between {subject_name} and {type(other).__name__}"
        super().__init__(message)
        self.operation = operation
        self.subject = subject
        self.other = other


class UninitializedShapeError(GeometryError, ValueError):
    """Raised when a rectangle is used before both corners are set."""


class DegenerateGeometryError(GeometryError, ArithmeticError):
    """Raised when a computation would divide by a zero-length vector."""


class InvalidShapeError(GeometryError, ValueError):
    """Raised when constructor input cannot form the requested shape."""


class ShapeDecodeError(GeometryError, ValueError):
    """Raised when an encoded shape cannot be decoded."""


__all__ = [
    "GeometryError",
    "UnsupportedOperationError",
    "UninitializedShapeError",
    "DegenerateGeometryError",
    "InvalidShapeError",
    "ShapeDecodeError",
]
