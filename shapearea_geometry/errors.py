"""
Shape Errors
============

Error taxonomy for shape validation.

Every error carries the human-readable message that is returned verbatim
to the caller. None of them are fatal: each request is independent.
"""


class ShapeError(ValueError):
    """Base class for all shape validation errors."""
    pass


class InvalidShapeError(ShapeError):
    """Raised when a shape reports itself invalid without a specific reason."""

    def __init__(self, message: str = "the shape object is invalid"):
        super().__init__(message)


class InvalidRectangleError(InvalidShapeError):
    """Raised when both rectangle length and height are <= 0."""

    def __init__(self, message: str = "invalid rectangle"):
        super().__init__(message)


class InvalidCircleError(InvalidShapeError):
    """Raised when the circle radius is <= 0."""

    def __init__(self, message: str = "invalid circle"):
        super().__init__(message)


class InvalidPolygonError(InvalidShapeError):
    """Raised when a polygon has 3 points or fewer."""

    def __init__(self, message: str = "invalid polygon"):
        super().__init__(message)


class LegacyRectangleError(ShapeError):
    """Raised by the strict integer rectangle when corners are unordered."""
    pass
