"""Exceptions raised for invalid shape-measure input."""


class ShapeInputError(ValueError):
    """Raised when a point set cannot be measured."""


class SizeMismatchError(ShapeInputError):
    """Actual and reference point sets have different cardinality."""

    def __init__(self, actual_size: int, reference_size: int):
        super().__init__(
            f"Point sets differ in size: actual has {actual_size} points, "
            f"reference has {reference_size}"
        )
        self.actual_size = actual_size
        self.reference_size = reference_size


class DegeneratePointSetError(ShapeInputError):
    """Point set has fewer than two distinct non-zero directions."""


class NonFinitePointsError(ShapeInputError):
    """Point set contains NaN or infinite coordinates."""
