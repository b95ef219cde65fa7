"""
Математический суб‑пакет: EuclideanVector.
"""

from evector.math.euclidean_vector import (
    DimensionMismatchError,
    EuclideanVector,
    MagnitudeRef,
)

__all__ = ["EuclideanVector", "MagnitudeRef", "DimensionMismatchError"]
