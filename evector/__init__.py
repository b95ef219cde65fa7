"""
evector – евклидов вектор произвольной размерности на базе NumPy.
"""

from evector.utils import logger, Config, format_vector, describe, print_info
from evector.math import EuclideanVector, MagnitudeRef, DimensionMismatchError

__version__ = "1.0.0"

__all__ = [
    "EuclideanVector",
    "MagnitudeRef",
    "DimensionMismatchError",
    "Config",
    "format_vector",
    "describe",
    "print_info",
    "logger",
]
