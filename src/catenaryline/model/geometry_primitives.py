"""
Geometric Primitives for the local east-north-up frame (z is up).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    Displacement between two points of the local frame.
    """
    x: float
    y: float
    z: float = 0.0

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def horizontal_magnitude(self) -> float:
        """Length of the projection onto the horizontal (x, y) plane."""
        return math.hypot(self.x, self.y)

    def horizontal(self) -> Vector:
        """Drop the vertical component."""
        return Vector(self.x, self.y, 0.0)


@dataclass(frozen=True)
class Point:
    """A support or sample position in the local frame."""
    x: float
    y: float
    z: float = 0.0

    def __sub__(self, other: Point) -> Vector:
        if not isinstance(other, Point):
            raise TypeError("Can only subtract a Point from a Point.")
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @staticmethod
    def from_any(value: Union[Point, Sequence[float], npt.NDArray[np.float64]]) -> Point:
        """
        Coerce a Point or a length-3 sequence/array into a Point.

        Raises:
            ValueError: If the value does not hold exactly three coordinates.
        """
        if isinstance(value, Point):
            return value
        coords = np.asarray(value, dtype=np.float64).ravel()
        if coords.shape != (3,):
            raise ValueError(f"Expected 3 coordinates, got shape {coords.shape}.")
        return Point(float(coords[0]), float(coords[1]), float(coords[2]))


PointLike = Union[Point, Sequence[float], "npt.NDArray[np.float64]"]
