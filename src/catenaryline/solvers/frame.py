"""
Local Frame Reducer
===================
Projects two 3D endpoints onto the vertical plane that contains them, so the
catenary can be solved as a 2D profile, and maps profile coordinates back into
the local 3D frame.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np

from catenaryline.config import MIN_SPAN
from catenaryline.model.geometry_primitives import Point, PointLike, Vector

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Profile:
    """
    2D profile of a span.

    Attributes:
        start: Start support in the local frame.
        end: End support in the local frame.
        span: Horizontal distance L between the supports.
        dz: Signed height difference, end minus start.
        chord_length: Straight-line distance, ``hypot(span, dz)``.
        direction: Unit horizontal vector from start to end
            (zero vector for a degenerate span).
        min_span: Threshold below which the span is degenerate.
    """
    start: Point
    end: Point
    span: float
    dz: float
    chord_length: float
    direction: Vector
    min_span: float = MIN_SPAN

    @property
    def is_degenerate(self) -> bool:
        return self.span < self.min_span

    @property
    def z0(self) -> float:
        return self.start.z

    @property
    def chord_mid_height(self) -> float:
        return self.start.z + 0.5 * self.dz

    def chord_height(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """Height of the straight chord at horizontal distance `x` from the start."""
        return self.start.z + self.dz * (x / self.span)

    def to_local(
        self,
        x: npt.NDArray[np.float64],
        z: npt.NDArray[np.float64],
    ) -> npt.NDArray[np.float64]:
        """
        Map profile coordinates back into the local 3D frame.

        Args:
            x: Horizontal distances along the span, measured from the start.
            z: Absolute heights.

        Returns:
            Array of shape (n, 3).
        """
        x = np.asarray(x, dtype=np.float64)
        z = np.asarray(z, dtype=np.float64)
        return np.column_stack((
            self.start.x + self.direction.x * x,
            self.start.y + self.direction.y * x,
            z,
        ))


def reduce_profile(start: PointLike, end: PointLike, min_span: float = MIN_SPAN) -> Profile:
    """
    Reduce two endpoints to a span profile.

    Args:
        start: Start support (Point or 3 coordinates).
        end: End support (Point or 3 coordinates).
        min_span: Degenerate-span threshold.

    Returns:
        The profile. Check `Profile.is_degenerate` before solving.
    """
    p0 = Point.from_any(start)
    p1 = Point.from_any(end)

    delta = p1 - p0
    span = delta.horizontal_magnitude
    dz = delta.z
    if span > 0.0:
        direction = delta.horizontal() / span
    else:
        direction = Vector(0.0, 0.0, 0.0)

    return Profile(
        start=p0,
        end=p1,
        span=span,
        dz=dz,
        chord_length=math.hypot(span, dz),
        direction=direction,
        min_span=min_span,
    )
