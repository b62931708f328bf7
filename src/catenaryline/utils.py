from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from catenaryline.config import WEIGHT_EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt


def catenary_constant(tension: float, linear_weight: float) -> float:
    """Catenary constant a = H / w, with the weight clamped away from zero."""
    return tension / max(WEIGHT_EPSILON, linear_weight)

def tension_from_rts_percent(percent: float, rated_strength_kn: float) -> float:
    """Convert a percentage of the rated tensile strength (kN) to a tension in N."""
    return (percent / 100.0) * rated_strength_kn * 1000.0

def rts_percent_from_tension(tension: float, rated_strength_kn: float) -> float:
    """
    Express a tension in N as a percentage of the rated tensile strength.

    Raises:
        ValueError: If the rated strength is not positive.
    """
    if rated_strength_kn <= 0.0:
        raise ValueError(f"Rated strength must be positive, got {rated_strength_kn}.")
    return tension / (rated_strength_kn * 1000.0) * 100.0

def polyline_length(points: npt.ArrayLike) -> float:
    """
    Piecewise-linear length of an ordered point sequence.

    Args:
        points: Array-like of shape (n, d).

    Returns:
        Sum of the segment lengths; 0.0 for fewer than two points.
    """
    pts = np.asarray(points, dtype=np.float64)
    if len(pts) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))
