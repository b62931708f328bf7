"""
Curve Sampler & Metrics
=======================
Turns solved catenary parameters (or the parabolic fallback) into an ordered
set of local 3D points and derives the descriptive metadata.

Note: `max_sag` is measured on the returned samples, not at the analytic
extremum of the cosh curve, so it depends on the sampling resolution.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from catenaryline.model.catenary import CatenaryParams, CurveMetadata, LineOptions, SampleSet, Strategy

if TYPE_CHECKING:
    import numpy.typing as npt

    from catenaryline.solvers.frame import Profile

logger = logging.getLogger(__name__)


def sample_positions(span: float, num_points: int) -> npt.NDArray[np.float64]:
    """Horizontal positions x = (i / N) * L for i = 0..N."""
    t = np.arange(num_points + 1, dtype=np.float64) / num_points
    return t * span

def catenary_heights(params: CatenaryParams, z0: float, x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    with np.errstate(over="ignore", invalid="ignore"):
        z = z0 + params.rise(x)
    if not np.all(np.isfinite(z)):
        logger.warning(f"Catenary a={params.a:.6g}, b={params.b:.6g} overflows inside the span.")
    return z

def parabola_heights(profile: Profile, sag_ratio: float, x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Chord heights deflected by ``sag_ratio * L * 4t(1 - t)``.

    Args:
        profile: Span profile.
        sag_ratio: Mid-span sag as a fraction of the span.
        x: Horizontal positions along the span.

    Returns:
        Heights at `x`.
    """
    t = x / profile.span
    return profile.chord_height(x) - sag_ratio * profile.span * (4.0 * t * (1.0 - t))

def parabola_constant(span: float, sag_ratio: float) -> float:
    """Catenary constant of the osculating catenary, L² / (8 * sag)."""
    sag = sag_ratio * span
    if sag <= 0.0:
        return math.inf
    return span * span / (8.0 * sag)

def max_sag(profile: Profile, x: npt.NDArray[np.float64], z: npt.NDArray[np.float64]) -> float:
    """Largest vertical distance of the samples below the chord."""
    with np.errstate(invalid="ignore"):
        return float(np.max(profile.chord_height(x) - z))

def build_sample_set(
    profile: Profile,
    options: LineOptions,
    strategy: Strategy,
    params: CatenaryParams | None = None,
    converged: bool = True,
) -> SampleSet:
    """
    Sample a solved span and attach its metadata.

    Args:
        profile: Non-degenerate span profile.
        options: Caller options (resolution, sag ratio, linear weight).
        strategy: Strategy that produced the shape.
        params: Solved catenary parameters; None selects the parabola.
        converged: Whether the solve met its tolerance without defaults.

    Returns:
        The sampled curve with metadata.
    """
    x = sample_positions(profile.span, options.num_points)

    if params is None:
        z = parabola_heights(profile, options.sag_ratio, x)
        a = parabola_constant(profile.span, options.sag_ratio)
    else:
        z = catenary_heights(params, profile.z0, x)
        a = params.a

    metadata = CurveMetadata(
        a=a,
        max_sag=max_sag(profile, x, z),
        implied_tension=a * options.linear_weight,
        linear_weight=options.linear_weight,
        requested_mode=options.mode,
        strategy=strategy,
        converged=converged,
    )
    return SampleSet(points=profile.to_local(x, z), metadata=metadata)

def degenerate_sample_set(profile: Profile) -> SampleSet:
    """The two raw endpoints, without metadata."""
    return SampleSet(points=np.array([profile.start.to_array(), profile.end.to_array()]))
