"""
Transmission Line Geometry
==========================
Single entry point of the package: two supports in a shared local
east-north-up frame in, sampled catenary points in the same frame out.

The function is pure: no caches and no shared state, so identical inputs give
bit-identical outputs and calls may run concurrently.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from catenaryline.config import DEFAULT_SETTINGS, SolverSettings
from catenaryline.model.catenary import LineOptions, SampleSet
from catenaryline.model.geometry_primitives import PointLike
from catenaryline.solvers.catenary_solver import solve_catenary
from catenaryline.solvers.frame import reduce_profile
from catenaryline.solvers.sampler import build_sample_set, degenerate_sample_set

logger = logging.getLogger(__name__)


def create_transmission_line(
    start: PointLike,
    end: PointLike,
    options: Optional[LineOptions] = None,
    *,
    settings: Optional[SolverSettings] = None,
    **option_fields: Any,
) -> SampleSet:
    """
    Generate a hanging cable between two supports.

    Args:
        start: Start support, a Point or three local coordinates (z is up).
        end: End support, a Point or three local coordinates.
        options: Mode and parameters. If omitted, built from `option_fields`
            (e.g. ``mode="sag", sag_ratio=0.04``).
        settings: Search budgets; defaults to `DEFAULT_SETTINGS`.
        **option_fields: LineOptions fields, only allowed without `options`.

    Raises:
        ValueError: If the options violate their preconditions, or both
            `options` and `option_fields` are given.

    Returns:
        N + 1 points with metadata, or the two raw endpoints without metadata
        when the horizontal span is shorter than the minimum span.
    """
    if options is None:
        options = LineOptions(**option_fields)
    elif option_fields:
        raise ValueError("Pass either a LineOptions instance or option fields, not both.")
    settings = settings or DEFAULT_SETTINGS

    profile = reduce_profile(start, end, min_span=settings.min_span)
    if profile.is_degenerate:
        logger.debug(f"Span {profile.span:.6g} below {settings.min_span}; returning the raw endpoints.")
        return degenerate_sample_set(profile)

    solution = solve_catenary(profile, options, settings)
    return build_sample_set(
        profile,
        options,
        strategy=solution.strategy,
        params=solution.params,
        converged=solution.converged,
    )
