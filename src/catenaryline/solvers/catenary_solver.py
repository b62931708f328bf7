"""
Catenary Parameter Solver
=========================
Computes the shape parameters (a, b, c) of ``z(x) = a cosh((x - b) / a) + c``
for a span profile.

Why is this file needed?
------------------------
There is no closed form for the shape parameters of a catenary through two
supports at different heights, so every mode nests two root searches:

1. Physics: `a` follows directly from H / w, only the vertex `b` is searched.
2. Length: the outer search finds `a` matching the arc length, each candidate
   solving its own vertex `b`.
3. Sag: the outer search finds `a` matching the mid-span sag, each candidate
   solving its own vertex position `p`.

When a search cannot bracket its root the strategy raises `RootNotBracketed`
and `solve_catenary` moves one step down the fallback chain
(length -> sag -> parabola). Physics handles its own failure (b = 0) and the
parabola cannot fail.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Dict, Optional

from catenaryline.config import DEFAULT_SETTINGS, LENGTH_EPSILON, SearchSettings, SolverSettings
from catenaryline.model.catenary import CatenaryParams, LineOptions, Strategy
from catenaryline.solvers.frame import Profile
from catenaryline.solvers.root_finder import SENTINEL, RootNotBracketed, solve
from catenaryline.utils import catenary_constant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """
    Outcome of the strategy pipeline.

    `params` is None when the parabola produced the curve.
    """
    strategy: Strategy
    params: Optional[CatenaryParams] = None
    converged: bool = True


def pass_through_offset(a: float, b: float, z0: float) -> float:
    """Vertical offset c such that the curve passes through (0, z0); -inf on overflow."""
    try:
        return z0 - a * math.cosh(-b / a)
    except OverflowError:
        return -math.inf

def rise(a: float, b: float, x: float) -> float:
    """Height of the curve at `x` above its start, ``2a sinh((x - 2b) / 2a) sinh(x / 2a)``."""
    two_a = 2.0 * a
    return two_a * math.sinh((x - 2.0 * b) / two_a) * math.sinh(x / two_a)

def solve_vertex(a: float, profile: Profile, settings: SearchSettings) -> float:
    """
    Find the vertex position b with ``a (cosh((L - b) / a) - cosh(-b / a)) = dz``.

    The residual is evaluated through `rise`, so a level span yields exactly
    zero at b = L / 2.

    Args:
        a: Candidate catenary constant (> 0).
        profile: Span profile.
        settings: Bracket and budget of the search.

    Raises:
        RootNotBracketed: If the search fails.

    Returns:
        The vertex position, measured from the start of the span.
    """
    span = profile.span
    dz = profile.dz

    def height_difference(b: float) -> float:
        return rise(a, b, span) - dz

    return solve(height_difference, settings, span)


# ------------------------------------------------------------------------------
# Strategies
# ------------------------------------------------------------------------------
def solve_physics(profile: Profile, options: LineOptions, settings: SolverSettings) -> Solution:
    a = catenary_constant(options.tension, options.linear_weight)
    try:
        b = solve_vertex(a, profile, settings.vertex)
        converged = True
    except RootNotBracketed as e:
        logger.warning(f"Physics mode could not place the vertex (a={a:.6g}): {e}. Using b=0.")
        b = 0.0
        converged = False

    params = CatenaryParams(a=a, b=b, c=pass_through_offset(a, b, profile.z0))
    return Solution(strategy=Strategy.PHYSICS, params=params, converged=converged)


def solve_length(profile: Profile, options: LineOptions, settings: SolverSettings) -> Solution:
    """
    Solve for the catenary whose arc length equals the target length.

    A catenary cannot be shorter than its chord, so the target is clamped to
    ``chord_length + LENGTH_EPSILON``. Smaller `a` gives a longer curve; a
    candidate whose vertex search fails, or whose length overflows, scores
    as +inf (too long).
    """
    span = profile.span
    target = max(options.target_length, profile.chord_length + LENGTH_EPSILON)
    if target != options.target_length:
        logger.debug(f"Target length {options.target_length:.6g} clamped to chord ({target:.6g}).")

    def length_residual(a: float) -> float:
        try:
            b = solve_vertex(a, profile, settings.vertex)
        except RootNotBracketed:
            return SENTINEL
        try:
            return CatenaryParams(a=a, b=b, c=0.0).arc_length(span) - target
        except OverflowError:
            return SENTINEL

    a = solve(length_residual, settings.length, span)
    b = solve_vertex(a, profile, settings.vertex)
    params = CatenaryParams(a=a, b=b, c=pass_through_offset(a, b, profile.z0))
    return Solution(strategy=Strategy.LENGTH, params=params)


def solve_sag(profile: Profile, options: LineOptions, settings: SolverSettings) -> Solution:
    """
    Solve for the catenary that dips ``sag_ratio * L`` below the chord at mid-span.
    """
    span = profile.span
    z0 = profile.z0
    chord_mid = profile.chord_mid_height
    target_sag = options.sag_ratio * span

    def sag_residual(a: float) -> float:
        try:
            p = solve_vertex(a, profile, settings.sag_vertex)
        except RootNotBracketed:
            return SENTINEL
        return chord_mid - (z0 + rise(a, p, 0.5 * span)) - target_sag

    a = solve(sag_residual, settings.sag, span)
    p = solve_vertex(a, profile, settings.sag_vertex)
    params = CatenaryParams(a=a, b=p, c=pass_through_offset(a, p, z0))
    return Solution(strategy=Strategy.SAG, params=params)


def solve_parabola(profile: Profile, options: LineOptions, settings: SolverSettings) -> Solution:
    return Solution(strategy=Strategy.PARABOLA)


STRATEGIES: Dict[Strategy, Callable[[Profile, LineOptions, SolverSettings], Solution]] = {
    Strategy.PHYSICS: solve_physics,
    Strategy.LENGTH: solve_length,
    Strategy.SAG: solve_sag,
    Strategy.PARABOLA: solve_parabola,
}

FALLBACKS: Dict[Strategy, Optional[Strategy]] = {
    Strategy.PHYSICS: None,
    Strategy.LENGTH: Strategy.SAG,
    Strategy.SAG: Strategy.PARABOLA,
    Strategy.PARABOLA: None,
}


def solve_catenary(
    profile: Profile,
    options: LineOptions,
    settings: SolverSettings = DEFAULT_SETTINGS,
) -> Solution:
    """
    Run the strategy of the requested mode, falling back on failure.

    Args:
        profile: Non-degenerate span profile.
        options: Caller options.
        settings: Search budgets.

    Returns:
        The solution of the first strategy that succeeded.
    """
    strategy = Strategy(options.mode.value)
    while True:
        try:
            solution = STRATEGIES[strategy](profile, options, settings)
        except RootNotBracketed as e:
            fallback = FALLBACKS[strategy]
            if fallback is None:
                raise
            logger.warning(f"{strategy.value} strategy failed ({e}); falling back to {fallback.value}.")
            strategy = fallback
            continue

        if solution.params is not None:
            logger.debug(
                f"{solution.strategy.value}: a={solution.params.a:.6g}, "
                f"b={solution.params.b:.6g}, c={solution.params.c:.6g}"
            )
        return solution
