"""
Solver Configuration & Constants
================================
This module serves as the central registry for the numerical constants and
search budgets used by the catenary solver.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (bracket widths, tolerances, caps)
   scattered throughout the solver strategies.
2. Tuning: Each nested root search has its own `SearchSettings`, grouped into a
   single `SolverSettings` object that callers may replace as a whole.

Exports:
    MIN_SPAN (float): Horizontal span below which no curve is generated.
    DEFAULT_SETTINGS (SolverSettings): The budgets every call uses by default.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


# Global Constants
MIN_SPAN: float = 0.1  # same units as the input coordinates
DEFAULT_NUM_POINTS: int = 64
CONNECTION_LINE_POINTS: int = 96  # resolution used for tower-to-tower connections

DEFAULT_SAG_RATIO: float = 0.06
DEFAULT_LINEAR_WEIGHT: float = 30.0  # N/m
DEFAULT_TENSION: float = 15000.0  # N, horizontal component

WEIGHT_EPSILON: float = 1e-6  # lower clamp for the linear weight in a = H / w
LENGTH_EPSILON: float = 1e-6  # a cable is at least this much longer than its chord


class ExpansionPolicy(StrEnum):
    """How a search interval is widened while no sign change is found."""
    SYMMETRIC = "symmetric"  # scale both bounds (intervals straddling zero)
    GEOMETRIC = "geometric"  # positive domain, push out the more promising bound


@dataclass(frozen=True)
class SearchSettings:
    """
    Budget and tolerance of one scalar root search.

    The initial bracket is ``[lower * span, upper * span]`` clamped from below by
    ``lower_floor`` (only meaningful for positive-domain searches). With
    `center` set, the bracket is offset to ``center * span`` instead, and
    SYMMETRIC probing and expansion work about that point.
    """
    lower: float
    upper: float
    tolerance: float
    max_iterations: int
    max_expansions: int
    policy: ExpansionPolicy = ExpansionPolicy.SYMMETRIC
    factor: float = 2.0
    lower_floor: float | None = None
    probe_limit: int = 0
    accept_sentinel: bool = False
    center: float | None = None

    def center_at(self, span: float) -> float:
        return 0.0 if self.center is None else self.center * span

    def bounds(self, span: float) -> tuple[float, float]:
        origin = self.center_at(span)
        lo = origin + self.lower * span
        if self.lower_floor is not None:
            lo = max(lo, self.lower_floor)
        return lo, origin + self.upper * span


@dataclass(frozen=True)
class SolverSettings:
    """All search budgets used by the catenary strategies."""
    min_span: float = MIN_SPAN

    # b such that z(L) - z(0) = dz, for Physics and inside Length mode;
    # bracketed about mid-span so that cosh stays finite at both bounds
    vertex: SearchSettings = field(default_factory=lambda: SearchSettings(
        lower=-10.0, upper=10.0, tolerance=1e-5,
        max_iterations=60, max_expansions=30,
        probe_limit=60, center=0.5,
    ))

    # a such that the arc length matches the target length
    length: SearchSettings = field(default_factory=lambda: SearchSettings(
        lower=1.0 / 600.0, upper=1000.0, tolerance=1e-4,
        max_iterations=60, max_expansions=20,
        policy=ExpansionPolicy.GEOMETRIC, lower_floor=0.1,
        accept_sentinel=True,
    ))

    # vertex position p inside Sag mode
    sag_vertex: SearchSettings = field(default_factory=lambda: SearchSettings(
        lower=-4.0, upper=4.0, tolerance=1e-5,
        max_iterations=50, max_expansions=20,
        probe_limit=60, center=0.5,
    ))

    # a such that the mid-span sag matches sag_ratio * L
    sag: SearchSettings = field(default_factory=lambda: SearchSettings(
        lower=0.01, upper=100.0, tolerance=1e-4,
        max_iterations=40, max_expansions=20,
        policy=ExpansionPolicy.GEOMETRIC, lower_floor=0.1,
        probe_limit=5,
    ))


DEFAULT_SETTINGS = SolverSettings()
