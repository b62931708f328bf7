"""
Bracketing Root Finder
======================
Generic bracket-expansion + bisection solver for a scalar function of one
variable. It knows nothing about catenaries; every strategy in
`catenary_solver` reuses it with its own function, bounds and budget.

Two kinds of non-finite values are distinguished:

* NaN marks a *failed evaluation* (overflow inside ``cosh``/``sinh``). It never
  brackets a root and never aborts the search by itself.
* ``+inf`` is a *sentinel* a caller may return on purpose (e.g. "the inner
  search failed"). It counts as strictly positive and may close a bracket
  against a finite negative value when ``accept_sentinel`` is set.
"""
from __future__ import annotations

import logging
import math
from typing import Callable

from catenaryline.config import ExpansionPolicy, SearchSettings

logger = logging.getLogger(__name__)

SENTINEL = math.inf


class RootNotBracketed(ValueError):
    """No sign change could be found (or kept) within the search budget."""

    def __init__(self, message: str, lo: float, hi: float, f_lo: float, f_hi: float) -> None:
        super().__init__(f"{message} (lo={lo:.6g}, hi={hi:.6g}, f_lo={f_lo:.6g}, f_hi={f_hi:.6g})")
        self.lo = lo
        self.hi = hi
        self.f_lo = f_lo
        self.f_hi = f_hi


def evaluate(func: Callable[[float], float], x: float) -> float:
    """
    Evaluate `func` at `x`, mapping overflow to NaN.

    Args:
        func: Scalar function.
        x: Argument.

    Returns:
        The function value, or NaN when the evaluation overflowed.
    """
    try:
        value = float(func(x))
    except (OverflowError, ZeroDivisionError):
        return math.nan
    return value


def _sign(value: float) -> int:
    if value == SENTINEL or value > 0.0:
        return 1
    if value < 0.0:
        return -1
    return 0


def is_bracket(f_lo: float, f_hi: float, accept_sentinel: bool = False) -> bool:
    """
    Check whether two function values enclose a root.

    Args:
        f_lo: Value at the lower bound.
        f_hi: Value at the upper bound.
        accept_sentinel: Treat ``+inf`` as a usable positive value.

    Returns:
        True if the values have opposite signs (or one of them is exactly zero).
    """
    if math.isnan(f_lo) or math.isnan(f_hi):
        return False
    if math.isinf(f_lo) or math.isinf(f_hi):
        if not accept_sentinel:
            return False
        if f_lo == SENTINEL and math.isfinite(f_hi):
            return f_hi <= 0.0
        if f_hi == SENTINEL and math.isfinite(f_lo):
            return f_lo <= 0.0
        return False
    return f_lo * f_hi <= 0.0


def find_root(
    func: Callable[[float], float],
    lo: float,
    hi: float,
    *,
    max_expand: int = 20,
    max_iter: int = 60,
    tol: float = 1e-5,
    policy: ExpansionPolicy = ExpansionPolicy.SYMMETRIC,
    factor: float = 2.0,
    probe_limit: int = 0,
    accept_sentinel: bool = False,
    center: float = 0.0,
) -> float:
    """
    Find a root of `func` by bracket expansion followed by bisection.

    Args:
        func: Scalar function. May raise OverflowError or return NaN/+inf.
        lo: Initial lower bound.
        hi: Initial upper bound.
        max_expand: Maximum number of bracket expansions.
        max_iter: Maximum number of bisection steps.
        tol: Residual tolerance; bisection stops once ``|f(mid)| < tol``.
        policy: How the interval is widened while unbracketed.
        factor: Geometric widening factor (> 1).
        probe_limit: Number of nudges per bound while its value is non-finite,
            done before any expansion. SYMMETRIC searches pull the bound
            halfway toward `center`; GEOMETRIC searches raise the lower bound
            and push out the upper one.
        accept_sentinel: Whether ``+inf`` may close a bracket.
        center: Point SYMMETRIC searches probe toward and expand about.

    Raises:
        RootNotBracketed: If no sign change is found within the budget, or a
            midpoint evaluation fails during bisection.

    Returns:
        The approximate root.
    """
    f_lo = evaluate(func, lo)
    f_hi = evaluate(func, hi)

    symmetric = policy is ExpansionPolicy.SYMMETRIC

    tries = 0
    while not math.isfinite(f_lo) and tries < probe_limit:
        lo = center + (lo - center) / factor if symmetric else lo / factor
        f_lo = evaluate(func, lo)
        tries += 1
    tries = 0
    while not math.isfinite(f_hi) and tries < probe_limit:
        hi = center + (hi - center) / factor if symmetric else hi * factor
        f_hi = evaluate(func, hi)
        tries += 1

    expand = 0
    while not is_bracket(f_lo, f_hi, accept_sentinel) and expand < max_expand:
        if symmetric:
            lo = center + (lo - center) * factor
            hi = center + (hi - center) * factor
            f_lo = evaluate(func, lo)
            f_hi = evaluate(func, hi)
        elif math.isfinite(f_lo) and math.isfinite(f_hi):
            # the bound with the smaller residual is the one closer to the root
            if abs(f_lo) < abs(f_hi):
                lo /= factor
                f_lo = evaluate(func, lo)
            else:
                hi *= factor
                f_hi = evaluate(func, hi)
        else:
            lo /= factor
            hi *= factor
            f_lo = evaluate(func, lo)
            f_hi = evaluate(func, hi)
        expand += 1

    if not is_bracket(f_lo, f_hi, accept_sentinel):
        raise RootNotBracketed(f"Root not bracketed after {expand} expansions", lo, hi, f_lo, f_hi)

    if f_lo == 0.0:
        return lo
    if f_hi == 0.0:
        return hi

    sign_lo = _sign(f_lo)
    for _ in range(max_iter):
        mid = 0.5 * (lo + hi)
        f_mid = evaluate(func, mid)
        if math.isnan(f_mid):
            raise RootNotBracketed("Failed evaluation inside the bracket", lo, hi, f_lo, f_hi)
        if abs(f_mid) < tol:
            return mid
        if _sign(f_mid) == sign_lo:
            lo, f_lo = mid, f_mid
        else:
            hi, f_hi = mid, f_mid

    logger.debug(f"Bisection stopped after {max_iter} steps, interval [{lo:.6g}, {hi:.6g}]")
    return 0.5 * (lo + hi)


def solve(func: Callable[[float], float], settings: SearchSettings, span: float) -> float:
    """
    Run `find_root` with the bounds and budget of a `SearchSettings` entry.

    Args:
        func: Scalar function.
        settings: Search budget; the initial bracket scales with `span`.
        span: Horizontal span length of the profile.

    Returns:
        The approximate root.
    """
    lo, hi = settings.bounds(span)
    return find_root(
        func, lo, hi,
        max_expand=settings.max_expansions,
        max_iter=settings.max_iterations,
        tol=settings.tolerance,
        policy=settings.policy,
        factor=settings.factor,
        probe_limit=settings.probe_limit,
        accept_sentinel=settings.accept_sentinel,
        center=settings.center_at(span),
    )
