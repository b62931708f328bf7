import math

import pytest

from catenaryline.config import ExpansionPolicy, SearchSettings, SolverSettings
from catenaryline.model.catenary import LineOptions, Mode, Strategy
from catenaryline.solvers.catenary_solver import (
    pass_through_offset,
    rise,
    solve_catenary,
    solve_length,
    solve_physics,
    solve_sag,
    solve_vertex,
)
from catenaryline.solvers.frame import reduce_profile
from catenaryline.solvers.root_finder import RootNotBracketed

SETTINGS = SolverSettings()

# brackets that cannot contain the answer for a 200 m span and no room to expand
NO_LENGTH_BRACKET = SearchSettings(
    lower=500.0, upper=1000.0, tolerance=1e-4, max_iterations=60, max_expansions=0,
    policy=ExpansionPolicy.GEOMETRIC, accept_sentinel=True,
)
NO_SAG_BRACKET = SearchSettings(
    lower=10.0, upper=20.0, tolerance=1e-4, max_iterations=40, max_expansions=0,
    policy=ExpansionPolicy.GEOMETRIC,
)
NO_VERTEX_BRACKET = SearchSettings(
    lower=5.0, upper=10.0, tolerance=1e-5, max_iterations=60, max_expansions=0,
)


def test_pass_through_offset_puts_curve_on_start_height():
    a, b, z0 = 250.0, 80.0, 12.0
    c = pass_through_offset(a, b, z0)
    assert a * math.cosh(-b / a) + c == pytest.approx(z0)


def test_vertex_matches_closed_form(sloped_profile):
    a = 400.0
    span, dz = sloped_profile.span, sloped_profile.dz
    expected = span / 2 - a * math.asinh(dz / (2 * a * math.sinh(span / (2 * a))))

    b = solve_vertex(a, sloped_profile, SETTINGS.vertex)

    assert b == pytest.approx(expected, abs=1e-3)


def test_vertex_of_level_span_is_mid_span(level_profile):
    assert solve_vertex(500.0, level_profile, SETTINGS.vertex) == pytest.approx(100.0, abs=1e-3)


def test_physics_computes_a_directly(level_profile, physics_options):
    solution = solve_physics(level_profile, physics_options, SETTINGS)

    assert solution.strategy == Strategy.PHYSICS
    assert solution.converged
    assert solution.params.a == 500.0
    assert solution.params.b == pytest.approx(100.0, abs=1e-3)
    assert solution.params.height(0.0) == pytest.approx(0.0, abs=1e-9)


def test_physics_clamps_zero_weight(level_profile):
    options = LineOptions(tension=1.0, linear_weight=0.0)
    solution = solve_physics(level_profile, options, SETTINGS)
    assert solution.params.a == pytest.approx(1e6)


def test_physics_defaults_vertex_when_search_fails(level_profile, physics_options):
    settings = SolverSettings(vertex=NO_VERTEX_BRACKET)

    solution = solve_physics(level_profile, physics_options, settings)

    assert solution.strategy == Strategy.PHYSICS
    assert not solution.converged
    assert solution.params.b == 0.0
    assert solution.params.c == pytest.approx(-500.0)


def test_length_matches_target(level_profile, length_options):
    solution = solve_length(level_profile, length_options, SETTINGS)

    a = solution.params.a
    assert solution.strategy == Strategy.LENGTH
    assert abs(2 * a * math.sinh(100.0 / a) - 205.0) < 1e-4
    assert solution.params.arc_length(level_profile.span) == pytest.approx(205.0, abs=1e-3)


def test_length_on_sloped_span(sloped_profile):
    target = sloped_profile.chord_length * 1.03
    options = LineOptions(mode=Mode.LENGTH, target_length=target)

    solution = solve_length(sloped_profile, options, SETTINGS)

    assert solution.params.arc_length(sloped_profile.span) == pytest.approx(target, abs=1e-3)
    height_change = solution.params.height(sloped_profile.span) - solution.params.height(0.0)
    assert height_change == pytest.approx(sloped_profile.dz, abs=1e-4)


def test_length_shorter_than_chord_is_clamped(level_profile):
    options = LineOptions(mode=Mode.LENGTH, target_length=150.0)

    solution = solve_length(level_profile, options, SETTINGS)

    assert solution.params.arc_length(level_profile.span) == pytest.approx(200.0, abs=1e-3)
    assert solution.params.a > 1e4


def test_length_raises_without_bracket(level_profile, length_options):
    with pytest.raises(RootNotBracketed):
        solve_length(level_profile, length_options, SolverSettings(length=NO_LENGTH_BRACKET))


def test_sag_matches_mid_span_sag(level_profile, sag_options):
    solution = solve_sag(level_profile, sag_options, SETTINGS)

    params = solution.params
    mid_sag = params.height(0.0) - params.height(100.0)
    assert solution.strategy == Strategy.SAG
    assert mid_sag == pytest.approx(12.0, abs=1e-3)


def test_sag_on_sloped_span(sloped_profile, sag_options):
    solution = solve_sag(sloped_profile, sag_options, SETTINGS)

    params = solution.params
    half = sloped_profile.span / 2
    mid_sag = sloped_profile.chord_mid_height - params.height(half)
    assert mid_sag == pytest.approx(0.06 * sloped_profile.span, abs=1e-3)
    assert params.height(sloped_profile.span) == pytest.approx(sloped_profile.end.z, abs=1e-4)


def test_pipeline_keeps_requested_strategy(level_profile, length_options):
    solution = solve_catenary(level_profile, length_options)
    assert solution.strategy == Strategy.LENGTH


def test_length_falls_back_to_sag(level_profile, length_options):
    settings = SolverSettings(length=NO_LENGTH_BRACKET)

    solution = solve_catenary(level_profile, length_options, settings)

    assert solution.strategy == Strategy.SAG
    mid_sag = solution.params.height(0.0) - solution.params.height(100.0)
    assert mid_sag == pytest.approx(length_options.sag_ratio * 200.0, abs=1e-3)


def test_sag_falls_back_to_parabola(level_profile, sag_options):
    solution = solve_catenary(level_profile, sag_options, SolverSettings(sag=NO_SAG_BRACKET))
    assert solution.strategy == Strategy.PARABOLA
    assert solution.params is None


def test_length_falls_through_to_parabola(level_profile, length_options):
    settings = SolverSettings(length=NO_LENGTH_BRACKET, sag=NO_SAG_BRACKET)
    solution = solve_catenary(level_profile, length_options, settings)
    assert solution.strategy == Strategy.PARABOLA


def test_physics_never_falls_back(level_profile, physics_options):
    settings = SolverSettings(vertex=NO_VERTEX_BRACKET, length=NO_LENGTH_BRACKET, sag=NO_SAG_BRACKET)
    solution = solve_catenary(level_profile, physics_options, settings)
    assert solution.strategy == Strategy.PHYSICS
    assert not solution.converged


def test_vertex_found_when_wide_bounds_overflow():
    profile = reduce_profile((0.0, 0.0, 0.0), (1000.0, 0.0, 0.0))
    # a = 5: cosh overflows at the initial bounds but is finite at mid-span
    options = LineOptions(tension=150.0, linear_weight=30.0)

    solution = solve_physics(profile, options, SETTINGS)

    assert solution.converged
    assert solution.params.b == 500.0


def test_rise_matches_cosh_difference():
    a, b = 120.0, 35.0
    for x in (0.0, 40.0, 150.0):
        direct = a * (math.cosh((x - b) / a) - math.cosh(-b / a))
        assert rise(a, b, x) == pytest.approx(direct, rel=1e-12, abs=1e-12)
