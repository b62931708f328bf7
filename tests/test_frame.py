import math

import numpy as np
import pytest

from catenaryline.model.geometry_primitives import Point, Vector
from catenaryline.solvers.frame import reduce_profile


def test_profile_of_sloped_span():
    profile = reduce_profile(Point(0.0, 0.0, 10.0), Point(30.0, 40.0, 20.0))

    assert profile.span == pytest.approx(50.0)
    assert profile.dz == pytest.approx(10.0)
    assert profile.chord_length == pytest.approx(math.hypot(50.0, 10.0))
    assert profile.direction.x == pytest.approx(0.6)
    assert profile.direction.y == pytest.approx(0.8)
    assert profile.direction.z == 0.0
    assert not profile.is_degenerate


def test_dz_is_end_minus_start():
    profile = reduce_profile((0.0, 0.0, 50.0), (100.0, 0.0, 20.0))
    assert profile.dz == pytest.approx(-30.0)
    assert profile.chord_mid_height == pytest.approx(35.0)


def test_vertical_span_is_degenerate():
    profile = reduce_profile(Point(5.0, 5.0, 0.0), Point(5.0, 5.0, 40.0))
    assert profile.span == 0.0
    assert profile.is_degenerate
    assert profile.direction == Vector(0.0, 0.0, 0.0)


def test_min_span_threshold_is_configurable():
    start, end = Point(0.0, 0.0, 0.0), Point(0.5, 0.0, 0.0)
    assert not reduce_profile(start, end).is_degenerate
    assert reduce_profile(start, end, min_span=1.0).is_degenerate


def test_to_local_inverts_the_reduction():
    start, end = Point(10.0, 20.0, 5.0), Point(130.0, 180.0, 35.0)
    profile = reduce_profile(start, end)

    local = profile.to_local(np.array([0.0, profile.span]), np.array([start.z, end.z]))

    assert local.shape == (2, 3)
    np.testing.assert_allclose(local[0], start.to_array())
    np.testing.assert_allclose(local[1], end.to_array(), atol=1e-9)


def test_chord_height_is_linear():
    profile = reduce_profile((0.0, 0.0, 0.0), (100.0, 0.0, 40.0))
    assert profile.chord_height(25.0) == pytest.approx(10.0)
    np.testing.assert_allclose(profile.chord_height(np.array([0.0, 50.0, 100.0])), [0.0, 20.0, 40.0])


def test_accepts_arrays_and_rejects_bad_shapes():
    profile = reduce_profile(np.array([0.0, 0.0, 0.0]), [3.0, 4.0, 0.0])
    assert profile.span == pytest.approx(5.0)

    with pytest.raises(ValueError):
        reduce_profile((0.0, 0.0), (1.0, 1.0, 1.0))
