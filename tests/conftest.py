import matplotlib
import pytest

matplotlib.use("Agg")

from catenaryline.model.catenary import LineOptions, Mode
from catenaryline.model.geometry_primitives import Point
from catenaryline.solvers.frame import reduce_profile


@pytest.fixture
def level_start():
    return Point(0.0, 0.0, 0.0)


@pytest.fixture
def level_end():
    return Point(200.0, 0.0, 0.0)


@pytest.fixture
def level_profile(level_start, level_end):
    return reduce_profile(level_start, level_end)


@pytest.fixture
def sloped_profile():
    return reduce_profile(Point(10.0, 20.0, 5.0), Point(130.0, 180.0, 35.0))


@pytest.fixture
def physics_options():
    return LineOptions(mode=Mode.PHYSICS, tension=15000.0, linear_weight=30.0)


@pytest.fixture
def length_options():
    return LineOptions(mode=Mode.LENGTH, target_length=205.0)


@pytest.fixture
def sag_options():
    return LineOptions(mode=Mode.SAG, sag_ratio=0.06)
