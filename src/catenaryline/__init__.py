"""
Catenary geometry of overhead cables between two supports.

The package is pure Python/NumPy and has no knowledge of rendering or of any
global coordinate frame; callers hand in two points in a local east-north-up
frame and reproject the returned points themselves.
"""
from catenaryline.model.catenary import CurveMetadata, LineOptions, Mode, SampleSet, Strategy
from catenaryline.model.geometry_primitives import Point, Vector
from catenaryline.transmission_line import create_transmission_line

__all__ = [
    "CurveMetadata",
    "LineOptions",
    "Mode",
    "Point",
    "SampleSet",
    "Strategy",
    "Vector",
    "create_transmission_line",
]
