"""Scattered point sets and their bounding boxes."""

from ._bounding_box import (
    BoundingBox,
    bounding_box,
    bounding_box_from_corners,
)
from ._exceptions import GeometryError, InsufficientPointsError
from ._point_value import (
    PointValue,
    point_value,
    point_value_from_tensor,
)

__all__ = [
    "BoundingBox",
    "GeometryError",
    "InsufficientPointsError",
    "PointValue",
    "bounding_box",
    "bounding_box_from_corners",
    "point_value",
    "point_value_from_tensor",
]
