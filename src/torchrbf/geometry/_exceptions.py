"""Geometry module exceptions."""


class GeometryError(Exception):
    """Base exception for geometry operations."""

    pass


class InsufficientPointsError(GeometryError):
    """Not enough points for the requested operation."""

    pass
