"""torchrbf: radial basis function interpolation of scattered data in PyTorch."""

from . import (
    geometry,
    interpolation,
)

__all__ = [
    "geometry",
    "interpolation",
]

__version__ = "0.1.0"
