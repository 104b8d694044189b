"""Axis-aligned 2-D bounding box."""

from __future__ import annotations

import functools
from typing import Optional, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._exceptions import InsufficientPointsError
from ._point_value import PointValue


@tensorclass
class BoundingBox:
    """Rectangular domain ``[min_x, max_x] x [min_y, max_y]``.

    Attributes
    ----------
    min_x, max_x : Tensor
        Extent along x, 0-d tensors.
    min_y, max_y : Tensor
        Extent along y, 0-d tensors.
    """

    min_x: Tensor
    max_x: Tensor
    min_y: Tensor
    max_y: Tensor

    @property
    def width(self) -> Tensor:
        """Extent along x."""
        return self.max_x - self.min_x

    @property
    def height(self) -> Tensor:
        """Extent along y."""
        return self.max_y - self.min_y


def bounding_box_from_corners(
    min_x: Union[Tensor, float],
    max_x: Union[Tensor, float],
    min_y: Union[Tensor, float],
    max_y: Union[Tensor, float],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[torch.device, str]] = None,
) -> BoundingBox:
    """Create a BoundingBox from explicit extents.

    The ordering of the corners is trusted, not validated.

    Parameters
    ----------
    min_x, max_x, min_y, max_y : Tensor or float
        Extents of the box.
    dtype : torch.dtype, optional
        dtype of the result. If None, the promoted dtype of the tensor
        extents is used; Python numbers are kept at float64 so the grid
        can cast them to the dtype of the points without rounding twice.
    device : torch.device or str, optional
        Device of the result.

    Returns
    -------
    BoundingBox
        Box with ``batch_size=[]``.
    """
    if dtype is None:
        tensor_dtypes = [
            v.dtype
            for v in (min_x, max_x, min_y, max_y)
            if isinstance(v, Tensor) and v.is_floating_point()
        ]
        if tensor_dtypes:
            dtype = functools.reduce(torch.promote_types, tensor_dtypes)
        else:
            dtype = torch.float64

    def _scalar(v):
        return torch.as_tensor(v, dtype=dtype, device=device).reshape(())

    return BoundingBox(
        min_x=_scalar(min_x),
        max_x=_scalar(max_x),
        min_y=_scalar(min_y),
        max_y=_scalar(max_y),
        batch_size=[],
    )


def bounding_box(points: PointValue) -> BoundingBox:
    """Smallest BoundingBox enclosing a point set.

    Parameters
    ----------
    points : PointValue
        Sample set of any batch shape.

    Returns
    -------
    BoundingBox
        Box with the dtype and device of ``points``.

    Raises
    ------
    InsufficientPointsError
        If ``points`` is empty.
    """
    if points.x.numel() == 0:
        raise InsufficientPointsError(
            "Cannot compute the bounding box of an empty point set"
        )

    return BoundingBox(
        min_x=points.x.min(),
        max_x=points.x.max(),
        min_y=points.y.min(),
        max_y=points.y.max(),
        batch_size=[],
    )
