"""Scattered (x, y, value) samples as a tensorclass."""

from __future__ import annotations

import functools
from typing import Optional, Union

import torch
from tensordict import tensorclass
from torch import Tensor

ArrayLike = Union[Tensor, float, list, tuple]


@tensorclass
class PointValue:
    """Set of 2-D samples, each carrying a scalar value.

    A single sample has ``batch_size=[]``; a set of ``n`` samples has
    ``batch_size=[n]``. As a tensorclass, PointValue supports:
    - Indexing: ``points[0]`` or ``points[:2]``
    - Device movement: ``points.to("cuda")``
    - Serialization: ``torch.save(points, path)`` / ``torch.load(path)``

    Attributes
    ----------
    x : Tensor
        x coordinates, shape (*batch,).
    y : Tensor
        y coordinates, shape (*batch,).
    value : Tensor
        Sample values, shape (*batch,).

    Notes
    -----
    The coordinates are not meant to change after construction. Only the
    values are updated, through :meth:`set_value`.
    """

    x: Tensor
    y: Tensor
    value: Tensor

    @property
    def coordinates(self) -> Tensor:
        """Coordinates stacked along the last axis, shape (*batch, 2)."""
        return torch.stack([self.x, self.y], dim=-1)

    @property
    def triplet(self) -> Tensor:
        """``(x, y, value)`` stacked along the last axis, shape (*batch, 3)."""
        return torch.stack([self.x, self.y, self.value], dim=-1)

    def set_value(self, value: ArrayLike) -> None:
        """Overwrite the sample values.

        Parameters
        ----------
        value : Tensor or float
            New value(s), broadcastable to the batch shape.
        """
        value = torch.as_tensor(
            value, dtype=self.value.dtype, device=self.value.device
        )
        self.value = value.expand(self.value.shape).clone()


def point_value(
    x: ArrayLike,
    y: ArrayLike,
    value: ArrayLike,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[torch.device, str]] = None,
) -> PointValue:
    """Create a PointValue from scalars, sequences or tensors.

    Parameters
    ----------
    x, y, value : Tensor, float or sequence
        Coordinates and values. Broadcast to a common shape.
    dtype : torch.dtype, optional
        Floating point dtype of the result. If None, the promoted dtype of
        the tensor inputs is used, falling back to the default dtype when
        there are none or they are integer tensors. Python numbers are
        converted directly to this dtype.
    device : torch.device or str, optional
        Device of the result.

    Returns
    -------
    PointValue
        Sample set with ``batch_size`` equal to the broadcast shape.

    Raises
    ------
    TypeError
        If ``dtype`` is not a floating point type.

    Examples
    --------
    >>> pts = point_value([0.0, 0.0, 75.0], [0.0, 100.0, 25.0], [0.0, 6.0, 3.1])
    >>> pts.batch_size
    torch.Size([3])
    """
    if dtype is None:
        # Python numbers are parsed straight into the final dtype
        tensor_dtypes = [v.dtype for v in (x, y, value) if isinstance(v, Tensor)]
        if tensor_dtypes:
            dtype = functools.reduce(torch.promote_types, tensor_dtypes)
        if dtype is None or not dtype.is_floating_point:
            dtype = torch.get_default_dtype()
    elif not dtype.is_floating_point:
        raise TypeError(f"dtype must be a floating point type, got {dtype}")

    tensors = [
        torch.as_tensor(v, dtype=dtype, device=device) for v in (x, y, value)
    ]

    shape = torch.broadcast_shapes(*(t.shape for t in tensors))
    x, y, value = (t.expand(shape).clone() for t in tensors)

    return PointValue(x=x, y=y, value=value, batch_size=list(shape))


def point_value_from_tensor(data: Tensor) -> PointValue:
    """Create a PointValue from stacked ``(x, y, value)`` columns.

    Parameters
    ----------
    data : Tensor
        Samples, shape (*batch, 3).

    Returns
    -------
    PointValue
        Sample set with ``batch_size=data.shape[:-1]``.
    """
    if data.shape[-1] != 3:
        raise ValueError(
            f"Expected last dimension of size 3 (x, y, value), got {data.shape[-1]}"
        )
    if not data.is_floating_point():
        raise TypeError(
            f"data must have a floating point dtype, got {data.dtype}"
        )

    return PointValue(
        x=data[..., 0].clone(),
        y=data[..., 1].clone(),
        value=data[..., 2].clone(),
        batch_size=list(data.shape[:-1]),
    )
