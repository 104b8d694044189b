"""RBF interpolation over a regular grid."""

from __future__ import annotations

import numbers
from typing import Optional, Union

import torch
from torch import Tensor

from ...geometry import BoundingBox, PointValue
from .._exceptions import InvalidResolutionError
from ._rbf_evaluate import rbf_evaluate
from ._rbf_fit import rbf_fit
from ._rbf_kernels import RBFKernel


def rbf_grid_interpolation(
    reso_x: int,
    reso_y: int,
    bbox: BoundingBox,
    points: PointValue,
    kernel: Union[RBFKernel, str] = "linear",
    epsilon: Optional[Union[Tensor, float]] = None,
    chunk_size: Optional[int] = None,
) -> PointValue:
    """
    Interpolate scattered data on a regular grid.

    The grid has ``reso_x * reso_y`` cells with steps
    ``(max_x - min_x) / reso_x`` and ``(max_y - min_y) / reso_y``, starting
    at ``(min_x, min_y)``. The upper edges of the box are not sampled.

    Parameters
    ----------
    reso_x, reso_y : int
        Number of grid cells along x and y. Must be positive.
    bbox : BoundingBox
        Domain of the grid.
    points : PointValue
        Observation points.
    kernel : RBFKernel or str
        RBF kernel or kernel name.
    epsilon : float, optional
        Shape parameter. If None, estimated from the observation points.
    chunk_size : int, optional
        Maximum number of grid cells evaluated at once.

    Returns
    -------
    PointValue
        Grid samples, ``batch_size=[reso_x * reso_y]``. Ordered by x index
        first, then y index: sample ``i * reso_y + j`` is at
        ``(min_x + i * step_x, min_y + j * step_y)``.

    Raises
    ------
    InvalidResolutionError
        If either resolution is not positive. Checked before fitting.
    UnknownKernelError, DegenerateEpsilonError, SingularSystemError
        Propagated from :func:`rbf_fit`.
    """
    for name, reso in (("reso_x", reso_x), ("reso_y", reso_y)):
        if isinstance(reso, bool) or not isinstance(reso, numbers.Integral):
            raise TypeError(f"{name} must be an integer, got {reso!r}")
        if reso < 1:
            raise InvalidResolutionError(
                f"{name} must be a positive number of cells, got {reso}"
            )

    rbf = rbf_fit(points, kernel=kernel, epsilon=epsilon)

    dtype, device = rbf.centers.dtype, rbf.centers.device
    min_x = bbox.min_x.to(dtype=dtype, device=device)
    max_x = bbox.max_x.to(dtype=dtype, device=device)
    min_y = bbox.min_y.to(dtype=dtype, device=device)
    max_y = bbox.max_y.to(dtype=dtype, device=device)

    step_x = (max_x - min_x) / reso_x
    step_y = (max_y - min_y) / reso_y

    xs = min_x + step_x * torch.arange(reso_x, dtype=dtype, device=device)
    ys = min_y + step_y * torch.arange(reso_y, dtype=dtype, device=device)

    # "ij" indexing keeps x as the outer (slow) axis when flattened
    X, Y = torch.meshgrid(xs, ys, indexing="ij")
    x = X.reshape(-1)
    y = Y.reshape(-1)

    value = rbf_evaluate(
        rbf, torch.stack([x, y], dim=-1), chunk_size=chunk_size
    )

    return PointValue(x=x, y=y, value=value, batch_size=[reso_x * reso_y])
