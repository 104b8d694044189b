"""RBF interpolator evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import torch
from torch import Tensor

from ...geometry import PointValue
from ._rbf_kernels import evaluate_kernel

if TYPE_CHECKING:
    from ._rbf import RBFInterpolator


def rbf_evaluate(
    rbf: RBFInterpolator,
    query: Union[Tensor, PointValue],
    chunk_size: Optional[int] = None,
) -> Tensor:
    """
    Evaluate an RBF interpolator at query points.

    Parameters
    ----------
    rbf : RBFInterpolator
        The RBF interpolator.
    query : Tensor or PointValue
        Query coordinates, shape (..., 2), or a point set whose
        coordinates are used. Converted to the dtype and device of the
        interpolator.
    chunk_size : int, optional
        Maximum number of query points evaluated at once. Bounds the
        (chunk_size, n) kernel block held in memory. Default evaluates
        all query points together.

    Returns
    -------
    result : Tensor
        Interpolated values, shape (...). A single query of shape (2,)
        gives a 0-d tensor.
    """
    centers = rbf.centers  # (n, 2)
    weights = rbf.weights  # (n,)

    if isinstance(query, PointValue):
        query = query.coordinates

    query = torch.as_tensor(query, dtype=centers.dtype, device=centers.device)

    if query.dim() == 0 or query.shape[-1] != 2:
        raise ValueError(
            f"query must have shape (..., 2), got {tuple(query.shape)}"
        )
    if chunk_size is not None and chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    batch_shape = query.shape[:-1]
    query = query.reshape(-1, 2)  # (m, 2)

    if chunk_size is None or chunk_size >= query.shape[0]:
        result = _evaluate(rbf, query, centers, weights)
    else:
        result = torch.cat(
            [
                _evaluate(rbf, chunk, centers, weights)
                for chunk in torch.split(query, chunk_size)
            ]
        )

    return result.reshape(batch_shape)


def _evaluate(
    rbf: RBFInterpolator, query: Tensor, centers: Tensor, weights: Tensor
) -> Tensor:
    # Compute distances from query points to centers
    diff = query.unsqueeze(1) - centers.unsqueeze(0)  # (m, n, 2)
    distances = torch.linalg.vector_norm(diff, dim=-1)  # (m, n)

    K = evaluate_kernel(distances, rbf.kernel, rbf.epsilon)  # (m, n)

    return K @ weights
