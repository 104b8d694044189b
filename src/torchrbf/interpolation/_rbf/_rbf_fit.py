"""RBF interpolator fitting."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional, Union

import torch
from torch import Tensor

from ...geometry import InsufficientPointsError, PointValue
from .._exceptions import (
    DegenerateEpsilonError,
    IllConditionedWarning,
    SingularSystemError,
)
from ._rbf_kernels import RBFKernel, evaluate_kernel, resolve_kernel

if TYPE_CHECKING:
    from ._rbf import RBFInterpolator


def rbf_fit(
    points: PointValue,
    kernel: Union[RBFKernel, str] = "linear",
    epsilon: Optional[Union[Tensor, float]] = None,
) -> RBFInterpolator:
    """
    Fit an RBF interpolator to scattered 2-D data.

    Parameters
    ----------
    points : PointValue
        Observation points. Any batch shape; flattened in row-major order.
    kernel : RBFKernel or str
        RBF kernel or kernel name.
    epsilon : float, optional
        Shape parameter, must be positive. If None, estimated from the
        mean pairwise distance between the observation points.

    Returns
    -------
    rbf : RBFInterpolator
        Fitted RBF interpolator, with the dtype and device of ``points``.

    Raises
    ------
    UnknownKernelError
        If ``kernel`` is not a supported kernel.
    InsufficientPointsError
        If ``points`` is empty.
    DegenerateEpsilonError
        If epsilon is None and cannot be derived (a single point, or all
        points coincident).
    SingularSystemError
        If the interpolation system has no unique solution.

    Notes
    -----
    The system solved is:
    A w = f

    where A[j, i] = φ(||c_i - c_j||, ε) and f are the observation values.
    It is solved exactly with an LU factorization.
    """
    from ._rbf import RBFInterpolator

    kernel = resolve_kernel(kernel)

    centers = points.coordinates.reshape(-1, 2)
    values = points.value.reshape(-1)

    n = centers.shape[0]

    if n < 1:
        raise InsufficientPointsError("Need at least 1 data point")
    if not centers.is_floating_point():
        raise TypeError(
            f"points must have a floating point dtype, got {centers.dtype}"
        )

    distances = _pairwise_distances(centers)  # (n, n)

    if epsilon is None:
        epsilon = _estimate_epsilon(distances)
    else:
        epsilon = _validate_epsilon(epsilon, centers)

    A = evaluate_kernel(distances, kernel, epsilon)

    # Factor once; the solve and the condition estimate share the factors
    LU, pivots, info = torch.linalg.lu_factor_ex(A)

    if info.item() != 0:
        raise SingularSystemError(
            f"The {kernel.value} interpolation matrix for {n} points is "
            f"singular (coincident points or ill-chosen epsilon?)"
        )

    weights = torch.linalg.lu_solve(LU, pivots, values.unsqueeze(-1)).squeeze(-1)

    if not torch.isfinite(weights).all():
        raise SingularSystemError(
            f"Cannot solve the {kernel.value} interpolation system for "
            f"{n} points (coincident points or ill-chosen epsilon?)"
        )

    _check_conditioning(A, LU, pivots, kernel)

    return RBFInterpolator(
        centers=centers.clone(),
        observed_values=values.clone(),
        weights=weights,
        epsilon=epsilon,
        kernel=kernel.value,
        batch_size=[],
    )


def _pairwise_distances(centers: Tensor) -> Tensor:
    """Euclidean distance matrix, D[j, i] = ||c_i - c_j||."""
    diff = centers.unsqueeze(0) - centers.unsqueeze(1)  # (n, n, 2)
    return torch.linalg.vector_norm(diff, dim=-1)


def _estimate_epsilon(distances: Tensor) -> Tensor:
    """Mean pairwise distance, excluding the diagonal."""
    n = distances.shape[0]
    if n < 2:
        raise DegenerateEpsilonError(
            "Need at least 2 points to estimate epsilon; pass epsilon explicitly"
        )

    epsilon = distances.sum() / (n * n - n)

    if not epsilon > 0:
        raise DegenerateEpsilonError(
            "All points coincide; cannot estimate epsilon"
        )

    return epsilon


def _validate_epsilon(epsilon: Union[Tensor, float], centers: Tensor) -> Tensor:
    epsilon = torch.as_tensor(
        epsilon, dtype=centers.dtype, device=centers.device
    )
    if epsilon.numel() != 1:
        raise ValueError(
            f"epsilon must be a scalar, got shape {tuple(epsilon.shape)}"
        )
    epsilon = epsilon.reshape(())

    if not (torch.isfinite(epsilon) and epsilon > 0):
        raise ValueError(
            f"epsilon must be positive and finite, got {epsilon.item()}"
        )

    return epsilon


def _estimate_condition(A: Tensor, LU: Tensor, pivots: Tensor) -> Tensor:
    """1-norm condition number estimate of A from its LU factors.

    Hager's estimator: a lower bound on ||A⁻¹||₁ from a few triangular
    solves, O(n²) each, times the exact ||A||₁.
    """
    n = A.shape[0]
    x = torch.full((n, 1), 1.0 / n, dtype=A.dtype, device=A.device)
    inverse_norm = torch.zeros((), dtype=A.dtype, device=A.device)

    for _ in range(5):
        y = torch.linalg.lu_solve(LU, pivots, x)  # A⁻¹ x
        inverse_norm = y.abs().sum()

        sign = torch.where(y >= 0, torch.ones_like(y), -torch.ones_like(y))
        z = torch.linalg.lu_solve(LU, pivots, sign, adjoint=True)  # A⁻ᵀ sign

        j = torch.argmax(z.abs())
        if z.abs().max() <= (z * x).sum():
            break

        x = torch.zeros_like(x)
        x[j] = 1.0

    return torch.linalg.matrix_norm(A, ord=1) * inverse_norm


def _check_conditioning(
    A: Tensor, LU: Tensor, pivots: Tensor, kernel: RBFKernel
) -> None:
    if A.shape[0] < 2:
        return

    condition = _estimate_condition(A, LU, pivots)
    limit = 1.0 / torch.finfo(A.dtype).eps

    if not condition < limit:
        warnings.warn(
            f"The {kernel.value} interpolation system is ill-conditioned "
            f"(condition number {condition.item():.2e}); interpolated "
            f"values may be inaccurate",
            IllConditionedWarning,
            stacklevel=3,
        )
