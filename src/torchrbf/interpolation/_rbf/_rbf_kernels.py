"""RBF kernel functions."""

from __future__ import annotations

import enum
from typing import Union

import torch
from torch import Tensor

from .._exceptions import UnknownKernelError


class RBFKernel(enum.Enum):
    """Supported radial basis functions."""

    LINEAR = "linear"
    CUBIC = "cubic"
    QUINTIC = "quintic"
    THIN_PLATE = "thin_plate"
    GAUSSIAN = "gaussian"
    MULTIQUADRATIC = "multiquadratic"
    INVERSE_MULTIQUADRATIC = "inverse_multiquadratic"

    @property
    def uses_epsilon(self) -> bool:
        """Whether the kernel depends on the shape parameter."""
        return self in KERNELS_WITH_EPSILON


def linear_kernel(r: Tensor, epsilon: Union[Tensor, float]) -> Tensor:
    """Linear kernel: r.

    Parameters
    ----------
    r : Tensor
        Distances.
    epsilon : Tensor or float
        Shape parameter (unused).

    Returns
    -------
    Tensor
        Kernel values, same shape as r.
    """
    return r


def cubic_kernel(r: Tensor, epsilon: Union[Tensor, float]) -> Tensor:
    """Cubic kernel: r³."""
    return r**3


def quintic_kernel(r: Tensor, epsilon: Union[Tensor, float]) -> Tensor:
    """Quintic kernel: r⁵."""
    return r**5


def thin_plate_kernel(r: Tensor, epsilon: Union[Tensor, float]) -> Tensor:
    """Thin plate spline kernel: r² log(r).

    Parameters
    ----------
    r : Tensor
        Distances.
    epsilon : Tensor or float
        Shape parameter (unused).

    Returns
    -------
    Tensor
        Kernel values, exactly 0 where r is 0.
    """
    # r² log(r) -> 0 as r -> 0
    safe_r = torch.where(r > 0, r, torch.ones_like(r))
    return torch.where(
        r > 0,
        r**2 * torch.log(safe_r),
        torch.zeros_like(r),
    )


def gaussian_kernel(r: Tensor, epsilon: Union[Tensor, float]) -> Tensor:
    """Gaussian kernel: 1 / exp((r/ε)² + 1).

    Parameters
    ----------
    r : Tensor
        Distances.
    epsilon : Tensor or float
        Shape parameter.

    Returns
    -------
    Tensor
        Kernel values.
    """
    return torch.exp(-((r / epsilon) ** 2 + 1))


def multiquadratic_kernel(r: Tensor, epsilon: Union[Tensor, float]) -> Tensor:
    """Multiquadratic kernel: sqrt((r/ε)² + 1).

    Parameters
    ----------
    r : Tensor
        Distances.
    epsilon : Tensor or float
        Shape parameter.

    Returns
    -------
    Tensor
        Kernel values.
    """
    return torch.sqrt((r / epsilon) ** 2 + 1)


def inverse_multiquadratic_kernel(
    r: Tensor, epsilon: Union[Tensor, float]
) -> Tensor:
    """Inverse multiquadratic kernel: 1 / sqrt((r/ε)² + 1).

    Parameters
    ----------
    r : Tensor
        Distances.
    epsilon : Tensor or float
        Shape parameter.

    Returns
    -------
    Tensor
        Kernel values.
    """
    return torch.rsqrt((r / epsilon) ** 2 + 1)


KERNEL_FUNCTIONS = {
    RBFKernel.LINEAR: linear_kernel,
    RBFKernel.CUBIC: cubic_kernel,
    RBFKernel.QUINTIC: quintic_kernel,
    RBFKernel.THIN_PLATE: thin_plate_kernel,
    RBFKernel.GAUSSIAN: gaussian_kernel,
    RBFKernel.MULTIQUADRATIC: multiquadratic_kernel,
    RBFKernel.INVERSE_MULTIQUADRATIC: inverse_multiquadratic_kernel,
}

# Kernels whose value depends on epsilon
KERNELS_WITH_EPSILON = frozenset(
    {
        RBFKernel.GAUSSIAN,
        RBFKernel.MULTIQUADRATIC,
        RBFKernel.INVERSE_MULTIQUADRATIC,
    }
)


def resolve_kernel(kernel: Union[RBFKernel, str]) -> RBFKernel:
    """Look up a kernel by name.

    Parameters
    ----------
    kernel : RBFKernel or str
        Kernel or kernel name. Names are matched case-insensitively.

    Returns
    -------
    RBFKernel
        The matching kernel.

    Raises
    ------
    UnknownKernelError
        If the name does not match any supported kernel.
    """
    if isinstance(kernel, RBFKernel):
        return kernel

    if isinstance(kernel, str):
        try:
            return RBFKernel(kernel.strip().lower())
        except ValueError:
            pass

    raise UnknownKernelError(
        f"Unknown kernel {kernel!r}. Available: {[k.value for k in RBFKernel]}"
    )


def evaluate_kernel(
    r: Tensor,
    kernel: Union[RBFKernel, str],
    epsilon: Union[Tensor, float],
) -> Tensor:
    """Evaluate an RBF kernel at distances.

    Parameters
    ----------
    r : Tensor
        Distances, shape (*).
    kernel : RBFKernel or str
        Kernel or kernel name.
    epsilon : Tensor or float
        Shape parameter.

    Returns
    -------
    Tensor
        Kernel values, same shape as r.
    """
    return KERNEL_FUNCTIONS[resolve_kernel(kernel)](r, epsilon)
