"""Radial Basis Function interpolation for scattered data."""

from ._rbf import RBFInterpolator, rbf_interpolate
from ._rbf_evaluate import rbf_evaluate
from ._rbf_fit import rbf_fit
from ._rbf_grid import rbf_grid_interpolation
from ._rbf_kernels import (
    KERNEL_FUNCTIONS,
    KERNELS_WITH_EPSILON,
    RBFKernel,
    cubic_kernel,
    evaluate_kernel,
    gaussian_kernel,
    inverse_multiquadratic_kernel,
    linear_kernel,
    multiquadratic_kernel,
    quintic_kernel,
    resolve_kernel,
    thin_plate_kernel,
)

__all__ = [
    "KERNELS_WITH_EPSILON",
    "KERNEL_FUNCTIONS",
    "RBFInterpolator",
    "RBFKernel",
    "cubic_kernel",
    "evaluate_kernel",
    "gaussian_kernel",
    "inverse_multiquadratic_kernel",
    "linear_kernel",
    "multiquadratic_kernel",
    "quintic_kernel",
    "rbf_evaluate",
    "rbf_fit",
    "rbf_grid_interpolation",
    "rbf_interpolate",
    "resolve_kernel",
    "thin_plate_kernel",
]
