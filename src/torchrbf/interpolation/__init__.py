"""Radial Basis Function interpolation of scattered 2-D data.

Interpolators
-------------
rbf_fit
    Fit an RBF interpolator to observation points.
rbf_evaluate
    Evaluate a fitted interpolator at query points.
rbf_interpolate
    Fit and return a callable evaluator.
rbf_grid_interpolation
    Fit once and evaluate over a regular grid.

Kernels
-------
RBFKernel
    Supported radial basis functions.
resolve_kernel
    Look up a kernel by name.
evaluate_kernel
    Apply a kernel to distances.

Exceptions
----------
RBFError
    Base exception for RBF interpolation.
UnknownKernelError
    Kernel name is not supported.
DegenerateEpsilonError
    Shape parameter cannot be estimated.
SingularSystemError
    Interpolation system has no unique solution.
InvalidResolutionError
    Grid resolution is not positive.
IllConditionedWarning
    Interpolation system is close to singular.
"""

from ._exceptions import (
    DegenerateEpsilonError,
    IllConditionedWarning,
    InvalidResolutionError,
    RBFError,
    SingularSystemError,
    UnknownKernelError,
)
from ._rbf import (
    KERNEL_FUNCTIONS,
    KERNELS_WITH_EPSILON,
    RBFInterpolator,
    RBFKernel,
    cubic_kernel,
    evaluate_kernel,
    gaussian_kernel,
    inverse_multiquadratic_kernel,
    linear_kernel,
    multiquadratic_kernel,
    quintic_kernel,
    rbf_evaluate,
    rbf_fit,
    rbf_grid_interpolation,
    rbf_interpolate,
    resolve_kernel,
    thin_plate_kernel,
)

__all__ = [
    "DegenerateEpsilonError",
    "IllConditionedWarning",
    "InvalidResolutionError",
    "KERNELS_WITH_EPSILON",
    "KERNEL_FUNCTIONS",
    "RBFError",
    "RBFInterpolator",
    "RBFKernel",
    "SingularSystemError",
    "UnknownKernelError",
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
