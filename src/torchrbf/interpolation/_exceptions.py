"""Exceptions and warnings for RBF interpolation."""


class RBFError(Exception):
    """Base exception for RBF interpolation errors."""

    pass


class UnknownKernelError(RBFError, ValueError):
    """Kernel name is not one of the supported kernels."""

    pass


class DegenerateEpsilonError(RBFError):
    """Shape parameter cannot be derived from the observation points."""

    pass


class SingularSystemError(RBFError):
    """Interpolation system has no unique solution (e.g., coincident points)."""

    pass


class InvalidResolutionError(RBFError, ValueError):
    """Grid resolution is not a positive number of cells."""

    pass


class IllConditionedWarning(UserWarning):
    """Warning for interpolation systems close to singular."""

    pass
