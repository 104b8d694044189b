"""RBF interpolator representation and convenience function."""

from typing import Callable, Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ...geometry import PointValue
from ._rbf_kernels import RBFKernel


@tensorclass
class RBFInterpolator:
    """Radial Basis Function interpolator for scattered 2-D data.

    The interpolant has the form:
    f(x) = Σ w_i φ(||x - c_i||, ε)

    where φ is the RBF kernel, w_i are weights, c_i are centers (the
    observation coordinates) and ε is the shape parameter. The weights
    are chosen so that f reproduces every observation exactly.

    Attributes
    ----------
    centers : Tensor
        Observation coordinates, shape (n, 2).
    observed_values : Tensor
        Observation values, shape (n,).
    weights : Tensor
        RBF weights, shape (n,).
    epsilon : Tensor
        Resolved shape parameter, 0-d tensor.
    kernel : str
        Kernel name, one of the :class:`RBFKernel` values.
    """

    centers: Tensor
    observed_values: Tensor
    weights: Tensor
    epsilon: Tensor
    kernel: str

    @property
    def kernel_type(self) -> RBFKernel:
        """Kernel as an :class:`RBFKernel` member."""
        return RBFKernel(self.kernel)

    @property
    def n_points(self) -> int:
        """Number of observation points."""
        return self.centers.shape[0]

    def interp_point(
        self, x: Union[Tensor, float], y: Union[Tensor, float]
    ) -> Tensor:
        """Evaluate the interpolant at a single coordinate pair.

        Parameters
        ----------
        x, y : Tensor or float
            Query coordinates.

        Returns
        -------
        Tensor
            Interpolated value, 0-d tensor.
        """
        from ._rbf_evaluate import rbf_evaluate

        dtype, device = self.centers.dtype, self.centers.device
        query = torch.stack(
            [
                torch.as_tensor(x, dtype=dtype, device=device).reshape(()),
                torch.as_tensor(y, dtype=dtype, device=device).reshape(()),
            ]
        )
        return rbf_evaluate(self, query)


def rbf_interpolate(
    points: PointValue,
    kernel: Union[RBFKernel, str] = "linear",
    epsilon: Optional[Union[Tensor, float]] = None,
) -> Callable[[Tensor], Tensor]:
    """Create an RBF interpolator for scattered data.

    This is a convenience function that fits an RBF interpolator and
    returns a callable that evaluates it.

    Parameters
    ----------
    points : PointValue
        Observation points.
    kernel : RBFKernel or str, optional
        RBF kernel. One of:

        - ``"linear"``: r (default)
        - ``"cubic"``: r³
        - ``"quintic"``: r⁵
        - ``"thin_plate"``: r² log(r)
        - ``"gaussian"``: 1 / exp((r/ε)² + 1)
        - ``"multiquadratic"``: sqrt((r/ε)² + 1)
        - ``"inverse_multiquadratic"``: 1 / sqrt((r/ε)² + 1)

    epsilon : float, optional
        Shape parameter. If None, the mean pairwise distance between the
        observation points is used.

    Returns
    -------
    interpolator : Callable[[Tensor], Tensor]
        Function that evaluates the RBF at query points of shape (..., 2).

    Examples
    --------
    >>> import torch
    >>> from torchrbf.geometry import point_value
    >>> pts = point_value(torch.rand(20), torch.rand(20), torch.rand(20))
    >>> f = rbf_interpolate(pts, kernel="thin_plate")
    >>> f(torch.tensor([[0.5, 0.5]]))
    """
    from ._rbf_evaluate import rbf_evaluate
    from ._rbf_fit import rbf_fit

    rbf = rbf_fit(points, kernel=kernel, epsilon=epsilon)
    return lambda q: rbf_evaluate(rbf, q)
