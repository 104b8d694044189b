"""Tests for RBF interpolation on a regular grid."""

import pytest
import torch

from torchrbf.geometry import (
    PointValue,
    bounding_box,
    bounding_box_from_corners,
    point_value,
)
from torchrbf.interpolation import (
    InvalidResolutionError,
    RBFError,
    SingularSystemError,
    UnknownKernelError,
    rbf_fit,
    rbf_grid_interpolation,
)
from torchrbf.interpolation._rbf import _rbf_grid


def _two_stocks():
    return point_value([3.5, 6.5], [3.5, 6.5], [100.0, 100.0], dtype=torch.float64)


def _scenario_points():
    return point_value(
        [0.0, 0.0, 75.0, 100.0],
        [0.0, 100.0, 25.0, 75.0],
        [0.0, 6.0, 3.1, 7.4],
        dtype=torch.float64,
    )


class TestRBFGridInterpolation:
    """Tests for rbf_grid_interpolation function."""

    def test_grid_size(self):
        """Should return one point per grid cell."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        grid = rbf_grid_interpolation(4, 5, bbox, _two_stocks(), "gaussian", 1.66)

        assert isinstance(grid, PointValue)
        assert grid.batch_size == torch.Size([20])
        assert grid.value.shape == (20,)

    def test_grid_coordinates(self):
        """Should start at the lower corner and step by span / resolution."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        grid = rbf_grid_interpolation(4, 5, bbox, _two_stocks(), "linear")

        assert grid.x[0].item() == 0.0
        assert grid.y[0].item() == 0.0
        # Last cell does not reach the upper edge
        assert grid.x[-1].item() == pytest.approx(7.5)
        assert grid.y[-1].item() == pytest.approx(8.0)

    def test_grid_starts_at_exact_corner(self):
        """The first cell is the lower corner, without rounding."""
        bbox = bounding_box_from_corners(0.1, 10.3, 0.7, 5.9)

        grid = rbf_grid_interpolation(4, 4, bbox, _two_stocks(), "linear")

        assert grid.x.dtype == torch.float64
        assert grid.x[0].item() == 0.1
        assert grid.y[0].item() == 0.7
        assert grid.x[4].item() == pytest.approx(0.1 + 10.2 / 4, rel=1e-12)
        assert grid.y[1].item() == pytest.approx(0.7 + 5.2 / 4, rel=1e-12)

    def test_grid_order(self):
        """x index is the outer loop, y index the inner loop."""
        bbox = bounding_box_from_corners(-1.0, 3.0, 2.0, 5.0)
        reso_x, reso_y = 4, 3

        grid = rbf_grid_interpolation(
            reso_x, reso_y, bbox, _two_stocks(), "cubic"
        )

        for i in range(reso_x):
            for j in range(reso_y):
                k = i * reso_y + j
                assert grid.x[k].item() == pytest.approx(-1.0 + 1.0 * i)
                assert grid.y[k].item() == pytest.approx(2.0 + 1.0 * j)

    def test_grid_matches_model(self):
        """Grid values are the model evaluated at the grid coordinates."""
        points = _scenario_points()
        bbox = bounding_box(points)

        grid = rbf_grid_interpolation(8, 6, bbox, points, "thin_plate")
        rbf = rbf_fit(points, kernel="thin_plate")

        for k in (0, 7, 20, 47):
            expected = rbf.interp_point(grid.x[k], grid.y[k])
            torch.testing.assert_close(grid.value[k], expected)

    def test_grid_reproduces_observations(self):
        """Grid cells on observation points carry their values."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        grid = rbf_grid_interpolation(
            40, 40, bbox, _two_stocks(), "inverse_multiquadratic", 1.66
        )

        # step 0.25: (3.5, 3.5) is cell (14, 14), (6.5, 6.5) is cell (26, 26)
        for i in (14, 26):
            k = i * 40 + i
            assert grid.x[k].item() == pytest.approx(i * 0.25)
            assert grid.value[k].item() == pytest.approx(100.0, rel=1e-9)

    def test_grid_uses_points_dtype(self):
        """Output follows the dtype of the observation points."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        grid = rbf_grid_interpolation(3, 3, bbox, _two_stocks(), "gaussian")

        assert grid.x.dtype == torch.float64
        assert grid.value.dtype == torch.float64

    def test_grid_chunked(self):
        """Chunked grid evaluation matches a single batch."""
        points = _scenario_points()
        bbox = bounding_box(points)

        full = rbf_grid_interpolation(10, 10, bbox, points, "multiquadratic")
        chunked = rbf_grid_interpolation(
            10, 10, bbox, points, "multiquadratic", chunk_size=13
        )

        assert torch.equal(full.x, chunked.x)
        assert torch.equal(full.y, chunked.y)
        torch.testing.assert_close(full.value, chunked.value)

    def test_grid_degenerate_box(self):
        """A zero-width box repeats the same coordinate."""
        bbox = bounding_box_from_corners(2.0, 2.0, 0.0, 4.0)

        grid = rbf_grid_interpolation(3, 2, bbox, _two_stocks(), "linear")

        assert torch.all(grid.x == 2.0)


class TestRBFGridErrors:
    """Tests for rbf_grid_interpolation error reporting."""

    @pytest.mark.parametrize("reso", [(0, 10), (10, 0), (-1, 4)])
    def test_invalid_resolution(self, reso):
        """Should reject non-positive resolutions."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        with pytest.raises(InvalidResolutionError):
            rbf_grid_interpolation(*reso, bbox, _two_stocks(), "linear")

    def test_invalid_resolution_skips_fit(self, monkeypatch):
        """Resolution is checked before the model is built."""

        def _fail(*args, **kwargs):
            raise AssertionError("model must not be built")

        monkeypatch.setattr(_rbf_grid, "rbf_fit", _fail)
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        with pytest.raises(InvalidResolutionError):
            rbf_grid_interpolation(0, 10, bbox, _two_stocks(), "bogus")

    def test_invalid_resolution_is_rbf_error(self):
        """Resolution errors share the RBFError base."""
        assert issubclass(InvalidResolutionError, RBFError)
        assert issubclass(InvalidResolutionError, ValueError)

    @pytest.mark.parametrize("reso", [(2.5, 3), (True, 3), ("4", 3)])
    def test_non_integer_resolution(self, reso):
        """Should reject non-integer resolutions."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        with pytest.raises(TypeError):
            rbf_grid_interpolation(*reso, bbox, _two_stocks(), "linear")

    def test_unknown_kernel(self):
        """Should propagate unknown kernels from fitting."""
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        with pytest.raises(UnknownKernelError):
            rbf_grid_interpolation(4, 4, bbox, _two_stocks(), "bogus")

    def test_singular_system(self):
        """Should propagate singular systems from fitting."""
        points = point_value(
            [1.0, 1.0, 4.0], [1.0, 1.0, 2.0], [0.0, 1.0, 2.0],
            dtype=torch.float64,
        )
        bbox = bounding_box(points)

        with pytest.raises(SingularSystemError):
            rbf_grid_interpolation(4, 4, bbox, points, "linear")
