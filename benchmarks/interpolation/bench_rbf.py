"""Benchmarks for RBF interpolation.

This module benchmarks torchrbf fitting and grid interpolation across
point counts and kernels, and compares against scipy's RBFInterpolator
where it is installed.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy.interpolate import RBFInterpolator as ScipyRBFInterpolator

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

# torchrbf imports
from torchrbf.geometry import bounding_box_from_corners, point_value
from torchrbf.interpolation import RBFKernel, rbf_fit, rbf_grid_interpolation


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics (seconds): 'mean', 'std',
        'min', 'max'.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(name: str, ts_time: dict[str, float]) -> None:
    """Print benchmark result."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  Time: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}"
    )


def random_points(n: int, seed: int = 0, dtype=torch.float64):
    """Scattered samples of a smooth surface on [0, 10]²."""
    generator = torch.Generator().manual_seed(seed)
    x = torch.rand(n, generator=generator, dtype=dtype) * 10
    y = torch.rand(n, generator=generator, dtype=dtype) * 10
    value = torch.sin(x / 2) * torch.cos(y / 3)
    return point_value(x, y, value)


class BenchRBF:
    """Benchmarks for RBF fitting and grid interpolation."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_fit(self, sizes=(50, 200, 800)) -> None:
        """Fit time against point count, for every kernel."""
        for n in sizes:
            points = random_points(n)
            for kernel in RBFKernel:
                result = self._bench(rbf_fit, points, kernel)
                print_result(f"rbf_fit n={n} kernel={kernel.value}", result)

    def bench_grid(self, n: int = 200, resolutions=(40, 100, 250)) -> None:
        """Grid interpolation time against resolution."""
        points = random_points(n)
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)
        for reso in resolutions:
            result = self._bench(
                rbf_grid_interpolation,
                reso,
                reso,
                bbox,
                points,
                "inverse_multiquadratic",
                1.66,
                chunk_size=4096,
            )
            print_result(f"rbf_grid_interpolation {reso}x{reso}", result)

            if SCIPY_AVAILABLE:
                coords = points.coordinates.numpy()
                grid = np.stack(
                    np.meshgrid(
                        np.arange(reso) * 10.0 / reso,
                        np.arange(reso) * 10.0 / reso,
                        indexing="ij",
                    ),
                    axis=-1,
                ).reshape(-1, 2)

                def scipy_grid():
                    interpolator = ScipyRBFInterpolator(
                        coords,
                        points.value.numpy(),
                        kernel="inverse_multiquadric",
                        epsilon=1 / 1.66,
                        degree=-1,
                    )
                    return interpolator(grid)

                print_result(
                    f"scipy RBFInterpolator {reso}x{reso}", self._bench(scipy_grid)
                )

    def two_stocks(self) -> None:
        """Summary of the two-point surface on [0, 10]²."""
        points = point_value([3.5, 6.5], [3.5, 6.5], [100.0, 100.0], dtype=torch.float64)
        bbox = bounding_box_from_corners(0.0, 10.0, 0.0, 10.0)

        for kernel in ("inverse_multiquadratic", "gaussian"):
            grid = rbf_grid_interpolation(40, 40, bbox, points, kernel, 1.66)
            surface = grid.value.reshape(40, 40)
            print(
                f"\ntwo stocks, {kernel} (epsilon 1.66): "
                f"min {surface.min().item():.3f}, "
                f"max {surface.max().item():.3f}, "
                f"mean {surface.mean().item():.3f}"
            )


if __name__ == "__main__":
    bench = BenchRBF()
    bench.two_stocks()
    bench.bench_fit()
    bench.bench_grid()
