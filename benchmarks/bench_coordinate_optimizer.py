"""Benchmark coordinate descent sweeps."""

import time
from typing import Dict

import numpy as np

from linopt.optimizer import LinearOptimizerConfig, create_optimizer


def benchmark_coordinate_optimizer(
    n_observations: int,
    n_features: int,
    n_sweeps: int = 50,
    lambda_: float = 1.0,
) -> Dict[str, float]:
    """Benchmark Lasso sweeps of the coordinate optimizer.

    Args:
        n_observations: Number of rows of the design matrix.
        n_features: Number of columns of the design matrix.
        n_sweeps: Number of full sweeps over the features.
        lambda_: L1 regularization strength.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    points = rng.normal(size=(n_observations, n_features))
    labels = points[:, :5] @ rng.normal(size=(5, 1))

    config = LinearOptimizerConfig(
        optimizer_type="coordinate",
        iteration_limit=n_sweeps,
        min_coefficients_update=None,
        lambda_=lambda_,
    )
    optimizer = create_optimizer(config, points, labels)

    start = time.perf_counter()
    coefficients = optimizer.find_extrema()
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_observations": n_observations,
        "n_features": n_features,
        "total_time_sec": total_time,
        "time_per_sweep_sec": total_time / n_sweeps,
        "nonzero_coefficients": int(np.count_nonzero(coefficients)),
    }


if __name__ == "__main__":
    print("Benchmarking coordinate optimizer...")

    results = benchmark_coordinate_optimizer(n_observations=5000, n_features=200)
    print("Coordinate descent (5000 x 200):")
    print(f"  Time per sweep: {results['time_per_sweep_sec']*1e3:.2f} ms")
    print(f"  Nonzero coefficients: {results['nonzero_coefficients']}")
