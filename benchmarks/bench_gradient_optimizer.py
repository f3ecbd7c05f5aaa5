"""Benchmark gradient optimizer iterations."""

import time
from typing import Dict, Optional

import numpy as np

from linopt.optimizer import LinearOptimizerConfig, create_optimizer


def benchmark_gradient_optimizer(
    n_observations: int,
    n_features: int,
    batch_size: Optional[int] = None,
    iteration_limit: int = 200,
    cost_function_type: str = "squared",
) -> Dict[str, float]:
    """Benchmark ``find_extrema`` of the gradient optimizer.

    Args:
        n_observations: Number of rows of the design matrix.
        n_features: Number of columns of the design matrix.
        batch_size: Rows per iteration. None uses every row.
        iteration_limit: Number of iterations to run.
        cost_function_type: "squared" or "log_likelihood".

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    points = rng.normal(size=(n_observations, n_features))
    scores = points @ rng.normal(size=(n_features, 1))
    if cost_function_type == "squared":
        labels = scores
    else:
        labels = (scores > 0).astype(float)

    config = LinearOptimizerConfig(
        cost_function_type=cost_function_type,
        iteration_limit=iteration_limit,
        initial_learning_rate=1e-3,
        min_coefficients_update=None,
        batch_size=batch_size or n_observations,
        random_seed=0,
    )
    optimizer = create_optimizer(config, points, labels)
    is_minimizing = cost_function_type == "squared"

    # Warmup
    optimizer.find_extrema(is_minimizing_objective=is_minimizing)

    # Benchmark
    start = time.perf_counter()
    optimizer.find_extrema(is_minimizing_objective=is_minimizing)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_observations": n_observations,
        "n_features": n_features,
        "total_time_sec": total_time,
        "time_per_iteration_sec": total_time / iteration_limit,
    }


if __name__ == "__main__":
    print("Benchmarking gradient optimizer...")

    for batch_size in (1, 64, None):
        for cost in ("squared", "log_likelihood"):
            results = benchmark_gradient_optimizer(
                n_observations=10000,
                n_features=50,
                batch_size=batch_size,
                cost_function_type=cost,
            )
            label = "full" if batch_size is None else batch_size
            print(f"{cost} cost, batch size {label}:")
            print(f"  Time per iteration: {results['time_per_iteration_sec']*1e6:.2f} μs")
