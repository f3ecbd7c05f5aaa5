"""Gradient optimizer for linear models.

Full-batch, mini-batch and stochastic gradient descent (or ascent) share one
loop; the mode is given by ``batch_size``. Each iteration samples a contiguous
batch of rows, shrinks the coefficients by ``1 - 2 * learning_rate * lambda_``
when regularization is on, then takes a gradient step.
"""

from __future__ import annotations

import numpy as np

from ..core import DEFAULT_LEARNING_RATE
from ..cost import CostFunction
from ..math import Randomizer
from .base import LinearOptimizer, OptimizationContext
from .convergence import ConvergenceDetector
from .initial_coefficients import InitialCoefficientsGenerator
from .learning_rate import LearningRateGenerator, learning_rate_scope


class GradientOptimizer(LinearOptimizer):
    """Gradient descent over a bound design matrix.

    Args:
        points: Design matrix, shape (n_observations, n_features).
        labels: Label matrix, shape (n_observations, n_outputs).
        cost_function: Objective providing cost and gradient.
        learning_rate_generator: Schedule started once per ``find_extrema``.
        initial_coefficients_generator: Used when no starting coefficients
            are given.
        convergence_detector: Stopping rule.
        randomizer: Batch sampler, unused in full-batch mode.
        initial_learning_rate: Value the schedule starts from.
        batch_size: Rows per gradient computation, in ``[1, n_observations]``.
        lambda_: L2 regularization strength, ``0`` disables it.

    Raises:
        ValueError: If ``batch_size`` is out of range, ``lambda_`` is negative,
            ``initial_learning_rate`` is not positive, or points and labels
            are malformed.
    """

    def __init__(
        self,
        points: np.ndarray,
        labels: np.ndarray,
        *,
        cost_function: CostFunction,
        learning_rate_generator: LearningRateGenerator,
        initial_coefficients_generator: InitialCoefficientsGenerator,
        convergence_detector: ConvergenceDetector,
        randomizer: Randomizer,
        initial_learning_rate: float = DEFAULT_LEARNING_RATE,
        batch_size: int = 1,
        lambda_: float = 0.0,
    ):
        super().__init__(
            points,
            labels,
            cost_function=cost_function,
            initial_coefficients_generator=initial_coefficients_generator,
            convergence_detector=convergence_detector,
        )
        if not 1 <= batch_size <= self.n_observations:
            raise ValueError(
                f"batch_size must be in [1, {self.n_observations}], got {batch_size}."
            )
        if lambda_ < 0:
            raise ValueError(f"lambda_ must be non-negative, got {lambda_}.")
        if initial_learning_rate <= 0:
            raise ValueError(
                f"initial_learning_rate must be positive, got {initial_learning_rate}."
            )
        self.learning_rate_generator = learning_rate_generator
        self.randomizer = randomizer
        self.initial_learning_rate = initial_learning_rate
        self.batch_size = int(batch_size)
        self.lambda_ = float(lambda_)

    @property
    def is_full_batch(self) -> bool:
        return self.batch_size == self.n_observations

    def _optimize(
        self,
        context: OptimizationContext,
        is_minimizing_objective: bool,
        collect_learning_data: bool,
    ) -> None:
        with learning_rate_scope(self.learning_rate_generator, self.initial_learning_rate):
            super()._optimize(context, is_minimizing_objective, collect_learning_data)

    def _batch_interval(self) -> tuple[int, int]:
        if self.is_full_batch:
            return 0, self.n_observations
        return self.randomizer.get_integer_interval(0, self.n_observations, self.batch_size)

    def _step(self, coefficients: np.ndarray, is_minimizing_objective: bool) -> np.ndarray:
        start, end = self._batch_interval()
        gradient = self.cost_function.get_gradient(
            self.points[start:end], coefficients, self.labels[start:end]
        )
        learning_rate = self.learning_rate_generator.get_next_value()
        if self.lambda_ > 0:
            coefficients = coefficients * (1.0 - 2.0 * learning_rate * self.lambda_)
        step = learning_rate * np.asarray(gradient, dtype=np.float64)
        return coefficients - step if is_minimizing_objective else coefficients + step


__all__ = ["GradientOptimizer"]
