"""Core interfaces shared by the linear optimizers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..cost import CostFunction
from ..logging import get_logger
from ..utils import check_coefficients, check_points_and_labels
from .convergence import ConvergenceDetector
from .initial_coefficients import InitialCoefficientsGenerator

logger = get_logger(__name__)


@dataclass
class OptimizationContext:
    """Mutable state of a single ``find_extrema`` call.

    A fresh context is built for every call, so coefficients and the cost
    trace of one call never leak into the next.
    """

    coefficients: np.ndarray
    iteration: int = 0
    update_norm: float = sys.float_info.max
    cost_per_iteration: List[float] = field(default_factory=list)


class LinearOptimizer(ABC):
    """Iteratively fits a ``(n_features, n_outputs)`` coefficient matrix.

    The design matrix and labels are bound at construction; ``find_extrema``
    can then be called repeatedly with different starting coefficients.
    """

    def __init__(
        self,
        points: np.ndarray,
        labels: np.ndarray,
        *,
        cost_function: CostFunction,
        initial_coefficients_generator: InitialCoefficientsGenerator,
        convergence_detector: ConvergenceDetector,
    ):
        self.points, self.labels = check_points_and_labels(points, labels)
        self.cost_function = cost_function
        self.initial_coefficients_generator = initial_coefficients_generator
        self.convergence_detector = convergence_detector
        self._cost_per_iteration: List[float] = []

    @property
    def n_observations(self) -> int:
        return self.points.shape[0]

    @property
    def cost_per_iteration(self) -> List[float]:
        """Cost after each iteration of the last call that collected it."""
        return list(self._cost_per_iteration)

    def find_extrema(
        self,
        initial_coefficients: Optional[np.ndarray] = None,
        is_minimizing_objective: bool = True,
        collect_learning_data: bool = False,
    ) -> np.ndarray:
        """Run the optimization and return the learned coefficients.

        Args:
            initial_coefficients: Starting ``(n_features, n_outputs)`` matrix.
                Generated by the initial coefficients generator when omitted.
            is_minimizing_objective: Minimize the cost when True, maximize it
                otherwise.
            collect_learning_data: Record the full-data cost after every
                iteration, readable afterwards via :attr:`cost_per_iteration`.

        Returns:
            The coefficient matrix reached when the convergence detector stops
            the loop. Hitting the iteration limit is not an error.
        """
        self._cost_per_iteration = []
        n_features, n_outputs = self.points.shape[1], self.labels.shape[1]
        if initial_coefficients is None:
            coefficients = np.asarray(
                self.initial_coefficients_generator.generate(n_features, n_outputs),
                dtype=np.float64,
            )
        else:
            coefficients = check_coefficients(initial_coefficients, n_features, n_outputs)

        context = OptimizationContext(coefficients=coefficients)
        self._optimize(context, is_minimizing_objective, collect_learning_data)
        self._cost_per_iteration = context.cost_per_iteration
        logger.info(
            "%s stopped after %d iterations, last update norm %.3e",
            type(self).__name__,
            context.iteration,
            context.update_norm,
        )
        return context.coefficients

    def _optimize(
        self,
        context: OptimizationContext,
        is_minimizing_objective: bool,
        collect_learning_data: bool,
    ) -> None:
        while not self.convergence_detector.is_converged(context.update_norm, context.iteration):
            previous = context.coefficients
            context.coefficients = self._step(previous, is_minimizing_objective)
            context.iteration += 1
            if collect_learning_data:
                context.cost_per_iteration.append(
                    float(self.cost_function.get_cost(self.points, context.coefficients, self.labels))
                )
            context.update_norm = float(np.linalg.norm(context.coefficients - previous))
            logger.debug(
                "iteration %d: update norm %.3e", context.iteration, context.update_norm
            )

    @abstractmethod
    def _step(self, coefficients: np.ndarray, is_minimizing_objective: bool) -> np.ndarray:
        """Return the coefficients after one iteration, leaving the input intact."""


__all__ = ["LinearOptimizer", "OptimizationContext"]
