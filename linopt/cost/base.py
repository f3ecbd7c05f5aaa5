"""Cost function interface shared by all optimizers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class CostFunction(ABC):
    """Scalar objective over a batch of observations.

    ``points`` has shape ``(n_observations, n_features)``, ``coefficients``
    ``(n_features, n_outputs)`` and ``labels`` ``(n_observations, n_outputs)``.
    The gradient has the shape of ``coefficients``.
    """

    @abstractmethod
    def get_cost(
        self, points: np.ndarray, coefficients: np.ndarray, labels: np.ndarray
    ) -> float:
        """Objective value for the given batch."""

    @abstractmethod
    def get_gradient(
        self, points: np.ndarray, coefficients: np.ndarray, labels: np.ndarray
    ) -> np.ndarray:
        """Gradient of the objective with respect to ``coefficients``."""


__all__ = ["CostFunction"]
