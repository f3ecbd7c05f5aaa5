"""Mean squared error cost for linear regression."""

from __future__ import annotations

import numpy as np

from .base import CostFunction


class SquaredCost(CostFunction):
    """Mean squared residual per observation, ``sum((X w - y)^2) / n``; minimized."""

    def get_cost(
        self, points: np.ndarray, coefficients: np.ndarray, labels: np.ndarray
    ) -> float:
        residuals = points @ coefficients - labels
        return float(np.sum(residuals**2) / points.shape[0])

    def get_gradient(
        self, points: np.ndarray, coefficients: np.ndarray, labels: np.ndarray
    ) -> np.ndarray:
        residuals = points @ coefficients - labels
        return (2.0 / points.shape[0]) * (points.T @ residuals)


__all__ = ["SquaredCost"]
