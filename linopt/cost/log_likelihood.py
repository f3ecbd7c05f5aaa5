"""Log-likelihood cost for logistic and softmax regression."""

from __future__ import annotations

import numpy as np

from ..link import LinkFunction, SoftmaxLinkFunction
from .base import CostFunction

_EPS = 1e-15


class LogLikelihoodCost(CostFunction):
    """Mean log-likelihood of the labels under ``link(X w)``; maximized.

    Under the softmax link the label rows are one-hot encoded categories.
    Under any other link every label column holds independent Bernoulli
    outcomes. In both cases the gradient is ``(1 / n) X^T (y - p)``, with the
    same shape as for the squared cost, so the optimizer loop does not depend
    on the link function.
    """

    def __init__(self, link_function: LinkFunction):
        self.link_function = link_function

    @property
    def is_categorical(self) -> bool:
        return isinstance(self.link_function, SoftmaxLinkFunction)

    def get_cost(
        self, points: np.ndarray, coefficients: np.ndarray, labels: np.ndarray
    ) -> float:
        probabilities = np.clip(
            self.link_function.link(points @ coefficients), _EPS, 1.0 - _EPS
        )
        if self.is_categorical:
            log_likelihood = labels * np.log(probabilities)
        else:
            log_likelihood = labels * np.log(probabilities) + (1.0 - labels) * np.log(
                1.0 - probabilities
            )
        return float(np.sum(log_likelihood) / points.shape[0])

    def get_gradient(
        self, points: np.ndarray, coefficients: np.ndarray, labels: np.ndarray
    ) -> np.ndarray:
        probabilities = self.link_function.link(points @ coefficients)
        return (points.T @ (labels - probabilities)) / points.shape[0]


__all__ = ["LogLikelihoodCost"]
