"""Logistic and softmax regression classifiers.

Both maximize the log-likelihood of the training labels with the gradient
optimizer; they differ only in the link function and the label encoding.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..core import CostFunctionType, LinkFunctionType
from ..link import create_link_function
from ..metrics import MetricType
from ..utils import as_column, check_array
from .base import LinearModel


class _LinearClassifier(LinearModel):
    _cost_function_type = CostFunctionType.LOG_LIKELIHOOD
    _is_minimizing_objective = False
    _default_metric = MetricType.ACCURACY

    def __init__(
        self,
        positive_label: float = 1,
        negative_label: float = 0,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.positive_label = positive_label
        self.negative_label = negative_label
        self._link_function = create_link_function(self._link_function_type)

    def _encode(self, labels: np.ndarray) -> np.ndarray:
        """Map positive labels to 1 and everything else to 0."""
        return (labels == self.positive_label).astype(np.float64)

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Class probabilities, one column per output of the model."""
        return self._link_function.link(self._decision_function(X))


class LogisticRegressor(_LinearClassifier):
    """Binary classifier based on the logit link function.

    Args:
        probability_threshold: Probability at or above which an observation
            is assigned ``positive_label``.
        positive_label: Label value of the positive class.
        negative_label: Label value of the negative class.
        **kwargs: Hyperparameters of :class:`~linopt.models.base.LinearModel`.
    """

    _link_function_type = LinkFunctionType.LOGIT

    def __init__(
        self,
        probability_threshold: float = 0.5,
        positive_label: float = 1,
        negative_label: float = 0,
        **kwargs: Any,
    ):
        if not 0.0 < probability_threshold < 1.0:
            raise ValueError(
                f"probability_threshold must be in (0, 1), got {probability_threshold}."
            )
        super().__init__(positive_label=positive_label, negative_label=negative_label, **kwargs)
        self.probability_threshold = probability_threshold

    def fit(
        self, X: np.ndarray, y: Any, initial_coefficients: Optional[np.ndarray] = None
    ) -> "LogisticRegressor":
        labels = as_column(y, name="y")
        if labels.shape[1] != 1:
            raise ValueError(
                f"LogisticRegressor expects a single target column, got {labels.shape[1]}."
            )
        self._fit_coefficients(X, self._encode(labels), initial_coefficients)
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        probabilities = self.predict_proba(X)
        return np.where(
            probabilities >= self.probability_threshold,
            self.positive_label,
            self.negative_label,
        ).astype(np.float64)


class SoftmaxRegressor(_LinearClassifier):
    """Multiclass classifier based on the softmax link function.

    Targets must be one-hot encoded: one column per class, ``positive_label``
    marking the class of each row.
    """

    _link_function_type = LinkFunctionType.SOFTMAX

    def fit(
        self, X: np.ndarray, y: Any, initial_coefficients: Optional[np.ndarray] = None
    ) -> "SoftmaxRegressor":
        labels = check_array(y, name="y")
        if labels.shape[1] < 2:
            raise ValueError(
                "The target should be one-hot encoded into at least two columns."
            )
        self._fit_coefficients(X, self._encode(labels), initial_coefficients)
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        probabilities = self.predict_proba(X)
        winners = np.argmax(probabilities, axis=1)
        predicted = np.full(probabilities.shape, self.negative_label, dtype=np.float64)
        predicted[np.arange(len(winners)), winners] = self.positive_label
        return predicted


__all__ = ["LogisticRegressor", "SoftmaxRegressor"]
