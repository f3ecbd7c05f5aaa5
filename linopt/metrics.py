"""Scores for assessing fitted regressors and classifiers."""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from .core import as_enum


class MetricType(Enum):
    MAPE = "mape"
    RMSE = "rmse"
    ACCURACY = "accuracy"


def _as_2d(values: Any, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim == 1:
        array = array.reshape(-1, 1)
    if array.ndim != 2:
        raise ValueError(f"{name} must be 1D or 2D, got shape {array.shape}.")
    return array


def _check_columns(predicted: Any, original: Any) -> tuple[np.ndarray, np.ndarray]:
    predicted = _as_2d(predicted, "predicted")
    original = _as_2d(original, "original")
    if predicted.shape != original.shape:
        raise ValueError(
            f"predicted and original must have the same shape, "
            f"got {predicted.shape} and {original.shape}."
        )
    if predicted.shape[0] == 0:
        raise ValueError("Cannot score empty inputs.")
    return predicted, original


def _single_column(predicted: Any, original: Any) -> tuple[np.ndarray, np.ndarray]:
    predicted, original = _check_columns(predicted, original)
    if predicted.shape[1] != 1:
        raise ValueError("Both predicted and original labels have to be a single column.")
    return predicted[:, 0], original[:, 0]


def mape(predicted: Any, original: Any) -> float:
    """Mean absolute percentage error, in percent."""
    predicted, original = _single_column(predicted, original)
    return float(100.0 / len(predicted) * np.sum(np.abs((original - predicted) / original)))


def rmse(predicted: Any, original: Any) -> float:
    """Root mean squared error."""
    predicted, original = _single_column(predicted, original)
    return float(np.sqrt(np.mean((predicted - original) ** 2)))


def accuracy(predicted: Any, original: Any) -> float:
    """Share of rows predicted exactly; one-hot rows must match entirely."""
    predicted, original = _check_columns(predicted, original)
    return float(np.mean(np.all(predicted == original, axis=1)))


_METRICS = {
    MetricType.MAPE: mape,
    MetricType.RMSE: rmse,
    MetricType.ACCURACY: accuracy,
}


def get_score(metric_type: MetricType | str, predicted: Any, original: Any) -> float:
    """Score ``predicted`` against ``original`` with the chosen metric."""
    return _METRICS[as_enum(MetricType, metric_type)](predicted, original)


__all__ = ["MetricType", "accuracy", "get_score", "mape", "rmse"]
