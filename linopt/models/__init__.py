"""Linear regression and classification models."""

from .base import LinearModel
from .classifier import LogisticRegressor, SoftmaxRegressor
from .regressor import LassoRegressor, LinearRegressor

__all__ = [
    "LassoRegressor",
    "LinearModel",
    "LinearRegressor",
    "LogisticRegressor",
    "SoftmaxRegressor",
]
