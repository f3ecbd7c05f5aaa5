"""Shared fitting logic of the linear model facades."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..core import (
    DEFAULT_DECAY,
    DEFAULT_ITERATION_LIMIT,
    DEFAULT_LEARNING_RATE,
    DEFAULT_MIN_COEFFICIENTS_UPDATE,
    CostFunctionType,
    InitialCoefficientsType,
    LearningRateType,
    LinearOptimizerType,
    LinkFunctionType,
)
from ..logging import get_logger
from ..metrics import MetricType, get_score
from ..optimizer import LinearOptimizerConfig, create_optimizer
from ..preprocessing import InterceptPreprocessor, check_is_fitted

logger = get_logger(__name__)


class LinearModel:
    """Base class holding the hyperparameters common to all linear models.

    Args:
        optimizer_type: "gradient" or "coordinate".
        iteration_limit: Maximum number of optimizer iterations.
        learning_rate: Initial learning rate of the gradient optimizer.
        min_coefficients_update: Update norm below which fitting stops.
        lambda_: Regularization strength.
        batch_size: Rows per gradient step; ``None`` uses every row.
        fit_intercept: Whether to learn a bias term.
        intercept_scale: Value of the constant intercept feature.
        learning_rate_type: Learning-rate schedule.
        decay: Decay rate for the time-based and exponential schedules.
        initial_coefficients_type: "zeroes" or "random".
        random_seed: Seed for batch sampling and random initial coefficients.
        is_fitting_data_normalized: Whether feature columns have unit norm.
        collect_learning_data: Record the cost after every iteration in
            ``cost_per_iteration_``.
    """

    _cost_function_type = CostFunctionType.SQUARED
    _link_function_type = LinkFunctionType.LOGIT
    _is_minimizing_objective = True
    _default_metric = MetricType.MAPE

    def __init__(
        self,
        optimizer_type: LinearOptimizerType | str = LinearOptimizerType.GRADIENT,
        iteration_limit: int = DEFAULT_ITERATION_LIMIT,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        min_coefficients_update: Optional[float] = DEFAULT_MIN_COEFFICIENTS_UPDATE,
        lambda_: float = 0.0,
        batch_size: Optional[int] = 1,
        fit_intercept: bool = False,
        intercept_scale: float = 1.0,
        learning_rate_type: LearningRateType | str = LearningRateType.CONSTANT,
        decay: float = DEFAULT_DECAY,
        initial_coefficients_type: InitialCoefficientsType | str = InitialCoefficientsType.ZEROES,
        random_seed: Optional[int] = None,
        is_fitting_data_normalized: bool = False,
        collect_learning_data: bool = False,
    ):
        self.optimizer_type = optimizer_type
        self.iteration_limit = iteration_limit
        self.learning_rate = learning_rate
        self.min_coefficients_update = min_coefficients_update
        self.lambda_ = lambda_
        self.batch_size = batch_size
        self.fit_intercept = fit_intercept
        self.intercept_scale = intercept_scale
        self.learning_rate_type = learning_rate_type
        self.decay = decay
        self.initial_coefficients_type = initial_coefficients_type
        self.random_seed = random_seed
        self.is_fitting_data_normalized = is_fitting_data_normalized
        self.collect_learning_data = collect_learning_data

    @property
    def _effective_intercept_scale(self) -> float:
        return self.intercept_scale if self.fit_intercept else 0.0

    def _config(self, n_observations: int) -> LinearOptimizerConfig:
        return LinearOptimizerConfig(
            optimizer_type=self.optimizer_type,
            cost_function_type=self._cost_function_type,
            link_function_type=self._link_function_type,
            iteration_limit=self.iteration_limit,
            initial_learning_rate=self.learning_rate,
            min_coefficients_update=self.min_coefficients_update,
            lambda_=self.lambda_,
            batch_size=n_observations if self.batch_size is None else self.batch_size,
            learning_rate_type=self.learning_rate_type,
            decay=self.decay,
            initial_coefficients_type=self.initial_coefficients_type,
            random_seed=self.random_seed,
            is_fitting_data_normalized=self.is_fitting_data_normalized,
        )

    def _fit_coefficients(
        self,
        X: np.ndarray,
        labels: np.ndarray,
        initial_coefficients: Optional[np.ndarray],
    ) -> None:
        preprocessor = InterceptPreprocessor(self._effective_intercept_scale)
        points = preprocessor.fit_transform(X)
        optimizer = create_optimizer(self._config(points.shape[0]), points, labels)
        self.coefficients_ = optimizer.find_extrema(
            initial_coefficients,
            is_minimizing_objective=self._is_minimizing_objective,
            collect_learning_data=self.collect_learning_data,
        )
        self.cost_per_iteration_: List[float] = optimizer.cost_per_iteration
        self.intercept_preprocessor_ = preprocessor
        self.n_features_in_ = preprocessor.n_features_in_
        logger.debug(
            "%s fitted on %d observations, %d features",
            type(self).__name__,
            points.shape[0],
            self.n_features_in_,
        )

    def _decision_function(self, X: np.ndarray) -> np.ndarray:
        check_is_fitted(self, ("coefficients_", "intercept_preprocessor_"))
        return self.intercept_preprocessor_.transform(X) @ self.coefficients_

    def predict(self, X: np.ndarray) -> np.ndarray:
        return self._decision_function(X)

    def score(self, X: np.ndarray, y: np.ndarray, metric: MetricType | str | None = None) -> float:
        """Score predictions for ``X`` against ``y``."""
        return get_score(metric or self._default_metric, self.predict(X), y)


__all__ = ["LinearModel"]
