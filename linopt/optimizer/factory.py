"""Factory for creating linear optimizers from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_DECAY,
    DEFAULT_ITERATION_LIMIT,
    DEFAULT_LEARNING_RATE,
    DEFAULT_MIN_COEFFICIENTS_UPDATE,
    CostFunctionType,
    InitialCoefficientsType,
    LearningRateType,
    LinearOptimizerType,
    LinkFunctionType,
    as_enum,
)
from ..cost import CostFunction, LogLikelihoodCost, SquaredCost
from ..link import create_link_function
from ..math import Randomizer
from .base import LinearOptimizer
from .convergence import ConvergenceDetector
from .coordinate import CoordinateOptimizer
from .gradient import GradientOptimizer
from .initial_coefficients import create_initial_coefficients_generator
from .learning_rate import create_learning_rate_generator


@dataclass(frozen=True)
class LinearOptimizerConfig:
    """
    Configuration for creating a linear optimizer.

    Fields that do not apply to the chosen optimizer are ignored (the
    coordinate optimizer has no learning rate or batch size).

    Args:
        optimizer_type: "gradient" or "coordinate".
        cost_function_type: "squared" or "log_likelihood".
        link_function_type: Link used by the log-likelihood cost.
        iteration_limit: Maximum number of iterations. Must be >= 1.
        initial_learning_rate: Starting learning rate. Must be positive.
        min_coefficients_update: Update norm below which the optimizer stops.
            ``None`` disables the check.
        lambda_: Regularization strength, L2 shrinkage for the gradient
            optimizer and L1 for the coordinate optimizer.
        batch_size: Rows per gradient step. ``1`` is stochastic, the number
            of observations is full-batch.
        learning_rate_type: Learning-rate schedule.
        decay: Decay rate of the time-based and exponential schedules.
        initial_coefficients_type: "zeroes" or "random".
        random_seed: Seed for batch sampling and random initial coefficients.
        is_fitting_data_normalized: Whether the design matrix columns have
            unit norm, letting coordinate descent skip the normalization.
    """

    optimizer_type: LinearOptimizerType | str = LinearOptimizerType.GRADIENT
    cost_function_type: CostFunctionType | str = CostFunctionType.SQUARED
    link_function_type: LinkFunctionType | str = LinkFunctionType.LOGIT
    iteration_limit: int = DEFAULT_ITERATION_LIMIT
    initial_learning_rate: float = DEFAULT_LEARNING_RATE
    min_coefficients_update: Optional[float] = DEFAULT_MIN_COEFFICIENTS_UPDATE
    lambda_: float = 0.0
    batch_size: int = DEFAULT_BATCH_SIZE
    learning_rate_type: LearningRateType | str = LearningRateType.CONSTANT
    decay: float = DEFAULT_DECAY
    initial_coefficients_type: InitialCoefficientsType | str = InitialCoefficientsType.ZEROES
    random_seed: Optional[int] = None
    is_fitting_data_normalized: bool = False


def create_cost_function(
    cost_function_type: CostFunctionType | str,
    link_function_type: LinkFunctionType | str = LinkFunctionType.LOGIT,
) -> CostFunction:
    cost_function_type = as_enum(CostFunctionType, cost_function_type)
    if cost_function_type is CostFunctionType.SQUARED:
        return SquaredCost()
    return LogLikelihoodCost(create_link_function(link_function_type))


def create_optimizer(
    config: LinearOptimizerConfig, points: np.ndarray, labels: np.ndarray
) -> LinearOptimizer:
    """
    Create a linear optimizer bound to ``points`` and ``labels``.

    Args:
        config: Optimizer configuration.
        points: Design matrix, shape (n_observations, n_features).
        labels: Label matrix, shape (n_observations, n_outputs).

    Returns:
        A :class:`GradientOptimizer` or :class:`CoordinateOptimizer`.

    Raises:
        ValueError: If an enum name is unknown, coordinate descent is combined
            with the log-likelihood cost, or any hyperparameter is out of
            range.
    """
    optimizer_type = as_enum(LinearOptimizerType, config.optimizer_type)
    cost_function_type = as_enum(CostFunctionType, config.cost_function_type)

    cost_function = create_cost_function(cost_function_type, config.link_function_type)
    convergence_detector = ConvergenceDetector(
        config.min_coefficients_update, config.iteration_limit
    )
    initial_coefficients_generator = create_initial_coefficients_generator(
        config.initial_coefficients_type, seed=config.random_seed
    )

    if optimizer_type is LinearOptimizerType.COORDINATE:
        if cost_function_type is not CostFunctionType.SQUARED:
            raise ValueError("Coordinate descent supports only the squared cost function.")
        return CoordinateOptimizer(
            points,
            labels,
            cost_function=cost_function,
            initial_coefficients_generator=initial_coefficients_generator,
            convergence_detector=convergence_detector,
            lambda_=config.lambda_,
            is_fitting_data_normalized=config.is_fitting_data_normalized,
        )

    return GradientOptimizer(
        points,
        labels,
        cost_function=cost_function,
        learning_rate_generator=create_learning_rate_generator(
            config.learning_rate_type, decay=config.decay
        ),
        initial_coefficients_generator=initial_coefficients_generator,
        convergence_detector=convergence_detector,
        randomizer=Randomizer(config.random_seed),
        initial_learning_rate=config.initial_learning_rate,
        batch_size=config.batch_size,
        lambda_=config.lambda_,
    )


__all__ = ["LinearOptimizerConfig", "create_cost_function", "create_optimizer"]
