"""linopt - linear model training on dense numpy matrices."""

__version__ = "0.1.0"

from .core import (
    CostFunctionType,
    InitialCoefficientsType,
    LearningRateType,
    LinearOptimizerType,
    LinkFunctionType,
)
from .cost import CostFunction, LogLikelihoodCost, SquaredCost
from .link import LinkFunction, LogitLinkFunction, SoftmaxLinkFunction, create_link_function
from .logging import configure_logging, get_logger, set_log_level
from .math import Randomizer
from .metrics import MetricType, accuracy, get_score, mape, rmse
from .models import (
    LassoRegressor,
    LinearRegressor,
    LogisticRegressor,
    SoftmaxRegressor,
)
from .optimizer import (
    ConvergenceDetector,
    CoordinateOptimizer,
    GradientOptimizer,
    LinearOptimizer,
    LinearOptimizerConfig,
    create_optimizer,
)
from .preprocessing import InterceptPreprocessor, add_intercept

__all__ = [
    "ConvergenceDetector",
    "CoordinateOptimizer",
    "CostFunction",
    "CostFunctionType",
    "GradientOptimizer",
    "InitialCoefficientsType",
    "InterceptPreprocessor",
    "LassoRegressor",
    "LearningRateType",
    "LinearOptimizer",
    "LinearOptimizerConfig",
    "LinearOptimizerType",
    "LinearRegressor",
    "LinkFunction",
    "LinkFunctionType",
    "LogLikelihoodCost",
    "LogisticRegressor",
    "LogitLinkFunction",
    "MetricType",
    "Randomizer",
    "SoftmaxLinkFunction",
    "SoftmaxRegressor",
    "SquaredCost",
    "accuracy",
    "add_intercept",
    "configure_logging",
    "create_link_function",
    "create_optimizer",
    "get_logger",
    "get_score",
    "mape",
    "rmse",
    "set_log_level",
]
