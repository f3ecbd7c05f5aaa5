"""Linear optimizers and the strategies they are assembled from.

Example
-------
>>> import numpy as np
>>> from linopt.optimizer import LinearOptimizerConfig, create_optimizer
>>> X = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
>>> y = X @ np.array([[2.0], [-1.0]])
>>> config = LinearOptimizerConfig(
...     iteration_limit=500, initial_learning_rate=0.1, batch_size=3
... )
>>> coefficients = create_optimizer(config, X, y).find_extrema()
>>> np.round(coefficients.ravel(), 3)
array([ 2., -1.])
"""

from .base import LinearOptimizer, OptimizationContext
from .convergence import ConvergenceDetector
from .coordinate import CoordinateOptimizer, soft_threshold
from .factory import LinearOptimizerConfig, create_cost_function, create_optimizer
from .gradient import GradientOptimizer
from .initial_coefficients import (
    InitialCoefficientsGenerator,
    RandomCoefficientsGenerator,
    ZeroCoefficientsGenerator,
    create_initial_coefficients_generator,
)
from .learning_rate import (
    ConstantLearningRate,
    DecreasingAdaptiveLearningRate,
    ExponentialLearningRate,
    LearningRateGenerator,
    TimeBasedLearningRate,
    create_learning_rate_generator,
    learning_rate_scope,
)

__all__ = [
    "ConstantLearningRate",
    "ConvergenceDetector",
    "CoordinateOptimizer",
    "DecreasingAdaptiveLearningRate",
    "ExponentialLearningRate",
    "GradientOptimizer",
    "InitialCoefficientsGenerator",
    "LearningRateGenerator",
    "LinearOptimizer",
    "LinearOptimizerConfig",
    "OptimizationContext",
    "RandomCoefficientsGenerator",
    "TimeBasedLearningRate",
    "ZeroCoefficientsGenerator",
    "create_cost_function",
    "create_initial_coefficients_generator",
    "create_learning_rate_generator",
    "create_optimizer",
    "learning_rate_scope",
    "soft_threshold",
]
