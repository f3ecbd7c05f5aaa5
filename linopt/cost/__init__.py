"""Cost functions optimized by the linear optimizers."""

from .base import CostFunction
from .log_likelihood import LogLikelihoodCost
from .squared import SquaredCost

__all__ = ["CostFunction", "LogLikelihoodCost", "SquaredCost"]
