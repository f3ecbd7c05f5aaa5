"""Data preprocessing transforms."""

from .base import Transformer, check_is_fitted
from .intercept import InterceptPreprocessor, add_intercept

__all__ = ["InterceptPreprocessor", "Transformer", "add_intercept", "check_is_fitted"]
