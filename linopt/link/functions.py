"""Link functions mapping linear combinations to probabilities.

Both functions are computed in a numerically stable way: the logistic
function branches on the sign of its argument and softmax subtracts the row
maximum before exponentiating.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..core import LinkFunctionType, as_enum


class LinkFunction(ABC):
    """Maps a ``(n_observations, n_outputs)`` matrix of scores to probabilities."""

    @abstractmethod
    def link(self, scores: np.ndarray) -> np.ndarray:
        """Return probabilities with the same shape as ``scores``."""


class LogitLinkFunction(LinkFunction):
    """Element-wise logistic (inverse logit) function."""

    def link(self, scores: np.ndarray) -> np.ndarray:
        scores = np.asarray(scores, dtype=float)
        out = np.empty_like(scores)
        positive = scores >= 0
        out[positive] = 1.0 / (1.0 + np.exp(-scores[positive]))
        exp_scores = np.exp(scores[~positive])
        out[~positive] = exp_scores / (1.0 + exp_scores)
        return out


class SoftmaxLinkFunction(LinkFunction):
    """Row-wise softmax; every output row sums to one."""

    def link(self, scores: np.ndarray) -> np.ndarray:
        scores = np.asarray(scores, dtype=float)
        if scores.ndim != 2:
            raise ValueError(f"Expected 2D scores, got shape {scores.shape}.")
        shifted = scores - np.max(scores, axis=1, keepdims=True)
        exp_scores = np.exp(shifted)
        return exp_scores / np.sum(exp_scores, axis=1, keepdims=True)


def create_link_function(link_type: LinkFunctionType | str) -> LinkFunction:
    """Build the link function for ``link_type``."""
    link_type = as_enum(LinkFunctionType, link_type)
    if link_type is LinkFunctionType.LOGIT:
        return LogitLinkFunction()
    return SoftmaxLinkFunction()


__all__ = [
    "LinkFunction",
    "LogitLinkFunction",
    "SoftmaxLinkFunction",
    "create_link_function",
]
