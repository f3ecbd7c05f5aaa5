"""Intercept column handling."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..utils import check_array
from .base import Transformer


def add_intercept(points: np.ndarray, scale: float = 1.0) -> np.ndarray:
    """Prepend a column filled with ``scale``; ``scale == 0`` is a no-op."""
    points = check_array(points, name="points")
    if scale == 0:
        return points
    intercept = np.full((points.shape[0], 1), float(scale))
    return np.hstack([intercept, points])


@dataclass
class InterceptPreprocessor(Transformer):
    """Add a constant intercept feature as the first column.

    The learned coefficient of that column, multiplied by ``scale``, is the
    model's bias term. With ``scale == 0`` no column is added.

    Examples
    --------
    >>> from linopt.preprocessing import InterceptPreprocessor
    >>> import numpy as np
    >>> InterceptPreprocessor(scale=2.0).fit_transform(np.array([[3.0], [4.0]]))
    array([[2., 3.],
           [2., 4.]])
    """

    scale: float = 1.0

    def _transform(self, X: np.ndarray) -> np.ndarray:
        return add_intercept(X, self.scale)


__all__ = ["InterceptPreprocessor", "add_intercept"]
