"""Linear regression facades."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..core import LinearOptimizerType
from ..utils import as_column
from .base import LinearModel


class LinearRegressor(LinearModel):
    """Least-squares linear regression.

    Uses gradient descent by default (L2 regularization through ``lambda_``);
    ``optimizer_type="coordinate"`` switches to coordinate descent with L1
    regularization.

    Examples
    --------
    >>> import numpy as np
    >>> from linopt.models import LinearRegressor
    >>> X = np.array([[1.0], [2.0], [3.0]])
    >>> model = LinearRegressor(
    ...     iteration_limit=1000, learning_rate=0.05, batch_size=None, fit_intercept=True
    ... ).fit(X, 2 * X[:, 0] + 1)
    >>> np.round(model.coefficients_.ravel(), 2)
    array([1., 2.])
    """

    def fit(
        self, X: np.ndarray, y: Any, initial_coefficients: Optional[np.ndarray] = None
    ) -> "LinearRegressor":
        """Fit coefficients; 1D ``y`` is treated as a single target column."""
        self._fit_coefficients(X, as_column(y, name="y"), initial_coefficients)
        return self


class LassoRegressor(LinearRegressor):
    """L1-regularized linear regression solved by coordinate descent."""

    def __init__(self, lambda_: float = 1.0, **kwargs: Any):
        kwargs.setdefault("batch_size", None)
        super().__init__(
            optimizer_type=LinearOptimizerType.COORDINATE, lambda_=lambda_, **kwargs
        )


__all__ = ["LassoRegressor", "LinearRegressor"]
