"""Base class for column transforms and the fitted-state guard."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from ..utils import check_array, ensure_same_shape


def check_is_fitted(instance: Any, attributes: tuple[str, ...]) -> None:
    """Raise ``AttributeError`` unless ``instance`` has every fitted attribute."""
    missing = [attr for attr in attributes if not hasattr(instance, attr)]
    if missing:
        raise AttributeError(
            f"This {type(instance).__name__} is not fitted yet; call fit() first "
            f"(missing {', '.join(missing)})."
        )


class Transformer(ABC):
    """Column transform fitted on a design matrix and reapplied to new rows.

    ``fit`` validates the matrix and records ``n_features_in_``. ``transform``
    rejects calls made before ``fit`` and matrices with another column count,
    so training and prediction inputs always go through the same mapping.
    """

    def fit(self, X: Any, y: Optional[Any] = None) -> "Transformer":
        X = check_array(X, name="X")
        self.n_features_in_ = X.shape[1]
        self._fit(X)
        return self

    def _fit(self, X: np.ndarray) -> None:
        """Learn whatever the transform needs from ``X``; nothing by default."""

    def transform(self, X: Any) -> np.ndarray:
        check_is_fitted(self, ("n_features_in_",))
        X = check_array(X, name="X")
        ensure_same_shape(X, self.n_features_in_)
        return self._transform(X)

    @abstractmethod
    def _transform(self, X: np.ndarray) -> np.ndarray:
        """Map a validated matrix with ``n_features_in_`` columns."""

    def fit_transform(self, X: Any, y: Optional[Any] = None) -> np.ndarray:
        return self.fit(X, y).transform(X)


__all__ = ["Transformer", "check_is_fitted"]
