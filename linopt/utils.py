"""Input validation helpers shared by optimizers and models."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np


def _to_2d(X: np.ndarray, name: str) -> np.ndarray:
    """Ensure array is strictly 2D."""
    if X.ndim != 2:
        raise ValueError(f"Expected {name} to be a 2D array, got shape {X.shape}.")
    return X


def check_array(X: Any, *, name: str = "array", ensure_2d: bool = True) -> np.ndarray:
    """Convert ``X`` to a finite float64 array."""
    try:
        array = np.asarray(X, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} cannot be converted to float64.") from exc
    if ensure_2d:
        array = _to_2d(array, name)
    if not np.all(np.isfinite(array)):
        raise ValueError(f"{name} contains NaN or infinite values.")
    return array


def as_column(y: Any, *, name: str = "labels") -> np.ndarray:
    """Return ``y`` as a 2D array, turning 1D input into a single column."""
    y = np.asarray(y)
    if y.ndim == 1:
        y = y.reshape(-1, 1)
    return check_array(y, name=name)


def check_points_and_labels(points: Any, labels: Any) -> tuple[np.ndarray, np.ndarray]:
    """Validate a design matrix together with its label matrix."""
    points = check_array(points, name="points")
    labels = check_array(labels, name="labels")
    if points.shape[0] == 0:
        raise ValueError("points must contain at least one observation.")
    if points.shape[0] != labels.shape[0]:
        raise ValueError(
            f"points and labels must have the same number of rows, "
            f"got {points.shape[0]} and {labels.shape[0]}."
        )
    return points, labels


def check_coefficients(
    coefficients: Any, n_features: int, n_outputs: int
) -> np.ndarray:
    """Validate a coefficient matrix against the design and label matrices."""
    coefficients = check_array(coefficients, name="initial_coefficients")
    expected = (n_features, n_outputs)
    if coefficients.shape != expected:
        raise ValueError(
            f"initial_coefficients must have shape {expected}, got {coefficients.shape}."
        )
    return coefficients.copy()


def ensure_same_shape(X: np.ndarray, expected_features: int) -> None:
    """Validate input feature dimensionality."""
    if X.shape[1] != expected_features:
        raise ValueError(f"Expected {expected_features} features, got {X.shape[1]}.")


def rng_default(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy RNG, deterministic when ``seed`` is given."""
    return np.random.default_rng(seed)


__all__ = [
    "as_column",
    "check_array",
    "check_coefficients",
    "check_points_and_labels",
    "ensure_same_shape",
    "rng_default",
]
