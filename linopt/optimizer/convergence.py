"""Stopping rule shared by the gradient and coordinate optimizers."""

from __future__ import annotations

from typing import Optional


class ConvergenceDetector:
    """Decides whether an optimizer should stop.

    ``is_converged`` is consulted before every iteration with the norm of the
    last coefficient update and the number of iterations completed so far. The
    first consultation happens before any update and receives the largest
    finite float as the update norm, so it can only stop on the iteration
    limit.

    Args:
        min_update: Update norm below which the coefficients are considered
            converged. ``None`` disables the check.
        iteration_limit: Hard cap on the number of iterations.
    """

    def __init__(self, min_update: Optional[float], iteration_limit: int):
        if iteration_limit < 1:
            raise ValueError(f"iteration_limit must be >= 1, got {iteration_limit}.")
        if min_update is not None and min_update < 0:
            raise ValueError(f"min_update must be non-negative, got {min_update}.")
        self.min_update = min_update
        self.iteration_limit = iteration_limit

    def is_converged(self, update_norm: float, iteration: int) -> bool:
        if iteration >= self.iteration_limit:
            return True
        return self.min_update is not None and update_norm < self.min_update


__all__ = ["ConvergenceDetector"]
