"""Starting coefficients used when the caller supplies none."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from ..core import InitialCoefficientsType, as_enum
from ..utils import rng_default


class InitialCoefficientsGenerator(ABC):
    @abstractmethod
    def generate(self, n_features: int, n_outputs: int) -> np.ndarray:
        """Return a ``(n_features, n_outputs)`` coefficient matrix."""


class ZeroCoefficientsGenerator(InitialCoefficientsGenerator):
    def generate(self, n_features: int, n_outputs: int) -> np.ndarray:
        return np.zeros((n_features, n_outputs), dtype=np.float64)


class RandomCoefficientsGenerator(InitialCoefficientsGenerator):
    """Uniform coefficients in ``[-1, 1)``, reproducible for a fixed ``seed``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = rng_default(seed)

    def generate(self, n_features: int, n_outputs: int) -> np.ndarray:
        return self._rng.uniform(-1.0, 1.0, size=(n_features, n_outputs))


def create_initial_coefficients_generator(
    initial_coefficients_type: InitialCoefficientsType | str,
    seed: Optional[int] = None,
) -> InitialCoefficientsGenerator:
    initial_coefficients_type = as_enum(InitialCoefficientsType, initial_coefficients_type)
    if initial_coefficients_type is InitialCoefficientsType.ZEROES:
        return ZeroCoefficientsGenerator()
    return RandomCoefficientsGenerator(seed=seed)


__all__ = [
    "InitialCoefficientsGenerator",
    "RandomCoefficientsGenerator",
    "ZeroCoefficientsGenerator",
    "create_initial_coefficients_generator",
]
