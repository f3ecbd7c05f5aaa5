"""Pytest configuration and shared fixtures for linopt tests.

This module provides:
- A deterministic numpy RNG fixture
- Global numpy / torch seeding for reproducible tests
- The small design matrix used by the optimizer loop tests
"""

import os

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy and torch globally before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def points() -> np.ndarray:
    return np.array(
        [
            [5.0, 10.0, 15.0],
            [1.0, 2.0, 3.0],
            [10.0, 20.0, 30.0],
            [100.0, 200.0, 300.0],
        ]
    )


@pytest.fixture
def labels() -> np.ndarray:
    return np.array([[10.0], [20.0], [30.0], [40.0]])
