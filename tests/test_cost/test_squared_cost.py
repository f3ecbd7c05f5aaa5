"""Tests for the squared cost, cross-checked against torch autograd."""

import numpy as np
import pytest
import torch

from linopt.cost import SquaredCost


def test_cost_is_mean_squared_residual():
    X = np.array([[1.0, 2.0], [3.0, 4.0]])
    w = np.array([[1.0], [0.0]])
    y = np.array([[0.0], [5.0]])
    # residuals: 1, -2
    assert SquaredCost().get_cost(X, w, y) == 2.5


def test_gradient_formula():
    X = np.array([[1.0, 2.0], [3.0, 4.0]])
    w = np.array([[1.0], [0.0]])
    y = np.array([[0.0], [5.0]])
    expected = X.T @ (X @ w - y)
    np.testing.assert_allclose(SquaredCost().get_gradient(X, w, y), expected)


def test_gradient_matches_autograd(rng):
    X = rng.normal(size=(8, 3))
    w = rng.normal(size=(3, 2))
    y = rng.normal(size=(8, 2))

    w_t = torch.tensor(w, requires_grad=True)
    cost = torch.sum((torch.tensor(X) @ w_t - torch.tensor(y)) ** 2) / X.shape[0]
    cost.backward()

    assert SquaredCost().get_cost(X, w, y) == pytest.approx(cost.item())
    np.testing.assert_allclose(SquaredCost().get_gradient(X, w, y), w_t.grad.numpy(), rtol=1e-10)


def test_gradient_vanishes_at_exact_fit(rng):
    X = rng.normal(size=(6, 2))
    w = np.array([[0.5], [-1.5]])
    gradient = SquaredCost().get_gradient(X, w, X @ w)
    np.testing.assert_allclose(gradient, np.zeros((2, 1)), atol=1e-12)
