"""Tests for coordinate descent (Lasso)."""

from __future__ import annotations

import sys
from unittest.mock import Mock

import numpy as np
import pytest

from linopt.cost import SquaredCost
from linopt.optimizer import (
    ConvergenceDetector,
    CoordinateOptimizer,
    ZeroCoefficientsGenerator,
    soft_threshold,
)


def _lasso(X, y, lambda_=0.0, iteration_limit=500, min_update=1e-12, **kwargs):
    return CoordinateOptimizer(
        X,
        y,
        cost_function=SquaredCost(),
        initial_coefficients_generator=ZeroCoefficientsGenerator(),
        convergence_detector=ConvergenceDetector(min_update, iteration_limit),
        lambda_=lambda_,
        **kwargs,
    )


def test_soft_threshold():
    values = np.array([-3.0, -0.5, 0.0, 0.5, 3.0])
    np.testing.assert_allclose(soft_threshold(values, 1.0), [-2.0, 0.0, 0.0, 0.0, 2.0])


def test_without_regularization_matches_least_squares(rng):
    X = rng.normal(size=(50, 3))
    y = X @ np.array([[1.0], [-2.0], [0.5]]) + 0.01 * rng.normal(size=(50, 1))

    result = _lasso(X, y).find_extrema()

    expected, *_ = np.linalg.lstsq(X, y, rcond=None)
    np.testing.assert_allclose(result, expected, atol=1e-6)


def test_irrelevant_features_are_exactly_zero(rng):
    X = rng.normal(size=(50, 3))
    y = 3.0 * X[:, [0]]

    result = _lasso(X, y, lambda_=1.0).find_extrema()

    assert result[1, 0] == 0.0
    assert result[2, 0] == 0.0
    expected_first = 3.0 - 0.5 / np.sum(X[:, 0] ** 2)
    assert result[0, 0] == pytest.approx(expected_first)


def test_large_lambda_zeroes_all_coefficients(rng):
    X = rng.normal(size=(20, 4))
    y = X @ np.ones((4, 1))
    lambda_ = 2.0 * np.max(np.abs(X.T @ y)) + 1.0

    result = _lasso(X, y, lambda_=lambda_).find_extrema()

    np.testing.assert_array_equal(result, np.zeros((4, 1)))


def test_zero_column_gets_zero_coefficient(rng):
    X = np.hstack([rng.normal(size=(10, 1)), np.zeros((10, 1))])
    y = 2.0 * X[:, [0]]

    result = _lasso(X, y).find_extrema(initial_coefficients=np.array([[0.0], [5.0]]))

    assert result[1, 0] == 0.0
    assert result[0, 0] == pytest.approx(2.0)


def test_multiple_outputs_are_fitted_independently(rng):
    X = rng.normal(size=(40, 2))
    true_coefficients = np.array([[1.0, -1.0], [2.0, 0.5]])
    y = X @ true_coefficients

    result = _lasso(X, y).find_extrema()

    np.testing.assert_allclose(result, true_coefficients, atol=1e-8)


def test_normalized_data_matches_unnormalized_run(rng):
    X = rng.normal(size=(30, 2))
    X /= np.linalg.norm(X, axis=0)
    y = X @ np.array([[4.0], [-1.0]])

    normalized = _lasso(X, y, lambda_=0.1, is_fitting_data_normalized=True).find_extrema()
    plain = _lasso(X, y, lambda_=0.1).find_extrema()

    np.testing.assert_allclose(normalized, plain, atol=1e-10)


def test_maximizing_is_rejected(rng):
    X = rng.normal(size=(5, 2))
    y = rng.normal(size=(5, 1))
    with pytest.raises(ValueError, match="only supports minimization"):
        _lasso(X, y).find_extrema(is_minimizing_objective=False)


def test_negative_lambda_is_rejected(rng):
    with pytest.raises(ValueError, match="lambda_"):
        _lasso(rng.normal(size=(5, 2)), rng.normal(size=(5, 1)), lambda_=-0.1)


def test_convergence_is_checked_once_per_sweep(rng):
    X = rng.normal(size=(10, 3))
    y = rng.normal(size=(10, 1))
    detector = Mock(spec=ConvergenceDetector)
    detector.is_converged.side_effect = lambda update_norm, iteration: iteration >= 4

    optimizer = CoordinateOptimizer(
        X,
        y,
        cost_function=SquaredCost(),
        initial_coefficients_generator=ZeroCoefficientsGenerator(),
        convergence_detector=detector,
        lambda_=0.5,
    )
    optimizer.find_extrema(collect_learning_data=True)

    calls = detector.is_converged.call_args_list
    assert [call.args[1] for call in calls] == [0, 1, 2, 3, 4]
    assert calls[0].args[0] == sys.float_info.max
    assert len(optimizer.cost_per_iteration) == 4


def test_cost_trace_is_non_increasing(rng):
    X = rng.normal(size=(30, 3))
    y = X @ np.array([[1.0], [2.0], [3.0]]) + rng.normal(size=(30, 1))

    optimizer = _lasso(X, y, iteration_limit=20)
    optimizer.find_extrema(collect_learning_data=True)

    costs = np.array(optimizer.cost_per_iteration)
    assert len(costs) >= 1
    assert np.all(np.diff(costs) <= 1e-12)

    optimizer.find_extrema()
    assert optimizer.cost_per_iteration == []
