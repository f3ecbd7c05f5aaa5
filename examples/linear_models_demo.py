"""
Example: Linear Models in linopt

This example fits the four linear models on small synthetic datasets:
ordinary least squares with gradient descent, Lasso with coordinate
descent, and logistic and softmax regression with gradient ascent on the
log-likelihood.
"""

import numpy as np

from linopt import (
    LassoRegressor,
    LinearRegressor,
    LogisticRegressor,
    SoftmaxRegressor,
)


def example_linear_regression(rng):
    """Example: Recover a noisy linear trend with mini-batch gradient descent."""
    print("=" * 60)
    print("Example 1: Linear Regression - Mini-Batch Gradient Descent")
    print("=" * 60)

    X = rng.normal(size=(500, 3))
    y = 0.5 + X @ np.array([1.5, -2.0, 0.7]) + 0.05 * rng.normal(size=500)

    model = LinearRegressor(
        iteration_limit=2000,
        learning_rate=0.05,
        batch_size=50,
        fit_intercept=True,
        learning_rate_type="time_based",
        decay=1e-3,
        random_seed=0,
    ).fit(X, y)
    print(f"Coefficients (intercept first): {np.round(model.coefficients_.ravel(), 3)}")
    print(f"RMSE: {model.score(X, y, metric='rmse'):.4f}")
    print()


def example_lasso(rng):
    """Example: Sparse coefficients with coordinate descent."""
    print("=" * 60)
    print("Example 2: Lasso - Coordinate Descent")
    print("=" * 60)

    X = rng.normal(size=(200, 8))
    y = 4.0 * X[:, 0] - 3.0 * X[:, 3] + 0.1 * rng.normal(size=200)

    model = LassoRegressor(lambda_=50.0, iteration_limit=200).fit(X, y)
    coefficients = model.coefficients_.ravel()
    print(f"Coefficients: {np.round(coefficients, 3)}")
    print(f"Exact zeros: {int(np.sum(coefficients == 0.0))} of {len(coefficients)}")
    print()


def example_logistic_regression(rng):
    """Example: Binary classification with custom labels."""
    print("=" * 60)
    print("Example 3: Logistic Regression")
    print("=" * 60)

    X = rng.normal(size=(300, 2))
    y = np.where(X[:, 0] - 0.5 * X[:, 1] > 0.2, "spam", "ham")
    labels = np.where(y == "spam", 1.0, -1.0)

    model = LogisticRegressor(
        positive_label=1.0,
        negative_label=-1.0,
        iteration_limit=500,
        learning_rate=0.5,
        batch_size=None,
        fit_intercept=True,
        collect_learning_data=True,
    ).fit(X, labels)
    print(f"Coefficients: {np.round(model.coefficients_.ravel(), 3)}")
    print(f"Final log-likelihood: {model.cost_per_iteration_[-1]:.4f}")
    print(f"Accuracy: {model.score(X, labels):.3f}")
    print()


def example_softmax_regression(rng):
    """Example: Three-class classification with one-hot targets."""
    print("=" * 60)
    print("Example 4: Softmax Regression")
    print("=" * 60)

    centers = np.array([[3.0, 0.0], [0.0, 3.0], [-3.0, -3.0]])
    classes = rng.integers(0, 3, size=300)
    X = centers[classes] + rng.normal(size=(300, 2))
    y = np.eye(3)[classes]

    model = SoftmaxRegressor(
        iteration_limit=300, learning_rate=0.05, batch_size=None, fit_intercept=True
    ).fit(X, y)
    print(f"Accuracy: {model.score(X, y):.3f}")
    print(f"First probabilities: {np.round(model.predict_proba(X[:3]), 3)}")
    print()


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    example_linear_regression(rng)
    example_lasso(rng)
    example_logistic_regression(rng)
    example_softmax_regression(rng)
