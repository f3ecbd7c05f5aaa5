import numpy as np
import pytest

from linopt.preprocessing import InterceptPreprocessor, add_intercept, check_is_fitted
from linopt.utils import check_array, check_coefficients, check_points_and_labels


def test_add_intercept_prepends_scaled_column():
    X = np.array([[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_array_equal(
        add_intercept(X, 0.5), np.array([[0.5, 1.0, 2.0], [0.5, 3.0, 4.0]])
    )


def test_zero_scale_leaves_points_unchanged():
    X = np.array([[1.0, 2.0]])
    np.testing.assert_array_equal(add_intercept(X, 0.0), X)


def test_intercept_preprocessor_fit_transform():
    Xt = InterceptPreprocessor().fit_transform(np.array([[7.0], [8.0]]))
    np.testing.assert_array_equal(Xt, np.array([[1.0, 7.0], [1.0, 8.0]]))


def test_check_is_fitted_reports_missing_attributes():
    class Estimator:
        pass

    with pytest.raises(AttributeError, match="not fitted"):
        check_is_fitted(Estimator(), ("coefficients_",))


def test_check_array_rejects_invalid_inputs():
    with pytest.raises(ValueError):
        check_array([[np.nan]])
    with pytest.raises(ValueError):
        check_array([1.0, 2.0])
    with pytest.raises(ValueError):
        check_array([["a"]])


def test_check_points_and_labels():
    with pytest.raises(ValueError, match="at least one observation"):
        check_points_and_labels(np.empty((0, 2)), np.empty((0, 1)))
    with pytest.raises(ValueError, match="2D"):
        check_points_and_labels(np.ones((2, 2)), np.ones(2))


def test_check_coefficients_copies():
    coefficients = np.ones((2, 1))
    checked = check_coefficients(coefficients, 2, 1)
    checked[0, 0] = 5.0
    assert coefficients[0, 0] == 1.0


def test_intercept_preprocessor_records_feature_count():
    preprocessor = InterceptPreprocessor(scale=0.0).fit(np.ones((3, 4)))
    assert preprocessor.n_features_in_ == 4
    np.testing.assert_array_equal(preprocessor.transform(np.zeros((1, 4))), np.zeros((1, 4)))


def test_transform_before_fit_raises():
    with pytest.raises(AttributeError, match="not fitted"):
        InterceptPreprocessor().transform(np.ones((2, 2)))


def test_transform_with_other_column_count_raises():
    preprocessor = InterceptPreprocessor().fit(np.ones((2, 2)))
    with pytest.raises(ValueError, match="Expected 2 features, got 3"):
        preprocessor.transform(np.ones((2, 3)))
