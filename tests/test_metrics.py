import numpy as np
import pytest

from linopt.metrics import MetricType, accuracy, get_score, mape, rmse


def test_mape():
    predicted = np.array([[11.0], [18.0]])
    original = np.array([[10.0], [20.0]])
    assert mape(predicted, original) == pytest.approx(10.0)


def test_rmse_accepts_1d_inputs():
    assert rmse([1.0, 2.0, 3.0], [1.0, 2.0, 5.0]) == pytest.approx(np.sqrt(4 / 3))


def test_accuracy_for_labels_and_one_hot_rows():
    assert accuracy([[1.0], [0.0], [1.0], [1.0]], [[1.0], [1.0], [1.0], [0.0]]) == 0.5
    predicted = np.array([[1.0, 0.0], [0.0, 1.0]])
    original = np.array([[1.0, 0.0], [1.0, 0.0]])
    assert accuracy(predicted, original) == 0.5


def test_get_score_dispatches_by_name():
    assert get_score("RMSE", [[2.0]], [[0.0]]) == 2.0
    assert get_score(MetricType.ACCURACY, [[1.0]], [[1.0]]) == 1.0


def test_regression_metrics_require_single_column():
    with pytest.raises(ValueError, match="single column"):
        mape(np.ones((2, 2)), np.ones((2, 2)))


def test_shape_mismatch_raises():
    with pytest.raises(ValueError, match="same shape"):
        rmse(np.ones((3, 1)), np.ones((2, 1)))


def test_unknown_metric_raises():
    with pytest.raises(ValueError, match="Unsupported MetricType"):
        get_score("r2", [[1.0]], [[1.0]])
