import numpy as np
import pytest

from linopt.core import LinkFunctionType
from linopt.link import LogitLinkFunction, SoftmaxLinkFunction, create_link_function


def test_logit_values():
    probabilities = LogitLinkFunction().link(np.array([[0.0], [np.log(3.0)], [-np.log(3.0)]]))
    np.testing.assert_allclose(probabilities, [[0.5], [0.75], [0.25]])


def test_logit_is_stable_for_extreme_scores():
    with np.errstate(over="raise"):
        probabilities = LogitLinkFunction().link(np.array([[-1000.0], [1000.0]]))
    np.testing.assert_allclose(probabilities, [[0.0], [1.0]])


def test_softmax_rows_sum_to_one(rng):
    probabilities = SoftmaxLinkFunction().link(rng.normal(size=(5, 4)))
    np.testing.assert_allclose(probabilities.sum(axis=1), np.ones(5))
    assert np.all(probabilities > 0)


def test_softmax_is_shift_invariant_and_stable():
    scores = np.array([[1.0, 2.0, 3.0]])
    link = SoftmaxLinkFunction()
    np.testing.assert_allclose(link.link(scores), link.link(scores + 1000.0))


def test_softmax_requires_2d_scores():
    with pytest.raises(ValueError, match="2D"):
        SoftmaxLinkFunction().link(np.array([1.0, 2.0]))


def test_factory():
    assert isinstance(create_link_function(LinkFunctionType.LOGIT), LogitLinkFunction)
    assert isinstance(create_link_function("softmax"), SoftmaxLinkFunction)
    with pytest.raises(ValueError):
        create_link_function("probit")
