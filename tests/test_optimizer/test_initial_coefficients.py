import numpy as np
import pytest

from linopt.core import InitialCoefficientsType
from linopt.optimizer import (
    RandomCoefficientsGenerator,
    ZeroCoefficientsGenerator,
    create_initial_coefficients_generator,
)


def test_zero_coefficients():
    coefficients = ZeroCoefficientsGenerator().generate(4, 2)
    assert coefficients.shape == (4, 2)
    assert not coefficients.any()


def test_random_coefficients_are_seeded_and_bounded():
    first = RandomCoefficientsGenerator(seed=3).generate(5, 3)
    second = RandomCoefficientsGenerator(seed=3).generate(5, 3)
    assert first.shape == (5, 3)
    np.testing.assert_array_equal(first, second)
    assert np.all(first >= -1.0) and np.all(first < 1.0)


def test_random_coefficients_differ_across_seeds():
    first = RandomCoefficientsGenerator(seed=1).generate(10, 1)
    second = RandomCoefficientsGenerator(seed=2).generate(10, 1)
    assert not np.array_equal(first, second)


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (InitialCoefficientsType.ZEROES, ZeroCoefficientsGenerator),
        ("random", RandomCoefficientsGenerator),
    ],
)
def test_factory(kind, expected):
    assert isinstance(create_initial_coefficients_generator(kind, seed=0), expected)


def test_factory_passes_seed():
    generator = create_initial_coefficients_generator("random", seed=11)
    assert generator.seed == 11
