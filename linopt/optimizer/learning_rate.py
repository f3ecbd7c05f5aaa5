"""Learning-rate schedules for the gradient optimizer.

A generator moves through three states: ``init`` starts a schedule,
``get_next_value`` yields one rate per iteration, and ``stop`` ends it.
:func:`learning_rate_scope` pairs ``init`` with ``stop`` so a schedule is
always stopped once, whichever way the optimization loop exits.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Iterator

from ..core import DEFAULT_DECAY, LearningRateType, as_enum


class _State(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    STOPPED = "stopped"


class LearningRateGenerator(ABC):
    """Stateful learning-rate schedule."""

    def __init__(self) -> None:
        self._state = _State.UNINITIALIZED
        self._initial_value = 0.0
        self._calls = 0

    @property
    def is_running(self) -> bool:
        return self._state is _State.RUNNING

    def init(self, initial_value: float) -> None:
        """Start a schedule at ``initial_value``."""
        if initial_value <= 0:
            raise ValueError(f"Initial learning rate must be positive, got {initial_value}.")
        self._initial_value = float(initial_value)
        self._calls = 0
        self._state = _State.RUNNING

    def get_next_value(self) -> float:
        """Return the rate for the next iteration."""
        if self._state is not _State.RUNNING:
            raise RuntimeError(
                f"Learning rate generator is {self._state.value}; call init() first."
            )
        self._calls += 1
        return self._value(self._initial_value, self._calls)

    def stop(self) -> None:
        self._state = _State.STOPPED

    @abstractmethod
    def _value(self, initial_value: float, call: int) -> float:
        """Rate for the ``call``-th request (1-based)."""


class ConstantLearningRate(LearningRateGenerator):
    def _value(self, initial_value: float, call: int) -> float:
        return initial_value


class DecreasingAdaptiveLearningRate(LearningRateGenerator):
    """``initial / k`` for the k-th iteration."""

    def _value(self, initial_value: float, call: int) -> float:
        return initial_value / call


class TimeBasedLearningRate(LearningRateGenerator):
    """``initial / (1 + decay * (k - 1))`` for the k-th iteration."""

    def __init__(self, decay: float = DEFAULT_DECAY):
        super().__init__()
        if decay < 0:
            raise ValueError(f"decay must be non-negative, got {decay}.")
        self.decay = decay

    def _value(self, initial_value: float, call: int) -> float:
        return initial_value / (1.0 + self.decay * (call - 1))


class ExponentialLearningRate(LearningRateGenerator):
    """``initial * exp(-decay * (k - 1))`` for the k-th iteration."""

    def __init__(self, decay: float = DEFAULT_DECAY):
        super().__init__()
        if decay < 0:
            raise ValueError(f"decay must be non-negative, got {decay}.")
        self.decay = decay

    def _value(self, initial_value: float, call: int) -> float:
        return initial_value * math.exp(-self.decay * (call - 1))


@contextmanager
def learning_rate_scope(
    generator: LearningRateGenerator, initial_value: float
) -> Iterator[LearningRateGenerator]:
    """Run ``generator`` for the duration of a ``with`` block.

    Example
    -------
    >>> with learning_rate_scope(ConstantLearningRate(), 0.1) as rates:
    ...     rates.get_next_value()
    0.1
    """
    generator.init(initial_value)
    try:
        yield generator
    finally:
        generator.stop()


def create_learning_rate_generator(
    learning_rate_type: LearningRateType | str, decay: float = DEFAULT_DECAY
) -> LearningRateGenerator:
    """Build the schedule for ``learning_rate_type``."""
    learning_rate_type = as_enum(LearningRateType, learning_rate_type)
    if learning_rate_type is LearningRateType.CONSTANT:
        return ConstantLearningRate()
    if learning_rate_type is LearningRateType.DECREASING_ADAPTIVE:
        return DecreasingAdaptiveLearningRate()
    if learning_rate_type is LearningRateType.TIME_BASED:
        return TimeBasedLearningRate(decay=decay)
    return ExponentialLearningRate(decay=decay)


__all__ = [
    "ConstantLearningRate",
    "DecreasingAdaptiveLearningRate",
    "ExponentialLearningRate",
    "LearningRateGenerator",
    "TimeBasedLearningRate",
    "create_learning_rate_generator",
    "learning_rate_scope",
]
