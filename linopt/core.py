"""Shared defaults and strategy enumerations."""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

DEFAULT_ITERATION_LIMIT = 100
DEFAULT_LEARNING_RATE = 1e-3
DEFAULT_MIN_COEFFICIENTS_UPDATE = 1e-12
DEFAULT_BATCH_SIZE = 1
DEFAULT_DECAY = 1.0


class LinearOptimizerType(Enum):
    """Optimization algorithm used to find the coefficients."""

    GRADIENT = "gradient"
    COORDINATE = "coordinate"


class CostFunctionType(Enum):
    """Objective the optimizer works on."""

    SQUARED = "squared"
    LOG_LIKELIHOOD = "log_likelihood"


class LinkFunctionType(Enum):
    """Mapping from linear combinations to probabilities."""

    LOGIT = "logit"
    SOFTMAX = "softmax"


class LearningRateType(Enum):
    """Learning-rate schedule of the gradient optimizer."""

    CONSTANT = "constant"
    DECREASING_ADAPTIVE = "decreasing_adaptive"
    TIME_BASED = "time_based"
    EXPONENTIAL = "exponential"


class InitialCoefficientsType(Enum):
    """Strategy for coefficients generated when none are supplied."""

    ZEROES = "zeroes"
    RANDOM = "random"


E = TypeVar("E", bound=Enum)


def as_enum(enum_cls: Type[E], value: E | str) -> E:
    """Coerce an enum member or its (case-insensitive) value to ``enum_cls``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError as exc:
        supported = [member.value for member in enum_cls]
        raise ValueError(
            f"Unsupported {enum_cls.__name__} '{value}'. Supported values: {supported}"
        ) from exc


__all__ = [
    "CostFunctionType",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_DECAY",
    "DEFAULT_ITERATION_LIMIT",
    "DEFAULT_LEARNING_RATE",
    "DEFAULT_MIN_COEFFICIENTS_UPDATE",
    "InitialCoefficientsType",
    "LearningRateType",
    "LinearOptimizerType",
    "LinkFunctionType",
    "as_enum",
]
