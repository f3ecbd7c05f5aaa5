"""Numerical helpers used by the optimizers."""

from .randomizer import Randomizer

__all__ = ["Randomizer"]
