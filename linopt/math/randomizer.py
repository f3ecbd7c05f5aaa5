"""Seedable sampling of contiguous observation intervals."""

from __future__ import annotations

from typing import Optional

from ..utils import rng_default


class Randomizer:
    """Draws half-open integer intervals ``[start, end)`` of a fixed length.

    Two randomizers built with the same ``seed`` produce the same sequence of
    intervals for the same sequence of calls. Without a seed the intervals
    differ from run to run.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = rng_default(seed)

    def get_integer_interval(
        self, lower_bound: int, upper_bound: int, interval_length: int
    ) -> tuple[int, int]:
        """Return ``(start, end)`` with ``lower_bound <= start < end <= upper_bound``."""
        if lower_bound >= upper_bound:
            raise ValueError(
                f"lower_bound must be less than upper_bound, got {lower_bound} and {upper_bound}."
            )
        if not 1 <= interval_length <= upper_bound - lower_bound:
            raise ValueError(
                f"interval_length must be in [1, {upper_bound - lower_bound}], "
                f"got {interval_length}."
            )
        start = int(self._rng.integers(lower_bound, upper_bound - interval_length + 1))
        return start, start + interval_length


__all__ = ["Randomizer"]
