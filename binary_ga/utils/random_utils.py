"""
Random utilities shared by all genetic operators

This module holds the RandomSource used for every stochastic decision and the
process-wide default instance, seeded once when the module is imported.
"""

import logging
import threading
from typing import List, Optional, Tuple, Union

import numpy as np

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class RandomSource:
    """Uniform random generator wrapping a numpy Generator behind a lock"""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the random source

        Args:
            seed: Seed for the underlying generator. If None, seeds from OS entropy
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def reseed(self, seed: Optional[int]) -> None:
        """Replace the generator state with a freshly seeded one"""
        with self._lock:
            self.seed = seed
            self._rng = np.random.default_rng(seed)

    def uniform_unit(self, size: Union[None, int, Tuple[int, ...]] = None):
        """
        Draw uniform floats in [0, 1)

        Args:
            size: Output shape. If None, a single float is returned

        Returns:
            Float or array of floats
        """
        with self._lock:
            if size is None:
                return float(self._rng.random())
            return self._rng.random(size)

    def uniform_int(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from [low, high], both ends inclusive

        numpy's bounded integer sampling rejects out-of-range draws instead of
        dividing the generator range, so every value is equiprobable.
        """
        if low > high:
            raise InvalidArgumentError(
                f"Empty integer range [{low}, {high}]", argument='high', value=high
            )
        with self._lock:
            return int(self._rng.integers(low, high, endpoint=True))

    def sample_distinct(self, count: int, low: int, high: int) -> List[int]:
        """
        Draw distinct integers from [low, high] without replacement

        Duplicates are redrawn, so the result keeps draw order.

        Args:
            count: Number of integers to draw
            low: Smallest allowed value
            high: Largest allowed value

        Returns:
            List of count distinct integers in the order they were drawn
        """
        available = high - low + 1
        if count < 0 or count > available:
            raise InvalidArgumentError(
                f"Cannot draw {count} distinct values from [{low}, {high}]",
                argument='count', value=count
            )

        drawn: List[int] = []
        seen = set()
        while len(drawn) < count:
            candidate = self.uniform_int(low, high)
            if candidate not in seen:
                seen.add(candidate)
                drawn.append(candidate)
        return drawn

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"


_default_source = RandomSource()


def get_default_source() -> RandomSource:
    """Return the process-wide random source"""
    return _default_source


def resolve_source(source: Optional[RandomSource]) -> RandomSource:
    """Return source, or the process-wide one when source is None"""
    return source if source is not None else _default_source


def set_seed(seed: int = 42) -> None:
    """
    Reseed the process-wide random source for reproducible runs

    Args:
        seed: Random seed value
    """
    if not isinstance(seed, (int, np.integer)) or isinstance(seed, bool):
        raise InvalidArgumentError("Random seed must be an integer", argument='seed', value=seed)
    _default_source.reseed(int(seed))
    logger.info(f"Default random source reseeded with {seed}")
