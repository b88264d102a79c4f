"""Random sources used by the price simulation.

Every draw made by the simulator goes through a :class:`RandomSource` so
that callers can inject a seeded generator or a fixed replay of values.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Protocol

import numpy as np


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from ``[low, high)``."""

    def flip(self, p: float = 0.5) -> bool:
        """Return ``True`` with probability ``p``."""


class NumpyRandomSource:
    """Production source backed by :func:`numpy.random.default_rng`."""

    def __init__(self, seed: int | None = None, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def flip(self, p: float = 0.5) -> bool:
        return bool(self.rng.random() < p)


class SequenceRandomSource:
    """Replay pre-recorded draws in order.

    ``uniforms`` are returned verbatim by :meth:`uniform` (the bounds are
    ignored) and ``flips`` by :meth:`flip`.  Running out of values raises
    ``ValueError``.
    """

    def __init__(self, uniforms: Iterable[float] = (), flips: Iterable[bool] = ()) -> None:
        self._uniforms: Iterator[float] = iter(list(uniforms))
        self._flips: Iterator[bool] = iter(list(flips))

    def uniform(self, low: float, high: float) -> float:
        try:
            return float(next(self._uniforms))
        except StopIteration:
            raise ValueError("no uniform draws left") from None

    def flip(self, p: float = 0.5) -> bool:
        try:
            return bool(next(self._flips))
        except StopIteration:
            raise ValueError("no coin flips left") from None


def default_source(seed: int | None = None) -> RandomSource:
    return NumpyRandomSource(seed)
