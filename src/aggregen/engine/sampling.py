"""Weighted discrete samplers and their per-key cache.

A :class:`Sampler` is built once from a weight vector and then drawn from
many times. :class:`DistributionCache` memoizes samplers by connector so
the O(n) build cost is paid once per hot connector type.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Sampler:
    """Pick an index with probability proportional to its weight.

    Zero-weight indices are never drawn, unless every weight is zero, in
    which case all indices are equally likely.
    """

    def __init__(self, weights: Sequence[float]) -> None:
        if not len(weights):
            msg = "Cannot build a sampler over zero candidates"
            raise ValueError(msg)
        w = np.asarray(weights, dtype=float)
        if np.isnan(w).any() or (w < 0).any():
            msg = f"Weights must be non-negative numbers: {list(weights)!r}"
            raise ValueError(msg)

        self.uniform = not w.any()
        if self.uniform:
            logger.debug("All %d weights are zero; sampling uniformly", len(w))
            w = np.ones_like(w)
        self._cdf = np.cumsum(w)
        self._total = float(self._cdf[-1])

    def __len__(self) -> int:
        return len(self._cdf)

    def probabilities(self) -> np.ndarray:
        return np.diff(self._cdf, prepend=0.0) / self._total

    def draw(self, rng: np.random.Generator) -> int:
        """Return one index drawn from *rng*."""
        target = rng.random() * self._total
        idx = int(np.searchsorted(self._cdf, target, side="right"))
        return min(idx, len(self._cdf) - 1)


class DistributionCache:
    """Memoized samplers keyed by connector type."""

    def __init__(self) -> None:
        self._samplers: dict[Hashable, Sampler] = {}

    def sampler_for(
        self,
        key: Hashable,
        candidates: Sequence[T],
        weight_of: Callable[[T], float],
    ) -> Sampler:
        """Return the sampler for *key*, building it from *candidates* once."""
        sampler = self._samplers.get(key)
        if sampler is None:
            sampler = Sampler([weight_of(c) for c in candidates])
            self._samplers[key] = sampler
            logger.debug("Built sampler for %s over %d candidates", key, len(candidates))
        return sampler

    def get(self, key: Hashable) -> Sampler | None:
        return self._samplers.get(key)

    def clear(self) -> None:
        self._samplers.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._samplers

    def __len__(self) -> int:
        return len(self._samplers)
