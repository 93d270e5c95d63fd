"""Tests for Sampler and DistributionCache."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from aggregen.engine.sampling import DistributionCache, Sampler


class TestSampler:
    def test_probabilities_follow_weights(self) -> None:
        sampler = Sampler([1.0, 3.0])
        assert sampler.probabilities() == pytest.approx([0.25, 0.75])
        assert not sampler.uniform

    def test_zero_weight_never_drawn(self, rng: np.random.Generator) -> None:
        sampler = Sampler([0.0, 2.0, 0.0, 1.0])
        drawn = {sampler.draw(rng) for _ in range(2000)}
        assert drawn == {1, 3}

    def test_all_zero_degrades_to_uniform(self, rng: np.random.Generator) -> None:
        sampler = Sampler([0.0, 0.0, 0.0])
        assert sampler.uniform
        assert sampler.probabilities() == pytest.approx([1 / 3] * 3)
        counts = Counter(sampler.draw(rng) for _ in range(3000))
        assert set(counts) == {0, 1, 2}
        assert all(800 < n < 1200 for n in counts.values())

    def test_single_candidate(self, rng: np.random.Generator) -> None:
        assert Sampler([0.0]).draw(rng) == 0

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="zero candidates"):
            Sampler([])

    @pytest.mark.parametrize("weights", [[1.0, -1.0], [float("nan"), 1.0]])
    def test_invalid_weights_rejected(self, weights: list[float]) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Sampler(weights)

    def test_same_seed_same_sequence(self) -> None:
        sampler = Sampler([1.0, 2.0, 3.0, 4.0])
        a = np.random.default_rng(99)
        b = np.random.default_rng(99)
        assert [sampler.draw(a) for _ in range(50)] == [sampler.draw(b) for _ in range(50)]


class TestDistributionCache:
    def test_builds_once_per_key(self) -> None:
        cache = DistributionCache()
        calls: list[str] = []

        def weight_of(item: str) -> float:
            calls.append(item)
            return 1.0

        first = cache.sampler_for("X", ["a", "b"], weight_of)
        second = cache.sampler_for("X", ["a", "b", "c"], weight_of)
        assert first is second
        assert calls == ["a", "b"]
        assert "X" in cache
        assert len(cache) == 1

    def test_separate_keys(self) -> None:
        cache = DistributionCache()
        a = cache.sampler_for("X", [1], lambda _: 1.0)
        b = cache.sampler_for("Y", [1], lambda _: 1.0)
        assert a is not b
        assert cache.get("X") is a
        assert cache.get("Z") is None

    def test_clear(self) -> None:
        cache = DistributionCache()
        cache.sampler_for("X", [1], lambda _: 1.0)
        cache.clear()
        assert len(cache) == 0
