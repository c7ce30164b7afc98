from collections import Counter

import numpy as np
import pytest

from PizzaOPS_V1.config import SelectionParams
from PizzaOPS_V1.domain.types import CostBucket, StrategyCategory, StrategyQuality
from PizzaOPS_V1.rules.selection import (
    bucket_weights,
    cost_bucket,
    deal_initial_deck,
    draw_strategy,
    pick_bucket,
    pick_next_strategy,
)
from tests.conftest import FixedRng, make_strategy

NO_FORCE = SelectionParams(force_risky_probability=0.0)


def _pool():
    return [
        make_strategy("cheap_a", cost=2000.0),
        make_strategy("cheap_b", cost=10000.0),
        make_strategy("moderate_a", cost=20000.0),
        make_strategy("expensive_a", cost=45000.0),
    ]


class TestBuckets:
    @pytest.mark.parametrize(
        "cost, bucket",
        [
            (10000.0, CostBucket.CHEAP),
            (10000.01, CostBucket.MODERATE),
            (30000.0, CostBucket.MODERATE),
            (30001.0, CostBucket.EXPENSIVE),
        ],
    )
    def test_cost_bucket_edges(self, cost, bucket):
        assert cost_bucket(cost, SelectionParams()) == bucket

    def test_weights_by_cash(self):
        params = SelectionParams()
        assert bucket_weights(5000.0, params) == (0.7, 0.2, 0.1)
        assert bucket_weights(30000.0, params) == (0.4, 0.4, 0.2)
        assert bucket_weights(80000.0, params) == (0.2, 0.4, 0.4)

    def test_poor_player_bucket_frequencies(self):
        rng = np.random.default_rng(0)
        pool = _pool()
        counts = Counter(
            cost_bucket(pick_next_strategy(pool, 5000.0, NO_FORCE, rng).cost, NO_FORCE)
            for _ in range(10000)
        )
        assert counts[CostBucket.CHEAP] / 10000 == pytest.approx(0.7, abs=0.02)
        assert counts[CostBucket.MODERATE] / 10000 == pytest.approx(0.2, abs=0.02)
        assert counts[CostBucket.EXPENSIVE] / 10000 == pytest.approx(0.1, abs=0.02)

    def test_rich_player_bucket_frequencies(self):
        rng = np.random.default_rng(1)
        counts = Counter(pick_bucket(80000.0, NO_FORCE, rng) for _ in range(10000))
        assert counts[CostBucket.EXPENSIVE] / 10000 == pytest.approx(0.4, abs=0.02)


class TestPickNextStrategy:
    def test_empty_pool(self):
        assert pick_next_strategy([], 75000.0) is None

    def test_forced_risky(self):
        pool = _pool() + [
            make_strategy("bad_idea", cost=30000.0, quality=StrategyQuality.BAD),
            make_strategy("moonshot", cost=40000.0, category=StrategyCategory.SPECULATIVE),
        ]
        params = SelectionParams(force_risky_probability=1.0)
        rng = np.random.default_rng(5)
        for _ in range(200):
            assert pick_next_strategy(pool, 5000.0, params, rng).is_risky

    def test_forced_risky_without_risky_cards(self):
        params = SelectionParams(force_risky_probability=1.0)
        picked = pick_next_strategy(_pool(), 5000.0, params, FixedRng(0.0))
        # roll 0.0 => tranche 'cheap', premier candidat
        assert picked.id == "cheap_a"

    def test_empty_bucket_falls_back_to_affordable(self):
        pool = [make_strategy("expensive", cost=45000.0), make_strategy("moderate", cost=20000.0)]
        picked = pick_next_strategy(pool, 25000.0, NO_FORCE, FixedRng(0.0))
        assert picked.id == "moderate"

    def test_nothing_affordable_falls_back_to_pool(self):
        pool = [make_strategy("expensive", cost=45000.0), make_strategy("moderate", cost=20000.0)]
        picked = pick_next_strategy(pool, 1000.0, NO_FORCE, FixedRng(0.0))
        assert picked.id == "expensive"

    def test_pick_does_not_remove(self):
        pool = _pool()
        pick_next_strategy(pool, 5000.0, NO_FORCE, np.random.default_rng(0))
        assert len(pool) == 4


class TestDrawAndDeal:
    def test_draw_removes_from_pool(self):
        pool = _pool()
        drawn = draw_strategy(pool, 5000.0, NO_FORCE, np.random.default_rng(0))
        assert drawn not in pool
        assert len(pool) == 3

    def test_draw_exhausted_pool(self):
        assert draw_strategy([], 5000.0) is None

    def test_deal_initial_deck(self):
        catalog = [make_strategy(f"s_{i}", cost=1000.0 * (i + 1)) for i in range(40)]
        deck, pool = deal_initial_deck(catalog, 75000.0, rng=np.random.default_rng(2))
        assert len(deck) == 5
        assert len(pool) == 35
        ids = [s.id for s in deck + pool]
        assert len(set(ids)) == 40

    def test_deal_small_catalog(self):
        catalog = [make_strategy(f"s_{i}") for i in range(3)]
        deck, pool = deal_initial_deck(catalog, 75000.0, rng=np.random.default_rng(2))
        assert len(deck) == 3
        assert pool == []
