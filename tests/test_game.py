import asyncio

import numpy as np
import pytest

from PizzaOPS_V1.config import GameConfig, TimingParams
from PizzaOPS_V1.core.analyst import AnalystReport, RuleBasedAnalyst
from PizzaOPS_V1.core.game import Game
from PizzaOPS_V1.domain.types import ExecutionStatus, GatePhase, LogKind, Rating
from tests.conftest import make_strategy


def _catalog(n=10, cost=5000.0):
    return [make_strategy(f"card_{i}", cost=cost) for i in range(n)]


def _game(catalog=None, **config):
    return Game(
        config=GameConfig(**config),
        rng=np.random.default_rng(0),
        catalog=catalog if catalog is not None else _catalog(),
    )


def _fast_timing():
    return TimingParams(month_seconds=0.001, deck_cooldown_seconds=5, cooldown_tick_seconds=0.001)


class TestGameSetup:
    def test_standard_game(self):
        game = Game(rng=np.random.default_rng(0))
        assert len(game.deck) == 5
        assert len({s.id for s in game.deck}) == 5
        assert len(game.pool) == 95
        assert game.month == 1
        assert len(game.history) == 1
        assert game.stock_price == pytest.approx(3.756)

    def test_initial_state_is_copied(self, seed_state):
        game = Game(rng=np.random.default_rng(0), catalog=_catalog(), initial_state=seed_state)
        game.state.assets.cash = 0.0
        assert seed_state.assets.cash == 75000.0


class TestExecuteStrategy:
    def test_success(self):
        game = _game()
        card = game.deck[0]
        report = game.execute_strategy(card.id)

        assert report.status == ExecutionStatus.SUCCESS
        assert report.executed
        assert report.cash_before == pytest.approx(75000.0)
        assert game.state.cash == pytest.approx(70000.0)
        assert card not in game.deck
        assert len(game.deck) == 5
        assert game.executed_ids == [card.id]
        assert game.succeeded_ids == [card.id]
        assert game.deck_cooldown == 5
        assert game.logs[0].kind == LogKind.POSITIVE

    def test_failure_still_costs(self):
        catalog = [make_strategy(f"doomed_{i}", cost=5000.0, success_rate=0.0) for i in range(6)]
        game = _game(catalog)
        report = game.execute_strategy(game.deck[0].id)
        assert report.status == ExecutionStatus.FAILURE
        assert game.state.cash == pytest.approx(70000.0)
        assert game.state.customer_satisfaction == pytest.approx(65.0)
        assert game.failed_ids

    def test_unknown_strategy(self):
        game = _game()
        report = game.execute_strategy("nope")
        assert report.status == ExecutionStatus.UNKNOWN_STRATEGY
        assert not report.executed

    def test_insufficient_funds_changes_nothing(self):
        catalog = [make_strategy(f"mansion_{i}", cost=1_000_000.0) for i in range(5)]
        game = _game(catalog)
        state_before = game.state.model_copy(deep=True)
        deck_before = list(game.deck)

        report = game.execute_strategy(game.deck[0].id)

        assert report.status == ExecutionStatus.INSUFFICIENT_FUNDS
        assert game.state == state_before
        assert game.deck == deck_before
        assert game.deck_cooldown == 0

    def test_negative_cost_never_insufficient(self):
        catalog = [make_strategy(f"loan_{i}", cost=-20000.0) for i in range(5)]
        game = _game(catalog)
        game.state.assets.cash = 0.0
        game.state.sync_cash()
        report = game.execute_strategy(game.deck[0].id)
        assert report.status == ExecutionStatus.SUCCESS
        assert game.state.cash == pytest.approx(20000.0)

    def test_deck_cooldown(self):
        game = _game()
        game.execute_strategy(game.deck[0].id)
        report = game.execute_strategy(game.deck[0].id)
        assert report.status == ExecutionStatus.DECK_COOLDOWN

        for _ in range(5):
            game.tick_deck_cooldown()
        assert game.deck_cooldown == 0
        assert game.execute_strategy(game.deck[0].id).status == ExecutionStatus.SUCCESS

    def test_strategy_cooldown(self):
        game = _game()
        card = game.deck[0]
        game.cooldowns[card.id] = 2
        assert game.execute_strategy(card.id).status == ExecutionStatus.STRATEGY_COOLDOWN
        game.advance_month()
        game.advance_month()
        assert game.cooldowns[card.id] == 0
        assert game.execute_strategy(card.id).status == ExecutionStatus.SUCCESS

    def test_rejected_while_reviewing(self):
        game = _game()
        game.gate.phase = GatePhase.REVIEWING
        report = game.execute_strategy(game.deck[0].id)
        assert report.status == ExecutionStatus.REVIEW_IN_PROGRESS
        assert not game.dismiss_strategy(game.deck[0].id)

    def test_deck_shrinks_when_pool_exhausted(self):
        game = _game(_catalog(6))
        game.execute_strategy(game.deck[0].id)
        assert len(game.deck) == 5
        game.deck_cooldown = 0
        game.execute_strategy(game.deck[0].id)
        assert len(game.deck) == 4
        assert game.pool == []


class TestDismissAndPause:
    def test_dismiss_does_not_move_cash(self):
        game = _game()
        card = game.deck[2]
        assert game.dismiss_strategy(card.id)
        assert game.state.cash == pytest.approx(75000.0)
        assert card not in game.deck
        assert len(game.deck) == 5
        assert game.deck_cooldown == 0
        assert game.executed_ids == []

    def test_dismiss_unknown(self):
        assert not _game().dismiss_strategy("nope")

    def test_toggle_pause(self):
        game = _game()
        assert game.toggle_pause() is False
        assert game.toggle_pause() is True

    def test_log_is_bounded(self):
        game = _game(max_log_entries=3)
        for _ in range(7):
            game.toggle_pause()
        assert len(game.logs) == 3
        assert [e.id for e in game.logs] == [7, 6, 5]


class TestClock:
    def test_advance_month(self):
        game = _game()
        result = game.advance_month()
        assert game.month == 2
        assert len(game.history) == 2
        assert game.history.latest == result.history_point
        assert game.state == result.state
        assert game.months_closed == 1

    def test_review_due_every_quarter(self):
        game = _game()
        due = []
        for _ in range(6):
            game.advance_month()
            due.append(game.review_due())
        assert due == [False, False, True, False, False, True]

    def test_run_closes_months_and_reviews(self):
        game = Game(
            config=GameConfig(timing=_fast_timing()),
            rng=np.random.default_rng(0),
            analyst=RuleBasedAnalyst(),
            catalog=_catalog(),
        )
        closed, reviews = [], []
        asyncio.run(
            game.run(
                max_months=3,
                on_month=lambda g, r: closed.append(r.history_point.month),
                on_review=lambda g, report: reviews.append(report),
            )
        )
        assert closed == [2, 3, 4]
        assert len(reviews) == 1
        assert isinstance(reviews[0], AnalystReport)
        assert game.gate.phase == GatePhase.RUNNING

    def test_review_failure_does_not_stop_run(self):
        class Broken:
            async def assess(self, request):
                raise RuntimeError("down")

        game = Game(
            config=GameConfig(timing=_fast_timing()),
            rng=np.random.default_rng(0),
            analyst=Broken(),
            catalog=_catalog(),
        )
        asyncio.run(game.run(max_months=4))
        assert game.months_closed == 4
        assert game.gate.last_report.rating == Rating.HOLD

    def test_paused_game_does_not_close(self):
        game = Game(
            config=GameConfig(timing=_fast_timing()),
            rng=np.random.default_rng(0),
            catalog=_catalog(),
        )
        game.toggle_pause()

        async def scenario():
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(game.run(max_months=1), timeout=0.05)

        asyncio.run(scenario())
        assert game.months_closed == 0

    def test_cooldown_driver_unlocks_deck(self):
        game = Game(
            config=GameConfig(timing=_fast_timing()),
            rng=np.random.default_rng(0),
            catalog=_catalog(),
        )
        game.execute_strategy(game.deck[0].id)
        assert game.deck_cooldown == 5

        async def scenario():
            task = asyncio.create_task(game.run())
            await asyncio.sleep(0.2)
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        asyncio.run(scenario())
        assert game.deck_cooldown == 0

    def test_review_freezes_both_clocks(self):
        class SlowAnalyst:
            def __init__(self):
                self.game = None
                self.seen = []

            async def assess(self, request):
                self.game.deck_cooldown = 5
                self.seen.append((self.game.deck_cooldown, self.game.month))
                await asyncio.sleep(0.05)
                self.seen.append((self.game.deck_cooldown, self.game.month))
                return AnalystReport(feedback="ok", rating=Rating.HOLD, score=50)

        analyst = SlowAnalyst()
        game = Game(
            config=GameConfig(timing=_fast_timing()),
            rng=np.random.default_rng(0),
            analyst=analyst,
            catalog=_catalog(),
        )
        analyst.game = game
        asyncio.run(game.run(max_months=3))

        entry, exit_ = analyst.seen
        assert entry == exit_ == (5, 4)
        assert game.gate.phase == GatePhase.RUNNING

    def test_deck_cooldown_ticks_while_paused(self):
        game = Game(
            config=GameConfig(timing=_fast_timing()),
            rng=np.random.default_rng(0),
            catalog=_catalog(),
        )
        game.toggle_pause()
        game.deck_cooldown = 5

        async def scenario():
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(game.run(max_months=1), timeout=0.2)

        asyncio.run(scenario())
        assert game.deck_cooldown == 0
        assert game.months_closed == 0
