import pytest
from pydantic import ValidationError

from PizzaOPS_V1.domain.strategy import DEFAULT_FAILURE_EFFECT, Adjustment, Effect
from PizzaOPS_V1.rules.effects import (
    apply_effect,
    execute_strategy,
    outcome_effect,
    resolve_adjustment,
)
from tests.conftest import FixedRng, make_strategy


class TestResolveAdjustment:
    def test_deterministic(self):
        assert resolve_adjustment(100.0, Adjustment(add=5.0, scale=1.1)) == pytest.approx(115.0)

    def test_random_part_uses_rng(self):
        adj = Adjustment(add=-5.0, add_spread=-5.0)
        assert resolve_adjustment(70.0, adj, FixedRng(0.5)) == pytest.approx(62.5)

    def test_random_scale(self):
        adj = Adjustment(scale=0.95, scale_spread=0.05)
        assert resolve_adjustment(100.0, adj, FixedRng(0.0)) == pytest.approx(95.0)


class TestApplyEffect:
    def test_cost_deducted_and_deferred(self, seed_state):
        effect = Effect(state={"daily_orders": Adjustment(add=1.5)})
        s = apply_effect(seed_state, 5000.0, effect)
        assert s.assets.cash == pytest.approx(70000.0)
        assert s.cash == s.assets.cash
        assert s.assets.prepaid_expenses == pytest.approx(5000.0)
        assert s.deferred_strategy_costs == pytest.approx(5000.0)
        assert s.daily_orders == pytest.approx(71.5)
        assert s.is_balanced()

    def test_input_not_mutated(self, seed_state):
        before = seed_state.model_copy(deep=True)
        apply_effect(seed_state, 5000.0, Effect(state={"daily_orders": Adjustment(add=3.0)}))
        assert seed_state == before

    def test_capex_not_deferred(self, seed_state):
        effect = Effect(
            state={"customer_satisfaction": Adjustment(add=1.5)},
            assets={"equipment": 3000.0},
        )
        s = apply_effect(seed_state, 13500.0, effect)
        assert s.assets.cash == pytest.approx(61500.0)
        assert s.assets.equipment == pytest.approx(123000.0)
        assert s.capital_expenditures == pytest.approx(13500.0)
        assert s.cash_flow_from_investing == pytest.approx(-13500.0)
        assert s.deferred_strategy_costs == 0.0
        assert s.assets.prepaid_expenses == 0.0

    def test_loan_financing(self, seed_state):
        effect = Effect(liabilities={"loans": 20000.0})
        s = apply_effect(seed_state, -20000.0, effect)
        assert s.assets.cash == pytest.approx(95000.0)
        assert s.liabilities.loans == pytest.approx(80000.0)
        assert s.cash_flow_from_financing == pytest.approx(20000.0)
        assert s.deferred_strategy_costs == 0.0
        assert s.is_balanced()

    def test_equity_financing(self, seed_state):
        effect = Effect(equity={"contributed_capital": 30000.0})
        s = apply_effect(seed_state, -30000.0, effect)
        assert s.equity.contributed_capital == pytest.approx(140000.0)
        assert s.cash_flow_from_financing == pytest.approx(30000.0)
        assert s.is_balanced()

    @pytest.mark.parametrize("delta, expected", [(50.0, 100.0), (-200.0, 0.0)])
    def test_satisfaction_clamped(self, seed_state, delta, expected):
        effect = Effect(state={"customer_satisfaction": Adjustment(add=delta)})
        s = apply_effect(seed_state, 0.0, effect)
        assert s.customer_satisfaction == expected

    def test_opex_floored_at_zero(self, seed_state):
        effect = Effect(state={"operating_expenses": Adjustment(add=-1e6)})
        assert apply_effect(seed_state, 0.0, effect).operating_expenses == 0.0

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            Effect(state={"stock_price": Adjustment(add=1.0)})
        with pytest.raises(ValidationError):
            Effect(assets={"goodwill": 1.0})


class TestExecuteStrategy:
    def test_success(self, seed_state):
        strategy = make_strategy("promo", cost=5000.0)
        s, succeeded = execute_strategy(seed_state, strategy, FixedRng(0.5))
        assert succeeded
        assert s.assets.cash == pytest.approx(70000.0)
        assert s.daily_orders == pytest.approx(71.5)

    def test_forced_failure_applies_default_penalty(self, seed_state):
        strategy = make_strategy("doomed", cost=10000.0, success_rate=0.0)
        s, succeeded = execute_strategy(seed_state, strategy, FixedRng(0.5))
        assert not succeeded
        # coût déduit une seule fois, même en cas d'échec
        assert s.assets.cash == pytest.approx(65000.0)
        assert s.customer_satisfaction == pytest.approx(65.0)
        assert s.one_time_expenses == pytest.approx(500.0)
        assert s.daily_orders == pytest.approx(70.0)

    def test_failure_effect_overrides_default(self, seed_state):
        failure = Effect(state={"daily_orders": Adjustment(add=-10.0)})
        strategy = make_strategy("risky", cost=1000.0, success_rate=0.0, failure_effect=failure)
        assert outcome_effect(strategy, False) is failure
        s, _ = execute_strategy(seed_state, strategy, FixedRng(0.5))
        assert s.daily_orders == pytest.approx(60.0)
        assert s.customer_satisfaction == pytest.approx(70.0)

    def test_default_failure_effect_used(self):
        strategy = make_strategy("plain")
        assert outcome_effect(strategy, False) == DEFAULT_FAILURE_EFFECT
        assert outcome_effect(strategy, True) == strategy.success_effect
