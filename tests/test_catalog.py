import pytest

from PizzaOPS_V1.data import get_CORE_STRATEGIES_DATA
from PizzaOPS_V1.domain.types import StrategyCategory, StrategyQuality
from PizzaOPS_V1.rules.catalog import (
    bad_core_effect,
    build_catalog,
    generate_financing,
    generate_maintenance,
    generate_marketing,
    good_core_effect,
)


class TestCoreCatalog:
    def test_core_catalog(self):
        catalog = build_catalog()
        assert len(catalog) == len(get_CORE_STRATEGIES_DATA()) == 100
        assert len({s.id for s in catalog}) == 100

    def test_half_bad_ideas(self):
        catalog = build_catalog()
        bad = [s for s in catalog if s.quality == StrategyQuality.BAD]
        assert len(bad) == 50
        assert all(s.is_risky for s in bad)

    def test_costs_not_negative(self):
        assert all(s.cost >= 0 for s in build_catalog())


class TestEffects:
    def test_good_effect_scales_with_cost(self):
        effect = good_core_effect(20000.0, StrategyCategory.REVENUE)
        assert effect.state["daily_orders"].add == pytest.approx(6.0)
        assert effect.state["customer_satisfaction"].add == pytest.approx(4.0)
        assert "operating_expenses" not in effect.state

    def test_good_effect_minimum_scale(self):
        effect = good_core_effect(1000.0, StrategyCategory.PRODUCT)
        assert effect.state["daily_orders"].add == pytest.approx(1.5)

    def test_efficiency_cuts_opex(self):
        effect = good_core_effect(20000.0, StrategyCategory.EFFICIENCY)
        assert effect.state["operating_expenses"].add == pytest.approx(-400.0)

    def test_bad_effect(self):
        effect = bad_core_effect(15000.0)
        assert effect.state["operating_expenses"].add == pytest.approx(1500.0)
        assert effect.state["customer_satisfaction"].is_random
        assert effect.state["daily_orders"].scale == pytest.approx(0.95)


class TestProceduralCatalog:
    def test_full_catalog_ids_unique(self):
        catalog = build_catalog(include_procedural=True)
        assert len(catalog) == 195
        assert len({s.id for s in catalog}) == 195

    def test_marketing_tiers(self):
        radio = [s for s in generate_marketing() if s.title.startswith("Radio Spot")]
        assert [s.cost for s in radio] == [10500.0, 21000.0, 31500.0]

    def test_replacement_is_capex(self):
        replace = [s for s in generate_maintenance() if s.id.startswith("maint_replace")]
        assert replace
        assert all(s.success_effect.is_capex for s in replace)

    def test_financing_brings_cash(self):
        offers = generate_financing()
        assert all(s.cost < 0 for s in offers)
        loan = next(s for s in offers if s.id == "fin_credit_line")
        assert loan.success_effect.liabilities == {"loans": 20000.0}
