import numpy as np
import pytest

from PizzaOPS_V1.data import get_INITIAL_STATE
from PizzaOPS_V1.domain.strategy import Adjustment, Effect, Strategy
from PizzaOPS_V1.domain.types import StrategyCategory, StrategyQuality


class FixedRng:
    """Générateur figé : `random()` renvoie toujours la même valeur."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self):
        return self.value

    def integers(self, n):
        return 0

    def uniform(self, low, high):
        return (low + high) / 2

    def permutation(self, n):
        return np.arange(n)


def make_strategy(
    id: str,
    cost: float = 5000.0,
    category: StrategyCategory = StrategyCategory.REVENUE,
    quality: StrategyQuality = StrategyQuality.GOOD,
    **kwargs,
) -> Strategy:
    kwargs.setdefault(
        "success_effect", Effect(state={"daily_orders": Adjustment(add=1.5)})
    )
    return Strategy(
        id=id,
        title=id.replace("_", " ").title(),
        category=category,
        cost=cost,
        quality=quality,
        success_log="ok",
        failure_log="ko",
        **kwargs,
    )


@pytest.fixture
def seed_state():
    return get_INITIAL_STATE()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
