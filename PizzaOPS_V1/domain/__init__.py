"""
Domain objects for PizzaOPS.

The domain layer holds the core business objects that model the
financial state of the pizzeria, the strategy cards and their effect
descriptors.  These classes are plain pydantic models without side
effects to ease unit testing.
"""

from .financial_state import Assets, Equity, FinancialState, Liabilities
from .strategy import Adjustment, Effect, Strategy
from .types import StrategyCategory, StrategyQuality

__all__ = [
    "Assets",
    "Equity",
    "FinancialState",
    "Liabilities",
    "Adjustment",
    "Effect",
    "Strategy",
    "StrategyCategory",
    "StrategyQuality",
]
