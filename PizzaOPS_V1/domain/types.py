# pizzaops/domain/types.py
from enum import Enum


class StrategyCategory(Enum):
    # Values aligned with the catalog tables and the UI labels
    REVENUE = "Revenue"
    PROFIT = "Profit"
    EFFICIENCY = "Efficiency"
    SPECULATIVE = "Speculative"
    PRODUCT = "Product"
    MARKETING = "Marketing"
    TECHNOLOGY = "Technology"


class StrategyQuality(Enum):
    """Classement a posteriori (UI / historique), sans effet sur le gameplay."""

    GOOD = "Good"
    BAD = "Bad"


class CostBucket(Enum):
    """Tranches de coût utilisées par le tirage pondéré des stratégies."""

    CHEAP = "cheap"
    MODERATE = "moderate"
    EXPENSIVE = "expensive"


class Rating(Enum):
    STRONG_SELL = "Strong Sell"
    SELL = "Sell"
    HOLD = "Hold"
    BUY = "Buy"
    STRONG_BUY = "Strong Buy"


class GatePhase(Enum):
    RUNNING = "RUNNING"
    REVIEWING = "REVIEWING"


class ExecutionStatus(Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    UNKNOWN_STRATEGY = "UNKNOWN_STRATEGY"
    DECK_COOLDOWN = "DECK_COOLDOWN"
    STRATEGY_COOLDOWN = "STRATEGY_COOLDOWN"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    REVIEW_IN_PROGRESS = "REVIEW_IN_PROGRESS"

    @property
    def executed(self) -> bool:
        return self in (ExecutionStatus.SUCCESS, ExecutionStatus.FAILURE)


class LogKind(Enum):
    INFO = "info"
    POSITIVE = "positive"
    NEGATIVE = "negative"
