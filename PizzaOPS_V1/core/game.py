import asyncio
import logging
from typing import Callable, Dict, List, Optional

import numpy as np
from pydantic import BaseModel

from PizzaOPS_V1.config import GameConfig
from PizzaOPS_V1.core.accounting import (
    CloseResult,
    decrement_cooldowns,
    initial_history_point,
    monthly_close,
)
from PizzaOPS_V1.core.analyst import AnalystReport
from PizzaOPS_V1.core.results import HistorySeries
from PizzaOPS_V1.core.review import Analyst, ReviewGate
from PizzaOPS_V1.data import get_INITIAL_STATE
from PizzaOPS_V1.domain.financial_state import FinancialState
from PizzaOPS_V1.domain.strategy import Strategy
from PizzaOPS_V1.domain.types import ExecutionStatus, LogKind, StrategyQuality
from PizzaOPS_V1.rules.catalog import build_catalog
from PizzaOPS_V1.rules.effects import execute_strategy
from PizzaOPS_V1.rules.selection import deal_initial_deck, draw_strategy

logger = logging.getLogger(__name__)


class GameLog(BaseModel):
    id: int
    month: int
    message: str
    kind: LogKind = LogKind.INFO


class ExecutionReport(BaseModel):
    """Issue d'une demande d'exécution (acceptée ou rejetée)."""

    status: ExecutionStatus
    strategy_id: str
    message: str = ""
    cash_before: float = 0.0
    cash_after: float = 0.0

    @property
    def executed(self) -> bool:
        return self.status.executed


class Game:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
        analyst: Optional[Analyst] = None,
        catalog: Optional[List[Strategy]] = None,
        initial_state: Optional[FinancialState] = None,
    ):
        """Session de jeu : possède l'état financier, la main de stratégies et
        les deux horloges (mois et recharge des cartes).

        Args:
            config: Paramètres de la partie (valeurs par défaut sinon).
            rng: Générateur aléatoire partagé par le tirage, les effets et la clôture.
            analyst: Analyste consulté aux revues (avis par défaut si None).
            catalog: Catalogue de stratégies (catalogue standard sinon).
            initial_state: État de départ (bilan d'ouverture standard sinon).
        """
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.state = (
            initial_state.model_copy(deep=True)
            if initial_state is not None
            else get_INITIAL_STATE()
        )
        self.month = 1
        self.history = HistorySeries(
            [initial_history_point(self.state, self.month, self.config.ledger)]
        )

        if catalog is None:
            catalog = build_catalog(self.config.include_procedural_strategies)
        self.deck, self.pool = deal_initial_deck(
            catalog, self.state.cash, self.config.selection, self.rng
        )

        self.cooldowns: Dict[str, int] = {}
        self.deck_cooldown = 0
        self.executed_ids: List[str] = []
        self.succeeded_ids: List[str] = []
        self.failed_ids: List[str] = []
        self.logs: List[GameLog] = []
        self._log_counter = 0
        self.is_playing = True
        self.gate = ReviewGate(analyst, self.config.review)

    # ——— Journal ———
    def add_log(self, message: str, kind: LogKind = LogKind.INFO) -> GameLog:
        """Ajoute une entrée en tête du journal (borné à `max_log_entries`)."""
        self._log_counter += 1
        entry = GameLog(id=self._log_counter, month=self.month, message=message, kind=kind)
        self.logs.insert(0, entry)
        del self.logs[self.config.max_log_entries :]
        return entry

    # ——— Lecture ———
    @property
    def months_closed(self) -> int:
        return len(self.history) - 1

    @property
    def stock_price(self) -> float:
        return self.history.current_stock_price()

    def find_in_deck(self, strategy_id: str) -> Optional[Strategy]:
        return next((s for s in self.deck if s.id == strategy_id), None)

    # ——— Intentions du joueur ———
    def _reject(
        self, status: ExecutionStatus, strategy_id: str, message: str
    ) -> ExecutionReport:
        logger.warning("Exécution refusée (%s) : %s", status.value, message)
        return ExecutionReport(
            status=status,
            strategy_id=strategy_id,
            message=message,
            cash_before=self.state.cash,
            cash_after=self.state.cash,
        )

    def execute_strategy(self, strategy_id: str) -> ExecutionReport:
        """Exécute une carte de la main ; ne lève jamais d'exception.

        Une carte exécutée (succès ou échec) est remplacée par une nouvelle
        tirée selon la trésorerie d'avant l'exécution, puis toute la main
        est bloquée `deck_cooldown_seconds` secondes.
        """
        if self.gate.is_reviewing:
            return self._reject(
                ExecutionStatus.REVIEW_IN_PROGRESS, strategy_id, "Earnings call in progress."
            )
        strategy = self.find_in_deck(strategy_id)
        if strategy is None:
            return self._reject(
                ExecutionStatus.UNKNOWN_STRATEGY, strategy_id, f"No active strategy '{strategy_id}'."
            )
        if self.deck_cooldown > 0:
            return self._reject(
                ExecutionStatus.DECK_COOLDOWN,
                strategy_id,
                f"Strategies locked for {self.deck_cooldown}s.",
            )
        if self.cooldowns.get(strategy_id, 0) > 0:
            return self._reject(
                ExecutionStatus.STRATEGY_COOLDOWN,
                strategy_id,
                f"'{strategy.title}' on cooldown for {self.cooldowns[strategy_id]} month(s).",
            )
        cash_before = self.state.cash
        if strategy.cost > 0 and cash_before < strategy.cost:
            self.add_log(f"Insufficient funds for {strategy.title}", LogKind.NEGATIVE)
            return self._reject(
                ExecutionStatus.INSUFFICIENT_FUNDS,
                strategy_id,
                f"Need ${strategy.cost:,.0f}, have ${cash_before:,.0f}.",
            )

        self.state, succeeded = execute_strategy(self.state, strategy, self.rng)

        self.executed_ids.append(strategy.id)
        if succeeded:
            self.succeeded_ids.append(strategy.id)
            kind = (
                LogKind.POSITIVE
                if strategy.quality == StrategyQuality.GOOD
                else LogKind.NEGATIVE
            )
            self.add_log(f"{strategy.title}: {strategy.success_log}", kind)
        else:
            self.failed_ids.append(strategy.id)
            self.add_log(f"{strategy.title}: {strategy.failure_log}", LogKind.NEGATIVE)

        if strategy.cooldown > 0:
            self.cooldowns[strategy.id] = strategy.cooldown
        self._replace_in_deck(strategy, cash_before)
        self.deck_cooldown = self.config.timing.deck_cooldown_seconds

        status = ExecutionStatus.SUCCESS if succeeded else ExecutionStatus.FAILURE
        logger.info(
            "M%d %s %s : tréso %.2f -> %.2f",
            self.month,
            strategy.id,
            status.value,
            cash_before,
            self.state.cash,
        )
        return ExecutionReport(
            status=status,
            strategy_id=strategy.id,
            message=strategy.success_log if succeeded else strategy.failure_log,
            cash_before=cash_before,
            cash_after=self.state.cash,
        )

    def dismiss_strategy(self, strategy_id: str) -> bool:
        """Écarte une carte sans l'exécuter (aucun mouvement de trésorerie)."""
        if self.gate.is_reviewing:
            return False
        strategy = self.find_in_deck(strategy_id)
        if strategy is None:
            return False
        self._replace_in_deck(strategy, self.state.cash)
        self.add_log(f"Dismissed {strategy.title}")
        return True

    def toggle_pause(self) -> bool:
        """Met en pause / relance les horloges ; retourne `is_playing`."""
        self.is_playing = not self.is_playing
        self.add_log("Game resumed" if self.is_playing else "Game paused")
        return self.is_playing

    def _replace_in_deck(self, strategy: Strategy, cash: float) -> None:
        index = self.deck.index(strategy)
        replacement = draw_strategy(self.pool, cash, self.config.selection, self.rng)
        if replacement is None:
            # Pioche épuisée : la main rétrécit
            self.deck.pop(index)
        else:
            self.deck[index] = replacement

    # ——— Horloges ———
    def advance_month(self) -> CloseResult:
        """Clôture le mois courant et passe au suivant."""
        result = monthly_close(
            self.state, self.month + 1, self.config.ledger, self.rng
        )
        self.state = result.state
        self.month += 1
        self.history.append(result.history_point)
        self.cooldowns = decrement_cooldowns(self.cooldowns)
        kind = LogKind.POSITIVE if result.state.net_income >= 0 else LogKind.NEGATIVE
        self.add_log(
            f"Month {self.month - 1} closed. Net Income: ${result.state.net_income:,.0f}",
            kind,
        )
        return result

    def tick_deck_cooldown(self) -> int:
        if self.deck_cooldown > 0:
            self.deck_cooldown -= 1
        return self.deck_cooldown

    def review_due(self) -> bool:
        return self.gate.is_due(self.months_closed)

    async def run_review(self) -> AnalystReport:
        self.add_log("Earnings call started. Analysts are reviewing the quarter.")
        report = await self.gate.review(self.month, self.state, self.history.points)
        self.add_log(
            f"Analyst rating: {report.rating.value} ({report.score}/100)",
            LogKind.POSITIVE if report.score >= 50 else LogKind.NEGATIVE,
        )
        return report

    @property
    def _frozen(self) -> bool:
        return not self.is_playing or self.gate.is_reviewing

    async def _month_driver(
        self,
        max_months: Optional[int],
        on_month: Optional[Callable[["Game", CloseResult], None]],
        on_review: Optional[Callable[["Game", AnalystReport], None]],
    ) -> None:
        closes = 0
        while max_months is None or closes < max_months:
            await asyncio.sleep(self.config.timing.month_seconds)
            if self._frozen:
                continue
            result = self.advance_month()
            closes += 1
            if on_month is not None:
                on_month(self, result)
            if self.review_due():
                report = await self.run_review()
                if on_review is not None:
                    on_review(self, report)

    async def _cooldown_driver(self) -> None:
        while True:
            await asyncio.sleep(self.config.timing.cooldown_tick_seconds)
            # le verrou du deck continue de décompter en pause, pas pendant la revue
            if self.gate.is_reviewing:
                continue
            self.tick_deck_cooldown()

    async def run(
        self,
        max_months: Optional[int] = None,
        on_month: Optional[Callable[["Game", CloseResult], None]] = None,
        on_review: Optional[Callable[["Game", AnalystReport], None]] = None,
    ) -> None:
        """Lance les deux horloges jusqu'à `max_months` clôtures (sans fin si None).

        L'arrêt se fait en annulant la tâche qui exécute `run`.
        """
        cooldown_task = asyncio.create_task(self._cooldown_driver())
        try:
            await self._month_driver(max_months, on_month, on_review)
        finally:
            cooldown_task.cancel()
            await asyncio.gather(cooldown_task, return_exceptions=True)
