"""
Revue périodique par l'analyste (earnings call).

Tous les `review_every_months` mois clôturés, la partie se fige : le temps
s'arrête, les stratégies sont bloquées et l'analyste rend un avis noté. La
moindre erreur de l'analyste (réseau, JSON invalide, réponse hors bornes)
est remplacée par l'avis neutre par défaut ; la revue ne bloque donc
jamais la partie.
"""

import logging
from typing import Any, List, Optional, Protocol, Tuple

from pydantic import ValidationError

from PizzaOPS_V1.config import ReviewParams
from PizzaOPS_V1.core.analyst import DEFAULT_REPORT, AnalystReport, ReviewRequest
from PizzaOPS_V1.core.results import HistoryPoint
from PizzaOPS_V1.domain.financial_state import FinancialState
from PizzaOPS_V1.domain.types import GatePhase

logger = logging.getLogger(__name__)


class Analyst(Protocol):
    async def assess(self, request: ReviewRequest) -> Any: ...


class ReviewGate:
    def __init__(self, analyst: Optional[Analyst] = None, params: Optional[ReviewParams] = None):
        self.analyst = analyst
        self.params = params if params is not None else ReviewParams()
        self.phase = GatePhase.RUNNING
        self.reports: List[Tuple[int, AnalystReport]] = []

    @property
    def is_reviewing(self) -> bool:
        return self.phase == GatePhase.REVIEWING

    def is_due(self, month: int) -> bool:
        """Vrai si `month` clôt une période de revue (3, 6, 9... par défaut)."""
        return month > 0 and month % self.params.review_every_months == 0

    @property
    def last_report(self) -> Optional[AnalystReport]:
        return self.reports[-1][1] if self.reports else None

    async def review(
        self,
        month: int,
        state: FinancialState,
        history: Tuple[HistoryPoint, ...],
    ) -> AnalystReport:
        """Fige la partie, consulte l'analyste, puis relâche la partie.

        Args:
            month: Mois qui vient d'être clôturé.
            state: État courant (copié avant transmission).
            history: Historique complet des mois clôturés.

        Returns:
            L'avis validé, ou l'avis par défaut (Hold, 50) en cas d'échec.
        """
        self.phase = GatePhase.REVIEWING
        try:
            report = await self._ask(month, state, history)
        finally:
            self.phase = GatePhase.RUNNING
        self.reports.append((month, report))
        logger.info(
            "Revue M%d : %s (%d/100)", month, report.rating.value, report.score
        )
        return report

    async def _ask(
        self,
        month: int,
        state: FinancialState,
        history: Tuple[HistoryPoint, ...],
    ) -> AnalystReport:
        if self.analyst is None:
            return DEFAULT_REPORT
        request = ReviewRequest(month=month, state=state.snapshot(), history=tuple(history))
        try:
            raw = await self.analyst.assess(request)
            if isinstance(raw, AnalystReport):
                return raw
            return AnalystReport.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Avis d'analyste invalide, avis par défaut : %s", exc)
        except Exception as exc:
            logger.warning("Analyste indisponible, avis par défaut : %s", exc)
        return DEFAULT_REPORT
