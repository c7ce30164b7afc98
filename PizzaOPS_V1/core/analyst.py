"""
Analyste financier consulté à chaque revue trimestrielle.

Deux implémentations du même contrat `assess(request) -> AnalystReport` :
- `LLMAnalyst` : appel HTTP à un modèle de langage (API compatible OpenRouter),
  réponse JSON validée par pydantic ;
- `RuleBasedAnalyst` : mêmes règles de notation, calculées hors ligne.

Les erreurs ne sont pas gérées ici : c'est la `ReviewGate` qui substitue
l'avis neutre par défaut.
"""

import json
import logging
from typing import Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field

from PizzaOPS_V1.config import AnalystSettings
from PizzaOPS_V1.core.results import HistoryPoint
from PizzaOPS_V1.domain.financial_state import FinancialState
from PizzaOPS_V1.domain.types import Rating

logger = logging.getLogger(__name__)


class AnalystReport(BaseModel):
    feedback: str
    rating: Rating
    score: int = Field(ge=0, le=100)


DEFAULT_REPORT = AnalystReport(
    feedback="Analyst call disconnected. Market uncertainty remains high regarding your solvency.",
    rating=Rating.HOLD,
    score=50,
)


class ReviewRequest(BaseModel):
    """Données transmises à l'analyste, en lecture seule."""

    model_config = ConfigDict(frozen=True)

    month: int
    state: FinancialState
    history: Tuple[HistoryPoint, ...]


class QuarterStats(BaseModel):
    total_revenue: float
    total_profit: float
    quarter_revenue: float
    quarter_profit: float
    stock_price: float

    @property
    def quarter_margin(self) -> float:
        if self.quarter_revenue <= 0:
            return 0.0
        return self.quarter_profit / self.quarter_revenue


def compute_quarter_stats(
    history: Tuple[HistoryPoint, ...], trailing_months: int = 3
) -> QuarterStats:
    """Cumuls depuis le début et sur les `trailing_months` derniers mois."""
    reporting = history[-trailing_months:] if trailing_months > 0 else ()
    return QuarterStats(
        total_revenue=sum(p.revenue for p in history),
        total_profit=sum(p.net_income for p in history),
        quarter_revenue=sum(p.revenue for p in reporting),
        quarter_profit=sum(p.net_income for p in reporting),
        stock_price=history[-1].stock_price if history else 0.0,
    )


def build_analyst_prompt(
    request: ReviewRequest, company_name: str = "PizzaFino", trailing_months: int = 3
) -> str:
    stats = compute_quarter_stats(request.history, trailing_months)
    state = request.state
    return f"""
You are a brutal, cynical, and hard-to-please Wall Street Equity Analyst covering "{company_name}".
It is Month {request.month} of operations.

MARKET CONTEXT:
The restaurant sector is crowded. Margins are usually thin. Investors are impatient.

FINANCIALS (LIFETIME):
- Cumulative Revenue: ${stats.total_revenue:,.0f}
- Cumulative Net Income (Profit/Loss): ${stats.total_profit:,.0f}
- Current Cash: ${state.cash:,.0f}
- Current Stock Price: ${stats.stock_price:.2f}
- Total Debt (Loans): ${state.liabilities.loans:,.0f}

LATEST QUARTER (Last {trailing_months} Months):
- Revenue: ${stats.quarter_revenue:,.0f}
- Profit: ${stats.quarter_profit:,.0f}
- Margin: {stats.quarter_margin * 100:.1f}% (Industry avg is 10-15%)
- Satisfaction: {round(state.customer_satisfaction)}/100

TASK:
Provide a brutal, "not too nice" assessment. Do not sugarcoat anything.

STRICT RATING RULES:
- "Strong Buy": ONLY if Net Margin > 20% AND Satisfaction > 90 AND Debt is low. (Extremely Rare)
- "Buy": Solid profit growth and safe cash levels.
- "Hold": Profitable but stagnant, or growing revenue but losing money.
- "Sell": Losing money, high debt, or dangerously low cash.
- "Strong Sell": Insolvency risk or consistent heavy losses.

Return ONLY valid JSON:
{{
  "feedback": "Short, punchy paragraph (max 60 words). Use financial jargon (burn rate, EBITDA, leverage).",
  "rating": "Hold",
  "score": 55
}}
"""


def parse_report(text: str) -> AnalystReport:
    """Valide la réponse JSON de l'analyste (tolère un bloc ```json)."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.strip("`")
        if cleaned.lower().startswith("json"):
            cleaned = cleaned[4:]
    return AnalystReport.model_validate(json.loads(cleaned))


class LLMAnalyst:
    """Analyste distant (chat completions, réponse JSON)."""

    def __init__(
        self,
        settings: Optional[AnalystSettings] = None,
        company_name: str = "PizzaFino",
        trailing_months: int = 3,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings if settings is not None else AnalystSettings()
        self.company_name = company_name
        self.trailing_months = trailing_months
        self._transport = transport

    def build_payload(self, prompt: str) -> dict:
        return {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": "Answer with a single JSON object."},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.settings.temperature,
            "response_format": {"type": "json_object"},
        }

    async def send_request(self, payload: dict) -> dict:
        api_key = self.settings.api_key()
        if not api_key:
            raise RuntimeError(f"{self.settings.api_key_env} introuvable (.env ou environnement)")
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(
            timeout=self.settings.timeout_seconds, transport=self._transport
        ) as client:
            r = await client.post(self.settings.base_url, headers=headers, json=payload)
            r.raise_for_status()
            return r.json()

    @staticmethod
    def extract_text(response_json: dict) -> str:
        return response_json["choices"][0]["message"]["content"]

    async def assess(self, request: ReviewRequest) -> AnalystReport:
        prompt = build_analyst_prompt(request, self.company_name, self.trailing_months)
        logger.debug("Revue M%d envoyée à %s", request.month, self.settings.model)
        response_json = await self.send_request(self.build_payload(prompt))
        text = self.extract_text(response_json)
        if not text:
            raise ValueError("Réponse vide de l'analyste")
        return parse_report(text)


# Seuils de la notation hors ligne
LOW_CASH = 15_000.0
SAFE_CASH = 30_000.0
STRONG_MARGIN = 0.20
STRONG_SATISFACTION = 90.0
HEAVY_LOSS_MARGIN = -0.10

BASE_SCORES = {
    Rating.STRONG_SELL: 15,
    Rating.SELL: 30,
    Rating.HOLD: 50,
    Rating.BUY: 70,
    Rating.STRONG_BUY: 90,
}

FEEDBACK = {
    Rating.STRONG_SELL: "Burn rate is out of control and the balance sheet is a crime scene. Insolvency is a when, not an if.",
    Rating.SELL: "Losing money with this much leverage is not a strategy. EBITDA is evaporating and cash is thin.",
    Rating.HOLD: "Profitable-ish, going nowhere. The margin story is stale and we see no catalyst.",
    Rating.BUY: "Profits are growing and liquidity is safe. Grudgingly, the numbers work. For now.",
    Rating.STRONG_BUY: "Best-in-class margins, fanatical customers and a clean balance sheet. Do not blow it.",
}


def rate(request: ReviewRequest, trailing_months: int = 3) -> Rating:
    stats = compute_quarter_stats(request.history, trailing_months)
    state = request.state
    margin = stats.quarter_margin
    cash = state.assets.cash
    loans = state.liabilities.loans
    recent = request.history[-trailing_months:]

    all_losses = bool(recent) and all(p.net_income < 0 for p in recent)
    if cash < 0 or (all_losses and margin < HEAVY_LOSS_MARGIN):
        return Rating.STRONG_SELL
    if stats.quarter_profit < 0 or cash < LOW_CASH or loans > 2 * max(cash, 0.0):
        return Rating.SELL
    if margin > STRONG_MARGIN and state.customer_satisfaction > STRONG_SATISFACTION and loans < cash:
        return Rating.STRONG_BUY
    growing = len(recent) > 1 and recent[-1].net_income > recent[0].net_income
    if growing and cash >= SAFE_CASH:
        return Rating.BUY
    return Rating.HOLD


class RuleBasedAnalyst:
    """Analyste hors ligne appliquant les règles de notation ci-dessus."""

    def __init__(self, trailing_months: int = 3):
        self.trailing_months = trailing_months

    async def assess(self, request: ReviewRequest) -> AnalystReport:
        rating = rate(request, self.trailing_months)
        margin = compute_quarter_stats(request.history, self.trailing_months).quarter_margin
        # +/- 10 points selon la marge du trimestre
        bonus = max(-10.0, min(10.0, margin * 100))
        score = int(round(max(0.0, min(100.0, BASE_SCORES[rating] + bonus))))
        return AnalystReport(feedback=FEEDBACK[rating], rating=rating, score=score)
