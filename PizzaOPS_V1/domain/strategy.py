"""
Stratégies (cartes d'action) et descripteurs d'effets.

Un effet n'est pas une fonction : c'est une donnée (`Effect`) qui décrit les
variations à appliquer à un `FinancialState`. L'application elle-même est
faite par `PizzaOPS_V1.rules.effects.apply_effect`.
"""

from typing import Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from PizzaOPS_V1.domain.financial_state import Assets, Equity, Liabilities
from PizzaOPS_V1.domain.types import StrategyCategory, StrategyQuality

# Champs de premier niveau qu'un effet a le droit de modifier
ADJUSTABLE_FIELDS = (
    "revenue",
    "cogs",
    "operating_expenses",
    "one_time_expenses",
    "customer_satisfaction",
    "daily_orders",
    "average_order_value",
)


def _check_keys(
    deltas: Dict[str, float], section: Type[BaseModel], label: str
) -> Dict[str, float]:
    unknown = set(deltas) - set(section.model_fields)
    if unknown:
        raise ValueError(f"Postes de {label} inconnus : {sorted(unknown)}")
    return deltas


class Adjustment(BaseModel):
    """Variation d'un champ numérique.

    nouvelle_valeur = ancienne * (scale + u1 * scale_spread) + add + u2 * add_spread
    avec u1, u2 tirés uniformément dans [0, 1). Des `*_spread` nuls rendent
    l'ajustement déterministe.

    Exemple
    -------
    Adjustment(add=-5, add_spread=-5)  -> baisse de 5 à 10 points
    Adjustment(scale=0.95, scale_spread=0.05)  -> -5 % à 0 %
    """

    model_config = ConfigDict(frozen=True)

    add: float = 0.0
    add_spread: float = 0.0
    scale: float = 1.0
    scale_spread: float = 0.0

    @property
    def is_random(self) -> bool:
        return self.add_spread != 0.0 or self.scale_spread != 0.0


class Effect(BaseModel):
    """Descripteur d'effet d'une stratégie.

    Attributes:
        state: Ajustements des indicateurs (charges, commandes, satisfaction...).
        assets: Variations additives des postes d'actif (ex: `{"equipment": 3000}`).
        liabilities: Variations additives du passif (ex: `{"loans": 20000}`).
        equity: Variations additives des capitaux propres.
    """

    model_config = ConfigDict(frozen=True)

    state: Dict[str, Adjustment] = Field(default_factory=dict)
    assets: Dict[str, float] = Field(default_factory=dict)
    liabilities: Dict[str, float] = Field(default_factory=dict)
    equity: Dict[str, float] = Field(default_factory=dict)

    @field_validator("state")
    @classmethod
    def _known_state_fields(cls, value: Dict[str, Adjustment]) -> Dict[str, Adjustment]:
        unknown = set(value) - set(ADJUSTABLE_FIELDS)
        if unknown:
            raise ValueError(f"Champs non ajustables : {sorted(unknown)}")
        return value

    @field_validator("assets")
    @classmethod
    def _known_asset_fields(cls, value: Dict[str, float]) -> Dict[str, float]:
        return _check_keys(value, Assets, "actif")

    @field_validator("liabilities")
    @classmethod
    def _known_liability_fields(cls, value: Dict[str, float]) -> Dict[str, float]:
        return _check_keys(value, Liabilities, "passif")

    @field_validator("equity")
    @classmethod
    def _known_equity_fields(cls, value: Dict[str, float]) -> Dict[str, float]:
        return _check_keys(value, Equity, "capitaux propres")

    @property
    def is_capex(self) -> bool:
        """Un effet qui touche `equipment` est un investissement (CapEx)."""
        return "equipment" in self.assets


# Pénalité par défaut quand une stratégie échoue sans effet d'échec propre
DEFAULT_FAILURE_EFFECT = Effect(
    state={
        "customer_satisfaction": Adjustment(add=-5.0),
        "one_time_expenses": Adjustment(add=500.0),
    }
)


class Strategy(BaseModel):
    """Entrée du catalogue, immuable et réutilisable comme modèle.

    `cost` > 0 est une sortie de trésorerie, `cost` < 0 une entrée (ex: produit
    d'un emprunt). `quality` sert uniquement au classement a posteriori.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    category: StrategyCategory
    cost: float
    cooldown: int = Field(default=0, ge=0, description="En mois de jeu")
    success_rate: float = Field(default=1.0, ge=0.0, le=1.0)
    success_effect: Effect = Field(default_factory=Effect)
    failure_effect: Optional[Effect] = None
    quality: StrategyQuality = StrategyQuality.GOOD
    rationale: str = ""
    success_log: str = ""
    failure_log: str = ""

    @property
    def is_risky(self) -> bool:
        """Mauvaise idée ou pari spéculatif (cible du tirage forcé)."""
        return (
            self.quality == StrategyQuality.BAD
            or self.category == StrategyCategory.SPECULATIVE
        )
