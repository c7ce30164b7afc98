"""Paramètres de la simulation, avec valeurs par défaut documentées.

Tous les taux "magiques" de la clôture mensuelle et du tirage des stratégies
sont regroupés ici. Un fichier YAML peut surcharger n'importe quelle valeur
(`GameConfig.from_yaml`) ; les secrets (clé d'API de l'analyste) viennent de
l'environnement / d'un fichier `.env`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LedgerParams(BaseModel):
    """Taux de la clôture mensuelle."""

    days_per_month: int = Field(default=30, ge=1)
    demand_flux_min: float = Field(default=0.95, description="Borne basse du bruit de demande.")
    demand_flux_max: float = Field(default=1.05, description="Borne haute du bruit de demande.")
    opex_noise: float = Field(
        default=0.01, ge=0.0, description="Bruit des charges : uniforme dans [-x, x]."
    )
    default_cogs_ratio: float = Field(
        default=0.32,
        ge=0.0,
        description="Ratio COGS/CA utilisé si le CA précédent est nul.",
    )
    amortization_rate: float = Field(
        default=0.35, ge=0.0, le=1.0, description="Part du pool différé reconnue par mois."
    )
    depreciation_rate: float = Field(
        default=0.01, ge=0.0, description="Dotation mensuelle en % des immobilisations brutes."
    )
    interest_rate: float = Field(default=0.01, ge=0.0, description="Intérêts mensuels sur l'encours.")
    tax_rate: float = Field(default=0.20, ge=0.0, le=1.0)
    principal_rate: float = Field(
        default=0.005, ge=0.0, le=1.0, description="Remboursement mensuel en % de l'encours."
    )
    ap_payment_rate: float = Field(default=0.5, ge=0.0, le=1.0)
    ap_cogs_share: float = Field(default=0.5, ge=0.0, description="Part des COGS achetée à crédit.")
    ap_opex_share: float = Field(default=0.3, ge=0.0, description="Part des charges payée à crédit.")
    receivables_rate: float = Field(default=0.10, ge=0.0, description="Créances = x % du CA du mois.")
    inventory_target_rate: float = Field(default=0.5, ge=0.0, description="Stock cible = x % des COGS.")
    inventory_drawdown_rate: float = Field(
        default=0.2, ge=0.0, description="Déstockage mensuel (x % des COGS) au-dessus de la cible."
    )
    revenue_multiple: float = Field(default=0.5, description="Multiple du CA annualisé.")
    ebitda_multiple: float = Field(default=5.0, description="Multiple de l'EBITDA annualisé.")
    valuation_share_count: float = Field(default=100_000.0, gt=0)
    min_stock_price: float = Field(default=0.01, gt=0)


class SelectionParams(BaseModel):
    """Pondérations du tirage des stratégies."""

    deck_size: int = Field(default=5, ge=1)
    force_risky_probability: float = Field(
        default=0.30,
        ge=0.0,
        le=1.0,
        description="Probabilité de forcer une carte 'Bad' ou 'Speculative'.",
    )
    cheap_max_cost: float = Field(default=10_000.0)
    moderate_max_cost: float = Field(default=30_000.0)
    poor_cash_threshold: float = Field(default=15_000.0, description="Trésorerie < x : joueur 'pauvre'.")
    rich_cash_threshold: float = Field(default=50_000.0, description="Trésorerie > x : joueur 'riche'.")
    # Poids (cheap, moderate, expensive) par niveau de trésorerie
    poor_weights: tuple[float, float, float] = (0.7, 0.2, 0.1)
    middle_weights: tuple[float, float, float] = (0.4, 0.4, 0.2)
    rich_weights: tuple[float, float, float] = (0.2, 0.4, 0.4)


class ReviewParams(BaseModel):
    review_every_months: int = Field(
        default=3, ge=1, description="Une revue d'analyste tous les x mois clôturés."
    )
    trailing_months: int = Field(default=3, ge=1, description="Fenêtre 'dernier trimestre'.")


class TimingParams(BaseModel):
    month_seconds: float = Field(default=25.0, gt=0, description="Durée réelle d'un mois de jeu.")
    deck_cooldown_seconds: int = Field(
        default=5, ge=0, description="Blocage des cartes après une exécution."
    )
    cooldown_tick_seconds: float = Field(default=1.0, gt=0)


class AnalystSettings(BaseModel):
    base_url: str = "https://openrouter.ai/api/v1/chat/completions"
    model: str = "nvidia/nemotron-nano-9b-v2:free"
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=60.0, gt=0)
    api_key_env: str = Field(
        default="OPENROUTER_API_KEY", description="Variable d'environnement de la clé."
    )

    def api_key(self) -> Optional[str]:
        load_dotenv()
        return os.getenv(self.api_key_env)


class GameConfig(BaseModel):
    """Configuration complète d'une partie."""

    company_name: str = "PizzaFino"
    ticker: str = "PZZ"
    max_log_entries: int = Field(default=50, ge=1)
    include_procedural_strategies: bool = Field(
        default=False,
        description="Ajoute au catalogue les cartes générées (marketing, stock, RH...).",
    )
    ledger: LedgerParams = Field(default_factory=LedgerParams)
    selection: SelectionParams = Field(default_factory=SelectionParams)
    review: ReviewParams = Field(default_factory=ReviewParams)
    timing: TimingParams = Field(default_factory=TimingParams)
    analyst: AnalystSettings = Field(default_factory=AnalystSettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Charge et valide une `GameConfig` depuis un fichier YAML.

        Lève ``FileNotFoundError`` si le fichier n'existe pas et ``ValueError``
        si le contenu n'est pas un mapping YAML.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Fichier de configuration introuvable : {path}")

        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)

        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError(
                f"Le fichier {path} doit contenir un mapping YAML, pas {type(raw).__name__}."
            )
        return cls.model_validate(raw)
