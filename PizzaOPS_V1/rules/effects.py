"""
Application des effets de stratégies sur l'état financier.

Règles comptables :
- le coût sort toujours de la trésorerie, une seule fois, succès ou échec ;
- un effet qui touche `equipment` est un investissement (CapEx) : flux
  d'investissement, pas de charge différée ;
- sinon un coût positif est immobilisé en charges constatées d'avance et
  rejoint le pool amorti à la clôture (35 %/mois) ;
- les variations d'emprunts et d'apports alimentent le flux de financement.
"""

from typing import Dict, Optional, Tuple

import numpy as np
from pydantic import BaseModel

from PizzaOPS_V1.domain.financial_state import FinancialState
from PizzaOPS_V1.domain.strategy import DEFAULT_FAILURE_EFFECT, Adjustment, Effect, Strategy

# Bornes des indicateurs après application d'un effet
FIELD_BOUNDS: Dict[str, Tuple[float, float]] = {
    "customer_satisfaction": (0.0, 100.0),
    "operating_expenses": (0.0, float("inf")),
    "daily_orders": (0.0, float("inf")),
    "one_time_expenses": (0.0, float("inf")),
}


def resolve_adjustment(
    current: float, adjustment: Adjustment, rng: Optional[np.random.Generator] = None
) -> float:
    """Calcule la nouvelle valeur d'un champ à partir d'un `Adjustment`.

    Le générateur n'est consulté que si l'ajustement comporte une part
    aléatoire.
    """
    factor = adjustment.scale
    delta = adjustment.add
    if adjustment.is_random:
        rng = rng if rng is not None else np.random.default_rng()
        factor += rng.random() * adjustment.scale_spread
        delta += rng.random() * adjustment.add_spread
    return current * factor + delta


def _add_deltas(section: BaseModel, deltas: Dict[str, float]) -> None:
    for key, delta in deltas.items():
        setattr(section, key, getattr(section, key) + float(delta))


def _clamp(state: FinancialState, field_name: str) -> None:
    low, high = FIELD_BOUNDS.get(field_name, (float("-inf"), float("inf")))
    value = getattr(state, field_name)
    setattr(state, field_name, max(low, min(high, value)))


def apply_effect(
    state: FinancialState,
    cost: float,
    effect: Effect,
    rng: Optional[np.random.Generator] = None,
) -> FinancialState:
    """Applique un effet et son coût ; retourne un nouvel état.

    Args:
        state: État courant (non modifié).
        cost: Coût de la stratégie (> 0 sortie de cash, < 0 entrée de cash).
        effect: Descripteur des variations à appliquer.
        rng: Générateur pour les ajustements aléatoires.

    Returns:
        Le nouvel état, avec `cash` resynchronisé sur `assets.cash`.
    """
    new_state = state.model_copy(deep=True)
    assets = new_state.assets

    assets.cash -= cost

    if effect.is_capex:
        new_state.capital_expenditures += cost
        new_state.cash_flow_from_investing -= cost
    elif cost > 0:
        # Coût immobilisé puis amorti à la clôture
        assets.prepaid_expenses += cost
        new_state.deferred_strategy_costs += cost

    _add_deltas(assets, effect.assets)
    _add_deltas(new_state.liabilities, effect.liabilities)
    _add_deltas(new_state.equity, effect.equity)

    new_state.cash_flow_from_financing += effect.liabilities.get(
        "loans", 0.0
    ) + effect.equity.get("contributed_capital", 0.0)

    for field_name, adjustment in effect.state.items():
        current = getattr(new_state, field_name)
        setattr(new_state, field_name, resolve_adjustment(current, adjustment, rng))
        _clamp(new_state, field_name)

    return new_state.sync_cash()


def resolve_outcome(
    strategy: Strategy, rng: Optional[np.random.Generator] = None
) -> bool:
    """Tire le succès d'une exécution : succès si r <= taux de succès."""
    rng = rng if rng is not None else np.random.default_rng()
    return bool(rng.random() <= strategy.success_rate)


def outcome_effect(strategy: Strategy, succeeded: bool) -> Effect:
    if succeeded:
        return strategy.success_effect
    if strategy.failure_effect is not None:
        return strategy.failure_effect
    return DEFAULT_FAILURE_EFFECT


def execute_strategy(
    state: FinancialState,
    strategy: Strategy,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[FinancialState, bool]:
    """Résout l'issue d'une stratégie puis applique l'effet correspondant.

    Le coût est déduit exactement une fois quelle que soit l'issue ; en cas
    d'échec sans effet d'échec propre, la pénalité par défaut s'applique
    (satisfaction -5, charge ponctuelle +500).

    Returns:
        Tuple contenant:
        - FinancialState: le nouvel état
        - bool: True si la stratégie a réussi
    """
    rng = rng if rng is not None else np.random.default_rng()
    succeeded = resolve_outcome(strategy, rng)
    effect = outcome_effect(strategy, succeeded)
    return apply_effect(state, strategy.cost, effect, rng), succeeded
