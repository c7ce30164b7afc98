"""
Tirage pondéré des stratégies proposées au joueur.

Règles :
- 30 % du temps, on force une carte risquée ("Bad" ou "Speculative") si la
  pioche en contient ;
- sinon on répartit la pioche en tranches de coût (cheap <= 10k < moderate
  <= 30k < expensive) et on tire une tranche selon la trésorerie :
  moins d'argent => cartes moins chères, plus d'argent => cartes plus chères ;
- tranche vide => une carte abordable, sinon n'importe laquelle ;
- une carte tirée quitte la pioche pour toute la partie (pas de remélange).
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from PizzaOPS_V1.config import SelectionParams
from PizzaOPS_V1.domain.strategy import Strategy
from PizzaOPS_V1.domain.types import CostBucket

logger = logging.getLogger(__name__)

BUCKET_ORDER = (CostBucket.CHEAP, CostBucket.MODERATE, CostBucket.EXPENSIVE)


def cost_bucket(cost: float, params: SelectionParams) -> CostBucket:
    if cost <= params.cheap_max_cost:
        return CostBucket.CHEAP
    if cost <= params.moderate_max_cost:
        return CostBucket.MODERATE
    return CostBucket.EXPENSIVE


def split_by_bucket(
    pool: List[Strategy], params: SelectionParams
) -> Dict[CostBucket, List[Strategy]]:
    buckets: Dict[CostBucket, List[Strategy]] = {bucket: [] for bucket in BUCKET_ORDER}
    for strategy in pool:
        buckets[cost_bucket(strategy.cost, params)].append(strategy)
    return buckets


def bucket_weights(cash: float, params: SelectionParams) -> Tuple[float, float, float]:
    """Poids (cheap, moderate, expensive) selon le niveau de trésorerie."""
    if cash < params.poor_cash_threshold:
        return params.poor_weights
    if cash > params.rich_cash_threshold:
        return params.rich_weights
    return params.middle_weights


def pick_bucket(
    cash: float, params: SelectionParams, rng: np.random.Generator
) -> CostBucket:
    """Tire une tranche de coût avec les poids du niveau de trésorerie."""
    roll = rng.random()
    cumulative = 0.0
    for bucket, weight in zip(BUCKET_ORDER, bucket_weights(cash, params)):
        cumulative += weight
        if roll < cumulative:
            return bucket
    return BUCKET_ORDER[-1]


def _uniform(candidates: List[Strategy], rng: np.random.Generator) -> Strategy:
    return candidates[int(rng.integers(len(candidates)))]


def pick_next_strategy(
    pool: List[Strategy],
    cash: float,
    params: Optional[SelectionParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Strategy]:
    """Choisit une stratégie dans la pioche sans la retirer.

    Args:
        pool: Pioche restante.
        cash: Trésorerie courante du joueur.
        params: Pondérations du tirage (valeurs par défaut sinon).
        rng: Générateur aléatoire injectable.

    Returns:
        La stratégie choisie, ou None si la pioche est vide.
    """
    if not pool:
        return None
    params = params if params is not None else SelectionParams()
    rng = rng if rng is not None else np.random.default_rng()

    if rng.random() < params.force_risky_probability:
        risky = [s for s in pool if s.is_risky]
        if risky:
            return _uniform(risky, rng)

    bucket = pick_bucket(cash, params, rng)
    choice_pool = split_by_bucket(pool, params)[bucket]

    if not choice_pool:
        # Tranche vide : d'abord quelque chose d'abordable
        affordable = [s for s in pool if s.cost <= cash]
        if affordable:
            return _uniform(affordable, rng)
        return _uniform(pool, rng)

    return _uniform(choice_pool, rng)


def draw_strategy(
    pool: List[Strategy],
    cash: float,
    params: Optional[SelectionParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Strategy]:
    """Tire une stratégie ET la retire de la pioche (modifie `pool`)."""
    strategy = pick_next_strategy(pool, cash, params, rng)
    if strategy is None:
        logger.info("Pioche de stratégies épuisée")
        return None
    pool.remove(strategy)
    return strategy


def shuffle_strategies(
    strategies: List[Strategy], rng: Optional[np.random.Generator] = None
) -> List[Strategy]:
    rng = rng if rng is not None else np.random.default_rng()
    return [strategies[i] for i in rng.permutation(len(strategies))]


def deal_initial_deck(
    catalog: List[Strategy],
    cash: float,
    params: Optional[SelectionParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[List[Strategy], List[Strategy]]:
    """Mélange le catalogue et distribue la main de départ.

    Returns:
        Tuple contenant:
        - List[Strategy]: la main active (au plus `deck_size` cartes)
        - List[Strategy]: la pioche restante
    """
    params = params if params is not None else SelectionParams()
    rng = rng if rng is not None else np.random.default_rng()
    pool = shuffle_strategies(catalog, rng)
    deck: List[Strategy] = []
    for _ in range(params.deck_size):
        strategy = draw_strategy(pool, cash, params, rng)
        if strategy is None:
            break
        deck.append(strategy)
    return deck, pool
