"""
Construction du catalogue de stratégies à partir des tables `data/`.

Les effets ne sont pas codés carte par carte : ils sont dérivés de quelques
règles (bonne/mauvaise idée, coût, catégorie) sous forme de descripteurs
`Effect`, sérialisables et testables isolément.
"""

from typing import Dict, List

from PizzaOPS_V1.data.strategies_core import CORE_STRATEGIES_DATA
from PizzaOPS_V1.data.strategies_procedural import (
    BAD_IDEAS,
    BONUS_COST,
    FINANCING_OFFERS,
    FIXTURES,
    HIRE_COST,
    HIRE_ORDER_GAIN,
    HIRE_SALARY,
    INGREDIENTS,
    MARKETING_CHANNELS,
    MARKETING_TIERS,
    REPAIR_BASE_COST,
    REPAIR_STEP,
    REPLACE_BASE_COST,
    REPLACE_EQUIPMENT_VALUE,
    REPLACE_STEP,
    ROLES,
    SPOT_BUY_COST,
    SPOT_BUY_INVENTORY,
    SUPPLIER_CONTRACT_COGS_FACTOR,
    SUPPLIER_CONTRACT_COST,
    TRAIN_COST,
    TRAIN_RAISE,
)
from PizzaOPS_V1.domain.strategy import Adjustment, Effect, Strategy
from PizzaOPS_V1.domain.types import StrategyCategory, StrategyQuality

# Un "point d'impact" par tranche de 5 000 de coût (minimum 1)
IMPACT_COST_UNIT = 5000.0


def bad_core_effect(cost: float) -> Effect:
    """Mauvaise idée : charges en hausse, satisfaction et commandes en baisse."""
    return Effect(
        state={
            "operating_expenses": Adjustment(add=cost * 0.1, add_spread=500.0),
            "customer_satisfaction": Adjustment(add=-5.0, add_spread=-5.0),
            "daily_orders": Adjustment(scale=0.95, scale_spread=0.05),
        }
    )


def good_core_effect(cost: float, category: StrategyCategory) -> Effect:
    """Bonne idée : effet proportionnel au coût, économies si 'Efficiency'."""
    impact_scale = max(1.0, cost / IMPACT_COST_UNIT)
    state = {
        "daily_orders": Adjustment(add=impact_scale * 1.5),
        "customer_satisfaction": Adjustment(add=impact_scale),
    }
    if category == StrategyCategory.EFFICIENCY:
        state["operating_expenses"] = Adjustment(add=-impact_scale * 100.0)
    return Effect(state=state)


def generate_core_strategies() -> List[Strategy]:
    strategies = []
    for data in CORE_STRATEGIES_DATA:
        is_bad = data["effect"] == "Bad"
        category = StrategyCategory(data["type"])
        cost = float(data["cost"])
        strategies.append(
            Strategy(
                id=f"core_{data['id']}",
                title=data["title"],
                description=data["desc"],
                category=category,
                cost=cost,
                quality=StrategyQuality.BAD if is_bad else StrategyQuality.GOOD,
                success_effect=bad_core_effect(cost)
                if is_bad
                else good_core_effect(cost, category),
                rationale=data["rationale"],
                success_log=data["rationale"]
                if is_bad
                else f"Success! {data['rationale']}",
                failure_log=f"Failed. {data['rationale']}"
                if is_bad
                else "Execution failed.",
            )
        )
    return strategies


def generate_bad_strategies() -> List[Strategy]:
    return [
        Strategy(
            id=f"bad_proc_{idx}",
            title=idea["name"],
            description=idea["desc"],
            category=StrategyCategory.SPECULATIVE,
            cost=float(idea["cost"]),
            quality=StrategyQuality.BAD,
            success_effect=Effect(
                state={"operating_expenses": Adjustment(add=100.0)}
            ),
            success_log="Executed. It was a disaster.",
            failure_log="Failed immediately. Money gone.",
        )
        for idx, idea in enumerate(BAD_IDEAS)
    ]


def generate_marketing() -> List[Strategy]:
    strategies = []
    for idx, channel in enumerate(MARKETING_CHANNELS):
        # 3 paliers par canal
        for tier in MARKETING_TIERS:
            gain = channel["order_gain"] * tier
            strategies.append(
                Strategy(
                    id=f"mkt_{idx}_t{tier}",
                    title=f"{channel['name']} (Tier {tier})",
                    description=f"Marketing campaign. Increases orders by ~{gain:.1f}/day.",
                    category=StrategyCategory.REVENUE,
                    cost=float(channel["base_cost"] * tier),
                    success_effect=Effect(
                        state={
                            "daily_orders": Adjustment(add=gain),
                            "operating_expenses": Adjustment(
                                add=float(channel["opex"] * tier)
                            ),
                        }
                    ),
                    success_log=f"Campaign live! Orders up by {gain:g}/day.",
                    failure_log="Campaign flopped. Zero conversion.",
                )
            )
    return strategies


def generate_inventory() -> List[Strategy]:
    strategies = []
    for idx, ingredient in enumerate(INGREDIENTS):
        strategies.append(
            Strategy(
                id=f"inv_spot_{idx}",
                title=f"Spot Buy: {ingredient}",
                description=f"Bulk purchase of {ingredient}. Increases inventory asset.",
                category=StrategyCategory.EFFICIENCY,
                cost=float(SPOT_BUY_COST),
                success_effect=Effect(assets={"inventory": float(SPOT_BUY_INVENTORY)}),
                success_log=f"Warehouse stocked with {ingredient}.",
                failure_log=f"Shipment of {ingredient} arrived spoiled.",
            )
        )
        strategies.append(
            Strategy(
                id=f"inv_contract_{idx}",
                title=f"Supplier Contract: {ingredient}",
                description=f"Long term deal for {ingredient}. Legal fees up front.",
                category=StrategyCategory.PROFIT,
                cost=float(SUPPLIER_CONTRACT_COST),
                success_effect=Effect(
                    state={"cogs": Adjustment(scale=SUPPLIER_CONTRACT_COGS_FACTOR)}
                ),
                success_log=f"Locked in low rates for {ingredient}.",
                failure_log="Supplier backed out at the last minute.",
            )
        )
    return strategies


def generate_maintenance() -> List[Strategy]:
    strategies = []
    for idx, item in enumerate(FIXTURES):
        strategies.append(
            Strategy(
                id=f"maint_repair_{idx}",
                title=f"Repair {item}",
                description=f"Fixing {item}. Expensive but necessary.",
                category=StrategyCategory.EFFICIENCY,
                cost=float(REPAIR_BASE_COST + idx * REPAIR_STEP),
                success_effect=Effect(
                    state={"customer_satisfaction": Adjustment(add=0.5)}
                ),
                success_log=f"{item} is working like new.",
                failure_log=f"Tried to fix {item}, but broke it worse.",
            )
        )
        strategies.append(
            Strategy(
                id=f"maint_replace_{idx}",
                title=f"Replace {item}",
                description=f"New {item}. Capital expenditure.",
                category=StrategyCategory.EFFICIENCY,
                cost=float(REPLACE_BASE_COST + idx * REPLACE_STEP),
                success_effect=Effect(
                    state={"customer_satisfaction": Adjustment(add=1.5)},
                    assets={"equipment": float(REPLACE_EQUIPMENT_VALUE)},
                ),
                success_log=f"Shiny new {item} installed!",
                failure_log=f"New {item} was DOA. Warranty claim filed.",
            )
        )
    return strategies


def generate_staff() -> List[Strategy]:
    strategies = []
    for idx, role in enumerate(ROLES):
        strategies.extend(
            [
                Strategy(
                    id=f"staff_hire_{idx}",
                    title=f"Hire {role}",
                    description="Recruiting fees & onboarding. Increases OpEx, boosts throughput.",
                    category=StrategyCategory.REVENUE,
                    cost=float(HIRE_COST),
                    success_effect=Effect(
                        state={
                            "operating_expenses": Adjustment(add=float(HIRE_SALARY)),
                            "daily_orders": Adjustment(add=HIRE_ORDER_GAIN),
                        }
                    ),
                    success_log=f"New {role} joined the team.",
                    failure_log="Candidate ghosted us on day one.",
                ),
                Strategy(
                    id=f"staff_train_{idx}",
                    title=f"Train {role}s",
                    description="Better service. Increases OpEx slightly (raises).",
                    category=StrategyCategory.EFFICIENCY,
                    cost=float(TRAIN_COST),
                    success_effect=Effect(
                        state={
                            "operating_expenses": Adjustment(add=float(TRAIN_RAISE)),
                            "customer_satisfaction": Adjustment(add=1.0),
                        }
                    ),
                    success_log=f"{role}s are much sharper now.",
                    failure_log="Training session was a waste of time.",
                ),
                Strategy(
                    id=f"staff_bonus_{idx}",
                    title=f"Bonus: {role}s",
                    description="One-time morale boost.",
                    category=StrategyCategory.EFFICIENCY,
                    cost=float(BONUS_COST),
                    success_effect=Effect(
                        state={"customer_satisfaction": Adjustment(add=2.0)}
                    ),
                    success_log="Morale is through the roof!",
                    failure_log="They spent the bonus and are still grumpy.",
                ),
            ]
        )
    return strategies


def generate_financing() -> List[Strategy]:
    """Offres de financement : coût négatif, contrepartie au passif ou en capital."""
    strategies = []
    for offer in FINANCING_OFFERS:
        amount = float(offer["amount"])
        if offer["kind"] == "loan":
            effect = Effect(liabilities={"loans": amount})
        else:
            effect = Effect(equity={"contributed_capital": amount})
        strategies.append(
            Strategy(
                id=offer["id"],
                title=offer["title"],
                description=offer["desc"],
                category=StrategyCategory.PROFIT,
                cost=-amount,
                success_effect=effect,
                success_log=f"{amount:,.0f} of fresh cash on the books.",
                failure_log="The deal fell through.",
            )
        )
    return strategies


def build_catalog(include_procedural: bool = False) -> List[Strategy]:
    """Assemble le catalogue complet.

    Args:
        include_procedural: Ajoute les cartes générées au catalogue cœur.

    Returns:
        Liste des stratégies, identifiants uniques garantis.

    Raises:
        ValueError: Si deux cartes partagent le même identifiant.
    """
    catalog = generate_core_strategies()
    if include_procedural:
        catalog += (
            generate_bad_strategies()
            + generate_marketing()
            + generate_inventory()
            + generate_maintenance()
            + generate_staff()
            + generate_financing()
        )

    seen: Dict[str, Strategy] = {}
    for strategy in catalog:
        if strategy.id in seen:
            raise ValueError(f"Identifiant de stratégie dupliqué : {strategy.id}")
        seen[strategy.id] = strategy
    return catalog
