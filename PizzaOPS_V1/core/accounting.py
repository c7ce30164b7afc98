"""
Clôture mensuelle : compte de résultat, bilan, flux de trésorerie et
valorisation boursière (modèle simplifié, mono-entité, une seule devise).

1 tour = 1 mois. La clôture transforme l'état du mois précédent (plus les
effets de stratégies accumulés depuis) en état du mois suivant. Elle ne lève
jamais d'exception : les montants sont bornés plutôt que rejetés.
"""

import logging
from math import floor
from typing import Dict, Optional

import numpy as np
from pydantic import BaseModel

from PizzaOPS_V1.config import LedgerParams
from PizzaOPS_V1.core.results import HistoryPoint
from PizzaOPS_V1.domain.financial_state import FinancialState

logger = logging.getLogger(__name__)


class CloseResult(BaseModel):
    state: FinancialState
    history_point: HistoryPoint


def enterprise_value(
    revenue: float, ebitda: float, params: Optional[LedgerParams] = None
) -> float:
    """Valeur d'entreprise = multiples du CA et de l'EBITDA annualisés, >= 0."""
    params = params if params is not None else LedgerParams()
    annualized_revenue = revenue * 12
    annualized_ebitda = ebitda * 12
    value = (
        annualized_revenue * params.revenue_multiple
        + annualized_ebitda * params.ebitda_multiple
    )
    return max(0.0, value)


def stock_price(
    revenue: float,
    ebitda: float,
    loans: float,
    cash: float,
    params: Optional[LedgerParams] = None,
) -> float:
    """Cours de l'action : (VE - dette nette) / nombre d'actions, plancher 0.01.

    Exemple
    -------
    CA 42 000, EBITDA 2 060, emprunts 59 700, trésorerie 86 058
    VE = 504 000 * 0.5 + 24 720 * 5 = 375 600
    capitaux = 375 600 - (59 700 - 86 058) = 401 958  => 4.02 par action
    """
    params = params if params is not None else LedgerParams()
    net_debt = loans - cash
    equity_value = enterprise_value(revenue, ebitda, params) - net_debt
    return max(params.min_stock_price, equity_value / params.valuation_share_count)


def draw_demand_flux(rng: np.random.Generator, params: LedgerParams) -> float:
    return float(rng.uniform(params.demand_flux_min, params.demand_flux_max))


def draw_opex_noise(rng: np.random.Generator, params: LedgerParams) -> float:
    return float(rng.uniform(-params.opex_noise, params.opex_noise))


def monthly_close(
    prev: FinancialState,
    month: int,
    params: Optional[LedgerParams] = None,
    rng: Optional[np.random.Generator] = None,
    demand_flux: Optional[float] = None,
    opex_noise: Optional[float] = None,
) -> CloseResult:
    """Calcule l'état du mois suivant et le point d'historique associé.

    Étapes (chacune consomme les sorties de la précédente) :
    1) Demande réalisée (bruit uniforme +/-5 %)
    2) CA et COGS (ratio COGS/CA du mois précédent conservé)
    3) Charges récurrentes (bruit +/-1 %)
    4) Amortissement de 35 % du pool de stratégies différées
    5) Cascade de résultat : EBITDA, dotations, EBIT, intérêts, impôt, net
    6) Remboursement du capital (0.5 % de l'encours)
    7) BFR : fournisseurs, créances, stock
    8) Trésorerie
    9) Valorisation

    Args:
        prev: État à clôturer (non modifié).
        month: Numéro du mois produit par cette clôture.
        params: Taux de clôture.
        rng: Générateur pour le bruit de demande et de charges.
        demand_flux: Force le multiplicateur de demande (tests).
        opex_noise: Force le bruit des charges (tests).

    Returns:
        Le nouvel état et le point d'historique du mois.
    """
    params = params if params is not None else LedgerParams()
    if demand_flux is None or opex_noise is None:
        rng = rng if rng is not None else np.random.default_rng()
    if demand_flux is None:
        demand_flux = draw_demand_flux(rng, params)
    if opex_noise is None:
        opex_noise = draw_opex_noise(rng, params)

    # 1) Demande
    actual_orders = floor(prev.daily_orders * params.days_per_month * demand_flux)

    # 2) CA et COGS : la marge brute est "collante"
    revenue = actual_orders * prev.average_order_value
    cogs_ratio = (
        prev.cogs / prev.revenue if prev.revenue else params.default_cogs_ratio
    )
    cogs = revenue * cogs_ratio
    gross_profit = revenue - cogs

    # 3) Charges récurrentes
    operating_expenses = prev.operating_expenses * (1 + opex_noise)

    # 4) Amortissement du pool différé (décroissance exponentielle)
    amortization_expense = prev.deferred_strategy_costs * params.amortization_rate
    deferred_costs = prev.deferred_strategy_costs - amortization_expense

    # 5) Cascade de résultat
    ebitda = gross_profit - operating_expenses - amortization_expense
    depreciation = prev.assets.equipment * params.depreciation_rate
    ebit = ebitda - depreciation
    interest = prev.liabilities.loans * params.interest_rate
    ebt = ebit - interest
    tax = max(0.0, ebt) * params.tax_rate  # pas de crédit d'impôt sur pertes
    net_income = ebt - tax

    # 6) Service de la dette
    principal_repayment = prev.liabilities.loans * params.principal_rate
    loans = prev.liabilities.loans - principal_repayment

    # 7) BFR
    ap_payment = prev.liabilities.accounts_payable * params.ap_payment_rate
    new_ap_from_ops = (
        cogs * params.ap_cogs_share + operating_expenses * params.ap_opex_share
    )
    accounts_payable = prev.liabilities.accounts_payable - ap_payment + new_ap_from_ops
    ap_delta = accounts_payable - prev.liabilities.accounts_payable

    # Créances : remplacées chaque mois, pas de balance âgée
    accounts_receivable = revenue * params.receivables_rate
    ar_delta = accounts_receivable - prev.assets.accounts_receivable

    target_inventory = cogs * params.inventory_target_rate
    if prev.assets.inventory > target_inventory:
        inventory = prev.assets.inventory - cogs * params.inventory_drawdown_rate
    else:
        inventory = target_inventory
    inventory_delta = inventory - prev.assets.inventory

    # 8) Trésorerie
    operating_cash_flow = net_income + depreciation + amortization_expense
    cash = (
        prev.assets.cash
        + operating_cash_flow
        - ar_delta
        - inventory_delta
        + ap_delta
        - principal_repayment
    )

    # 9) Valorisation
    price = stock_price(revenue, ebitda, loans, cash, params)

    next_assets = prev.assets.model_copy(
        update={
            "cash": cash,
            "accounts_receivable": accounts_receivable,
            "inventory": inventory,
            "prepaid_expenses": deferred_costs,
            "accumulated_depreciation": prev.assets.accumulated_depreciation
            + depreciation,
        }
    )
    next_liabilities = prev.liabilities.model_copy(
        update={"accounts_payable": accounts_payable, "loans": loans}
    )
    next_equity = prev.equity.model_copy(
        update={"retained_earnings": prev.equity.retained_earnings + net_income}
    )

    next_state = prev.model_copy(
        update={
            "cash": cash,
            "revenue": revenue,
            "cogs": cogs,
            "gross_profit": gross_profit,
            "operating_expenses": operating_expenses,
            "deferred_strategy_costs": deferred_costs,
            "amortization_expense": amortization_expense,
            # Trackers du mois remis à zéro
            "one_time_expenses": 0.0,
            "capital_expenditures": 0.0,
            "cash_flow_from_investing": 0.0,
            "cash_flow_from_financing": 0.0,
            "ebitda": ebitda,
            "depreciation": depreciation,
            "ebit": ebit,
            "interest": interest,
            "tax": tax,
            "net_income": net_income,
            "assets": next_assets,
            "liabilities": next_liabilities,
            "equity": next_equity,
        },
        deep=True,
    )

    logger.debug(
        "Clôture M%d : CA=%.2f net=%.2f tréso=%.2f cours=%.2f",
        month,
        revenue,
        net_income,
        cash,
        price,
    )

    return CloseResult(
        state=next_state,
        history_point=HistoryPoint(
            month=month,
            revenue=revenue,
            net_income=net_income,
            cash=cash,
            stock_price=price,
        ),
    )


def decrement_cooldowns(cooldowns: Dict[str, int]) -> Dict[str, int]:
    """Décrémente d'un mois les recharges par stratégie (plancher à 0)."""
    return {strategy_id: max(0, left - 1) for strategy_id, left in cooldowns.items()}


def initial_history_point(
    state: FinancialState, month: int = 1, params: Optional[LedgerParams] = None
) -> HistoryPoint:
    """Point d'historique du mois de départ.

    Le cours d'ouverture ne tient compte que de la valeur d'entreprise, sans
    la dette nette : 375 600 / 100 000 = 3.756 pour l'état initial standard.
    """
    params = params if params is not None else LedgerParams()
    opening_price = max(
        params.min_stock_price,
        enterprise_value(state.revenue, state.ebitda, params) / params.valuation_share_count,
    )
    return HistoryPoint(
        month=month,
        revenue=state.revenue,
        net_income=state.net_income,
        cash=state.cash,
        stock_price=opening_price,
    )
