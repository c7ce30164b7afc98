"""
Situation de départ de la pizzeria (mois 1).

Marges fines : 32 % de COGS, charges récurrentes élevées, bilan équilibré
(actif 204 200 = passif 68 000 + capitaux propres 136 200).
"""

INITIAL_STATE = {
    "cash": 75000.0,
    "revenue": 42000.0,
    "cogs": 13440.0,  # 32 % du CA
    "gross_profit": 28560.0,
    "operating_expenses": 26500.0,
    "deferred_strategy_costs": 0.0,
    "amortization_expense": 0.0,
    "one_time_expenses": 0.0,
    "capital_expenditures": 0.0,
    "cash_flow_from_investing": 0.0,
    "cash_flow_from_financing": 0.0,
    "ebitda": 2060.0,
    "depreciation": 1200.0,
    "ebit": 860.0,
    "interest": 300.0,
    "tax": 112.0,
    "net_income": 448.0,
    "assets": {
        "cash": 75000.0,
        "accounts_receivable": 4200.0,
        "inventory": 5000.0,
        "prepaid_expenses": 0.0,
        "equipment": 120000.0,
        "accumulated_depreciation": 0.0,
    },
    "liabilities": {
        "accounts_payable": 6000.0,
        "accrued_expenses": 2000.0,
        "loans": 60000.0,
    },
    "equity": {
        "contributed_capital": 110000.0,
        "retained_earnings": 26200.0,
        "shares_outstanding": 100000.0,
    },
    "customer_satisfaction": 70.0,
    "daily_orders": 70.0,
    "average_order_value": 20.0,
}
