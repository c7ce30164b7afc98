"""
États financiers de la pizzeria : compte de résultat du mois, bilan et
indicateurs opérationnels.

Un seul instantané `FinancialState` représente l'entreprise à un instant
donné. Il est remplacé en bloc à chaque clôture mensuelle et modifié
immédiatement (par copie) quand le joueur exécute une stratégie.
"""

from pydantic import BaseModel, Field

# Tolérance d'équilibre du bilan (actif = passif + capitaux propres)
BALANCE_TOLERANCE = 0.01


class Assets(BaseModel):
    cash: float = 0.0
    accounts_receivable: float = 0.0
    inventory: float = 0.0
    prepaid_expenses: float = 0.0  # coûts de stratégies différés (actif)
    equipment: float = 0.0  # immobilisations brutes
    accumulated_depreciation: float = 0.0

    @property
    def current(self) -> float:
        return (
            self.cash
            + self.accounts_receivable
            + self.inventory
            + self.prepaid_expenses
        )

    @property
    def net_fixed(self) -> float:
        return self.equipment - self.accumulated_depreciation

    @property
    def total(self) -> float:
        return self.current + self.net_fixed


class Liabilities(BaseModel):
    accounts_payable: float = 0.0
    accrued_expenses: float = 0.0
    loans: float = 0.0

    @property
    def total(self) -> float:
        return self.accounts_payable + self.accrued_expenses + self.loans


class Equity(BaseModel):
    contributed_capital: float = 0.0
    retained_earnings: float = 0.0
    shares_outstanding: float = 0.0  # nombre d'actions, hors total

    @property
    def total(self) -> float:
        return self.contributed_capital + self.retained_earnings


class FinancialState(BaseModel):
    """Instantané complet de l'entreprise.

    Le champ `cash` en tête est un doublon d'affichage de `assets.cash` :
    les deux doivent toujours être égaux (voir `sync_cash`).

    Attributes:
        revenue: Chiffre d'affaires du mois.
        cogs: Coût des marchandises vendues du mois.
        operating_expenses: Charges récurrentes (loyer, salaires, marketing).
        deferred_strategy_costs: Pool de coûts de stratégies en attente
            d'amortissement.
        amortization_expense: Part du pool reconnue en charge ce mois-ci.
        one_time_expenses: Petites charges ponctuelles (affichage).
        capital_expenditures: Investissements du mois (remis à zéro à la clôture).
        cash_flow_from_investing: Flux d'investissement du mois.
        cash_flow_from_financing: Flux de financement du mois.
        customer_satisfaction: Satisfaction client, entre 0 et 100.
        daily_orders: Commandes moyennes par jour.
        average_order_value: Panier moyen.
    """

    cash: float = 0.0
    revenue: float = 0.0
    cogs: float = 0.0
    gross_profit: float = 0.0
    operating_expenses: float = 0.0

    deferred_strategy_costs: float = 0.0
    amortization_expense: float = 0.0
    one_time_expenses: float = 0.0

    ebitda: float = 0.0
    depreciation: float = 0.0
    ebit: float = 0.0
    interest: float = 0.0
    tax: float = 0.0
    net_income: float = 0.0

    capital_expenditures: float = 0.0
    cash_flow_from_investing: float = 0.0
    cash_flow_from_financing: float = 0.0

    assets: Assets = Field(default_factory=Assets)
    liabilities: Liabilities = Field(default_factory=Liabilities)
    equity: Equity = Field(default_factory=Equity)

    customer_satisfaction: float = Field(default=70.0, ge=0.0, le=100.0)
    daily_orders: float = 0.0
    average_order_value: float = 0.0

    @property
    def ebt(self) -> float:
        return self.ebit - self.interest

    @property
    def total_assets(self) -> float:
        return self.assets.total

    @property
    def total_liabilities(self) -> float:
        return self.liabilities.total

    @property
    def total_equity(self) -> float:
        return self.equity.total

    @property
    def net_fixed_assets(self) -> float:
        return self.assets.net_fixed

    def balance_gap(self) -> float:
        """Écart actif - (passif + capitaux propres). 0 si le bilan est équilibré."""
        return self.total_assets - (self.total_liabilities + self.total_equity)

    def is_balanced(self, tolerance: float = BALANCE_TOLERANCE) -> bool:
        return abs(self.balance_gap()) <= tolerance

    def sync_cash(self) -> "FinancialState":
        """Recopie `assets.cash` dans le champ d'affichage `cash`."""
        self.cash = self.assets.cash
        return self

    def snapshot(self) -> "FinancialState":
        """Copie profonde, à transmettre aux collaborateurs en lecture seule."""
        return self.model_copy(deep=True)
