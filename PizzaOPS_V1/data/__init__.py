"""
Point d'entrée data avec imports retardés pour éviter les boucles.
Expose des getters plutôt que des objets globaux calculés au chargement.
"""


def get_INITIAL_STATE():
    from PizzaOPS_V1.domain.financial_state import FinancialState

    from .initial_state import INITIAL_STATE

    return FinancialState.model_validate(INITIAL_STATE)


def get_CORE_STRATEGIES_DATA():
    from .strategies_core import CORE_STRATEGIES_DATA

    return CORE_STRATEGIES_DATA
