# pizzaops/ui/strategy_office.py
import time

from PizzaOPS_V1.core.game import Game
from PizzaOPS_V1.domain.types import ExecutionStatus
from PizzaOPS_V1.ui.affichage import (
    print_balance_sheet,
    print_deck,
    print_history,
    print_income_statement,
    print_kpis,
)
from PizzaOPS_V1.console_style import green, red, yellow
from PizzaOPS_V1.utils import get_input


def _catch_up_cooldown(game: Game, since: float) -> float:
    """Décompte la recharge des cartes selon le temps réel écoulé.

    Returns:
        Le nouvel instant de référence.
    """
    elapsed = int(time.monotonic() - since)
    for _ in range(elapsed):
        game.tick_deck_cooldown()
    return since + elapsed


def _choose_card(game: Game, verb: str):
    if not game.deck:
        print("Aucune stratégie disponible.")
        return None
    print_deck(game.deck, game.state.cash, game.deck_cooldown)
    n = get_input(
        input_message=f"Carte à {verb} (0 = annuler) : ",
        error_message=f"⚠️ Choisis un numéro entre 0 et {len(game.deck)}.",
        fn_validation=lambda x: 0 <= x <= len(game.deck),
    )
    if n == 0:
        return None
    return game.deck[n - 1]


def _action_executer(game: Game):
    strategy = _choose_card(game, "exécuter")
    if strategy is None:
        return
    report = game.execute_strategy(strategy.id)
    if not report.executed:
        print(yellow(f"⛔ {report.status.value}: {report.message}"))
        return
    colour = green if report.status == ExecutionStatus.SUCCESS else red
    print(colour(f"{strategy.title} — {report.message}"))
    print(f"Trésorerie : ${report.cash_before:,.0f} → ${report.cash_after:,.0f}")


def _action_ecarter(game: Game):
    strategy = _choose_card(game, "écarter")
    if strategy is not None and game.dismiss_strategy(strategy.id):
        print(f"{strategy.title} écartée.")


def bureau_strategies(game: Game) -> bool:
    """Menu du mois en cours.

    Returns:
        False si le joueur veut quitter la partie, True pour clôturer le mois.
    """
    clock = time.monotonic()
    while True:
        clock = _catch_up_cooldown(game, clock)
        print(f"\n=== {game.config.company_name} — Mois {game.month} ===")
        print_kpis(
            game.state,
            game.stock_price,
            game.history.is_stock_up(),
            game.config.ticker,
        )
        print("1. Voir les stratégies")
        print("2. Exécuter une stratégie")
        print("3. Écarter une stratégie")
        print("4. Compte de résultat")
        print("5. Bilan")
        print("6. Historique")
        print("7. Journal")
        print("8. Clôturer le mois")
        print("0. Quitter")
        choice = input("> ").strip()

        if choice == "1":
            print_deck(game.deck, game.state.cash, game.deck_cooldown)
        elif choice == "2":
            _action_executer(game)
        elif choice == "3":
            _action_ecarter(game)
        elif choice == "4":
            print_income_statement(game.state, title=f"Income Statement — Month {game.month}")
        elif choice == "5":
            print_balance_sheet(game.state, title=f"Balance Sheet — Month {game.month}")
        elif choice == "6":
            print_history(game.history)
        elif choice == "7":
            for entry in game.logs[:10]:
                print(f"M{entry.month} [{entry.kind.value}] {entry.message}")
        elif choice == "8":
            return True
        elif choice == "0":
            return False
        else:
            print("Choix invalide.")
