# smoke_run.py
"""
Test rapide : une partie de 6 mois sans interaction, une stratégie par mois,
vérifie l'équilibre du bilan et affiche l'historique.
"""

import asyncio

import numpy as np

from PizzaOPS_V1.core.analyst import RuleBasedAnalyst
from PizzaOPS_V1.core.game import Game
from PizzaOPS_V1.ui.affichage import print_balance_sheet, print_history, print_report

game = Game(rng=np.random.default_rng(2024), analyst=RuleBasedAnalyst())

for _ in range(6):
    # Carte la moins chère de la main
    if game.deck:
        cheapest = min(game.deck, key=lambda s: s.cost)
        report = game.execute_strategy(cheapest.id)
        print(f"M{game.month} {cheapest.title}: {report.status.value}")
        game.deck_cooldown = 0

    result = game.advance_month()
    if not result.state.is_balanced():
        print(f"⚠️ Écart de bilan M{game.month}: {result.state.balance_gap():.2f}")

    if game.review_due():
        print_report(asyncio.run(game.run_review()), game.month)

print_history(game.history)
print_balance_sheet(game.state, title=f"Balance Sheet — Month {game.month}")
