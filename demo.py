import asyncio
import logging

import numpy as np

from PizzaOPS_V1.config import GameConfig, TimingParams
from PizzaOPS_V1.core.analyst import RuleBasedAnalyst
from PizzaOPS_V1.core.game import Game
from PizzaOPS_V1.ui.affichage import print_history, print_report, print_turn_summary


def _on_month(game: Game, result):
    print_turn_summary(result.history_point.month, game.history)
    # Le joueur automatique exécute la première carte abordable
    for strategy in list(game.deck):
        if strategy.cost <= game.state.cash:
            report = game.execute_strategy(strategy.id)
            print(f"  -> {strategy.title}: {report.status.value}")
            break


def _on_review(game: Game, report):
    print_report(report, game.month)


def run(months: int = 12, seed: int = 42):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # Horloges accélérées : 1 mois = 0.2 s
    config = GameConfig(
        timing=TimingParams(month_seconds=0.2, deck_cooldown_seconds=0, cooldown_tick_seconds=0.05)
    )
    game = Game(config=config, rng=np.random.default_rng(seed), analyst=RuleBasedAnalyst())
    asyncio.run(game.run(max_months=months, on_month=_on_month, on_review=_on_review))
    print_history(game.history)


if __name__ == "__main__":
    run()
