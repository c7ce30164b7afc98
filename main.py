import argparse
import asyncio
import logging

import numpy as np

from PizzaOPS_V1.config import GameConfig
from PizzaOPS_V1.core.analyst import LLMAnalyst, RuleBasedAnalyst
from PizzaOPS_V1.core.game import Game
from PizzaOPS_V1.ui.affichage import (
    print_balance_sheet,
    print_cash_flow,
    print_income_statement,
    print_report,
    print_turn_summary,
)
from PizzaOPS_V1.ui.strategy_office import bureau_strategies


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_args():
    parser = argparse.ArgumentParser(description="PizzaOPS : simulation financière d'une pizzeria")
    parser.add_argument("--config", default=None, help="Fichier YAML de configuration")
    parser.add_argument("--months", type=int, default=12, help="Nombre de mois à jouer")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--offline", action="store_true", help="Analyste hors ligne (pas d'appel réseau)"
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args()


def run():
    args = parse_args()
    _setup_logging(args.log_level)

    config = GameConfig.from_yaml(args.config) if args.config else GameConfig()
    trailing = config.review.trailing_months
    if args.offline or not config.analyst.api_key():
        analyst = RuleBasedAnalyst(trailing_months=trailing)
    else:
        analyst = LLMAnalyst(config.analyst, config.company_name, trailing)

    game = Game(config=config, rng=np.random.default_rng(args.seed), analyst=analyst)
    print_balance_sheet(game.state, title=f"Opening Balance — {config.company_name}")

    while game.months_closed < args.months:
        if not bureau_strategies(game):
            break
        previous = game.state
        game.advance_month()
        print_turn_summary(game.month - 1, game.history)
        print_income_statement(game.state, title=f"Income Statement — Month {game.month - 1}")
        print_cash_flow(game.state, previous)
        if game.review_due():
            report = asyncio.run(game.run_review())
            print_report(report, game.month - 1)

    print(f"\nFin de partie après {game.months_closed} mois. Cours final : ${game.stock_price:.2f}")


if __name__ == "__main__":
    run()
