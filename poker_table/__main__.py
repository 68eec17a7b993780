import argparse
import logging
from typing import List, Optional

from poker_engine.cards import build_cards
from poker_engine.game import GameEngine, create_players, new_game
from poker_engine.models import CARDS_PER_PLAYER, GameConfig
from poker_engine.providers import SeatProviders

from .bots import AggressiveBot, PassiveBot
from .terminal import TerminalActionProvider

LOGGER = logging.getLogger("poker_table")

MIN_PLAYERS = 2
MAX_PLAYERS = len(build_cards()) // CARDS_PER_PLAYER


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Five-card poker at the terminal")
    parser.add_argument("--players", type=int, default=2, help=f"Seats at the table ({MIN_PLAYERS}-{MAX_PLAYERS})")
    parser.add_argument("--humans", type=int, default=0, help="Seats played from this terminal")
    parser.add_argument("--starting-chips", type=int, default=1_000)
    parser.add_argument("--seed", type=int, default=None, help="Seed decks and bots for a reproducible game")
    parser.add_argument("--max-hands", type=int, default=None, help="Stop after this many hands")
    parser.add_argument("--max-passes", type=int, default=50, help="Betting passes before unmatched players are folded")
    parser.add_argument(
        "--passive-bots",
        action="store_true",
        help="Computer seats only check and call instead of raising",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        starting_chips=args.starting_chips,
        seed=args.seed,
        max_betting_passes=args.max_passes,
        max_hands=args.max_hands,
    )


def build_game(args: argparse.Namespace) -> GameEngine:
    if args.humans < 0 or args.humans > args.players:
        raise ValueError("--humans must be between 0 and --players")

    config = build_config(args)
    players = create_players(args.players, config.starting_chips)
    providers = SeatProviders()
    terminal = TerminalActionProvider()
    for idx, player in enumerate(players):
        if idx < args.humans:
            providers.assign(player.name, terminal)
        elif args.passive_bots:
            providers.assign(player.name, PassiveBot())
        else:
            seed = None if args.seed is None else args.seed + idx
            providers.assign(player.name, AggressiveBot(seed=seed))
    LOGGER.info("Seated %s players (%s at this terminal)", len(players), args.humans)
    return new_game(players, providers, config)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not MIN_PLAYERS <= args.players <= MAX_PLAYERS:
        parser.error(f"--players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
    if not 0 <= args.humans <= args.players:
        parser.error("--humans must be between 0 and --players")
    logging.basicConfig(level=getattr(logging, args.log_level))

    game = build_game(args)
    winner = game.run_until_one_player_remains()
    if winner is None:
        standings = ", ".join(f"{player.name}={player.chips}" for player in game.players)
        print(f"No winner after {game.hand_number} hands: {standings}")
        return
    print(f"{winner.name} wins after {game.hand_number} hands with {winner.chips} chips")


if __name__ == "__main__":
    main()
