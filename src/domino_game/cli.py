"""Command-line entry point: play one game and log it to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import numpy as np

from domino_game.config import GameConfig
from domino_game.core import MAX_PLAYERS, MIN_PLAYERS, DominoGameError, LoggingListener, create_game

logger = logging.getLogger(__name__)


def _player_names(value: str) -> list[str]:
    names = [name.strip() for name in value.split(",") if name.strip()]
    if not MIN_PLAYERS <= len(names) <= MAX_PLAYERS:
        raise argparse.ArgumentTypeError(
            f"Please provide between {MIN_PLAYERS}-{MAX_PLAYERS} player names "
            "as a comma separated list"
        )
    return names


def build_parser(config: GameConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domino-game", description="Simulate a game of dominoes."
    )
    parser.add_argument(
        "players", type=_player_names, help="Comma separated player names, e.g. Alice,Bob."
    )
    parser.add_argument(
        "--max-face",
        type=int,
        default=config.max_face,
        help="Highest pip value in the deck (default: %(default)s).",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        default=config.hand_size,
        help="Dominoes dealt to each player (default: %(default)s).",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for a reproducible game."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also log every dealt domino."
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from command-line arguments.

    Returns:
        0 when the game finishes, 1 when it cannot be played. Invalid
        arguments exit with status 2 through argparse.
    """
    try:
        defaults = GameConfig.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    args = build_parser(defaults).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    config = GameConfig(max_face=args.max_face, hand_size=args.hand_size)
    try:
        config.validate()
        game = create_game(
            args.players,
            config.max_face,
            listeners=[LoggingListener()],
            rng=np.random.default_rng(args.seed),
        )
        game.run(config.hand_size)
    except DominoGameError as exc:
        logger.error("The game could not be executed: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid game settings: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
