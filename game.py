from __future__ import annotations

# Facade module that re-exports the Nim core.
# The Flask app and the tests import from here; single-responsibility
# modules live under nim_core/*.

from nim_core.pile import Pile
from nim_core.state import InitialConfig, Move, Player
from nim_core.strategy import best_move, is_winning_position, nim_sum
from nim_core.engine import DEFAULT_PILES, NimGame
from nim_core.config import (
    AI_DELAY_MS,
    ConfigError,
    debug_enabled,
    default_pile_sizes,
    parse_pile_sizes,
    parse_starting_player,
    setup_logging,
)

__all__ = [
    "Pile",
    "InitialConfig",
    "Move",
    "Player",
    "best_move",
    "is_winning_position",
    "nim_sum",
    "DEFAULT_PILES",
    "NimGame",
    "AI_DELAY_MS",
    "ConfigError",
    "debug_enabled",
    "default_pile_sizes",
    "parse_pile_sizes",
    "parse_starting_player",
    "setup_logging",
    "main",
]


def main() -> None:
    # CLI driver delegated to nim_core.cli
    from nim_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
