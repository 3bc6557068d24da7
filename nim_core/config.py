from __future__ import annotations

import logging
import os
from typing import Sequence, Tuple, Union

from .state import Player

DEFAULT_PILES_TEXT = os.getenv("NIM_DEFAULT_PILES", "3,4,5")
AI_DELAY_MS = int(os.getenv("NIM_AI_DELAY_MS", "1000"))
LOG_LEVEL = os.getenv("NIM_LOG_LEVEL", "INFO")


class ConfigError(ValueError):
    """Raised when a pile configuration or starting player cannot be used to start a game."""


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def debug_enabled() -> bool:
    return _truthy(os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")))


def parse_pile_sizes(raw: Union[str, Sequence[object]]) -> Tuple[int, ...]:
    """
    Turns menu input such as "3, 4, 5" into pile sizes.

    Entries that are not positive integers are dropped, the same way the
    browser menu filters them. A list of values is accepted as well as a
    comma-separated string. Raises ConfigError for any other type, or when
    nothing usable is left.
    """
    if isinstance(raw, str):
        parts = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        parts = list(raw)
    else:
        raise ConfigError(f"Pile sizes must be text or a list, got {type(raw).__name__}")
    sizes = []
    for part in parts:
        if isinstance(part, bool):
            continue
        try:
            n = int(str(part).strip())
        except ValueError:
            continue
        if n > 0:
            sizes.append(n)
    if not sizes:
        raise ConfigError("Please enter valid pile sizes (e.g. 3, 4, 5)")
    return tuple(sizes)


def parse_starting_player(raw: Union[str, Player, None]) -> Player:
    """Accepts 'user'/'human'/'computer' in any case; None means the human starts."""
    if raw is None:
        return Player.HUMAN
    if isinstance(raw, Player):
        return raw
    text = str(raw).strip().lower()
    if text in ("user", "human"):
        return Player.HUMAN
    if text == "computer":
        return Player.COMPUTER
    raise ConfigError(f"Unknown starting player: {raw!r}")


def default_pile_sizes() -> Tuple[int, ...]:
    return parse_pile_sizes(DEFAULT_PILES_TEXT)


def setup_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """Configures root logging for the CLI and the web app."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger("nim_core")
