from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Player(str, Enum):
    """The two sides of a game. Values double as the browser wire format."""
    HUMAN = "user"
    COMPUTER = "computer"

    def other(self) -> 'Player':
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN


@dataclass(frozen=True)
class Move:
    """Removes `amount` items from the pile at `pile_index`."""
    pile_index: int
    amount: int

    def to_json(self) -> dict:
        return {"pileIndex": int(self.pile_index), "amount": int(self.amount)}


@dataclass(frozen=True)
class InitialConfig:
    """Baseline a game restarts from when reset is called without arguments."""
    pile_sizes: Tuple[int, ...]
    starting_player: Player
