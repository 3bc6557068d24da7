from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .pile import Pile
from .state import InitialConfig, Move, Player
from .strategy import best_move, is_winning_position, nim_sum

logger = logging.getLogger(__name__)

DEFAULT_PILES: Tuple[int, ...] = (3, 4, 5)


def _build_piles(pile_sizes: Sequence[int]) -> List[Pile]:
    return [Pile(count=int(count), id=i) for i, count in enumerate(pile_sizes)]


class NimGame:
    """
    Owns the piles of one game, whose turn it is, and the computer opponent.

    Commands never raise for gameplay reasons: a rejected move returns False
    (or None for the computer) and leaves every piece of state untouched.
    """

    def __init__(self, pile_sizes: Sequence[int] = DEFAULT_PILES, starting_player: Player = Player.HUMAN) -> None:
        self.initial_config = InitialConfig(tuple(int(n) for n in pile_sizes), Player(starting_player))
        self.piles: List[Pile] = _build_piles(self.initial_config.pile_sizes)
        self.current_player: Player = self.initial_config.starting_player
        self.winner: Optional[Player] = None
        # A board with nothing on it is over before anyone moves; no winner.
        self.game_over = sum(self.counts()) == 0

    # ---------- Queries ----------

    def counts(self) -> Tuple[int, ...]:
        return tuple(p.count for p in self.piles)

    def nim_sum(self) -> int:
        return nim_sum(self.counts())

    def is_winning_position(self) -> bool:
        """Whether the side to move can force a win from here."""
        return is_winning_position(self.counts())

    def pretty(self) -> str:
        """Generates a human-readable view of the piles, one row per pile."""
        width = len(str(max(len(self.piles) - 1, 0)))
        lines = []
        for pile in self.piles:
            items = " ".join("o" * pile.count) if pile.count else "-"
            lines.append(f"{pile.id:>{width}} | {items} ({pile.count})")
        return "\n".join(lines)

    # ---------- Commands ----------

    def user_move(self, pile_index: int, amount: int) -> bool:
        """Applies the human's move. Returns False without side effects if it is rejected."""
        if self.current_player is not Player.HUMAN or self.game_over:
            return False
        if not 0 <= pile_index < len(self.piles):
            logger.warning("Invalid move: no pile at index %s", pile_index)
            return False
        success = self.piles[pile_index].remove_items(amount)
        if success:
            logger.debug("human took %s from pile %s", amount, pile_index)
            self._finish_turn()
        return success

    def calculate_best_move(self) -> Optional[Move]:
        """The Nim-sum optimal move for whoever is to move; None if every pile is empty."""
        return best_move(self.counts())

    def make_ai_move(self) -> Optional[Move]:
        """Plays the computer's turn and returns the move made, or None if it is not the computer's turn."""
        if self.current_player is not Player.COMPUTER or self.game_over:
            return None
        move = self.calculate_best_move()
        if move is not None:
            self.piles[move.pile_index].remove_items(move.amount)
            logger.debug("computer took %s from pile %s", move.amount, move.pile_index)
            self._finish_turn()
        return move

    def check_game_over(self) -> None:
        """Ends the game once every pile is empty. The player who just moved wins (normal play)."""
        if self.game_over:
            return
        if sum(p.count for p in self.piles) == 0:
            self.game_over = True
            self.winner = self.current_player
            logger.info("game over, winner: %s", self.winner.value)

    def reset(self, pile_sizes: Optional[Sequence[int]] = None, starting_player: Optional[Player] = None) -> None:
        """Restarts the game. Given arguments become the baseline for later argument-less resets."""
        sizes = self.initial_config.pile_sizes if pile_sizes is None else tuple(int(n) for n in pile_sizes)
        starter = self.initial_config.starting_player if starting_player is None else Player(starting_player)
        self.initial_config = InitialConfig(sizes, starter)

        self.piles = _build_piles(sizes)
        self.current_player = starter
        self.winner = None
        self.game_over = sum(self.counts()) == 0

    def _finish_turn(self) -> None:
        self.check_game_over()
        if not self.game_over:
            self.current_player = self.current_player.other()
