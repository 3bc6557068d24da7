from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable, Optional, Sequence

from .state import Move


def nim_sum(counts: Iterable[int]) -> int:
    """Bitwise XOR of all pile counts."""
    return reduce(xor, counts, 0)


def is_winning_position(counts: Sequence[int]) -> bool:
    """True when the player to move can force a win under normal play."""
    return nim_sum(counts) != 0


def best_move(counts: Sequence[int]) -> Optional[Move]:
    """
    Picks the optimal move for the player to move.

    With a non-zero Nim-sum `s` there is always a pile whose count drops when
    XORed with `s`; reducing that pile to `count ^ s` leaves a zero Nim-sum for
    the opponent. The lowest such index is chosen so play is reproducible.
    From a zero Nim-sum every move loses against perfect play, so the fallback
    takes a single item from the first non-empty pile.
    Returns None when every pile is empty.
    """
    s = nim_sum(counts)
    if s == 0:
        for i, count in enumerate(counts):
            if count > 0:
                return Move(pile_index=i, amount=1)
        return None
    for i, count in enumerate(counts):
        target = count ^ s
        if target < count:
            return Move(pile_index=i, amount=count - target)
    return None
