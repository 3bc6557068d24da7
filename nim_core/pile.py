from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Pile:
    """A single heap of items. `id` is the pile's position on the board."""
    count: int
    id: int

    def remove_items(self, amount: int) -> bool:
        """Takes `amount` items away; rejects amounts outside 1..count without touching state."""
        if 0 < amount <= self.count:
            self.count -= amount
            return True
        logger.warning("Invalid move: trying to remove %s from pile %s of %s", amount, self.id, self.count)
        return False

    def is_empty(self) -> bool:
        return self.count == 0

    def reset(self, new_count: int) -> None:
        self.count = new_count
