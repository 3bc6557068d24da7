import argparse
import random
import sys
import time
from functools import lru_cache
from typing import Tuple

sys.path.append('.')
import game  # type: ignore  # noqa: E402


@lru_cache(maxsize=None)
def mover_wins(counts: Tuple[int, ...]) -> bool:
    """Exhaustive game-tree search: True if the player to move can force taking the last item."""
    for i, c in enumerate(counts):
        for take in range(1, c + 1):
            nxt = list(counts)
            nxt[i] -= take
            if not mover_wins(tuple(sorted(nxt))):
                return True
    return False


def check_position(counts: Tuple[int, ...]) -> bool:
    """True when the brute-force result agrees with the Nim-sum rule and the engine's move."""
    brute = mover_wins(tuple(sorted(counts)))
    if brute != game.is_winning_position(counts):
        return False
    if brute:
        mv = game.best_move(counts)
        if mv is None:
            return False
        after = list(counts)
        after[mv.pile_index] -= mv.amount
        return not mover_wins(tuple(sorted(after)))
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Cross-check the Nim-sum strategy against brute force')
    parser.add_argument('--positions', type=int, default=200)
    parser.add_argument('--max-piles', type=int, default=4)
    parser.add_argument('--max-count', type=int, default=7)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    mismatches = 0
    t0 = time.time()
    for _ in range(args.positions):
        n = rng.randint(1, args.max_piles)
        counts = tuple(rng.randint(0, args.max_count) for _ in range(n))
        if not any(counts):
            continue
        if not check_position(counts):
            mismatches += 1
            print(f"mismatch: {counts} nim_sum={game.nim_sum(counts)} best={game.best_move(counts)}")
    took = int((time.time() - t0) * 1000)
    print(f"Checked {args.positions} positions in {took}ms, mismatches={mismatches}")
    return 1 if mismatches else 0


if __name__ == '__main__':
    sys.exit(main())
