from __future__ import annotations

import argparse
from typing import List, Optional

from .config import ConfigError, DEFAULT_PILES_TEXT, parse_pile_sizes, parse_starting_player, setup_logging
from .engine import NimGame
from .state import Player


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Nim against a perfect-play computer')
    parser.add_argument('--piles', default=DEFAULT_PILES_TEXT, help='Comma-separated pile sizes, e.g. "3,4,5"')
    parser.add_argument('--starter', default='user', help='Who moves first: user or computer')
    parser.add_argument('--hint', action='store_true', help='Show the optimal move before each of your turns')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, WARNING, ...)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    try:
        sizes = parse_pile_sizes(args.piles)
        starter = parse_starting_player(args.starter)
    except ConfigError as e:
        parser.error(str(e))

    game = NimGame(sizes, starter)
    print('Initial piles:')
    print(game.pretty())
    print(f"{'You move' if starter is Player.HUMAN else 'The computer moves'} first.")

    def prompt_human_move(g: NimGame):
        if args.hint:
            hint = g.calculate_best_move()
            if hint is not None:
                label = 'winning' if g.is_winning_position() else 'losing'
                print(f"Hint ({label} position): take {hint.amount} from pile {hint.pile_index}")
        while True:
            text = input('Enter your move as "pile amount" or "pile,amount": ').strip()
            sep = ',' if ',' in text else ' '
            try:
                p_s, a_s = [t for t in text.split(sep) if t != '']
                return int(p_s), int(a_s)
            except ValueError:
                print('Could not parse. Try again.')

    while not game.game_over:
        if game.current_player is Player.COMPUTER:
            move = game.make_ai_move()
            if move is None:
                print('error: the computer has no move to make.')
                return
            print(f"Computer takes {move.amount} from pile {move.pile_index}")
        else:
            pile_index, amount = prompt_human_move(game)
            if not game.user_move(pile_index, amount):
                print('Illegal move. Try again.')
                continue
        print(game.pretty())

    if game.winner is Player.HUMAN:
        print('You win!')
    else:
        print('The computer wins.')
