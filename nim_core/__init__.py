"""
Nim core Python package.

This package holds the game engine and pure-logic helpers so the Flask app,
the CLI and the tests can share a single implementation.
Modules:
- pile.py: Pile
- state.py: Player, Move, InitialConfig
- strategy.py: Nim-sum and optimal move selection
- engine.py: NimGame
- config.py: defaults, env overrides, pile-config parsing, logging setup
"""
