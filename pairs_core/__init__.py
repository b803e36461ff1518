"""
Pairs core Python package.

Data structures and pure-logic helpers for the memory-matching game, kept
apart from the console driver so they can be tested without a terminal.
Modules:
- card.py: Card
- board.py: Board, Coord, BoardConfigError
- deal.py: value pool, deck building, shuffled deal
- turns.py: Game turn state machine
- inputs.py: coordinate and board-size parsing
- cli.py: interactive console driver
"""
