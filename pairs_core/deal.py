from __future__ import annotations

import random
from typing import List, Optional

from .board import Board, validate_dimensions

# Ordered symbol pool; pair values are taken from the front.
VALUE_POOL = (
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    'abcdefghijklmnopqrstuvwxyz'
    '0123456789'
    '!@#$%^&*'
)
MAX_DISTINCT_PAIRS = len(VALUE_POOL)


def make_values(pair_count: int) -> List[str]:
    """Picks one value per pair, cycling the pool once it runs out."""
    return [VALUE_POOL[i % len(VALUE_POOL)] for i in range(pair_count)]


def build_deck(pair_count: int) -> List[str]:
    """Builds the unshuffled deck: every value twice, in pool order."""
    deck: List[str] = []
    for value in make_values(pair_count):
        deck.extend([value, value])
    return deck


def deal_board(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Creates a rows x cols board with a freshly shuffled paired deck.

    An explicit ``rng`` wins over ``seed``; with neither, the generator is
    seeded from OS entropy.
    """
    validate_dimensions(rows, cols)
    if rng is None:
        rng = random.Random(seed)
    deck = build_deck((rows * cols) // 2)
    rng.shuffle(deck)
    return Board.from_values(rows, cols, deck)
