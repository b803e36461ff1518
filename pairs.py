from __future__ import annotations

# Facade module that re-exports the Pairs core functionality.
# Tests and scripts import from here; single-responsibility modules live
# under pairs_core/*.

import sys

from pairs_core.card import Card
from pairs_core.board import (
    Board,
    BoardConfigError,
    Coord,
    is_valid_dimensions,
    validate_dimensions,
)
from pairs_core.deal import (
    MAX_DISTINCT_PAIRS,
    VALUE_POOL,
    build_deck,
    deal_board,
    make_values,
)
from pairs_core.turns import Game, Outcome, Phase, TurnResult
from pairs_core.inputs import parse_board_size, parse_coord
from pairs_core.cli import main as _main, play, prompt_coord


def main() -> None:
    # CLI driver delegated to pairs_core.cli
    sys.exit(_main())


if __name__ == '__main__':
    main()
