from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from .board import BoardConfigError, Coord
from .config import DEFAULT_COLS, DEFAULT_ROWS, env_seed
from .deal import MAX_DISTINCT_PAIRS, deal_board
from .inputs import parse_board_size, parse_coord
from .turns import Game, Outcome

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

INVALID_COORD = 'Invalid input. Use: <row> <col>  (e.g. 2 3)'


def _stdout_write(text: str) -> None:
    print(text, end='', flush=True)


def prompt_coord(label: str, rows: int, cols: int, read_line: ReadLine, write: Write) -> Coord:
    """Asks until the player enters an in-bounds 1-based "row col" pair."""
    while True:
        coord = parse_coord(read_line(label), rows, cols)
        if coord is not None:
            return coord
        write(INVALID_COORD + '\n')


def play(
    game: Game,
    read_line: ReadLine = input,
    write: Write = _stdout_write,
    show_coords: bool = True,
) -> int:
    """Runs the interactive loop until every pair is matched; returns the move count."""
    board = game.board

    def show() -> None:
        write(board.pretty(show_coords) + '\n')

    write('Memory Puzzle (no timers, press Enter when asked)\n')
    write(f'Board: {board.rows}x{board.cols}\n')
    write('Choose cards by entering row and column numbers separated by space.\n')
    read_line('Press Enter to start...')

    while not game.is_won:
        show()
        write(f'Moves: {game.moves}\n')

        first = prompt_coord('Select first card (row col): ', board.rows, board.cols, read_line, write)
        res = game.select_first(first)
        if res.outcome is Outcome.ALREADY_MATCHED:
            write('That card is already matched. Choose another.\n')
            continue
        show()

        second = prompt_coord('Select second card (row col): ', board.rows, board.cols, read_line, write)
        res = game.select_second(second)
        if res.outcome is Outcome.SAME_CARD:
            write('You selected the same card twice. Try again.\n')
            continue
        if res.outcome is Outcome.SECOND_MATCHED:
            write('Second card already matched. Try again.\n')
            continue

        show()
        if res.outcome is Outcome.MATCH:
            write(f'MATCH! ({res.value})\n')
        else:
            write('Not a match.\n')
            # Both values stay visible until the player confirms.
            read_line('Press Enter to continue and hide the two cards...')
            game.acknowledge()

    show()
    write('CONGRATULATIONS! All pairs matched.\n')
    write(f'Total moves: {game.moves}\n')
    return game.moves


def _read_startup_size(read_line: ReadLine, write: Write) -> str:
    write('Enter board size (rows cols) or press Enter for default 4 4:\n')
    try:
        return read_line('> ')
    except EOFError:
        return ''


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Terminal memory-matching game')
    parser.add_argument('--rows', type=int, default=None, help='Number of board rows')
    parser.add_argument('--cols', type=int, default=None, help='Number of board columns')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal (env: PAIRS_SEED)')
    parser.add_argument('--hide-coords', action='store_true', help='Do not print row/column numbers')
    return parser


def main(
    argv: Optional[List[str]] = None,
    read_line: ReadLine = input,
    write: Write = _stdout_write,
) -> int:
    args = build_parser().parse_args(argv)
    default = (DEFAULT_ROWS, DEFAULT_COLS)
    try:
        if args.rows is None and args.cols is None:
            answer = _read_startup_size(read_line, write)
        else:
            rows = DEFAULT_ROWS if args.rows is None else args.rows
            cols = DEFAULT_COLS if args.cols is None else args.cols
            answer = f'{rows} {cols}'
        rows, cols, message = parse_board_size(answer, default)
        if message:
            write(message + '\n')
        if (rows * cols) // 2 > MAX_DISTINCT_PAIRS:
            print(
                f'warning: {rows}x{cols} needs more than {MAX_DISTINCT_PAIRS} symbols; some values will repeat',
                file=sys.stderr,
            )

        seed = args.seed if args.seed is not None else env_seed()
        game = Game(deal_board(rows, cols, seed=seed))
        play(game, read_line=read_line, write=write, show_coords=not args.hide_coords)
    except BoardConfigError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    except EOFError:
        write('\nInput closed. Game abandoned.\n')
        return 0
    except KeyboardInterrupt:
        write('\nGame abandoned.\n')
        return 130
    return 0
