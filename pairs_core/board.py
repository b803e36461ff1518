from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .card import Card

Coord = Tuple[int, int]  # (row, col), 0-based


class BoardConfigError(ValueError):
    """Raised when a board is requested with dimensions that cannot be fully paired."""


def is_valid_dimensions(rows: int, cols: int) -> bool:
    return rows > 0 and cols > 0 and (rows * cols) % 2 == 0


def validate_dimensions(rows: int, cols: int) -> None:
    if not is_valid_dimensions(rows, cols):
        raise BoardConfigError('Board must have positive rows/cols and an even number of cells.')


@dataclass
class Board:
    """Represents the grid of cards, its dimensions and the per-cell mutators."""
    rows: int
    cols: int
    cells: List[Card]  # row-major, length == rows * cols

    def __post_init__(self) -> None:
        validate_dimensions(self.rows, self.cols)
        if len(self.cells) != self.rows * self.cols:
            raise BoardConfigError(
                f'Expected {self.rows * self.cols} cards for a {self.rows}x{self.cols} board, got {len(self.cells)}.'
            )

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Iterable[str]) -> 'Board':
        """Lays the given values out in row-major order, all face-down."""
        return cls(rows=rows, cols=cols, cells=[Card(v) for v in values])

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> Card:
        """Gets the card at a given row and column; no wrap-around."""
        if not self.in_bounds(r, c):
            raise IndexError(f'({r}, {c}) is outside a {self.rows}x{self.cols} board')
        return self.cells[self.index(r, c)]

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def reveal_at(self, r: int, c: int) -> None:
        self.at(r, c).reveal()

    def hide_at(self, r: int, c: int) -> None:
        self.at(r, c).hide()

    def match_at(self, r: int, c: int) -> None:
        self.at(r, c).set_matched()

    def all_matched(self) -> bool:
        return all(card.matched for card in self.cells)

    def pretty(self, show_coords: bool = True) -> str:
        """Generates the text rendering of the board with a border grid."""
        border = '   +' + '-' * (self.cols * 4) + '+'
        lines: List[str] = ['']
        if show_coords:
            lines.append('    ' + ''.join(f'{c + 1:>3} ' for c in range(self.cols)))
        lines.append(border)
        for r in range(self.rows):
            prefix = f'{r + 1:>2} |' if show_coords else '   |'
            row = ''.join(f' {self.at(r, c).face()} |' for c in range(self.cols))
            lines.append(prefix + row)
            lines.append(border)
        lines.append('')
        return '\n'.join(lines)
