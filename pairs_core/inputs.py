from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .board import Coord, is_valid_dimensions

# ASCII digits only; int() alone would also take '1_0' or non-Latin digits.
_INT_RE = re.compile(r'[+-]?[0-9]+')


def _two_ints(text: str) -> Optional[Tuple[int, int]]:
    """Reads the leading two integers of a line; anything after them is ignored."""
    sep = ',' if ',' in text else None
    parts: List[str] = [t.strip() for t in text.split(sep) if t.strip() != '']
    if len(parts) < 2:
        return None
    if not (_INT_RE.fullmatch(parts[0]) and _INT_RE.fullmatch(parts[1])):
        return None
    return int(parts[0]), int(parts[1])


def parse_coord(text: str, rows: int, cols: int) -> Optional[Coord]:
    """Parses a 1-based "row col" selection into a 0-based coordinate, or None."""
    pair = _two_ints(text)
    if pair is None:
        return None
    r, c = pair[0] - 1, pair[1] - 1
    if 0 <= r < rows and 0 <= c < cols:
        return (r, c)
    return None


def parse_board_size(text: str, default: Tuple[int, int]) -> Tuple[int, int, Optional[str]]:
    """Turns the startup answer into board dimensions.

    Returns (rows, cols, message); message is set when the default was
    substituted for something the player typed. Only a truly empty answer
    takes the default silently.
    """
    d_rows, d_cols = default
    label = f'{d_rows}x{d_cols}'
    if text == '':
        return d_rows, d_cols, None
    pair = _two_ints(text)
    if pair is None:
        return d_rows, d_cols, f'Invalid input. Using default {label}.'
    rows, cols = pair
    if not is_valid_dimensions(rows, cols):
        return d_rows, d_cols, f'Invalid board dimensions. Using default {label}.'
    return rows, cols, None
