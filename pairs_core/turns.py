from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Coord


class Phase(Enum):
    AWAITING_FIRST = 'awaiting_first'
    AWAITING_SECOND = 'awaiting_second'
    RESOLVING = 'resolving'
    WON = 'won'


class Outcome(Enum):
    REVEALED = 'revealed'                # first card turned face-up
    ALREADY_MATCHED = 'already_matched'  # first pick was a matched card
    SAME_CARD = 'same_card'
    SECOND_MATCHED = 'second_matched'
    MATCH = 'match'
    MISMATCH = 'mismatch'


@dataclass(frozen=True)
class TurnResult:
    outcome: Outcome
    first: Coord
    second: Optional[Coord] = None
    value: Optional[str] = None  # shared value on a match


class Game:
    """Turn state machine for a single-player session on one board.

    A turn is select_first -> select_second, followed by acknowledge() when
    the two cards did not match. ``moves`` counts turns that reached the
    comparison, whatever the result.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves = 0
        self._first: Optional[Coord] = None
        self._pending: Optional[Tuple[Coord, Coord]] = None
        self._phase = Phase.WON if board.all_matched() else Phase.AWAITING_FIRST

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_won(self) -> bool:
        return self._phase is Phase.WON

    @property
    def first(self) -> Optional[Coord]:
        return self._first

    @property
    def pending(self) -> Optional[Tuple[Coord, Coord]]:
        """The mismatched pair waiting to be hidden, if any."""
        return self._pending

    def _expect(self, phase: Phase) -> None:
        if self._phase is not phase:
            raise RuntimeError(f'Expected phase {phase.value}, game is in {self._phase.value}')

    def select_first(self, coord: Coord) -> TurnResult:
        self._expect(Phase.AWAITING_FIRST)
        card = self.board.at(*coord)
        if card.matched:
            return TurnResult(Outcome.ALREADY_MATCHED, coord)
        card.reveal()
        self._first = coord
        self._phase = Phase.AWAITING_SECOND
        return TurnResult(Outcome.REVEALED, coord)

    def select_second(self, coord: Coord) -> TurnResult:
        self._expect(Phase.AWAITING_SECOND)
        first = self._face_up_first()
        second_card = self.board.at(*coord)
        if coord == first:
            return self._abort_turn(Outcome.SAME_CARD, coord)
        if second_card.matched:
            return self._abort_turn(Outcome.SECOND_MATCHED, coord)

        second_card.reveal()
        self.moves += 1
        first_card = self.board.at(*first)
        self._first = None
        if first_card.value == second_card.value:
            first_card.set_matched()
            second_card.set_matched()
            self._phase = Phase.WON if self.board.all_matched() else Phase.AWAITING_FIRST
            return TurnResult(Outcome.MATCH, first, coord, first_card.value)
        self._pending = (first, coord)
        self._phase = Phase.RESOLVING
        return TurnResult(Outcome.MISMATCH, first, coord)

    def acknowledge(self) -> None:
        """Hides a mismatched pair once the player has seen both values."""
        self._expect(Phase.RESOLVING)
        if self._pending is None:
            raise RuntimeError('No mismatched pair is waiting to be hidden')
        for r, c in self._pending:
            self.board.hide_at(r, c)
        self._pending = None
        self._phase = Phase.AWAITING_FIRST

    def _face_up_first(self) -> Coord:
        if self._first is None:
            raise RuntimeError('No first card is face-up')
        return self._first

    def _abort_turn(self, outcome: Outcome, second: Coord) -> TurnResult:
        first = self._face_up_first()
        self.board.hide_at(*first)
        self._first = None
        self._phase = Phase.AWAITING_FIRST
        return TurnResult(outcome, first, second)
