from __future__ import annotations

from dataclasses import dataclass

from .config import HIDDEN_GLYPH


@dataclass
class Card:
    """A single face-down card. Once matched it stays face-up for good."""
    value: str
    revealed: bool = False
    matched: bool = False

    def reveal(self) -> None:
        if not self.matched:
            self.revealed = True

    def hide(self) -> None:
        if not self.matched:
            self.revealed = False

    def set_matched(self) -> None:
        self.matched = True
        self.revealed = True

    def face(self, hidden: str = HIDDEN_GLYPH) -> str:
        """Returns the glyph shown for this card on the board."""
        if self.matched or self.revealed:
            return self.value
        return hidden
