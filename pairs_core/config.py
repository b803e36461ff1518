from __future__ import annotations

import os
from typing import Optional

DEFAULT_ROWS = 4
DEFAULT_COLS = 4
HIDDEN_GLYPH = '*'


def env_seed() -> Optional[int]:
    """Reads PAIRS_SEED from the environment; unset or non-numeric means no fixed seed."""
    raw = os.getenv('PAIRS_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None
