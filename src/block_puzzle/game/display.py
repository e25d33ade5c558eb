from __future__ import annotations

from typing import Iterable

import numpy as np

from .blocks import Block

FILLED = "█"
EMPTY = "·"


def _format_rows(rows: Iterable[Iterable[object]]) -> str:
    return "\n".join("".join(FILLED if cell else EMPTY for cell in row) for row in rows)


def format_board(state: np.ndarray) -> str:
    """Render an occupancy matrix, one text line per row."""
    return _format_rows(state)


def format_block(block: Block) -> str:
    return _format_rows(block.to_array())
