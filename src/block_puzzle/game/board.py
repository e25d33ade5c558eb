from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np


Coordinate = Tuple[int, int]

BOARD_SIZE = 9


class Board:
    """Fixed 9x9 occupancy grid.

    Cells hold True when occupied. Coordinates are (row, col) with row 0 at
    the top. Reads outside the grid report an empty cell; writes outside the
    grid are rejected without touching anything.
    """

    def __init__(self) -> None:
        self.size = BOARD_SIZE
        self._grid = np.zeros((self.size, self.size), dtype=np.bool_)

    def get_size(self) -> int:
        return self.size

    def reset(self) -> None:
        self._grid.fill(False)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> bool:
        if not self.is_inside(row, col):
            return False
        return bool(self._grid[row, col])

    def set_cell(self, row: int, col: int, occupied: bool) -> bool:
        if not self.is_inside(row, col):
            return False
        self._grid[row, col] = bool(occupied)
        return True

    def can_place_block(self, positions: Iterable[Coordinate]) -> bool:
        for row, col in positions:
            if not self.is_inside(row, col) or self._grid[row, col]:
                return False
        return True

    def place_block(self, positions: Iterable[Coordinate]) -> bool:
        """Occupy every position, or none of them if any is blocked."""
        cells = list(positions)
        if not self.can_place_block(cells):
            return False
        for row, col in cells:
            self._grid[row, col] = True
        return True

    def remove_block(self, positions: Iterable[Coordinate]) -> bool:
        cells = list(positions)
        for row, col in cells:
            if not self.is_inside(row, col):
                return False
        for row, col in cells:
            self._grid[row, col] = False
        return True

    def get_full_rows(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(np.all(self._grid, axis=1))]

    def get_full_columns(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(np.all(self._grid, axis=0))]

    def clear_rows(self, rows: Sequence[int]) -> None:
        for row in rows:
            # stale indices are ignored
            if 0 <= row < self.size:
                self._grid[row, :] = False

    def clear_columns(self, columns: Sequence[int]) -> None:
        for col in columns:
            if 0 <= col < self.size:
                self._grid[:, col] = False

    def get_state(self) -> np.ndarray:
        return self._grid.copy()

    def get_occupied_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def get_filled_ratio(self) -> float:
        return self.get_occupied_count() / float(self.size * self.size)

    def copy(self) -> "Board":
        new_board = Board()
        new_board._grid = self._grid.copy()
        return new_board
