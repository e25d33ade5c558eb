from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .board import Board


LOGGER = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

REASON_OUT_OF_BOUNDS = "Out of bounds"
REASON_OCCUPIED = "Position occupied"


@dataclass(frozen=True)
class ScoreConfig:
    cell_placement_score: int = 1
    line_score: int = 10
    combo_multiplier: float = 1.5


@dataclass
class PlacementResult:
    success: bool
    cleared_rows: List[int] = field(default_factory=list)
    cleared_columns: List[int] = field(default_factory=list)
    score: int = 0
    reason: Optional[str] = None

    @property
    def lines_cleared(self) -> int:
        return len(self.cleared_rows) + len(self.cleared_columns)


class PlacementManager:
    """Runs one move against a board: validate, place, detect, clear, score.

    A move that fails validation leaves the board untouched.
    """

    def __init__(self, board: Board, score_config: Optional[ScoreConfig] = None) -> None:
        self.board = board
        self.score_config = score_config or ScoreConfig()

    def place(self, positions: Sequence[Coordinate]) -> PlacementResult:
        positions = list(positions)
        if not self.board.can_place_block(positions):
            reason = self._failure_reason(positions)
            LOGGER.debug("Placement rejected: %s", reason)
            return PlacementResult(success=False, reason=reason)

        self.board.place_block(positions)
        return self._resolve_lines(self.board, len(positions))

    def preview(self, positions: Sequence[Coordinate]) -> PlacementResult:
        """Result `place` would return, computed on a scratch copy of the board."""
        positions = list(positions)
        if not self.board.can_place_block(positions):
            return PlacementResult(success=False, reason=self._failure_reason(positions))
        scratch = self.board.copy()
        scratch.place_block(positions)
        return self._resolve_lines(scratch, len(positions))

    def _resolve_lines(self, board: Board, cell_count: int) -> PlacementResult:
        full_rows = board.get_full_rows()
        full_columns = board.get_full_columns()
        if full_rows:
            board.clear_rows(full_rows)
        if full_columns:
            board.clear_columns(full_columns)
        score = self.calculate_score(cell_count, len(full_rows), len(full_columns))
        if full_rows or full_columns:
            LOGGER.debug("Cleared rows %s and columns %s", full_rows, full_columns)
        return PlacementResult(
            success=True,
            cleared_rows=full_rows,
            cleared_columns=full_columns,
            score=score,
        )

    def calculate_score(self, cell_count: int, row_count: int, column_count: int) -> int:
        cfg = self.score_config
        base_score = cell_count * cfg.cell_placement_score
        total_lines = row_count + column_count
        if total_lines == 0:
            return int(base_score)
        line_score = total_lines * cfg.line_score
        combo_bonus = 0
        if total_lines >= 2:
            combo_bonus = math.floor(line_score * (total_lines - 1) * (cfg.combo_multiplier - 1))
        return int(base_score + line_score + combo_bonus)

    def _failure_reason(self, positions: Sequence[Coordinate]) -> str:
        # Bounds are reported before occupancy.
        for row, col in positions:
            if not self.board.is_inside(row, col):
                return REASON_OUT_OF_BOUNDS
        return REASON_OCCUPIED

    def get_score_config(self) -> ScoreConfig:
        return self.score_config

    def update_score_config(
        self,
        *,
        cell_placement_score: Optional[int] = None,
        line_score: Optional[int] = None,
        combo_multiplier: Optional[float] = None,
    ) -> None:
        changes = {}
        if cell_placement_score is not None:
            changes["cell_placement_score"] = cell_placement_score
        if line_score is not None:
            changes["line_score"] = line_score
        if combo_multiplier is not None:
            changes["combo_multiplier"] = combo_multiplier
        self.score_config = dataclasses.replace(self.score_config, **changes)
