from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .blocks import Block, BlockTypeLike
from .board import Board
from .candidates import CandidateQueue, CandidateQueueConfig
from .generator import BlockGenerator
from .placement import PlacementManager, PlacementResult, ScoreConfig


LOGGER = logging.getLogger(__name__)

REASON_NOT_STARTED = "Game not started"
REASON_INVALID_CANDIDATE = "Invalid candidate index"

Move = Tuple[int, int, int]  # (candidate_index, row, col)


class GameState(IntEnum):
    READY = 0
    PLAYING = 1
    GAME_OVER = 2


@dataclass
class GameSessionConfig:
    queue_capacity: int = 3
    seed: Optional[int] = None
    block_types: Optional[Sequence[BlockTypeLike]] = None
    score_config: Optional[ScoreConfig] = None


@dataclass
class PlaceCandidateResult(PlacementResult):
    game_over: bool = False


class GameSession:
    def __init__(self, config: Optional[GameSessionConfig] = None) -> None:
        self.config = config or GameSessionConfig()
        self.board = Board()
        self.generator = BlockGenerator(seed=self.config.seed, block_types=self.config.block_types)
        self.queue = CandidateQueue(self.generator, CandidateQueueConfig(capacity=self.config.queue_capacity))
        self.placement_manager = PlacementManager(self.board, self.config.score_config)
        self.total_score = 0
        self.move_count = 0
        self.lines_cleared_total = 0
        self.state = GameState.READY

    def start(self) -> None:
        self.reset()
        self.state = GameState.PLAYING
        LOGGER.info("Game started (seed=%s)", self.config.seed)

    def reset(self) -> None:
        self.board.reset()
        self.queue.reset()
        self.total_score = 0
        self.move_count = 0
        self.lines_cleared_total = 0
        self.state = GameState.READY
        LOGGER.info("Game reset")

    def place_candidate(self, candidate_index: int, row: int, col: int) -> PlaceCandidateResult:
        if self.state != GameState.PLAYING:
            return PlaceCandidateResult(success=False, reason=REASON_NOT_STARTED)

        candidate = self.queue.get_candidate(candidate_index)
        if candidate is None:
            return PlaceCandidateResult(success=False, reason=REASON_INVALID_CANDIDATE)

        positions = candidate.get_absolute_positions(row, col)
        result = self.placement_manager.place(positions)
        if not result.success:
            return PlaceCandidateResult(
                success=False,
                cleared_rows=result.cleared_rows,
                cleared_columns=result.cleared_columns,
                score=result.score,
                reason=result.reason,
            )

        self.queue.select_candidate(candidate_index)
        self.total_score += result.score
        self.move_count += 1
        self.lines_cleared_total += result.lines_cleared

        game_over = self._check_game_over()
        if game_over:
            self.state = GameState.GAME_OVER
            LOGGER.info("Game over after %d moves with score %d", self.move_count, self.total_score)

        return PlaceCandidateResult(
            success=True,
            cleared_rows=result.cleared_rows,
            cleared_columns=result.cleared_columns,
            score=result.score,
            game_over=game_over,
        )

    def _check_game_over(self) -> bool:
        """True when no remaining candidate fits anywhere on the board."""
        for candidate in self.queue.get_all_candidates():
            if candidate is not None and self._can_place_anywhere(candidate):
                return False
        return True

    def _can_place_anywhere(self, block: Block) -> bool:
        return next(self._origins_for(block), None) is not None

    def _origins_for(self, block: Block) -> Iterator[Tuple[int, int]]:
        size = self.board.get_size()
        width, height = block.get_bounds()
        for row in range(size - height + 1):
            for col in range(size - width + 1):
                if self.board.can_place_block(block.get_absolute_positions(row, col)):
                    yield row, col

    def can_place_candidate(self, candidate_index: int, row: int, col: int) -> bool:
        candidate = self.queue.get_candidate(candidate_index)
        if candidate is None:
            return False
        return self.board.can_place_block(candidate.get_absolute_positions(row, col))

    def get_valid_moves(self) -> List[Move]:
        moves: List[Move] = []
        for index, candidate in enumerate(self.queue.get_all_candidates()):
            if candidate is None:
                continue
            moves.extend((index, row, col) for row, col in self._origins_for(candidate))
        return moves

    def get_total_score(self) -> int:
        return self.total_score

    def get_move_count(self) -> int:
        return self.move_count

    def get_game_state(self) -> GameState:
        return self.state

    def get_board(self) -> Board:
        return self.board

    def get_candidate_queue(self) -> CandidateQueue:
        return self.queue

    def get_candidates(self) -> List[Optional[Block]]:
        return self.queue.get_all_candidates()

    def get_candidate(self, index: int) -> Optional[Block]:
        return self.queue.get_candidate(index)

    def get_placement_manager(self) -> PlacementManager:
        return self.placement_manager

    def is_game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def is_playing(self) -> bool:
        return self.state == GameState.PLAYING

    def get_stats(self) -> Dict[str, Any]:
        return {
            "state": self.state.name,
            "score": self.total_score,
            "moves": self.move_count,
            "lines_cleared": self.lines_cleared_total,
            "occupied_cells": self.board.get_occupied_count(),
            "fill_ratio": self.board.get_filled_ratio(),
            "avg_score_per_move": self.total_score / max(1, self.move_count),
        }
