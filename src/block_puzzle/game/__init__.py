"""Rules engine for the 9x9 block placement puzzle.

Exports the core game engine and supporting classes:
- Block / BlockType: shapes with rotation and serialization
- BlockGenerator: seeded or entropy-backed block sampler
- Board: 9x9 occupancy grid with line detection and clearing
- CandidateQueue: fixed slots of blocks offered to the player
- PlacementManager / ScoreConfig: one move from validation to score
- GameSession: READY -> PLAYING -> GAME_OVER state machine
"""

from .blocks import BASE_SHAPES, Block, BlockType, Bounds, Position, create_block
from .board import Board
from .candidates import CandidateQueue, CandidateQueueConfig
from .display import format_block, format_board
from .errors import BlockDataError, BlockPuzzleError, InvalidConfigurationError, UnknownBlockTypeError
from .generator import (
    BlockGenerator,
    MinstdRandom,
    RandomSource,
    SystemRandomSource,
    create_default_generator,
    create_test_generator,
)
from .placement import PlacementManager, PlacementResult, ScoreConfig
from .session import GameSession, GameSessionConfig, GameState, PlaceCandidateResult

__all__ = [
    "BASE_SHAPES",
    "Block",
    "BlockType",
    "Bounds",
    "Position",
    "create_block",
    "Board",
    "CandidateQueue",
    "CandidateQueueConfig",
    "format_block",
    "format_board",
    "BlockDataError",
    "BlockPuzzleError",
    "InvalidConfigurationError",
    "UnknownBlockTypeError",
    "BlockGenerator",
    "MinstdRandom",
    "RandomSource",
    "SystemRandomSource",
    "create_default_generator",
    "create_test_generator",
    "PlacementManager",
    "PlacementResult",
    "ScoreConfig",
    "GameSession",
    "GameSessionConfig",
    "GameState",
    "PlaceCandidateResult",
]
