"""Gymnasium environments for the block puzzle engine."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="BlockPuzzle-9x9-v0",
    entry_point="block_puzzle.env.block_puzzle_env:BlockPuzzleEnv",
)

__all__ = []
