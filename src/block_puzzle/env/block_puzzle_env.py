from __future__ import annotations

import dataclasses
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from block_puzzle.game import BlockType, GameSession, GameSessionConfig


def _compute_action_mask(session: GameSession) -> np.ndarray:
    size = session.get_board().get_size()
    k = session.get_candidate_queue().get_capacity()
    mask = np.zeros((k, size, size), dtype=np.bool_)
    for index, row, col in session.get_valid_moves():
        mask[index, row, col] = True
    return mask


class BlockPuzzleEnv(gym.Env):
    """Gymnasium view of a `GameSession`.

    Action is (candidate_index, row, col). Reward is the engine score of the
    move, or `invalid_action_penalty` when the move is rejected.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameSessionConfig] = None, render_mode: Optional[str] = None,
                 invalid_action_penalty: float = -1.0,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameSessionConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.max_episode_steps = int(max_episode_steps)

        size = self.session.get_board().get_size()
        k = self.session.get_candidate_queue().get_capacity()

        # Candidate slots hold the BlockType value, -1 for an empty slot
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=1, shape=(size, size), dtype=np.int8),
                "candidates": spaces.Box(low=-1, high=len(BlockType) - 1, shape=(k,), dtype=np.int8),
            }
        )
        self.action_space = spaces.MultiDiscrete((k, size, size))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        grid = self.session.get_board().get_state().astype(np.int8)
        candidates = np.array(
            [-1 if block is None else int(block.get_type()) for block in self.session.get_candidates()],
            dtype=np.int8,
        )
        return {"grid": grid, "candidates": candidates}

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.session),
            "score": self.session.get_total_score(),
            "moves": self.session.get_move_count(),
        }

    def get_action_mask(self) -> np.ndarray:
        return _compute_action_mask(self.session)

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.config = dataclasses.replace(self.config, seed=seed)
            self.session = GameSession(self.config)
        self.session.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: np.ndarray | Tuple[int, int, int]):
        index, row, col = map(int, action)
        result = self.session.place_candidate(index, row, col)
        self._steps += 1

        reward = float(result.score) if result.success else self.invalid_action_penalty
        terminated = self.session.is_game_over()
        truncated = self._steps >= self.max_episode_steps

        info = self._get_info()
        info["cleared_rows"] = list(result.cleared_rows)
        info["cleared_columns"] = list(result.cleared_columns)
        if not result.success:
            info["reason"] = result.reason
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.session.get_board().get_state()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        img[:, :] = (30, 30, 36)
        img[np.repeat(np.repeat(grid, cell, axis=0), cell, axis=1)] = (70, 200, 120)
        return img

    def close(self) -> None:
        pass
