from __future__ import annotations

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .block_puzzle_env import _compute_action_mask


class FlattenDiscreteActionWrapper(gym.ActionWrapper):
    """Flattens MultiDiscrete (candidate, row, col) -> Discrete(N).

    Also exposes `get_action_mask()` returning a 1D boolean mask of shape (N,).
    Order: candidate, row, col (C-order flattening).
    """

    def __init__(self, env: gym.Env):
        super().__init__(env)
        assert isinstance(env.action_space, spaces.MultiDiscrete)
        k, rows, cols = map(int, env.action_space.nvec)
        self.k = k
        self.rows = rows
        self.cols = cols
        self.n = int(k * rows * cols)
        self.action_space = spaces.Discrete(self.n)

    def _unflatten(self, idx: int) -> tuple[int, int, int]:
        col = idx % self.cols
        idx //= self.cols
        row = idx % self.rows
        candidate = idx // self.rows
        return int(candidate), int(row), int(col)

    def action(self, action: int):  # type: ignore[override]
        return np.array(self._unflatten(int(action)), dtype=np.int64)

    def get_action_mask(self) -> np.ndarray:
        mask3d = _compute_action_mask(self.env.unwrapped.session)
        return mask3d.reshape(-1)
