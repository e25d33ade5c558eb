from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .blocks import Block
from .errors import InvalidConfigurationError
from .generator import BlockGenerator


LOGGER = logging.getLogger(__name__)


@dataclass
class CandidateQueueConfig:
    capacity: int = 3
    auto_refill: bool = True


class CandidateQueue:
    """Fixed number of slots holding the blocks the player may place next.

    With auto refill on, a selected slot is refilled before `select_candidate`
    returns, so the queue is never observed short of capacity.
    """

    def __init__(self, generator: BlockGenerator, config: Optional[CandidateQueueConfig] = None) -> None:
        config = config or CandidateQueueConfig()
        if config.capacity < 1:
            raise InvalidConfigurationError(f"Queue capacity must be at least 1, got {config.capacity}")
        self.generator = generator
        self.capacity = int(config.capacity)
        self.auto_refill = bool(config.auto_refill)
        self._slots: List[Optional[Block]] = [None] * self.capacity
        self.refill_all()

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < self.capacity

    def get_capacity(self) -> int:
        return self.capacity

    def get_candidate(self, index: int) -> Optional[Block]:
        if not self._valid_index(index):
            return None
        return self._slots[index]

    def get_all_candidates(self) -> List[Optional[Block]]:
        return list(self._slots)

    def has_candidate(self, index: int) -> bool:
        return self._valid_index(index) and self._slots[index] is not None

    def select_candidate(self, index: int) -> Optional[Block]:
        if not self._valid_index(index):
            return None
        selected = self._slots[index]
        if selected is None:
            return None
        self._slots[index] = None
        if self.auto_refill:
            self._slots[index] = self.generator.generate()
        LOGGER.debug("Selected %s from slot %d", selected.kind.name, index)
        return selected

    def refill_slot(self, index: int) -> bool:
        if not self._valid_index(index):
            return False
        self._slots[index] = self.generator.generate()
        return True

    def refill_all(self) -> None:
        for i, block in enumerate(self._slots):
            if block is None:
                self._slots[i] = self.generator.generate()

    def is_full(self) -> bool:
        return all(block is not None for block in self._slots)

    def is_empty(self) -> bool:
        return all(block is None for block in self._slots)

    def get_count(self) -> int:
        return sum(1 for block in self._slots if block is not None)

    def reset(self) -> None:
        self.clear()
        self.refill_all()

    def clear(self) -> None:
        self._slots = [None] * self.capacity

    def set_auto_refill(self, enable: bool) -> None:
        self.auto_refill = bool(enable)

    def is_auto_refill_enabled(self) -> bool:
        return self.auto_refill

    def set_generator(self, generator: BlockGenerator) -> None:
        self.generator = generator

    def get_generator(self) -> BlockGenerator:
        return self.generator
