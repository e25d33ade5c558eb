from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Protocol, Sequence

from .blocks import Block, BlockType, BlockTypeLike, resolve_block_type
from .errors import InvalidConfigurationError


LOGGER = logging.getLogger(__name__)

MINSTD_MULTIPLIER = 48271
MINSTD_MODULUS = 2147483647  # 2**31 - 1


class RandomSource(Protocol):
    def next_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high)."""
        ...


class MinstdRandom:
    """Park-Miller MINSTD linear congruential generator.

    Reproduces the same sequence for the same seed on every platform.
    """

    def __init__(self, seed: int) -> None:
        self.state = int(seed) % MINSTD_MODULUS

    def next(self) -> float:
        self.state = (MINSTD_MULTIPLIER * self.state) % MINSTD_MODULUS
        return self.state / MINSTD_MODULUS

    def next_int(self, low: int, high: int) -> int:
        return int(math.floor(self.next() * (high - low))) + low


class SystemRandomSource:
    """Non-deterministic source backed by an entropy-seeded `random.Random`."""

    def __init__(self) -> None:
        self.rng = random.Random()

    def next_int(self, low: int, high: int) -> int:
        return self.rng.randrange(low, high)


class BlockGenerator:
    def __init__(
        self,
        seed: Optional[int] = None,
        block_types: Optional[Sequence[BlockTypeLike]] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        if random_source is not None:
            self.random: RandomSource = random_source
        elif seed is not None:
            self.random = MinstdRandom(seed)
        else:
            self.random = SystemRandomSource()
        self.seed = seed
        self.available_types: List[BlockType] = list(BlockType)
        if block_types is not None:
            self.set_available_types(block_types)

    def generate(self) -> Block:
        index = self.random.next_int(0, len(self.available_types))
        return Block.create(self.available_types[index])

    def generate_multiple(self, count: int) -> List[Block]:
        return [self.generate() for _ in range(count)]

    def generate_type(self, kind: BlockTypeLike) -> Block:
        block_type = resolve_block_type(kind)
        if block_type not in self.available_types:
            raise InvalidConfigurationError(
                f"Block type {block_type.name} is not available in this generator"
            )
        return Block.create(block_type)

    def get_available_types(self) -> List[BlockType]:
        return list(self.available_types)

    def set_available_types(self, types: Sequence[BlockTypeLike]) -> None:
        resolved = [resolve_block_type(t) for t in types]
        if not resolved:
            raise InvalidConfigurationError("Available types cannot be empty")
        self.available_types = resolved

    def reset_seed(self, seed: int) -> None:
        LOGGER.debug("Reseeding block generator with %s", seed)
        self.seed = seed
        self.random = MinstdRandom(seed)


def create_default_generator() -> BlockGenerator:
    return BlockGenerator()


def create_test_generator(seed: int = 12345) -> BlockGenerator:
    return BlockGenerator(seed=seed)
