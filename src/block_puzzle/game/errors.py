"""Exceptions raised by the block puzzle engine.

Only caller bugs raise. Rejected moves are reported through result objects.
"""

from __future__ import annotations


class BlockPuzzleError(ValueError):
    """Base class for engine contract violations."""


class UnknownBlockTypeError(BlockPuzzleError):
    """Raised when a block type outside the closed set is requested."""


class InvalidConfigurationError(BlockPuzzleError):
    """Raised when a generator or queue is configured into an unusable state."""


class BlockDataError(BlockPuzzleError):
    """Raised when serialized block data cannot be decoded."""
