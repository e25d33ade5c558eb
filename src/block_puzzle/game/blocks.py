from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List, NamedTuple, Tuple, Union

import numpy as np

from .errors import BlockDataError, UnknownBlockTypeError


class Position(NamedTuple):
    row: int
    col: int


class Bounds(NamedTuple):
    width: int
    height: int


class BlockType(IntEnum):
    SINGLE = 0
    LINE_2 = 1
    LINE_3 = 2
    LINE_4 = 3
    LINE_5 = 4
    SQUARE_2X2 = 5
    SQUARE_3X3 = 6
    L_SMALL = 7  # 3 cells
    L_MEDIUM = 8  # 4 cells
    L_LARGE = 9  # 5 cells
    T_SHAPE = 10  # 5 cells


Shape = Tuple[Position, ...]
BlockTypeLike = Union[BlockType, int, str]

VALID_ROTATIONS = (0, 90, 180, 270)


def _cells(*pairs: Tuple[int, int]) -> Shape:
    return tuple(Position(r, c) for r, c in pairs)


BASE_SHAPES: Dict[BlockType, Shape] = {
    BlockType.SINGLE: _cells((0, 0)),
    BlockType.LINE_2: _cells((0, 0), (0, 1)),
    BlockType.LINE_3: _cells((0, 0), (0, 1), (0, 2)),
    BlockType.LINE_4: _cells((0, 0), (0, 1), (0, 2), (0, 3)),
    BlockType.LINE_5: _cells((0, 0), (0, 1), (0, 2), (0, 3), (0, 4)),
    BlockType.SQUARE_2X2: _cells((0, 0), (0, 1), (1, 0), (1, 1)),
    BlockType.SQUARE_3X3: _cells(
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ),
    BlockType.L_SMALL: _cells((0, 0), (1, 0), (1, 1)),
    BlockType.L_MEDIUM: _cells((0, 0), (1, 0), (2, 0), (2, 1)),
    BlockType.L_LARGE: _cells((0, 0), (1, 0), (2, 0), (3, 0), (3, 1)),
    BlockType.T_SHAPE: _cells((0, 0), (0, 1), (0, 2), (1, 1), (2, 1)),
}


def resolve_block_type(kind: BlockTypeLike) -> BlockType:
    """Map an enum member, its integer value or its name onto `BlockType`."""
    if isinstance(kind, BlockType):
        return kind
    if isinstance(kind, bool):
        raise UnknownBlockTypeError(f"Unknown block type: {kind!r}")
    try:
        if isinstance(kind, str):
            return BlockType[kind]
        # numpy integers come out of env observations
        return BlockType(operator.index(kind))
    except (KeyError, TypeError, ValueError) as exc:
        raise UnknownBlockTypeError(f"Unknown block type: {kind!r}") from exc


def _normalize(cells: Iterable[Position]) -> Shape:
    cells = tuple(cells)
    if not cells:
        return ()
    min_row = min(p.row for p in cells)
    min_col = min(p.col for p in cells)
    return tuple(Position(p.row - min_row, p.col - min_col) for p in cells)


@dataclass(frozen=True)
class Block:
    """A placeable shape. Rotating or cloning returns a new instance."""

    kind: BlockType
    shape: Shape
    rotation: int = 0  # degrees clockwise from the canonical shape

    @classmethod
    def create(cls, kind: BlockTypeLike) -> "Block":
        block_type = resolve_block_type(kind)
        return cls(block_type, BASE_SHAPES[block_type], 0)

    def get_type(self) -> BlockType:
        return self.kind

    def get_shape(self) -> List[Position]:
        return list(self.shape)

    def get_rotation(self) -> int:
        return self.rotation

    def get_absolute_positions(self, base_row: int, base_col: int) -> List[Position]:
        return [Position(base_row + p.row, base_col + p.col) for p in self.shape]

    def rotate(self) -> "Block":
        """Rotate 90 degrees clockwise: (row, col) -> (col, -row), then normalize."""
        turned = (Position(p.col, -p.row) for p in self.shape)
        return Block(self.kind, _normalize(turned), (self.rotation + 90) % 360)

    def clone(self) -> "Block":
        return Block(self.kind, tuple(self.shape), self.rotation)

    def get_bounds(self) -> Bounds:
        if not self.shape:
            return Bounds(0, 0)
        return Bounds(
            width=max(p.col for p in self.shape) + 1,
            height=max(p.row for p in self.shape) + 1,
        )

    def get_cell_count(self) -> int:
        return len(self.shape)

    def to_array(self) -> np.ndarray:
        width, height = self.get_bounds()
        arr = np.zeros((height, width), dtype=np.int8)
        for r, c in self.shape:
            arr[r, c] = 1
        return arr

    def serialize(self) -> Dict[str, Any]:
        return {
            "type": self.kind.name,
            "shape": [{"row": p.row, "col": p.col} for p in self.shape],
            "rotation": self.rotation,
        }

    @classmethod
    def deserialize(cls, data: Dict[str, Any]) -> "Block":
        try:
            raw_type = data["type"]
            raw_shape = data["shape"]
            rotation = int(data["rotation"])
            shape = tuple(Position(int(p["row"]), int(p["col"])) for p in raw_shape)
        except (KeyError, TypeError, ValueError) as exc:
            raise BlockDataError(f"Malformed block data: {data!r}") from exc
        block_type = resolve_block_type(raw_type)
        if rotation not in VALID_ROTATIONS:
            raise BlockDataError(f"Invalid rotation: {rotation}")
        if not shape:
            raise BlockDataError(f"Empty shape for block type {block_type.name}")
        return cls(block_type, _normalize(shape), rotation)


def create_block(kind: BlockTypeLike) -> Block:
    return Block.create(kind)
