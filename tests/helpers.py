from __future__ import annotations

from typing import Iterable, Tuple

from block_puzzle.game import Board, BlockGenerator, BlockType, CandidateQueue


def fill_cells(board: Board, cells: Iterable[Tuple[int, int]]) -> Board:
    for row, col in cells:
        board.set_cell(row, col, True)
    return board


def fill_checkerboard(board: Board) -> Board:
    """Occupy every cell with an even (row + col); no line ends up full."""
    size = board.get_size()
    return fill_cells(board, [(r, c) for r in range(size) for c in range(size) if (r + c) % 2 == 0])


def put_in_slot(queue: CandidateQueue, index: int, kind: BlockType) -> None:
    """Force `kind` into one queue slot without disturbing the others."""
    previous = queue.get_generator()
    queue.set_generator(BlockGenerator(seed=1, block_types=[kind]))
    queue.refill_slot(index)
    queue.set_generator(previous)
