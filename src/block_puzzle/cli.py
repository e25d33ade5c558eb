from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from block_puzzle.game import GameSession, GameSessionConfig, format_block, format_board


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play a seeded block puzzle session with a first-legal-move policy.")
    p.add_argument("--seed", type=int, default=12345)
    p.add_argument("--capacity", type=int, default=3, help="Number of candidate slots")
    p.add_argument("--max-moves", type=int, default=50)
    p.add_argument("--verbose", action="store_true", help="Log every placement")
    return p


def run_session(seed: Optional[int], capacity: int, max_moves: int) -> GameSession:
    session = GameSession(GameSessionConfig(queue_capacity=capacity, seed=seed))
    session.start()
    for _ in range(max_moves):
        moves = session.get_valid_moves()
        if not moves:
            break
        index, row, col = moves[0]
        block = session.get_candidate(index)
        result = session.place_candidate(index, row, col)
        print(f"Move {session.get_move_count()}: {block.get_type().name} at ({row}, {col}) -> +{result.score}")
        print(format_block(block))
        print(format_board(session.get_board().get_state()))
        print()
        if result.game_over:
            break
    return session


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    session = run_session(args.seed, args.capacity, args.max_moves)
    stats = session.get_stats()
    print("=== Session summary ===")
    for key, value in stats.items():
        print(f"{key}: {value}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
