import logging

from block_puzzle.game import (
    BlockType,
    GameSession,
    GameSessionConfig,
    GameState,
    ScoreConfig,
)

from tests.helpers import fill_cells, fill_checkerboard, put_in_slot


def singles_session(seed=3, capacity=3):
    session = GameSession(GameSessionConfig(queue_capacity=capacity, seed=seed, block_types=[BlockType.SINGLE]))
    session.start()
    return session


def play_first_moves(session, limit):
    history = []
    for _ in range(limit):
        moves = session.get_valid_moves()
        if not moves or not session.is_playing():
            break
        index, row, col = moves[0]
        kind = session.get_candidate(index).get_type()
        result = session.place_candidate(index, row, col)
        history.append((kind, result.score, result.game_over))
    return history


def test_new_session_is_ready():
    session = GameSession()
    assert session.get_game_state() == GameState.READY
    assert session.get_total_score() == 0
    assert session.get_move_count() == 0
    assert session.get_board().get_size() == 9
    assert session.get_candidate_queue().get_capacity() == 3
    assert len(session.get_candidates()) == 3


def test_custom_capacity():
    session = GameSession(GameSessionConfig(queue_capacity=5))
    assert session.get_candidate_queue().get_capacity() == 5


def test_place_before_start_is_rejected():
    session = GameSession(GameSessionConfig(seed=1))
    result = session.place_candidate(0, 0, 0)
    assert not result.success
    assert result.reason == "Game not started"
    assert result.game_over is False
    assert session.get_board().get_occupied_count() == 0


def test_start_enters_playing():
    session = GameSession(GameSessionConfig(seed=1))
    session.start()
    assert session.is_playing()
    assert all(block is not None for block in session.get_candidates())


def test_invalid_candidate_index():
    session = singles_session()
    result = session.place_candidate(3, 0, 0)
    assert not result.success
    assert result.reason == "Invalid candidate index"
    assert session.get_candidate(-1) is None


def test_successful_placement_updates_counters():
    session = singles_session()
    result = session.place_candidate(1, 4, 4)
    assert result.success
    assert result.score == 1
    assert result.game_over is False
    assert session.get_total_score() == 1
    assert session.get_move_count() == 1
    assert session.get_candidate_queue().is_full()
    assert session.get_board().get_cell(4, 4)


def test_failed_placement_changes_nothing():
    session = singles_session()
    session.place_candidate(0, 0, 0)
    candidates = session.get_candidates()
    result = session.place_candidate(0, 0, 0)
    assert not result.success
    assert result.reason == "Position occupied"
    assert result.game_over is False
    assert session.get_total_score() == 1
    assert session.get_move_count() == 1
    assert session.get_candidates() == candidates


def test_out_of_bounds_placement():
    session = GameSession(GameSessionConfig(seed=1, block_types=[BlockType.LINE_5]))
    session.start()
    result = session.place_candidate(0, 0, 6)
    assert result.reason == "Out of bounds"


def test_can_place_candidate_is_pure():
    session = singles_session()
    assert session.can_place_candidate(0, 8, 8)
    assert session.get_board().get_occupied_count() == 0
    assert not session.can_place_candidate(0, 9, 0)
    assert not session.can_place_candidate(-1, 0, 0)
    assert not session.can_place_candidate(10, 0, 0)


def test_line_clear_through_session():
    session = singles_session()
    fill_cells(session.get_board(), [(2, c) for c in range(8)])
    result = session.place_candidate(0, 2, 8)
    assert result.cleared_rows == [2]
    assert result.score == 11
    assert session.get_total_score() == 11
    assert session.lines_cleared_total == 1


def test_identical_seeds_play_identically():
    first = GameSession(GameSessionConfig(seed=2024))
    second = GameSession(GameSessionConfig(seed=2024))
    first.start()
    second.start()
    assert first.get_candidates() == second.get_candidates()
    assert play_first_moves(first, 40) == play_first_moves(second, 40)
    assert first.get_total_score() == second.get_total_score()
    assert (first.get_board().get_state() == second.get_board().get_state()).all()


def test_game_over_when_nothing_fits():
    session = GameSession(GameSessionConfig(seed=7, block_types=[BlockType.SQUARE_2X2]))
    session.start()
    put_in_slot(session.get_candidate_queue(), 0, BlockType.SINGLE)
    board = fill_checkerboard(session.get_board())
    assert board.get_full_rows() == [] and board.get_full_columns() == []

    result = session.place_candidate(0, 0, 1)
    assert result.success
    assert result.score == 1
    assert result.cleared_rows == [] and result.cleared_columns == []
    assert result.game_over is True
    assert session.is_game_over()
    assert session.get_game_state() == GameState.GAME_OVER

    after = session.place_candidate(1, 0, 3)
    assert not after.success
    assert after.reason == "Game not started"
    assert session.get_move_count() == 1


def test_game_continues_while_something_fits():
    session = GameSession(GameSessionConfig(seed=7, block_types=[BlockType.SQUARE_2X2]))
    session.start()
    result = session.place_candidate(0, 0, 0)
    assert result.success
    assert result.game_over is False
    assert session.is_playing()


def test_start_after_game_over_restarts():
    session = GameSession(GameSessionConfig(seed=7, block_types=[BlockType.SQUARE_2X2]))
    session.start()
    put_in_slot(session.get_candidate_queue(), 0, BlockType.SINGLE)
    fill_checkerboard(session.get_board())
    session.place_candidate(0, 0, 1)
    assert session.is_game_over()

    session.start()
    assert session.is_playing()
    assert session.get_total_score() == 0
    assert session.get_board().get_occupied_count() == 0


def test_reset_returns_to_ready():
    session = singles_session()
    session.place_candidate(0, 0, 0)
    session.reset()
    assert session.get_game_state() == GameState.READY
    assert session.get_total_score() == 0
    assert session.get_move_count() == 0
    assert session.get_board().get_occupied_count() == 0
    assert session.get_candidate_queue().is_full()


def test_lifecycle_is_logged(caplog):
    session = singles_session()
    with caplog.at_level(logging.INFO, logger="block_puzzle.game.session"):
        session.reset()
        session.start()
    messages = [record.getMessage() for record in caplog.records]
    assert "Game reset" in messages
    assert any(message.startswith("Game started") for message in messages)


def test_valid_moves_on_empty_board():
    session = singles_session()
    moves = session.get_valid_moves()
    assert len(moves) == 3 * 81
    assert moves[0] == (0, 0, 0)


def test_valid_moves_respect_bounds():
    session = GameSession(GameSessionConfig(seed=1, block_types=[BlockType.SQUARE_3X3], queue_capacity=1))
    session.start()
    assert len(session.get_valid_moves()) == 7 * 7


def test_custom_score_config():
    config = GameSessionConfig(seed=1, block_types=[BlockType.SINGLE], score_config=ScoreConfig(cell_placement_score=5))
    session = GameSession(config)
    session.start()
    assert session.place_candidate(0, 0, 0).score == 5
    assert session.get_placement_manager().get_score_config().cell_placement_score == 5


def test_stats():
    session = singles_session()
    session.place_candidate(0, 0, 0)
    stats = session.get_stats()
    assert stats["state"] == "PLAYING"
    assert stats["score"] == 1
    assert stats["moves"] == 1
    assert stats["occupied_cells"] == 1
