from __future__ import annotations

from checkers_engine import Color, Move, Piece, Position, Rank, create_initial_board, create_initial_game_state
from checkers_engine.board import is_dark_square

from conftest import W, make_board


def test_initial_board_layout():
    board = create_initial_board()
    black = list(board.pieces(Color.BLACK))
    white = list(board.pieces(Color.WHITE))

    assert len(black) == 12
    assert len(white) == 12
    assert all(pos.row <= 2 for pos, _ in black)
    assert all(pos.row >= 5 for pos, _ in white)
    assert all(is_dark_square(*pos) for pos, _ in black + white)
    assert all(piece.rank is Rank.NORMAL for _, piece in black + white)
    for row in (3, 4):
        assert all(board[row][col] is None for col in range(8))


def test_initial_board_is_deterministic():
    assert create_initial_board() == create_initial_board()


def test_initial_game_state():
    state = create_initial_game_state()
    assert state.current_player is Color.WHITE
    assert state.winner is None
    assert not state.is_over
    assert state.piece_counts[Color.BLACK] == 12
    assert state.piece_counts[Color.WHITE] == 12
    assert state.captured_counts[Color.BLACK] == 0
    assert state.captured_counts[Color.WHITE] == 0
    assert state.move_history == ()


def test_replace_returns_new_board():
    board = make_board({(5, 0): W})
    moved = board.replace([(Position(5, 0), None), (Position(4, 1), W)])

    assert board.piece_at(Position(5, 0)) == W
    assert moved.piece_at(Position(5, 0)) is None
    assert moved.piece_at(Position(4, 1)) == W


def test_promoted_piece_is_a_new_value():
    piece = Piece(Color.BLACK)
    king = piece.promoted()
    assert piece.rank is Rank.NORMAL
    assert king.rank is Rank.KING
    assert king.color is Color.BLACK


def test_color_directions():
    assert Color.BLACK.forward == 1
    assert Color.WHITE.forward == -1
    assert Color.BLACK.promotion_row == 7
    assert Color.WHITE.promotion_row == 0
    assert Color.BLACK.opponent is Color.WHITE


def test_move_str():
    assert str(Move(Position(5, 0), Position(4, 1))) == "50-41"
    assert str(Move(Position(3, 2), Position(1, 4), (Position(2, 3),))) == "32x14"
