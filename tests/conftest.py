"""Shared helpers for building positions."""

from __future__ import annotations

from typing import Dict, Tuple

import pytest

from checkers_engine import Board, Color, Piece, Rank

B = Piece(Color.BLACK)
W = Piece(Color.WHITE)
BK = Piece(Color.BLACK, Rank.KING)
WK = Piece(Color.WHITE, Rank.KING)


def make_board(pieces: Dict[Tuple[int, int], Piece]) -> Board:
    grid = [[None] * 8 for _ in range(8)]
    for (row, col), piece in pieces.items():
        grid[row][col] = piece
    return Board.from_rows(grid)


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()
