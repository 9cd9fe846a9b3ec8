from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .board import Board, Color, Move, Piece, Position

KING_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True)
class PieceMoves:
    position: Position
    moves: List[Move]


def directions_for(piece: Piece) -> Tuple[Tuple[int, int], ...]:
    if piece.is_king:
        return KING_DIRECTIONS
    forward = piece.color.forward
    return ((forward, -1), (forward, 1))


def _short_moves(board: Board, position: Position, piece: Piece) -> Tuple[List[Move], List[Move]]:
    steps: List[Move] = []
    captures: List[Move] = []
    for d_row, d_col in directions_for(piece):
        target = position.step(d_row, d_col)
        if not target.on_board():
            continue
        occupant = board.piece_at(target)
        if occupant is None:
            steps.append(Move(position, target))
            continue
        if occupant.color is piece.color:
            continue
        landing = target.step(d_row, d_col)
        if landing.on_board() and board.piece_at(landing) is None:
            captures.append(Move(position, landing, (target,)))
    return steps, captures


def _flying_moves(board: Board, position: Position, piece: Piece) -> Tuple[List[Move], List[Move]]:
    """Walk each diagonal ray until blocked.

    Empty squares before any piece are steps. Once exactly one enemy has been
    passed, every empty square behind it is a capture landing. A second piece
    of either color ends the ray.
    """
    steps: List[Move] = []
    captures: List[Move] = []
    for d_row, d_col in KING_DIRECTIONS:
        enemy = None
        target = position.step(d_row, d_col)
        while target.on_board():
            occupant = board.piece_at(target)
            if occupant is None:
                if enemy is None:
                    steps.append(Move(position, target))
                else:
                    captures.append(Move(position, target, (enemy,)))
            elif occupant.color is not piece.color and enemy is None:
                enemy = target
            else:
                break
            target = target.step(d_row, d_col)
    return steps, captures


def legal_moves(board: Board, position: Position, must_capture: bool = False) -> List[Move]:
    """Legal moves for the piece on ``position``.

    Captures are returned alone whenever the piece has any. Otherwise simple
    steps are returned, unless ``must_capture`` is set, in which case the
    result is empty. An empty square yields no moves.
    """
    piece = board.piece_at(position)
    if piece is None:
        return []

    if piece.is_king:
        steps, captures = _flying_moves(board, position, piece)
    else:
        steps, captures = _short_moves(board, position, piece)

    if captures:
        return captures
    if must_capture:
        return []
    return steps


def has_capture(board: Board, color: Color) -> bool:
    """True if any piece of ``color`` can capture somewhere on the board."""
    for position, _ in board.pieces(color):
        moves = legal_moves(board, position)
        if any(move.is_capture for move in moves):
            return True
    return False


def all_legal_moves(board: Board, color: Color) -> List[PieceMoves]:
    """Legal moves for every piece of ``color`` under global mandatory capture.

    A first pass finds out whether any piece can capture; the second pass
    regenerates each piece's moves with that flag, so a capture anywhere
    suppresses every non-capturing step. Pieces with no moves are omitted.
    """
    must_capture = has_capture(board, color)

    result: List[PieceMoves] = []
    for position, _ in board.pieces(color):
        moves = legal_moves(board, position, must_capture)
        if moves:
            result.append(PieceMoves(position, moves))
    return result


def flatten(piece_moves: List[PieceMoves]) -> List[Move]:
    return [move for entry in piece_moves for move in entry.moves]
