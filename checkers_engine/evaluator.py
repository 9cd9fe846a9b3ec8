from __future__ import annotations

from typing import Optional

from .board import Board, Color, Piece
from .config import EvaluatorConfig


class Evaluator:
    """Static evaluation for checkers positions.

    Scores are from the point of view of the color passed to ``evaluate``:
    positive favors that color. Units are "men" (a normal piece is worth 1).
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None) -> None:
        self.config = config or EvaluatorConfig()

    def evaluate(self, board: Board, color: Color) -> float:
        score = 0.0
        for (row, col), piece in board.pieces():
            value = self.piece_value(piece, row, col)
            if piece.color is color:
                score += value
            else:
                score -= value
        return score

    def piece_value(self, piece: Piece, row: int, col: int) -> float:
        cfg = self.config
        if piece.is_king:
            value = cfg.king_value
        else:
            value = cfg.normal_value
            # rows travelled from the home edge
            advanced = row if piece.color is Color.BLACK else 7 - row
            value += advanced * cfg.advancement_weight
        if cfg.center_min_col <= col <= cfg.center_max_col:
            value += cfg.center_bonus
        return value
