"""Checkers (draughts) engine: rules, game state, evaluation, and AI search.

Modules:
- board: Pieces, positions, moves and the immutable 8x8 board
- moves: Legal-move generation with mandatory capture and flying kings
- game: Game state transitions, outcome detection and a game session
- evaluator: Heuristic evaluation function for positions
- ai: Minimax with alpha-beta pruning at selectable difficulty
- config: Tunable evaluation weights and search depths
- log: Loguru sink setup for applications embedding the engine
"""

from loguru import logger as _logger

from .board import Board, Color, Move, Piece, Position, Rank, create_initial_board
from .moves import PieceMoves, all_legal_moves, legal_moves
from .game import (
    CheckersError,
    Game,
    GameState,
    IllegalMoveError,
    Outcome,
    apply_move,
    continuation_moves,
    create_initial_game_state,
    selectable_moves,
)
from .evaluator import Evaluator
from .ai import AIPlayer, Difficulty, SearchResult, best_move
from .config import EngineConfig, EvaluatorConfig, SearchConfig, load_config, save_config
from .log import setup_logging

__all__ = [
    "AIPlayer",
    "Board",
    "CheckersError",
    "Color",
    "Difficulty",
    "EngineConfig",
    "Evaluator",
    "EvaluatorConfig",
    "Game",
    "GameState",
    "IllegalMoveError",
    "Move",
    "Outcome",
    "Piece",
    "PieceMoves",
    "Position",
    "Rank",
    "SearchConfig",
    "SearchResult",
    "all_legal_moves",
    "apply_move",
    "best_move",
    "continuation_moves",
    "create_initial_board",
    "create_initial_game_state",
    "legal_moves",
    "load_config",
    "save_config",
    "selectable_moves",
    "setup_logging",
]

_logger.disable(__name__)
