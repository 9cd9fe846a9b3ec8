from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from loguru import logger

from .board import Board, Color, Move
from .config import EngineConfig, SearchConfig
from .evaluator import Evaluator
from .game import GameState, next_board
from .moves import all_legal_moves, flatten


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        key = value.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None

    def depth(self, config: Optional[SearchConfig] = None) -> int:
        config = config or SearchConfig()
        if self is Difficulty.EASY:
            return config.easy_depth
        if self is Difficulty.MEDIUM:
            return config.medium_depth
        return config.hard_depth


# Room labels used by the multiplayer front end.
_ALIASES = {
    "facil": Difficulty.EASY,
    "medio": Difficulty.MEDIUM,
    "dificil": Difficulty.HARD,
    "impossivel": Difficulty.HARD,
}


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: float
    nodes: int
    depth: int


class AIPlayer:
    """Fixed-depth minimax with alpha-beta pruning.

    Leaves are always scored from the root player's point of view; the
    opponent's plies minimize that score. Plies strictly alternate between
    the two colors. Ties keep the first move in generation order, so a
    search without a time limit is fully deterministic.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        config = config or EngineConfig()
        self.evaluator = Evaluator(config.evaluator)
        self.search_config = config.search
        self._deadline_ts: Optional[float] = None

    def resolve_depth(self, difficulty: Union[Difficulty, str, int]) -> int:
        if isinstance(difficulty, int):
            if difficulty < 1:
                raise ValueError(f"Search depth must be at least 1, got {difficulty}")
            return difficulty
        return Difficulty.parse(difficulty).depth(self.search_config)

    def choose_move(
        self,
        state: GameState,
        difficulty: Union[Difficulty, str, int],
        time_limit_s: Optional[float] = None,
        moves: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        """Pick a move for the side to move in ``state``.

        ``moves`` restricts the candidates at the root (used while a chain
        capture is pending). If a time limit is given, or configured, the
        search deepens one ply at a time and returns the result of the
        deepest iteration that finished in time.
        """
        depth = self.resolve_depth(difficulty)
        if time_limit_s is None:
            time_limit_s = self.search_config.time_limit_s
        if time_limit_s is None:
            return self.search(state, depth, moves).best_move

        self._deadline_ts = time.time() + time_limit_s
        best: Optional[SearchResult] = None
        try:
            for d in range(1, depth + 1):
                try:
                    best = self.search(state, d, moves)
                except _SearchTimeout:
                    logger.debug(f"Search timed out at depth {d} after {time_limit_s}s")
                    break
        finally:
            self._deadline_ts = None

        if best is None or best.best_move is None:
            fallback = self._choose_quick_fallback_move(state, moves)
            if fallback is not None:
                logger.warning(f"No search depth completed in {time_limit_s}s; playing {fallback}")
            return fallback
        return best.best_move

    def search(
        self,
        state: GameState,
        depth: int,
        moves: Optional[Sequence[Move]] = None,
    ) -> SearchResult:
        ai_color = state.current_player
        board = state.board
        if moves is None:
            moves = flatten(all_legal_moves(board, ai_color))

        if depth == 0 or not moves:
            score = self.evaluator.evaluate(board, ai_color)
            return SearchResult(best_move=None, score=score, nodes=1, depth=depth)

        best_score = -math.inf
        best_move: Optional[Move] = None
        alpha, beta = -math.inf, math.inf
        nodes = 1

        for move in moves:
            self._guard_time()
            score, sub_nodes = self._alphabeta(
                next_board(board, move), depth - 1, alpha, beta, False, ai_color
            )
            nodes += sub_nodes
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, score)

        logger.debug(
            f"{ai_color.value} searched depth {depth}: {nodes} nodes, "
            f"best {best_move} ({best_score:.2f})"
        )
        return SearchResult(best_move=best_move, score=best_score, nodes=nodes, depth=depth)

    def _alphabeta(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        ai_color: Color,
    ) -> Tuple[float, int]:
        to_move = ai_color if maximizing else ai_color.opponent
        moves: List[Move] = flatten(all_legal_moves(board, to_move))

        if depth == 0 or not moves:
            return self.evaluator.evaluate(board, ai_color), 1

        nodes = 1
        if maximizing:
            value = -math.inf
            for move in moves:
                self._guard_time()
                score, child_nodes = self._alphabeta(
                    next_board(board, move), depth - 1, alpha, beta, False, ai_color
                )
                nodes += child_nodes
                value = max(value, score)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value, nodes
        else:
            value = math.inf
            for move in moves:
                self._guard_time()
                score, child_nodes = self._alphabeta(
                    next_board(board, move), depth - 1, alpha, beta, True, ai_color
                )
                nodes += child_nodes
                value = min(value, score)
                beta = min(beta, value)
                if beta <= alpha:
                    break
            return value, nodes

    def _guard_time(self) -> None:
        if self._deadline_ts is None:
            return
        if time.time() >= self._deadline_ts:
            raise _SearchTimeout()

    def _choose_quick_fallback_move(
        self, state: GameState, moves: Optional[Sequence[Move]] = None
    ) -> Optional[Move]:
        """Pick a legal move without searching: any capture, else the first move."""
        if moves is None:
            moves = flatten(all_legal_moves(state.board, state.current_player))
        for move in moves:
            if move.is_capture:
                return move
        for move in moves:
            return move
        return None


class _SearchTimeout(Exception):
    pass


def best_move(state: GameState, difficulty: Union[Difficulty, str, int]) -> Optional[Move]:
    """Reference entry point: deterministic fixed-depth search for the side to move."""
    return AIPlayer().choose_move(state, difficulty)
