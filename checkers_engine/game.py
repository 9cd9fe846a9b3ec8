from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Mapping, Optional, Tuple, Union

from loguru import logger

from .board import PIECES_PER_SIDE, Board, Color, Move, Piece, Position, create_initial_board
from .moves import all_legal_moves, flatten, has_capture, legal_moves

if TYPE_CHECKING:
    from .ai import AIPlayer, Difficulty


class CheckersError(Exception):
    """Base class for errors raised by the checkers engine."""


class IllegalMoveError(CheckersError, ValueError):
    pass


class Status(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls()

    @classmethod
    def won_by(cls, color: Color) -> "Outcome":
        return cls(Status.WON, color)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is Status.WON:
            return f"{self.winner.value} wins"  # type: ignore[union-attr]
        return self.status.value.replace("_", " ")


class ColorCounts(Mapping[Color, int]):
    """Read-only, hashable per-color tally."""

    __slots__ = ("_black", "_white")

    def __init__(self, black: int, white: int) -> None:
        self._black = black
        self._white = white

    def __getitem__(self, color: Color) -> int:
        if color is Color.BLACK:
            return self._black
        if color is Color.WHITE:
            return self._white
        raise KeyError(color)

    def __iter__(self) -> Iterator[Color]:
        return iter((Color.BLACK, Color.WHITE))

    def __len__(self) -> int:
        return 2

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorCounts):
            return (self._black, self._white) == (other._black, other._white)
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((self._black, self._white))

    def __repr__(self) -> str:
        return f"ColorCounts(black={self._black}, white={self._white})"




@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a game between two moves."""

    board: Board
    current_player: Color = Color.WHITE
    piece_counts: Mapping[Color, int] = field(
        default_factory=lambda: ColorCounts(PIECES_PER_SIDE, PIECES_PER_SIDE)
    )
    captured_counts: Mapping[Color, int] = field(default_factory=lambda: ColorCounts(0, 0))
    outcome: Outcome = field(default_factory=Outcome.in_progress)
    move_history: Tuple[Move, ...] = ()

    @classmethod
    def from_board(cls, board: Board, current_player: Color = Color.WHITE) -> "GameState":
        """Wrap an arbitrary position, deriving live piece counts from the board."""
        return cls(
            board=board,
            current_player=current_player,
            piece_counts=ColorCounts(board.count(Color.BLACK), board.count(Color.WHITE)),
        )

    @property
    def winner(self) -> Optional[Color]:
        return self.outcome.winner

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over

    @property
    def last_move(self) -> Optional[Move]:
        return self.move_history[-1] if self.move_history else None

    def declare_draw(self) -> "GameState":
        return replace(self, outcome=Outcome.draw())


def create_initial_game_state() -> GameState:
    return GameState(board=create_initial_board())


def next_board(board: Board, move: Move) -> Board:
    """Board after ``move``: relocate, remove captured pieces, promote."""
    piece = board.piece_at(move.start)
    changes: List[Tuple[Position, Optional[Piece]]] = [(move.start, None)]
    changes.extend((position, None) for position in move.captured)
    if piece is not None and not piece.is_king and move.end.row == piece.color.promotion_row:
        piece = piece.promoted()
    changes.append((move.end, piece))
    return board.replace(changes)


def apply_move(state: GameState, move: Move) -> GameState:
    """Return the state after ``move``; ``state`` itself is never modified.

    The move is assumed to come from the move generator for the side to
    move. After a capture, the same player keeps the turn if the landing
    piece can capture again.
    """
    mover = state.current_player
    opponent = mover.opponent

    pieces = dict(state.piece_counts)
    captured = dict(state.captured_counts)
    for position in move.captured:
        victim = state.board.piece_at(position)
        if victim is not None:
            pieces[victim.color] -= 1
            captured[victim.color.opponent] += 1

    new_board = next_board(state.board, move)

    next_player = opponent
    if move.is_capture and legal_moves(new_board, move.end, must_capture=True):
        next_player = mover
        logger.debug(f"{mover.value} continues capturing from {tuple(move.end)}")

    if pieces[opponent] == 0:
        outcome = Outcome.won_by(mover)
    elif pieces[mover] == 0:
        outcome = Outcome.won_by(opponent)
    elif not all_legal_moves(new_board, next_player):
        outcome = Outcome.won_by(next_player.opponent)
    else:
        outcome = Outcome.in_progress()

    if outcome.is_over:
        logger.debug(f"Game over after {move}: {outcome}")

    return GameState(
        board=new_board,
        current_player=next_player,
        piece_counts=ColorCounts(pieces[Color.BLACK], pieces[Color.WHITE]),
        captured_counts=ColorCounts(captured[Color.BLACK], captured[Color.WHITE]),
        outcome=outcome,
        move_history=state.move_history + (move,),
    )


def continuation_moves(state: GameState, move: Move) -> List[Move]:
    """Follow-up captures for the piece that just made ``move``.

    ``state`` is the state returned by ``apply_move`` for ``move``. The list
    is empty unless the move was a capture and the mover kept the turn.
    """
    if state.is_over or not move.is_capture:
        return []
    piece = state.board.piece_at(move.end)
    if piece is None or piece.color is not state.current_player:
        return []
    return legal_moves(state.board, move.end, must_capture=True)


def selectable_moves(state: GameState, position: Position) -> List[Move]:
    """Moves the side to move may make with the piece on ``position``."""
    if state.is_over:
        return []
    piece = state.board.piece_at(position)
    if piece is None or piece.color is not state.current_player:
        return []
    return legal_moves(state.board, position, has_capture(state.board, state.current_player))


class Game:
    """Mutable game session on top of the immutable rules core.

    Keeps the history of states so moves can be taken back, and enforces
    what the pure functions leave to their caller: only legal moves are
    accepted, and during a chain capture only the capturing piece may move.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._states: List[GameState] = [state or create_initial_game_state()]

    def reset(self, state: Optional[GameState] = None) -> None:
        self._states = [state or create_initial_game_state()]

    @property
    def state(self) -> GameState:
        return self._states[-1]

    @property
    def turn(self) -> Color:
        return self.state.current_player

    @property
    def chain_square(self) -> Optional[Position]:
        """Landing square of a capture that must be continued, if any.

        Derived from the last move of the current state alone, so a session
        resumed from a saved mid-chain state is locked as well.
        """
        last = self.state.last_move
        if last is not None and continuation_moves(self.state, last):
            return last.end
        return None

    def legal_moves(self) -> List[Move]:
        if self.state.is_over:
            return []
        chain = self.chain_square
        if chain is not None:
            return legal_moves(self.state.board, chain, must_capture=True)
        return flatten(all_legal_moves(self.state.board, self.turn))

    def moves_for(self, position: Position) -> List[Move]:
        chain = self.chain_square
        if chain is not None and position != chain:
            return []
        return selectable_moves(self.state, position)

    def push(self, move: Move) -> GameState:
        if self.state.is_over:
            raise IllegalMoveError(f"Game is over ({self.state.outcome}); cannot play {move}")
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move: {move}")
        self._states.append(apply_move(self.state, move))
        return self.state

    def pop(self) -> Move:
        if len(self._states) < 2:
            raise IndexError("pop from a game with no moves")
        move = self.state.move_history[-1]
        self._states.pop()
        return move

    def is_game_over(self) -> bool:
        return self.state.is_over

    def result(self) -> Optional[str]:
        if not self.state.is_over:
            return None
        return str(self.state.outcome)

    def play_ai(
        self,
        difficulty: Union["Difficulty", str, int],
        player: Optional["AIPlayer"] = None,
    ) -> Optional[Move]:
        """Let the engine play one move for the side to move.

        During a chain capture the search is restricted to the capturing
        piece's own continuations.
        """
        from .ai import AIPlayer

        if self.state.is_over:
            return None
        player = player or AIPlayer()

        root_moves = self.legal_moves() if self.chain_square is not None else None
        move = player.choose_move(self.state, difficulty, moves=root_moves)
        if move is not None:
            self.push(move)
        return move
