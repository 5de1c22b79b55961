from __future__ import annotations

from typing import Optional

from reversi_ai.othello.board import BLACK, WHITE, Board, opponent

DRAW = 0


def get_winner(black_count: int, white_count: int) -> int:
    if black_count > white_count:
        return BLACK
    if white_count > black_count:
        return WHITE
    return DRAW


class GameState:
    """
    Everything known about a game in progress.
    Instances are never modified after construction, a move produces a new GameState.
    """

    def __init__(
        self,
        board: Board,
        current_player: int,
        *,
        black_count: int,
        white_count: int,
    ) -> None:
        assert current_player in [BLACK, WHITE]
        assert black_count + white_count == board.count_discs()

        self.board = board
        self.current_player = current_player
        self.black_count = black_count
        self.white_count = white_count

        self.legal_moves = board.get_moves_as_set(current_player)

        # A side without moves ends the game, there is no passing.
        self.game_over = board.is_full() or not self.legal_moves

        self.winner: Optional[int] = None
        if self.game_over:
            self.winner = get_winner(black_count, white_count)

    @classmethod
    def start(cls) -> GameState:
        return GameState(Board.start(), BLACK, black_count=2, white_count=2)

    @classmethod
    def from_board(cls, board: Board, current_player: int) -> GameState:
        return GameState(
            board.copy(),
            current_player,
            black_count=board.count(BLACK),
            white_count=board.count(WHITE),
        )

    def __repr__(self) -> str:
        return f"GameState({self.board}, {self.current_player})"

    def as_tuple(self) -> tuple[tuple[int, ...], int, int, int]:
        return (
            self.board.as_tuple(),
            self.current_player,
            self.black_count,
            self.white_count,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            raise TypeError(f"Cannot compare GameState with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def do_move(self, index: int) -> GameState:
        assert index in self.legal_moves

        mover = self.current_player
        board = self.board.copy()
        flipped = board.get_all_flips(index, mover)

        board.set_square(index, mover)
        for flip in flipped:
            board.set_square(flip, mover)

        black_count = self.black_count
        white_count = self.white_count

        if mover == BLACK:
            black_count += len(flipped) + 1
            white_count -= len(flipped)
        else:
            white_count += len(flipped) + 1
            black_count -= len(flipped)

        return GameState(
            board,
            opponent(mover),
            black_count=black_count,
            white_count=white_count,
        )


class BoardEngine:
    """
    Owns the state of one game and is the only way to change it.

    Illegal placements are ignored: `place()` returns False and leaves the state untouched.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        if state is None:
            state = GameState.start()

        self.state = state

    def reset(self) -> None:
        self.state = GameState.start()

    def cell_at(self, index: int) -> int:
        return self.state.board.get_square(index)

    def board(self) -> Board:
        return self.state.board.copy()

    def legal_moves(self) -> set[int]:
        return set(self.state.legal_moves)

    def current_player(self) -> int:
        return self.state.current_player

    def black_count(self) -> int:
        return self.state.black_count

    def white_count(self) -> int:
        return self.state.white_count

    def is_game_over(self) -> bool:
        return self.state.game_over

    def winner(self) -> Optional[int]:
        return self.state.winner

    def place(self, index: int) -> bool:
        if self.state.game_over:
            return False

        # Occupied and off-board indexes are never legal moves.
        if index not in self.state.legal_moves:
            return False

        self.state = self.state.do_move(index)
        return True
