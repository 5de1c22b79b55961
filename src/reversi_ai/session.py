from __future__ import annotations

import time
from typing import Callable, Optional

from reversi_ai.config import get_ai_color, get_think_delay, get_verbose
from reversi_ai.othello.board import BLACK, WHITE, Board
from reversi_ai.othello.engine import DRAW, BoardEngine
from reversi_ai.othello.evaluator import best_move, evaluate_moves

PLAYER_VS_PLAYER = "pvp"
PLAYER_VS_AI = "ai"

MODES = [PLAYER_VS_PLAYER, PLAYER_VS_AI]

COLOR_LABELS = {BLACK: "Black", WHITE: "White"}


class GameSession:
    """
    One game, played by humans or by a human against the automated opponent.

    The automated move is never triggered by the engine itself,
    the caller asks for it with `play_ai_move()` once `is_ai_turn()` is True.
    """

    def __init__(
        self,
        mode: str = PLAYER_VS_AI,
        *,
        ai_color: Optional[int] = None,
        think_delay: Optional[float] = None,
        engine: Optional[BoardEngine] = None,
    ) -> None:
        if mode not in MODES:
            raise ValueError(f'Unknown game mode "{mode}"')

        if ai_color is None:
            ai_color = get_ai_color()

        if ai_color not in [BLACK, WHITE]:
            raise ValueError(f'Unknown color "{ai_color}"')

        if think_delay is None:
            think_delay = get_think_delay()

        if think_delay < 0:
            raise ValueError(f"Think delay must not be negative, got {think_delay}")

        if engine is None:
            engine = BoardEngine()

        self.mode = mode
        self.ai_color = ai_color
        self.think_delay = think_delay
        self.engine = engine
        self.verbose = get_verbose()

    def new_game(self) -> None:
        self.engine.reset()

    def is_ai_turn(self) -> bool:
        return (
            self.mode == PLAYER_VS_AI
            and not self.engine.is_game_over()
            and self.engine.current_player() == self.ai_color
        )

    def play(self, index: int) -> bool:
        return self.engine.place(index)

    def choose_ai_move(self) -> Optional[int]:
        board = self.engine.board()
        legal_moves = self.engine.legal_moves()
        player = self.engine.current_player()

        if self.verbose:
            for move, score in evaluate_moves(board, legal_moves, player):
                print(f"Evaluated {Board.index_to_field(move)}: {score:.2f}")

        return best_move(board, legal_moves, player)

    def play_ai_move(
        self, sleep: Callable[[float], None] = time.sleep
    ) -> Optional[int]:
        sleep(self.think_delay)

        move = self.choose_ai_move()
        if move is None:
            return None

        if self.verbose:
            print(f"Playing {Board.index_to_field(move)}")

        placed = self.engine.place(move)
        assert placed
        return move

    def status(self) -> str:
        if not self.engine.is_game_over():
            return f"Current player: {COLOR_LABELS[self.engine.current_player()]}"

        winner = self.engine.winner()
        if winner == DRAW:
            return "Draw"

        assert winner is not None
        return f"{COLOR_LABELS[winner]} wins"


def play_self_game(
    engine: Optional[BoardEngine] = None,
    on_move: Optional[Callable[[int, int], None]] = None,
) -> BoardEngine:
    """
    Plays until the game ends, letting the evaluator pick every move for both sides.
    `on_move` is called with the color and index of every move once it is placed.
    """
    if engine is None:
        engine = BoardEngine()

    while not engine.is_game_over():
        player = engine.current_player()
        move = best_move(engine.board(), engine.legal_moves(), player)

        # A running game always has a legal move.
        assert move is not None
        engine.place(move)

        if on_move is not None:
            on_move(player, move)

    return engine
