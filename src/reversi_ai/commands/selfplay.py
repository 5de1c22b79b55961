import typer
from typing import Annotated

from reversi_ai.othello.board import Board
from reversi_ai.othello.engine import DRAW, BoardEngine
from reversi_ai.session import COLOR_LABELS, play_self_game

app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def main(show: Annotated[bool, typer.Option("-s", "--show")] = False) -> None:
    engine = BoardEngine()
    moves: list[int] = []

    def on_move(player: int, move: int) -> None:
        moves.append(move)

        if show:
            print(f"{COLOR_LABELS[player]} plays {Board.index_to_field(move)}")
            engine.board().show(engine.legal_moves())

    play_self_game(engine, on_move)

    print(f"Moves: {Board.indexes_to_fields(moves)}")
    print(f"Black: {engine.black_count()}  White: {engine.white_count()}")

    winner = engine.winner()
    if winner == DRAW:
        print("Result: draw")
    else:
        assert winner is not None
        print(f"Result: {COLOR_LABELS[winner]} wins")


if __name__ == "__main__":
    app()
