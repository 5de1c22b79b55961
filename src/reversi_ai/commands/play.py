import typer
from typing import Annotated, Optional

from reversi_ai.config import parse_color
from reversi_ai.othello.board import Board
from reversi_ai.session import MODES, PLAYER_VS_AI, GameSession

app = typer.Typer(pretty_exceptions_enable=False)

QUIT_COMMANDS = ["q", "quit", "exit"]


def show_session(session: GameSession) -> None:
    engine = session.engine
    engine.board().show(engine.legal_moves())
    print(f"Black: {engine.black_count()}  White: {engine.white_count()}")
    print(session.status())


def read_move(session: GameSession) -> Optional[int]:
    """Prompts until the user enters a legal field. Returns None when the user quits."""
    legal_moves = session.engine.legal_moves()

    while True:
        field = input("Move: ").strip().lower()

        if field in QUIT_COMMANDS:
            return None

        try:
            move = Board.field_to_index(field)
        except ValueError as e:
            print(f"{e}, expected a field like d3")
            continue

        if move not in legal_moves:
            fields = Board.indexes_to_fields(sorted(legal_moves))
            print(f"Illegal move {field}, legal moves: {fields}")
            continue

        return move


@app.command()
def main(
    mode: Annotated[str, typer.Option("-m", "--mode")] = PLAYER_VS_AI,
    ai_color: Annotated[Optional[str], typer.Option("-c", "--ai-color")] = None,
    delay: Annotated[Optional[float], typer.Option("-d", "--delay")] = None,
) -> None:
    if mode not in MODES:
        raise typer.BadParameter(f"Mode must be one of {', '.join(MODES)}")

    color: Optional[int] = None
    if ai_color is not None:
        try:
            color = parse_color(ai_color)
        except ValueError as e:
            raise typer.BadParameter(str(e))

    if delay is not None and delay < 0:
        raise typer.BadParameter("Delay must not be negative")

    session = GameSession(mode, ai_color=color, think_delay=delay)
    show_session(session)

    while not session.engine.is_game_over():
        if session.is_ai_turn():
            move = session.play_ai_move()
            assert move is not None
            print(f"Computer plays {Board.index_to_field(move)}")
        else:
            move = read_move(session)
            if move is None:
                print("Bye")
                return
            session.play(move)

        show_session(session)


if __name__ == "__main__":
    app()
