import typer

from reversi_ai.commands import play, selfplay

app = typer.Typer(pretty_exceptions_enable=False)

app.command("play")(play.main)
app.command("selfplay")(selfplay.main)


if __name__ == "__main__":
    app()
