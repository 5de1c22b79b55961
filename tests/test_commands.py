import pytest
from typer.testing import CliRunner

from reversi_ai.commands import play, selfplay
from reversi_ai.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["REVERSI_AI_THINK_DELAY", "REVERSI_AI_COLOR", "REVERSI_AI_VERBOSE"]:
        monkeypatch.delenv(name, raising=False)


def test_play_quit() -> None:
    result = runner.invoke(play.app, ["--mode", "pvp"], input="q\n")
    assert result.exit_code == 0
    assert "Current player: Black" in result.output
    assert "Bye" in result.output


def test_play_rejects_bad_input() -> None:
    result = runner.invoke(play.app, ["--mode", "pvp"], input="z9\na1\nd3\nq\n")
    assert result.exit_code == 0
    assert 'Invalid field "z9"' in result.output
    assert "Illegal move a1, legal moves: d3 c4 f5 e6" in result.output
    assert "Current player: White" in result.output


def test_play_against_computer() -> None:
    result = runner.invoke(
        play.app, ["--ai-color", "black", "--delay", "0"], input="q\n"
    )
    assert result.exit_code == 0
    assert "Computer plays d3" in result.output
    assert "Current player: White" in result.output


@pytest.mark.parametrize(
    ["args"],
    [
        pytest.param(["--mode", "online"], id="unknown-mode"),
        pytest.param(["--ai-color", "red"], id="unknown-color"),
        pytest.param(["--delay", "-1"], id="negative-delay"),
    ],
)
def test_play_bad_options(args: list[str]) -> None:
    result = runner.invoke(play.app, args, input="q\n")
    assert result.exit_code != 0


def test_selfplay() -> None:
    result = runner.invoke(selfplay.app, [])
    assert result.exit_code == 0
    assert result.output.startswith("Moves: d3 ")
    assert "Result: " in result.output


def test_selfplay_show() -> None:
    result = runner.invoke(selfplay.app, ["--show"])
    assert result.exit_code == 0
    assert "Black plays d3" in result.output
    assert "+-a-b-c-d-e-f-g-h-+" in result.output


def test_main_commands() -> None:
    result = runner.invoke(app, ["selfplay"])
    assert result.exit_code == 0
    assert "Result: " in result.output
