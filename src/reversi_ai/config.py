import os
from dotenv import load_dotenv

from reversi_ai.othello.board import BLACK, WHITE

load_dotenv()

COLOR_NAMES = {"black": BLACK, "white": WHITE}


def parse_color(name: str) -> int:
    try:
        return COLOR_NAMES[name.strip().lower()]
    except KeyError:
        raise ValueError(f'Unknown color "{name}"')


def get_think_delay() -> float:
    delay = float(os.getenv("REVERSI_AI_THINK_DELAY", "0.5"))
    if delay < 0:
        raise ValueError(f"Think delay must not be negative, got {delay}")
    return delay


def get_ai_color() -> int:
    return parse_color(os.getenv("REVERSI_AI_COLOR", "white"))


def get_verbose() -> bool:
    return os.getenv("REVERSI_AI_VERBOSE", "0") != "0"
