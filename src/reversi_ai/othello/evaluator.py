from __future__ import annotations

from math import inf
from typing import Iterable, Optional

from reversi_ai.othello.board import (
    DIRECTIONS,
    Board,
    check_index,
    is_corner,
    is_edge,
)

CORNER_WEIGHT = 0.8
EDGE_WEIGHT = 0.4

EDGE_FLIP_SCORE = 2.0
FLIP_SCORE = 1.0


def positional_weight(index: int) -> float:
    check_index(index)

    if is_corner(index):
        return CORNER_WEIGHT
    if is_edge(index):
        return EDGE_WEIGHT
    return 0.0


def capture_score(board: Board, index: int, player: int, direction: int) -> float:
    score = 0.0
    for flipped in board.get_flips(index, player, direction):
        if is_edge(flipped):
            score += EDGE_FLIP_SCORE
        else:
            score += FLIP_SCORE
    return score


def evaluate(board: Board, index: int, player: int) -> float:
    score = positional_weight(index)
    for direction in DIRECTIONS:
        score += capture_score(board, index, player, direction)
    return score


def evaluate_moves(
    board: Board, legal_moves: Iterable[int], player: int
) -> list[tuple[int, float]]:
    """Scores for each legal move, in ascending index order."""
    return [(move, evaluate(board, move, player)) for move in sorted(legal_moves)]


def best_move(board: Board, legal_moves: Iterable[int], player: int) -> Optional[int]:
    best: Optional[int] = None
    best_score = -inf

    # Only a strictly higher score replaces the best, so ties go to the lowest index.
    for move, score in evaluate_moves(board, legal_moves, player):
        if score > best_score:
            best = move
            best_score = score

    return best
