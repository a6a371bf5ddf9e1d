"""
Static evaluation for depth-limited search.

Material only: one point per sub-board won, positive for X.
"""
from typing import Sequence

from game import Cell, resolve_winner


def heuristic(boards: Sequence[Sequence[Cell]]) -> int:
    score = 0
    for board in boards:
        w = resolve_winner(board)
        if w is Cell.X:
            score += 1
        elif w is Cell.O:
            score -= 1
    return score
