from .rules import (
    Cell, MARKS, WIN_LINES, finalize, is_full, is_resolved, meta_view,
    meta_winning_line, outcome, overall_winner, resolve_winner, winning_line,
)
from .state import ALL_BOARDS, GameState, Move

__all__ = [
    'Cell', 'MARKS', 'WIN_LINES', 'ALL_BOARDS', 'GameState', 'Move',
    'finalize', 'is_full', 'is_resolved', 'meta_view', 'meta_winning_line',
    'outcome', 'overall_winner', 'resolve_winner', 'winning_line',
]
