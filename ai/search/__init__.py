from .heuristic import heuristic
from .transposition_table import MemoEntry, TranspositionTable, is_definite_score
from .minimax import SCORE_INF, SearchEngine, SearchStats
from .selector import MoveSelector, SelectionResult, best_moves, collect_best, group_moves
from .parallel import ParallelMoveSelector

__all__ = [
    'heuristic',
    'MemoEntry', 'TranspositionTable', 'is_definite_score',
    'SCORE_INF', 'SearchEngine', 'SearchStats',
    'MoveSelector', 'SelectionResult', 'best_moves', 'collect_best', 'group_moves',
    'ParallelMoveSelector',
]
