from .search import (
    MemoEntry, TranspositionTable, SearchEngine, SearchStats, MoveSelector,
    ParallelMoveSelector, SelectionResult, best_moves, heuristic,
)
from .baselines import MinimaxAgent, RandomAgent
from .arena import GameRecord, MatchResult, play_game, play_match

__all__ = [
    'MemoEntry', 'TranspositionTable', 'SearchEngine', 'SearchStats',
    'MoveSelector', 'ParallelMoveSelector', 'SelectionResult', 'best_moves', 'heuristic',
    'MinimaxAgent', 'RandomAgent',
    'GameRecord', 'MatchResult', 'play_game', 'play_match',
]
