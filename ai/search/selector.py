"""
Top-level move selection: score every legal move, keep all ties.
"""
import random
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from game import Cell, GameState, Move
from .minimax import SearchEngine

ProgressCallback = Callable[[int, int], None]


class SelectionResult(NamedTuple):
    best: Dict[int, List[int]]  # sub-board -> tied best cells
    move: Move                   # one sample from the tied set
    score: int
    scores: Dict[Move, int]


def group_moves(moves) -> Dict[int, List[int]]:
    grouped: Dict[int, List[int]] = {}
    for b, c in sorted(moves):
        grouped.setdefault(b, []).append(c)
    return grouped


def collect_best(scores: Dict[Move, int], maximizing: bool,
                 rng: Optional[random.Random] = None) -> SelectionResult:
    """Reduce per-move scores to the tied best set plus one pick."""
    if not scores:
        raise ValueError("No moves to choose from")
    best_score = max(scores.values()) if maximizing else min(scores.values())
    tied = sorted(m for m, s in scores.items() if s == best_score)
    rng = rng or random
    return SelectionResult(
        best=group_moves(tied),
        move=rng.choice(tied),
        score=best_score,
        scores=dict(scores),
    )


def _prepare(state: GameState, maximizing: Optional[bool]) -> Tuple[GameState, bool]:
    if state.is_terminal():
        raise ValueError("Game is already over")
    if maximizing is None:
        return state, state.mover is Cell.X
    if maximizing != (state.mover is Cell.X):
        state = state.with_mover(Cell.X if maximizing else Cell.O)
    return state, maximizing


class MoveSelector:
    """Scores each candidate with a fresh alpha-beta window."""

    def __init__(self, engine: Optional[SearchEngine] = None,
                 on_progress: Optional[ProgressCallback] = None,
                 rng: Optional[random.Random] = None):
        self.engine = engine if engine is not None else SearchEngine()
        self.on_progress = on_progress
        self.rng = rng

    def score_moves(self, state: GameState) -> Dict[Move, int]:
        moves = state.legal_moves()
        total = len(moves)
        scores = {}
        for done, move in enumerate(moves, 1):
            child = state.child(*move)
            scores[move] = self.engine.search(child, depth=0)
            if self.on_progress is not None:
                self.on_progress(done, total)
        return scores

    def select(self, state: GameState, maximizing: Optional[bool] = None) -> SelectionResult:
        state, maximizing = _prepare(state, maximizing)
        scores = self.score_moves(state)
        return collect_best(scores, maximizing, self.rng)


def best_moves(state: GameState, maximizing: Optional[bool] = None,
               engine: Optional[SearchEngine] = None,
               on_progress: Optional[ProgressCallback] = None,
               rng: Optional[random.Random] = None):
    """Returns (tied best moves grouped by sub-board, one chosen move)."""
    result = MoveSelector(engine, on_progress, rng).select(state, maximizing)
    return result.best, result.move
