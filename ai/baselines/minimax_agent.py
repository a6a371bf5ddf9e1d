"""
Minimax Agent with Alpha-Beta Pruning.
Exhaustive or depth-limited search sharing one memo table across moves.
"""
import random
from typing import Optional

from config import SearchConfig
from game import GameState, Move
from ai.search import (
    MoveSelector, ParallelMoveSelector, SearchEngine, SelectionResult, TranspositionTable,
)
from utils.progress import SearchTracer


class MinimaxAgent:
    """Agent using minimax search with alpha-beta pruning."""

    def __init__(self, config: Optional[SearchConfig] = None,
                 table: Optional[TranspositionTable] = None, on_progress=None):
        """
        Args:
            config: Search settings (max_depth None = full search)
            table: Memo table to share, e.g. one loaded from a cache store
            on_progress: Called with (done, total) after each candidate move
        """
        self.config = config or SearchConfig()
        depth = self.config.max_depth
        self.name = "Minimax-full" if depth is None else f"Minimax-{depth}"

        self.table = table if table is not None else TranspositionTable()
        tracer = SearchTracer(self.config.print_depth) if self.config.verbose else None
        self.engine = SearchEngine(self.table, max_depth=depth, tracer=tracer)
        self.rng = random.Random(self.config.seed)

        if self.config.num_workers > 1:
            self.selector = ParallelMoveSelector(
                self.engine, self.config.num_workers, on_progress, self.rng)
        else:
            self.selector = MoveSelector(self.engine, on_progress, self.rng)
        self.last_result: Optional[SelectionResult] = None

    @property
    def nodes_searched(self) -> int:
        return self.engine.stats.nodes

    def analyze(self, state: GameState) -> SelectionResult:
        self.engine.reset_stats()
        self.last_result = self.selector.select(state)
        return self.last_result

    def select_action(self, state: GameState) -> Move:
        """Select the move to play; ties are broken by the seeded rng."""
        return self.analyze(state).move
