"""
Parallel top-level move scoring using multiprocessing.

Each worker starts from a read-only copy of the definite entries and keeps
its own TranspositionTable. New entries come back with every scored move
and are merged into the caller's table, so no table is shared across
processes.

A SearchTracer on the caller's engine is rebuilt in every worker from its
print_depth, so verbose tracing works here too; workers write to their own
stdout and lines from different moves interleave.
"""
import random
from multiprocessing import Pool, cpu_count
from typing import Dict, Optional

from game import GameState, Move
from utils.progress import SearchTracer
from .minimax import SearchEngine
from .selector import MoveSelector, ProgressCallback, SelectionResult, _prepare, collect_best
from .transposition_table import MemoEntry, TranspositionTable

_engine: Optional[SearchEngine] = None
_sent: Dict[str, MemoEntry] = {}


def _init_worker(snapshot: Dict[str, MemoEntry], max_depth: Optional[int],
                 trace: bool = False, print_depth: Optional[int] = None):
    global _engine, _sent
    tracer = SearchTracer(print_depth) if trace else None
    _engine = SearchEngine(TranspositionTable(snapshot), max_depth=max_depth, tracer=tracer)
    _sent = dict(snapshot)


def _score_move(args):
    """Score one candidate; return entries this worker has not reported yet."""
    global _sent
    state, move = args
    _engine.reset_stats()
    score = _engine.search(state.child(*move), depth=0)

    fresh = {k: v for k, v in _engine.table.items() if _sent.get(k) != v}
    _sent.update(fresh)
    return move, score, fresh, _engine.stats.as_dict()


class ParallelMoveSelector:
    """Same contract as MoveSelector, candidates spread over a process pool."""

    def __init__(self, engine: Optional[SearchEngine] = None, num_workers: Optional[int] = None,
                 on_progress: Optional[ProgressCallback] = None,
                 rng: Optional[random.Random] = None):
        self.engine = engine if engine is not None else SearchEngine()
        self.num_workers = num_workers or cpu_count()
        self.on_progress = on_progress
        self.rng = rng

    def worker_args(self, snapshot: Dict[str, MemoEntry]):
        """Picklable initializer arguments; tracer streams do not cross processes."""
        tracer = self.engine.tracer
        trace = isinstance(tracer, SearchTracer)
        return (snapshot, self.engine.max_depth, trace, tracer.print_depth if trace else None)

    def score_moves(self, state: GameState) -> Dict[Move, int]:
        moves = state.legal_moves()
        if self.num_workers <= 1 or len(moves) <= 1:
            return MoveSelector(self.engine, self.on_progress, self.rng).score_moves(state)

        table = self.engine.table
        snapshot = table.snapshot(definite_only=True)
        tasks = [(state, move) for move in moves]
        total = len(tasks)

        scores = {}
        with Pool(min(self.num_workers, total), initializer=_init_worker,
                  initargs=self.worker_args(snapshot)) as pool:
            for done, (move, score, fresh, stats) in enumerate(
                    pool.imap_unordered(_score_move, tasks), 1):
                scores[move] = score
                table.merge(fresh)
                for field, value in stats.items():
                    setattr(self.engine.stats, field, getattr(self.engine.stats, field) + value)
                if self.on_progress is not None:
                    self.on_progress(done, total)
        return scores

    def select(self, state: GameState, maximizing: Optional[bool] = None) -> SelectionResult:
        state, maximizing = _prepare(state, maximizing)
        scores = self.score_moves(state)
        return collect_best(scores, maximizing, self.rng)
