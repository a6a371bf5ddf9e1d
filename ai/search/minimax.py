"""
Minimax with alpha-beta pruning over ultimate tic-tac-toe.

Scores are from X's point of view: +1 X wins, -1 O wins, 0 draw, and
heuristic material counts (|h| <= 9) at depth-limited cutoffs.
"""
from dataclasses import dataclass, asdict
from typing import Optional, Tuple

from game import Cell, GameState
from .heuristic import heuristic
from .transposition_table import TranspositionTable

# Finite stand-in for +/- infinity; larger than any reachable score.
SCORE_INF = 100


@dataclass
class SearchStats:
    nodes: int = 0
    cache_hits: int = 0
    terminals: int = 0
    cutoffs: int = 0
    prunes: int = 0

    def as_dict(self):
        return asdict(self)


class SearchEngine:
    """Recursive minimax sharing one TranspositionTable across calls."""

    def __init__(self, table: Optional[TranspositionTable] = None,
                 max_depth: Optional[int] = None, tracer=None, prune: bool = True):
        """
        Args:
            table: Shared memo table (a fresh one if None)
            max_depth: Ply at which to stop and evaluate heuristically; None searches to the end
            tracer: Optional object with evaluating(move, depth) / pruned(move, depth)
            prune: False runs plain minimax (same result, more nodes)
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        self.table = table if table is not None else TranspositionTable()
        self.max_depth = max_depth
        self.tracer = tracer
        self.prune = prune
        self.stats = SearchStats()

    def reset_stats(self):
        self.stats = SearchStats()

    def search(self, state: GameState, depth: int = 0, maximizing: Optional[bool] = None,
               alpha: int = -SCORE_INF, beta: int = SCORE_INF) -> int:
        if maximizing is not None and maximizing != (state.mover is Cell.X):
            state = state.with_mover(Cell.X if maximizing else Cell.O)
        score, _ = self._search(state, depth, alpha, beta)
        return score

    def _search(self, state: GameState, depth: int, alpha: int, beta: int) -> Tuple[int, bool]:
        """
        Returns (score, proven). proven is False once any heuristic cutoff
        fed into the score.
        """
        self.stats.nodes += 1
        key = state.fingerprint()
        terminal = state.is_terminal()

        entry = self.table.lookup(key, terminal)
        if entry is not None:
            self.stats.cache_hits += 1
            return entry.score, True

        if terminal:
            self.stats.terminals += 1
            score = state.terminal_score()
            self.table.store_terminal(key, depth, score)
            return score, True

        if self.max_depth is not None and depth >= self.max_depth:
            self.stats.cutoffs += 1
            score = heuristic(state.boards)
            self.table.store_cutoff(key, depth, score)
            return score, False

        moves = state.legal_moves()
        if not moves:
            return 0, False

        maximizing = state.mover is Cell.X
        alpha0, beta0 = alpha, beta
        best = -SCORE_INF if maximizing else SCORE_INF
        proven = True

        for move in moves:
            if self.tracer is not None:
                self.tracer.evaluating(move, depth)

            child = state.child(*move)
            score, child_proven = self._search(child, depth + 1, alpha, beta)
            proven = proven and child_proven

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)

            if self.prune and beta <= alpha:
                self.stats.prunes += 1
                if self.tracer is not None:
                    self.tracer.pruned(move, depth)
                break

        # Outside the incoming window the value is only a bound. Without a
        # depth limit scores stay in [-1, 1], so a proven +1/-1 on the bound
        # side is still exact; a pruned sibling could otherwise have hit a
        # heuristic cutoff beyond it.
        extreme_ok = proven and self.max_depth is None
        exact = (not self.prune
                 or alpha0 < best < beta0
                 or (extreme_ok and best >= beta0 and best == 1)
                 or (extreme_ok and best <= alpha0 and best == -1))
        if exact:
            self.table.store_expanded(key, depth, best, definite=proven)
        return best, proven
