"""
Transposition table for minimax scores.

Keyed by GameState.fingerprint(). Each entry remembers the ply it was
computed at and whether the score is a proven game value (definite) or
something that depended on a heuristic cutoff.
"""
from typing import Dict, Mapping, NamedTuple, Optional, Tuple, Union


class MemoEntry(NamedTuple):
    depth: int
    score: int
    definite: bool = False


def is_definite_score(score: int, terminal: bool = False) -> bool:
    """+1/-1 are decisive; 0 is only decisive on a finished game."""
    return score == 1 or score == -1 or (score == 0 and terminal)


def _as_entry(value: Union[MemoEntry, Tuple, Mapping]) -> MemoEntry:
    if isinstance(value, MemoEntry):
        return value
    if isinstance(value, Mapping):
        depth, score = value['depth'], value['score']
        definite = value.get('definite')
    else:
        depth, score = value[0], value[1]
        definite = value[2] if len(value) > 2 else None
    if definite is None:
        definite = is_definite_score(score)
    return MemoEntry(int(depth), int(score), bool(definite))


class TranspositionTable:
    """
    Depth-aware memo table.

    Read policy: only definite entries short-circuit a search, at any depth.
    Write policy:
      - terminal:  always overwrite
      - cutoff:    never replace a definite entry
      - expanded:  new key, new definite result, or existing depth <= depth;
                   a definite entry is never replaced by a non-definite one
    """

    def __init__(self, entries: Optional[Mapping[str, MemoEntry]] = None):
        self.entries: Dict[str, MemoEntry] = {}
        self.stats = {
            "hits": 0,
            "misses": 0,
            "stores": 0,
            "skipped": 0,
        }
        if entries:
            self.update(entries)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def __iter__(self):
        return iter(self.entries)

    def items(self):
        return self.entries.items()

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[MemoEntry]:
        return self.entries.get(key)

    def put(self, key: str, depth: int, score: int, definite: Optional[bool] = None):
        """Unconditional write. definite defaults to the score rule."""
        if definite is None:
            definite = is_definite_score(score)
        self.entries[key] = MemoEntry(depth, score, definite)
        self.stats["stores"] += 1

    # ------------------------------------------------------------------
    # Search policy
    # ------------------------------------------------------------------

    def lookup(self, key: str, terminal: bool = False) -> Optional[MemoEntry]:
        """
        Return the entry if it may stand in for a search of this position.
        A proven outcome holds no matter how deep the query is, so the
        stored depth is not consulted.
        """
        entry = self.entries.get(key)
        if entry is not None and (entry.definite or (terminal and is_definite_score(entry.score, True))):
            self.stats["hits"] += 1
            return entry
        self.stats["misses"] += 1
        return None

    def store_terminal(self, key: str, depth: int, score: int):
        self.put(key, depth, score, definite=True)

    def store_cutoff(self, key: str, depth: int, score: int):
        existing = self.entries.get(key)
        if existing is not None and existing.definite:
            self.stats["skipped"] += 1
            return
        self.put(key, depth, score, definite=False)

    def store_expanded(self, key: str, depth: int, score: int, definite: bool):
        existing = self.entries.get(key)
        if existing is None or self._prefer(MemoEntry(depth, score, definite), existing):
            self.put(key, depth, score, definite)
        else:
            self.stats["skipped"] += 1

    @staticmethod
    def _prefer(new: MemoEntry, old: MemoEntry) -> bool:
        if new.definite:
            return True
        if old.definite:
            return False
        return old.depth <= new.depth

    # ------------------------------------------------------------------
    # Bulk
    # ------------------------------------------------------------------

    def update(self, entries: Mapping[str, Union[MemoEntry, Tuple, Mapping]]):
        """Load entries verbatim (e.g. from a cache store)."""
        for key, value in entries.items():
            self.entries[key] = _as_entry(value)

    def merge(self, entries: Union["TranspositionTable", Mapping[str, MemoEntry]]) -> int:
        """
        Fold another table in with the expansion preference order.
        Returns the number of entries written.
        """
        if isinstance(entries, TranspositionTable):
            entries = entries.entries
        written = 0
        for key, value in entries.items():
            new = _as_entry(value)
            old = self.entries.get(key)
            if old is None or (new != old and self._prefer(new, old)):
                self.entries[key] = new
                written += 1
        return written

    def snapshot(self, definite_only: bool = False) -> Dict[str, MemoEntry]:
        if definite_only:
            return {k: v for k, v in self.entries.items() if v.definite}
        return dict(self.entries)

    def get_stats(self):
        total = self.stats["hits"] + self.stats["misses"]
        hit_rate = self.stats["hits"] / total if total > 0 else 0
        definite = sum(1 for v in self.entries.values() if v.definite)
        return {
            **self.stats,
            "total_queries": total,
            "hit_rate": f"{hit_rate:.2%}",
            "entries": len(self.entries),
            "definite_entries": definite,
        }

    def clear(self):
        self.entries.clear()
        self.stats = {
            "hits": 0,
            "misses": 0,
            "stores": 0,
            "skipped": 0,
        }
