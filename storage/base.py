"""
Common pieces for memo-table persistence.
"""
import math
import os
from typing import Dict, Mapping, Tuple, Union

from ai.search.transposition_table import MemoEntry, TranspositionTable, is_definite_score

SCORE_CLAMP = 9999

Entries = Union[TranspositionTable, Mapping[str, MemoEntry]]


def finite_score(score) -> int:
    """Clamp +/- infinity so the score survives JSON."""
    if isinstance(score, float) and math.isinf(score):
        return SCORE_CLAMP if score > 0 else -SCORE_CLAMP
    return int(score)


def _strict_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


def entry_to_record(key: str, entry: MemoEntry) -> dict:
    return {
        "fingerprint": key,
        "depth": int(entry.depth),
        "score": finite_score(entry.score),
        "definite": bool(entry.definite),
    }


def record_to_entry(record) -> Tuple[str, MemoEntry]:
    """Validate one stored record. Raises KeyError/TypeError/ValueError."""
    if not isinstance(record, Mapping):
        raise TypeError(f"record must be an object, got {type(record).__name__}")
    key = record["fingerprint"]
    if not isinstance(key, str) or not key:
        raise TypeError("fingerprint must be a non-empty string")
    depth = _strict_int(record["depth"], "depth")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    score = _strict_int(record["score"], "score")
    definite = record.get("definite")
    if definite is None:
        definite = is_definite_score(score)
    elif not isinstance(definite, bool):
        raise TypeError(f"definite must be a boolean, got {definite!r}")
    return key, MemoEntry(depth, score, definite)


class CacheStore:
    """Bulk load/save of a memo table; one file per store."""

    def __init__(self, path: str, show_progress: bool = True):
        self.path = path
        self.show_progress = show_progress
        self.skipped = 0

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> Dict[str, MemoEntry]:
        raise NotImplementedError

    def save(self, entries: Entries):
        raise NotImplementedError

    def load_into(self, table: TranspositionTable) -> int:
        entries = self.load()
        table.update(entries)
        return len(entries)

    def _ensure_dir(self):
        directory = os.path.dirname(self.path)
        os.makedirs(directory if directory else '.', exist_ok=True)

    def _warn(self, msg: str):
        print(f"⚠ {msg}")
