"""
Persistent stores for the search memo table.

Loaded once before a session and saved once after; never touched
during search.
"""
import os

from .base import CacheStore, entry_to_record, finite_score, record_to_entry
from .json_store import CHUNK_DEFAULT_ENTRIES, JsonCacheStore
from .pickle_store import PickleCacheStore


def open_store(path: str, entries_per_chunk: int = CHUNK_DEFAULT_ENTRIES,
               show_progress: bool = True) -> CacheStore:
    """Pick a store from the file extension (.pkl/.pickle or JSON)."""
    ext = os.path.splitext(path)[1].lower()
    if ext in ('.pkl', '.pickle'):
        return PickleCacheStore(path, show_progress=show_progress)
    return JsonCacheStore(path, entries_per_chunk=entries_per_chunk, show_progress=show_progress)


__all__ = [
    'CacheStore', 'JsonCacheStore', 'PickleCacheStore', 'CHUNK_DEFAULT_ENTRIES',
    'open_store', 'entry_to_record', 'record_to_entry', 'finite_score',
]
