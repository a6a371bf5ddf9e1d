import os
import pickle
from typing import Dict

from ai.search.transposition_table import MemoEntry
from .base import CacheStore, Entries, record_to_entry


class PickleCacheStore(CacheStore):
    """
    Single-pickle cache, smaller and faster than JSON.

    Layout: {'entries': {fingerprint: (depth, score, definite)}, 'stats': {...}}
    """

    def save(self, entries: Entries, stats: dict = None):
        self._ensure_dir()
        data = {
            'entries': {
                key: (int(entry.depth), int(entry.score), bool(entry.definite))
                for key, entry in entries.items()
            },
            'stats': stats or {},
        }
        with open(self.path, 'wb') as f:
            pickle.dump(data, f, protocol=pickle.HIGHEST_PROTOCOL)

        size_mb = os.path.getsize(self.path) / 1024 / 1024
        print(f"✓ Cache saved: {self.path} ({size_mb:.1f} MB, {len(data['entries'])} entries)")

    def load(self) -> Dict[str, MemoEntry]:
        self.skipped = 0
        if not self.exists():
            return {}
        try:
            with open(self.path, 'rb') as f:
                data = pickle.load(f)
            items = list(data['entries'].items())
        except Exception as e:
            self._warn(f"Failed to load cache ({type(e).__name__}): {e}. Starting with empty cache.")
            return {}

        entries: Dict[str, MemoEntry] = {}
        for key, value in items:
            try:
                depth, score, definite = value
                key, entry = record_to_entry({
                    "fingerprint": key, "depth": depth, "score": score, "definite": definite,
                })
            except (KeyError, TypeError, ValueError):
                self.skipped += 1
                continue
            entries[key] = entry

        if self.skipped:
            self._warn(f"Skipped {self.skipped} invalid cache record(s)")
        print(f"✓ Cache loaded: {self.path} ({len(entries)} entries)")
        return entries
