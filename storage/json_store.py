"""
Chunked JSON cache file.

The file is a sequence of pretty-printed JSON arrays, each holding up to
entries_per_chunk records. A damaged chunk only loses its own records.
"""
import datetime
import json
import os
from itertools import islice
from typing import Dict

from tqdm import tqdm

from ai.search.transposition_table import MemoEntry
from .base import CacheStore, Entries, entry_to_record, record_to_entry

CHUNK_DEFAULT_ENTRIES = 2000


class JsonCacheStore(CacheStore):

    def __init__(self, path: str, entries_per_chunk: int = CHUNK_DEFAULT_ENTRIES,
                 show_progress: bool = True):
        super().__init__(path, show_progress)
        if entries_per_chunk < 1:
            raise ValueError("entries_per_chunk must be >= 1")
        self.entries_per_chunk = entries_per_chunk

    def save(self, entries: Entries):
        self._ensure_dir()
        total = len(entries)
        saved_at = datetime.datetime.now(datetime.timezone.utc).isoformat()
        items = iter(entries.items())

        with open(self.path, 'w', encoding='utf-8') as f, \
                tqdm(total=total, desc="Saving (JSON)", unit="entry", ncols=80,
                     leave=False, disable=not self.show_progress) as pbar:
            while True:
                chunk = [
                    {**entry_to_record(key, entry), "metadata": {"saved_at": saved_at}}
                    for key, entry in islice(items, self.entries_per_chunk)
                ]
                if not chunk:
                    break
                f.write(json.dumps(chunk, indent=2))
                f.write("\n")
                pbar.update(len(chunk))

        print(f"✓ Cache saved: {self.path} ({total} entries)")

    def load(self) -> Dict[str, MemoEntry]:
        self.skipped = 0
        if not self.exists():
            return {}
        try:
            entries = self._read_chunks()
        except (OSError, UnicodeDecodeError) as e:
            self._warn(f"Failed to load cache ({type(e).__name__}): {e}. Starting with empty cache.")
            return {}

        if self.skipped:
            self._warn(f"Skipped {self.skipped} invalid cache record(s)")
        print(f"✓ Cache loaded: {self.path} ({len(entries)} entries)")
        return entries

    def _read_chunks(self) -> Dict[str, MemoEntry]:
        entries: Dict[str, MemoEntry] = {}
        file_size = os.path.getsize(self.path)
        buffer = []

        with open(self.path, 'r', encoding='utf-8') as f, \
                tqdm(total=file_size, desc="Loading (JSON)", unit="B", unit_scale=True,
                     ncols=80, leave=False, disable=not self.show_progress) as pbar:
            for line in f:
                buffer.append(line)
                if line.strip().endswith("]"):
                    text = "".join(buffer)
                    buffer = []
                    self._parse_chunk(text, entries)
                    pbar.update(len(text.encode('utf-8')))

            if "".join(buffer).strip():
                self._warn("Skipping truncated JSON chunk at end of file")
                self.skipped += 1

        return entries

    def _parse_chunk(self, text: str, entries: Dict[str, MemoEntry]):
        try:
            chunk = json.loads(text)
        except json.JSONDecodeError as e:
            self._warn(f"Skipping invalid JSON chunk: {e}")
            self.skipped += 1
            return
        if not isinstance(chunk, list):
            self._warn("Skipping JSON chunk that is not an array")
            self.skipped += 1
            return

        for record in chunk:
            try:
                key, entry = record_to_entry(record)
            except (KeyError, TypeError, ValueError):
                self.skipped += 1
                continue
            entries[key] = entry
