from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    max_depth: Optional[int] = None    # None = search to the end of the game; 2 is a good interactive value
    verbose: bool = False              # trace evaluated / pruned moves
    print_depth: Optional[int] = None  # trace only plies <= print_depth (None = all)
    num_workers: int = 1               # >1 scores top-level moves in a process pool
    seed: Optional[int] = None         # tie-break sampling

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be a non-negative integer or None")
        if self.print_depth is not None and self.print_depth < 0:
            raise ValueError("print_depth must be a non-negative integer or None")
        if self.num_workers < 1:
            raise ValueError("num_workers must be >= 1")


@dataclass
class StorageConfig:
    cache_file: str = "utt_cache_digest.json"
    entries_per_chunk: int = 2000
    show_progress: bool = True

    def __post_init__(self):
        if self.entries_per_chunk < 1:
            raise ValueError("entries_per_chunk must be >= 1")


@dataclass
class Config:
    search: SearchConfig = None
    storage: StorageConfig = None

    def __post_init__(self):
        if self.search is None:
            self.search = SearchConfig()
        if self.storage is None:
            self.storage = StorageConfig()
