"""
Progress and trace callbacks for the search.

Both are observers only; nothing they return is used.
"""
import sys
from typing import Optional

from tqdm import tqdm

_GREY = "\033[90m"
_RESET = "\033[0m"


class TqdmProgress:
    """on_progress(done, total) backed by a tqdm bar, one bar per pass."""

    def __init__(self, desc: str = "AI evaluating moves", disable: bool = False):
        self.desc = desc
        self.disable = disable
        self.pbar = None

    def __call__(self, done: int, total: int):
        if self.pbar is None:
            self.pbar = tqdm(total=total, desc=self.desc, ncols=80,
                             leave=False, disable=self.disable)
        self.pbar.update(done - self.pbar.n)
        if done >= total:
            self.close()

    def close(self):
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None


class SearchTracer:
    """Prints each evaluated and pruned move, optionally only near the root."""

    def __init__(self, print_depth: Optional[int] = None, stream=None):
        self.print_depth = print_depth
        self.stream = stream or sys.stdout

    def _wants(self, depth: int) -> bool:
        return self.print_depth is None or depth <= self.print_depth

    def _emit(self, text: str):
        self.stream.write(f"\r{' ' * 50}\r{_GREY}{text}{_RESET}")
        self.stream.flush()

    def evaluating(self, move, depth: int):
        if self._wants(depth):
            self._emit(f"Evaluating move {move} at depth {depth}")

    def pruned(self, move, depth: int):
        if self._wants(depth):
            self._emit(f"Pruned after move {move} at depth {depth}")
