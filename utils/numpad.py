"""
Numeric-keypad notation: 7 8 9 on top, 1 2 3 at the bottom.
Internal indices are row-major from the top-left (0..8).
"""
from typing import Dict, List

_NUMPAD_TO_INDEX = {7: 0, 8: 1, 9: 2, 4: 3, 5: 4, 6: 5, 1: 6, 2: 7, 3: 8}
_INDEX_TO_NUMPAD = {v: k for k, v in _NUMPAD_TO_INDEX.items()}


def numpad_to_index(n: int) -> int:
    if n not in _NUMPAD_TO_INDEX:
        raise ValueError(f"Numpad key must be 1-9, got {n!r}")
    return _NUMPAD_TO_INDEX[n]


def index_to_numpad(idx: int) -> int:
    if idx not in _INDEX_TO_NUMPAD:
        raise ValueError(f"Index must be 0-8, got {idx!r}")
    return _INDEX_TO_NUMPAD[idx]


def to_numpad(best: Dict[int, List[int]]) -> Dict[int, List[int]]:
    """Translate a {board: [cells]} dict, sorted by numpad key."""
    converted = {
        index_to_numpad(b): sorted(index_to_numpad(c) for c in cells)
        for b, cells in best.items()
    }
    return dict(sorted(converted.items()))


def format_moves(best: Dict[int, List[int]]) -> str:
    parts = [f"{b}: {cells}" for b, cells in to_numpad(best).items()]
    return "{" + ", ".join(parts) + "}"


def format_move(move) -> str:
    b, c = move
    return f"{index_to_numpad(b)}-{index_to_numpad(c)}"
