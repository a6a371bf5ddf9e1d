"""
Rules for a single 3x3 board.

The same checks run on sub-boards and on the meta-board built from their
outcomes (meta_view).
"""
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2
    DEAD = 3  # drawn sub-board

    @property
    def opponent(self) -> "Cell":
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError(f"{self.name} has no opponent")


MARKS = (Cell.X, Cell.O)

WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def winning_line(cells: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
    """Return the first line holding three equal marks, or None."""
    for a, b, c in WIN_LINES:
        if cells[a] in MARKS and cells[a] == cells[b] == cells[c]:
            return (a, b, c)
    return None


def resolve_winner(cells: Sequence[Cell]) -> Optional[Cell]:
    line = winning_line(cells)
    if line is None:
        return None
    return Cell(cells[line[0]])


def is_full(cells: Sequence[Cell]) -> bool:
    return Cell.EMPTY not in cells


def is_resolved(cells: Sequence[Cell]) -> bool:
    """Won by either side or full."""
    return resolve_winner(cells) is not None or is_full(cells)


def outcome(cells: Sequence[Cell]) -> Cell:
    """Collapse a board into one meta-board cell: winner, DEAD or EMPTY."""
    w = resolve_winner(cells)
    if w is not None:
        return w
    if is_full(cells):
        return Cell.DEAD
    return Cell.EMPTY


def finalize(cells: Sequence[Cell]) -> List[Cell]:
    """
    Resolved boards are rewritten as 9 identical cells of their outcome,
    so the meta-board check sees a uniform value. Open boards come back
    unchanged (as a new list).
    """
    result = outcome(cells)
    if result is Cell.EMPTY:
        return list(cells)
    return [result] * 9


def meta_view(boards: Sequence[Sequence[Cell]]) -> List[Cell]:
    return [outcome(b) for b in boards]


def overall_winner(boards: Sequence[Sequence[Cell]]) -> Optional[Cell]:
    return resolve_winner(meta_view(boards))


def meta_winning_line(boards: Sequence[Sequence[Cell]]) -> Optional[Tuple[int, int, int]]:
    """Sub-board indices of the winning meta line (for display)."""
    return winning_line(meta_view(boards))
