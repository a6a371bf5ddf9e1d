import hashlib
from typing import Iterable, List, Optional, Sequence, Tuple

from .rules import (
    Cell, MARKS, finalize, is_full, is_resolved, meta_view, overall_winner,
    resolve_winner,
)

ALL_BOARDS = tuple(range(9))

Move = Tuple[int, int]  # (sub-board, cell)


class GameState:
    """
    Nine sub-boards, the sub-boards playable next and the mark to move.

    Resolved sub-boards are always stored finalized (9 identical cells),
    so an EMPTY cell only ever appears on an open board.
    """

    def __init__(self, boards: Optional[Sequence[Sequence[Cell]]] = None,
                 legal: Optional[Iterable[int]] = None, mover: Cell = Cell.X):
        if boards is None:
            boards = [[Cell.EMPTY] * 9 for _ in range(9)]
        if len(boards) != 9 or any(len(b) != 9 for b in boards):
            raise ValueError("Expected 9 sub-boards of 9 cells")
        if mover not in MARKS:
            raise ValueError(f"Invalid mover: {mover!r}")

        self.boards = [finalize([Cell(c) for c in b]) for b in boards]
        self.mover = Cell(mover)
        if legal is None:
            self.legal = ALL_BOARDS
        else:
            self.legal = tuple(sorted(set(legal)))
            if any(not 0 <= b < 9 for b in self.legal):
                raise ValueError(f"Invalid legal set: {self.legal}")
            # A single finished target board frees the choice
            if len(self.legal) == 1 and is_resolved(self.boards[self.legal[0]]):
                self.legal = ALL_BOARDS

    @classmethod
    def new(cls) -> "GameState":
        return cls()

    @classmethod
    def after_move_into(cls, boards, target: int, mover: Cell) -> "GameState":
        """Build a state whose legal set follows from the cell last played."""
        state = cls(boards, mover=mover)
        state.legal = state._next_legal(target)
        return state

    def clone(self) -> "GameState":
        """Copy mutable state only; faster than copy.deepcopy."""
        new_state = GameState.__new__(GameState)
        new_state.boards = [b[:] for b in self.boards]
        new_state.legal = self.legal
        new_state.mover = self.mover
        return new_state

    def with_mover(self, mover: Cell) -> "GameState":
        state = self.clone()
        state.mover = Cell(mover)
        return state

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def legal_moves(self) -> List[Move]:
        """Board index ascending, then cell index ascending."""
        moves = []
        for b in self.legal:
            board = self.boards[b]
            for c in range(9):
                if board[c] == Cell.EMPTY:
                    moves.append((b, c))
        return moves

    def legal_moves_by_board(self):
        moves = {}
        for b, c in self.legal_moves():
            moves.setdefault(b, []).append(c)
        return moves

    def _next_legal(self, target: int) -> Tuple[int, ...]:
        if is_resolved(self.boards[target]):
            return ALL_BOARDS
        return (target,)

    def play(self, board_idx: int, cell_idx: int):
        """Place the mover's mark without validation (search hot path)."""
        board = self.boards[board_idx]
        board[cell_idx] = self.mover
        if is_resolved(board):
            self.boards[board_idx] = finalize(board)
        self.legal = self._next_legal(cell_idx)
        self.mover = self.mover.opponent

    def child(self, board_idx: int, cell_idx: int) -> "GameState":
        nxt = self.clone()
        nxt.play(board_idx, cell_idx)
        return nxt

    def _is_valid_move(self, board_idx: int, cell_idx: int) -> bool:
        if not (0 <= board_idx < 9 and 0 <= cell_idx < 9):
            return False
        if self.is_terminal():
            return False
        if board_idx not in self.legal:
            return False
        return self.boards[board_idx][cell_idx] == Cell.EMPTY

    def make_move(self, board_idx: int, cell_idx: int, validate: bool = True):
        if validate and not self._is_valid_move(board_idx, cell_idx):
            raise ValueError(f"Illegal move: board {board_idx}, cell {cell_idx}")
        self.play(board_idx, cell_idx)

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    def meta(self) -> List[Cell]:
        return meta_view(self.boards)

    def winner(self) -> Optional[Cell]:
        return overall_winner(self.boards)

    def is_draw(self) -> bool:
        meta = self.meta()
        return resolve_winner(meta) is None and is_full(meta)

    def is_terminal(self) -> bool:
        meta = self.meta()
        return resolve_winner(meta) is not None or is_full(meta)

    def terminal_score(self) -> int:
        """+1 X wins, -1 O wins, 0 otherwise."""
        w = self.winner()
        if w is Cell.X:
            return 1
        if w is Cell.O:
            return -1
        return 0

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def fingerprint(self) -> str:
        """SHA-256 over (cells, legal set, mover); stable across processes."""
        cells = "".join(str(int(c)) for b in self.boards for c in b)
        legal = "".join(str(b) for b in self.legal)
        payload = f"{cells}|{legal}|{int(self.mover)}"
        return hashlib.sha256(payload.encode("ascii")).hexdigest()

    def empty_count(self) -> int:
        return sum(b.count(Cell.EMPTY) for b in self.boards)

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return (self.boards == other.boards and self.legal == other.legal
                and self.mover == other.mover)

    def __hash__(self):
        return hash(self.fingerprint())

    def __repr__(self):
        return (f"GameState(mover={self.mover.name}, legal={list(self.legal)}, "
                f"empty={self.empty_count()})")
