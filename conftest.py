"""
Shared fixtures. Lives at the repository root so the packages import
without installation.
"""
import pytest

from game import Cell, GameState

X, O, _ = Cell.X, Cell.O, Cell.EMPTY


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running search tests")


def single_board_endgame(mover):
    """
    Only sub-board 8 is open and it decides the game:
    X wins the meta diagonal 0-4-8 by winning it, anything else is a draw.

        X O .
        . X .
        O . .

    X to move wins (cell 8 at once, or cell 3/5 with a double threat);
    O to move holds the draw only by taking cell 8.
    """
    boards = [
        [X] * 9, [O] * 9, [X] * 9,
        [O] * 9, [X] * 9, [O] * 9,
        [O] * 9, [X] * 9,
        [X, O, _,
         _, X, _,
         O, _, _],
    ]
    return GameState(boards, legal=[8], mover=mover)


def two_board_endgame(mover):
    """Sub-boards 7 and 8 open, 7 empty cells in total."""
    boards = [
        [X] * 9, [O] * 9, [X] * 9,
        [O] * 9, [X] * 9, [O] * 9,
        [O] * 9,
        [X, _, O,
         _, O, _,
         X, _, X],
        [X, O, X,
         _, O, _,
         O, X, _],
    ]
    return GameState(boards, mover=mover)


@pytest.fixture
def endgame_x():
    return single_board_endgame(X)


@pytest.fixture
def endgame_o():
    return single_board_endgame(O)


@pytest.fixture
def two_board_x():
    return two_board_endgame(X)


@pytest.fixture
def two_board_o():
    return two_board_endgame(O)
