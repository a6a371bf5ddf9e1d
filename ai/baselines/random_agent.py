"""
Random Agent - selects random legal moves.
Used as performance floor baseline.
"""
import random
from typing import Optional

from game import GameState, Move


class RandomAgent:
    """Agent that plays random legal moves."""

    def __init__(self, seed: Optional[int] = None):
        self.name = "Random"
        self.rng = random.Random(seed)

    def select_action(self, state: GameState) -> Move:
        legal_moves = state.legal_moves()
        if not legal_moves:
            raise ValueError("No legal moves")
        return self.rng.choice(legal_moves)
