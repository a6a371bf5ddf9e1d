"""
Opponents that pick moves for a GameState.
"""
from .random_agent import RandomAgent
from .minimax_agent import MinimaxAgent

__all__ = ['RandomAgent', 'MinimaxAgent']
