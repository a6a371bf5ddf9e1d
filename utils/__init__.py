from .numpad import numpad_to_index, index_to_numpad, to_numpad, format_moves, format_move
from .progress import TqdmProgress, SearchTracer

__all__ = [
    'numpad_to_index', 'index_to_numpad', 'to_numpad', 'format_moves', 'format_move',
    'TqdmProgress', 'SearchTracer',
]
