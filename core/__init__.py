"""
core - Ядро треугольного Peg Solitaire

Базовые структуры данных: доска, каталог ходов, геометрия.
"""

from .bitboard import TriBoard
from .moves import Move, MOVES, MOVES_BY_MASK
from .utils import (
    NUM_HOLES, ROWS, FULL_MASK, PEG, HOLE,
    hole_to_coords, coords_to_hole
)

__all__ = [
    'TriBoard', 'Move', 'MOVES', 'MOVES_BY_MASK',
    'NUM_HOLES', 'ROWS', 'FULL_MASK', 'PEG', 'HOLE',
    'hole_to_coords', 'coords_to_hole'
]
