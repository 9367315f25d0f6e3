"""
core/utils.py

Геометрия треугольной доски и общие константы.

Нумерация лунок (по строкам, слева направо):

        0
       1 2
      3 4 5
     6 7 8 9
   10 11 12 13 14
"""

from typing import List, Tuple

NUM_HOLES = 15

# Лунки каждой строки треугольника
ROWS: List[Tuple[int, ...]] = [
    (0,),
    (1, 2),
    (3, 4, 5),
    (6, 7, 8, 9),
    (10, 11, 12, 13, 14),
]

FULL_MASK = (1 << NUM_HOLES) - 1

# Символы для отображения
PEG = '1'       # Колышек
HOLE = '0'      # Пустая лунка


def hole_to_coords(hole: int) -> Tuple[int, int]:
    """Номер лунки → (строка, позиция в строке)."""
    for r, row in enumerate(ROWS):
        if hole in row:
            return r, row.index(hole)
    raise ValueError(f"hole {hole} is not on the board")


def coords_to_hole(row: int, col: int) -> int:
    """(строка, позиция в строке) → номер лунки."""
    return ROWS[row][col]
