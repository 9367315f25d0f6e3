"""
peg_io/visualizer.py

Текстовый вывод досок и решений.
"""

from typing import Sequence

from core.bitboard import TriBoard


def display_board(board: TriBoard) -> str:
    """
    ASCII-треугольник доски:

            1
           1 1
          1 0 1
         1 1 1 1
        1 1 1 1 1
    """
    return board.to_string()


def format_solution_path(path: Sequence[TriBoard]) -> str:
    """
    Форматирует решение: все доски по порядку,
    после каждой: пустая строка.
    """
    return "".join(f"{display_board(board)}\n\n" for board in path)


def format_summary(printed: int, total: int) -> str:
    return f"Printed {printed} of {total} solutions."
