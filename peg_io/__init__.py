"""
peg_io - Ввод/вывод для треугольного Peg Solitaire

Экспортирует:
- Парсинг стартовой позиции
- Текстовый вывод досок, решений и итоговой строки
"""

from .parser import parse_board
from .visualizer import display_board, format_solution_path, format_summary

__all__ = [
    'parse_board',
    'display_board',
    'format_solution_path',
    'format_summary',
]
