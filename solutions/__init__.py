"""
solutions - Проверка найденных решений.
"""

from .verify import path_moves, verify_solution_path

__all__ = [
    'path_moves',
    'verify_solution_path',
]
