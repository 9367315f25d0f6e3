"""
solvers - Поиск решений треугольного Peg Solitaire

Экспортирует:
- ExhaustiveSolver: полный DFS-перебор всех решений
- SolutionStream: синхронный поток решений между потоками
- start_search: запуск поиска в фоне
"""

from .base import BaseSolver, SolverStats, SolutionPath
from .exhaustive import ExhaustiveSolver
from .stream import SolutionStream, start_search

__all__ = [
    'BaseSolver',
    'SolverStats',
    'SolutionPath',
    'ExhaustiveSolver',
    'SolutionStream',
    'start_search',
]
