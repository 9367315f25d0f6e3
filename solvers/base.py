"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Tuple
from dataclasses import dataclass

from core.bitboard import TriBoard
from core.moves import Move, MOVES
from utils.logging import get_logger

SolutionPath = Tuple[TriBoard, ...]
Emit = Callable[[SolutionPath], None]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    dead_ends: int = 0
    solutions_found: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Dead ends: {self.dead_ends}, "
            f"Solutions: {self.solutions_found}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатель не собирает решения сам, а отдаёт каждое найденное
    решение в callback emit: так их можно потреблять по одному.
    """

    def __init__(self, moves: List[Move] = MOVES, verbose: bool = False):
        self.moves = moves
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def explore(self, board: TriBoard, emit: Emit) -> None:
        """
        Обходит все пути из board.

        Args:
            board: начальная позиция
            emit: вызывается для каждого найденного решения
        """
        pass

    def solve_all(self, board: TriBoard) -> List[SolutionPath]:
        """Собирает все решения в список (в порядке обнаружения)."""
        solutions: List[SolutionPath] = []
        self.explore(board, solutions.append)
        return solutions

    def _log(self, message: str) -> None:
        """Логирует сообщение если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")
