"""
solvers/exhaustive.py

Полный перебор: находит ВСЕ последовательности ходов,
заканчивающиеся одним колышком.
"""

import time

from .base import BaseSolver, SolverStats, SolutionPath, Emit
from core.bitboard import TriBoard
from utils.error_handling import validate_board


class ExhaustiveSolver(BaseSolver):
    """
    Рекурсивный DFS без мемоизации и без отсечений.

    Особенности:
    - ходы перебираются строго в порядке каталога
    - одинаковые позиции в разных ветках не склеиваются:
      каждая последовательность ходов: отдельное решение
    - путь: кортеж досок, у каждого вызова свой
    """

    def explore(self, board: TriBoard, emit: Emit) -> None:
        validate_board(board)
        self.stats = SolverStats()
        start_time = time.time()

        self._log(f"Starting exhaustive search (pegs={board.peg_count()})")
        self._explore(board, (board,), emit)

        self.stats.time_elapsed = time.time() - start_time
        self._log(f"Search finished. Stats: {self.stats}")

    def _explore(self, board: TriBoard, path: SolutionPath, emit: Emit) -> None:
        """
        Рекурсивный обход.

        Args:
            board: текущее состояние (== path[-1])
            path: доски от старта до текущей включительно
            emit: куда отдавать найденные решения
        """
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, len(path) - 1)

        moved = False
        for move in self.moves:
            if board.can_play(move):
                new_board = board.apply_move(move)
                self._explore(new_board, path + (new_board,), emit)
                moved = True

        if moved:
            return

        # Лист дерева: решение только если остался один колышек
        if board.peg_count() == 1:
            self.stats.solutions_found += 1
            emit(path)
        else:
            self.stats.dead_ends += 1

    def stream(self, board: TriBoard):
        """Запускает поиск в фоне и возвращает поток решений."""
        from .stream import start_search
        return start_search(board, self)
