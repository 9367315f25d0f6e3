"""
solvers/stream.py

Поток решений между фоновым поиском (производитель)
и читателем (потребитель).

Передача синхронная: put() возвращается только после того, как
потребитель забрал решение. Поиск не убегает вперёд, в памяти
не больше одного решения «в пути».
"""

import queue
import threading
from typing import Iterator, Optional

from .base import BaseSolver, SolutionPath
from .exhaustive import ExhaustiveSolver
from core.bitboard import TriBoard
from utils.error_handling import StreamClosedError, SearchError, validate_board
from utils.logging import get_logger

# Маркер конца потока
_END = object()


class SolutionStream:
    """
    Канал «один писатель, один читатель» с рандеву.

    Writer: put(path) ... put(path), close()
    Reader: get() до None, либо просто for path in stream
    """

    def __init__(self):
        self._queue: queue.Queue = queue.Queue(maxsize=1)
        self._closed = False
        self._finished = False
        self._error: Optional[BaseException] = None
        self.delivered = 0
        self.thread: Optional[threading.Thread] = None

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, path: SolutionPath) -> None:
        """Передаёт решение и ждёт, пока потребитель его заберёт."""
        if self._closed:
            raise StreamClosedError("put() on a closed solution stream")
        self._queue.put(path)
        self._queue.join()

    def close(self, error: Optional[BaseException] = None) -> None:
        """
        Сигнал конца потока. Вызывается ровно один раз.

        Args:
            error: исключение производителя, если поиск упал
        """
        if self._closed:
            raise StreamClosedError("solution stream is already closed")
        self._closed = True
        self._error = error
        # Предыдущее решение уже забрано (put ждёт join), место в очереди есть
        self._queue.put(_END)

    def get(self, timeout: Optional[float] = None) -> Optional[SolutionPath]:
        """
        Следующее решение или None после конца потока.

        Raises:
            SearchError: если поиск в фоне завершился исключением
            queue.Empty: если задан timeout и он истёк
        """
        if self._finished:
            return None

        item = self._queue.get(timeout=timeout)
        self._queue.task_done()

        if item is _END:
            self._finished = True
            if self._error is not None:
                raise SearchError(f"search failed: {self._error}") from self._error
            return None

        self.delivered += 1
        return item

    def __iter__(self) -> Iterator[SolutionPath]:
        while True:
            path = self.get()
            if path is None:
                return
            yield path


def start_search(board: TriBoard, solver: Optional[BaseSolver] = None) -> SolutionStream:
    """
    Запускает поиск в фоновом потоке.

    Поток закрывается обёрткой после полного обхода дерева,
    а не изнутри рекурсии.

    Args:
        board: начальная позиция
        solver: решатель (по умолчанию ExhaustiveSolver)

    Returns:
        SolutionStream, из которого читаются решения
    """
    validate_board(board)
    if solver is None:
        solver = ExhaustiveSolver()

    stream = SolutionStream()

    def produce():
        error = None
        try:
            solver.explore(board, stream.put)
        except Exception as e:
            get_logger().error(f"{solver.__class__.__name__}: search failed: {e}", exc_info=True)
            error = e
        stream.close(error)

    # Потребитель может бросить чтение: daemon не держит интерпретатор
    stream.thread = threading.Thread(target=produce, name="tri-peg-search", daemon=True)
    stream.thread.start()
    return stream
