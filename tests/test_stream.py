"""
tests/test_stream.py

Тесты SolutionStream и start_search: рандеву, закрытие, ошибки,
сквозной прогон с пустой лункой 0.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import queue
import threading

import pytest

from core.bitboard import TriBoard
from solvers.base import BaseSolver
from solvers.exhaustive import ExhaustiveSolver
from solvers.stream import SolutionStream, start_search
from solutions.verify import verify_solution_path
from utils.error_handling import InvalidBoardError, SearchError, StreamClosedError


class FailingSolver(BaseSolver):
    """Отдаёт одно решение и падает."""

    def explore(self, board, emit):
        emit((board,))
        raise RuntimeError("boom")


def _produce(stream, items):
    for item in items:
        stream.put(item)
    stream.close()


def test_stream_delivers_in_order_then_ends():
    stream = SolutionStream()
    items = [("a",), ("b",), ("c",)]
    producer = threading.Thread(target=_produce, args=(stream, items), daemon=True)
    producer.start()

    assert list(stream) == items
    assert stream.get() is None, "После конца get() сразу возвращает None"
    assert stream.delivered == 3
    producer.join(timeout=1)
    assert not producer.is_alive()


def test_put_blocks_until_consumed():
    stream = SolutionStream()
    handed_off = threading.Event()

    def producer():
        stream.put(("x",))
        handed_off.set()

    thread = threading.Thread(target=producer, daemon=True)
    thread.start()

    assert not handed_off.wait(timeout=0.2), "put() должен ждать потребителя"
    assert stream.get(timeout=1) == ("x",)
    assert handed_off.wait(timeout=1)


def test_close_twice_raises():
    stream = SolutionStream()
    stream.close()
    assert stream.closed
    with pytest.raises(StreamClosedError):
        stream.close()


def test_put_after_close_raises():
    stream = SolutionStream()
    stream.close()
    with pytest.raises(StreamClosedError):
        stream.put(("late",))


def test_get_timeout():
    stream = SolutionStream()
    with pytest.raises(queue.Empty):
        stream.get(timeout=0.05)


def test_start_search_matches_solve_all():
    board = TriBoard.from_holes([0, 1, 2, 3, 4])
    expected = ExhaustiveSolver().solve_all(board)

    stream = start_search(board)
    assert list(stream) == expected
    stream.thread.join(timeout=1)
    assert not stream.thread.is_alive()


def test_start_search_without_solutions_closes():
    stream = start_search(TriBoard.full())
    assert stream.get(timeout=5) is None
    assert stream.delivered == 0
    stream.thread.join(timeout=1)
    assert not stream.thread.is_alive()


def test_start_search_propagates_error():
    board = TriBoard.with_empty(0)
    stream = start_search(board, FailingSolver())

    assert stream.get(timeout=5) == (board,)
    with pytest.raises(SearchError) as exc_info:
        stream.get(timeout=5)
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert stream.get() is None


def test_start_search_rejects_invalid_board():
    with pytest.raises(InvalidBoardError):
        start_search(None)


def test_start_search_uses_given_solver():
    solver = ExhaustiveSolver()
    stream = start_search(TriBoard.from_holes([0, 1]), solver)
    assert len(list(stream)) == 1
    stream.thread.join(timeout=1)
    assert solver.stats.solutions_found == 1


def test_solver_stream_method():
    board = TriBoard.from_holes([0, 1, 2, 3, 4])
    assert len(list(ExhaustiveSolver().stream(board))) == 4


def test_hole_0_end_to_end():
    """Полная доска без лунки 0: поиск завершается, все решения корректны."""
    start = TriBoard.with_empty(0)
    stream = start_search(start)

    total = 0
    first = None
    for path in stream:
        if first is None:
            first = path
        total += 1
        assert len(path) == 14
        assert path[-1].peg_count() == 1

    assert total == 29760
    assert first is not None
    assert verify_solution_path(start, first, strict=True)
    final = first[-1].pegs
    assert final & (final - 1) == 0, "Ровно один установленный бит"
    assert final == 1 << 12
