"""
tests/test_verify.py

Тесты для verify_solution_path и path_moves.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.bitboard import TriBoard
from core.moves import Move
from solutions.verify import path_moves, verify_solution_path
from utils.error_handling import ValidationError


def _small_solution():
    """Первое решение для лунок 0..4: 31 → 58 → 112 → 72 → 2."""
    start = TriBoard.from_holes([0, 1, 2, 3, 4])
    path = tuple(TriBoard(p) for p in [31, 58, 112, 72, 2])
    return start, path


def test_valid_path():
    start, path = _small_solution()
    assert verify_solution_path(start, path) is True


def test_path_moves():
    _, path = _small_solution()
    assert path_moves(path) == [Move(0, 2, 5), Move(1, 3, 6), Move(3, 4, 5), Move(1, 3, 6)]


def test_wrong_start():
    start, path = _small_solution()
    assert verify_solution_path(TriBoard.with_empty(0), path) is False


def test_empty_path():
    start, _ = _small_solution()
    assert verify_solution_path(start, ()) is False


def test_non_catalog_step():
    start, path = _small_solution()
    broken = path[:2] + (path[1].toggle(14),) + path[3:]
    assert verify_solution_path(start, broken) is False
    with pytest.raises(ValidationError):
        path_moves(broken)


def test_unfinished_path():
    start, path = _small_solution()
    assert verify_solution_path(start, path[:-1]) is False


def test_unplaying_a_move_is_rejected():
    """Обратный ход (колышек возвращается) не удаляет колышек."""
    board = TriBoard.from_holes([3])
    back = board.apply_move(Move(0, 1, 3))
    assert back.peg_count() == 2
    assert verify_solution_path(board, (board, back)) is False


def test_strict_raises():
    start, path = _small_solution()
    with pytest.raises(ValidationError, match="pegs"):
        verify_solution_path(start, path[:-1], strict=True)
