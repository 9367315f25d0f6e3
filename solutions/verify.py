"""
solutions/verify.py

Проверка корректности цепочки досок (Solution Path).
"""

from typing import List, Sequence

from core.bitboard import TriBoard
from core.moves import Move, MOVES_BY_MASK
from utils.error_handling import ValidationError


def path_moves(path: Sequence[TriBoard]) -> List[Move]:
    """
    Восстанавливает ходы между соседними досками.

    Raises:
        ValidationError: если переход не является одним ходом из каталога
    """
    moves: List[Move] = []
    for i in range(1, len(path)):
        flipped = path[i - 1].pegs ^ path[i].pegs
        move = MOVES_BY_MASK.get(flipped)
        if move is None:
            raise ValidationError(f"step {i}: {flipped:#06x} is not a catalog move")
        moves.append(move)
    return moves


def _check_path(start: TriBoard, path: Sequence[TriBoard]) -> None:
    if not path:
        raise ValidationError("empty path")
    if path[0] != start:
        raise ValidationError(f"path starts at {path[0]!r}, expected {start!r}")

    moves = path_moves(path)
    for i, move in enumerate(moves, 1):
        before = path[i - 1]
        if not before.can_play(move):
            raise ValidationError(f"step {i}: {move} is not playable")
        if path[i].peg_count() != before.peg_count() - 1:
            raise ValidationError(f"step {i}: {move} does not remove exactly one peg")

    final = path[-1]
    if final.peg_count() != 1:
        raise ValidationError(f"final board has {final.peg_count()} pegs")
    if not final.is_solved():
        raise ValidationError("final board still has a playable move")


def verify_solution_path(start: TriBoard, path: Sequence[TriBoard], strict: bool = False) -> bool:
    """
    Проверяет решение.

    Правила:
    - путь начинается ровно со стартовой доски;
    - каждый шаг: допустимый ход из каталога, убирающий один колышек;
    - в конце один колышек и нет ни одного допустимого хода.

    Args:
        start: стартовая доска
        path: цепочка досок
        strict: бросать ValidationError вместо возврата False

    Returns:
        True если решение корректно
    """
    try:
        _check_path(start, path)
    except ValidationError:
        if strict:
            raise
        return False
    return True
