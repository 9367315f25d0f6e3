"""
core/bitboard.py

Представление треугольной доски (15 лунок) через битовую маску.
Бит i = 1: в лунке i стоит колышек. Один int на состояние.
"""

from typing import Iterable, List

from .moves import Move, MOVES
from .utils import NUM_HOLES, ROWS, FULL_MASK, PEG, HOLE


class TriBoard:
    """
    Иммутабельное битовое представление треугольной доски.

    Любая операция, меняющая доску (ход, переключение лунки),
    возвращает новый объект: общих изменяемых состояний нет.
    """
    __slots__ = ('_pegs', '_count')

    def __init__(self, pegs: int):
        # Значимы только младшие 15 бит
        self._pegs = pegs & FULL_MASK
        self._count = self._pegs.bit_count()

    @property
    def pegs(self) -> int:
        """Битовая маска колышков (только чтение)."""
        return self._pegs

    @classmethod
    def full(cls) -> 'TriBoard':
        """Колышки во всех 15 лунках."""
        return cls(FULL_MASK)

    @classmethod
    def with_empty(cls, hole: int) -> 'TriBoard':
        """Полная доска без колышка в лунке hole."""
        return cls.full().toggle(hole)

    @classmethod
    def from_holes(cls, holes: Iterable[int]) -> 'TriBoard':
        """Создаёт доску с колышками в перечисленных лунках."""
        pegs = 0
        for hole in holes:
            pegs |= 1 << hole
        return cls(pegs)

    @classmethod
    def new_random_start(cls, rng) -> 'TriBoard':
        """
        Стартовая позиция: все лунки заняты, одна случайная пуста.

        Args:
            rng: источник случайности с методом randrange
                 (обычно random.Random с заданным seed)
        """
        return cls.with_empty(rng.randrange(NUM_HOLES))

    def peg_present(self, hole: int) -> bool:
        return bool(self._pegs >> hole & 1)

    def peg_count(self) -> int:
        return self._count

    def toggle(self, hole: int) -> 'TriBoard':
        return TriBoard(self._pegs ^ (1 << hole))

    def can_play(self, move: Move) -> bool:
        """
        Ход возможен, если в jumped есть колышек, а из origin и landing
        занята ровно одна лунка.
        """
        pegs = self._pegs
        if not pegs >> move.jumped & 1:
            return False
        return (pegs >> move.origin & 1) != (pegs >> move.landing & 1)

    def apply_move(self, move: Move) -> 'TriBoard':
        """Применяет ход: XOR трёх бит."""
        return TriBoard(self._pegs ^ (1 << move.origin) ^ (1 << move.jumped) ^ (1 << move.landing))

    def legal_moves(self) -> List[Move]:
        """Все допустимые ходы в порядке каталога."""
        return [move for move in MOVES if self.can_play(move)]

    def is_solved(self) -> bool:
        """Остался один колышек и ходов больше нет (проверяются оба условия)."""
        if self._count != 1:
            return False
        return not any(self.can_play(move) for move in MOVES)

    def to_string(self) -> str:
        """ASCII-треугольник из 0/1, по одной строке на ряд доски."""
        lines = []
        for r, row in enumerate(ROWS):
            cells = " ".join(PEG if self.peg_present(h) else HOLE for h in row)
            lines.append(" " * (len(ROWS) - 1 - r) + cells)
        return "\n".join(lines)

    def __hash__(self) -> int:
        return hash(self._pegs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriBoard):
            return NotImplemented
        return self._pegs == other._pegs

    def __repr__(self) -> str:
        return f"TriBoard({self._pegs:#06x}, {self._count} pegs)"
