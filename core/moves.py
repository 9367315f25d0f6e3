"""
core/moves.py

Каталог всех геометрически возможных прыжков на треугольной доске.
"""

from typing import List, NamedTuple


class Move(NamedTuple):
    """Прыжок: колышек из origin через jumped в landing (или наоборот)."""
    origin: int
    jumped: int
    landing: int

    @property
    def mask(self) -> int:
        return (1 << self.origin) | (1 << self.jumped) | (1 << self.landing)


# Порядок важен: он задаёт порядок обхода ветвей в поиске
# и, как следствие, порядок, в котором находятся решения.
MOVES: List[Move] = [
    Move(0, 1, 3),
    Move(0, 2, 5),
    Move(1, 3, 6),
    Move(1, 4, 8),
    Move(2, 4, 7),
    Move(2, 5, 9),
    Move(3, 4, 5),
    Move(3, 7, 12),
    Move(3, 6, 10),
    Move(4, 7, 11),
    Move(4, 8, 13),
    Move(5, 8, 12),
    Move(5, 9, 14),
    Move(6, 7, 8),
    Move(7, 8, 9),
    Move(10, 11, 12),
    Move(12, 13, 14),
    Move(13, 12, 11),
]

# Маска трёх лунок хода → ход (для восстановления ходов по цепочке досок)
MOVES_BY_MASK = {move.mask: move for move in MOVES}
