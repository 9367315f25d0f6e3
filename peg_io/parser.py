"""
peg_io/parser.py

Парсинг стартовой позиции из текста.
"""

import re

from core.bitboard import TriBoard
from core.utils import NUM_HOLES, PEG, HOLE
from utils.error_handling import InvalidBoardError


def parse_board(text: str) -> TriBoard:
    """
    Парсит текстовое описание позиции.

    Форматы:
        "011111111111111"           15 цифр 0/1, лунка 0 первой
        "0/11/111/1111/11111"       то же по строкам (пробелы, / и \\n игнорируются)
        "pegs=1,2,3,4"              номера лунок с колышками

    Args:
        text: строка с описанием

    Returns:
        TriBoard

    Raises:
        InvalidBoardError: если формат неверный
    """
    pegs_match = re.fullmatch(r'\s*pegs=([\d,\s]*)', text)
    if pegs_match:
        return _parse_peg_list(pegs_match.group(1))

    digits = re.sub(r'[\s/]', '', text)
    if not re.fullmatch(f'[{PEG}{HOLE}]*', digits):
        raise InvalidBoardError(
            f"Invalid board '{text}': expected only '{PEG}' and '{HOLE}' characters"
        )
    if len(digits) != NUM_HOLES:
        raise InvalidBoardError(
            f"Invalid board '{text}': expected {NUM_HOLES} holes, got {len(digits)}"
        )

    return TriBoard.from_holes(i for i, ch in enumerate(digits) if ch == PEG)


def _parse_peg_list(items: str) -> TriBoard:
    holes = []
    for item in re.split(r'[,\s]+', items):
        item = item.strip()
        if not item:
            continue
        hole = int(item)
        if not 0 <= hole < NUM_HOLES:
            raise InvalidBoardError(f"Hole {hole} is out of range 0..{NUM_HOLES - 1}")
        holes.append(hole)
    return TriBoard.from_holes(holes)
