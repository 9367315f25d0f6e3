"""
utils/error_handling.py

Исключения проекта и валидация входной доски.
"""

from core.bitboard import TriBoard


class SolverError(Exception):
    """Базовое исключение для решателя."""
    pass


class InvalidBoardError(SolverError, ValueError):
    """Ошибка невалидной доски."""
    pass


class StreamClosedError(SolverError):
    """Запись в уже закрытый поток решений или повторное закрытие."""
    pass


class SearchError(SolverError):
    """Поиск в фоновом потоке завершился исключением."""
    pass


class ValidationError(SolverError):
    """Ошибка валидации решения."""
    pass


def validate_board(board) -> bool:
    """
    Валидирует доску.

    Args:
        board: доска для валидации

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Board must not be None")

    if not isinstance(board, TriBoard):
        raise InvalidBoardError(f"Expected TriBoard, got {type(board).__name__}")

    return True
