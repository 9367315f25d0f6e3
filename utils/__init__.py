"""
utils - Логирование и обработка ошибок.
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, StreamClosedError,
    SearchError, ValidationError, validate_board
)

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'StreamClosedError',
    'SearchError', 'ValidationError', 'validate_board',
]
