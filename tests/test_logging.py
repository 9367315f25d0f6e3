"""
tests/test_logging.py

Тесты SolverLogger: уровень, заданный до первого get_logger(), сохраняется.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

from utils import logging as solver_logging
from utils.logging import SolverLogger, get_logger


def test_default_level_applied():
    logger = SolverLogger("tri_peg.test_fresh", logging.WARNING)
    assert logger.logger.level == logging.WARNING


def test_preconfigured_level_kept():
    logging.getLogger("tri_peg.test_preset").setLevel(logging.DEBUG)
    logger = SolverLogger("tri_peg.test_preset", logging.WARNING)
    assert logger.logger.level == logging.DEBUG


def test_first_get_logger_keeps_caplog_level(monkeypatch, caplog):
    """get_logger() впервые вызывается внутри caplog.at_level."""
    monkeypatch.setattr(solver_logging, "_default_logger", None)
    with caplog.at_level(logging.INFO, logger="tri_peg"):
        get_logger().info("first message")
    assert "first message" in caplog.text
