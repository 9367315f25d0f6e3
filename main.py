#!/usr/bin/env python3
"""
main.py

Точка входа: выбирает стартовую позицию, запускает перебор в фоне
и печатает первые N найденных решений.

Использование:
    python main.py                  # случайная пустая лунка, 1 решение
    python main.py -p 3             # первые 3 решения
    python main.py -p -1            # все решения
    python main.py --empty 0 -p 0   # только посчитать решения
    python main.py --board 0/11/111/1111/11111
"""

import sys
import argparse
import logging
import random
import time

from core.bitboard import TriBoard
from core.utils import NUM_HOLES
from peg_io import parse_board, display_board, format_solution_path, format_summary
from solutions.verify import verify_solution_path
from solvers import ExhaustiveSolver, start_search
from utils.error_handling import SolverError
from utils.logging import get_logger, setup_file_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangle Peg Solitaire: all solutions from a single empty hole',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py -p 3                 # первые 3 решения
  python main.py -p -1                # все решения
  python main.py --empty 4 -p 0       # только счётчик
  python main.py --seed 42 --verbose  # воспроизводимый запуск
        """
    )
    parser.add_argument(
        '-p', '--print', dest='print_count', type=int, default=1,
        help='number of solutions to print (negative: all, default: 1)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='random seed for choosing the empty hole (default: current time)'
    )
    start = parser.add_mutually_exclusive_group()
    start.add_argument(
        '--empty', type=int, choices=range(NUM_HOLES), metavar='HOLE',
        help=f'start with only this hole empty (0..{NUM_HOLES - 1})'
    )
    start.add_argument(
        '--board',
        help='explicit start board: 15 digits 0/1 (hole 0 first) or pegs=1,2,...'
    )
    parser.add_argument(
        '--verify', action='store_true',
        help='verify every solution before counting it'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='log seed, start board and search statistics'
    )
    parser.add_argument(
        '--log-file',
        help='also write the log to this file'
    )
    return parser


def choose_start(args, rng: random.Random) -> TriBoard:
    """Стартовая доска: --board, --empty или случайная пустая лунка."""
    if args.board is not None:
        return parse_board(args.board)
    if args.empty is not None:
        return TriBoard.with_empty(args.empty)
    return TriBoard.new_random_start(rng)


def run(board: TriBoard, print_count: int = 1, verify: bool = False, verbose: bool = False):
    """
    Читает поток решений до конца, печатая первые print_count.

    Args:
        board: стартовая позиция
        print_count: сколько решений печатать (< 0: все)
        verify: проверять каждое решение
        verbose: статистика решателя в лог

    Returns:
        (printed, total)
    """
    logger = get_logger()
    solver = ExhaustiveSolver(verbose=verbose)
    stream = start_search(board, solver)

    printed = 0
    total = 0
    for path in stream:
        total += 1
        if verify and not verify_solution_path(board, path):
            logger.warning(f"Solution #{total} failed verification")
        if print_count < 0 or printed < print_count:
            print(format_solution_path(path), end="")
            printed += 1

    print(format_summary(printed, total))
    return printed, total


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.INFO)
    if args.log_file:
        setup_file_logging(args.log_file)

    seed = args.seed if args.seed is not None else time.time_ns()
    rng = random.Random(seed)

    try:
        board = choose_start(args, rng)
    except SolverError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Seed: {seed}")
    logger.info(f"Start board ({board.peg_count()} pegs):\n{display_board(board)}")

    try:
        run(board, args.print_count, verify=args.verify, verbose=args.verbose)
    except SolverError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
