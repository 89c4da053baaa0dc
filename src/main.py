import argparse
import os
import sys
from typing import Optional

from loguru import logger

from session import Session

LOG_LEVEL_ENV = 'TETRIS_STACK_LOG_LEVEL'
LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_LOG_LEVEL = 'WARNING'


def default_log_level() -> str:
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def parse_args(args: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Tetris Stack - simulate the queue of upcoming pieces')
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for piece kinds (default: current time, not reproducible)',
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        default=default_log_level(),
        choices=LOG_LEVELS,
        help='Log level for diagnostics written to stderr',
    )
    return parser.parse_args(args=args)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger.debug(f'starting with seed {args.seed}')
    return Session(seed=args.seed).run()


if __name__ == '__main__':
    sys.exit(main())
