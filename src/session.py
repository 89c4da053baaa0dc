import io
import sys
import time
from collections import OrderedDict
from enum import Enum
from typing import Optional, TextIO

import numpy as np
from loguru import logger

import global_vars as gv
from piece import Piece, generate_piece
from tqueue import TQueue
from utility import parse_option, render_queue

MENU = ('Menu:\n'
        '  1 - Play piece (remove from the front)\n'
        '  2 - Insert a new piece at the back (if there is room)\n'
        '  3 - Quit')
PROMPT = 'Choose an option: '

OPTION_PLAY = 1
OPTION_INSERT = 2
OPTION_QUIT = 3

EXIT_OK = 0
EXIT_END_OF_INPUT = 1


class SessionState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


class Session:
    """Interactive menu loop over a single piece queue.

    Owns the queue, the id counter and the random source. Reads one menu line
    per step from ``stdin`` and writes every report to ``stdout``.
    """

    def __init__(self,
                 *,
                 stdin: TextIO = None,
                 stdout: TextIO = None,
                 seed: Optional[int] = None,
                 rng: np.random.Generator = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        if isinstance(self.stdin, io.TextIOWrapper):
            # undecodable bytes become U+FFFD and fail parsing like any bad line
            self.stdin.reconfigure(errors='replace')
        self.stdout = stdout if stdout is not None else sys.stdout
        if rng is None:
            seed = time.time_ns() if seed is None else seed
            rng = np.random.default_rng(seed)
        self.rng = rng
        self.queue = TQueue(gv.QUEUE_CAPACITY)
        self.next_id = 1
        self.state: Optional[SessionState] = None
        self.exit_status = EXIT_OK
        self._stats = OrderedDict([('generated', 0),
                                   ('played', 0),
                                   ('inserted', 0),
                                   ('empty_plays', 0),
                                   ('full_inserts', 0),
                                   ('invalid_inputs', 0)])

    def stats(self) -> dict:
        return self._stats.copy()

    def write(self, text: str = '', end: str = '\n') -> None:
        print(text, end=end, file=self.stdout)

    def new_piece(self) -> Piece:
        piece = generate_piece(self.next_id, self.rng)
        self.next_id += 1
        self._stats['generated'] += 1
        return piece

    def prefill(self) -> None:
        while not self.queue.is_full():
            self.queue.enqueue(self.new_piece())

    def start(self) -> None:
        self.prefill()
        self.write('Tetris Stack - piece queue simulator')
        self.write(f'Queue initialized with {self.queue.capacity} pieces.')
        self.show()
        self.state = SessionState.RUNNING
        logger.debug(f'session running, next id {self.next_id}')

    def show(self) -> None:
        self.write()
        self.write(render_queue(self.queue))
        self.write()

    def play_piece(self) -> Optional[Piece]:
        piece = self.queue.dequeue()
        if piece is None:
            self._stats['empty_plays'] += 1
            self.write('\nThe queue is empty. There is no piece to play.')
        else:
            self._stats['played'] += 1
            self.write(f"\nPiece played: Kind '{piece.kind}'  ID {piece.id}")
        self.show()
        return piece

    def insert_piece(self) -> Optional[Piece]:
        if self.queue.is_full():
            self._stats['full_inserts'] += 1
            self.write('\nThe queue is full. Cannot insert a new piece.')
            self.show()
            return None
        piece = self.new_piece()
        self.queue.enqueue(piece)
        self._stats['inserted'] += 1
        self.write(f"\nNew piece inserted: Kind '{piece.kind}'  ID {piece.id}")
        self.show()
        return piece

    def quit(self, status: int = EXIT_OK) -> None:
        self.state = SessionState.TERMINATED
        self.exit_status = status
        logger.debug(f'session terminated with status {status}')

    def read_option(self) -> Optional[str]:
        line = self.stdin.readline()
        if line == '':
            return None
        return line

    def step(self) -> None:
        self.write(MENU)
        self.write(PROMPT, end='')
        self.stdout.flush()

        line = self.read_option()
        if line is None:
            self.write('\nEnd of input. Exiting.')
            self.quit(EXIT_END_OF_INPUT)
            return

        option = parse_option(line)
        if option is None:
            self._stats['invalid_inputs'] += 1
            self.write('Invalid input. Try again.\n')
            return

        if option == OPTION_PLAY:
            self.play_piece()
        elif option == OPTION_INSERT:
            self.insert_piece()
        elif option == OPTION_QUIT:
            self.write('\nExiting. Goodbye.')
            self.quit(EXIT_OK)
        else:
            self._stats['invalid_inputs'] += 1
            self.write('Invalid option. Choose 1, 2 or 3.\n')

    def run(self) -> int:
        self.start()
        while self.state is SessionState.RUNNING:
            self.step()
        logger.info(f'session stats: {dict(self._stats)}')
        return self.exit_status
