from typing import Optional

import numpy as np
from loguru import logger
from numba import njit

import global_vars as gv
from piece import Piece, kind_code


@njit(cache=True)
def ring_slot(head: int, offset: int, capacity: int) -> int:
    return (head + offset) % capacity


@njit(cache=True)
def logical_slots(head: int, size: int, capacity: int) -> np.ndarray:
    result = np.zeros(size, dtype=np.int64)
    for i in range(size):
        result[i] = (head + i) % capacity
    return result


class TQueue:
    """Fixed-capacity circular queue of upcoming pieces.

    Kinds and ids live in two pre-sized arrays that are never resized; ``head``
    points at the front slot and ``size`` counts occupied slots. Full and empty
    are routine outcomes: ``enqueue`` answers ``False`` and ``dequeue`` answers
    ``None`` without touching the queue.
    """

    def __init__(self, capacity: int = gv.QUEUE_CAPACITY):
        if capacity <= 0:
            raise ValueError(f'capacity must be positive, got {capacity}')
        self._capacity = capacity
        self._kinds = np.zeros(self._capacity, dtype='int8')
        self._ids = np.zeros(self._capacity, dtype='int64')
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def head(self) -> int:
        return self._head

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def enqueue(self, piece: Piece) -> bool:
        if self.is_full():
            logger.debug(f'enqueue rejected, queue full: {piece}')
            return False
        slot = ring_slot(self._head, self._size, self._capacity)
        self._kinds[slot] = kind_code(piece.kind)
        self._ids[slot] = piece.id
        self._size += 1
        logger.debug(f'enqueued {piece} at slot {slot}, size {self._size}')
        return True

    def dequeue(self) -> Optional[Piece]:
        if self.is_empty():
            logger.debug('dequeue rejected, queue empty')
            return None
        piece = self._piece_at(self._head)
        # vacated slot keeps its old values until the next enqueue overwrites it
        self._head = ring_slot(self._head, 1, self._capacity)
        self._size -= 1
        logger.debug(f'dequeued {piece}, head {self._head}, size {self._size}')
        return piece

    def items(self) -> list:
        slots = logical_slots(self._head, self._size, self._capacity)
        return [self._piece_at(slot) for slot in slots]

    def _piece_at(self, slot: int) -> Piece:
        return Piece(kind=gv.piece_kinds[self._kinds[slot]], id=int(self._ids[slot]))
