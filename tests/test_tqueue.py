"""
Tests for the fixed-capacity piece queue.
"""

import unittest
from collections import deque

import numpy as np

import global_vars as gv
from piece import Piece
from tqueue import TQueue, logical_slots, ring_slot


def ids(queue: TQueue) -> list:
    return [p.id for p in queue.items()]


class RingHelpersTestCase(unittest.TestCase):

    def test_ring_slot_wraps(self):
        self.assertEqual(ring_slot(3, 1, 5), 4)
        self.assertEqual(ring_slot(4, 1, 5), 0)
        self.assertEqual(ring_slot(3, 4, 5), 2)

    def test_logical_slots_follow_head(self):
        self.assertEqual(list(logical_slots(3, 4, 5)), [3, 4, 0, 1])
        self.assertEqual(list(logical_slots(0, 0, 5)), [])


class TQueueTestCase(unittest.TestCase):

    def setUp(self):
        self.queue = TQueue()

    def test_new_queue_is_empty(self):
        self.assertEqual(self.queue.capacity, gv.QUEUE_CAPACITY)
        self.assertEqual(len(self.queue), 0)
        self.assertTrue(self.queue.is_empty())
        self.assertFalse(self.queue.is_full())

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            TQueue(0)

    def test_fifo_order(self):
        for i, kind in enumerate('TLO', start=1):
            self.assertTrue(self.queue.enqueue(Piece(kind, i)))
        self.assertEqual(self.queue.dequeue(), Piece('T', 1))
        self.assertEqual(self.queue.dequeue(), Piece('L', 2))
        self.assertEqual(self.queue.dequeue(), Piece('O', 3))
        self.assertTrue(self.queue.is_empty())

    def test_enqueue_on_full_is_rejected(self):
        for i in range(1, gv.QUEUE_CAPACITY + 1):
            self.assertTrue(self.queue.enqueue(Piece('I', i)))
        self.assertTrue(self.queue.is_full())
        before = self.queue.items()

        self.assertFalse(self.queue.enqueue(Piece('O', 99)))
        self.assertFalse(self.queue.enqueue(Piece('O', 100)))
        self.assertEqual(self.queue.items(), before)
        self.assertEqual(len(self.queue), gv.QUEUE_CAPACITY)

    def test_dequeue_on_empty_is_rejected(self):
        self.assertIsNone(self.queue.dequeue())
        self.assertEqual(len(self.queue), 0)
        self.assertEqual(self.queue.head, 0)

    def test_wraparound_keeps_logical_order(self):
        for i in range(1, 6):
            self.queue.enqueue(Piece('I', i))
        for _ in range(3):
            self.queue.dequeue()
        for i in range(6, 9):
            self.assertTrue(self.queue.enqueue(Piece('L', i)))

        self.assertEqual(self.queue.head, 3)
        self.assertEqual(ids(self.queue), [4, 5, 6, 7, 8])
        self.assertEqual(self.queue.items()[0], Piece('I', 4))
        self.assertEqual(self.queue.items()[-1], Piece('L', 8))

    def test_random_operations_match_deque(self):
        rng = np.random.default_rng(7)
        model = deque()
        next_id = 1
        for _ in range(500):
            if rng.random() < 0.5:
                piece = Piece(gv.piece_kinds[rng.integers(4)], next_id)
                accepted = self.queue.enqueue(piece)
                self.assertEqual(accepted, len(model) < gv.QUEUE_CAPACITY)
                if accepted:
                    model.append(piece)
                    next_id += 1
            else:
                piece = self.queue.dequeue()
                self.assertEqual(piece, model.popleft() if model else None)

            self.assertTrue(0 <= len(self.queue) <= gv.QUEUE_CAPACITY)
            self.assertTrue(0 <= self.queue.head < gv.QUEUE_CAPACITY)
            self.assertEqual(self.queue.is_empty(), len(model) == 0)
            self.assertEqual(self.queue.is_full(), len(model) == gv.QUEUE_CAPACITY)
            self.assertEqual(self.queue.items(), list(model))


if __name__ == '__main__':
    unittest.main()
