from unittest import TestCase
import logging

import pytest

from containerkit import queue as mdl


class TestQueue(TestCase):
    @pytest.fixture(autouse=True)
    def inject_fixtures(self, caplog):
        self._caplog = caplog

    def test_underflow(self):
        queue = mdl.Queue()
        self.assertTrue(queue.is_empty())
        with self.assertRaisesRegex(mdl.QueueUnderflow, "Queue underflow - queue is empty"):
            queue.dequeue()
        with self.assertRaises(IndexError):
            queue.peek()
        self.assertEqual(len(queue), 0)

    def test_underflow_logged(self):
        with self._caplog.at_level(logging.DEBUG, logger="containerkit"):
            with self.assertRaises(mdl.QueueUnderflow):
                mdl.Queue().peek()
        assert any(
            "empty queue" in record.getMessage() for record in self._caplog.records
        )

    def test_enqueue_dequeue(self):
        queue = mdl.Queue()
        queue.enqueue(1)
        self.assertEqual(queue.dequeue(), 1)
        self.assertTrue(queue.is_empty())
        self.assertIsNone(queue.list.head)
        self.assertIsNone(queue.list.tail)

    def test_fifo(self):
        queue = mdl.Queue()
        for value in [0, None, "", 3]:
            queue.enqueue(value)
        self.assertEqual(queue.to_array(), [0, None, "", 3])
        self.assertEqual(len(queue), 4)

        self.assertEqual(queue.peek(), 0)
        self.assertEqual(queue.dequeue(), 0)
        self.assertIsNone(queue.dequeue())
        self.assertEqual(queue.dequeue(), "")
        queue.enqueue(4)
        self.assertEqual(queue.to_array(), [3, 4])
        self.assertEqual([queue.dequeue(), queue.dequeue()], [3, 4])
        with self.assertRaises(mdl.QueueUnderflow):
            queue.dequeue()
