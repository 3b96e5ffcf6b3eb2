import logging
from typing import List

from containerkit.linked_list import DoublyLinkedList

LOGGER = logging.getLogger(__name__)


class QueueUnderflow(IndexError):
    def __init__(self):
        super().__init__("Queue underflow - queue is empty")


class Queue:
    """
    FIFO queue on a :class:`~containerkit.linked_list.DoublyLinkedList`. Enqueue at the tail and dequeue at the head are O(1).

    Reading from an empty queue raises :exc:`QueueUnderflow`, so falsy payloads such as ``0`` or ``None`` are never ambiguous.
    """

    def __init__(self):
        self.list = DoublyLinkedList()

    def __len__(self):
        return len(self.list)

    def __repr__(self):
        return f"{type(self).__name__}({self.to_array()})"

    def is_empty(self) -> bool:
        return self.list.is_empty()

    def enqueue(self, value):
        self.list.append(value)

    def dequeue(self):
        value = self.peek()
        self.list.delete_node(self.list.head)
        return value

    def peek(self):
        if self.is_empty():
            LOGGER.debug("Read attempted on an empty queue.")
            raise QueueUnderflow()
        return self.list.head.value

    def to_array(self) -> List:
        return self.list.to_array()
