__all__ = [
    "Comparator",
    "OrderedHeap",
    "MinHeap",
    "MaxHeap",
    "PredicateHeap",
    "HeapSortedError",
    "new_heap",
    "LinkedListNode",
    "LinkedListWithTail",
    "DoublyLinkedListNode",
    "DoublyLinkedList",
    "Queue",
    "QueueUnderflow",
    "NoItem",
]

from .heap import (
    Comparator,
    OrderedHeap,
    MinHeap,
    MaxHeap,
    PredicateHeap,
    HeapSortedError,
    new_heap,
)
from .linked_list import (
    LinkedListNode,
    LinkedListWithTail,
    DoublyLinkedListNode,
    DoublyLinkedList,
)
from .queue import Queue, QueueUnderflow
from .validation import NoItem
