"""
Linked lists with head and tail pointers.

Nodes are plain objects that callers may hold on to and pass back to the ``*_node`` methods. A node must belong to at most one list at a time.
"""

import abc
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(eq=False)
class LinkedListNode:
    value: Any
    next: Optional["LinkedListNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyLinkedListNode:
    value: Any
    next: Optional["DoublyLinkedListNode"] = field(default=None, repr=False)
    prev: Optional["DoublyLinkedListNode"] = field(default=None, repr=False)


class _LinkedListBase(abc.ABC):
    def __init__(self):
        self.head = None
        self.tail = None
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self):
        return f"{type(self).__name__}({self.to_array()})"

    def is_empty(self) -> bool:
        return self.head is None

    def to_array(self) -> List:
        return list(self)

    def search(self, value):
        """
        Returns the first node holding ``value``, or ``None``. O(n).
        """
        node = self.head
        while node is not None and node.value != value:
            node = node.next
        return node

    def delete(self, value) -> bool:
        """
        Deletes the first node holding ``value``. Returns ``True`` if a node was deleted.
        """
        node = self.search(value)
        return node is not None and self.delete_node(node)

    @abc.abstractmethod
    def delete_node(self, node) -> bool:
        """Unlinks ``node`` and returns ``True``, or returns ``False`` if it is not in the list."""


class LinkedListWithTail(_LinkedListBase):
    """
    Singly linked list. Insertion at either end is O(1), deleting a node is O(n).
    """

    def insert_node(self, node: Optional[LinkedListNode]):
        """Inserts ``node`` as the new head. ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1

    def insert(self, value):
        self.insert_node(LinkedListNode(value))

    def append_node(self, node: Optional[LinkedListNode]):
        """Appends ``node`` as the new tail. ``None`` is ignored."""
        if node is None:
            return
        node.next = None
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def append(self, value):
        self.append_node(LinkedListNode(value))

    def delete_node(self, node: Optional[LinkedListNode]) -> bool:
        """
        Unlinks ``node``. Nodes not in the list are ignored. Returns ``True`` if the node was unlinked.
        """
        if node is None or self.head is None:
            return False

        if node is self.head:
            self.head = node.next
            if self.tail is node:
                self.tail = None
        else:
            prev = self.head
            while prev.next is not None and prev.next is not node:
                prev = prev.next
            if prev.next is None:
                return False
            prev.next = node.next
            if self.tail is node:
                self.tail = prev

        node.next = None
        self._size -= 1
        return True

    def insert_node_at_index(self, index: int, node: Optional[LinkedListNode]) -> bool:
        """
        Inserts ``node`` so that it ends up at position ``index``. Valid indices go from 0 to ``len(self)`` (append). Other indices are ignored.
        """
        if node is None or not 0 <= index <= self._size:
            return False
        if index == 0:
            self.insert_node(node)
        elif index == self._size:
            self.append_node(node)
        else:
            prev = self._node_at(index - 1)
            node.next = prev.next
            prev.next = node
            self._size += 1
        return True

    def delete_by_index(self, index: int) -> bool:
        """Deletes the node at ``index``. Out-of-range indices are ignored."""
        if not 0 <= index < self._size:
            return False
        return self.delete_node(self._node_at(index))

    def get_nth_node_from_end(self, n: int) -> Optional[LinkedListNode]:
        """Returns the ``n``-th node counting back from the tail (``n=0``), or ``None`` if out of range."""
        if not 0 <= n < self._size:
            return None
        # Two pointers n nodes apart.
        lead = self.head
        for _ in range(n):
            lead = lead.next
        trail = self.head
        while lead.next is not None:
            lead, trail = lead.next, trail.next
        return trail

    def reverse(self):
        prev, node = None, self.head
        self.tail = self.head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self.head = prev

    def _node_at(self, index):
        node = self.head
        for _ in range(index):
            node = node.next
        return node


class DoublyLinkedList(_LinkedListBase):
    """
    Doubly linked list. Insertion at either end and deleting a given node are O(1).
    """

    def insert_node(self, node: Optional[DoublyLinkedListNode]):
        """Inserts ``node`` as the new head. ``None`` is ignored."""
        if node is None:
            return
        node.prev = None
        node.next = self.head
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def insert(self, value):
        self.insert_node(DoublyLinkedListNode(value))

    def append_node(self, node: Optional[DoublyLinkedListNode]):
        """Appends ``node`` as the new tail. ``None`` is ignored."""
        if node is None:
            return
        node.next = None
        node.prev = self.tail
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def append(self, value):
        self.append_node(DoublyLinkedListNode(value))

    def delete_node(self, node: Optional[DoublyLinkedListNode]) -> bool:
        """
        Unlinks ``node`` in O(1). A detached node (no ``prev`` and not the head) is ignored. Returns ``True`` if the node was unlinked.
        """
        if node is None or (node.prev is None and node is not self.head):
            return False

        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next

        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev

        node.next = node.prev = None
        self._size -= 1
        return True
