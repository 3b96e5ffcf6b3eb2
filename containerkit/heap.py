import abc
import logging
import operator
from typing import Any, Callable, Iterable, List, Optional, Union

from containerkit.logging import log_time
from containerkit.validation import NoItem, choices, cutoff_str

LOGGER = logging.getLogger(__name__)


class HeapSortedError(RuntimeError):
    def __init__(self, operation):
        super().__init__(
            f"Cannot {operation} a sorted heap. Build a new heap from `to_array()` first."
        )


def default_compare(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


class Comparator:
    """
    Ordering and equality policy shared by the heaps.

    The ordering is given by a three-way ``compare(a, b)`` function returning a negative number, zero or a positive number. Equality defaults to ``compare(a, b) == 0`` when ``compare`` is given and to ``a == b`` otherwise, so elements without ``<`` can still be searched. It can also be given separately, e.g., to match on an id field while ordering by priority.
    """

    def __init__(
        self,
        compare: Optional[Callable[[Any, Any], int]] = None,
        equal: Optional[Callable[[Any, Any], bool]] = None,
    ):
        self._compare = compare or default_compare
        self._equal = operator.eq if compare is None and equal is None else equal

    @classmethod
    def from_key(cls, key: Callable, equal: Optional[Callable[[Any, Any], bool]] = None):
        """
        Orders elements by ``key(element)``.
        """
        return cls(lambda a, b: default_compare(key(a), key(b)), equal=equal)

    def compare(self, a, b) -> int:
        return self._compare(a, b)

    def equal(self, a, b) -> bool:
        if self._equal is not None:
            return bool(self._equal(a, b))
        return self.compare(a, b) == 0

    def less_than(self, a, b) -> bool:
        return self.compare(a, b) < 0

    def greater_than(self, a, b) -> bool:
        return self.compare(a, b) > 0

    def less_than_or_equal(self, a, b) -> bool:
        return self.compare(a, b) <= 0

    def greater_than_or_equal(self, a, b) -> bool:
        return self.compare(a, b) >= 0

    def reverse(self) -> "Comparator":
        """
        Returns a new comparator with the opposite ordering and the same equality.
        """
        compare = self._compare
        return type(self)(lambda a, b: compare(b, a), equal=self._equal)


EqualityOverride = Optional[Union[Comparator, Callable[[Any, Any], bool]]]


class OrderedHeap(abc.ABC):
    """
    Binary heap stored in a flat list, with the ordering decided by :meth:`pair_is_in_correct_order`.

    Sub-classes only need to implement :meth:`pair_is_in_correct_order`. The root is the element for which that method holds against every other element.

    .. testcode::

        from containerkit.heap import MaxHeap

        heap = MaxHeap([5, 3, 8, 1, 9, 2])
        heap.insert(7)
        print([heap.extract_root() for _ in range(3)])

    .. testoutput::

        [9, 8, 7]

    """

    def __init__(
        self, L: Optional[Iterable] = None, comparator: Optional[Comparator] = None
    ):
        """
        :param L: Initial elements. They are copied, the input is never modified.
        :param comparator: The :class:`Comparator` used for ordering and (by default) for :meth:`find` and :meth:`remove_all`.
        """
        comparator = Comparator() if comparator is None else comparator
        if not isinstance(comparator, Comparator):
            raise TypeError(
                f"Expected a Comparator but received {type(comparator).__name__}."
            )
        self.comparator = comparator
        self._L = list(L) if L is not None else []
        self._sorted = False
        if len(self._L) > 1:
            self._build()

    @abc.abstractmethod
    def pair_is_in_correct_order(self, first, second) -> bool:
        """
        Whether ``first`` can be the parent of ``second``. For a min heap, ``first <= second``. For a max heap, ``first >= second``.
        """

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    def __len__(self):
        return len(self._L)

    def __iter__(self):
        return iter(list(self._L))

    def __contains__(self, value):
        return bool(self.find(value))

    def __repr__(self):
        return f"{type(self).__name__}({cutoff_str(self._L, 200)})"

    def is_empty(self) -> bool:
        return not self._L

    def to_array(self) -> List:
        """
        Returns a copy of the elements in storage order.
        """
        return list(self._L)

    def peek_root(self):
        """
        Returns the root without removing it, or :class:`NoItem` if the heap is empty.
        """
        self._check_not_sorted("peek into")
        return self._L[0] if self._L else NoItem

    def insert(self, value):
        self._check_not_sorted("insert into")
        self._L.append(value)
        self._sift_up(len(self._L) - 1)

    def extract_root(self):
        """
        Removes and returns the root, or returns :class:`NoItem` if the heap is empty.
        """
        self._check_not_sorted("extract from")
        if not self._L:
            return NoItem
        if len(self._L) == 1:
            return self._L.pop()

        root = self._L[0]
        # Move the last element to the root.
        self._L[0] = self._L.pop()
        self._sift_down(0)
        return root

    def find(self, value, comparator: EqualityOverride = None) -> List[int]:
        """
        Returns the indices (in storage order) of all elements equal to ``value``.

        :param comparator: A :class:`Comparator` or an ``equal(element, value)`` callable. Defaults to the heap's comparator.
        """
        equal = self._get_equality(comparator)
        return [k for k, element in enumerate(self._L) if equal(element, value)]

    def remove_all(self, value, comparator: EqualityOverride = None) -> int:
        """
        Removes every element equal to ``value`` and returns the number of removed elements.

        :param comparator: Same as for :meth:`find`.
        """
        self._check_not_sorted("remove from")
        equal = self._get_equality(comparator)
        count = len(self.find(value, equal))

        for _ in range(count):
            index = self.find(value, equal)[0]
            last = self._L.pop()
            if index == len(self._L):
                continue

            self._L[index] = last
            # The moved element can only violate the order in one direction.
            has_children = 2 * index + 1 < len(self._L)
            if has_children and (
                index == 0
                or self.pair_is_in_correct_order(self._L[(index - 1) // 2], last)
            ):
                self._sift_down(index)
            else:
                self._sift_up(index)

        LOGGER.debug(f"Removed {count} element(s) from {type(self).__name__}.")
        return count

    def sort(self):
        """
        Heapsort in place. For a :class:`MaxHeap` the result is ascending, for a :class:`MinHeap` descending.

        The heap is left in sorted mode (see :attr:`is_sorted`) and rejects further heap operations.
        """
        if self._sorted or len(self._L) <= 1:
            return

        with log_time(
            f"sort of {len(self._L)} elements", logger=LOGGER, severity=logging.DEBUG
        ):
            for end in range(len(self._L) - 1, 0, -1):
                self._swap(0, end)
                self._sift_down(0, end)
        self._sorted = True

    def sorted_array(self) -> List:
        self.sort()
        return self.to_array()

    def _build(self):
        for index in range((len(self._L) - 1) // 2, -1, -1):
            self._sift_down(index)
        LOGGER.debug(f"Built {type(self).__name__} from {len(self._L)} elements.")

    def _sift_up(self, index):
        while index > 0:
            parent = (index - 1) // 2
            if self.pair_is_in_correct_order(self._L[parent], self._L[index]):
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index, size=None):
        size = len(self._L) if size is None else size
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            target = index
            # Right child is checked first so that the left child wins when both qualify.
            if right < size and self.pair_is_in_correct_order(
                self._L[right], self._L[target]
            ):
                target = right
            if left < size and self.pair_is_in_correct_order(
                self._L[left], self._L[target]
            ):
                target = left
            if target == index:
                return
            self._swap(index, target)
            index = target

    def _swap(self, a, b):
        self._L[a], self._L[b] = self._L[b], self._L[a]

    def _get_equality(self, comparator: EqualityOverride) -> Callable[[Any, Any], bool]:
        if comparator is None:
            return self.comparator.equal
        elif isinstance(comparator, Comparator):
            return comparator.equal
        elif callable(comparator):
            return comparator
        raise TypeError(
            f"Expected a Comparator or a callable but received {type(comparator).__name__}."
        )

    def _check_not_sorted(self, operation):
        if self._sorted:
            raise HeapSortedError(operation)


class MinHeap(OrderedHeap):
    def pair_is_in_correct_order(self, first, second) -> bool:
        return self.comparator.less_than_or_equal(first, second)


class MaxHeap(OrderedHeap):
    def pair_is_in_correct_order(self, first, second) -> bool:
        return self.comparator.greater_than_or_equal(first, second)


class PredicateHeap(OrderedHeap):
    """
    Heap ordered by an arbitrary ``order(parent, child) -> bool`` predicate.

    .. code-block::

        # Tasks with the highest priority first, ties broken by earliest deadline.
        heap = PredicateHeap(
            tasks,
            order=lambda a, b: (a.priority, -a.deadline) >= (b.priority, -b.deadline),
        )
    """

    def __init__(
        self,
        L: Optional[Iterable] = None,
        order: Optional[Callable[[Any, Any], bool]] = None,
        comparator: Optional[Comparator] = None,
    ):
        if not callable(order):
            raise TypeError(
                f"{type(self).__name__} requires a callable `order` predicate."
            )
        self.order = order
        super().__init__(L, comparator=comparator)

    def pair_is_in_correct_order(self, first, second) -> bool:
        return bool(self.order(first, second))


@choices("order", ["min", "max"])
def new_heap(
    L: Optional[Iterable] = None,
    order: str = "max",
    comparator: Optional[Comparator] = None,
) -> OrderedHeap:
    """
    Builds a :class:`MinHeap` or :class:`MaxHeap`.

    :param L: Initial elements.
    :param order: Which element ends up at the root.
    :param comparator: Optional :class:`Comparator`.
    """
    return {"min": MinHeap, "max": MaxHeap}[order](L, comparator=comparator)
