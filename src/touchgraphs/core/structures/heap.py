"""
Comparator-driven binary heap.

The shortest-path and A* finders both use this heap as their frontier. Unlike
``heapq``, the ordering is not the natural ordering of the stored items but a
strict predicate fixed at construction, so payloads never need to be
comparable themselves.

Example:
    >>> heap = BinaryHeap(lambda a, b: a[1] < b[1])
    >>> heap.insert(("B", 7.0))
    >>> heap.insert(("C", 2.0))
    >>> heap.pop()
    ('C', 2.0)
"""

from typing import Callable, Generic, Iterator, List, TypeVar

T = TypeVar("T")

# Strict ordering predicate: True when the first item must sit above the second
OrderFunc = Callable[[T, T], bool]


class BinaryHeap(Generic[T]):
    """
    Index-addressed dynamic-array binary heap.

    The head of the heap always satisfies ``right_order(head, other)`` or is
    tied with every other stored item. Children of the item at index ``i`` sit
    at ``2i + 1`` and ``2i + 2``.

    Attributes:
        right_order: Strict ordering predicate fixed at construction
    """

    def __init__(self, right_order: OrderFunc):
        """Initialize an empty heap ordered by ``right_order``."""
        self.right_order = right_order
        self._items: List[T] = []

    def insert(self, item: T) -> None:
        """Add an item to the heap."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def peek(self) -> T:
        """
        Return the head without removing it.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def pop(self) -> T:
        """
        Remove and return the head.

        Raises:
            IndexError: If the heap is empty
        """
        head = self.peek()
        self.remove_peek()
        return head

    def remove_peek(self) -> None:
        """
        Remove the head.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._items:
            raise IndexError("remove from an empty heap")
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)

    def replace(self, item: T) -> T:
        """
        Replace the head with a new item and return the old head.

        Cheaper than ``pop`` followed by ``insert``.

        Raises:
            IndexError: If the heap is empty
        """
        head = self.peek()
        self._items[0] = item
        self._sift_down(0)
        return head

    def _in_order(self, a: int, b: int) -> bool:
        return self.right_order(self._items[a], self._items[b])

    def _swap(self, a: int, b: int) -> None:
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._in_order(index, parent):
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._items)
        while True:
            target = index
            left = 2 * index + 1
            right = left + 1
            if left < size and self._in_order(left, target):
                target = left
            if right < size and self._in_order(right, target):
                target = right
            if target == index:
                return
            self._swap(index, target)
            index = target

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over stored items in heap-array order, not priority order."""
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"BinaryHeap({self._items!r})"
