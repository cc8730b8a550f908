"""
Priority Queue backed by a red-black tree.

Keeps the push/pop/top interface of a heap-based min queue but stores its
elements in an RBTree, so the minimum and arbitrary elements can both be
removed in O(log n) worst case.
"""

from typing import Callable, Generic, Optional, TypeVar

from .rbtree import RBTree

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min priority queue backed by a red-black tree.

    Elements that compare equal are all kept; which of them is popped
    first is unspecified.
    """

    def __init__(self, compare: Optional[Callable[[T, T], float]] = None):
        """
        Initialize priority queue.

        Args:
            compare: Comparison function returning negative, zero, or positive.
                Defaults to the natural ordering of the elements.
        """
        self.tree: RBTree[T] = RBTree(compare)

    def top(self) -> Optional[T]:
        """
        Get the top element (min element) without removing it.

        Returns:
            Minimum element, or None if queue is empty
        """
        return self.tree.min()

    def push(self, *args: T) -> None:
        """
        Push one or more elements onto the queue.

        Args:
            *args: Elements to push
        """
        for arg in args:
            self.tree.add(arg)

    def pop(self) -> Optional[T]:
        """
        Remove and return the minimum element.

        Returns:
            Minimum element, or None if queue is empty
        """
        return self.tree.extract_min()

    def remove(self, item: T) -> bool:
        """
        Remove one element equal to ``item``.

        Returns:
            True if an element was removed
        """
        return self.tree.remove(item)

    def empty(self) -> bool:
        """Check if queue is empty."""
        return self.tree.is_empty()

    def count(self) -> int:
        """Get number of elements in queue."""
        return self.tree.size

    def is_valid(self) -> bool:
        """
        Verify the backing tree is in a valid state (for testing).

        Returns:
            True if queue is in valid state
        """
        return self.tree.is_valid_red_black_tree()
