"""
Red-Black Tree ordered container.

A red-black tree keeps these properties between operations:

1. Every node is red or black.
2. The root is black.
3. Every leaf (the sentinel) is black.
4. A red node has only black children.
5. Every path from a node to its descendant leaves holds the same number
   of black nodes.

Together they bound the longest root-to-leaf path to twice the shortest, so
insert, remove, contains and min all run in O(log n).

All leaves are represented by one shared, read-only sentinel node. The
delete fixup carries the parent of the promoted subtree explicitly, so the
sentinel is never written to.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Generic, Optional, TypeVar
import warnings

T = TypeVar("T")


class InvariantWarning(UserWarning):
    """Warning emitted when the tree fails structural validation."""
    pass


class Color(IntEnum):
    RED = 0
    BLACK = 1


class _Node:
    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(self, key: Any, color: Color):
        self.key = key
        self.color = color
        self.left: _Node = _NIL
        self.right: _Node = _NIL
        self.parent: _Node = _NIL


class _Sentinel(_Node):
    """Black leaf shared by every tree. Read-only once built."""

    __slots__ = ()

    def __init__(self):
        object.__setattr__(self, "key", None)
        object.__setattr__(self, "color", Color.BLACK)
        object.__setattr__(self, "left", self)
        object.__setattr__(self, "right", self)
        object.__setattr__(self, "parent", self)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"cannot set {name!r} on the tree sentinel")

    def __repr__(self) -> str:
        return "_NIL"


_NIL: _Node = _Sentinel()


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class RBTree(Generic[T]):
    """
    Ordered container of keys backed by a red-black tree.

    Keys are ordered by a comparator returning a negative, zero or positive
    number. Two keys are equal for lookup purposes when the comparator
    returns zero. Equal keys may be added more than once; later copies are
    placed to the right.

    The comparator must be a consistent total order. This is not checked;
    a comparator that violates it leaves the tree in an undefined state.

    Not safe for concurrent mutation.
    """

    def __init__(self, compare: Optional[Callable[[T, T], float]] = None):
        """
        Initialize an empty tree.

        Args:
            compare: Comparison function returning negative, zero, or positive.
                Defaults to the natural ordering of the keys.

        Raises:
            TypeError: If compare is given but is not callable
        """
        if compare is None:
            compare = _natural_order
        elif not callable(compare):
            raise TypeError(f"compare must be callable, got {type(compare).__name__}")
        self._compare = compare
        self._root: _Node = _NIL
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"RBTree(size={self._size})"

    @property
    def size(self) -> int:
        """Get number of elements in tree."""
        return self._size

    def is_empty(self) -> bool:
        """Check if tree is empty."""
        return self._size == 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, key: T) -> bool:
        """
        Check whether a key equal to ``key`` is stored in the tree.

        Args:
            key: Key to look for

        Returns:
            True if a comparator-equal key is present
        """
        return self._search(key) is not _NIL

    def min(self) -> Optional[T]:
        """
        Get the smallest key without removing it.

        Returns:
            Smallest key, or None if tree is empty
        """
        if self._root is _NIL:
            return None
        return self._minimum(self._root).key

    def _search(self, key: T) -> _Node:
        compare = self._compare
        x = self._root
        while x is not _NIL:
            c = compare(key, x.key)
            if c == 0:
                return x
            x = x.left if c < 0 else x.right
        return _NIL

    @staticmethod
    def _minimum(x: _Node) -> _Node:
        while x.left is not _NIL:
            x = x.left
        return x

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add(self, key: T) -> None:
        """
        Insert a key into the tree.

        Duplicates are not suppressed: a key equal to an existing one is
        stored as a separate element.

        Args:
            key: Key to insert
        """
        compare = self._compare
        z = _Node(key, Color.RED)

        y = _NIL
        x = self._root
        went_left = False
        while x is not _NIL:
            y = x
            went_left = compare(key, x.key) < 0
            x = x.left if went_left else x.right

        z.parent = y
        if y is _NIL:
            self._root = z
        elif went_left:
            y.left = z
        else:
            y.right = z

        self._size += 1
        self._insert_fixup(z)

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent.color == Color.RED:
            # A red parent is never the root, so the grandparent is a real node
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color == Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color == Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    # ------------------------------------------------------------------
    # Rotations
    # ------------------------------------------------------------------

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not _NIL:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is _NIL:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, y: _Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not _NIL:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is _NIL:
            self._root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x
        x.right = y
        y.parent = x

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, key: T) -> bool:
        """
        Remove one element equal to ``key``.

        Args:
            key: Key to remove

        Returns:
            True if a matching element was found and removed
        """
        z = self._search(key)
        if z is _NIL:
            return False
        self._delete(z)
        return True

    def extract_min(self) -> Optional[T]:
        """
        Remove and return the smallest key.

        Returns:
            Smallest key, or None if tree is empty
        """
        if self._root is _NIL:
            return None
        z = self._minimum(self._root)
        key = z.key
        self._delete(z)
        return key

    def _transplant(self, u: _Node, v: _Node) -> None:
        """Replace the subtree rooted at u with the one rooted at v."""
        if u.parent is _NIL:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not _NIL:
            v.parent = u.parent

    def _delete(self, z: _Node) -> None:
        y_original_color = z.color
        if z.left is _NIL:
            x = z.right
            x_parent = z.parent
            self._transplant(z, z.right)
        elif z.right is _NIL:
            x = z.left
            x_parent = z.parent
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            y_original_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        if y_original_color == Color.BLACK:
            self._delete_fixup(x, x_parent)

        # Break the node's links so it does not keep the tree alive
        z.left = z.right = z.parent = _NIL
        self._size -= 1

    def _delete_fixup(self, x: _Node, parent: _Node) -> None:
        # x carries an extra black; parent is tracked since x may be the sentinel
        while x is not self._root and x.color == Color.BLACK:
            if x is parent.left:
                w = parent.right
                if w.color == Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    w = parent.right
                if w.left.color == Color.BLACK and w.right.color == Color.BLACK:
                    w.color = Color.RED
                    x = parent
                    parent = x.parent
                else:
                    if w.right.color == Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = parent.right
                    w.color = parent.color
                    parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(parent)
                    x = self._root
            else:
                w = parent.left
                if w.color == Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    w = parent.left
                if w.left.color == Color.BLACK and w.right.color == Color.BLACK:
                    w.color = Color.RED
                    x = parent
                    parent = x.parent
                else:
                    if w.left.color == Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = parent.left
                    w.color = parent.color
                    parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(parent)
                    x = self._root
        if x is not _NIL:
            x.color = Color.BLACK

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def is_valid_red_black_tree(self) -> bool:
        """
        Verify the red-black and search-tree properties hold (for testing).

        Checks search order against each node's children, parent links, root
        and leaf blackness, that no red node has a red child, uniform black
        height, and that the node count matches ``size``. A failure emits an
        InvariantWarning describing the first violation found.

        Returns:
            True if the tree is in a valid state
        """
        problem = self._find_violation()
        if problem is not None:
            warnings.warn(f"Tree invalid: {problem}", InvariantWarning, stacklevel=2)
            return False
        return True

    def _find_violation(self) -> Optional[str]:
        if _NIL.color != Color.BLACK:
            return "leaf node is red"

        root = self._root
        if root is _NIL:
            if self._size != 0:
                return f"empty tree reports size {self._size}"
            return None
        if root.color != Color.BLACK:
            return "root node is red"
        if root.parent is not _NIL:
            return "root node has a parent"

        compare = self._compare
        # Black height of each visited subtree, filled in post-order
        black_height = {_NIL: 0}
        count = 0
        stack = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            left, right = node.left, node.right

            if not children_done:
                count += 1
                if left is not _NIL:
                    if left.parent is not node:
                        return f"left child of {node.key!r} has a wrong parent link"
                    if compare(left.key, node.key) > 0:
                        return f"left child {left.key!r} sorts after {node.key!r}"
                if right is not _NIL:
                    if right.parent is not node:
                        return f"right child of {node.key!r} has a wrong parent link"
                    if compare(right.key, node.key) < 0:
                        return f"right child {right.key!r} sorts before {node.key!r}"
                if node.color == Color.RED and (
                    left.color == Color.RED or right.color == Color.RED
                ):
                    return f"red node {node.key!r} has a red child"

                stack.append((node, True))
                if right is not _NIL:
                    stack.append((right, False))
                if left is not _NIL:
                    stack.append((left, False))
                continue

            if black_height[left] != black_height[right]:
                return (
                    f"descendant paths of {node.key!r} have different numbers "
                    "of black nodes"
                )
            black_height[node] = black_height[left] + (node.color == Color.BLACK)

        if count != self._size:
            return f"tree holds {count} nodes but reports size {self._size}"
        return None
