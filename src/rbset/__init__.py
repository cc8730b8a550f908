"""
rbset: ordered key container backed by a red-black tree.

Provides O(log n) add, remove, membership test and minimum extraction over
keys ordered by a caller-supplied comparator.
"""

__version__ = "0.1.0"

from .rbtree import RBTree, Color, InvariantWarning
from .pqueue import PriorityQueue

__all__ = [
    "RBTree",
    "Color",
    "InvariantWarning",
    "PriorityQueue",
]
