"""
Lowest common ancestor structures for rooted trees.

This module provides two interchangeable structures:
- BinaryLiftingLCA: Entry/exit timestamps + 2^k ancestor table
- SegmentTreeLCA: Euler tour + range-minimum segment tree

Both accept a Graph or plain neighbor lists indexed 0..V and reject input
that is not a tree connected to the root.
"""

from .binary_lifting import BinaryLiftingLCA
from .segment_tree import DEPTH_SENTINEL, SegmentTreeLCA

__all__ = [
    "BinaryLiftingLCA",
    "SegmentTreeLCA",
    "DEPTH_SENTINEL",
]
