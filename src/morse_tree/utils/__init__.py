"""Utility functions for inspecting Morse lookup trees.

This module provides support for:
- Listing the (code, character) pairs a tree encodes.
- Measuring node count and height.
- Flattening a tree into a numpy heap-layout array.
"""

from .utils import (
    code_to_heap_index,
    count_nodes,
    iter_codes,
    to_heap_array,
    tree_height,
)

__all__ = [
    "code_to_heap_index",
    "count_nodes",
    "iter_codes",
    "to_heap_array",
    "tree_height",
]
