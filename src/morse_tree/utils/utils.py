"""Read-only inspection helpers for Morse lookup trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

# Only import heavy types for type checking
if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray

    from morse_tree.binary_tree import Node


def iter_codes(root: Node | None, prefix: str = "") -> Iterator[tuple[str, str]]:
    """
    Yield ``(code, value)`` for every node carrying a value, in pre-order.

    Args
    -----
        root (Node): Node to start from, reached by ``prefix``.
        prefix (str): Code leading to ``root``.

    Returns
    -------
        Iterator of (code, character) pairs, dot branches before dash branches.
    """
    if root is None:
        return
    if root.value is not None:
        yield prefix, root.value
    yield from iter_codes(root.dot, prefix + ".")
    yield from iter_codes(root.dash, prefix + "-")


def count_nodes(root: Node | None) -> int:
    """Number of nodes in the subtree rooted at ``root``."""
    if root is None:
        return 0
    return 1 + count_nodes(root.dot) + count_nodes(root.dash)


def tree_height(root: Node | None) -> int:
    """Edges on the longest root-to-leaf path; -1 for an absent node."""
    if root is None:
        return -1
    return 1 + max(tree_height(root.dot), tree_height(root.dash))


def code_to_heap_index(code: str) -> int:
    """
    Position of ``code`` in the heap layout of the tree.

    The root sits at 0; the dot child of ``i`` at ``2i+1`` and its dash child at ``2i+2``.

    Raises
    ------
        ValueError: If ``code`` contains anything other than "." and "-".
    """
    idx = 0
    for symbol in code:
        if symbol == ".":
            idx = 2 * idx + 1
        elif symbol == "-":
            idx = 2 * idx + 2
        else:
            msg = f"Invalid Morse symbol {symbol!r} in {code!r}"
            raise ValueError(msg)
    return idx


def to_heap_array(root: Node | None) -> NDArray[np.str_]:
    """
    Flatten the tree into a heap-layout array of characters.

    Positions that are absent or carry no value hold "".

    Args
    -----
        root (Node): Root of the tree to flatten.

    Returns
    -------
        NDArray[np.str_]: Array of length ``2**(height+1) - 1``, empty for ``None``.
    """
    height = tree_height(root)
    heap = np.full(2 ** (height + 1) - 1, "", dtype="<U1")
    for code, value in iter_codes(root):
        heap[code_to_heap_index(code)] = value
    return heap
