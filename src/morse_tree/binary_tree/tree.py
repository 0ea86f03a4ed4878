"""Binary tree container for Morse code lookup (dot = left, dash = right)."""

from __future__ import annotations

from typing import Callable, Optional


class Node:
    """One position in the Morse decoding hierarchy."""
    __slots__ = ("value", "dot", "dash")
    def __init__(self, value: Optional[str] = None, dot: Optional["Node"] = None, dash: Optional["Node"] = None) -> None:
        """
        Initialize a Node with a character payload and optional children.

        Args
        -----
        value (str, optional): Character decoded at this position, None if no code ends here.
        dot (Node, optional): Subtree reached by a dot. Defaults to None.
        dash (Node, optional): Subtree reached by a dash. Defaults to None.
        """
        self.value = value
        self.dot = dot
        self.dash = dash

    def __repr__(self):
        return f"Node(value={self.value!r}, dot={self.dot is not None}, dash={self.dash is not None})"

    @property
    def is_leaf(self) -> bool:
        return self.dot is None and self.dash is None


ReleaseHook = Callable[[Node], None]


class Tree:
    """Owns a single root Node and everything below it.

    The hierarchy handed to the tree must be a strict tree (no cycles, no
    node reachable from two parents). This is not checked.
    """

    def __init__(self, root: Node | None = None) -> None:
        """
        Initialize the tree, either empty or owning ``root``.

        Args
        -----
        root (Node, optional): Pre-built hierarchy to take ownership of.
        """
        self._root = root

    def __repr__(self):
        return f"Tree(root={self._root!r})"

    def __enter__(self) -> Tree:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    @property
    def root(self) -> Node | None:
        """Root node, or None once the tree is empty. Do not relink it."""
        return self._root

    def get_root(self) -> Node | None:
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def destroy(self, on_release: ReleaseHook | None = None) -> int:
        """Release every node, children before their parent.

        The root is reset to None first, so a second call is a no-op and
        ``root`` never returns a released node.

        Args
        -----
            on_release (callable, optional): Called with each node as it is released.

        Returns
        -------
            int: Number of nodes released.
        """
        root, self._root = self._root, None
        return self._destroy(root, on_release)

    def _destroy(self, node: Node | None, on_release: ReleaseHook | None) -> int:
        """Post-order release of the subtree rooted at ``node``."""
        if node is None:
            return 0
        released = self._destroy(node.dot, on_release)
        released += self._destroy(node.dash, on_release)
        node.dot = None
        node.dash = None
        if on_release is not None:
            on_release(node)
        return released + 1
