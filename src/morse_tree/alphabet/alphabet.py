"""Build the Morse lookup tree from a character to code table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from morse_tree.binary_tree import Node, Tree
from morse_tree.utils import count_nodes

if TYPE_CHECKING:
    from collections.abc import Mapping

    from morse_tree.config import Config

DOT = "."
DASH = "-"


def _child(node: Node, symbol: str) -> Node:
    """Return the child of ``node`` along ``symbol``, creating an empty one if absent."""
    if symbol == DOT:
        if node.dot is None:
            node.dot = Node()
        return node.dot
    if symbol == DASH:
        if node.dash is None:
            node.dash = Node()
        return node.dash
    msg = f"Invalid Morse symbol {symbol!r}"
    raise ValueError(msg)


def build_tree_from_codes(codes: Mapping[str, str]) -> Tree:
    """Create a tree where following each code from the root reaches its character.

    Codes are inserted shortest first so that every prefix position exists
    before its extensions. Positions no code ends at carry ``None``.

    Args
    -----
        codes (Mapping[str, str]): Character to code, written with "." and "-".

    Returns
    -------
        Tree: Tree owning the freshly built hierarchy.

    Raises
    ------
        ValueError: If a code is empty, contains other symbols, or is used twice.
    """
    root = Node()
    for char, code in sorted(codes.items(), key=lambda item: (len(item[1]), item[1])):
        if not code:
            msg = f"Empty code for {char!r}"
            raise ValueError(msg)
        node = root
        for symbol in code:
            node = _child(node, symbol)
        if node.value is not None:
            msg = f"Code {code!r} assigned to both {node.value!r} and {char!r}"
            raise ValueError(msg)
        node.value = char
    return Tree(root)


def build_tree(config: Config) -> Tree:
    """Build the lookup tree described by ``config.alphabet``."""
    tree = build_tree_from_codes(config.alphabet.codes)
    if config.verbose:
        print(f"Built Morse tree: {count_nodes(tree.root)} nodes for {len(config.alphabet.codes)} characters")
    return tree
