"""Unit tests for tree inspection helpers."""

import numpy as np
import pytest

from morse_tree.binary_tree import Node
from morse_tree.utils import (
    code_to_heap_index,
    count_nodes,
    iter_codes,
    to_heap_array,
    tree_height,
)


@pytest.fixture
def small_root() -> Node:
    """Root with E(.), T(-), I(..) and an empty position at .- leading to W(.--)."""
    root = Node()
    root.dot = Node("E", dot=Node("I"), dash=Node(dash=Node("W")))
    root.dash = Node("T")
    return root


def test_iter_codes_preorder(small_root: Node):
    """Valued nodes are listed dot-first, skipping empty positions."""
    assert list(iter_codes(small_root)) == [
        (".", "E"), ("..", "I"), (".--", "W"), ("-", "T"),
    ]


def test_counts_and_height(small_root: Node):
    assert count_nodes(small_root) == 6
    assert tree_height(small_root) == 3
    assert count_nodes(None) == 0
    assert tree_height(None) == -1
    assert tree_height(Node("E")) == 0


@pytest.mark.parametrize("code,index", [
    ("", 0),
    (".", 1),
    ("-", 2),
    ("..", 3),
    (".-", 4),
    ("-.", 5),
    ("--", 6),
    (".--", 10),
])
def test_code_to_heap_index(code, index):
    assert code_to_heap_index(code) == index


def test_code_to_heap_index_rejects_foreign_symbol():
    with pytest.raises(ValueError):
        code_to_heap_index(".x")


def test_to_heap_array(small_root: Node):
    """Characters land at their heap positions; everything else is empty."""
    heap = to_heap_array(small_root)
    assert isinstance(heap, np.ndarray)
    assert heap.shape == (15,)
    expected = np.full(15, "", dtype="<U1")
    expected[[1, 2, 3, 10]] = ["E", "T", "I", "W"]
    assert np.array_equal(heap, expected)


def test_to_heap_array_empty():
    assert to_heap_array(None).size == 0
