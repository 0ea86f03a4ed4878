"""Binary tree module for Morse code lookup."""

from .tree import Node, Tree

__all__ = ["Node", "Tree"]
