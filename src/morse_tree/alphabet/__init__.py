"""Alphabet builder: turns a character to code table into a lookup tree."""

from .alphabet import build_tree, build_tree_from_codes

__all__ = ["build_tree", "build_tree_from_codes"]
