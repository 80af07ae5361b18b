"""Classic searching, sorting, permutation, trie, graph and heap routines."""

__version__ = "0.1.0"

__all__ = [
    "change",
    "combinatorics",
    "graph",
    "heaps",
    "searching",
    "sorting",
    "textsearch",
    "trie",
]