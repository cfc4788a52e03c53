"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "dynamic",
    "graphs",
    "hashing",
    "linked_list",
    "numbers",
    "searching",
    "strings",
    "sudoku",
    "trees",
    "vector",
]