"""Sorting algorithms, integer-matrix helpers, a binary search tree and a bounded min-heap."""

__version__ = "0.1.0"