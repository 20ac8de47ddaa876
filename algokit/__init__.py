"""Classic algorithms and data structures in plain Python: arrays, bits, sorting,
searching, heaps, trees, graphs, dynamic programming, greedy and backtracking."""

__version__ = "0.1.0"