"""Classic algorithms and data structures: puzzles, sorts, searches, trees, tries, stacks and queues."""

__version__ = "0.1.0"