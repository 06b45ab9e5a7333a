"""Classic data structures and algorithm exercises: stacks, queues, heaps, trees, hashing, backtracking, strings and expressions."""

__version__ = "0.1.0"