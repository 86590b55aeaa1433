"""Classic data structures (stacks, queues, lists, trees, a hash table) and simple sorts."""

__version__ = "0.1.0"