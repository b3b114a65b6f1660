"""Linear lists, stacks, queues and the algorithms built on them."""

__version__ = "0.1.0"