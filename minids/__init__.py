"""Fixed-capacity stacks and queues, a linked list, linked-node merge sort and tree depth."""

__version__ = "0.1.0"