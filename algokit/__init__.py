"""Classic array, string, stack, queue, recursion and binary-tree algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "queues", "recursion", "searching", "sorting", "stacks", "strings", "tree"]