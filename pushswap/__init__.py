"""Sort integers on two stacks with a limited set of operations, and check operation sequences."""

__version__ = "1.0.0"