"""Sort integers on two stacks with a restricted set of operations and list the moves."""

__version__ = "0.1.0"