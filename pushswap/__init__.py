"""Sort integers with two stacks and a fixed set of moves, plus the small text, list and output helpers it uses."""

__version__ = "0.1.0"