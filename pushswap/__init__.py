"""Two-stack integer sorting with a restricted move set, and a move checker."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]