"""Find and mark the biggest empty square in a map of obstacles."""

__version__ = "0.1.0"
__all__ = ["parser", "solver", "cli"]