"""Two-stack integer sorting with push, swap and rotate operations, plus binary and Timsort helpers."""

__version__ = "0.1.0"
__all__ = ["operations", "parse", "sort", "binary", "timsort", "cli"]