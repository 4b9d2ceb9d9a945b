"""Array, number, recursion and text-pattern exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "transform", "maths", "recursion", "patterns"]