"""Classic algorithm exercises on linked lists, arrays, strings, matrices and bits."""

__version__ = "0.1.0"

__all__ = ["linked", "dlist", "matrix", "integers", "combinations", "arrays", "text"]