"""A sparse integer matrix of linked row and column lists, with terminal helpers and a menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]