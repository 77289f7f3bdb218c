"""Users in a binary search tree, their preferences and product browsing histories."""

__version__ = "0.1.0"