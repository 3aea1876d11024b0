"""Container data structures ordered by caller-supplied compare functions."""

__version__ = "0.1.0"

__all__ = [
    "arraylist",
    "avl_tree",
    "binary_heap",
    "binomial_heap",
    "bloom_filter",
    "compare",
]