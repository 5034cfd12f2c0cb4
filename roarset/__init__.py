"""Containers for sets of 16-bit values, sorted-merge helpers and key split helpers."""

__version__ = "0.1.0"
__all__ = ["util", "merge", "bitmap_store", "array_store", "store"]