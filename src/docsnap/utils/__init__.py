"""Utility functions for docsnap."""

from docsnap.utils.walk import has_extension, walk_files

__all__ = ["has_extension", "walk_files"]
