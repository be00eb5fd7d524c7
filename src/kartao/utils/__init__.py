"""Utility functions."""

from .slug import BOARD_SUFFIX, generate_filename, slugify

__all__ = [
    "BOARD_SUFFIX",
    "generate_filename",
    "slugify",
]
