"""Data models."""

from .board import Board, Column

__all__ = [
    "Board",
    "Column",
]
