"""Service layer for business logic."""

from .board_service import BoardService

__all__ = [
    "BoardService",
]
