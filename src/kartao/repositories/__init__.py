"""Repository layer for data access."""

from .filesystem import FilesystemBoardStore
from .protocol import BoardStoreProtocol

__all__ = [
    "BoardStoreProtocol",
    "FilesystemBoardStore",
]
