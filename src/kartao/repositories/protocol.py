"""Repository protocol for board storage backends."""

from __future__ import annotations

from typing import Any, Protocol

from ..models import Board


class BoardStoreProtocol(Protocol):
    """Interface for board document storage.

    Boards are addressed by filename (e.g., "my-project.json"). The filename
    is chosen when the board is created and never changes afterwards.
    """

    def ensure_directory(self) -> None:
        """Create the storage location if it doesn't exist."""
        ...

    def list(self) -> list[str]:
        """List the filenames of all stored boards."""
        ...

    def read(self, filename: str) -> Any:
        """Load and parse one board document.

        Raises:
            BoardNotFoundError: No document is stored under this filename.
            MalformedBoardError: The document is not valid JSON.
            StorageIOError: The document could not be read.
        """
        ...

    def write(self, filename: str, board: Board) -> None:
        """Replace the full contents of one board document.

        Raises:
            StorageIOError: The document could not be written.
        """
        ...
