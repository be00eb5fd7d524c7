"""Service for board document management."""

from __future__ import annotations

import json
import logging
from pathlib import PurePath
from typing import Any

from ..errors import InvalidInputError, MalformedBoardError
from ..models import Board
from ..repositories import BoardStoreProtocol
from ..utils import BOARD_SUFFIX, generate_filename
from ..validation import check_board, is_valid_board

logger = logging.getLogger(__name__)


class BoardService:
    """Service for listing, creating and updating board documents."""

    def __init__(self, store: BoardStoreProtocol, default_columns: list[str]) -> None:
        """
        Initialize service.

        Args:
            store: Board document storage
            default_columns: Column names given, in order, to every new board
        """
        self.store = store
        self.default_columns = list(default_columns)

    def list_filenames(self) -> list[str]:
        """Get the filenames of all stored boards."""
        return self.store.list()

    def list_boards(self) -> list[Any]:
        """
        Load every stored board.

        Any unreadable or unparsable file fails the whole listing.
        """
        filenames = self.store.list()
        logger.debug("Files found: %s", filenames)
        return [self.store.read(filename) for filename in filenames]

    def get_board(self, filename: str) -> Any:
        """Load a single board document as stored."""
        return self.store.read(filename)

    def create_board(self, name: str | None) -> tuple[str, Board]:
        """
        Create a new board with the default columns.

        The filename is derived from the name once, here, and does not
        follow later renames.

        Returns:
            (filename, board) for the stored board
        """
        if not name:
            raise InvalidInputError("Board name is required")
        if not isinstance(name, str):
            raise InvalidInputError("Board name must be a string")

        board = Board.with_columns(name, self.default_columns)
        filename = generate_filename(name)
        self.store.write(filename, board)

        logger.info("Board created: %s (%s)", name, filename)
        return filename, board

    def update_board(self, filename: str, candidate: Any) -> Board:
        """
        Replace a board with the given document.

        The document is stored as received after a structural check. The
        file is not required to exist beforehand.
        """
        board, error = check_board(candidate)
        if board is None:
            logger.debug("update_board: rejected %s: %s", filename, error)
            raise InvalidInputError(f"Invalid board structure: {error}")

        self.store.write(filename, board)

        logger.info("Board updated: %s", filename)
        return board

    def validate_file(self, filename: str) -> bool:
        """
        Check whether a stored file holds a valid board.

        A file that is not valid JSON counts as invalid. A missing file
        raises BoardNotFoundError.
        """
        try:
            document = self.store.read(filename)
        except MalformedBoardError:
            return False
        return is_valid_board(document)

    def import_board(self, filename: str | None, content: bytes) -> tuple[str, Board]:
        """
        Store an uploaded board file under its own name.

        An existing board with the same filename is overwritten.

        Returns:
            (filename, board) for the stored board
        """
        # Browsers may send a full client-side path; keep only the last part.
        name = PurePath((filename or "").replace("\\", "/")).name
        if not name.endswith(BOARD_SUFFIX):
            raise InvalidInputError("Import file must be a .json file")

        try:
            candidate = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInputError(f"Import file is not valid JSON: {e}") from e

        board, error = check_board(candidate)
        if board is None:
            raise InvalidInputError(f"Invalid board structure: {error}")

        self.store.write(name, board)

        logger.info("Board imported: %s", name)
        return name, board
