"""Filesystem-based repository for board storage."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..errors import (
    BoardNotFoundError,
    InvalidInputError,
    MalformedBoardError,
    StorageIOError,
)
from ..models import Board
from ..utils import BOARD_SUFFIX

logger = logging.getLogger(__name__)


class FilesystemBoardStore:
    """
    Repository for board files stored on the filesystem.

    Each board is one pretty-printed JSON file directly inside ``data_dir``.
    Writes go through a temporary file and an atomic rename, so readers
    never see a half-written board. Concurrent writers to the same file are
    not coordinated: the last rename wins.
    """

    def __init__(self, data_dir: Path) -> None:
        """
        Initialize repository.

        Args:
            data_dir: Directory holding the board files
        """
        self.data_dir = data_dir
        # Boards get the mode a plain open() would give them.
        umask = os.umask(0)
        os.umask(umask)
        self.file_mode = 0o666 & ~umask

    def ensure_directory(self) -> None:
        """Create the data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def get_filepath(self, filename: str) -> Path:
        """Get the filesystem path for a board filename.

        Only plain names are accepted so every board stays inside data_dir.
        """
        if not filename or filename in (".", "..") or "/" in filename or "\\" in filename:
            raise InvalidInputError(f"Invalid board file name: {filename!r}")
        return self.data_dir / filename

    def list(self) -> list[str]:
        """Return the names of all .json entries in the data directory."""
        try:
            names = os.listdir(self.data_dir)
        except OSError as e:
            raise StorageIOError(f"Cannot list {self.data_dir}: {e}") from e
        return sorted(name for name in names if name.endswith(BOARD_SUFFIX))

    def read(self, filename: str) -> Any:
        """Load and parse a board file. The shape is not validated."""
        filepath = self.get_filepath(filename)
        logger.debug("Reading board file: %s", filepath)
        try:
            with filepath.open(encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise BoardNotFoundError(f"Board not found: {filename}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedBoardError(f"Board {filename} is not valid JSON: {e}") from e
        except OSError as e:
            raise StorageIOError(f"Cannot read {filepath}: {e}") from e

    def write(self, filename: str, board: Board) -> None:
        """Atomically replace a board file with the serialized board."""
        filepath = self.get_filepath(filename)
        content = board.to_json()

        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.data_dir,
                prefix=f".{filename}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_path = Path(f.name)
                f.write(content)
            os.chmod(temp_path, self.file_mode)
            os.replace(temp_path, filepath)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StorageIOError(f"Cannot write {filepath}: {e}") from e

        logger.debug("Wrote board file: %s", filepath)
