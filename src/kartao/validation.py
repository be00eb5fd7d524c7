"""Structural validation of board payloads.

The check is deliberately shallow: a board must be an object with a
``columns`` array, and every column must be an object with a string ``id``,
a string ``name`` and a ``cards`` array. Cards themselves are not inspected.
"""

from typing import Any

from pydantic import ValidationError

from .models import Board


def check_board(candidate: Any) -> tuple[Board | None, str | None]:
    """Validate an untyped payload against the board shape.

    Returns:
        (board, None) - Payload is a valid board
        (None, message) - Payload is not a valid board; message says why
    """
    if not isinstance(candidate, dict):
        return (None, "Board must be a JSON object")

    try:
        return (Board.model_validate(candidate), None)
    except ValidationError as e:
        return (None, _describe(e))


def is_valid_board(candidate: Any) -> bool:
    """Return True if the payload has a valid board structure."""
    board, _ = check_board(candidate)
    return board is not None


def _describe(error: ValidationError) -> str:
    """Summarize the first pydantic error as ``path: message``."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
