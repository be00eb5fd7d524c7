"""Utilities for deriving board filenames."""

import re

BOARD_SUFFIX = ".json"


def slugify(text: str) -> str:
    """
    Convert a board name to its filename stem.

    Lower-cases the text and collapses each run of whitespace into a single
    hyphen. Other characters are kept as they are.

    Example: "My Project" -> "my-project"
    """
    return re.sub(r"\s+", "-", text.lower())


def generate_filename(name: str) -> str:
    """Generate a .json filename from a board name."""
    return f"{slugify(name)}{BOARD_SUFFIX}"
