"""Configuration."""

from .settings import DEFAULT_COLUMNS, Settings

__all__ = [
    "DEFAULT_COLUMNS",
    "Settings",
]
