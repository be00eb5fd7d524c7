"""Exceptions raised by the board store and service."""


class KartaoError(Exception):
    """Base exception for kartao errors."""

    pass


class InvalidInputError(KartaoError):
    """Client supplied a missing or malformed value."""

    pass


class StoreError(KartaoError):
    """Base exception for board storage failures."""

    pass


class BoardNotFoundError(StoreError):
    """Board file does not exist."""

    pass


class MalformedBoardError(StoreError):
    """Board file exists but does not contain valid JSON."""

    pass


class StorageIOError(StoreError):
    """Reading or writing the data directory failed."""

    pass
