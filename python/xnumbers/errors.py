"""Exception types raised by the puzzle engine."""

from __future__ import annotations


class XNumbersError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(XNumbersError, ValueError):
    """A session was configured with missing or invalid required values."""


class InvalidTile(XNumbersError, ValueError):
    """A move was requested for a value that is not a tile on the board."""

    def __init__(self, tile: object) -> None:
        super().__init__(f"Invalid tile {tile!r}.")
        self.tile = tile


class BoardIntegrityError(XNumbersError, RuntimeError):
    """The board no longer holds exactly one empty cell and distinct tiles."""
