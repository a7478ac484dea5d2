"""XNumbers — an N-puzzle engine with a terminal frontend."""

__version__ = "2.0.2"

DESCRIPTION = "An implementation of the N-Puzzle game"
