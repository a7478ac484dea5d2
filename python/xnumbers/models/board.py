"""Board model for the sliding puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from xnumbers.errors import BoardIntegrityError

EMPTY = None


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Cells are stored as a flat row-major list. A tile's value is the index
    of its home cell; ``EMPTY`` marks the single gap. The empty index and
    the missing tile are always derived from the cells, never stored.
    """

    width: int
    height: int
    cells: list[int | None]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, width: int, height: int, empty_index: int | None = None) -> Board:
        """Return the board in solved order with the gap at *empty_index*.

        The gap defaults to the last cell.
        """
        size = width * height
        if empty_index is None:
            empty_index = size - 1
        if not 0 <= empty_index < size:
            raise ValueError(
                f"Empty index {empty_index} is outside a {width}×{height} board."
            )
        cells: list[int | None] = list(range(size))
        cells[empty_index] = EMPTY
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_flat(cls, width: int, height: int, flat: list[int | None]) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat(3, 3, [0, 1, 2, 3, 4, 5, 6, None, 7])
        """
        size = width * height
        if len(flat) != size:
            raise ValueError(
                f"Expected {size} cells for a {width}×{height} board, "
                f"got {len(flat)}."
            )
        if flat.count(EMPTY) != 1:
            raise ValueError("A board needs exactly one empty cell.")
        values = [v for v in flat if v is not EMPTY]
        if any(not 0 <= v < size for v in values) or len(set(values)) != len(values):
            raise ValueError(
                f"Tile values must be distinct and within [0, {size})."
            )
        return cls(width=width, height=height, cells=list(flat))

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def empty_index(self) -> int:
        """Index of the single empty cell."""
        found = [i for i, v in enumerate(self.cells) if v is EMPTY]
        if len(found) != 1:
            raise BoardIntegrityError(
                f"Expected exactly one empty cell, found {len(found)}."
            )
        return found[0]

    @property
    def missing_tile(self) -> int:
        """Value of the tile that is not on the board (its home is the gap when solved)."""
        absent = set(range(self.size)).difference(self.cells)
        if len(absent) != 1:
            raise BoardIntegrityError(
                f"Expected exactly one absent tile value, found {sorted(absent)}."
            )
        return absent.pop()

    def check_integrity(self) -> None:
        """Raise ``BoardIntegrityError`` unless the board has one gap and distinct tiles."""
        if len(self.cells) != self.size:
            raise BoardIntegrityError(
                f"Expected {self.size} cells, found {len(self.cells)}."
            )
        gaps = self.cells.count(EMPTY)
        if gaps != 1:
            raise BoardIntegrityError(f"Expected exactly one empty cell, found {gaps}.")
        tiles = {v for v in self.cells if v is not EMPTY}
        if len(tiles) != self.size - 1 or not tiles <= set(range(self.size)):
            raise BoardIntegrityError("Tile values must be distinct and within the board.")

    def is_tile(self, value: object) -> bool:
        """Check if *value* names a tile currently on the board."""
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return 0 <= value < self.size and value != self.missing_tile

    def index_of(self, tile: int) -> int:
        """Return the cell index holding *tile*."""
        try:
            return self.cells.index(tile)
        except ValueError:
            raise BoardIntegrityError(f"Tile {tile} is not on the board.") from None

    def neighbor(self, index: int, direction: Direction) -> int | None:
        """Return the index next to *index* in *direction*, or None at an edge."""
        row, col = divmod(index, self.width)
        if direction is Direction.UP:
            return index - self.width if row > 0 else None
        if direction is Direction.DOWN:
            return index + self.width if row < self.height - 1 else None
        if direction is Direction.LEFT:
            return index - 1 if col > 0 else None
        return index + 1 if col < self.width - 1 else None

    def neighbors(self, index: int) -> list[int]:
        """All orthogonal neighbours of *index*, no wraparound."""
        found: list[int] = []
        for direction in Direction:
            n = self.neighbor(index, direction)
            if n is not None:
                found.append(n)
        return found

    def adjacent_empty(self, index: int) -> int | None:
        """Return the empty cell's index if it is orthogonally next to *index*."""
        if not 0 <= index < self.size:
            raise IndexError(f"Cell index {index} is outside the board.")
        for n in self.neighbors(index):
            if self.cells[n] is EMPTY:
                return n
        return None

    def is_solved(self) -> bool:
        """Check if every tile sits on its home cell, wherever the gap is."""
        return all(v is EMPTY or v == i for i, v in enumerate(self.cells))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its home cell."""
        return self.cells[index] == index

    def copy(self) -> Board:
        return Board(width=self.width, height=self.height, cells=self.cells[:])

    def dump(self) -> str:
        """Tab-separated rows, ``-`` for the gap."""
        rows: list[str] = []
        for r in range(self.height):
            row = self.cells[r * self.width : (r + 1) * self.width]
            rows.append("\t".join("-" if v is EMPTY else str(v) for v in row))
        return "\n".join(rows)
