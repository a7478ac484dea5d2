"""Move validation, win detection and solvability checks."""

from __future__ import annotations

from xnumbers.errors import InvalidTile
from xnumbers.models.board import EMPTY, Board


class Rules:
    """Stateless rules — all methods are static."""

    @staticmethod
    def apply_move(board: Board, tile: int) -> tuple[Board, bool]:
        """Slide *tile* into the gap if it is orthogonally adjacent.

        The board is updated in place and returned with a flag telling
        whether the move was accepted. A tile away from the gap is a normal
        rejection, not an error.

        Raises ``InvalidTile`` if *tile* is not a tile on this board.
        """
        if not board.is_tile(tile):
            raise InvalidTile(tile)

        index = board.index_of(tile)
        gap = board.adjacent_empty(index)
        if gap is None:
            return board, False

        board.cells[gap], board.cells[index] = tile, EMPTY
        return board, True

    @staticmethod
    def check_win(board: Board) -> bool:
        """True if every tile is home; the gap may be anywhere."""
        return board.is_solved()

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach solved order by legal moves.

        The solved target keeps the gap on the missing tile's home cell.
        """
        missing = board.missing_tile
        gap = board.empty_index

        if board.width == 1 or board.height == 1:
            # a single row or column only ever shifts the gap along the line
            tiles = [v for v in board.cells if v is not EMPTY]
            return tiles == sorted(tiles)

        # Treat the gap as the missing tile and compare permutation parity
        # with the gap's taxicab distance from home.
        perm = [missing if v is EMPTY else v for v in board.cells]
        seen = [False] * len(perm)
        cycles = 0
        for start in range(len(perm)):
            if seen[start]:
                continue
            cycles += 1
            i = start
            while not seen[i]:
                seen[i] = True
                i = perm[i]
        parity = (len(perm) - cycles) % 2

        gap_row, gap_col = divmod(gap, board.width)
        home_row, home_col = divmod(missing, board.width)
        distance = abs(gap_row - home_row) + abs(gap_col - home_col)
        return parity == distance % 2
