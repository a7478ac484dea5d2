"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from xnumbers.models.board import EMPTY, Board

logger = logging.getLogger(__name__)

DEFAULT_SHUFFLE_DEPTH = 25


class GameGenerator:
    """Creates solvable puzzles by random-walking the gap from the solved state."""

    @staticmethod
    def solved(width: int, height: int, empty_index: int | None = None) -> Board:
        """Return the goal-state board (all tiles in order, gap at *empty_index*)."""
        return Board.solved(width, height, empty_index)

    @staticmethod
    def scramble(
        board: Board,
        depth: int = DEFAULT_SHUFFLE_DEPTH,
        rng: random.Random | None = None,
    ) -> list[int]:
        """Scramble *board* in-place using *depth* random legal moves.

        Returns the tiles moved, in order. Replaying them in reverse
        restores the starting board. Reversals are allowed.
        """
        rng = rng or random.Random()
        history: list[int] = []
        gap = board.empty_index

        for step in range(depth):
            candidates = board.neighbors(gap)
            if not candidates:
                # 1×1 board: nothing can move
                break
            target = rng.choice(candidates)
            tile = board.cells[target]
            board.cells[gap], board.cells[target] = tile, EMPTY
            history.append(tile)
            logger.debug("[%d] moved tile %d from %d to %d", step, tile, target, gap)
            gap = target

        return history

    @staticmethod
    def generate(
        width: int,
        height: int,
        force_last_empty: bool = False,
        depth: int = DEFAULT_SHUFFLE_DEPTH,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given dimensions.

        The gap starts at the last cell if *force_last_empty*, otherwise at
        a uniformly random cell. The result may happen to be solved.
        """
        rng = rng or random.Random()
        size = width * height
        empty_index = size - 1 if force_last_empty else rng.randrange(size)
        board = GameGenerator.solved(width, height, empty_index)
        logger.debug("Initial state:\n%s", board.dump())
        GameGenerator.scramble(board, depth, rng)
        return board
