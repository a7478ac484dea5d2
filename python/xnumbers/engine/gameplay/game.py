"""Core gameplay logic — routes player intent through the game state machine."""

from __future__ import annotations

import logging
import random
from enum import IntEnum

from xnumbers.config import SessionConfig
from xnumbers.engine.gamegenerator import GameGenerator
from xnumbers.engine.gamerules import Rules
from xnumbers.engine.gamespawn import SpawnPolicy
from xnumbers.engine.gamestate import GameState, Status
from xnumbers.errors import ConfigurationError, InvalidTile
from xnumbers.models.board import Board

logger = logging.getLogger(__name__)


class Control(IntEnum):
    """Reserved codes accepted by ``GameSession.request_move`` besides tiles."""

    PRIMARY = -1
    HELP = -2


class SessionObserver:
    """Receives board, state and spawn updates from a session.

    Every hook is a no-op here; presentation layers override what they need.
    """

    def on_board_changed(self, board: Board, empty_index: int) -> None:
        pass

    def on_state_changed(self, status: Status, steps: int, timer_running: bool) -> None:
        pass

    def on_spawn(self, x: float, y: float) -> None:
        pass

    def on_help(self, url: str | None) -> None:
        pass


class GameSession:
    """Orchestrates a single game session.

    All intent arrives through ``request_move``, one event at a time.
    """

    def __init__(
        self,
        config: SessionConfig,
        observer: SessionObserver | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.observer = observer or SessionObserver()
        self._rng = rng or random.Random()
        self.state = GameState()
        self.board = GameGenerator.solved(config.width, config.height)
        self.spawn = SpawnPolicy(config.spawn, self._rng)
        self.observer.on_board_changed(self.board, self.board.empty_index)
        self.respawn()

    @classmethod
    def from_board(
        cls,
        config: SessionConfig,
        board: Board,
        observer: SessionObserver | None = None,
        rng: random.Random | None = None,
    ) -> GameSession:
        """Create a session already playing an existing board."""
        if (board.width, board.height) != (config.width, config.height):
            raise ConfigurationError(
                f"Board is {board.width}×{board.height}, "
                f"config expects {config.width}×{config.height}."
            )
        board.check_integrity()
        session = cls(config, observer, rng)
        session.board = board
        session.state.start_timer()
        session.state.status = Status.PLAYING
        session.observer.on_board_changed(board, board.empty_index)
        session._notify_state()
        return session

    # -- queries --------------------------------------------------------------

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def steps(self) -> int:
        return self.state.steps

    @property
    def is_won(self) -> bool:
        return Rules.check_win(self.board)

    # -- ingress --------------------------------------------------------------

    def request_move(self, target: int) -> bool:
        """Handle a tile value or a ``Control`` code.

        Returns True if the board or the state changed. Unknown codes,
        invalid tiles and clicks outside ``PLAYING`` are ignored.
        """
        logger.debug("Processing request %r", target)
        if not isinstance(target, int):
            logger.debug("Invalid button id %r", target)
            return False
        if target in (Control.PRIMARY, Control.HELP):
            return self._on_control(Control(target))

        if not 0 <= target < self.config.size:
            logger.debug("Invalid button id %r", target)
            return False

        if self.state.status is not Status.PLAYING:
            logger.debug("Tiles inactive while %s", self.state.status.value)
            return False

        return self._on_tile(target)

    def respawn(self) -> tuple[float, float]:
        """Move the puzzle's anchor according to the spawn policy."""
        x, y = self.spawn.next()
        self.observer.on_spawn(x, y)
        return x, y

    # -- transitions ----------------------------------------------------------

    def _on_control(self, control: Control) -> bool:
        if control is Control.HELP:
            self.observer.on_help(self.config.help_url)
            return False

        status = self.state.status
        if status is Status.IDLE:
            self._start()
        elif status is Status.PLAYING:
            self._abort()
        else:
            self._reset()
        return True

    def _on_tile(self, tile: int) -> bool:
        try:
            _, accepted = Rules.apply_move(self.board, tile)
        except InvalidTile as exc:
            logger.debug("Ignoring click: %s", exc)
            return False

        if not accepted:
            return False

        self.state.increment_steps()
        logger.debug("Steps: %d", self.state.steps)
        self.observer.on_board_changed(self.board, self.board.empty_index)

        if Rules.check_win(self.board):
            self._end()
        else:
            self._notify_state()
        return True

    def _start(self) -> None:
        logger.debug("Starting game")
        self.board = GameGenerator.generate(
            self.config.width,
            self.config.height,
            force_last_empty=False,
            depth=self.config.shuffle_depth,
            rng=self._rng,
        )
        logger.debug("Shuffled board:\n%s", self.board.dump())
        self.state.reset_steps()
        self.state.start_timer()
        self.state.status = Status.PLAYING
        self.observer.on_board_changed(self.board, self.board.empty_index)
        self._notify_state()

    def _abort(self) -> None:
        logger.debug("Aborting game")
        self.state.stop_timer()
        self.state.status = Status.ABORTED
        self._notify_state()

    def _end(self) -> None:
        logger.debug("Game ended, checking spawn logic")
        self.respawn()
        self.state.stop_timer()
        # policies that move the puzzle skip the post-game screen
        if self.spawn.repositions:
            self.state.status = Status.IDLE
        else:
            self.state.status = Status.ENDED
        self._notify_state()

    def _reset(self) -> None:
        logger.debug("Resetting game")
        missing = self.board.missing_tile
        self.board = GameGenerator.solved(self.config.width, self.config.height, missing)
        self.state.stop_timer()
        self.state.status = Status.IDLE
        self.observer.on_board_changed(self.board, self.board.empty_index)
        self._notify_state()

    def _notify_state(self) -> None:
        self.observer.on_state_changed(
            self.state.status, self.state.steps, self.state.timer_running
        )
