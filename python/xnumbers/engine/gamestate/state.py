"""Tracks the mutable state of a game session."""

from __future__ import annotations

from enum import StrEnum


class Status(StrEnum):
    IDLE = "idle"
    PLAYING = "playing"
    ENDED = "ended"
    ABORTED = "aborted"


class GameState:
    """Holds the session status, step counter and logical timer flag.

    Wall-clock time is the presentation layer's business; the engine only
    says when the timer should run.
    """

    def __init__(self) -> None:
        self.status: Status = Status.IDLE
        self.steps: int = 0
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    @property
    def timer_running(self) -> bool:
        return self._running

    def start_timer(self) -> None:
        self._running = True

    def stop_timer(self) -> None:
        self._running = False

    # -- steps ----------------------------------------------------------------

    def increment_steps(self) -> None:
        self.steps += 1

    def reset_steps(self) -> None:
        self.steps = 0
