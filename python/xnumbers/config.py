"""Session configuration, validated once at construction."""

from __future__ import annotations

from dataclasses import dataclass, field

from xnumbers.engine.gamegenerator import DEFAULT_SHUFFLE_DEPTH
from xnumbers.engine.gamespawn import SpawnConfig
from xnumbers.errors import ConfigurationError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SessionConfig:
    """Every option a game session recognises.

    Invalid dimensions or depth raise ``ConfigurationError``; an unusable
    spawn config falls back to ``ORIGIN`` with a warning.
    """

    width: int
    height: int
    spawn: SpawnConfig = field(default_factory=SpawnConfig.origin)
    shuffle_depth: int = DEFAULT_SHUFFLE_DEPTH
    help_url: str | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigurationError(
                    f"Required field {name!r} must be a positive integer, got {value!r}."
                )
        if not _is_int(self.shuffle_depth) or self.shuffle_depth < 0:
            raise ConfigurationError(
                f"Shuffle depth must be a non-negative integer, got {self.shuffle_depth!r}."
            )
        object.__setattr__(self, "spawn", self.spawn.validated())

    @property
    def size(self) -> int:
        return self.width * self.height
