"""Spawn policies deciding where the puzzle's anchor is placed."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import StrEnum

from xnumbers.errors import ConfigurationError

logger = logging.getLogger(__name__)


class SpawnMethod(StrEnum):
    ORIGIN = "origin"
    SEQUENTIAL = "sequential"
    SHUFFLE = "shuffle"
    RANDOM = "random"


@dataclass(frozen=True)
class SpawnConfig:
    """A spawn method plus its flat scalar parameters.

    ``values`` holds ``x, y`` pairs for ``SEQUENTIAL`` and ``SHUFFLE`` and
    ``xmin, ymin, xmax, ymax`` for ``RANDOM``. ``ORIGIN`` ignores it.
    """

    method: SpawnMethod = SpawnMethod.ORIGIN
    values: tuple[float, ...] = field(default_factory=tuple)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def origin(cls) -> SpawnConfig:
        return cls(SpawnMethod.ORIGIN)

    @classmethod
    def sequential(cls, locations: list[tuple[float, float]]) -> SpawnConfig:
        return cls(SpawnMethod.SEQUENTIAL, _flatten(locations))

    @classmethod
    def shuffle(cls, locations: list[tuple[float, float]]) -> SpawnConfig:
        return cls(SpawnMethod.SHUFFLE, _flatten(locations))

    @classmethod
    def random(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> SpawnConfig:
        return cls(SpawnMethod.RANDOM, (xmin, ymin, xmax, ymax))

    @classmethod
    def parse(cls, method: str, values: list[float] | None = None) -> SpawnConfig:
        """Build a config from a method name and a flat scalar list.

        Raises ``ConfigurationError`` for an unknown method name. Unmet
        requirements are left for ``validated`` to degrade.
        """
        try:
            parsed = SpawnMethod(method.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in SpawnMethod)
            raise ConfigurationError(
                f"Unknown spawn method {method!r}; expected one of {choices}."
            ) from None
        return cls(parsed, tuple(float(v) for v in values or ()))

    # -- queries --------------------------------------------------------------

    @property
    def locations(self) -> list[tuple[float, float]]:
        return [
            (self.values[i], self.values[i + 1])
            for i in range(0, len(self.values) - 1, 2)
        ]

    @property
    def repositions(self) -> bool:
        """True if respawning may move the puzzle away from the player."""
        return self.method is not SpawnMethod.ORIGIN

    def validated(self) -> SpawnConfig:
        """Return this config, or ``ORIGIN`` if its requirements are unmet."""
        count = len(self.values)
        if self.method is SpawnMethod.RANDOM:
            if count != 4:
                return self._degrade(f"length is {count}, should be 4")
        elif self.method in (SpawnMethod.SEQUENTIAL, SpawnMethod.SHUFFLE):
            if count % 2:
                return self._degrade(f"length is {count}, should be even")
            if count < 4:
                return self._degrade(
                    f"has {count // 2} location(s), should be at least 2"
                )
        return self

    def _degrade(self, reason: str) -> SpawnConfig:
        logger.warning(
            "Spawn method is %s but spawn locations %s; defaulting to %s",
            self.method.value.upper(),
            reason,
            SpawnMethod.ORIGIN.value.upper(),
        )
        return SpawnConfig.origin()


def _flatten(locations: list[tuple[float, float]]) -> tuple[float, ...]:
    return tuple(float(c) for point in locations for c in point)


def next_spawn(
    config: SpawnConfig,
    cursor: int = 0,
    rng: random.Random | None = None,
) -> tuple[float, float, int]:
    """Pick the next anchor position for *config*.

    *cursor* is the next index a ``SEQUENTIAL`` policy will use; the
    returned cursor is the one to pass on the following call. Other
    methods hand the cursor back unchanged.
    """
    config = config.validated()
    rng = rng or random.Random()

    if config.method is SpawnMethod.RANDOM:
        xmin, ymin, xmax, ymax = config.values
        x, y = rng.uniform(xmin, xmax), rng.uniform(ymin, ymax)
        logger.debug("Selected random location (%s, %s)", x, y)
        return x, y, cursor

    if config.method is SpawnMethod.SHUFFLE:
        locations = config.locations
        i = rng.randrange(len(locations))
        logger.debug("Selected location index %d after shuffle", i)
        x, y = locations[i]
        return x, y, cursor

    if config.method is SpawnMethod.SEQUENTIAL:
        locations = config.locations
        i = cursor % len(locations)
        logger.debug("Selected location index %d after sequential selection", i)
        x, y = locations[i]
        return x, y, (i + 1) % len(locations)

    logger.debug("Selected origin")
    return 0.0, 0.0, cursor


class SpawnPolicy:
    """Holds a validated spawn config and its sequential cursor."""

    def __init__(self, config: SpawnConfig, rng: random.Random | None = None) -> None:
        self.config = config.validated()
        self.cursor = 0
        self.spawn_count = 0
        self._rng = rng or random.Random()

    @property
    def repositions(self) -> bool:
        return self.config.repositions

    def next(self) -> tuple[float, float]:
        x, y, self.cursor = next_spawn(self.config, self.cursor, self._rng)
        self.spawn_count += 1
        return x, y
