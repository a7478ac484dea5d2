"""Spawn policies and their configuration-time validation."""

from __future__ import annotations

import logging
import random

import pytest

from xnumbers.engine.gamespawn import SpawnConfig, SpawnMethod, SpawnPolicy, next_spawn
from xnumbers.errors import ConfigurationError

LOCATIONS = [(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]


# -- validation ---------------------------------------------------------------


@pytest.mark.parametrize(
    "config",
    [
        SpawnConfig(SpawnMethod.RANDOM, (1.0, 2.0)),
        SpawnConfig(SpawnMethod.RANDOM, (0.0, 0.0, 1.0, 1.0, 2.0, 2.0)),
        SpawnConfig(SpawnMethod.SEQUENTIAL, (1.0, 1.0)),
        SpawnConfig(SpawnMethod.SHUFFLE, ()),
        SpawnConfig(SpawnMethod.SHUFFLE, (1.0, 1.0, 2.0)),
    ],
    ids=["random-2", "random-6", "sequential-1pt", "shuffle-empty", "shuffle-odd"],
)
def test_unmet_requirements_fall_back_to_origin(
    config: SpawnConfig, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        validated = config.validated()
    assert validated.method is SpawnMethod.ORIGIN
    assert "defaulting to ORIGIN" in caplog.text


def test_valid_configs_are_kept() -> None:
    for config in (
        SpawnConfig.origin(),
        SpawnConfig.random(0, 0, 5, 5),
        SpawnConfig.sequential(LOCATIONS),
        SpawnConfig.shuffle(LOCATIONS[:2]),
    ):
        assert config.validated() is config


def test_parse_is_case_insensitive() -> None:
    config = SpawnConfig.parse("Sequential", [1, 1, 2, 2])
    assert config.method is SpawnMethod.SEQUENTIAL
    assert config.locations == [(1.0, 1.0), (2.0, 2.0)]


def test_parse_rejects_unknown_method() -> None:
    with pytest.raises(ConfigurationError):
        SpawnConfig.parse("teleport", [])


# -- selection ----------------------------------------------------------------


def test_origin_always_zero() -> None:
    policy = SpawnPolicy(SpawnConfig.origin())
    assert [policy.next() for _ in range(3)] == [(0.0, 0.0)] * 3
    assert not policy.repositions


def test_degraded_random_spawns_at_origin() -> None:
    policy = SpawnPolicy(SpawnConfig(SpawnMethod.RANDOM, (4.0, 4.0)))
    assert policy.config.method is SpawnMethod.ORIGIN
    assert [policy.next() for _ in range(5)] == [(0.0, 0.0)] * 5


@pytest.mark.parametrize(
    "config",
    [
        SpawnConfig(SpawnMethod.RANDOM, (1.0, 2.0)),
        SpawnConfig.sequential([]),
        SpawnConfig.shuffle([]),
    ],
    ids=["random-2", "sequential-empty", "shuffle-empty"],
)
def test_next_spawn_degrades_unvalidated_config(config: SpawnConfig) -> None:
    rng = random.Random(3)
    for cursor in (0, 1, 5):
        assert next_spawn(config, cursor, rng) == (0.0, 0.0, cursor)


def test_sequential_cycles_in_order() -> None:
    policy = SpawnPolicy(SpawnConfig.sequential(LOCATIONS))
    seen = [policy.next() for _ in range(7)]
    assert seen == [
        (1.0, 1.0), (2.0, 2.0), (3.0, 3.0),
        (1.0, 1.0), (2.0, 2.0), (3.0, 3.0),
        (1.0, 1.0),
    ]
    assert policy.spawn_count == 7
    assert policy.repositions


def test_next_spawn_advances_cursor() -> None:
    config = SpawnConfig.sequential(LOCATIONS)
    assert next_spawn(config, 0) == (1.0, 1.0, 1)
    assert next_spawn(config, 2) == (3.0, 3.0, 0)


def test_shuffle_picks_from_locations() -> None:
    policy = SpawnPolicy(SpawnConfig.shuffle(LOCATIONS), random.Random(1))
    picks = {policy.next() for _ in range(100)}
    assert picks == set(LOCATIONS)


def test_random_stays_inside_rectangle() -> None:
    policy = SpawnPolicy(SpawnConfig.random(-2, 1, 3, 4), random.Random(2))
    for _ in range(200):
        x, y = policy.next()
        assert -2 <= x <= 3
        assert 1 <= y <= 4
