"""HasherConfig unit tests."""

from __future__ import annotations

import dataclasses

import pytest

from password_hashing import (
    ErrorCodes,
    HasherConfig,
    Parameters,
    RandomSaltGenerator,
    ValidationError,
)


def test_defaults() -> None:
    config = HasherConfig()
    assert config.memory_cost == 46 * 1024
    assert config.time_cost == 1
    assert config.parallelism == 1
    assert config.key_length == 32
    assert isinstance(config.salt_generator, RandomSaltGenerator)
    assert config.salt_generator.length == 16


def test_parameters() -> None:
    config = HasherConfig(memory_cost=65536, time_cost=2, parallelism=4, key_length=16)
    assert config.parameters == Parameters(memory=65536, time=2, parallelism=4, key_length=16)


def test_is_immutable() -> None:
    config = HasherConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.time_cost = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"time_cost": 0}, "time_cost"),
        ({"time_cost": 2**32}, "time_cost"),
        ({"parallelism": 0}, "parallelism"),
        ({"parallelism": 256}, "parallelism"),
        ({"memory_cost": 7}, "memory_cost"),
        ({"memory_cost": 31, "parallelism": 4}, "memory_cost"),
        ({"memory_cost": 2**32}, "memory_cost"),
        ({"key_length": 3}, "key_length"),
        ({"key_length": 2**32}, "key_length"),
    ],
)
def test_rejects_out_of_range(kwargs: dict[str, int], field: str) -> None:
    with pytest.raises(ValidationError, match=field) as exc_info:
        HasherConfig(**kwargs)  # type: ignore[arg-type]
    assert exc_info.value.code == ErrorCodes.INVALID_CONFIG
    assert exc_info.value.field == field


def test_accepts_floor_values() -> None:
    config = HasherConfig(memory_cost=32, time_cost=1, parallelism=4, key_length=4)
    assert config.parameters.memory == 32
