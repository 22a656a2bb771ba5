"""Hasher configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import ErrorCodes, ValidationError
from .params import MAX_UINT8, MAX_UINT32, Parameters
from .salt import RandomSaltGenerator, SaltGenerator

# libargon2 lower bounds
MIN_TIME_COST = 1
MIN_PARALLELISM = 1
MIN_MEMORY_PER_LANE = 8
MIN_KEY_LENGTH = 4


def _invalid(field_name: str, message: str) -> ValidationError:
    return ValidationError(ErrorCodes.INVALID_CONFIG, field_name, message)


@dataclass(frozen=True)
class HasherConfig:
    """Argon2id hasher settings.

    Values are checked against libargon2's floors at construction so that a
    misconfigured hasher fails when it is built rather than on first use.
    """

    memory_cost: int = 46 * 1024
    time_cost: int = 1
    parallelism: int = 1
    key_length: int = 32
    salt_generator: SaltGenerator = field(default_factory=RandomSaltGenerator)

    def __post_init__(self) -> None:
        if not MIN_TIME_COST <= self.time_cost <= MAX_UINT32:
            raise _invalid("time_cost", f"time_cost must be in [1, {MAX_UINT32}], got {self.time_cost}")
        if not MIN_PARALLELISM <= self.parallelism <= MAX_UINT8:
            raise _invalid(
                "parallelism",
                f"parallelism must be in [1, {MAX_UINT8}], got {self.parallelism}",
            )
        min_memory = MIN_MEMORY_PER_LANE * self.parallelism
        if not min_memory <= self.memory_cost <= MAX_UINT32:
            raise _invalid(
                "memory_cost",
                f"memory_cost must be in [{min_memory}, {MAX_UINT32}], got {self.memory_cost}",
            )
        if not MIN_KEY_LENGTH <= self.key_length <= MAX_UINT32:
            raise _invalid(
                "key_length",
                f"key_length must be in [{MIN_KEY_LENGTH}, {MAX_UINT32}], got {self.key_length}",
            )

    @property
    def parameters(self) -> Parameters:
        return Parameters(
            memory=self.memory_cost,
            time=self.time_cost,
            parallelism=self.parallelism,
            key_length=self.key_length,
        )
