"""Salt generators."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Protocol

from .exceptions import ErrorCodes, HashError

DEFAULT_SALT_LENGTH = 16


class SaltGenerator(Protocol):
    """Produces the salt for one hash. Raises on failure."""

    def generate(self) -> bytes: ...


class RandomSaltGenerator:
    """Reads ``length`` bytes from a secure entropy source.

    ``source(n)`` must return exactly ``n`` bytes; :func:`os.urandom` by
    default.
    """

    def __init__(
        self,
        length: int = DEFAULT_SALT_LENGTH,
        source: Callable[[int], bytes] = os.urandom,
    ) -> None:
        if length < 1:
            raise ValueError(f"salt length must be >= 1, got {length}")
        self._length = length
        self._source = source

    @property
    def length(self) -> int:
        return self._length

    def generate(self) -> bytes:
        salt = bytes(self._source(self._length))
        if len(salt) != self._length:
            raise HashError(
                ErrorCodes.SALT_GENERATION,
                f"short read from entropy source: {len(salt)} of {self._length} bytes",
            )
        return salt

    def __repr__(self) -> str:
        return f"RandomSaltGenerator(length={self._length})"
