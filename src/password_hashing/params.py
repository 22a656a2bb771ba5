"""Argon2id tuning parameters and their PHC parameter list form."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import EncodingError, ErrorCodes, ValidationError
from .phc import Parameter

MAX_UINT8 = 2**8 - 1
MAX_UINT32 = 2**32 - 1

_UNSIGNED_RE = re.compile(r"[0-9]+")

# (PHC name, field name, upper bound); the order is part of the wire format.
_SCHEMA = (
    ("m", "memory", MAX_UINT32),
    ("t", "time", MAX_UINT32),
    ("p", "parallelism", MAX_UINT8),
)


@dataclass(frozen=True)
class Parameters:
    """Argon2id cost parameters.

    memory is in KiB. key_length is not part of the PHC parameter list: on
    the verify path it comes from the decoded hash length.
    """

    memory: int
    time: int
    parallelism: int
    key_length: int = 32


def _parse_unsigned(field: str, value: str, maximum: int) -> int:
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValidationError(
            ErrorCodes.PARAM_VALUE,
            field,
            f"{field} parameter is not an unsigned integer: {value!r}",
        )
    parsed = int(value)
    if parsed > maximum:
        raise ValidationError(
            ErrorCodes.PARAM_VALUE,
            field,
            f"{field} parameter out of range: {value} > {maximum}",
        )
    return parsed


def to_params(pairs: Sequence[Parameter], *, key_length: int = 0) -> Parameters:
    """Bind an ``m, t, p`` parameter list to :class:`Parameters`.

    Raises:
        ValidationError: wrong count (``PARAM_COUNT``), wrong names or order
            (``PARAM_ORDER``), or a value that is not an unsigned integer of
            the expected width (``PARAM_VALUE``).
    """
    if len(pairs) != len(_SCHEMA):
        raise ValidationError(
            ErrorCodes.PARAM_COUNT,
            "params",
            f"invalid parameter count: {len(pairs)}",
        )

    names = [p.name for p in pairs]
    if names != [name for name, _, _ in _SCHEMA]:
        raise ValidationError(
            ErrorCodes.PARAM_ORDER,
            "params",
            f"parameters should be in the order: m, t, p (got {', '.join(names)})",
        )

    memory, time, parallelism = (
        _parse_unsigned(field, pair.value, maximum)
        for pair, (_, field, maximum) in zip(pairs, _SCHEMA)
    )
    return Parameters(
        memory=memory,
        time=time,
        parallelism=parallelism,
        key_length=key_length,
    )


def from_params(params: Parameters) -> tuple[Parameter, ...]:
    """Return the canonical ``m, t, p`` parameter list for *params*."""
    return (
        Parameter(name="m", value=str(params.memory)),
        Parameter(name="t", value=str(params.time)),
        Parameter(name="p", value=str(params.parallelism)),
    )


def key_length_of(digest: bytes) -> int:
    """Key length to re-derive *digest*, which must fit in 32 bits."""
    if len(digest) > MAX_UINT32:
        raise EncodingError(
            ErrorCodes.HASH_TOO_LONG,
            f"hash is too long: {len(digest)}",
        )
    return len(digest)
