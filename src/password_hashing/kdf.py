"""Argon2id key derivation via argon2-cffi."""

from __future__ import annotations

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .exceptions import ErrorCodes, HashError
from .params import Parameters

ALGORITHM_ID = "argon2id"
KDF_VERSION = ARGON2_VERSION


def derive(password: bytes, salt: bytes, params: Parameters) -> bytes:
    """Derive ``params.key_length`` bytes from *password* and *salt*.

    Raises:
        HashError: ``DERIVATION`` when libargon2 rejects the inputs.
    """
    try:
        return hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=params.time,
            memory_cost=params.memory,
            parallelism=params.parallelism,
            hash_len=params.key_length,
            type=Type.ID,
            version=KDF_VERSION,
        )
    except HashingError as e:
        raise HashError(
            ErrorCodes.DERIVATION,
            f"argon2id derivation failed: {e}",
            cause=e,
        ) from e
