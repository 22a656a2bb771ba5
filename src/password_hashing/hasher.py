"""Argon2id password hasher producing PHC strings."""

from __future__ import annotations

import hmac
import logging
from typing import Protocol

from . import phc
from .config import HasherConfig
from .exceptions import (
    ErrorCodes,
    HashError,
    ParseError,
    PasswordHashingError,
    UnsupportedAlgorithmError,
    UnsupportedVersionError,
    ValidationError,
)
from .kdf import ALGORITHM_ID, KDF_VERSION, derive
from .params import Parameters, from_params, key_length_of, to_params

logger = logging.getLogger(__name__)

_VERSION_TEXT = str(KDF_VERSION)


class PasswordHasher(Protocol):
    """Hashes passwords and checks them against stored hashes."""

    def hash(self, password: str) -> str: ...

    def is_same(self, password: str, encoded: str) -> bool: ...


def _to_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def derive_with_salt(password: str | bytes, salt: bytes, params: Parameters) -> phc.Record:
    """Derive the Argon2id record of *password* for a known *salt*.

    The salt is copied before derivation, so the returned record never
    shares a buffer with the caller.
    """
    salt_copy = bytes(bytearray(salt))
    digest = derive(_to_bytes(password), salt_copy, params)
    return phc.Record(
        id=ALGORITHM_ID,
        version=_VERSION_TEXT,
        params=from_params(params),
        salt=salt_copy,
        hash=digest,
    )


def decode_hash(encoded: str) -> tuple[phc.Record, Parameters]:
    """Decode a stored Argon2id PHC string and bind its parameters.

    Returns:
        The parsed record and its parameters, with ``key_length`` set to the
        length of the stored hash.

    Raises:
        ParseError: the string is not a valid PHC string.
        UnsupportedAlgorithmError: the id is not ``argon2id``.
        UnsupportedVersionError: the version is not the libargon2 version.
        ValidationError: missing salt/hash or bad ``m, t, p`` parameters.
        EncodingError: the hash is longer than a 32-bit key length.
    """
    try:
        record = phc.decode(encoded)
    except ParseError as e:
        raise ParseError(
            e.code,
            f"PHC decode error: {e.message}",
            segment=e.segment,
            cause=e,
        ) from e

    if record.id != ALGORITHM_ID:
        raise UnsupportedAlgorithmError(found=record.id, expected=ALGORITHM_ID)

    if record.version != _VERSION_TEXT:
        raise UnsupportedVersionError(found=record.version, expected=_VERSION_TEXT)

    params = to_params(record.params, key_length=key_length_of(record.hash))

    if not record.hash:
        raise ValidationError(
            ErrorCodes.MISSING_FIELD,
            "hash",
            "stored argon2id string has no salt and hash",
        )
    return record, params


class Argon2idHasher:
    """Argon2id implementation of :class:`PasswordHasher`.

    The hasher holds only its immutable configuration and may be shared
    between threads.
    """

    def __init__(self, config: HasherConfig | None = None) -> None:
        self._config = config or HasherConfig()
        self._params = self._config.parameters

    @property
    def config(self) -> HasherConfig:
        return self._config

    def hash(self, password: str | bytes) -> str:
        """Hash *password* with a fresh salt and return its PHC string.

        Raises:
            HashError: ``SALT_GENERATION`` or ``DERIVATION``.
        """
        try:
            salt = self._config.salt_generator.generate()
            if not isinstance(salt, (bytes, bytearray)):
                raise TypeError(f"salt must be bytes, got {type(salt).__name__}")
        except HashError:
            logger.warning("Salt generation failed")
            raise
        except Exception as e:
            logger.warning("Salt generation failed", extra={"error": str(e)})
            raise HashError(
                ErrorCodes.SALT_GENERATION,
                f"salt generation error: {e}",
                cause=e,
            ) from e

        try:
            record = derive_with_salt(password, salt, self._params)
        except HashError as e:
            logger.warning("Password derivation failed", extra={"error": str(e)})
            raise
        return phc.encode(record)

    def is_same(self, password: str | bytes, encoded: str) -> bool:
        """Check *password* against the stored PHC string *encoded*.

        The parameters recorded in *encoded* are used, not the configured
        ones. A wrong password returns ``False``; only unusable input raises.
        """
        try:
            record, params = decode_hash(encoded)
        except PasswordHashingError as e:
            logger.debug("Rejected stored password hash", extra={"error_code": e.code})
            raise

        fresh = derive_with_salt(password, record.salt, params)
        return hmac.compare_digest(fresh.hash, record.hash)

    def needs_rehash(self, encoded: str) -> bool:
        """Report whether *encoded* was made with other cost parameters."""
        _, params = decode_hash(encoded)
        return params != self._params

    def derive_with_salt(self, password: str | bytes, salt: bytes) -> phc.Record:
        """Derive with the configured parameters and a caller supplied salt."""
        return derive_with_salt(password, salt, self._params)
