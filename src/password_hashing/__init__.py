"""Argon2id password hashing with a PHC string codec."""

from .config import HasherConfig
from .exceptions import (
    EncodingError,
    ErrorCodes,
    HashError,
    ParseError,
    PasswordHashingError,
    UnsupportedAlgorithmError,
    UnsupportedVersionError,
    ValidationError,
    VerifyError,
)
from .hasher import Argon2idHasher, PasswordHasher, decode_hash, derive_with_salt
from .kdf import ALGORITHM_ID, KDF_VERSION
from .params import Parameters, from_params, key_length_of, to_params
from .phc import Parameter, Record, decode, encode
from .salt import RandomSaltGenerator, SaltGenerator

__all__ = [
    "ALGORITHM_ID",
    "KDF_VERSION",
    "Argon2idHasher",
    "HasherConfig",
    "PasswordHasher",
    "decode_hash",
    "derive_with_salt",
    "Parameter",
    "Record",
    "decode",
    "encode",
    "Parameters",
    "from_params",
    "key_length_of",
    "to_params",
    "RandomSaltGenerator",
    "SaltGenerator",
    "PasswordHashingError",
    "ErrorCodes",
    "ParseError",
    "ValidationError",
    "VerifyError",
    "UnsupportedAlgorithmError",
    "UnsupportedVersionError",
    "HashError",
    "EncodingError",
]
