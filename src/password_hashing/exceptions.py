"""password hashing exceptions."""

from __future__ import annotations


class PasswordHashingError(Exception):
    """Base error for the password hashing library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ErrorCodes:
    """PasswordHashingError code constants."""

    MALFORMED: str = "MALFORMED"
    ENCODING: str = "ENCODING"
    PARAM_COUNT: str = "PARAM_COUNT"
    PARAM_ORDER: str = "PARAM_ORDER"
    PARAM_VALUE: str = "PARAM_VALUE"
    MISSING_FIELD: str = "MISSING_FIELD"
    INVALID_CONFIG: str = "INVALID_CONFIG"
    UNSUPPORTED_ALGORITHM: str = "UNSUPPORTED_ALGORITHM"
    UNSUPPORTED_VERSION: str = "UNSUPPORTED_VERSION"
    SALT_GENERATION: str = "SALT_GENERATION"
    DERIVATION: str = "DERIVATION"
    HASH_TOO_LONG: str = "HASH_TOO_LONG"


class ParseError(PasswordHashingError):
    """A PHC string does not match the grammar or carries bad base64.

    ``segment`` is ``"salt"`` or ``"hash"`` for base64 failures, ``None``
    when the whole string was rejected.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        segment: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.segment = segment
        super().__init__(code, message, cause)


class ValidationError(PasswordHashingError):
    """Parameters or configuration do not fit the Argon2id profile."""

    def __init__(
        self,
        code: str,
        field: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        self.field = field
        super().__init__(code, message, cause)


class VerifyError(PasswordHashingError):
    """A stored hash was produced by something this hasher cannot check."""

    def __init__(self, code: str, found: str, expected: str, message: str) -> None:
        self.found = found
        self.expected = expected
        super().__init__(code, message)


class UnsupportedAlgorithmError(VerifyError):
    """The stored hash names another algorithm."""

    def __init__(self, found: str, expected: str) -> None:
        super().__init__(
            ErrorCodes.UNSUPPORTED_ALGORITHM,
            found,
            expected,
            f"unsupported hashing function: {found!r} (expected {expected!r})",
        )


class UnsupportedVersionError(VerifyError):
    """The stored hash uses another Argon2 version."""

    def __init__(self, found: str, expected: str) -> None:
        super().__init__(
            ErrorCodes.UNSUPPORTED_VERSION,
            found,
            expected,
            f"unsupported argon2id version: {found!r} (expected {expected!r})",
        )


class HashError(PasswordHashingError):
    """Salt generation or key derivation failed."""


class EncodingError(PasswordHashingError):
    """A value cannot be represented in the Argon2id parameter set."""
