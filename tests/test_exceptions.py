"""PasswordHashingError / ErrorCodes unit tests."""

from password_hashing import (
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


def test_error_str() -> None:
    """str() is 'CODE: message'."""
    err = PasswordHashingError(code="DERIVATION", message="derivation failed")
    assert str(err) == "DERIVATION: derivation failed"


def test_error_with_cause() -> None:
    cause = ValueError("original error")
    err = HashError(ErrorCodes.SALT_GENERATION, "salt error", cause=cause)
    assert err.__cause__ is cause


def test_error_without_cause() -> None:
    err = EncodingError(ErrorCodes.HASH_TOO_LONG, "too long")
    assert err.__cause__ is None
    assert err.message == "too long"


def test_parse_error_segment() -> None:
    err = ParseError(ErrorCodes.ENCODING, "bad salt", segment="salt")
    assert err.segment == "salt"
    assert err.code == "ENCODING"


def test_validation_error_field() -> None:
    err = ValidationError(ErrorCodes.PARAM_VALUE, "memory", "bad memory")
    assert err.field == "memory"
    assert str(err) == "PARAM_VALUE: bad memory"


def test_unsupported_algorithm_error() -> None:
    err = UnsupportedAlgorithmError(found="bcrypt", expected="argon2id")
    assert err.code == ErrorCodes.UNSUPPORTED_ALGORITHM
    assert "bcrypt" in str(err)
    assert isinstance(err, VerifyError)


def test_unsupported_version_error() -> None:
    err = UnsupportedVersionError(found="16", expected="19")
    assert err.code == ErrorCodes.UNSUPPORTED_VERSION
    assert (err.found, err.expected) == ("16", "19")


def test_all_errors_share_base() -> None:
    for cls in (
        ParseError,
        ValidationError,
        VerifyError,
        UnsupportedAlgorithmError,
        UnsupportedVersionError,
        HashError,
        EncodingError,
    ):
        assert issubclass(cls, PasswordHashingError)
    assert issubclass(PasswordHashingError, Exception)
