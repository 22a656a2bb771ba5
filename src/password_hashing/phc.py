"""PHC string format codec.

Implements the Password Hashing Competition string format described at
https://github.com/P-H-C/phc-string-format::

    $<id>[$v=<version>][$<param>=<value>(,<param>=<value>)*][$<salt>[$<hash>]]

The codec does not know about any particular algorithm: parameters are kept
as an ordered sequence of name/value strings, and salt/hash are stored as raw
bytes once decoded.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field

from .exceptions import ErrorCodes, ParseError

_ID = r"[a-z0-9-]{1,32}"
_NAME = r"[a-z0-9-]+"
_VALUE = r"[a-zA-Z0-9/+.-]+"
_B64 = r"[a-zA-Z0-9/+.-]+"

# The version group is tried before the parameter group, so "v=19" is a
# version while "v=aparam" and "v=19,m=1" fall through to the parameter list.
_FORMAT_RE = re.compile(
    rf"\$({_ID})"
    r"(?:\$v=([0-9]+))?"
    rf"(?:\$({_NAME}={_VALUE}(?:,{_NAME}={_VALUE})*))?"
    rf"(?:\$({_B64})(?:\$({_B64}))?)?"
)

_ID_RE = re.compile(_ID)
_VERSION_RE = re.compile(r"[0-9]+")
_NAME_RE = re.compile(_NAME)
_VALUE_RE = re.compile(_VALUE)


@dataclass(frozen=True)
class Parameter:
    """A single ``name=value`` entry of the parameter segment."""

    name: str
    value: str


@dataclass(frozen=True)
class Record:
    """Structured form of one PHC string.

    Empty ``version``, ``params``, ``salt`` and ``hash`` mean the segment is
    absent from the encoded string.
    """

    id: str
    version: str = ""
    params: tuple[Parameter, ...] = field(default_factory=tuple)
    salt: bytes = b""
    hash: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "salt", bytes(self.salt))
        object.__setattr__(self, "hash", bytes(self.hash))

        if not _ID_RE.fullmatch(self.id):
            raise ValueError(f"invalid PHC id: {self.id!r}")
        if self.version and not _VERSION_RE.fullmatch(self.version):
            raise ValueError(f"invalid PHC version: {self.version!r}")
        for param in self.params:
            if not _NAME_RE.fullmatch(param.name):
                raise ValueError(f"invalid PHC parameter name: {param.name!r}")
            if not _VALUE_RE.fullmatch(param.value):
                raise ValueError(f"invalid PHC parameter value for {param.name}: {param.value!r}")
        # A lone "v=<digits>" parameter would be read back as the version.
        if (
            not self.version
            and len(self.params) == 1
            and self.params[0].name == "v"
            and _VERSION_RE.fullmatch(self.params[0].value)
        ):
            raise ValueError("a single v=<digits> parameter requires an explicit version")
        if self.hash and not self.salt:
            raise ValueError("a PHC hash requires a salt")

    def __str__(self) -> str:
        return encode(self)


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(segment: str, name: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    try:
        raw = base64.b64decode(padded, validate=True)
    except binascii.Error as e:
        raise ParseError(
            ErrorCodes.ENCODING,
            f"{name} decoding error: {e}",
            segment=name,
            cause=e,
        ) from e
    # Non-zero trailing bits would not survive re-encoding.
    if _b64encode(raw) != segment:
        raise ParseError(
            ErrorCodes.ENCODING,
            f"{name} decoding error: non-canonical base64 {segment!r}",
            segment=name,
        )
    return raw


def _split_params(segment: str) -> tuple[Parameter, ...]:
    params = []
    for pair in segment.split(","):
        name, value = pair.split("=", 1)
        params.append(Parameter(name=name, value=value))
    return tuple(params)


def decode(text: str) -> Record:
    """Parse a PHC string into a :class:`Record`.

    Raises:
        ParseError: ``MALFORMED`` if *text* does not match the grammar,
            ``ENCODING`` if the salt or hash segment is not canonical
            unpadded base64.
    """
    match = _FORMAT_RE.fullmatch(text)
    if match is None:
        raise ParseError(ErrorCodes.MALFORMED, f"not a valid PHC string: {text!r}")

    id_, version, params, salt, digest = match.groups()

    decoded_salt = b""
    decoded_hash = b""
    if salt:
        decoded_salt = _b64decode(salt, "salt")
        if digest:
            decoded_hash = _b64decode(digest, "hash")

    return Record(
        id=id_,
        version=version or "",
        params=_split_params(params) if params else (),
        salt=decoded_salt,
        hash=decoded_hash,
    )


def encode(record: Record) -> str:
    """Serialize *record* back into its PHC string."""
    parts = ["$", record.id]

    if record.version:
        parts.append("$v=")
        parts.append(record.version)

    if record.params:
        parts.append("$")
        parts.append(",".join(f"{p.name}={p.value}" for p in record.params))

    if record.salt:
        parts.append("$")
        parts.append(_b64encode(record.salt))
        if record.hash:
            parts.append("$")
            parts.append(_b64encode(record.hash))

    return "".join(parts)
