"""TypeID codec.

``prefix_suffix`` where the suffix is a 128-bit UUID (normally v7) rendered
as 26 lowercase Crockford base32 characters. The prefix is optional.
"""

import re
import uuid as _uuid
from dataclasses import dataclass

from idkit.codecs.base import ParsedId
from idkit.codecs.uuid import version_nibble
from idkit.encoding.radix import TYPEID_ALPHABET, decode_typeid_suffix, encode_typeid_suffix
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp, ValidationResult

__all__ = ["MAX_PREFIX_LENGTH", "ParsedTypeId", "recognize", "parse", "validate_prefix"]

MAX_PREFIX_LENGTH = 63

_PREFIX = re.compile(r"[a-z][a-z_]*")
_SUFFIX_CHARS = frozenset(TYPEID_ALPHABET)


def validate_prefix(prefix: str) -> None:
    """Check a TypeID prefix; the empty prefix is allowed.

    Raises
    ------
    ParseError
        If the prefix is too long, does not start with a letter, or holds
        anything other than lowercase letters and underscores.
    """
    if not prefix:
        return
    if len(prefix) > MAX_PREFIX_LENGTH:
        raise ParseError(
            f"TypeID prefix must be at most {MAX_PREFIX_LENGTH} characters", kind="typeid"
        )
    if not _PREFIX.fullmatch(prefix):
        raise ParseError(
            "TypeID prefix must start with a letter and contain only lowercase "
            "letters and underscores",
            kind="typeid",
        )


def _split(text: str) -> tuple[str, str]:
    prefix, sep, suffix = text.rpartition("_")
    if not sep:
        return "", text
    return prefix, suffix


def recognize(text: str, require_prefix: bool = False) -> bool:
    """Structural TypeID check.

    Parameters
    ----------
    text : str
        Candidate text.
    require_prefix : bool, optional
        Reject bare suffixes.
    """
    text = text.strip()
    prefix, suffix = _split(text)
    if require_prefix and not prefix:
        return False
    if len(suffix) != 26 or not set(suffix) <= _SUFFIX_CHARS or suffix[0] > "7":
        return False
    try:
        validate_prefix(prefix)
    except ParseError:
        return False
    return True


def parse(text: str) -> "ParsedTypeId":
    """Parse a TypeID, splitting on the last underscore.

    Raises
    ------
    ParseError
        On an invalid prefix or a malformed suffix.
    """
    trimmed = text.strip()
    prefix, sep, suffix = trimmed.rpartition("_")
    if sep and not (prefix and suffix):
        raise ParseError("TypeID prefix and suffix must be non-empty", kind="typeid")
    validate_prefix(prefix)
    value = decode_typeid_suffix(suffix)
    return ParsedTypeId(prefix=prefix, value=_uuid.UUID(int=value), input=trimmed)


@dataclass(frozen=True)
class ParsedTypeId(ParsedId):
    """Parsed TypeID.

    Attributes
    ----------
    prefix : str
        Type prefix, empty when absent.
    value : uuid.UUID
        Embedded UUID.
    input : str
        Trimmed input text.
    """

    prefix: str
    value: _uuid.UUID
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.TYPEID

    @property
    def uuid_version(self) -> int:
        return version_nibble(self.value.int)

    def canonical(self) -> str:
        suffix = encode_typeid_suffix(self.value.int)
        return f"{self.prefix}_{suffix}" if self.prefix else suffix

    def as_bytes(self) -> bytes:
        return self.value.bytes

    def timestamp(self) -> Timestamp | None:
        if self.uuid_version != 7:
            return None
        return Timestamp(self.value.int >> 80)

    def validate(self) -> ValidationResult:
        result = ValidationResult.ok(self.kind)
        if self.uuid_version != 7:
            return result.with_hint(f"Embedded UUID is v{self.uuid_version}, expected v7")
        return result

    def inspect(self) -> InspectionResult:
        ts = self.timestamp()
        components = {
            "prefix": self.prefix,
            "uuid": str(self.value),
            "uuid_version": self.uuid_version,
            "timestamp_ms": None if ts is None else ts.millis,
        }
        return self._inspection(
            components,
            version=f"UUIDv{self.uuid_version}",
            variant=self.prefix or None,
            random_bits=62,
        )
