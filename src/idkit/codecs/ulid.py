"""ULID codec backed by ``python-ulid``."""

from dataclasses import dataclass

from ulid import ULID

from idkit.codecs.base import ParsedId
from idkit.encoding import encode_hex
from idkit.encoding.radix import CROCKFORD_ALPHABET
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp

__all__ = ["ParsedUlid", "recognize", "parse"]

_CROCKFORD = frozenset(CROCKFORD_ALPHABET)


def recognize(text: str) -> bool:
    """26 Crockford characters (any case) with a leading ``0``-``7``."""
    text = text.strip().upper()
    return len(text) == 26 and text[0] in "01234567" and set(text) <= _CROCKFORD


def parse(text: str) -> "ParsedUlid":
    """Parse a ULID.

    Raises
    ------
    ParseError
        On wrong length, characters outside Crockford base32, or a leading
        character above ``7`` (value exceeds 128 bits).
    """
    trimmed = text.strip()
    upper = trimmed.upper()
    if len(upper) != 26:
        raise ParseError("ULID must be 26 characters", kind="ulid")
    for ch in upper:
        if ch not in _CROCKFORD:
            raise ParseError(f"Invalid ULID character: '{ch}'", kind="ulid", char=ch)
    if upper[0] not in "01234567":
        raise ParseError("ULID overflows 128 bits", kind="ulid", char=trimmed[0])
    try:
        value = ULID.from_str(upper)
    except ValueError as e:
        raise ParseError(f"Invalid ULID: {e}", kind="ulid") from e
    return ParsedUlid(value=value, input=trimmed)


@dataclass(frozen=True)
class ParsedUlid(ParsedId):
    """Parsed ULID: 48-bit millisecond timestamp followed by 80 random bits."""

    value: ULID
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.ULID

    def canonical(self) -> str:
        return str(self.value)

    def as_bytes(self) -> bytes:
        return self.value.bytes

    def timestamp(self) -> Timestamp:
        return Timestamp(self.value.milliseconds)

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_ms": self.timestamp().millis,
            "random_hex": encode_hex(self.as_bytes()[6:]),
        }
        return self._inspection(components, random_bits=80)
