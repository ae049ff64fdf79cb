"""TSID codec.

A TSID is a 64-bit value, 42 bits of Unix milliseconds followed by 22 random
bits, rendered as 13 uppercase Crockford base32 characters.
"""

from dataclasses import dataclass

from idkit.codecs.base import NUMERIC_ENCODINGS, ParsedId, check_not_future
from idkit.encoding.radix import decode_crockford, encode_crockford
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp, ValidationResult

__all__ = ["ParsedTsid", "recognize", "parse"]


def recognize(text: str) -> bool:
    """13 Crockford characters fitting in 64 bits."""
    try:
        parse(text)
    except ParseError:
        return False
    return True


def parse(text: str) -> "ParsedTsid":
    """Parse a 13-char TSID (case-insensitive, ``O``/``I``/``L`` folded).

    Raises
    ------
    ParseError
        On wrong length, invalid characters or a value above 64 bits.
    """
    trimmed = text.strip()
    if len(trimmed) != 13:
        raise ParseError("TSID must be 13 characters", kind="tsid")
    value = decode_crockford(trimmed, kind="tsid", max_bits=64)
    return ParsedTsid(value=value, input=trimmed)


@dataclass(frozen=True)
class ParsedTsid(ParsedId):
    """Parsed TSID."""

    supported_encodings = NUMERIC_ENCODINGS

    value: int
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.TSID

    @property
    def random_part(self) -> int:
        return self.value & 0x3FFFFF

    def canonical(self) -> str:
        return encode_crockford(self.value, 13)

    def as_bytes(self) -> bytes:
        return self.value.to_bytes(8, "big")

    def timestamp(self) -> Timestamp:
        return Timestamp(self.value >> 22)

    def validate(self) -> ValidationResult:
        return check_not_future(self.kind, self.timestamp())

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_ms": self.timestamp().millis,
            "random_bits": self.random_part,
            "numeric_value": self.value,
        }
        return self._inspection(
            components,
            random_bits=22,
            encodings=self._encodings(all_bases=False),
        )
