"""MongoDB ObjectId codec.

Layout (12 bytes): 4-byte big-endian seconds, 5-byte per-process random
value, 3-byte big-endian counter.
"""

import string
from dataclasses import dataclass

from idkit.codecs.base import ParsedId, check_not_future
from idkit.encoding import encode_hex
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp, ValidationResult

__all__ = ["ParsedObjectId", "recognize", "parse"]

_HEX = frozenset(string.hexdigits)


def recognize(text: str) -> bool:
    """Exactly 24 hex digits."""
    text = text.strip()
    return len(text) == 24 and set(text) <= _HEX


def parse(text: str) -> "ParsedObjectId":
    """Parse a 24-hex-digit ObjectId (either case).

    Raises
    ------
    ParseError
        On wrong length or non-hex characters.
    """
    trimmed = text.strip()
    if len(trimmed) != 24:
        raise ParseError("ObjectId must be 24 hex characters", kind="objectid")
    for ch in trimmed:
        if ch not in _HEX:
            raise ParseError(
                "ObjectId must contain only hex characters", kind="objectid", char=ch
            )
    return ParsedObjectId(data=bytes.fromhex(trimmed), input=trimmed)


@dataclass(frozen=True)
class ParsedObjectId(ParsedId):
    """Parsed ObjectId."""

    data: bytes
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.OBJECTID

    @property
    def timestamp_secs(self) -> int:
        return int.from_bytes(self.data[:4], "big")

    @property
    def random_bytes(self) -> bytes:
        return self.data[4:9]

    @property
    def counter(self) -> int:
        return int.from_bytes(self.data[9:], "big")

    def canonical(self) -> str:
        return self.data.hex()

    def as_bytes(self) -> bytes:
        return self.data

    def timestamp(self) -> Timestamp:
        return Timestamp.from_secs(self.timestamp_secs)

    def validate(self) -> ValidationResult:
        return check_not_future(self.kind, self.timestamp())

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_secs": self.timestamp_secs,
            "random_hex": encode_hex(self.random_bytes),
            "counter": self.counter,
        }
        return self._inspection(
            components,
            random_bits=40,
            encodings=self._encodings(with_int=False),
        )
