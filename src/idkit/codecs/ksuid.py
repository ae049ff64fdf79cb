"""KSUID codec.

Layout (20 bytes): 4-byte big-endian seconds since the KSUID epoch
(2014-05-13T16:53:20Z) followed by a 16-byte random payload, rendered as 27
base62 characters.
"""

from dataclasses import dataclass

from idkit.codecs.base import ParsedId
from idkit.encoding import encode_hex
from idkit.encoding.radix import BASE62_ALPHABET, decode_base62, encode_base62
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp

__all__ = ["KSUID_EPOCH", "ParsedKsuid", "recognize", "parse"]

KSUID_EPOCH = 1_400_000_000

_BASE62 = frozenset(BASE62_ALPHABET)


def recognize(text: str) -> bool:
    """27 base62 characters decoding to at most 160 bits."""
    stripped = text.strip()
    if len(stripped) != 27 or not set(stripped) <= _BASE62:
        return False
    try:
        parse(text)
    except ParseError:
        return False
    return True


def parse(text: str) -> "ParsedKsuid":
    """Parse a 27-char base62 KSUID.

    Raises
    ------
    ParseError
        On wrong length, non-base62 characters or a value above 160 bits.
    """
    trimmed = text.strip()
    if len(trimmed) != 27:
        raise ParseError("KSUID must be 27 characters", kind="ksuid")
    value = decode_base62(trimmed, kind="ksuid", max_bits=160)
    return ParsedKsuid(data=value.to_bytes(20, "big"), input=trimmed)


@dataclass(frozen=True)
class ParsedKsuid(ParsedId):
    """Parsed KSUID."""

    data: bytes
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.KSUID

    @property
    def epoch_offset(self) -> int:
        """Seconds since the KSUID epoch."""
        return int.from_bytes(self.data[:4], "big")

    @property
    def payload(self) -> bytes:
        return self.data[4:]

    def canonical(self) -> str:
        return encode_base62(int.from_bytes(self.data, "big"))

    def as_bytes(self) -> bytes:
        return self.data

    def timestamp(self) -> Timestamp:
        return Timestamp.from_secs(self.epoch_offset + KSUID_EPOCH)

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_secs": self.epoch_offset + KSUID_EPOCH,
            "ksuid_epoch_offset": self.epoch_offset,
            "payload_hex": encode_hex(self.payload),
        }
        return self._inspection(
            components,
            random_bits=128,
            encodings=self._encodings(with_int=False),
        )
