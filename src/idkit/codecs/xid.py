"""Xid codec.

Layout (12 bytes): 4-byte big-endian seconds, 3-byte machine id, 2-byte
process id, 3-byte counter; rendered as 20 characters of ``0-9a-v``.
"""

from dataclasses import dataclass

from idkit.codecs.base import ParsedId, check_not_future
from idkit.encoding import encode_hex
from idkit.encoding.radix import XID_ALPHABET, decode_xid, encode_xid
from idkit.models import IdKind, InspectionResult, Timestamp, ValidationResult

__all__ = ["ParsedXid", "recognize", "parse"]

_XID_CHARS = frozenset(XID_ALPHABET)


def recognize(text: str) -> bool:
    """Exactly 20 characters of ``0-9a-v``."""
    text = text.strip()
    return len(text) == 20 and set(text) <= _XID_CHARS


def parse(text: str) -> "ParsedXid":
    """Parse a 20-char Xid.

    Raises
    ------
    ParseError
        On wrong length or characters outside ``0-9a-v``.
    """
    trimmed = text.strip()
    return ParsedXid(data=decode_xid(trimmed), input=trimmed)


@dataclass(frozen=True)
class ParsedXid(ParsedId):
    """Parsed Xid."""

    data: bytes
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.XID

    @property
    def timestamp_secs(self) -> int:
        return int.from_bytes(self.data[:4], "big")

    @property
    def machine_id(self) -> bytes:
        return self.data[4:7]

    @property
    def process_id(self) -> int:
        return int.from_bytes(self.data[7:9], "big")

    @property
    def counter(self) -> int:
        return int.from_bytes(self.data[9:], "big")

    def canonical(self) -> str:
        return encode_xid(self.data)

    def as_bytes(self) -> bytes:
        return self.data

    def timestamp(self) -> Timestamp:
        return Timestamp.from_secs(self.timestamp_secs)

    def validate(self) -> ValidationResult:
        return check_not_future(self.kind, self.timestamp())

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_secs": self.timestamp_secs,
            "machine_id_hex": encode_hex(self.machine_id),
            "process_id": self.process_id,
            "counter": self.counter,
        }
        return self._inspection(components, encodings=self._encodings(with_int=False))
