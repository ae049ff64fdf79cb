"""CUID (v1) codec.

25 lowercase base36 characters: ``c``, then 8 timestamp, 4 counter,
4 fingerprint and 8 random characters. CUID v1 is deprecated upstream.
"""

import string
from dataclasses import dataclass

from idkit.codecs.base import TEXT_ENCODINGS, ParsedId
from idkit.encoding.radix import decode_base36
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp, ValidationResult

__all__ = ["ParsedCuid", "recognize", "parse"]

_ALNUM = frozenset(string.ascii_lowercase + string.digits)


def recognize(text: str) -> bool:
    """25 lowercase alphanumerics starting with ``c``."""
    text = text.strip()
    return len(text) == 25 and text[0] == "c" and set(text) <= _ALNUM


def parse(text: str) -> "ParsedCuid":
    """Parse a CUID.

    Raises
    ------
    ParseError
        On wrong length, a missing ``c`` prefix or characters outside
        ``[a-z0-9]``.
    """
    trimmed = text.strip()
    if len(trimmed) != 25:
        raise ParseError("CUID must be 25 characters", kind="cuid")
    if not trimmed.startswith("c"):
        raise ParseError("CUID must start with 'c'", kind="cuid", char=trimmed[0])
    for ch in trimmed:
        if ch not in _ALNUM:
            raise ParseError(
                "CUID must contain only lowercase alphanumeric characters",
                kind="cuid",
                char=ch,
            )
    return ParsedCuid(value=trimmed, input=trimmed)


@dataclass(frozen=True)
class ParsedCuid(ParsedId):
    """Parsed CUID."""

    supported_encodings = TEXT_ENCODINGS

    value: str
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.CUID

    def canonical(self) -> str:
        return self.value

    def as_bytes(self) -> bytes:
        return self.value.encode("ascii")

    def timestamp(self) -> Timestamp:
        return Timestamp(decode_base36(self.value[1:9], kind="cuid"))

    def validate(self) -> ValidationResult:
        return ValidationResult.ok(self.kind).with_hint("CUID v1 is deprecated; consider CUID2")

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_ms": self.timestamp().millis,
            "counter": self.value[9:13],
            "fingerprint": self.value[13:17],
            "random": self.value[17:],
        }
        return self._inspection(
            components,
            version="1",
            encodings=self._encodings(all_bases=False, with_int=False),
        )
