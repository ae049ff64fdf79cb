"""NanoID codec.

NanoIDs may use any alphabet, so parsing only rejects empty input; the
detector relies on the default 21-character URL-safe shape instead.
"""

import string
from dataclasses import dataclass

from idkit.codecs.base import TEXT_ENCODINGS, ParsedId
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, ValidationResult

__all__ = ["DEFAULT_ALPHABET", "DEFAULT_LENGTH", "ParsedNanoId", "recognize", "parse"]

DEFAULT_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz-"
DEFAULT_LENGTH = 21

_URL_SAFE = frozenset(string.ascii_letters + string.digits + "_-")


def recognize(text: str) -> bool:
    """Default NanoID shape: 21 URL-safe characters."""
    text = text.strip()
    return len(text) == DEFAULT_LENGTH and set(text) <= _URL_SAFE


def parse(text: str) -> "ParsedNanoId":
    """Accept any non-empty text as a NanoID.

    Raises
    ------
    ParseError
        On empty input.
    """
    trimmed = text.strip()
    if not trimmed:
        raise ParseError("Empty NanoID", kind="nanoid")
    return ParsedNanoId(value=trimmed, input=trimmed)


@dataclass(frozen=True)
class ParsedNanoId(ParsedId):
    """Parsed NanoID."""

    supported_encodings = TEXT_ENCODINGS

    value: str
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.NANOID

    def canonical(self) -> str:
        return self.value

    def as_bytes(self) -> bytes:
        return self.value.encode("utf-8")

    def validate(self) -> ValidationResult:
        result = ValidationResult.ok(self.kind)
        if not recognize(self.value):
            return result.with_hint("Non-standard length or alphabet")
        return result

    def inspect(self) -> InspectionResult:
        components = {"length": len(self.value), "charset": "URL-safe (default)"}
        # Approximation: 6 bits per character of the default alphabet
        return self._inspection(
            components,
            random_bits=len(self.value) * 6,
            encodings=self._encodings(all_bases=False, with_int=False),
        )
