"""CUID2 codec. CUID2 values are opaque hashes; only the shape is checked."""

import string
from dataclasses import dataclass

from idkit.codecs.base import TEXT_ENCODINGS, ParsedId
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, ValidationResult

__all__ = ["DEFAULT_LENGTH", "ParsedCuid2", "recognize", "parse"]

DEFAULT_LENGTH = 24

_ALNUM = frozenset(string.ascii_lowercase + string.digits)


def recognize(text: str, length: int | None = None) -> bool:
    """Lowercase letter followed by lowercase alphanumerics.

    Parameters
    ----------
    text : str
        Candidate text.
    length : int | None, optional
        Require exactly this many characters.
    """
    text = text.strip()
    if not text or (length is not None and len(text) != length):
        return False
    return text[0] in string.ascii_lowercase and set(text) <= _ALNUM


def parse(text: str) -> "ParsedCuid2":
    """Parse a CUID2 of any length.

    Raises
    ------
    ParseError
        On empty input, a non-letter first character or characters outside
        ``[a-z0-9]``.
    """
    trimmed = text.strip()
    if not trimmed:
        raise ParseError("Empty CUID2", kind="cuid2")
    if trimmed[0] not in string.ascii_lowercase:
        raise ParseError(
            "CUID2 must start with a lowercase letter", kind="cuid2", char=trimmed[0]
        )
    for ch in trimmed:
        if ch not in _ALNUM:
            raise ParseError(
                "CUID2 must contain only lowercase alphanumeric characters",
                kind="cuid2",
                char=ch,
            )
    return ParsedCuid2(value=trimmed, input=trimmed)


@dataclass(frozen=True)
class ParsedCuid2(ParsedId):
    """Parsed CUID2."""

    supported_encodings = TEXT_ENCODINGS

    value: str
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.CUID2

    def canonical(self) -> str:
        return self.value

    def as_bytes(self) -> bytes:
        return self.value.encode("ascii")

    def validate(self) -> ValidationResult:
        result = ValidationResult.ok(self.kind)
        if len(self.value) != DEFAULT_LENGTH:
            return result.with_hint(
                f"Non-standard length: {len(self.value)} (default is {DEFAULT_LENGTH})"
            )
        return result

    def inspect(self) -> InspectionResult:
        components = {
            "length": len(self.value),
            "note": "CUID2 is opaque, no components extractable",
        }
        return self._inspection(
            components,
            version="2",
            encodings=self._encodings(all_bases=False, with_int=False),
        )
