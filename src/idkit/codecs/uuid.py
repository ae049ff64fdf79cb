"""UUID codec (RFC 9562 family, nil and max included)."""

import re
import uuid as _uuid
from dataclasses import dataclass

from idkit.codecs.base import ParsedId
from idkit.errors import ParseError
from idkit.models import IdKind, InspectionResult, Timestamp

__all__ = ["ParsedUuid", "recognize", "parse", "version_nibble", "variant_label"]

_DASHED = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
_PLAIN = re.compile(r"[0-9a-fA-F]{32}")
_URN_PREFIX = "urn:uuid:"

# 100-ns ticks between 1582-10-15 and 1970-01-01
_GREGORIAN_OFFSET = 0x01B21DD213814000
_MAX_INT = (1 << 128) - 1

_VERSION_KINDS = {
    1: IdKind.UUID_V1,
    3: IdKind.UUID_V3,
    4: IdKind.UUID_V4,
    5: IdKind.UUID_V5,
    6: IdKind.UUID_V6,
    7: IdKind.UUID_V7,
}

_VARIANT_LABELS = {
    _uuid.RESERVED_NCS: "NCS",
    _uuid.RFC_4122: "RFC4122",
    _uuid.RESERVED_MICROSOFT: "Microsoft",
    _uuid.RESERVED_FUTURE: "Future",
}

_RANDOM_BITS = {4: 122, 7: 62, 1: 14, 6: 14}


def version_nibble(value: int) -> int:
    """Version field of a 128-bit UUID value, whatever its variant."""
    return (value >> 76) & 0xF


def variant_label(value: _uuid.UUID) -> str:
    """Variant name as reported in inspection output."""
    return _VARIANT_LABELS.get(value.variant, "Unknown")


def recognize(text: str) -> bool:
    """Dashed 8-4-4-4-12 hex, or 32 bare hex digits."""
    text = text.strip()
    return bool(_DASHED.fullmatch(text) or _PLAIN.fullmatch(text))


def parse(text: str) -> "ParsedUuid":
    """Parse a UUID in dashed or dashless form, any case.

    Braced (``{...}``) and URN (``urn:uuid:...``) wrappers are also accepted.

    Raises
    ------
    ParseError
        If the text is not 32 hex digits once wrappers and dashes are removed.
    """
    trimmed = text.strip()
    body = trimmed
    if body[:9].lower() == _URN_PREFIX:
        body = body[9:]
    elif body.startswith("{") and body.endswith("}"):
        body = body[1:-1]
    digits = body.replace("-", "")
    if not _PLAIN.fullmatch(digits):
        raise ParseError(f"Invalid UUID: {trimmed}", kind="uuid")
    return ParsedUuid(value=_uuid.UUID(hex=digits), input=trimmed)


@dataclass(frozen=True)
class ParsedUuid(ParsedId):
    """Parsed UUID.

    Attributes
    ----------
    value : uuid.UUID
        Decoded UUID.
    input : str
        Trimmed input text.
    """

    value: _uuid.UUID
    input: str

    @property
    def version(self) -> int:
        """Version number; 0 for nil and 255 for max."""
        if self.value.int == 0:
            return 0
        if self.value.int == _MAX_INT:
            return 255
        return version_nibble(self.value.int)

    @property
    def kind(self) -> IdKind:
        version = self.version
        if version == 0:
            return IdKind.UUID_NIL
        if version == 255:
            return IdKind.UUID_MAX
        return _VERSION_KINDS.get(version, IdKind.UUID)

    def canonical(self) -> str:
        return str(self.value)

    def as_bytes(self) -> bytes:
        return self.value.bytes

    def timestamp(self) -> Timestamp | None:
        n = self.value.int
        version = self.version
        if version == 7:
            return Timestamp(n >> 80)
        if version == 1:
            ticks = ((n >> 64) & 0x0FFF) << 48 | ((n >> 80) & 0xFFFF) << 32 | (n >> 96)
        elif version == 6:
            ticks = (n >> 96) << 28 | ((n >> 80) & 0xFFFF) << 12 | ((n >> 64) & 0x0FFF)
        else:
            return None
        return Timestamp((ticks - _GREGORIAN_OFFSET) // 10_000)

    def inspect(self) -> InspectionResult:
        version = self.version
        components: dict = {"version": version, "variant": variant_label(self.value)}
        ts = self.timestamp()
        if ts is not None:
            components["timestamp_ms"] = ts.millis
        return self._inspection(
            components,
            version=str(version),
            variant=variant_label(self.value),
            random_bits=_RANDOM_BITS.get(version),
        )
