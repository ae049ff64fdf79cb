"""Base class shared by every parsed identifier."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from idkit.encoding import (
    EncodingFormat,
    bytes_to_int,
    encode_base32,
    encode_base58,
    encode_base64,
    encode_bytes,
    encode_hex,
)
from idkit.models import IdEncodings, IdKind, InspectionResult, Timestamp, ValidationResult
from idkit.utils import now_ms

__all__ = [
    "ParsedId",
    "FUTURE_TOLERANCE_MS",
    "NUMERIC_ENCODINGS",
    "TEXT_ENCODINGS",
    "check_not_future",
]

# Timestamps further ahead than this make an identifier invalid
FUTURE_TOLERANCE_MS = 86_400_000

# Encodings available to formats whose bytes are a number or opaque text
NUMERIC_ENCODINGS = frozenset(
    {EncodingFormat.HEX, EncodingFormat.BASE64, EncodingFormat.BITS, EncodingFormat.INT}
)
TEXT_ENCODINGS = frozenset({EncodingFormat.HEX, EncodingFormat.BASE64})


def check_not_future(
    kind: IdKind,
    timestamp: Timestamp,
    now: int | None = None,
) -> ValidationResult:
    """Reject timestamps more than one day ahead of *now* (milliseconds)."""
    current = now_ms() if now is None else now
    if timestamp.millis > current + FUTURE_TOLERANCE_MS:
        return ValidationResult.invalid("Timestamp is in the future", kind)
    return ValidationResult.ok(kind)


class ParsedId(ABC):
    """A successfully parsed identifier.

    Subclasses are frozen dataclasses holding the decoded value and the
    trimmed input. They implement ``kind``, ``canonical``, ``as_bytes`` and
    ``inspect``; ``timestamp``, ``validate`` and ``encode`` have defaults.

    Attributes
    ----------
    supported_encodings : frozenset[EncodingFormat] | None
        Non-canonical encodings the format renders. ``None`` means every
        ``EncodingFormat``; anything unsupported falls back to canonical text.
    """

    supported_encodings: ClassVar[frozenset[EncodingFormat] | None] = None

    input: str

    @property
    @abstractmethod
    def kind(self) -> IdKind:
        """Resolved format of this identifier."""

    @abstractmethod
    def canonical(self) -> str:
        """Canonical text rendering."""

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Raw binary payload."""

    @abstractmethod
    def inspect(self) -> InspectionResult:
        """Full breakdown of the identifier."""

    def timestamp(self) -> Timestamp | None:
        """Embedded creation timestamp, if the format has one."""
        return None

    def validate(self) -> ValidationResult:
        """Advisory validation; structurally parsed IDs are valid by default."""
        return ValidationResult.ok(self.kind)

    def encode(self, fmt: EncodingFormat) -> str:
        """Render the identifier in *fmt*."""
        supported = self.supported_encodings
        if fmt is EncodingFormat.CANONICAL or (supported is not None and fmt not in supported):
            return self.canonical()
        return encode_bytes(self.as_bytes(), fmt)

    def _encodings(self, *, all_bases: bool = True, with_int: bool = True) -> IdEncodings:
        data = self.as_bytes()
        value = bytes_to_int(data) if with_int else None
        return IdEncodings(
            hex=encode_hex(data),
            base32=encode_base32(data) if all_bases else "",
            base58=encode_base58(data) if all_bases else "",
            base64=encode_base64(data),
            int=None if value is None else str(value),
        )

    def _inspection(
        self,
        components: dict[str, Any],
        *,
        version: str | None = None,
        variant: str | None = None,
        random_bits: int | None = None,
        encodings: IdEncodings | None = None,
    ) -> InspectionResult:
        ts = self.timestamp()
        return InspectionResult(
            id_type=str(self.kind),
            input=self.input,
            canonical=self.canonical(),
            valid=True,
            encodings=encodings if encodings is not None else self._encodings(),
            timestamp=None if ts is None else ts.millis,
            timestamp_iso=None if ts is None else ts.to_iso8601(),
            version=version,
            variant=variant,
            random_bits=random_bits,
            components=components,
        )
