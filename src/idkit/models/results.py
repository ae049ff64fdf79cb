"""Result value types produced by the engine.

All types are immutable dataclasses with ``to_dict`` methods producing
JSON-ready dictionaries (``None`` fields omitted).
"""

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime
from typing import Any

from idkit.models.kinds import IdKind
from idkit.utils import millis_to_datetime, millis_to_iso8601

__all__ = [
    "Timestamp",
    "IdEncodings",
    "InspectionResult",
    "ValidationResult",
    "DetectionCandidate",
    "ComparisonResult",
]


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True, order=True)
class Timestamp:
    """Embedded identifier timestamp, normalized to milliseconds.

    Attributes
    ----------
    millis : int
        Milliseconds since the Unix epoch.
    """

    millis: int

    @classmethod
    def from_secs(cls, secs: int) -> "Timestamp":
        """Build a timestamp from whole seconds."""
        return cls(secs * 1000)

    def to_datetime(self) -> datetime | None:
        """UTC datetime, or None when out of range."""
        return millis_to_datetime(self.millis)

    def to_iso8601(self) -> str:
        """Millisecond-precision ISO-8601 string in UTC."""
        return millis_to_iso8601(self.millis)


@dataclass(frozen=True)
class IdEncodings:
    """Alternative encodings of an identifier's raw bytes.

    Attributes
    ----------
    hex : str
        Lowercase hex.
    base32 : str
        RFC 4648 base32 without padding (empty when not meaningful).
    base58 : str
        Bitcoin-alphabet base58 (empty when not meaningful).
    base64 : str
        Standard base64 with padding.
    int : str | None
        Unsigned big-endian integer, when the value fits in 128 bits.
    """

    hex: str
    base32: str
    base58: str
    base64: str
    int: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return _drop_none(asdict(self))


@dataclass(frozen=True)
class InspectionResult:
    """Full breakdown of a parsed identifier.

    Attributes
    ----------
    id_type : str
        Kind name (e.g. ``"uuidv7"``).
    input : str
        Trimmed input text.
    canonical : str
        Canonical rendering.
    valid : bool
        Structural validity (always True for a successful parse).
    encodings : IdEncodings
        Alternative encodings of the raw bytes.
    timestamp : int | None
        Embedded timestamp in milliseconds.
    timestamp_iso : str | None
        Embedded timestamp as ISO-8601.
    version : str | None
        Format version, when the format has one.
    variant : str | None
        Variant label (UUID variant, Snowflake epoch family, TypeID prefix).
    random_bits : int | None
        Heuristic count of random bits.
    components : dict[str, Any] | None
        Format-specific fields.
    """

    id_type: str
    input: str
    canonical: str
    valid: bool
    encodings: IdEncodings
    timestamp: int | None = None
    timestamp_iso: str | None = None
    version: str | None = None
    variant: str | None = None
    random_bits: int | None = None
    components: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary, omitting unset fields."""
        data = _drop_none(
            {
                "id_type": self.id_type,
                "input": self.input,
                "canonical": self.canonical,
                "valid": self.valid,
                "timestamp": self.timestamp,
                "timestamp_iso": self.timestamp_iso,
                "version": self.version,
                "variant": self.variant,
                "random_bits": self.random_bits,
                "components": self.components,
            }
        )
        data["encodings"] = self.encodings.to_dict()
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Advisory validation outcome.

    Attributes
    ----------
    valid : bool
        Whether the identifier is valid.
    id_type : str | None
        Kind name when known.
    error : str | None
        Reason for invalidity.
    hint : str | None
        Non-fatal advice (deprecation, non-canonical form, ...).
    """

    valid: bool
    id_type: str | None = None
    error: str | None = None
    hint: str | None = None

    @classmethod
    def ok(cls, kind: IdKind | str) -> "ValidationResult":
        """Valid result for *kind*."""
        return cls(valid=True, id_type=str(kind))

    @classmethod
    def invalid(cls, error: str, kind: IdKind | str | None = None) -> "ValidationResult":
        """Invalid result carrying *error*."""
        return cls(valid=False, id_type=None if kind is None else str(kind), error=error)

    def with_hint(self, hint: str) -> "ValidationResult":
        """Copy of this result with *hint* attached."""
        return replace(self, hint=hint)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (``id_type`` always present)."""
        data = _drop_none(asdict(self))
        data.setdefault("id_type", None)
        return data


@dataclass(frozen=True)
class DetectionCandidate:
    """One ranked format guess.

    Attributes
    ----------
    kind : IdKind
        Guessed kind.
    confidence : float
        Heuristic weight in [0, 1]; only meaningful for ranking.
    """

    kind: IdKind
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"type": str(self.kind), "confidence": self.confidence}


@dataclass(frozen=True)
class ComparisonResult:
    """Ordering relations between two identifiers.

    Orders are ``"less"``, ``"equal"`` or ``"greater"`` from the point of
    view of the first identifier.
    """

    id1: str
    id2: str
    type1: str
    type2: str
    binary_order: str
    lexicographic_order: str
    chronological_order: str | None = None
    time_diff_ms: int | None = None
    timestamp1: int | None = None
    timestamp2: int | None = None
    notes: list[str] = field(default_factory=list)

    @property
    def same_type(self) -> bool:
        """Whether both identifiers parsed to the same kind."""
        return self.type1 == self.type2

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset fields."""
        data = _drop_none(asdict(self))
        if not self.notes:
            data.pop("notes", None)
        return data
