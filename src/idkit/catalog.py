"""Static per-format reference information (``idkit info``)."""

from dataclasses import dataclass, field
from typing import Any

from idkit.generate import UuidGenerator, create_generator
from idkit.models import IdKind

__all__ = ["KindInfo", "describe_kind", "list_kinds"]

_RFC4122 = "https://datatracker.ietf.org/doc/html/rfc4122"
_RFC9562 = "https://datatracker.ietf.org/doc/html/rfc9562"

REFERENCE_URLS: dict[IdKind, str] = {
    IdKind.UUID: _RFC4122,
    IdKind.UUID_V1: _RFC4122,
    IdKind.UUID_V3: _RFC4122,
    IdKind.UUID_V4: _RFC4122,
    IdKind.UUID_V5: _RFC4122,
    IdKind.UUID_V6: _RFC9562,
    IdKind.UUID_V7: _RFC9562,
    IdKind.ULID: "https://github.com/ulid/spec",
    IdKind.SNOWFLAKE: "https://en.wikipedia.org/wiki/Snowflake_ID",
    IdKind.NANOID: "https://github.com/ai/nanoid",
    IdKind.KSUID: "https://github.com/segmentio/ksuid",
    IdKind.OBJECTID: "https://www.mongodb.com/docs/manual/reference/method/ObjectId/",
    IdKind.TYPEID: "https://github.com/jetify-com/typeid",
    IdKind.XID: "https://github.com/rs/xid",
    IdKind.CUID: "https://github.com/paralleldrive/cuid",
    IdKind.CUID2: "https://github.com/paralleldrive/cuid2",
    IdKind.TSID: "https://github.com/f4b6a3/tsid-creator",
}

NOTES: dict[IdKind, list[str]] = {
    IdKind.UUID_V4: [
        "Most commonly used UUID version",
        "122 bits of randomness",
        "Collision probability extremely low",
    ],
    IdKind.UUID_V7: [
        "Recommended for new applications needing sortable UUIDs",
        "Unix timestamp in milliseconds",
        "Compatible with UUID infrastructure",
    ],
    IdKind.ULID: [
        "Case-insensitive (Crockford Base32)",
        "Timestamp prefix gives millisecond sort order",
        "Compatible with UUID (128-bit)",
    ],
    IdKind.SNOWFLAKE: [
        "Originally designed by Twitter",
        "Requires coordination (machine/datacenter IDs)",
        "Epoch can be customized",
    ],
    IdKind.NANOID: [
        "Customizable alphabet and length",
        "URL-safe by default",
        "No timestamp component",
    ],
    IdKind.KSUID: [
        "K-Sortable: lexicographic order matches time order",
        "160-bit: 32-bit timestamp + 128-bit random payload",
        "Custom epoch: 2014-05-13T16:53:20Z",
    ],
    IdKind.OBJECTID: [
        "Used natively by MongoDB",
        "96-bit: 4-byte timestamp + 5-byte random + 3-byte counter",
        "Timestamp has second-level precision",
    ],
    IdKind.TYPEID: [
        "Type-safe: prefix encodes the entity type",
        "Based on UUIDv7 (timestamp-sortable)",
        "Pass a prefix option to set the type prefix",
    ],
    IdKind.XID: [
        "Compact: 20-character base32hex encoding",
        "96-bit: 4-byte timestamp + 3-byte machine + 2-byte PID + 3-byte counter",
        "Globally unique without coordination",
    ],
    IdKind.CUID: [
        "CUID v1 is deprecated; consider CUID2",
        "25 characters, starts with 'c'",
        "Contains timestamp, counter, fingerprint, and random data",
    ],
    IdKind.CUID2: [
        "Successor to CUID v1 with better security",
        "Opaque: no extractable components",
        "SHA-256 based with multiple entropy sources",
    ],
    IdKind.TSID: [
        "64-bit: fits in a database bigint column",
        "42-bit timestamp (milliseconds) + 22-bit random",
        "Crockford Base32 encoded (13 characters)",
    ],
}


@dataclass(frozen=True)
class KindInfo:
    """Reference card for one identifier format.

    Attributes
    ----------
    name : str
        Canonical kind name.
    description : str
        Human-readable description.
    has_timestamp : bool
        Whether a creation time is embedded.
    is_sortable : bool
        Whether text order follows creation order.
    bit_length : int
        Payload size in bits.
    example : str | None
        Freshly generated example, when the format has a generator.
    spec_url : str | None
        Reference document.
    notes : list[str]
        Short remarks.
    """

    name: str
    description: str
    has_timestamp: bool
    is_sortable: bool
    bit_length: int
    example: str | None = None
    spec_url: str | None = None
    notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset fields and empty notes."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "has_timestamp": self.has_timestamp,
            "is_sortable": self.is_sortable,
            "bit_length": self.bit_length,
        }
        if self.example is not None:
            data["example"] = self.example
        if self.spec_url is not None:
            data["spec_url"] = self.spec_url
        if self.notes:
            data["notes"] = list(self.notes)
        return data


def _example(kind: IdKind) -> str:
    if kind is IdKind.UUID_V3:
        return UuidGenerator(3).generate()
    if kind is IdKind.UUID_V5:
        return UuidGenerator(5).generate()
    return create_generator(kind).generate()


def describe_kind(kind: IdKind | str) -> KindInfo:
    """Reference card for *kind*, including a generated example.

    Raises
    ------
    UnknownTypeError
        If *kind* is not a known format name.
    """
    resolved = kind if isinstance(kind, IdKind) else IdKind.from_name(kind)
    return KindInfo(
        name=str(resolved),
        description=resolved.description,
        has_timestamp=resolved.has_timestamp,
        is_sortable=resolved.is_sortable,
        bit_length=resolved.bit_length,
        example=_example(resolved),
        spec_url=REFERENCE_URLS.get(resolved),
        notes=list(NOTES.get(resolved, [])),
    )


def list_kinds() -> list[KindInfo]:
    """Summary cards (no examples) for every kind in declaration order."""
    return [
        KindInfo(
            name=str(kind),
            description=kind.description,
            has_timestamp=kind.has_timestamp,
            is_sortable=kind.is_sortable,
            bit_length=kind.bit_length,
        )
        for kind in IdKind.all()
    ]
