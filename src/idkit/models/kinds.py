"""Closed enumeration of supported identifier formats.

Each ``IdKind`` carries static metadata (description, timestamp presence,
sortability, bit length) looked up from module-level tables so the enum
members stay plain strings.
"""

from enum import StrEnum

from idkit.errors import UnknownTypeError

__all__ = ["IdKind"]


class IdKind(StrEnum):
    """Identifier format tag.

    Values are the canonical lowercase names used in inspection output and
    accepted as type hints.
    """

    UUID = "uuid"
    UUID_V1 = "uuidv1"
    UUID_V3 = "uuidv3"
    UUID_V4 = "uuidv4"
    UUID_V5 = "uuidv5"
    UUID_V6 = "uuidv6"
    UUID_V7 = "uuidv7"
    UUID_NIL = "uuid-nil"
    UUID_MAX = "uuid-max"
    ULID = "ulid"
    NANOID = "nanoid"
    KSUID = "ksuid"
    SNOWFLAKE = "snowflake"
    OBJECTID = "objectid"
    TYPEID = "typeid"
    XID = "xid"
    CUID = "cuid"
    CUID2 = "cuid2"
    TSID = "tsid"

    @property
    def description(self) -> str:
        """Human-readable description."""
        return _DESCRIPTIONS[self]

    @property
    def has_timestamp(self) -> bool:
        """Whether the format embeds a creation timestamp."""
        return self in _WITH_TIMESTAMP

    @property
    def is_sortable(self) -> bool:
        """Whether lexicographic order of canonical text follows creation order."""
        return self in _SORTABLE

    @property
    def bit_length(self) -> int:
        """Total bit length of the identifier payload."""
        return _BIT_LENGTHS.get(self, 128)

    @property
    def is_uuid(self) -> bool:
        """Whether this kind belongs to the UUID family."""
        return self in _UUID_FAMILY

    @classmethod
    def from_name(cls, name: str) -> "IdKind":
        """Resolve a type name or alias (case-insensitive).

        Parameters
        ----------
        name : str
            Name such as ``"uuid4"``, ``"uuid-v4"``, ``"snow"`` or ``"oid"``.

        Returns
        -------
        IdKind
            Matching kind.

        Raises
        ------
        UnknownTypeError
            If the name matches no kind or alias.
        """
        kind = _ALIASES.get(name.strip().lower())
        if kind is None:
            raise UnknownTypeError(name)
        return kind

    @classmethod
    def all(cls) -> tuple["IdKind", ...]:
        """All kinds in declaration order."""
        return tuple(cls)

    @classmethod
    def generatable(cls) -> tuple["IdKind", ...]:
        """Kinds for which ``create_generator`` returns a generator."""
        return tuple(k for k in cls if k not in _NOT_GENERATABLE)


_DESCRIPTIONS: dict[IdKind, str] = {
    IdKind.UUID: "UUID (any version)",
    IdKind.UUID_V1: "UUID v1 (timestamp + MAC address)",
    IdKind.UUID_V3: "UUID v3 (MD5 namespace hash)",
    IdKind.UUID_V4: "UUID v4 (random)",
    IdKind.UUID_V5: "UUID v5 (SHA-1 namespace hash)",
    IdKind.UUID_V6: "UUID v6 (reordered timestamp)",
    IdKind.UUID_V7: "UUID v7 (Unix timestamp + random)",
    IdKind.UUID_NIL: "Nil UUID (all zeros)",
    IdKind.UUID_MAX: "Max UUID (all ones)",
    IdKind.ULID: "ULID (Universally Unique Lexicographically Sortable Identifier)",
    IdKind.NANOID: "NanoID (compact URL-friendly unique ID)",
    IdKind.KSUID: "KSUID (K-Sortable Unique Identifier)",
    IdKind.SNOWFLAKE: "Snowflake ID (Twitter-style distributed ID)",
    IdKind.OBJECTID: "MongoDB ObjectId",
    IdKind.TYPEID: "TypeID (type-prefixed, sortable ID)",
    IdKind.XID: "Xid (globally unique, sortable ID)",
    IdKind.CUID: "CUID (collision-resistant unique identifier)",
    IdKind.CUID2: "CUID2 (secure collision-resistant ID)",
    IdKind.TSID: "TSID (time-sorted unique identifier)",
}

_UUID_FAMILY = frozenset(
    {
        IdKind.UUID,
        IdKind.UUID_V1,
        IdKind.UUID_V3,
        IdKind.UUID_V4,
        IdKind.UUID_V5,
        IdKind.UUID_V6,
        IdKind.UUID_V7,
        IdKind.UUID_NIL,
        IdKind.UUID_MAX,
    }
)

_WITH_TIMESTAMP = frozenset(
    {
        IdKind.UUID_V1,
        IdKind.UUID_V6,
        IdKind.UUID_V7,
        IdKind.ULID,
        IdKind.KSUID,
        IdKind.SNOWFLAKE,
        IdKind.OBJECTID,
        IdKind.TYPEID,
        IdKind.XID,
        IdKind.CUID,
        IdKind.TSID,
    }
)

_SORTABLE = frozenset(
    {
        IdKind.UUID_V6,
        IdKind.UUID_V7,
        IdKind.ULID,
        IdKind.KSUID,
        IdKind.SNOWFLAKE,
        IdKind.TYPEID,
        IdKind.XID,
        IdKind.TSID,
    }
)

# NanoID: 21 chars * 6 bits, approximate
_BIT_LENGTHS: dict[IdKind, int] = {
    IdKind.NANOID: 126,
    IdKind.KSUID: 160,
    IdKind.SNOWFLAKE: 64,
    IdKind.OBJECTID: 96,
    IdKind.XID: 96,
    IdKind.TSID: 64,
}

_NOT_GENERATABLE = frozenset({IdKind.UUID_V3, IdKind.UUID_V5})

_ALIASES: dict[str, IdKind] = {
    "uuid": IdKind.UUID,
    "uuidv1": IdKind.UUID_V1,
    "uuid-v1": IdKind.UUID_V1,
    "uuid1": IdKind.UUID_V1,
    "uuidv3": IdKind.UUID_V3,
    "uuid-v3": IdKind.UUID_V3,
    "uuid3": IdKind.UUID_V3,
    "uuidv4": IdKind.UUID_V4,
    "uuid-v4": IdKind.UUID_V4,
    "uuid4": IdKind.UUID_V4,
    "uuidv5": IdKind.UUID_V5,
    "uuid-v5": IdKind.UUID_V5,
    "uuid5": IdKind.UUID_V5,
    "uuidv6": IdKind.UUID_V6,
    "uuid-v6": IdKind.UUID_V6,
    "uuid6": IdKind.UUID_V6,
    "uuidv7": IdKind.UUID_V7,
    "uuid-v7": IdKind.UUID_V7,
    "uuid7": IdKind.UUID_V7,
    "uuid-nil": IdKind.UUID_NIL,
    "uuidnil": IdKind.UUID_NIL,
    "nil": IdKind.UUID_NIL,
    "uuid-max": IdKind.UUID_MAX,
    "uuidmax": IdKind.UUID_MAX,
    "max": IdKind.UUID_MAX,
    "ulid": IdKind.ULID,
    "nanoid": IdKind.NANOID,
    "nano": IdKind.NANOID,
    "ksuid": IdKind.KSUID,
    "snowflake": IdKind.SNOWFLAKE,
    "snow": IdKind.SNOWFLAKE,
    "objectid": IdKind.OBJECTID,
    "oid": IdKind.OBJECTID,
    "mongoid": IdKind.OBJECTID,
    "typeid": IdKind.TYPEID,
    "xid": IdKind.XID,
    "cuid": IdKind.CUID,
    "cuid2": IdKind.CUID2,
    "tsid": IdKind.TSID,
}
