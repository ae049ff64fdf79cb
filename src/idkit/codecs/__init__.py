"""Per-format identifier codecs.

Each module exposes ``recognize(text)`` (cheap structural check used by the
detector), ``parse(text)`` (strict, raises ``ParseError``) and a frozen
``Parsed*`` value class implementing ``ParsedId``.
"""

from idkit.codecs import (
    cuid,
    cuid2,
    ksuid,
    nanoid,
    objectid,
    snowflake,
    tsid,
    typeid,
    ulid,
    uuid,
    xid,
)
from idkit.codecs.base import ParsedId
from idkit.codecs.cuid import ParsedCuid
from idkit.codecs.cuid2 import ParsedCuid2
from idkit.codecs.ksuid import ParsedKsuid
from idkit.codecs.nanoid import ParsedNanoId
from idkit.codecs.objectid import ParsedObjectId
from idkit.codecs.snowflake import (
    DEFAULT_EPOCH,
    DISCORD_EPOCH,
    TWITTER_EPOCH,
    ParsedSnowflake,
    resolve_epoch,
)
from idkit.codecs.tsid import ParsedTsid
from idkit.codecs.typeid import ParsedTypeId
from idkit.codecs.ulid import ParsedUlid
from idkit.codecs.uuid import ParsedUuid
from idkit.codecs.xid import ParsedXid

__all__ = [
    # Modules
    "uuid",
    "ulid",
    "snowflake",
    "objectid",
    "ksuid",
    "xid",
    "tsid",
    "typeid",
    "cuid",
    "cuid2",
    "nanoid",
    # Parsed values
    "ParsedId",
    "ParsedUuid",
    "ParsedUlid",
    "ParsedSnowflake",
    "ParsedObjectId",
    "ParsedKsuid",
    "ParsedXid",
    "ParsedTsid",
    "ParsedTypeId",
    "ParsedCuid",
    "ParsedCuid2",
    "ParsedNanoId",
    # Snowflake epochs
    "TWITTER_EPOCH",
    "DISCORD_EPOCH",
    "DEFAULT_EPOCH",
    "resolve_epoch",
]
