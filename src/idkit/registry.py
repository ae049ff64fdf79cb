"""Registry-based dispatch from identifier kind to codec.

New formats are added by extending ``CODEC_REGISTRY``; ``parse_id`` needs no
changes.
"""

from collections.abc import Callable
from dataclasses import dataclass

from idkit.audit import AuditLogger
from idkit.codecs import (
    ParsedId,
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
from idkit.detection import detect_id_type
from idkit.errors import DetectionFailedError, EncodingError, ParseError, UnknownTypeError
from idkit.models import IdKind

__all__ = ["Codec", "CODEC_REGISTRY", "get_codec", "parse_id", "resolve_kind"]


@dataclass(frozen=True)
class Codec:
    """Entry points of one format.

    Attributes
    ----------
    kind : IdKind
        Format served by the codec.
    recognize : Callable[[str], bool]
        Cheap structural predicate.
    parse : Callable[[str], ParsedId]
        Strict parser raising ``ParseError``.
    """

    kind: IdKind
    recognize: Callable[[str], bool]
    parse: Callable[[str], ParsedId]


_UUID_CODEC = Codec(IdKind.UUID, uuid.recognize, uuid.parse)

# kind → codec; every UUID kind shares one codec
CODEC_REGISTRY: dict[IdKind, Codec] = {
    **{kind: _UUID_CODEC for kind in IdKind if kind.is_uuid},
    IdKind.ULID: Codec(IdKind.ULID, ulid.recognize, ulid.parse),
    IdKind.NANOID: Codec(IdKind.NANOID, nanoid.recognize, nanoid.parse),
    IdKind.KSUID: Codec(IdKind.KSUID, ksuid.recognize, ksuid.parse),
    IdKind.SNOWFLAKE: Codec(IdKind.SNOWFLAKE, snowflake.recognize, snowflake.parse),
    IdKind.OBJECTID: Codec(IdKind.OBJECTID, objectid.recognize, objectid.parse),
    IdKind.TYPEID: Codec(IdKind.TYPEID, typeid.recognize, typeid.parse),
    IdKind.XID: Codec(IdKind.XID, xid.recognize, xid.parse),
    IdKind.CUID: Codec(IdKind.CUID, cuid.recognize, cuid.parse),
    IdKind.CUID2: Codec(IdKind.CUID2, cuid2.recognize, cuid2.parse),
    IdKind.TSID: Codec(IdKind.TSID, tsid.recognize, tsid.parse),
}


def resolve_kind(hint: IdKind | str) -> IdKind:
    """Accept an ``IdKind`` or any name/alias.

    Raises
    ------
    UnknownTypeError
        If the name is not recognized.
    """
    if isinstance(hint, IdKind):
        return hint
    return IdKind.from_name(hint)


def get_codec(kind: IdKind | str) -> Codec:
    """Look up the codec serving *kind*.

    Raises
    ------
    UnknownTypeError
        If *kind* is unknown or has no codec registered.
    """
    resolved = resolve_kind(kind)
    codec = CODEC_REGISTRY.get(resolved)
    if codec is None:
        raise UnknownTypeError(str(kind))
    return codec


def parse_id(
    text: str,
    hint: IdKind | str | None = None,
    logger: AuditLogger | None = None,
) -> ParsedId:
    """Parse *text* into a typed identifier.

    Parameters
    ----------
    text : str
        Identifier text.
    hint : IdKind | str | None, optional
        Skip detection and use this format's codec only. Its errors
        propagate unchanged.
    logger : AuditLogger | None, optional
        Receives ``id_parsed``, ``candidate_rejected`` and
        ``detection_failed`` events.

    Returns
    -------
    ParsedId
        Parsed identifier.

    Raises
    ------
    ParseError
        If a hinted codec rejects the text.
    UnknownTypeError
        If the hint names no known format.
    DetectionFailedError
        If no detected candidate parses.
    """
    if hint is not None:
        parsed = get_codec(hint).parse(text)
        if logger is not None:
            logger.id_parsed(parsed.input, str(parsed.kind), parsed.canonical())
        return parsed

    try:
        candidates = detect_id_type(text)
    except DetectionFailedError:
        if logger is not None:
            logger.detection_failed(text.strip(), [])
        raise

    for candidate in candidates:
        try:
            parsed = CODEC_REGISTRY[candidate.kind].parse(text)
        except (ParseError, EncodingError) as e:
            if logger is not None:
                logger.candidate_rejected(text.strip(), str(candidate.kind), str(e))
            continue
        if logger is not None:
            logger.id_parsed(parsed.input, str(parsed.kind), parsed.canonical())
        return parsed

    if logger is not None:
        logger.detection_failed(text.strip(), [str(c.kind) for c in candidates])
    raise DetectionFailedError(text.strip())
