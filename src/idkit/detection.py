"""Format detection heuristics.

Guesses an identifier's format from its surface syntax. Every rule whose
structural check passes contributes a candidate; candidates are ranked by
confidence with ties resolved by evaluation order.
"""

import string

from idkit.codecs import cuid, cuid2, ksuid, nanoid, objectid, snowflake, tsid, typeid, ulid, xid
from idkit.errors import DetectionFailedError
from idkit.models import DetectionCandidate, IdKind

__all__ = ["detect_id_type", "detect_uuid_kind", "best_guess"]

_HEX = frozenset(string.hexdigits)

_UUID_VERSIONS = {
    "1": IdKind.UUID_V1,
    "3": IdKind.UUID_V3,
    "4": IdKind.UUID_V4,
    "5": IdKind.UUID_V5,
    "6": IdKind.UUID_V6,
    "7": IdKind.UUID_V7,
}


def _is_dashed_uuid(text: str) -> bool:
    parts = text.split("-")
    return len(text) == 36 and [len(p) for p in parts] == [8, 4, 4, 4, 12] and set(
        text.replace("-", "")
    ) <= _HEX


def detect_uuid_kind(text: str) -> IdKind | None:
    """Resolve the UUID kind of a dashed UUID from its version and variant.

    Parameters
    ----------
    text : str
        Dashed UUID text.

    Returns
    -------
    IdKind | None
        Nil, max or a versioned kind; None when the version is not one of
        1, 3-7 or the variant is not RFC 4122.
    """
    digits = text.replace("-", "").lower()
    if set(digits) == {"0"}:
        return IdKind.UUID_NIL
    if set(digits) == {"f"}:
        return IdKind.UUID_MAX
    if digits[16] not in "89ab":
        return None
    return _UUID_VERSIONS.get(digits[12])


def detect_id_type(text: str) -> list[DetectionCandidate]:
    """Rank plausible formats for *text*.

    Parameters
    ----------
    text : str
        Identifier text; surrounding whitespace is ignored.

    Returns
    -------
    list[DetectionCandidate]
        Candidates sorted by descending confidence (stable).

    Raises
    ------
    DetectionFailedError
        If no format matches.

    Examples
    --------
    >>> detect_id_type("01ARZ3NDEKTSV4RRFFQ69G5FAV")[0].kind
    <IdKind.ULID: 'ulid'>
    """
    text = text.strip()
    results: list[DetectionCandidate] = []

    if _is_dashed_uuid(text):
        kind = detect_uuid_kind(text)
        if kind is None:
            results.append(DetectionCandidate(IdKind.UUID, 0.9))
        else:
            results.append(DetectionCandidate(kind, 1.0))

    if len(text) == 32 and set(text) <= _HEX:
        results.append(DetectionCandidate(IdKind.UUID, 0.7))

    is_ulid = ulid.recognize(text)
    if is_ulid:
        results.append(DetectionCandidate(IdKind.ULID, 0.95))

    if typeid.recognize(text, require_prefix=True) or (
        not is_ulid and typeid.recognize(text)
    ):
        results.append(DetectionCandidate(IdKind.TYPEID, 0.95))

    if objectid.recognize(text):
        results.append(DetectionCandidate(IdKind.OBJECTID, 0.85))

    if ksuid.recognize(text):
        results.append(DetectionCandidate(IdKind.KSUID, 0.8))

    if xid.recognize(text):
        results.append(DetectionCandidate(IdKind.XID, 0.8))

    if snowflake.recognize(text):
        results.append(DetectionCandidate(IdKind.SNOWFLAKE, 0.8))

    if tsid.recognize(text):
        results.append(DetectionCandidate(IdKind.TSID, 0.75))

    if cuid.recognize(text):
        results.append(DetectionCandidate(IdKind.CUID, 0.75))

    if nanoid.recognize(text):
        results.append(DetectionCandidate(IdKind.NANOID, 0.6))

    if cuid2.recognize(text, length=cuid2.DEFAULT_LENGTH):
        results.append(DetectionCandidate(IdKind.CUID2, 0.4))

    if not results:
        raise DetectionFailedError(text)

    # sorted() is stable
    return sorted(results, key=lambda c: c.confidence, reverse=True)


def best_guess(text: str) -> IdKind:
    """Highest-ranked kind for *text*.

    Raises
    ------
    DetectionFailedError
        If no format matches.
    """
    return detect_id_type(text)[0].kind
