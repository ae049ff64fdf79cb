"""Public API for inspecting, validating, converting and generating IDs.

This module provides the main public API for idkit, enabling:
- Inspecting an identifier into its embedded fields
- Advisory validation with hints
- Re-encoding into other bases
- Ordering two identifiers
- Generating identifiers of any supported format
"""

import string
from dataclasses import replace
from typing import Any

from idkit.audit import AuditLogger
from idkit.catalog import describe_kind
from idkit.codecs import ParsedId, ParsedSnowflake, resolve_epoch
from idkit.encoding import EncodingFormat
from idkit.errors import IdkitError, InvalidArgumentError
from idkit.generate import create_generator
from idkit.models import ComparisonResult, IdKind, InspectionResult, ValidationResult
from idkit.registry import parse_id, resolve_kind
from idkit.utils import format_duration_ms

__all__ = [
    "inspect_id",
    "validate_id",
    "validate_ids",
    "convert_id",
    "compare_ids",
    "generate_ids",
    "describe_kind",
]

_HEX = frozenset(string.hexdigits)


def _with_epoch(parsed: ParsedId, epoch: str | int | None) -> ParsedId:
    if epoch is None or not isinstance(parsed, ParsedSnowflake):
        return parsed
    return replace(parsed, epoch=resolve_epoch(epoch))


def inspect_id(
    text: str,
    hint: IdKind | str | None = None,
    *,
    epoch: str | int | None = None,
    logger: AuditLogger | None = None,
) -> InspectionResult:
    """Parse *text* and break it down into its embedded fields.

    Parameters
    ----------
    text : str
        Identifier text.
    hint : IdKind | str | None, optional
        Format to parse as; detected when omitted.
    epoch : str | int | None, optional
        Snowflake epoch (``"twitter"``, ``"discord"`` or milliseconds) used
        to interpret the timestamp field. Ignored for other formats.
    logger : AuditLogger | None, optional
        Receives parse events.

    Returns
    -------
    InspectionResult
        Full breakdown.

    Raises
    ------
    ParseError
        If a hinted codec rejects the text.
    DetectionFailedError
        If no format matches.

    Examples
    --------
    >>> result = inspect_id("01ARZ3NDEKTSV4RRFFQ69G5FAV")
    >>> result.id_type, result.timestamp
    ('ulid', 1469918176385)
    """
    parsed = _with_epoch(parse_id(text, hint, logger=logger), epoch)
    return parsed.inspect()


def _parse_failure_hint(text: str) -> str | None:
    if len(text) == 32 and set(text) <= _HEX:
        return "Looks like UUID without dashes. Try adding dashes."
    if len(text) == 36 and "-" in text:
        return "Check for invalid characters in UUID."
    return None


def validate_id(
    text: str,
    hint: IdKind | str | None = None,
    strict: bool = False,
    *,
    epoch: str | int | None = None,
) -> ValidationResult:
    """Validate *text*, never raising for malformed identifiers.

    Parameters
    ----------
    text : str
        Identifier text.
    hint : IdKind | str | None, optional
        Format to validate against; detected when omitted.
    strict : bool, optional
        Also require the input to be in canonical form.
    epoch : str | int | None, optional
        Snowflake epoch used for the future-timestamp check. Ignored for
        other formats.

    Returns
    -------
    ValidationResult
        Parse failures become invalid results, with a hint for
        dash-less or corrupted UUIDs.

    Raises
    ------
    UnknownTypeError
        If *hint* names no known format.
    InvalidArgumentError
        If *epoch* is not a known epoch name or millisecond value.
    """
    if hint is not None:
        hint = resolve_kind(hint)
    if epoch is not None:
        epoch = resolve_epoch(epoch)
    trimmed = text.strip()
    try:
        parsed = _with_epoch(parse_id(trimmed, hint), epoch)
    except IdkitError as e:
        result = ValidationResult.invalid(str(e))
        hint_text = _parse_failure_hint(trimmed)
        return result.with_hint(hint_text) if hint_text else result

    result = parsed.validate()
    if strict and result.valid:
        canonical = parsed.canonical()
        if canonical != trimmed:
            return ValidationResult(
                valid=False,
                id_type=result.id_type,
                error="Non-canonical form",
                hint=f"Canonical form: {canonical}",
            )
    return result


def validate_ids(
    texts: list[str],
    hint: IdKind | str | None = None,
    strict: bool = False,
    logger: AuditLogger | None = None,
    *,
    epoch: str | int | None = None,
) -> list[ValidationResult]:
    """Validate several identifiers, logging a ``validation_finished`` summary.

    Parameters
    ----------
    texts : list[str]
        Identifier texts.
    hint : IdKind | str | None, optional
        Format to validate against.
    strict : bool, optional
        Also require canonical form.
    logger : AuditLogger | None, optional
        Receives the summary event.
    epoch : str | int | None, optional
        Snowflake epoch for the future-timestamp check.

    Returns
    -------
    list[ValidationResult]
        One result per input, in order.
    """
    results = [validate_id(text, hint, strict, epoch=epoch) for text in texts]
    if logger is not None:
        logger.validation_finished(len(results), sum(not r.valid for r in results))
    return results


def convert_id(
    text: str,
    fmt: EncodingFormat | str,
    hint: IdKind | str | None = None,
    case: str | None = None,
) -> str:
    """Re-encode *text* in another base.

    Parameters
    ----------
    text : str
        Identifier text.
    fmt : EncodingFormat | str
        Target encoding or its name.
    hint : IdKind | str | None, optional
        Format to parse as; detected when omitted.
    case : str | None, optional
        ``"upper"`` or ``"lower"`` to force the output case.

    Returns
    -------
    str
        Encoded identifier. Formats that cannot render *fmt* return their
        canonical text.

    Raises
    ------
    InvalidArgumentError
        If *fmt* or *case* is unknown.
    ParseError
        If a hinted codec rejects the text.
    DetectionFailedError
        If no format matches.
    """
    target = fmt if isinstance(fmt, EncodingFormat) else EncodingFormat.from_name(fmt)
    if case not in (None, "upper", "lower"):
        raise InvalidArgumentError(f"Invalid case: {case!r}. Use 'upper' or 'lower'")
    output = parse_id(text, hint).encode(target)
    if case == "upper":
        return output.upper()
    if case == "lower":
        return output.lower()
    return output


def _order(a: Any, b: Any) -> str:
    if a < b:
        return "less"
    if a > b:
        return "greater"
    return "equal"


def compare_ids(
    first: str,
    second: str,
    hint: IdKind | str | None = None,
) -> ComparisonResult:
    """Compare two identifiers by bytes, canonical text and embedded time.

    Parameters
    ----------
    first : str
        First identifier.
    second : str
        Second identifier.
    hint : IdKind | str | None, optional
        Format to parse both as; detected when omitted.

    Returns
    -------
    ComparisonResult
        Orders from the point of view of *first*. Chronological fields are
        set only when both identifiers embed a timestamp.
    """
    parsed1 = parse_id(first, hint)
    parsed2 = parse_id(second, hint)
    ts1 = parsed1.timestamp()
    ts2 = parsed2.timestamp()

    notes: list[str] = []
    if parsed1.kind != parsed2.kind:
        notes.append(f"Different types ({parsed1.kind} vs {parsed2.kind})")

    chronological = time_diff = None
    if ts1 is not None and ts2 is not None:
        chronological = _order(ts1.millis, ts2.millis)
        time_diff = ts1.millis - ts2.millis
        notes.append(f"Time difference: {format_duration_ms(time_diff)}")

    return ComparisonResult(
        id1=first,
        id2=second,
        type1=str(parsed1.kind),
        type2=str(parsed2.kind),
        binary_order=_order(parsed1.as_bytes(), parsed2.as_bytes()),
        lexicographic_order=_order(parsed1.canonical(), parsed2.canonical()),
        chronological_order=chronological,
        time_diff_ms=time_diff,
        timestamp1=None if ts1 is None else ts1.millis,
        timestamp2=None if ts2 is None else ts2.millis,
        notes=notes,
    )


def generate_ids(
    kind: IdKind | str,
    count: int = 1,
    *,
    logger: AuditLogger | None = None,
    **options: Any,
) -> list[str]:
    """Generate *count* identifiers of *kind*.

    Parameters
    ----------
    kind : IdKind | str
        Format or alias.
    count : int, optional
        Number of identifiers, by default 1.
    logger : AuditLogger | None, optional
        Receives an ``ids_generated`` event.
    **options : Any
        Generator options. ``epoch`` for Snowflake accepts ``"twitter"``,
        ``"discord"`` or milliseconds.

    Returns
    -------
    list[str]
        Generated identifiers.

    Raises
    ------
    InvalidArgumentError
        On a bad count, epoch or generator option.
    GenerationError
        If the format has no generator.
    """
    if count < 1:
        raise InvalidArgumentError(f"count must be at least 1, got {count}")
    resolved = resolve_kind(kind)
    if "epoch" in options:
        options["epoch"] = resolve_epoch(options["epoch"])
    ids = create_generator(resolved, **options).generate_many(count)
    if logger is not None:
        logger.ids_generated(str(resolved), count)
    return ids

