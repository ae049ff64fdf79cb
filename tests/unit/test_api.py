"""Tests for the public API module."""

import io
import json
import time

import pytest

import idkit
from idkit import (
    AuditLogger,
    DetectionFailedError,
    GenerationError,
    IdKind,
    InvalidArgumentError,
    ParseError,
    UnknownTypeError,
    compare_ids,
    convert_id,
    describe_kind,
    generate_ids,
    inspect_id,
    validate_id,
)
from idkit.api import validate_ids
from idkit.catalog import list_kinds
from idkit.codecs import snowflake

_ULID_A = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
_ULID_B = "01BX5ZZKBKACTAV9WEVGEMMVRZ"
_OID = "507f1f77bcf86cd799439011"


# ---------------------------------------------------------------------------
# inspect_id
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_inspect_id_detects_format() -> None:
    """Test inspect_id returns a full breakdown for a detected ULID."""
    result = inspect_id(_ULID_A)

    assert result.id_type == "ulid"
    assert result.valid
    assert result.timestamp == 1469918176385
    assert result.timestamp_iso == "2016-07-30T22:36:16.385Z"
    assert result.encodings.hex == result.to_dict()["encodings"]["hex"]


@pytest.mark.unit
def test_inspect_id_snowflake_epoch() -> None:
    """Test a Snowflake epoch shifts the timestamp and names the variant."""
    value = "1541815603606036480"
    plain = inspect_id(value)
    twitter = inspect_id(value, epoch="twitter")

    assert twitter.timestamp == plain.timestamp + snowflake.TWITTER_EPOCH
    assert twitter.variant == "Twitter"
    assert twitter.components["epoch"] == snowflake.TWITTER_EPOCH


@pytest.mark.unit
def test_inspect_id_epoch_ignored_for_other_formats() -> None:
    """Test the epoch only applies to Snowflakes."""
    assert inspect_id(_ULID_A, epoch="discord").timestamp == 1469918176385


@pytest.mark.unit
def test_inspect_id_with_hint() -> None:
    """Test a hint forces the codec."""
    assert inspect_id("a07f1f77bcf86cd799439011", hint="cuid2").id_type == "cuid2"
    with pytest.raises(ParseError):
        inspect_id(_OID, hint="ulid")


@pytest.mark.unit
def test_inspect_id_unknown_input() -> None:
    """Test undetectable input raises DetectionFailedError."""
    with pytest.raises(DetectionFailedError):
        inspect_id("???")


# ---------------------------------------------------------------------------
# validate_id
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_id_valid() -> None:
    """Test a valid identifier validates with its kind."""
    result = validate_id("550e8400-e29b-41d4-a716-446655440000")
    assert result.valid
    assert result.id_type == "uuidv4"
    assert result.error is None


@pytest.mark.unit
def test_validate_id_never_raises_on_bad_input() -> None:
    """Test parse failures become invalid results."""
    result = validate_id("???")
    assert not result.valid
    assert "Detection failed" in result.error


@pytest.mark.unit
def test_validate_id_dashless_uuid_hint() -> None:
    """Test 32 hex digits rejected by the hinted codec suggest adding dashes."""
    result = validate_id("550e8400e29b41d4a716446655440000", hint="ulid")
    assert not result.valid
    assert result.hint == "Looks like UUID without dashes. Try adding dashes."


@pytest.mark.unit
def test_validate_id_corrupted_uuid_hint() -> None:
    """Test a 36-char dashed string with a bad character gets a UUID hint."""
    result = validate_id("550e8400-e29b-41d4-a716-44665544000g")
    assert not result.valid
    assert result.hint == "Check for invalid characters in UUID."


@pytest.mark.unit
def test_validate_id_strict_requires_canonical() -> None:
    """Test strict mode rejects non-canonical text with the canonical form as hint."""
    lenient = validate_id(_ULID_A.lower())
    strict = validate_id(_ULID_A.lower(), strict=True)

    assert lenient.valid
    assert not strict.valid
    assert strict.error == "Non-canonical form"
    assert strict.hint == f"Canonical form: {_ULID_A}"
    assert validate_id(f"  {_ULID_A}  ", strict=True).valid


@pytest.mark.unit
def test_validate_id_future_timestamp() -> None:
    """Test far-future ObjectIds are invalid."""
    result = validate_id("ffffffff0000000000000000", hint="objectid")
    assert not result.valid
    assert result.error == "Timestamp is in the future"


@pytest.mark.unit
def test_validate_id_snowflake_epoch() -> None:
    """Test the Snowflake epoch is applied before the future-timestamp check."""
    future = int(time.time() * 1000) + 2 * 86_400_000
    value = str((future - snowflake.DISCORD_EPOCH) << 22)

    assert validate_id(value, "snowflake").valid
    result = validate_id(value, "snowflake", epoch="discord")
    assert not result.valid
    assert result.error == "Timestamp is in the future"
    assert not validate_ids([value], epoch="discord")[0].valid
    with pytest.raises(InvalidArgumentError):
        validate_id(value, epoch="mars")


@pytest.mark.unit
def test_validate_id_unknown_hint_raises() -> None:
    """Test an unknown type hint is an argument error, not an invalid result."""
    with pytest.raises(UnknownTypeError):
        validate_id(_ULID_A, hint="guid")


@pytest.mark.unit
def test_validate_ids_logs_summary() -> None:
    """Test batch validation logs a validation_finished event."""
    stream = io.StringIO()
    results = validate_ids([_ULID_A, "???"], logger=AuditLogger(stream=stream))

    assert [r.valid for r in results] == [True, False]
    event = json.loads(stream.getvalue().splitlines()[-1])
    assert event["event"] == "validation_finished"
    assert event["data"] == {"total": 2, "invalid": 1}
    assert event["level"] == "WARN"


# ---------------------------------------------------------------------------
# convert_id
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        ("hex", "507f1f77bcf86cd799439011"),
        ("HEX", "507F1F77BCF86CD799439011"),
        ("base64", "UH8fd7z4bNeZQ5AR"),
        ("base64url", "UH8fd7z4bNeZQ5AR"),
        ("canonical", _OID),
    ],
)
def test_convert_id_formats(fmt: str, expected: str) -> None:
    """Test ObjectId re-encodings."""
    assert convert_id(_OID, fmt) == expected


@pytest.mark.unit
def test_convert_id_case() -> None:
    """Test case forcing applies to the encoded output."""
    assert convert_id(_OID, "hex", case="upper") == "507F1F77BCF86CD799439011"
    assert convert_id(_ULID_A, "canonical", case="lower") == _ULID_A.lower()


@pytest.mark.unit
def test_convert_id_unsupported_encoding_returns_canonical() -> None:
    """Test formats without a rendering fall back to canonical text."""
    assert convert_id("1541815603606036480", "base58") == "1541815603606036480"


@pytest.mark.unit
def test_convert_id_uuid_int() -> None:
    """Test UUIDs convert to their unsigned integer value."""
    text = "550e8400-e29b-41d4-a716-446655440000"
    assert convert_id(text, "int") == str(int(text.replace("-", ""), 16))


@pytest.mark.unit
def test_convert_id_bad_arguments() -> None:
    """Test unknown formats and cases raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        convert_id(_OID, "base85")
    with pytest.raises(InvalidArgumentError):
        convert_id(_OID, "hex", case="title")


# ---------------------------------------------------------------------------
# compare_ids
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_compare_ids_same_type() -> None:
    """Test two ULIDs order consistently by bytes, text and time."""
    result = compare_ids(_ULID_A, _ULID_B)

    assert result.same_type
    assert result.binary_order == "less"
    assert result.lexicographic_order == "less"
    assert result.chronological_order == "less"
    assert result.time_diff_ms < 0
    assert result.notes[0].startswith("Time difference: ")


@pytest.mark.unit
def test_compare_ids_reversed_and_equal() -> None:
    """Test orders are reported from the first identifier's point of view."""
    assert compare_ids(_ULID_B, _ULID_A).chronological_order == "greater"
    assert compare_ids(_ULID_A, _ULID_A.lower()).binary_order == "equal"


@pytest.mark.unit
def test_compare_ids_different_types() -> None:
    """Test mixed kinds are noted and still compared chronologically."""
    result = compare_ids(_OID, _ULID_A)

    assert not result.same_type
    assert result.notes[0] == "Different types (objectid vs ulid)"
    assert result.chronological_order is not None


@pytest.mark.unit
def test_compare_ids_without_timestamps() -> None:
    """Test chronological fields stay unset when a side has no timestamp."""
    result = compare_ids("550e8400-e29b-41d4-a716-446655440000", _ULID_A)

    assert result.chronological_order is None
    assert "chronological_order" not in result.to_dict()


# ---------------------------------------------------------------------------
# generate_ids
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_generate_ids_count_and_kind() -> None:
    """Test generated IDs parse back as the requested kind."""
    ids = generate_ids("ulid", 5)

    assert len(ids) == 5
    assert len(set(ids)) == 5
    assert all(inspect_id(i).id_type == "ulid" for i in ids)


@pytest.mark.unit
def test_generate_ids_snowflake_epoch_name() -> None:
    """Test a named epoch is resolved before reaching the generator."""
    value = generate_ids("snowflake", epoch="discord")[0]
    assert idkit.parse_id(value, hint="snowflake").epoch == 0
    assert abs(inspect_id(value, epoch="discord").timestamp - time.time() * 1000) < 60_000


@pytest.mark.unit
def test_generate_ids_snowflake_epochs_interleaved() -> None:
    """Test a default-epoch Snowflake does not skew a later Discord-epoch one."""
    generate_ids("snowflake", 3)
    value = generate_ids("snowflake", epoch="discord")[0]

    assert abs(inspect_id(value, epoch="discord").timestamp - time.time() * 1000) < 60_000
    assert validate_id(value, epoch="discord").valid


@pytest.mark.unit
def test_generate_ids_logs_event() -> None:
    """Test generation logs ids_generated with the resolved kind."""
    stream = io.StringIO()
    generate_ids("oid", 2, logger=AuditLogger(stream=stream))

    event = json.loads(stream.getvalue())
    assert event["event"] == "ids_generated"
    assert event["kind"] == "objectid"
    assert event["data"] == {"count": 2}


@pytest.mark.unit
def test_generate_ids_errors() -> None:
    """Test bad counts, unknown kinds and name-based UUIDs raise."""
    with pytest.raises(InvalidArgumentError):
        generate_ids("ulid", 0)
    with pytest.raises(UnknownTypeError):
        generate_ids("guid")
    with pytest.raises(GenerationError):
        generate_ids("uuidv3")
    with pytest.raises(InvalidArgumentError):
        generate_ids("snowflake", epoch="mars")


# ---------------------------------------------------------------------------
# describe_kind
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_describe_kind() -> None:
    """Test the reference card includes metadata, example and notes."""
    info = describe_kind("ksuid")

    assert info.name == "ksuid"
    assert info.bit_length == 160
    assert info.spec_url == "https://github.com/segmentio/ksuid"
    assert inspect_id(info.example).id_type == "ksuid"
    assert info.notes


@pytest.mark.unit
def test_describe_kind_name_based_uuid_has_example() -> None:
    """Test v3/v5 cards still carry a deterministic example."""
    assert describe_kind(IdKind.UUID_V5).example == describe_kind("uuid5").example


@pytest.mark.unit
def test_list_kinds_has_every_kind() -> None:
    """Test the summary list covers every kind without examples."""
    cards = list_kinds()
    assert [c.name for c in cards] == [str(k) for k in IdKind.all()]
    assert all("example" not in c.to_dict() for c in cards)


# ---------------------------------------------------------------------------
# Package exports
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_package_exports_resolve() -> None:
    """Test every exported name exists and exported errors share one base."""
    from idkit import errors

    assert all(hasattr(idkit, name) for name in idkit.__all__)
    assert set(errors.__all__) <= set(idkit.__all__)
    assert all(issubclass(getattr(errors, name), errors.IdkitError) for name in errors.__all__)
    assert len(errors.__all__) == 8
