"""Tests for format detection and codec dispatch."""

import io
import json

import pytest

from idkit.audit import AuditLogger
from idkit.codecs import ParsedUuid
from idkit.detection import best_guess, detect_id_type, detect_uuid_kind
from idkit.errors import DetectionFailedError, ParseError, UnknownTypeError
from idkit.models import IdKind
from idkit.registry import CODEC_REGISTRY, get_codec, parse_id, resolve_kind


def _kinds(text: str) -> list[IdKind]:
    return [c.kind for c in detect_id_type(text)]


# ---------------------------------------------------------------------------
# Detector
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_detect_uuid_v4_first() -> None:
    """Test a dashed v4 UUID is detected with full confidence."""
    candidates = detect_id_type("550e8400-e29b-41d4-a716-446655440000")

    assert candidates[0].kind is IdKind.UUID_V4
    assert candidates[0].confidence == 1.0


@pytest.mark.unit
def test_detect_ulid() -> None:
    """Test a ULID ranks first and is not also reported as a bare TypeID."""
    kinds = _kinds("01ARZ3NDEKTSV4RRFFQ69G5FAV")

    assert kinds[0] is IdKind.ULID
    assert IdKind.TYPEID not in kinds


@pytest.mark.unit
def test_detect_objectid_ranks_above_cuid2() -> None:
    """Test an ObjectId starting with a letter also looks like a CUID2."""
    candidates = detect_id_type("a07f1f77bcf86cd799439011")

    assert [(c.kind, c.confidence) for c in candidates] == [
        (IdKind.OBJECTID, 0.85),
        (IdKind.CUID2, 0.4),
    ]


@pytest.mark.unit
def test_detect_objectid_starting_with_digit() -> None:
    """Test the usual ObjectId example ranks first; a leading digit rules out CUID2."""
    candidates = detect_id_type("507f1f77bcf86cd799439011")

    assert candidates[0].kind is IdKind.OBJECTID
    assert candidates[0].confidence == 0.85
    assert IdKind.CUID2 not in [c.kind for c in candidates]


@pytest.mark.unit
def test_detect_typeid() -> None:
    """Test a prefixed TypeID ranks first."""
    assert _kinds("user_01h455vb4pex5vsknk084sn02q")[0] is IdKind.TYPEID


@pytest.mark.unit
def test_detect_bare_typeid_suffix_prefers_ulid() -> None:
    """Test a bare lowercase suffix that also reads as a ULID is a ULID only."""
    kinds = _kinds("01h455vb4pex5vsknk084sn02q")

    assert kinds[0] is IdKind.ULID
    assert IdKind.TYPEID not in kinds


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("550e8400e29b41d4a716446655440000", IdKind.UUID),
        ("1541815603606036480", IdKind.SNOWFLAKE),
        ("0ujtsYcgvSTl8PAuAdqWYSMnLOv", IdKind.KSUID),
        ("0jc8s5dm1t46sgk42be9", IdKind.XID),
        ("028T5CY4TQKFF", IdKind.TSID),
        ("cjld2cjxh0000qzrmn831i7rn", IdKind.CUID),
        ("V1StGXR8_Z5jdHi6B-myT", IdKind.NANOID),
        ("00000000-0000-0000-0000-000000000000", IdKind.UUID_NIL),
        ("ffffffff-ffff-ffff-ffff-ffffffffffff", IdKind.UUID_MAX),
    ],
)
def test_best_guess(text: str, expected: IdKind) -> None:
    """Test the top-ranked kind for one example of each format."""
    assert best_guess(text) is expected


@pytest.mark.unit
def test_detect_ignores_surrounding_whitespace() -> None:
    """Test input is trimmed before detection."""
    assert best_guess("  01ARZ3NDEKTSV4RRFFQ69G5FAV\n") is IdKind.ULID


@pytest.mark.unit
def test_detect_dashed_uuid_with_unknown_variant() -> None:
    """Test a dashed UUID outside the RFC variant falls back to generic uuid."""
    candidates = detect_id_type("550e8400-e29b-41d4-0716-446655440000")

    assert candidates[0].kind is IdKind.UUID
    assert candidates[0].confidence == 0.9
    assert detect_uuid_kind("550e8400-e29b-41d4-0716-446655440000") is None


@pytest.mark.unit
def test_detect_candidates_sorted_descending() -> None:
    """Test confidences never increase along the candidate list."""
    candidates = detect_id_type("a07f1f77bcf86cd799439011")
    confidences = [c.confidence for c in candidates]
    assert confidences == sorted(confidences, reverse=True)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "not an id!", "???"])
def test_detect_failure(text: str) -> None:
    """Test unrecognizable input raises DetectionFailedError."""
    with pytest.raises(DetectionFailedError, match="could not determine ID type"):
        detect_id_type(text)


@pytest.mark.unit
def test_candidate_to_dict() -> None:
    """Test candidates serialize with the kind name."""
    assert detect_id_type("01ARZ3NDEKTSV4RRFFQ69G5FAV")[0].to_dict() == {
        "type": "ulid",
        "confidence": 0.95,
    }


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_registry_covers_every_kind() -> None:
    """Test every kind has a codec and UUID kinds share one."""
    assert set(CODEC_REGISTRY) == set(IdKind.all())
    assert get_codec(IdKind.UUID_V7) is get_codec("uuid")


@pytest.mark.unit
def test_resolve_kind_aliases() -> None:
    """Test kind aliases resolve and unknown names raise."""
    assert resolve_kind("oid") is IdKind.OBJECTID
    assert resolve_kind(IdKind.ULID) is IdKind.ULID
    with pytest.raises(UnknownTypeError, match="Unknown ID type: foo"):
        resolve_kind("foo")


@pytest.mark.unit
def test_parse_id_detects() -> None:
    """Test parse_id without a hint uses the best parseable candidate."""
    parsed = parse_id("550e8400e29b41d4a716446655440000")

    assert isinstance(parsed, ParsedUuid)
    assert parsed.kind is IdKind.UUID_V4


@pytest.mark.unit
def test_parse_id_with_hint_propagates_errors() -> None:
    """Test a hinted codec's ParseError is not swallowed."""
    with pytest.raises(ParseError):
        parse_id("550e8400e29b41d4a716446655440000", hint="ulid")


@pytest.mark.unit
def test_parse_id_hint_overrides_detection() -> None:
    """Test a hint forces the codec even when another kind would rank first."""
    parsed = parse_id("a07f1f77bcf86cd799439011", hint="cuid2")
    assert parsed.kind is IdKind.CUID2


@pytest.mark.unit
def test_parse_id_logs_events() -> None:
    """Test parse events and detection failures reach the audit log."""
    stream = io.StringIO()
    logger = AuditLogger(run_id="run", stream=stream)

    parse_id("01ARZ3NDEKTSV4RRFFQ69G5FAV", logger=logger)
    with pytest.raises(DetectionFailedError):
        parse_id("???", logger=logger)

    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["id_parsed", "detection_failed"]
    assert events[0]["kind"] == "ulid"
    assert events[0]["data"]["canonical"] == "01ARZ3NDEKTSV4RRFFQ69G5FAV"
    assert events[1]["level"] == "WARN"
