"""Tests for CLI module."""

import json
import time
from pathlib import Path

import pytest
from click.testing import CliRunner

from idkit.cli.main import cli
from idkit.codecs.snowflake import DISCORD_EPOCH

_ULID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
_OID = "507f1f77bcf86cd799439011"


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "idkit" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("inspect", "detect", "validate", "convert", "generate", "compare", "info"):
        assert command in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect / detect
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_inspect_single_id(runner: CliRunner) -> None:
    """Test inspect prints one JSON object for one ID."""
    result = runner.invoke(cli, ["inspect", _ULID])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["id_type"] == "ulid"
    assert data["timestamp"] == 1469918176385


@pytest.mark.unit
def test_inspect_multiple_ids(runner: CliRunner) -> None:
    """Test inspect prints a JSON list for several IDs."""
    result = runner.invoke(cli, ["inspect", _ULID, _OID])

    assert result.exit_code == 0
    assert [d["id_type"] for d in json.loads(result.output)] == ["ulid", "objectid"]


@pytest.mark.unit
def test_inspect_snowflake_epoch(runner: CliRunner) -> None:
    """Test --epoch sets the Snowflake variant."""
    result = runner.invoke(cli, ["inspect", "1541815603606036480", "--epoch", "twitter"])

    assert result.exit_code == 0
    assert json.loads(result.output)["variant"] == "Twitter"


@pytest.mark.unit
def test_inspect_reads_stdin(runner: CliRunner) -> None:
    """Test IDs are read line by line from stdin when no arguments are given."""
    result = runner.invoke(cli, ["inspect"], input=f"{_ULID}\n\n{_OID}\n")

    assert result.exit_code == 0
    assert len(json.loads(result.output)) == 2


@pytest.mark.unit
def test_inspect_empty_stdin_fails(runner: CliRunner) -> None:
    """Test no arguments and empty stdin is an error."""
    result = runner.invoke(cli, ["inspect"], input="")

    assert result.exit_code == 1
    assert "No IDs provided" in result.output


@pytest.mark.unit
def test_inspect_bad_id_fails(runner: CliRunner) -> None:
    """Test an undetectable ID exits with status 1."""
    result = runner.invoke(cli, ["inspect", "???"])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_detect_lists_candidates(runner: CliRunner) -> None:
    """Test detect prints ranked candidates."""
    result = runner.invoke(cli, ["detect", "a07f1f77bcf86cd799439011"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["input"] == "a07f1f77bcf86cd799439011"
    assert [c["type"] for c in data["candidates"]] == ["objectid", "cuid2"]


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_valid(runner: CliRunner) -> None:
    """Test valid IDs exit 0."""
    result = runner.invoke(cli, ["validate", _ULID])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"valid": True, "id_type": "ulid"}


@pytest.mark.unit
def test_validate_invalid_exits_nonzero(runner: CliRunner) -> None:
    """Test any invalid ID makes validate exit 1."""
    result = runner.invoke(cli, ["validate", _ULID, "???"])

    assert result.exit_code == 1
    assert "Error: One or more IDs are invalid" in result.output


@pytest.mark.unit
def test_validate_strict(runner: CliRunner) -> None:
    """Test --strict rejects non-canonical input."""
    result = runner.invoke(cli, ["validate", "--strict", _ULID.lower()])

    assert result.exit_code == 1
    assert "Non-canonical form" in result.output


@pytest.mark.unit
def test_validate_snowflake_epoch(runner: CliRunner) -> None:
    """Test --epoch applies to the Snowflake future-timestamp check."""
    future = int(time.time() * 1000) + 2 * 86_400_000
    value = str((future - DISCORD_EPOCH) << 22)

    assert runner.invoke(cli, ["validate", value]).exit_code == 0
    result = runner.invoke(cli, ["validate", value, "--epoch", "discord"])

    assert result.exit_code == 1
    assert "Timestamp is in the future" in result.output


@pytest.mark.unit
def test_validate_unknown_type(runner: CliRunner) -> None:
    """Test an unknown --type is reported as an error."""
    result = runner.invoke(cli, ["validate", "--type", "guid", _ULID])

    assert result.exit_code == 1
    assert "Unknown ID type: guid" in result.output


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_convert_base64(runner: CliRunner) -> None:
    """Test convert prints one encoded value per line."""
    result = runner.invoke(cli, ["convert", _OID, _OID, "--format", "base64"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["UH8fd7z4bNeZQ5AR", "UH8fd7z4bNeZQ5AR"]


@pytest.mark.unit
def test_convert_case_flags(runner: CliRunner) -> None:
    """Test --upper and --lower force the output case."""
    upper = runner.invoke(cli, ["convert", _OID, "-f", "hex", "--upper"])
    lower = runner.invoke(cli, ["convert", _ULID, "-f", "canonical", "--lower"])

    assert upper.output.strip() == _OID.upper()
    assert lower.output.strip() == _ULID.lower()


@pytest.mark.unit
def test_convert_requires_format(runner: CliRunner) -> None:
    """Test --format is mandatory."""
    result = runner.invoke(cli, ["convert", _OID])

    assert result.exit_code != 0


@pytest.mark.unit
def test_convert_unknown_format(runner: CliRunner) -> None:
    """Test unknown encodings fail cleanly."""
    result = runner.invoke(cli, ["convert", _OID, "-f", "base85"])

    assert result.exit_code == 1
    assert "Unknown encoding format" in result.output


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_generate_count(runner: CliRunner) -> None:
    """Test -n prints that many distinct IDs."""
    result = runner.invoke(cli, ["generate", "ulid", "-n", "3"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert len(set(lines)) == 3


@pytest.mark.unit
def test_generate_default_is_uuidv4(runner: CliRunner) -> None:
    """Test the default kind is a v4 UUID."""
    result = runner.invoke(cli, ["generate"])

    assert result.exit_code == 0
    assert result.output.strip()[14] == "4"


@pytest.mark.unit
def test_generate_options(runner: CliRunner) -> None:
    """Test generator options are passed through."""
    typeid = runner.invoke(cli, ["generate", "typeid", "--prefix", "user"])
    nanoid = runner.invoke(cli, ["generate", "nanoid", "--alphabet", "abc", "--length", "8"])
    uuid7 = runner.invoke(cli, ["generate", "uuid", "--uuid-version", "7"])

    assert typeid.output.startswith("user_")
    assert len(nanoid.output.strip()) == 8
    assert set(nanoid.output.strip()) <= set("abc")
    assert uuid7.output.strip()[14] == "7"


@pytest.mark.unit
@pytest.mark.parametrize(
    "args",
    [
        ["generate", "guid"],
        ["generate", "uuidv3"],
        ["generate", "ulid", "-n", "0"],
        ["generate", "snowflake", "--machine-id=-1"],
    ],
)
def test_generate_errors(runner: CliRunner, args: list[str]) -> None:
    """Test unknown kinds and bad options exit 1 with an error message."""
    result = runner.invoke(cli, args)

    assert result.exit_code == 1
    assert "Error" in result.output


# ---------------------------------------------------------------------------
# compare / info
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_compare(runner: CliRunner) -> None:
    """Test compare prints the comparison object."""
    result = runner.invoke(cli, ["compare", _ULID, "01BX5ZZKBKACTAV9WEVGEMMVRZ"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["chronological_order"] == "less"
    assert data["type1"] == data["type2"] == "ulid"


@pytest.mark.unit
def test_info_lists_kinds(runner: CliRunner) -> None:
    """Test info without arguments lists every kind."""
    result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert len(json.loads(result.output)) == 19


@pytest.mark.unit
def test_info_single_kind(runner: CliRunner) -> None:
    """Test info KIND prints a reference card with an example."""
    result = runner.invoke(cli, ["info", "xid"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["name"] == "xid"
    assert len(data["example"]) == 20


@pytest.mark.unit
def test_info_unknown_kind(runner: CliRunner) -> None:
    """Test an unknown kind fails."""
    result = runner.invoke(cli, ["info", "guid"])

    assert result.exit_code == 1
    assert "Unknown ID type" in result.output


# ---------------------------------------------------------------------------
# Audit log
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_audit_log_written(runner: CliRunner, tmp_path: Path) -> None:
    """Test --audit-log appends events for parsing and generation."""
    log_path = tmp_path / "audit.jsonl"

    runner.invoke(cli, ["--audit-log", str(log_path), "inspect", _ULID])
    runner.invoke(cli, ["--audit-log", str(log_path), "generate", "ksuid", "-n", "2"])

    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert [e["event"] for e in events] == ["id_parsed", "ids_generated"]
    assert events[0]["run_id"] != events[1]["run_id"]


@pytest.mark.unit
def test_audit_log_records_errors(runner: CliRunner, tmp_path: Path) -> None:
    """Test failures are logged as error events."""
    log_path = tmp_path / "audit.jsonl"

    result = runner.invoke(cli, ["--audit-log", str(log_path), "inspect", "???"])

    assert result.exit_code == 1
    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert [e["event"] for e in events] == ["detection_failed", "error"]
    assert events[1]["data"]["exception_class"] == "DetectionFailedError"
