"""Command-line interface for idkit.

Provides CLI commands for inspecting, detecting, validating, converting,
comparing and generating identifiers.
"""

import importlib.metadata
import json
import sys
from pathlib import Path
from typing import Any, NoReturn

import click

from idkit.audit import AuditLogger
from idkit.errors import IdkitError, InvalidArgumentError, ValidationError

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("idkit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


def _read_ids(ids: tuple[str, ...]) -> list[str]:
    """Return *ids*, or the non-blank lines of stdin when none were given."""
    if ids:
        return list(ids)
    stdin = click.get_text_stream("stdin")
    lines = [line.strip() for line in stdin if line.strip()]
    if not lines:
        raise InvalidArgumentError("No IDs provided. Pass IDs as arguments or via stdin.")
    return lines


def _echo_json(items: list[Any]) -> None:
    payload = items[0] if len(items) == 1 else items
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail(ctx: click.Context, e: Exception) -> NoReturn:
    logger: AuditLogger | None = ctx.obj
    if logger is not None:
        logger.error(type(e).__name__, str(e))
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="idkit")
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.pass_context
def cli(ctx: click.Context, audit_log: Path | None) -> None:
    """Inspect, validate, convert and generate compact identifiers.

    Supports the UUID family, ULID, Snowflake, KSUID, ObjectId, TypeID,
    Xid, TSID, CUID, CUID2 and NanoID.

    Use 'idkit COMMAND --help' for command-specific help.
    """
    if audit_log is None:
        ctx.obj = None
        return
    logger = AuditLogger(log_path=audit_log)
    ctx.obj = logger
    ctx.call_on_close(logger.close)


@cli.command()
@click.argument("ids", nargs=-1)
@click.option(
    "--type", "-t", "id_type", default=None, help="Parse as this type instead of detecting"
)
@click.option(
    "--epoch",
    default=None,
    help="Snowflake epoch: 'twitter', 'discord' or milliseconds",
)
@click.pass_context
def inspect(
    ctx: click.Context, ids: tuple[str, ...], id_type: str | None, epoch: str | None
) -> None:
    """Break IDS down into timestamp, components and encodings.

    Reads one ID per line from stdin when no IDS are given.

    Examples
    --------
        idkit inspect 01ARZ3NDEKTSV4RRFFQ69G5FAV
        idkit inspect 1541815603606036480 --epoch twitter
    """
    from idkit.api import inspect_id

    try:
        results = [
            inspect_id(text, id_type, epoch=epoch, logger=ctx.obj).to_dict()
            for text in _read_ids(ids)
        ]
    except IdkitError as e:
        _fail(ctx, e)
    _echo_json(results)


@cli.command()
@click.argument("ids", nargs=-1)
@click.pass_context
def detect(ctx: click.Context, ids: tuple[str, ...]) -> None:
    """List candidate types for IDS, best first.

    Examples
    --------
        idkit detect 507f1f77bcf86cd799439011
    """
    from idkit.detection import detect_id_type

    results = []
    try:
        for text in _read_ids(ids):
            candidates = detect_id_type(text)
            results.append(
                {"input": text.strip(), "candidates": [c.to_dict() for c in candidates]}
            )
    except IdkitError as e:
        _fail(ctx, e)
    _echo_json(results)


@cli.command()
@click.argument("ids", nargs=-1)
@click.option("--type", "-t", "id_type", default=None, help="Validate as this type")
@click.option("--strict", is_flag=True, help="Also require canonical form")
@click.option("--epoch", default=None, help="Snowflake epoch: 'twitter', 'discord' or ms")
@click.pass_context
def validate(
    ctx: click.Context,
    ids: tuple[str, ...],
    id_type: str | None,
    strict: bool,
    epoch: str | None,
) -> None:
    """Validate IDS. Exits with status 1 if any is invalid.

    Examples
    --------
        idkit validate 550e8400-e29b-41d4-a716-446655440000
        idkit validate --strict --type ulid 01arz3ndektsv4rrffq69g5fav
        idkit validate 1541815603606036480 --epoch twitter
    """
    from idkit.api import validate_ids

    try:
        results = validate_ids(_read_ids(ids), id_type, strict, logger=ctx.obj, epoch=epoch)
    except IdkitError as e:
        _fail(ctx, e)
    _echo_json([r.to_dict() for r in results])
    if not all(r.valid for r in results):
        _fail(ctx, ValidationError("One or more IDs are invalid"))


@cli.command()
@click.argument("ids", nargs=-1)
@click.option(
    "--format",
    "-f",
    "fmt",
    required=True,
    help="Target encoding: hex, HEX, base32, base58, base64, base64url, bits, int, bytes, ...",
)
@click.option("--type", "-t", "id_type", default=None, help="Parse as this type")
@click.option("--upper", "case", flag_value="upper", default=None, help="Upper-case output")
@click.option("--lower", "case", flag_value="lower", help="Lower-case output")
@click.pass_context
def convert(
    ctx: click.Context,
    ids: tuple[str, ...],
    fmt: str,
    id_type: str | None,
    case: str | None,
) -> None:
    """Re-encode IDS in another base, one per line.

    Examples
    --------
        idkit convert 01ARZ3NDEKTSV4RRFFQ69G5FAV --format hex
        idkit convert 507f1f77bcf86cd799439011 -f base64url
    """
    from idkit.api import convert_id

    try:
        outputs = [convert_id(text, fmt, id_type, case) for text in _read_ids(ids)]
    except IdkitError as e:
        _fail(ctx, e)
    for output in outputs:
        click.echo(output)


@cli.command()
@click.argument("kind", default="uuidv4")
@click.option("--count", "-n", type=int, default=1, help="Number of IDs (default: 1)")
@click.option("--uuid-version", type=int, default=None, help="UUID version for type 'uuid'")
@click.option("--prefix", default=None, help="TypeID prefix")
@click.option("--epoch", default=None, help="Snowflake epoch: 'twitter', 'discord' or ms")
@click.option("--machine-id", type=int, default=None, help="Snowflake machine id (5 bits)")
@click.option("--datacenter-id", type=int, default=None, help="Snowflake datacenter id (5 bits)")
@click.option("--alphabet", default=None, help="NanoID alphabet")
@click.option("--length", type=int, default=None, help="NanoID or CUID2 length")
@click.pass_context
def generate(
    ctx: click.Context,
    kind: str,
    count: int,
    uuid_version: int | None,
    prefix: str | None,
    epoch: str | None,
    machine_id: int | None,
    datacenter_id: int | None,
    alphabet: str | None,
    length: int | None,
) -> None:
    """Generate COUNT identifiers of KIND (default: uuidv4), one per line.

    Examples
    --------
        idkit generate ulid -n 5
        idkit generate typeid --prefix user
        idkit generate snowflake --epoch discord --machine-id 3
    """
    from idkit.api import generate_ids

    options = {
        name: value
        for name, value in (
            ("version", uuid_version),
            ("prefix", prefix),
            ("epoch", epoch),
            ("machine_id", machine_id),
            ("datacenter_id", datacenter_id),
            ("alphabet", alphabet),
            ("length", length),
        )
        if value is not None
    }
    try:
        ids = generate_ids(kind, count, logger=ctx.obj, **options)
    except IdkitError as e:
        _fail(ctx, e)
    for value in ids:
        click.echo(value)


@cli.command()
@click.argument("first")
@click.argument("second")
@click.option("--type", "-t", "id_type", default=None, help="Parse both as this type")
@click.pass_context
def compare(ctx: click.Context, first: str, second: str, id_type: str | None) -> None:
    """Compare FIRST and SECOND by bytes, text and embedded time.

    Examples
    --------
        idkit compare 01ARZ3NDEKTSV4RRFFQ69G5FAV 01BX5ZZKBKACTAV9WEVGEMMVRZ
    """
    from idkit.api import compare_ids

    try:
        result = compare_ids(first, second, id_type)
    except IdkitError as e:
        _fail(ctx, e)
    _echo_json([result.to_dict()])


@cli.command()
@click.argument("kind", required=False)
@click.pass_context
def info(ctx: click.Context, kind: str | None) -> None:
    """Describe KIND, or list every supported type when omitted.

    Examples
    --------
        idkit info
        idkit info ksuid
    """
    from idkit.catalog import describe_kind, list_kinds

    if kind is None:
        click.echo(json.dumps([k.to_dict() for k in list_kinds()], indent=2))
        return
    try:
        card = describe_kind(kind)
    except IdkitError as e:
        _fail(ctx, e)
    _echo_json([card.to_dict()])


if __name__ == "__main__":
    cli()
