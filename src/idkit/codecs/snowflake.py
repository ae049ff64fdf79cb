"""Snowflake codec.

A Snowflake is an unsigned 64-bit integer rendered in decimal::

    | 41-bit ms since epoch | 5-bit datacenter | 5-bit machine | 12-bit sequence |

The epoch is not recoverable from the value, so it is supplied at parse time
and kept on the parsed value.
"""

from dataclasses import dataclass

from idkit.codecs.base import NUMERIC_ENCODINGS, ParsedId, check_not_future
from idkit.errors import InvalidArgumentError, ParseError
from idkit.models import IdKind, InspectionResult, Timestamp, ValidationResult

__all__ = [
    "TWITTER_EPOCH",
    "DISCORD_EPOCH",
    "DEFAULT_EPOCH",
    "ParsedSnowflake",
    "resolve_epoch",
    "epoch_label",
    "recognize",
    "parse",
]

TWITTER_EPOCH = 1288834974657
DISCORD_EPOCH = 1420070400000
DEFAULT_EPOCH = 0

_MAX_U64 = (1 << 64) - 1


def resolve_epoch(epoch: str | int | None) -> int:
    """Resolve an epoch name or millisecond value.

    Parameters
    ----------
    epoch : str | int | None
        ``"twitter"``, ``"discord"``, a decimal string or an int. ``None``
        selects the default (Unix) epoch.

    Returns
    -------
    int
        Epoch in milliseconds since the Unix epoch.

    Raises
    ------
    InvalidArgumentError
        For any other value.
    """
    if epoch is None:
        return DEFAULT_EPOCH
    if isinstance(epoch, int):
        if epoch < 0:
            raise InvalidArgumentError(f"Invalid epoch: {epoch}")
        return epoch
    name = epoch.strip().lower()
    if name == "twitter":
        return TWITTER_EPOCH
    if name == "discord":
        return DISCORD_EPOCH
    if name.isdigit():
        return int(name)
    raise InvalidArgumentError(f"Invalid epoch: {epoch}")


def epoch_label(epoch: int) -> str:
    """Variant label for an epoch."""
    if epoch == TWITTER_EPOCH:
        return "Twitter"
    if epoch == DISCORD_EPOCH:
        return "Discord"
    return "Custom"


def recognize(text: str) -> bool:
    """15 to 19 decimal digits fitting in 64 bits."""
    text = text.strip()
    return text.isascii() and text.isdigit() and 15 <= len(text) <= 19 and int(text) <= _MAX_U64


def parse(text: str, epoch: int = DEFAULT_EPOCH) -> "ParsedSnowflake":
    """Parse a decimal Snowflake.

    Raises
    ------
    ParseError
        If the text is not an unsigned 64-bit decimal integer.
    """
    trimmed = text.strip()
    if not trimmed or not (trimmed.isascii() and trimmed.isdigit()):
        raise ParseError("Invalid Snowflake ID: expected decimal digits", kind="snowflake")
    value = int(trimmed)
    if value > _MAX_U64:
        raise ParseError(
            "Invalid Snowflake ID: number too large to fit in 64 bits", kind="snowflake"
        )
    return ParsedSnowflake(value=value, epoch=epoch, input=trimmed)


@dataclass(frozen=True)
class ParsedSnowflake(ParsedId):
    """Parsed Snowflake.

    Attributes
    ----------
    value : int
        The 64-bit identifier.
    epoch : int
        Epoch (ms) the timestamp field is relative to.
    input : str
        Trimmed input text.
    """

    supported_encodings = NUMERIC_ENCODINGS

    value: int
    epoch: int
    input: str

    @property
    def kind(self) -> IdKind:
        return IdKind.SNOWFLAKE

    @property
    def datacenter_id(self) -> int:
        return (self.value >> 17) & 0x1F

    @property
    def machine_id(self) -> int:
        return (self.value >> 12) & 0x1F

    @property
    def sequence(self) -> int:
        return self.value & 0xFFF

    def canonical(self) -> str:
        return str(self.value)

    def as_bytes(self) -> bytes:
        return self.value.to_bytes(8, "big")

    def timestamp(self) -> Timestamp:
        return Timestamp((self.value >> 22) + self.epoch)

    def validate(self) -> ValidationResult:
        return check_not_future(self.kind, self.timestamp())

    def inspect(self) -> InspectionResult:
        components = {
            "timestamp_ms": self.timestamp().millis,
            "datacenter_id": self.datacenter_id,
            "machine_id": self.machine_id,
            "sequence": self.sequence,
            "epoch": self.epoch,
        }
        return self._inspection(
            components,
            variant=epoch_label(self.epoch),
            encodings=self._encodings(all_bases=False),
        )
