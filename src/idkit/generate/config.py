"""Validated option objects for configurable generators."""

from dataclasses import dataclass

from idkit.codecs.nanoid import DEFAULT_ALPHABET, DEFAULT_LENGTH
from idkit.codecs.snowflake import DEFAULT_EPOCH
from idkit.errors import InvalidArgumentError

__all__ = ["SnowflakeConfig", "NanoIdConfig", "MAX_ALPHABET_SIZE"]

MAX_ALPHABET_SIZE = 256


@dataclass(frozen=True)
class SnowflakeConfig:
    """Snowflake generator settings.

    Attributes
    ----------
    epoch : int
        Epoch in milliseconds since the Unix epoch.
    machine_id : int
        Machine id; only the low 5 bits are used.
    datacenter_id : int
        Datacenter id; only the low 5 bits are used.
    """

    epoch: int = DEFAULT_EPOCH
    machine_id: int = 0
    datacenter_id: int = 0

    def __post_init__(self) -> None:
        """Validate the epoch and mask ids to 5 bits."""
        if self.epoch < 0:
            raise InvalidArgumentError(f"Invalid epoch: {self.epoch}")
        if self.machine_id < 0 or self.datacenter_id < 0:
            raise InvalidArgumentError("machine_id and datacenter_id must be non-negative")
        object.__setattr__(self, "machine_id", self.machine_id & 0x1F)
        object.__setattr__(self, "datacenter_id", self.datacenter_id & 0x1F)


@dataclass(frozen=True)
class NanoIdConfig:
    """NanoID generator settings.

    Attributes
    ----------
    alphabet : str
        Symbols to draw from (1 to 256 characters).
    length : int
        Number of symbols per ID (> 0).
    """

    alphabet: str = DEFAULT_ALPHABET
    length: int = DEFAULT_LENGTH

    def __post_init__(self) -> None:
        """Validate alphabet size and length."""
        if not self.alphabet:
            raise InvalidArgumentError("NanoID alphabet must not be empty")
        if len(self.alphabet) > MAX_ALPHABET_SIZE:
            raise InvalidArgumentError(
                f"NanoID alphabet must have at most {MAX_ALPHABET_SIZE} symbols"
            )
        if self.length <= 0:
            raise InvalidArgumentError(f"NanoID length must be positive, got {self.length}")
