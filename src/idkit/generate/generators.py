"""Identifier generators.

Every generator is safe to share between threads: shared counters and
once-initialized process randomness live in ``GeneratorStates`` and are
updated under their own locks. Time-based generators take a ``clock``
callable returning Unix milliseconds so tests can freeze time.
"""

import hashlib
import os
import secrets
import threading
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable

import uuid6
from nanoid import generate as nanoid_generate
from ulid import ULID

from idkit.codecs.cuid2 import DEFAULT_LENGTH as CUID2_DEFAULT_LENGTH
from idkit.codecs.ksuid import KSUID_EPOCH
from idkit.codecs.typeid import validate_prefix
from idkit.encoding.radix import (
    BASE36_ALPHABET,
    encode_base36,
    encode_base62,
    encode_crockford,
    encode_typeid_suffix,
    encode_xid,
    pad_base36,
)
from idkit.errors import GenerationError, InvalidArgumentError, ParseError
from idkit.generate.config import NanoIdConfig, SnowflakeConfig
from idkit.generate.state import DEFAULT_STATES, GeneratorStates
from idkit.models import IdKind
from idkit.utils import now_ms

__all__ = [
    "Clock",
    "IdGenerator",
    "UuidGenerator",
    "UlidGenerator",
    "NanoIdGenerator",
    "SnowflakeGenerator",
    "ObjectIdGenerator",
    "KsuidGenerator",
    "XidGenerator",
    "TsidGenerator",
    "CuidGenerator",
    "Cuid2Generator",
    "TypeIdGenerator",
    "UUID_NODE",
]

Clock = Callable[[], int]

# Fixed node for v1/v6 UUIDs (00:11:22:33:44:55)
UUID_NODE = 0x001122334455

_U64_MASK = (1 << 64) - 1
_U32_MASK = 0xFFFFFFFF

# uuid6.uuid7 keeps module-level monotonic state
_UUID_LOCK = threading.Lock()


class IdGenerator(ABC):
    """Base class for identifier generators.

    Attributes
    ----------
    kind : IdKind
        Format produced.
    """

    kind: IdKind

    @abstractmethod
    def generate(self) -> str:
        """Produce one identifier in canonical text form."""

    def generate_many(self, count: int) -> list[str]:
        """Produce *count* identifiers.

        Raises
        ------
        InvalidArgumentError
            If *count* is negative.
        """
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")
        return [self.generate() for _ in range(count)]


class UuidGenerator(IdGenerator):
    """UUID generator.

    Parameters
    ----------
    version : int, optional
        0 (nil), 255 (max), 1, 3, 4, 5, 6 or 7. Defaults to 4.
    namespace : uuid.UUID | None, optional
        Namespace for v3/v5; defaults to the DNS namespace.
    name : str | None, optional
        Name for v3/v5; defaults to ``"example.com"``.

    Raises
    ------
    InvalidArgumentError
        For any other version.
    """

    _KINDS = {
        0: IdKind.UUID_NIL,
        1: IdKind.UUID_V1,
        3: IdKind.UUID_V3,
        4: IdKind.UUID_V4,
        5: IdKind.UUID_V5,
        6: IdKind.UUID_V6,
        7: IdKind.UUID_V7,
        255: IdKind.UUID_MAX,
    }

    def __init__(
        self,
        version: int = 4,
        namespace: uuid.UUID | None = None,
        name: str | None = None,
    ) -> None:
        if version not in self._KINDS:
            raise InvalidArgumentError(f"Unsupported UUID version: {version}")
        self.version = version
        self.kind = self._KINDS[version]
        self.namespace = namespace or uuid.NAMESPACE_DNS
        self.name = name if name is not None else "example.com"

    def new_uuid(self) -> uuid.UUID:
        """Produce one UUID value."""
        if self.version == 0:
            return uuid.UUID(int=0)
        if self.version == 255:
            return uuid.UUID(int=(1 << 128) - 1)
        if self.version == 1:
            return uuid.uuid1(node=UUID_NODE)
        if self.version == 3:
            return uuid.uuid3(self.namespace, self.name)
        if self.version == 5:
            return uuid.uuid5(self.namespace, self.name)
        if self.version in (6, 7):
            with _UUID_LOCK:
                return uuid6.uuid6(node=UUID_NODE) if self.version == 6 else uuid6.uuid7()
        return uuid.uuid4()

    def generate(self) -> str:
        return str(self.new_uuid())


class UlidGenerator(IdGenerator):
    """ULID generator: clock milliseconds followed by 80 random bits."""

    kind = IdKind.ULID

    def __init__(self, clock: Clock = now_ms) -> None:
        self.clock = clock

    def generate(self) -> str:
        ms = self.clock() & ((1 << 48) - 1)
        return str(ULID.from_bytes(ms.to_bytes(6, "big") + secrets.token_bytes(10)))


class NanoIdGenerator(IdGenerator):
    """NanoID generator backed by the ``nanoid`` package.

    Parameters
    ----------
    alphabet : str, optional
        Symbols to draw from.
    length : int, optional
        Symbols per ID.
    config : NanoIdConfig | None, optional
        Pre-validated settings; overrides *alphabet* and *length*.
    """

    kind = IdKind.NANOID

    def __init__(
        self,
        alphabet: str | None = None,
        length: int | None = None,
        config: NanoIdConfig | None = None,
    ) -> None:
        if config is None:
            defaults = NanoIdConfig()
            config = NanoIdConfig(
                alphabet=defaults.alphabet if alphabet is None else alphabet,
                length=defaults.length if length is None else length,
            )
        self.config = config

    def generate(self) -> str:
        return nanoid_generate(self.config.alphabet, self.config.length)


class SnowflakeGenerator(IdGenerator):
    """Snowflake generator.

    IDs from all instances sharing a ``GeneratorStates`` never repeat a
    ``(timestamp, sequence)`` pair.

    Parameters
    ----------
    epoch : int, optional
        Epoch in ms.
    machine_id : int, optional
        Masked to 5 bits.
    datacenter_id : int, optional
        Masked to 5 bits.
    config : SnowflakeConfig | None, optional
        Pre-validated settings; overrides the three above.
    clock : Clock, optional
        Millisecond clock.
    states : GeneratorStates | None, optional
        State bundle; the process default when omitted.
    """

    kind = IdKind.SNOWFLAKE

    def __init__(
        self,
        epoch: int = 0,
        machine_id: int = 0,
        datacenter_id: int = 0,
        config: SnowflakeConfig | None = None,
        clock: Clock = now_ms,
        states: GeneratorStates | None = None,
    ) -> None:
        self.config = config or SnowflakeConfig(
            epoch=epoch, machine_id=machine_id, datacenter_id=datacenter_id
        )
        self.clock = clock
        self.states = states or DEFAULT_STATES

    def next_id(self) -> int:
        """Produce one Snowflake as an integer.

        Raises
        ------
        GenerationError
            If the clock reads earlier than the epoch.
        """
        now = self.clock()
        if now < self.config.epoch:
            raise GenerationError("Clock is earlier than the Snowflake epoch")
        # State holds Unix ms so generators with different epochs can share it
        timestamp, sequence = self.states.snowflake.next(now)
        value = (
            ((timestamp - self.config.epoch) << 22)
            | (self.config.datacenter_id << 17)
            | (self.config.machine_id << 12)
            | sequence
        )
        return value & _U64_MASK

    def generate(self) -> str:
        return str(self.next_id())


class ObjectIdGenerator(IdGenerator):
    """MongoDB ObjectId generator."""

    kind = IdKind.OBJECTID

    def __init__(self, clock: Clock = now_ms, states: GeneratorStates | None = None) -> None:
        self.clock = clock
        self.states = states or DEFAULT_STATES

    def new_bytes(self) -> bytes:
        """Produce the 12 raw bytes of one ObjectId."""
        secs = (self.clock() // 1000) & _U32_MASK
        random = self.states.objectid_random.get_or_init(lambda: secrets.token_bytes(5))
        counter = self.states.objectid_counter.next()
        return secs.to_bytes(4, "big") + random + counter.to_bytes(3, "big")

    def generate(self) -> str:
        return self.new_bytes().hex()


class KsuidGenerator(IdGenerator):
    """KSUID generator: seconds since the KSUID epoch plus 16 random bytes."""

    kind = IdKind.KSUID

    def __init__(self, clock: Clock = now_ms) -> None:
        self.clock = clock

    def generate(self) -> str:
        offset = max(self.clock() // 1000 - KSUID_EPOCH, 0) & _U32_MASK
        data = offset.to_bytes(4, "big") + secrets.token_bytes(16)
        return encode_base62(int.from_bytes(data, "big"))


class XidGenerator(IdGenerator):
    """Xid generator."""

    kind = IdKind.XID

    def __init__(self, clock: Clock = now_ms, states: GeneratorStates | None = None) -> None:
        self.clock = clock
        self.states = states or DEFAULT_STATES

    def new_bytes(self) -> bytes:
        """Produce the 12 raw bytes of one Xid."""
        secs = (self.clock() // 1000) & _U32_MASK
        machine = self.states.xid_machine.get_or_init(lambda: secrets.token_bytes(3))
        pid = os.getpid() & 0xFFFF
        counter = self.states.xid_counter.next()
        return (
            secs.to_bytes(4, "big") + machine + pid.to_bytes(2, "big") + counter.to_bytes(3, "big")
        )

    def generate(self) -> str:
        return encode_xid(self.new_bytes())


class TsidGenerator(IdGenerator):
    """TSID generator: 42-bit milliseconds and 22 random bits."""

    kind = IdKind.TSID

    def __init__(self, clock: Clock = now_ms) -> None:
        self.clock = clock

    def generate(self) -> str:
        value = ((self.clock() << 22) | secrets.randbits(22)) & _U64_MASK
        return encode_crockford(value, 13)


def _host_fingerprint(pid: int) -> str:
    h = 0
    for b in b"localhost":
        h = (h * 36 + b) & _U64_MASK
    return pad_base36((pid + h) & _U64_MASK, 4)


class CuidGenerator(IdGenerator):
    """CUID v1 generator: ``c`` + time + counter + fingerprint + random."""

    kind = IdKind.CUID

    def __init__(self, clock: Clock = now_ms, states: GeneratorStates | None = None) -> None:
        self.clock = clock
        self.states = states or DEFAULT_STATES

    def generate(self) -> str:
        counter = self.states.cuid_counter.next()
        return "".join(
            [
                "c",
                pad_base36(self.clock(), 8),
                pad_base36(counter, 4),
                _host_fingerprint(os.getpid()),
                pad_base36(secrets.randbelow(36**8), 8),
            ]
        )


class Cuid2Generator(IdGenerator):
    """CUID2 generator.

    Hashes the timestamp, a counter, a random salt, the process id and two
    random 64-bit values with SHA-256 and renders the digest in base36.

    Parameters
    ----------
    length : int, optional
        Characters per ID (default 24).
    """

    kind = IdKind.CUID2

    def __init__(
        self,
        length: int = CUID2_DEFAULT_LENGTH,
        clock: Clock = now_ms,
        states: GeneratorStates | None = None,
    ) -> None:
        if length < 1:
            raise InvalidArgumentError(f"CUID2 length must be positive, got {length}")
        self.length = length
        self.clock = clock
        self.states = states or DEFAULT_STATES

    def generate(self) -> str:
        counter = self.states.cuid2_counter.next()
        hasher = hashlib.sha256()
        for value in (
            self.clock(),
            counter,
            secrets.randbits(64),
            os.getpid(),
            secrets.randbits(64),
            secrets.randbits(64),
        ):
            hasher.update((value & _U64_MASK).to_bytes(8, "little"))
        text = encode_base36(int.from_bytes(hasher.digest(), "big"))[: self.length]
        if text[0].isdigit():
            text = chr(ord("a") + int(text[0]) % 26) + text[1:]
        padding = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(self.length - len(text)))
        return text + padding


class TypeIdGenerator(IdGenerator):
    """TypeID generator wrapping a fresh UUIDv7.

    Parameters
    ----------
    prefix : str, optional
        Type prefix; empty for a bare suffix.

    Raises
    ------
    InvalidArgumentError
        If the prefix is not a valid TypeID prefix.
    """

    kind = IdKind.TYPEID

    def __init__(self, prefix: str = "") -> None:
        try:
            validate_prefix(prefix)
        except ParseError as e:
            raise InvalidArgumentError(str(e)) from e
        self.prefix = prefix
        self._uuids = UuidGenerator(7)

    def generate(self) -> str:
        suffix = encode_typeid_suffix(self._uuids.new_uuid().int)
        return f"{self.prefix}_{suffix}" if self.prefix else suffix
