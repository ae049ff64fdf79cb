"""Process-wide generator state.

Every piece of shared mutable state used by the generators lives here:
Snowflake's ``(last_timestamp, sequence)`` pair, the once-initialized
per-process random values of ObjectId and Xid, and the ObjectId/Xid/CUID
counters. Each object guards its read-modify-write section with its own
``threading.Lock``, so concurrent callers never observe the same value.

``DEFAULT_STATES`` holds the process defaults that generators use unless
given explicit state objects. Tests call ``reset_generator_state`` to start
from a clean slate.
"""

import secrets
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

__all__ = [
    "SnowflakeState",
    "OnceCell",
    "Counter24",
    "AtomicCounter",
    "GeneratorStates",
    "DEFAULT_STATES",
    "reset_generator_state",
]

T = TypeVar("T")

SEQUENCE_MASK = 0xFFF
COUNTER24_MASK = 0xFFFFFF


class SnowflakeState:
    """Lock-guarded ``(last_timestamp, sequence)`` pair.

    Within one millisecond the sequence increments and wraps at 12 bits.
    When it wraps, or when the clock moves backwards, the pair continues
    from the last issued millisecond instead, so no ``(timestamp, sequence)``
    pair is ever issued twice and no caller waits.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.last_timestamp = -1
        self.sequence = 0

    def next(self, timestamp: int) -> tuple[int, int]:
        """Reserve the next ``(timestamp, sequence)`` pair.

        Parameters
        ----------
        timestamp : int
            Current clock reading in Unix milliseconds.

        Returns
        -------
        tuple[int, int]
            Timestamp to embed and its 12-bit sequence.
        """
        with self._lock:
            if timestamp > self.last_timestamp:
                self.last_timestamp = timestamp
                self.sequence = 0
            else:
                self.sequence = (self.sequence + 1) & SEQUENCE_MASK
                if self.sequence == 0:
                    self.last_timestamp += 1
            return self.last_timestamp, self.sequence

    def reset(self) -> None:
        with self._lock:
            self.last_timestamp = -1
            self.sequence = 0


class OnceCell(Generic[T]):
    """Lazily computed value shared by all threads.

    Concurrent first callers all observe the single value produced by the
    first initializer to run.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: T | None = None
        self._set = False

    def get_or_init(self, factory: Callable[[], T]) -> T:
        """Return the value, computing it with *factory* on first use."""
        if not self._set:
            with self._lock:
                if not self._set:
                    self._value = factory()
                    self._set = True
        return self._value  # type: ignore[return-value]

    def set(self, value: T) -> None:
        """Force the value (for deterministic tests)."""
        with self._lock:
            self._value = value
            self._set = True

    def reset(self) -> None:
        """Forget the value; the next ``get_or_init`` recomputes it."""
        with self._lock:
            self._value = None
            self._set = False


class Counter24:
    """24-bit counter seeded once from randomness, wrapping silently."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: int | None = None

    def next(self) -> int:
        """Return the next counter value."""
        with self._lock:
            if self._value is None:
                self._value = secrets.randbits(24)
            else:
                self._value = (self._value + 1) & COUNTER24_MASK
            return self._value

    def seed(self, value: int) -> None:
        """Make the next call to ``next`` return ``value + 1`` (masked)."""
        with self._lock:
            self._value = value & COUNTER24_MASK

    def reset(self) -> None:
        """Forget the seed; the next call reseeds from randomness."""
        with self._lock:
            self._value = None


class AtomicCounter:
    """Monotonically increasing counter starting at zero."""

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._start = start
        self._value = start

    def next(self) -> int:
        """Return the current value and increment it."""
        with self._lock:
            value = self._value
            self._value += 1
            return value

    def reset(self) -> None:
        with self._lock:
            self._value = self._start


@dataclass
class GeneratorStates:
    """Bundle of all generator state.

    Attributes
    ----------
    snowflake : SnowflakeState
        Shared Snowflake timestamp/sequence pair.
    objectid_random : OnceCell[bytes]
        5 random bytes per process.
    objectid_counter : Counter24
        ObjectId counter.
    xid_machine : OnceCell[bytes]
        3 random bytes per process.
    xid_counter : Counter24
        Xid counter.
    cuid_counter : AtomicCounter
        CUID v1 counter.
    cuid2_counter : AtomicCounter
        CUID2 counter.
    """

    snowflake: SnowflakeState = field(default_factory=SnowflakeState)
    objectid_random: OnceCell[bytes] = field(default_factory=OnceCell)
    objectid_counter: Counter24 = field(default_factory=Counter24)
    xid_machine: OnceCell[bytes] = field(default_factory=OnceCell)
    xid_counter: Counter24 = field(default_factory=Counter24)
    cuid_counter: AtomicCounter = field(default_factory=AtomicCounter)
    cuid2_counter: AtomicCounter = field(default_factory=AtomicCounter)

    def reset(self) -> None:
        """Return every piece of state to its initial condition."""
        self.snowflake.reset()
        self.objectid_random.reset()
        self.objectid_counter.reset()
        self.xid_machine.reset()
        self.xid_counter.reset()
        self.cuid_counter.reset()
        self.cuid2_counter.reset()


DEFAULT_STATES = GeneratorStates()


def reset_generator_state() -> None:
    """Reset the process-wide default generator state."""
    DEFAULT_STATES.reset()
