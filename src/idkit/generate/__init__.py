"""Thread-safe identifier generation.

Generators live in ``generators``, their shared counters and process
randomness in ``state``, and ``create_generator`` maps kinds to generators.
"""

from idkit.generate.config import NanoIdConfig, SnowflakeConfig
from idkit.generate.factory import GENERATOR_REGISTRY, create_generator
from idkit.generate.generators import (
    Cuid2Generator,
    CuidGenerator,
    IdGenerator,
    KsuidGenerator,
    NanoIdGenerator,
    ObjectIdGenerator,
    SnowflakeGenerator,
    TsidGenerator,
    TypeIdGenerator,
    UlidGenerator,
    UuidGenerator,
    XidGenerator,
)
from idkit.generate.state import (
    DEFAULT_STATES,
    AtomicCounter,
    Counter24,
    GeneratorStates,
    OnceCell,
    SnowflakeState,
    reset_generator_state,
)

__all__ = [
    # Factory
    "create_generator",
    "GENERATOR_REGISTRY",
    # Generators
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
    # Config
    "SnowflakeConfig",
    "NanoIdConfig",
    # State
    "SnowflakeState",
    "OnceCell",
    "Counter24",
    "AtomicCounter",
    "GeneratorStates",
    "DEFAULT_STATES",
    "reset_generator_state",
]
