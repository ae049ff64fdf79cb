"""Registry-based factory for generator instantiation.

New generator types are added by extending ``GENERATOR_REGISTRY``.
"""

from collections.abc import Callable
from functools import partial
from typing import Any

from idkit.errors import GenerationError, InvalidArgumentError
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
from idkit.models import IdKind

__all__ = ["GENERATOR_REGISTRY", "create_generator"]


def _uuid_generator(version: int = 4, **options: Any) -> UuidGenerator:
    return UuidGenerator(version=version, **options)


# kind → callable returning an IdGenerator
GENERATOR_REGISTRY: dict[IdKind, Callable[..., IdGenerator]] = {
    IdKind.UUID: _uuid_generator,
    IdKind.UUID_V1: partial(UuidGenerator, 1),
    IdKind.UUID_V4: partial(UuidGenerator, 4),
    IdKind.UUID_V6: partial(UuidGenerator, 6),
    IdKind.UUID_V7: partial(UuidGenerator, 7),
    IdKind.UUID_NIL: partial(UuidGenerator, 0),
    IdKind.UUID_MAX: partial(UuidGenerator, 255),
    IdKind.ULID: UlidGenerator,
    IdKind.NANOID: NanoIdGenerator,
    IdKind.KSUID: KsuidGenerator,
    IdKind.SNOWFLAKE: SnowflakeGenerator,
    IdKind.OBJECTID: ObjectIdGenerator,
    IdKind.TYPEID: TypeIdGenerator,
    IdKind.XID: XidGenerator,
    IdKind.CUID: CuidGenerator,
    IdKind.CUID2: Cuid2Generator,
    IdKind.TSID: TsidGenerator,
}


def create_generator(kind: IdKind | str, **options: Any) -> IdGenerator:
    """Instantiate a generator for *kind*.

    Parameters
    ----------
    kind : IdKind | str
        Format, or any name/alias accepted by ``IdKind.from_name``.
    **options : Any
        Keyword arguments forwarded to the generator constructor (e.g.
        ``prefix`` for TypeID, ``epoch`` for Snowflake, ``version`` for
        ``uuid``).

    Returns
    -------
    IdGenerator
        Ready-to-use generator.

    Raises
    ------
    UnknownTypeError
        If *kind* is not a known format name.
    GenerationError
        If the format has no generator (name-based UUID v3/v5).
    InvalidArgumentError
        If *options* are not accepted by the generator.
    """
    resolved = kind if isinstance(kind, IdKind) else IdKind.from_name(kind)
    factory = GENERATOR_REGISTRY.get(resolved)
    if factory is None:
        valid = ", ".join(str(k) for k in GENERATOR_REGISTRY)
        raise GenerationError(
            f"Generation not supported for {resolved}; use UuidGenerator for name-based "
            f"UUIDs. Valid types: {valid}"
        )
    try:
        return factory(**options)
    except TypeError as e:
        raise InvalidArgumentError(f"Invalid options for {resolved}: {e}") from e
