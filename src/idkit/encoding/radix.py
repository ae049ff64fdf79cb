"""Fixed-alphabet radix helpers.

Integer <-> text conversions for the alphabets embedded in identifier
formats: Crockford base32 (ULID/TSID/TypeID), base36 (CUID/CUID2),
base62 (KSUID) and the grouped base32hex layout used by Xid. Decoders check
alphabet membership before any arithmetic and raise ``ParseError``.
"""

from idkit.errors import ParseError

__all__ = [
    "CROCKFORD_ALPHABET",
    "TYPEID_ALPHABET",
    "BASE36_ALPHABET",
    "BASE62_ALPHABET",
    "XID_ALPHABET",
    "encode_crockford",
    "decode_crockford",
    "encode_typeid_suffix",
    "decode_typeid_suffix",
    "encode_base36",
    "pad_base36",
    "decode_base36",
    "encode_base62",
    "decode_base62",
    "encode_xid",
    "decode_xid",
]

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
TYPEID_ALPHABET = CROCKFORD_ALPHABET.lower()
BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
XID_ALPHABET = "0123456789abcdefghijklmnopqrstuv"

_CROCKFORD_INDEX = {ch: i for i, ch in enumerate(CROCKFORD_ALPHABET)}
_CROCKFORD_INDEX.update({"O": 0, "I": 1, "L": 1})
_TYPEID_INDEX = {ch: i for i, ch in enumerate(TYPEID_ALPHABET)}
_BASE36_INDEX = {ch: i for i, ch in enumerate(BASE36_ALPHABET)}
_BASE62_INDEX = {ch: i for i, ch in enumerate(BASE62_ALPHABET)}
_XID_INDEX = {ch: i for i, ch in enumerate(XID_ALPHABET)}

# Xid byte groups: (start, end, chars). Each group is rendered independently.
_XID_GROUPS = ((0, 2, 4), (2, 7, 8), (7, 12, 8))


def _encode_fixed(value: int, width: int, alphabet: str, bits: int) -> str:
    mask = (1 << bits) - 1
    chars = []
    for _ in range(width):
        chars.append(alphabet[value & mask])
        value >>= bits
    return "".join(reversed(chars))


def _decode_positional(
    text: str,
    index: dict[str, int],
    base: int,
    kind: str,
    label: str,
) -> int:
    value = 0
    for ch in text:
        digit = index.get(ch)
        if digit is None:
            raise ParseError(f"Invalid {label} character: '{ch}'", kind=kind, char=ch)
        value = value * base + digit
    return value


def encode_crockford(value: int, width: int) -> str:
    """Render *value* as *width* uppercase Crockford base32 characters."""
    return _encode_fixed(value, width, CROCKFORD_ALPHABET, 5)


def decode_crockford(text: str, kind: str, max_bits: int | None = None) -> int:
    """Decode Crockford base32 (case-insensitive, ``O``->0, ``I``/``L``->1).

    Parameters
    ----------
    text : str
        Encoded text.
    kind : str
        Format name attached to any ``ParseError``.
    max_bits : int | None, optional
        Reject values that do not fit in this many bits.

    Returns
    -------
    int
        Decoded unsigned value.

    Raises
    ------
    ParseError
        On invalid characters or overflow.
    """
    value = _decode_positional(text.upper(), _CROCKFORD_INDEX, 32, kind, "Crockford Base32")
    if max_bits is not None and value >> max_bits:
        raise ParseError(f"Value overflows {max_bits} bits", kind=kind)
    return value


def encode_typeid_suffix(value: int) -> str:
    """Render a 128-bit value as the 26-char lowercase TypeID suffix."""
    return _encode_fixed(value, 26, TYPEID_ALPHABET, 5)


def decode_typeid_suffix(text: str) -> int:
    """Decode a 26-char lowercase TypeID suffix into its 128-bit value.

    Raises
    ------
    ParseError
        On wrong length, characters outside the lowercase alphabet, or a
        leading character above ``7`` (value exceeds 128 bits).
    """
    if len(text) != 26:
        raise ParseError("TypeID suffix must be 26 characters", kind="typeid")
    value = _decode_positional(text, _TYPEID_INDEX, 32, "typeid", "TypeID Base32")
    if value >> 128:
        raise ParseError("TypeID suffix overflows 128 bits", kind="typeid", char=text[0])
    return value


def encode_base36(value: int) -> str:
    """Minimal lowercase base36 rendering of a non-negative integer."""
    if value == 0:
        return "0"
    chars = []
    while value > 0:
        value, rem = divmod(value, 36)
        chars.append(BASE36_ALPHABET[rem])
    return "".join(reversed(chars))


def pad_base36(value: int, width: int) -> str:
    """Base36 text of exactly *width* chars: zero-padded, or its last *width* chars."""
    text = encode_base36(value)
    if len(text) >= width:
        return text[-width:]
    return text.rjust(width, "0")


def decode_base36(text: str, kind: str, max_bits: int = 64) -> int:
    """Decode lowercase base36.

    Raises
    ------
    ParseError
        On invalid characters or a value wider than *max_bits*.
    """
    value = _decode_positional(text, _BASE36_INDEX, 36, kind, "base36")
    if value >> max_bits:
        raise ParseError(f"Value overflows {max_bits} bits", kind=kind)
    return value


def encode_base62(value: int, width: int = 27) -> str:
    """Fixed-width base62 rendering (``0-9A-Za-z``), left-padded with ``0``."""
    chars = []
    for _ in range(width):
        value, rem = divmod(value, 62)
        chars.append(BASE62_ALPHABET[rem])
    return "".join(reversed(chars))


def decode_base62(text: str, kind: str, max_bits: int = 160) -> int:
    """Decode base62 text.

    Raises
    ------
    ParseError
        On invalid characters or a value wider than *max_bits*.
    """
    value = _decode_positional(text, _BASE62_INDEX, 62, kind, "base62")
    if value >> max_bits:
        raise ParseError(f"Value overflows {max_bits} bits", kind=kind)
    return value


def encode_xid(data: bytes) -> str:
    """Render 12 Xid bytes as 20 base32hex characters.

    The bytes are split into three big-endian groups (2, 5 and 5 bytes) that
    are each encoded independently into 4, 8 and 8 characters.
    """
    parts = []
    for start, end, chars in _XID_GROUPS:
        group = int.from_bytes(data[start:end], "big")
        parts.append(_encode_fixed(group, chars, XID_ALPHABET, 5))
    return "".join(parts)


def decode_xid(text: str) -> bytes:
    """Decode 20 base32hex characters back into 12 Xid bytes.

    Excess high bits in the leading character of the first group are
    discarded, so every 20-char string over the alphabet decodes.

    Raises
    ------
    ParseError
        On wrong length or characters outside ``0-9a-v``.
    """
    if len(text) != 20:
        raise ParseError("Xid must be 20 characters", kind="xid")
    out = bytearray()
    offset = 0
    for start, end, chars in _XID_GROUPS:
        group = _decode_positional(text[offset : offset + chars], _XID_INDEX, 32, "xid", "xid")
        size = end - start
        group &= (1 << (size * 8)) - 1
        out += group.to_bytes(size, "big")
        offset += chars
    return bytes(out)
