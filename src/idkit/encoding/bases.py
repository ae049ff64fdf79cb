"""Byte/base encoder.

Pure functions converting raw identifier bytes to and from textual bases.
Decoders raise ``EncodingError`` carrying the underlying diagnostic.
"""

import base64
import binascii

from idkit.encoding.formats import EncodingFormat
from idkit.errors import EncodingError

__all__ = [
    "BASE58_ALPHABET",
    "INT_OVERFLOW",
    "encode_hex",
    "encode_hex_upper",
    "decode_hex",
    "encode_base32",
    "decode_base32",
    "encode_base58",
    "decode_base58",
    "encode_base64",
    "decode_base64",
    "encode_base64_url",
    "decode_base64_url",
    "encode_bits",
    "decode_bits",
    "encode_bytes_spaced",
    "bytes_to_int",
    "encode_bytes",
    "decode_bytes",
]

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {ch: i for i, ch in enumerate(BASE58_ALPHABET)}

# Returned by INT encoding when the payload exceeds 128 bits
INT_OVERFLOW = "overflow"


def _pad(text: str, block: int) -> str:
    return text + "=" * (-len(text) % block)


def encode_hex(data: bytes) -> str:
    """Lowercase hex."""
    return data.hex()


def encode_hex_upper(data: bytes) -> str:
    """Uppercase hex."""
    return data.hex().upper()


def decode_hex(text: str) -> bytes:
    """Decode hex (either case).

    Raises
    ------
    EncodingError
        On odd length or non-hex characters.
    """
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise EncodingError(f"Invalid hex: {e}") from e


def encode_base32(data: bytes) -> str:
    """RFC 4648 base32 without padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode_base32(text: str) -> bytes:
    """Decode RFC 4648 base32; padding is optional.

    Raises
    ------
    EncodingError
        On characters outside the alphabet or impossible lengths.
    """
    try:
        return base64.b32decode(_pad(text, 8), casefold=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid base32: {e}") from e


def encode_base58(data: bytes) -> str:
    """Bitcoin-alphabet base58; each leading zero byte becomes ``1``."""
    n = int.from_bytes(data, "big")
    chars: list[str] = []
    while n > 0:
        n, rem = divmod(n, 58)
        chars.append(BASE58_ALPHABET[rem])
    leading = len(data) - len(data.lstrip(b"\x00"))
    return BASE58_ALPHABET[0] * leading + "".join(reversed(chars))


def decode_base58(text: str) -> bytes:
    """Decode Bitcoin-alphabet base58.

    Raises
    ------
    EncodingError
        On characters outside the alphabet.
    """
    n = 0
    for position, ch in enumerate(text):
        value = _BASE58_INDEX.get(ch)
        if value is None:
            raise EncodingError(f"Invalid base58 character {ch!r} at index {position}")
        n = n * 58 + value
    leading = len(text) - len(text.lstrip(BASE58_ALPHABET[0]))
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    return b"\x00" * leading + body


def encode_base64(data: bytes) -> str:
    """Standard base64 with padding."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode standard base64.

    Raises
    ------
    EncodingError
        On invalid characters or padding.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid base64: {e}") from e


def encode_base64_url(data: bytes) -> str:
    """URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64_url(text: str) -> bytes:
    """Decode URL-safe base64; padding is optional.

    Raises
    ------
    EncodingError
        On invalid characters or impossible lengths.
    """
    if not set(text) <= _BASE64_URL_CHARS:
        raise EncodingError("Invalid base64url: characters outside the URL-safe alphabet")
    try:
        return base64.urlsafe_b64decode(_pad(text, 4))
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid base64url: {e}") from e


_BASE64_URL_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_="
)


def encode_bits(data: bytes) -> str:
    """Each byte as eight ``0``/``1`` characters, most significant bit first."""
    return "".join(f"{b:08b}" for b in data)


def encode_bytes_spaced(data: bytes) -> str:
    """Lowercase hex bytes separated by single spaces."""
    return " ".join(f"{b:02x}" for b in data)


def bytes_to_int(data: bytes) -> int | None:
    """Unsigned big-endian integer, or None above 16 bytes."""
    if len(data) > 16:
        return None
    return int.from_bytes(data, "big")


def encode_bytes(data: bytes, fmt: EncodingFormat) -> str:
    """Encode raw bytes in *fmt*.

    ``CANONICAL`` falls back to hex here; codecs substitute their own
    canonical text before reaching this function. ``BASE32HEX`` is rendered
    with the RFC 4648 alphabet.

    Parameters
    ----------
    data : bytes
        Raw identifier bytes.
    fmt : EncodingFormat
        Target encoding.

    Returns
    -------
    str
        Encoded text; ``"overflow"`` for ``INT`` above 128 bits.
    """
    if fmt in (EncodingFormat.CANONICAL, EncodingFormat.HEX):
        return encode_hex(data)
    if fmt is EncodingFormat.HEX_UPPER:
        return encode_hex_upper(data)
    if fmt in (EncodingFormat.BASE32, EncodingFormat.BASE32HEX):
        return encode_base32(data)
    if fmt is EncodingFormat.BASE58:
        return encode_base58(data)
    if fmt is EncodingFormat.BASE64:
        return encode_base64(data)
    if fmt is EncodingFormat.BASE64URL:
        return encode_base64_url(data)
    if fmt is EncodingFormat.BINARY:
        return data.decode("utf-8", errors="replace")
    if fmt is EncodingFormat.BITS:
        return encode_bits(data)
    if fmt is EncodingFormat.INT:
        value = bytes_to_int(data)
        return INT_OVERFLOW if value is None else str(value)
    return encode_bytes_spaced(data)


def decode_bits(text: str) -> bytes:
    """Decode groups of eight ``0``/``1`` characters.

    Raises
    ------
    EncodingError
        On other characters or a length that is not a multiple of eight.
    """
    if len(text) % 8 or not set(text) <= {"0", "1"}:
        raise EncodingError("Invalid bits: expected groups of eight '0'/'1' characters")
    return bytes(int(text[i : i + 8], 2) for i in range(0, len(text), 8))


def decode_bytes(text: str, fmt: EncodingFormat) -> bytes:
    """Decode *text* produced by ``encode_bytes(data, fmt)`` back to bytes.

    Raises
    ------
    EncodingError
        If *text* is not valid in *fmt*, or for ``INT``, whose byte length
        cannot be recovered from the number alone.
    """
    if fmt in (EncodingFormat.CANONICAL, EncodingFormat.HEX, EncodingFormat.HEX_UPPER):
        return decode_hex(text)
    if fmt in (EncodingFormat.BASE32, EncodingFormat.BASE32HEX):
        return decode_base32(text)
    if fmt is EncodingFormat.BASE58:
        return decode_base58(text)
    if fmt is EncodingFormat.BASE64:
        return decode_base64(text)
    if fmt is EncodingFormat.BASE64URL:
        return decode_base64_url(text)
    if fmt is EncodingFormat.BINARY:
        return text.encode("utf-8")
    if fmt is EncodingFormat.BITS:
        return decode_bits(text)
    if fmt is EncodingFormat.INT:
        raise EncodingError("Cannot decode int: byte length is not recoverable")
    return decode_hex(text.replace(" ", ""))
