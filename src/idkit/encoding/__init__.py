"""Byte/base encoding layer.

Re-encodes raw identifier bytes into textual bases, and provides the
fixed-alphabet radix helpers used by individual codecs.
"""

from idkit.encoding.bases import (
    BASE58_ALPHABET,
    INT_OVERFLOW,
    bytes_to_int,
    decode_base32,
    decode_base58,
    decode_base64,
    decode_base64_url,
    decode_bits,
    decode_bytes,
    decode_hex,
    encode_base32,
    encode_base58,
    encode_base64,
    encode_base64_url,
    encode_bits,
    encode_bytes,
    encode_bytes_spaced,
    encode_hex,
    encode_hex_upper,
)
from idkit.encoding.formats import EncodingFormat

__all__ = [
    "EncodingFormat",
    "BASE58_ALPHABET",
    "INT_OVERFLOW",
    "encode_bytes",
    "decode_bytes",
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
]
