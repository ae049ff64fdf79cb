"""Target encodings for identifier re-encoding."""

from enum import StrEnum

from idkit.errors import InvalidArgumentError

__all__ = ["EncodingFormat"]


class EncodingFormat(StrEnum):
    """Textual renderings of an identifier's raw bytes.

    Attributes
    ----------
    CANONICAL : str
        The format's own canonical text.
    HEX : str
        Lowercase hex.
    HEX_UPPER : str
        Uppercase hex.
    BASE32 : str
        RFC 4648 base32, no padding.
    BASE32HEX : str
        Rendered with the RFC 4648 base32 alphabet.
    BASE58 : str
        Bitcoin-alphabet base58.
    BASE64 : str
        Standard base64 with padding.
    BASE64URL : str
        URL-safe base64 without padding.
    BINARY : str
        Raw bytes decoded as text (lossy).
    BITS : str
        Each byte as eight ``0``/``1`` characters, MSB first.
    INT : str
        Unsigned big-endian integer (up to 128 bits).
    BYTES : str
        Space-separated lowercase hex bytes.
    """

    CANONICAL = "canonical"
    HEX = "hex"
    HEX_UPPER = "hexupper"
    BASE32 = "base32"
    BASE32HEX = "base32hex"
    BASE58 = "base58"
    BASE64 = "base64"
    BASE64URL = "base64url"
    BINARY = "binary"
    BITS = "bits"
    INT = "int"
    BYTES = "bytes"

    @classmethod
    def from_name(cls, name: str) -> "EncodingFormat":
        """Resolve an encoding name or alias.

        Raises
        ------
        InvalidArgumentError
            If the name is not a known encoding.
        """
        if name.strip() == "HEX":
            return cls.HEX_UPPER
        fmt = _ALIASES.get(name.strip().lower())
        if fmt is None:
            raise InvalidArgumentError(f"Unknown encoding format: {name}")
        return fmt


_ALIASES: dict[str, EncodingFormat] = {
    "canonical": EncodingFormat.CANONICAL,
    "hex": EncodingFormat.HEX,
    "hexupper": EncodingFormat.HEX_UPPER,
    "hex-upper": EncodingFormat.HEX_UPPER,
    "base32": EncodingFormat.BASE32,
    "base32hex": EncodingFormat.BASE32HEX,
    "base32-hex": EncodingFormat.BASE32HEX,
    "base58": EncodingFormat.BASE58,
    "base64": EncodingFormat.BASE64,
    "base64url": EncodingFormat.BASE64URL,
    "base64-url": EncodingFormat.BASE64URL,
    "binary": EncodingFormat.BINARY,
    "bin": EncodingFormat.BINARY,
    "bits": EncodingFormat.BITS,
    "int": EncodingFormat.INT,
    "integer": EncodingFormat.INT,
    "bytes": EncodingFormat.BYTES,
}
