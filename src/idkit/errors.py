"""Exception taxonomy for idkit.

All errors raised by the engine derive from ``IdkitError`` so callers can
catch the whole family at once. Argument errors additionally subclass
``ValueError``.
"""

__all__ = [
    "IdkitError",
    "ParseError",
    "EncodingError",
    "UnknownTypeError",
    "InvalidArgumentError",
    "DetectionFailedError",
    "GenerationError",
    "ValidationError",
]


class IdkitError(Exception):
    """Base class for all idkit errors."""


class ParseError(IdkitError):
    """Raised when text is malformed for a given identifier format."""

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        char: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        kind : str | None, optional
            Name of the format being parsed.
        char : str | None, optional
            Offending character, when a single character caused the failure.
        """
        super().__init__(message)
        self.kind = kind
        self.char = char


class EncodingError(IdkitError):
    """Raised when a base-N decode fails."""


class UnknownTypeError(IdkitError, ValueError):
    """Raised for an unrecognized identifier type name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown ID type: {name}")
        self.name = name


class InvalidArgumentError(IdkitError, ValueError):
    """Raised for a bad option value (epoch, encoding name, length, ...)."""


class DetectionFailedError(IdkitError):
    """Raised when no format could be determined for an input."""

    def __init__(self, text: str | None = None) -> None:
        super().__init__("Detection failed: could not determine ID type")
        self.text = text


class GenerationError(IdkitError):
    """Raised when a format has no generator."""


class ValidationError(IdkitError):
    """Raised when one or more identifiers fail validation."""
