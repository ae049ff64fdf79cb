"""Identifier codec and detection engine.

This package provides:
- Data models (idkit.models): ID kinds and result types
- Encoding (idkit.encoding): byte/base re-encoding and radix alphabets
- Codecs (idkit.codecs): per-format parse, canonicalize and inspect
- Detection (idkit.detection): ranked type guessing from surface syntax
- Registry (idkit.registry): kind to codec dispatch
- Generation (idkit.generate): thread-safe ID generators and their state
- Audit (idkit.audit): JSONL event logging
- CLI (idkit.cli): command-line interface
- Public API (idkit.api): high-level convenience functions
"""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("idkit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

from idkit.api import (
    compare_ids,
    convert_id,
    describe_kind,
    generate_ids,
    inspect_id,
    validate_id,
    validate_ids,
)
from idkit.audit import AuditLogger
from idkit.detection import detect_id_type
from idkit.encoding import EncodingFormat
from idkit.errors import (
    DetectionFailedError,
    EncodingError,
    GenerationError,
    IdkitError,
    InvalidArgumentError,
    ParseError,
    UnknownTypeError,
    ValidationError,
)
from idkit.generate import create_generator, reset_generator_state
from idkit.models import IdKind
from idkit.registry import parse_id

__all__ = [
    "__version__",
    # Core
    "parse_id",
    "detect_id_type",
    "create_generator",
    "reset_generator_state",
    # API
    "inspect_id",
    "validate_id",
    "validate_ids",
    "convert_id",
    "compare_ids",
    "generate_ids",
    "describe_kind",
    # Types
    "IdKind",
    "EncodingFormat",
    "AuditLogger",
    # Errors
    "IdkitError",
    "ParseError",
    "EncodingError",
    "UnknownTypeError",
    "InvalidArgumentError",
    "DetectionFailedError",
    "GenerationError",
    "ValidationError",
]
