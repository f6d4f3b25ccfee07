"""Parameterizable radix-85 binary-to-text codec."""

from .api import decode_result, decode_text, encode_text
from .codec import (
    Alphabet,
    Base85Codec,
    CodecError,
    DecodeError,
    DecodeErrorKind,
    DecodeFailure,
    DecodeResult,
    ExceptionTable,
)
from .exceptions import ChecksumMismatchError, ConfigurationError, Radix85Error
from .framing import (
    FormatError,
    Framing,
    FramingError,
    Guards,
    clean,
    format_text,
    generate_guards,
    parse_guards,
    validate_guards,
)
from .schemes import Scheme, SchemeCfg, get_codec

__all__ = [
    "Alphabet",
    "Base85Codec",
    "ChecksumMismatchError",
    "CodecError",
    "ConfigurationError",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeFailure",
    "DecodeResult",
    "ExceptionTable",
    "FormatError",
    "Framing",
    "FramingError",
    "Guards",
    "Radix85Error",
    "Scheme",
    "SchemeCfg",
    "clean",
    "decode_result",
    "decode_text",
    "encode_text",
    "format_text",
    "generate_guards",
    "get_codec",
    "parse_guards",
    "validate_guards",
]
