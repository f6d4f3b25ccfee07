"""Radix-85 codec engine."""

from .alphabet import (
    ASCII85_CHARS,
    EXCEPTION_Y,
    EXCEPTION_Z,
    RFC1924_CHARS,
    Z85_CHARS,
    Alphabet,
    ExceptionTable,
)
from .errors import CodecError, DecodeError, GroupOverflowError
from .group import decode_group, encode_group, quintet_value
from .length import LogicalLength
from .stream import Base85Codec
from .types import DecodeErrorKind, DecodeFailure, DecodeResult

__all__ = [
    "ASCII85_CHARS",
    "Alphabet",
    "Base85Codec",
    "CodecError",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeFailure",
    "DecodeResult",
    "EXCEPTION_Y",
    "EXCEPTION_Z",
    "ExceptionTable",
    "GroupOverflowError",
    "LogicalLength",
    "RFC1924_CHARS",
    "Z85_CHARS",
    "decode_group",
    "encode_group",
    "quintet_value",
]
