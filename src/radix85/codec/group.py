"""Conversions between 4-byte groups and radix-85 quintets."""

from __future__ import annotations

import struct
from typing import Iterable, Mapping

from .alphabet import DECODE_MAX, RADIX, Alphabet
from .errors import GroupOverflowError

ENCODE_BYTES = 5
DECODE_BYTES = 4

_GROUP = struct.Struct(">I")
_POWERS = tuple(RADIX**exponent for exponent in range(ENCODE_BYTES - 1, -1, -1))


def encode_group(group: int, alphabet: Alphabet) -> str:
    """Return the five alphabet characters for a 32-bit *group*.

    Digits are emitted most significant first.
    """

    if not 0 <= group <= DECODE_MAX:
        raise ValueError(f"group {group!r} is outside the 32-bit unsigned range")
    return "".join(alphabet[group // power % RADIX] for power in _POWERS)


def decode_group(group: int) -> bytes:
    """Return the four big-endian bytes of an accumulated quintet value.

    Raises:
        GroupOverflowError: If *group* does not fit in 32 unsigned bits, which
            happens for quintets that no encoder could have produced.
    """

    if group < 0 or group > DECODE_MAX:
        raise GroupOverflowError(f"quintet value {group} overflows 32 bits")
    return _GROUP.pack(group)


def unpack_groups(data: bytes) -> Iterable[int]:
    """Yield the big-endian 32-bit groups of *data* (length a multiple of 4)."""

    for (group,) in _GROUP.iter_unpack(data):
        yield group


def quintet_value(chars: str, char_map: Mapping[str, int]) -> int:
    """Fold alphabet characters into their accumulated radix-85 value."""

    value = 0
    for char in chars:
        value = value * RADIX + char_map[char]
    return value


__all__ = [
    "DECODE_BYTES",
    "ENCODE_BYTES",
    "decode_group",
    "encode_group",
    "quintet_value",
    "unpack_groups",
]
