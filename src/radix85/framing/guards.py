"""BTOA length and checksum guards."""

from __future__ import annotations

import re
from typing import NamedTuple, Union

from .errors import FormatError

EOL = "\n"
BTOA_PREFIX = "xbtoa Begin"
BTOA_POSTFIX = "xbtoa End"

_MASK32 = 0xFFFFFFFF
_HEX = "[0-9a-f]+"
_GUARD_PATTERN = re.compile(
    "^" + re.escape(BTOA_POSTFIX) + "[ ]+"
    + r"N[ ]+(\d+)[ ]+(" + _HEX + ")[ ]+"
    + "E[ ]+(" + _HEX + ")[ ]+"
    + "S[ ]+(" + _HEX + ")[ ]+"
    + "R[ ]+(" + _HEX + ")$",
    re.IGNORECASE,
)


class Guards(NamedTuple):
    """Original length and checksums of a BTOA payload, as printed."""

    size_decimal: str
    size_hex: str
    xor_hex: str
    sum_hex: str
    rot_hex: str


def _rotate_left(value: int) -> int:
    return ((value << 1) | (value >> 31)) & _MASK32


def generate_guards(data: Union[bytes, bytearray, memoryview]) -> Guards:
    """Compute the guards for *data*.

    The xor, sum of ``byte + 1`` and rotate-then-add accumulators all wrap at
    32 bits.
    """

    raw = bytes(data)
    check_xor = check_sum = check_rot = 0
    for byte in raw:
        check_xor ^= byte
        check_sum = (check_sum + byte + 1) & _MASK32
        check_rot = (_rotate_left(check_rot) + byte) & _MASK32

    size = len(raw)
    return Guards(
        size_decimal=str(size),
        size_hex=f"{size:x}",
        xor_hex=f"{check_xor:x}",
        sum_hex=f"{check_sum:x}",
        rot_hex=f"{check_rot:x}",
    )


def parse_guards(text: str, eol: str = EOL) -> Guards:
    """Read the guards from the final line of a BTOA encoded *text*.

    Raises:
        FormatError: If there is no line break or the last line is not a
            well formed ``xbtoa End`` guard line.
    """

    text = text.rstrip()
    line = text.rfind(eol)
    if line == -1:
        raise FormatError("Invalid ASCII85 BTOA encoded data: missing guard line")

    guard_line = text[line + len(eol):].strip()
    match = _GUARD_PATTERN.match(guard_line)
    if match is None:
        raise FormatError(f"Invalid ASCII85 BTOA guard line: {guard_line!r}")

    size_decimal, *hex_fields = match.groups()
    return Guards(size_decimal, *(field.lower() for field in hex_fields))


def validate_guards(data: Union[bytes, bytearray, memoryview], guards: Guards) -> bool:
    """Return ``True`` when *guards* describe *data*."""

    return generate_guards(data) == tuple(guards)


def format_guard_line(guards: Guards) -> str:
    """Render the ``xbtoa End`` trailer for *guards*."""

    return "{} N {} {} E {} S {} R {}".format(BTOA_POSTFIX, *guards)


__all__ = [
    "BTOA_POSTFIX",
    "BTOA_PREFIX",
    "EOL",
    "Guards",
    "format_guard_line",
    "generate_guards",
    "parse_guards",
    "validate_guards",
]
