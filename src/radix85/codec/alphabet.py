"""Radix-85 alphabets and exception tables."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

RADIX = 85
DECODE_MAX = 0xFFFFFFFF

ALPHABET_ASCII_START = "!"
ALPHABET_ASCII_END = "u"
ALPHABET_SYM_Z85 = ".-:+=^!/*?&<>()[]{}@%$#"
ALPHABET_SYM_RFC_1924 = "!#$%&()*+-;<=>?@^_`{|}~"

_DIGITS = "0123456789"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = _LOWER.upper()

ASCII85_CHARS = "".join(
    chr(code) for code in range(ord(ALPHABET_ASCII_START), ord(ALPHABET_ASCII_END) + 1)
)
Z85_CHARS = _DIGITS + _LOWER + _UPPER + ALPHABET_SYM_Z85
RFC1924_CHARS = _DIGITS + _UPPER + _LOWER + ALPHABET_SYM_RFC_1924

EXCEPTION_Z = 0x00000000
EXCEPTION_Y = 0x20202020


class Alphabet:
    """An ordered set of 85 digit characters with its inverse char map.

    The char map is built once, here, and exposed read-only so a single
    instance can be shared freely between codecs and threads.
    """

    __slots__ = ("_chars", "_char_map")

    def __init__(self, chars: str) -> None:
        if not isinstance(chars, str):
            raise ConfigurationError("alphabet must be a string of 85 characters")
        if len(chars) != RADIX:
            raise ConfigurationError(
                f"alphabet must be a string of {RADIX} characters, got {len(chars)}"
            )
        char_map: Dict[str, int] = {}
        for digit, char in enumerate(chars):
            if char in char_map:
                raise ConfigurationError(f"alphabet repeats the character {char!r}")
            char_map[char] = digit
        self._chars = chars
        self._char_map: Mapping[str, int] = MappingProxyType(char_map)

    @property
    def chars(self) -> str:
        return self._chars

    @property
    def char_map(self) -> Mapping[str, int]:
        return self._char_map

    def __getitem__(self, digit: int) -> str:
        return self._chars[digit]

    def __contains__(self, char: object) -> bool:
        return char in self._char_map

    def __len__(self) -> int:
        return RADIX

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"


class ExceptionTable(Mapping[int, str]):
    """Group values that encode to a single substitute character.

    Behaves as a read-only mapping of group value to character; the
    character to group inverse used while decoding is kept alongside.
    """

    def __init__(self, exceptions: Optional[Mapping[int, str]] = None) -> None:
        forward: Dict[int, str] = {}
        inverse: Dict[str, int] = {}
        for group, char in (exceptions or {}).items():
            if not isinstance(group, int) or not 0 <= group <= DECODE_MAX:
                raise ConfigurationError(
                    "exceptions must map 32-bit unsigned integer values to a single character"
                )
            if not isinstance(char, str) or len(char) != 1:
                raise ConfigurationError(
                    "exceptions must map 32-bit integer values to a single character"
                )
            if char in inverse:
                raise ConfigurationError(f"exception character {char!r} is used twice")
            forward[group] = char
            inverse[char] = group
        self._forward: Mapping[int, str] = MappingProxyType(forward)
        self._inverse: Mapping[str, int] = MappingProxyType(inverse)

    def __getitem__(self, group: int) -> str:
        return self._forward[group]

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"ExceptionTable({dict(self._forward)!r})"

    def substitute(self, group: int) -> Optional[str]:
        """Return the character standing in for *group*, if any."""

        return self._forward.get(group)

    def group_for(self, char: str) -> Optional[int]:
        """Return the group value a substitute *char* stands for, if any."""

        return self._inverse.get(char)

    def check_against(self, alphabet: Alphabet) -> None:
        """Warn about substitute characters that shadow alphabet digits."""

        clashes = sorted(char for char in self._inverse if char in alphabet)
        if clashes:
            logger.warning(
                "exception characters %s are also alphabet digits and will never decode as exceptions",
                ", ".join(repr(char) for char in clashes),
            )


__all__ = [
    "ALPHABET_ASCII_END",
    "ALPHABET_ASCII_START",
    "ALPHABET_SYM_RFC_1924",
    "ALPHABET_SYM_Z85",
    "ASCII85_CHARS",
    "Alphabet",
    "DECODE_MAX",
    "EXCEPTION_Y",
    "EXCEPTION_Z",
    "ExceptionTable",
    "RADIX",
    "RFC1924_CHARS",
    "Z85_CHARS",
]
