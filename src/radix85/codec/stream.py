"""Whole-buffer radix-85 encoder and decoder."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Union

from .alphabet import RADIX, Alphabet, ExceptionTable
from .errors import GroupOverflowError
from .group import ENCODE_BYTES, decode_group, encode_group, unpack_groups
from .length import LogicalLength, padding_bytes
from .types import DecodeErrorKind, DecodeResult

logger = logging.getLogger(__name__)

PAD_RAW = b"\0"
PAD_ENCODED = RADIX - 1

BytesLike = Union[bytes, bytearray, memoryview]


class Base85Codec:
    """Encode and decode byte strings with a configurable radix-85 alphabet.

    Args:
        chars: The 85 digit characters, or a prebuilt :class:`Alphabet`.
        pad_final_group: Keep the digits (on encode) and bytes (on decode)
            that only exist to complete the final group.
        exceptions: Group values to emit as one substitute character, such as
            ``{0: "z"}`` for runs of zero bytes.

    Raises:
        ConfigurationError: For an alphabet that is not 85 distinct characters
            or an exception that is not a single character.
    """

    def __init__(
        self,
        chars: Union[str, Alphabet],
        pad_final_group: bool = False,
        exceptions: Optional[Mapping[int, str]] = None,
    ) -> None:
        self.alphabet = chars if isinstance(chars, Alphabet) else Alphabet(chars)
        self.exceptions = (
            exceptions if isinstance(exceptions, ExceptionTable) else ExceptionTable(exceptions)
        )
        self.pad_final_group = bool(pad_final_group)
        self.exceptions.check_against(self.alphabet)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.alphabet.chars!r}, "
            f"pad_final_group={self.pad_final_group}, exceptions={dict(self.exceptions)!r})"
        )

    def encode(self, data: BytesLike) -> str:
        """Return the radix-85 text for *data*."""

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")
        raw = bytes(data)
        padding = padding_bytes(len(raw))
        strip = bool(padding) and not self.pad_final_group
        raw += PAD_RAW * padding

        last = len(raw) // 4 - 1
        parts: List[str] = []
        for index, group in enumerate(unpack_groups(raw)):
            substitute = self.exceptions.substitute(group)
            # a truncated final quintet cannot be a single exception character
            if substitute is not None and not (strip and index == last):
                parts.append(substitute)
            else:
                parts.append(encode_group(group, self.alphabet))

        encoded = "".join(parts)
        if strip:
            encoded = encoded[:-padding]
        return encoded

    def decode(self, text: Union[str, bytes]) -> DecodeResult:
        """Decode radix-85 *text* with any framing already removed.

        Never raises for malformed input; inspect :attr:`DecodeResult.failure`
        or call :meth:`DecodeResult.unwrap`.
        """

        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("latin-1")
        if not text:
            return DecodeResult.success(b"")

        char_map = self.alphabet.char_map
        ledger = LogicalLength(len(text))
        decoded = bytearray()
        group = 0
        pending = 0

        for position, char in enumerate(text):
            digit = char_map.get(char)
            if digit is not None:
                group = group * RADIX + digit
                pending += 1
                if pending == ENCODE_BYTES:
                    try:
                        decoded += decode_group(group)
                    except GroupOverflowError:
                        return self._failure(DecodeErrorKind.OVERFLOW, position)
                    group = 0
                    pending = 0
                continue

            substitute = self.exceptions.group_for(char)
            if substitute is None:
                return self._failure(DecodeErrorKind.UNRECOGNIZED_CHARACTER, position, char)
            if pending:
                return self._failure(DecodeErrorKind.MISPLACED_EXCEPTION, position, char)
            decoded += decode_group(substitute)
            ledger.compensate_exception()

        missing = ledger.missing_digits
        if missing:
            for _ in range(missing):
                group = group * RADIX + PAD_ENCODED
                ledger.add_synthetic_digit()
            try:
                decoded += decode_group(group)
            except GroupOverflowError:
                return self._failure(DecodeErrorKind.OVERFLOW, len(text))

        trailing = ledger.trailing_padding
        if trailing and not self.pad_final_group:
            del decoded[-trailing:]
        return DecodeResult.success(bytes(decoded))

    @staticmethod
    def _failure(
        kind: DecodeErrorKind, position: int, character: Optional[str] = None
    ) -> DecodeResult:
        result = DecodeResult.fail(kind, position, character)
        logger.debug("radix-85 decode rejected: %s", result.failure)
        return result


__all__ = ["Base85Codec", "PAD_ENCODED", "PAD_RAW"]
