"""Length bookkeeping for padded final groups.

Encoding pads the input with zero bytes up to a whole group and, unless the
codec keeps padding, drops one trailing character per padding byte.  Decoding
has to undo that: it tracks a *logical* length in quintet characters, where a
single exception character counts as the full quintet it replaced, and an
*original* length that loses one unit per synthetic digit appended to finish a
partial quintet.  The difference between the two is the number of padding
bytes to drop from the decoded output.
"""

from __future__ import annotations

from .group import DECODE_BYTES, ENCODE_BYTES

EXCEPTION_COMPENSATION = ENCODE_BYTES - 1
"""Extra logical characters credited for one exception character."""


def padding_bytes(byte_count: int) -> int:
    """Return how many zero bytes complete the final group of *byte_count* bytes."""

    return -byte_count % DECODE_BYTES


class LogicalLength:
    """Running length ledger threaded through a single decode call."""

    __slots__ = ("length", "original")

    def __init__(self, encoded_chars: int) -> None:
        self.length = encoded_chars
        self.original = encoded_chars

    def compensate_exception(self) -> None:
        """Count an exception character as the quintet it stands for."""

        self.length += EXCEPTION_COMPENSATION
        self.original += EXCEPTION_COMPENSATION

    @property
    def missing_digits(self) -> int:
        """Digits needed to complete the trailing partial quintet."""

        return -self.length % ENCODE_BYTES

    def add_synthetic_digit(self) -> None:
        """Record one padding digit appended to the trailing quintet."""

        self.original -= 1

    @property
    def trailing_padding(self) -> int:
        """Bytes of decoded output that only exist because of padding."""

        return self.length - self.original

    def __repr__(self) -> str:
        return f"LogicalLength(length={self.length}, original={self.original})"


__all__ = ["EXCEPTION_COMPENSATION", "LogicalLength", "padding_bytes"]
