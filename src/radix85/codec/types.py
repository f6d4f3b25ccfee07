"""Result types for radix-85 decoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import DecodeError


class DecodeErrorKind(str, Enum):
    """Why a decode call was rejected."""

    UNRECOGNIZED_CHARACTER = "unrecognized-character"
    MISPLACED_EXCEPTION = "misplaced-exception"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class DecodeFailure:
    """A tagged decode failure.

    ``position`` is the index of the offending character in the encoded text.
    For an overflow in the padded trailing quintet it equals the text length.
    """

    kind: DecodeErrorKind
    position: int
    character: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is DecodeErrorKind.UNRECOGNIZED_CHARACTER:
            return f"unrecognized character {self.character!r} at position {self.position}"
        if self.kind is DecodeErrorKind.MISPLACED_EXCEPTION:
            return f"exception character {self.character!r} inside a quintet at position {self.position}"
        return f"quintet ending at position {self.position} overflows 32 bits"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of :meth:`Base85Codec.decode`.

    Exactly one of ``data`` (on success) or ``failure`` is meaningful; a failed
    result always carries empty ``data``.
    """

    data: bytes = b""
    failure: Optional[DecodeFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> bytes:
        """Return the decoded bytes or raise :class:`DecodeError`."""

        if self.failure is not None:
            raise DecodeError(self.failure)
        return self.data

    @classmethod
    def success(cls, data: bytes) -> "DecodeResult":
        return cls(data=bytes(data))

    @classmethod
    def fail(
        cls, kind: DecodeErrorKind, position: int, character: Optional[str] = None
    ) -> "DecodeResult":
        return cls(failure=DecodeFailure(kind=kind, position=position, character=character))


__all__ = ["DecodeErrorKind", "DecodeFailure", "DecodeResult"]
