"""Custom exception hierarchy for the codec package."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import Radix85Error

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .types import DecodeFailure


class CodecError(Radix85Error):
    """Base class for codec-specific exceptions."""


class GroupOverflowError(CodecError):
    """Raised when an accumulated quintet exceeds the 32-bit unsigned range."""


class DecodeError(CodecError):
    """Raised by :meth:`DecodeResult.unwrap` for a failed decode."""

    def __init__(self, failure: "DecodeFailure") -> None:
        super().__init__(str(failure))
        self.failure = failure
