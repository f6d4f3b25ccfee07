"""Custom exception hierarchy for the radix-85 toolkit."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .framing.guards import Guards


class Radix85Error(Exception):
    """Base class for all radix-85 errors."""


class ConfigurationError(Radix85Error, ValueError):
    """Raised when a codec or scheme is configured with invalid values."""


@dataclass
class ChecksumMismatchError(Radix85Error):
    """Raised when decoded BTOA data does not match its guard line."""

    expected: "Guards"
    actual: "Guards"

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        mismatched = [
            name
            for name, want, got in zip(self.expected._fields, self.expected, self.actual)
            if want != got
        ]
        return "guard checksum mismatch: " + ", ".join(mismatched)


__all__ = [
    "ChecksumMismatchError",
    "ConfigurationError",
    "Radix85Error",
]
