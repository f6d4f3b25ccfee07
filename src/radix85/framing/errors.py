"""Exception types for the framing subsystem."""

from __future__ import annotations

from ..exceptions import Radix85Error


class FramingError(Radix85Error):
    """Base class for framing related errors."""


class FormatError(FramingError):
    """Raised when a BTOA guard line does not follow the expected grammar."""
