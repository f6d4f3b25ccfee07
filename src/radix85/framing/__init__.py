"""Framing utilities for radix-85 encoded text."""

from .errors import FormatError, FramingError
from .guards import (
    BTOA_POSTFIX,
    BTOA_PREFIX,
    EOL,
    Guards,
    format_guard_line,
    generate_guards,
    parse_guards,
    validate_guards,
)
from .text import ADOBE_POSTFIX, ADOBE_PREFIX, Framing, clean, format_text, wrap_lines

__all__ = [
    "ADOBE_POSTFIX",
    "ADOBE_PREFIX",
    "BTOA_POSTFIX",
    "BTOA_PREFIX",
    "EOL",
    "FormatError",
    "Framing",
    "FramingError",
    "Guards",
    "clean",
    "format_guard_line",
    "format_text",
    "generate_guards",
    "parse_guards",
    "validate_guards",
    "wrap_lines",
]
