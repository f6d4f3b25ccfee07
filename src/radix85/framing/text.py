"""Prefix/postfix wrapping and line framing of encoded text."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .guards import BTOA_PREFIX, EOL, format_guard_line, generate_guards

ADOBE_PREFIX = "<~"
ADOBE_POSTFIX = "~>"


class Framing(str, Enum):
    """How an encoded body is wrapped for transport as text."""

    NONE = "none"
    ADOBE = "adobe"
    BTOA = "btoa"


def _strip_whitespace(value: str) -> str:
    return "".join(value.split())


def wrap_lines(text: str, line_length: int = 0, eol: str = EOL) -> str:
    """Break *text* into lines of at most *line_length* characters."""

    if line_length < 0:
        raise ValueError("line_length must not be negative")
    if not line_length or len(text) <= line_length:
        return text
    return eol.join(text[i : i + line_length] for i in range(0, len(text), line_length))


def clean(text: str, framing: Union[Framing, str] = Framing.NONE, eol: str = EOL) -> str:
    """Return the bare encoded body of framed *text*.

    Whitespace, including line breaks left by :func:`wrap_lines`, is removed
    from the body for every framing.
    """

    framing = Framing(framing)
    if framing is Framing.ADOBE:
        text = text.strip()
        if text.startswith(ADOBE_PREFIX):
            text = text[len(ADOBE_PREFIX):]
        if text.endswith(ADOBE_POSTFIX):
            text = text[: -len(ADOBE_POSTFIX)]
    elif framing is Framing.BTOA:
        text = text.rstrip()
        line = text.find(eol)
        if line != -1:
            text = text[line + len(eol):]
            line = text.rfind(eol)
            if line != -1:
                text = text[:line]
    return _strip_whitespace(text)


def format_text(
    body: str,
    framing: Union[Framing, str] = Framing.NONE,
    original: Union[bytes, bytearray, memoryview] = b"",
    line_length: int = 0,
    eol: str = EOL,
) -> str:
    """Wrap an encoded *body* for *framing*.

    BTOA output ends with a guard line computed over *original*, the bytes
    that were encoded.
    """

    framing = Framing(framing)
    body = wrap_lines(body, line_length, eol)
    if framing is Framing.ADOBE:
        return ADOBE_PREFIX + body + ADOBE_POSTFIX
    if framing is Framing.BTOA:
        guard_line = format_guard_line(generate_guards(original))
        return BTOA_PREFIX + eol + body + eol + guard_line
    return body


__all__ = [
    "ADOBE_POSTFIX",
    "ADOBE_PREFIX",
    "Framing",
    "clean",
    "format_text",
    "wrap_lines",
]
