"""High level radix-85 API combining codec and framing."""
from __future__ import annotations

import logging
from typing import Optional, Union

from .codec import DecodeResult
from .exceptions import ChecksumMismatchError
from .framing import EOL, Framing, clean, format_text, generate_guards, parse_guards
from .schemes import Scheme, get_codec, resolve_scheme, scheme_cfg

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def encode_text(
    data: BytesLike,
    scheme: Union[Scheme, str] = Scheme.ADOBE,
    *,
    line_length: Optional[int] = None,
    eol: str = EOL,
) -> str:
    """Encode *data* and frame it as *scheme* prescribes.

    ``line_length`` overrides the scheme's default wrapping column; ``0``
    disables wrapping.
    """

    cfg = scheme_cfg(scheme)
    body = get_codec(scheme).encode(data)
    wrap = cfg.line_length if line_length is None else line_length
    return format_text(body, cfg.framing, original=data, line_length=wrap, eol=eol)


def decode_result(
    text: Union[str, bytes],
    scheme: Union[Scheme, str] = Scheme.ADOBE,
    *,
    eol: str = EOL,
) -> DecodeResult:
    """Strip the framing of *text* and decode it without raising."""

    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    cfg = scheme_cfg(scheme)
    return get_codec(scheme).decode(clean(text, cfg.framing, eol=eol))


def decode_text(
    text: Union[str, bytes],
    scheme: Union[Scheme, str] = Scheme.ADOBE,
    *,
    verify: bool = False,
    eol: str = EOL,
) -> bytes:
    """Decode framed *text* back into bytes.

    Raises:
        DecodeError: If the body is not valid radix-85 text.
        FormatError: If ``verify`` is set for BTOA text with a malformed
            guard line.
        ChecksumMismatchError: If ``verify`` is set and the BTOA guards do
            not match the decoded bytes.
    """

    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    data = decode_result(text, scheme, eol=eol).unwrap()

    if not verify:
        return data
    if scheme_cfg(scheme).framing is not Framing.BTOA:
        logger.debug("scheme %s carries no guards; skipping verification", resolve_scheme(scheme).value)
    else:
        expected = parse_guards(text, eol=eol)
        actual = generate_guards(data)
        if actual != expected:
            raise ChecksumMismatchError(expected=expected, actual=actual)
        logger.debug("BTOA guards verified for %s bytes", expected.size_decimal)
    return data


__all__ = ["decode_result", "decode_text", "encode_text"]
