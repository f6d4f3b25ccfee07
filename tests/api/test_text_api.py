import logging

import pytest
from hypothesis import given, strategies as st

from radix85 import (
    ChecksumMismatchError,
    ConfigurationError,
    DecodeError,
    DecodeErrorKind,
    FormatError,
    Scheme,
    decode_result,
    decode_text,
    encode_text,
    format_text,
    get_codec,
)
from radix85.framing import Framing


def test_adobe_text_roundtrip():
    assert encode_text(b"Man ", Scheme.ADOBE) == "<~9jqo^~>"
    assert decode_text("<~9jqo^~>", "adobe") == b"Man "


def test_empty_payload_for_every_scheme():
    for scheme in Scheme:
        assert decode_text(encode_text(b"", scheme), scheme) == b""


@given(st.binary(max_size=300), st.sampled_from(list(Scheme)))
def test_every_scheme_roundtrips(data, scheme):
    text = encode_text(data, scheme)
    assert decode_text(text, scheme, verify=True) == data


def test_btoa_text_is_wrapped():
    text = encode_text(bytes(range(256)), Scheme.BTOA)
    lines = text.split("\n")
    assert lines[0] == "xbtoa Begin"
    assert lines[-1].startswith("xbtoa End N 256 100 ")
    assert all(len(line) <= 78 for line in lines[1:-1])
    assert len(lines) > 3


def test_line_length_override():
    text = encode_text(bytes(range(64)), Scheme.ADOBE, line_length=20)
    assert "\n" in text
    assert decode_text(text, Scheme.ADOBE) == bytes(range(64))
    unwrapped = encode_text(bytes(range(256)), Scheme.BTOA, line_length=0)
    assert len(unwrapped.split("\n")) == 3
    assert "\n" not in encode_text(bytes(range(256)), Scheme.ASCII85, line_length=0)


def test_btoa_verification_detects_corruption():
    data = b"checksummed payload"
    body = get_codec(Scheme.BTOA).encode(data)
    forged = format_text(body, Framing.BTOA, original=b"something else")

    assert decode_text(forged, Scheme.BTOA) == data
    with pytest.raises(ChecksumMismatchError) as excinfo:
        decode_text(forged, Scheme.BTOA, verify=True)
    assert excinfo.value.actual.size_decimal == str(len(data))


def test_btoa_verification_requires_guard_line():
    text = "xbtoa Begin\n9jqo^\nxbtoa End N 4"
    assert decode_text(text, Scheme.BTOA) == b"Man "
    with pytest.raises(FormatError):
        decode_text(text, Scheme.BTOA, verify=True)


def test_decode_failures_raise_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        decode_text("<~9jqo^vv~>", Scheme.ADOBE)
    assert excinfo.value.failure.kind is DecodeErrorKind.UNRECOGNIZED_CHARACTER

    result = decode_result("<~9jqo^vv~>", Scheme.ADOBE)
    assert not result.ok
    assert result.failure.position == 5


def test_bytes_input_is_accepted():
    assert decode_text(b"<~9jqo^~>", Scheme.ADOBE) == b"Man "


def test_unknown_scheme():
    with pytest.raises(ConfigurationError):
        encode_text(b"data", "base91")


def test_verify_is_skipped_for_schemes_without_guards(caplog):
    text = encode_text(b"Man ", Scheme.Z85)
    with caplog.at_level(logging.DEBUG, logger="radix85.api"):
        assert decode_text(text, Scheme.Z85, verify=True) == b"Man "
    assert "z85 carries no guards" in caplog.text
