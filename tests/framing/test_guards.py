import pytest
from hypothesis import given, strategies as st

from radix85.framing import (
    FormatError,
    Guards,
    format_guard_line,
    generate_guards,
    parse_guards,
    validate_guards,
)
from radix85.framing.guards import _rotate_left


def test_empty_guards():
    assert generate_guards(b"") == Guards("0", "0", "0", "0", "0")


def test_known_guards():
    guards = generate_guards(b"ab")
    assert guards == Guards("2", "2", "3", "c5", "124")
    assert guards.sum_hex == "c5"
    assert format_guard_line(guards) == "xbtoa End N 2 2 E 3 S c5 R 124"


def test_size_fields_are_decimal_and_hex():
    guards = generate_guards(bytes(300))
    assert guards.size_decimal == "300"
    assert guards.size_hex == "12c"
    assert guards.xor_hex == "0"
    assert guards.sum_hex == "12c"


def test_rotate_carries_high_bit():
    assert _rotate_left(0x80000000) == 1
    assert _rotate_left(0x40000000) == 0x80000000
    assert _rotate_left(0xFFFFFFFF) == 0xFFFFFFFF
    assert _rotate_left(0xC0000001) == 0x80000003


def test_rot_checksum_wraps_at_32_bits():
    guards = generate_guards(b"\xff" * 64)
    assert int(guards.rot_hex, 16) <= 0xFFFFFFFF


def test_parse_guards():
    text = "xbtoa Begin\n@:B\nxbtoa End N 2 2 E 3 S c5 R 124"
    assert parse_guards(text) == Guards("2", "2", "3", "c5", "124")


def test_parse_guards_is_case_insensitive_and_tolerates_spacing():
    text = "xbtoa Begin\n@:B\nXBTOA END  N 2   2 e 3 s C5 r 124\n"
    assert parse_guards(text) == Guards("2", "2", "3", "c5", "124")


def test_parse_guards_custom_eol():
    text = "xbtoa Begin\r\n@:B\r\nxbtoa End N 2 2 E 3 S c5 R 124\r\n"
    assert parse_guards(text, eol="\r\n") == Guards("2", "2", "3", "c5", "124")


@pytest.mark.parametrize(
    "text",
    [
        "xbtoa End N 2 2 E 3 S c5 R 124",
        "xbtoa Begin\n@:B\nxbtoa End N 2 2 E 3 S c5",
        "xbtoa Begin\n@:B\nxbtoa End N 2 2 E 3 S g5 R 124",
        "xbtoa Begin\n@:B\nxbtoa End N two 2 E 3 S c5 R 124",
        "xbtoa Begin\n@:B\n",
    ],
)
def test_parse_guards_rejects_malformed(text):
    with pytest.raises(FormatError):
        parse_guards(text)


def test_validate_guards():
    data = b"radix-85 payload"
    guards = generate_guards(data)
    assert validate_guards(data, guards)
    assert not validate_guards(data + b"!", guards)
    assert not validate_guards(b"radix-85 paylaod", guards)


@given(st.binary(min_size=1, max_size=128), st.integers(min_value=0), st.integers(1, 255))
def test_single_byte_mutation_is_detected(data, index, delta):
    guards = generate_guards(data)
    assert validate_guards(data, guards)
    mutated = bytearray(data)
    position = index % len(data)
    mutated[position] = (mutated[position] + delta) % 256
    assert not validate_guards(bytes(mutated), guards)
