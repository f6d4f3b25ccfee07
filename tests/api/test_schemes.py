import pytest

from radix85.codec import ASCII85_CHARS, RFC1924_CHARS, Z85_CHARS
from radix85.exceptions import ConfigurationError
from radix85.framing import Framing
from radix85.schemes import SCHEMES, Scheme, SchemeCfg, get_codec, resolve_scheme


def test_every_scheme_has_a_preset():
    assert set(SCHEMES) == set(Scheme)


def test_presets():
    assert SCHEMES[Scheme.ADOBE].chars == ASCII85_CHARS
    assert SCHEMES[Scheme.ADOBE].framing is Framing.ADOBE
    assert dict(SCHEMES[Scheme.BTOA].exceptions) == {0: "z", 0x20202020: "y"}
    assert SCHEMES[Scheme.BTOA].framing is Framing.BTOA
    assert SCHEMES[Scheme.Z85].chars == Z85_CHARS
    assert SCHEMES[Scheme.RFC1924].chars == RFC1924_CHARS
    assert not SCHEMES[Scheme.RFC1924].exceptions


def test_resolve_scheme():
    assert resolve_scheme("BTOA") is Scheme.BTOA
    assert resolve_scheme(Scheme.Z85) is Scheme.Z85
    with pytest.raises(ConfigurationError):
        resolve_scheme("base64")


def test_codecs_are_shared():
    assert get_codec("adobe") is get_codec(Scheme.ADOBE)
    assert get_codec(Scheme.ADOBE) is not get_codec(Scheme.ASCII85)


def test_scheme_cfg_builds_codec():
    cfg = SchemeCfg(Z85_CHARS, framing="adobe", pad_final_group=True)
    assert cfg.framing is Framing.ADOBE
    codec = cfg.build_codec()
    assert codec.pad_final_group
    assert codec.encode(b"a") == codec.encode(b"a\0\0\0")


def test_scheme_cfg_rejects_negative_line_length():
    with pytest.raises(ConfigurationError):
        SchemeCfg(Z85_CHARS, line_length=-1)
