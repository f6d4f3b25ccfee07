"""Named radix-85 variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Dict, Mapping, Union

from .codec import (
    ASCII85_CHARS,
    EXCEPTION_Y,
    EXCEPTION_Z,
    RFC1924_CHARS,
    Z85_CHARS,
    Base85Codec,
)
from .exceptions import ConfigurationError
from .framing import Framing


class Scheme(str, Enum):
    """Historical radix-85 variants."""

    ASCII85 = "ascii85"
    ADOBE = "adobe"
    BTOA = "btoa"
    Z85 = "z85"
    RFC1924 = "rfc1924"


@dataclass(frozen=True)
class SchemeCfg:
    """Alphabet, exception table and framing of one variant."""

    chars: str
    exceptions: Mapping[int, str] = field(default_factory=dict)
    framing: Framing = Framing.NONE
    pad_final_group: bool = False
    line_length: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "framing", Framing(self.framing))
        if self.line_length < 0:
            raise ConfigurationError("line_length must not be negative")

    def build_codec(self) -> Base85Codec:
        return Base85Codec(
            self.chars,
            pad_final_group=self.pad_final_group,
            exceptions=self.exceptions,
        )


SCHEMES: Dict[Scheme, SchemeCfg] = {
    Scheme.ASCII85: SchemeCfg(ASCII85_CHARS, {EXCEPTION_Z: "z"}),
    Scheme.ADOBE: SchemeCfg(ASCII85_CHARS, {EXCEPTION_Z: "z"}, Framing.ADOBE),
    Scheme.BTOA: SchemeCfg(
        ASCII85_CHARS,
        {EXCEPTION_Z: "z", EXCEPTION_Y: "y"},
        Framing.BTOA,
        line_length=78,
    ),
    Scheme.Z85: SchemeCfg(Z85_CHARS),
    Scheme.RFC1924: SchemeCfg(RFC1924_CHARS),
}


def resolve_scheme(scheme: Union[Scheme, str]) -> Scheme:
    """Return the :class:`Scheme` named by *scheme* (case-insensitive)."""

    if isinstance(scheme, Scheme):
        return scheme
    try:
        return Scheme(str(scheme).lower())
    except ValueError:
        known = ", ".join(member.value for member in Scheme)
        raise ConfigurationError(f"unknown scheme {scheme!r}; expected one of: {known}") from None


def scheme_cfg(scheme: Union[Scheme, str]) -> SchemeCfg:
    return SCHEMES[resolve_scheme(scheme)]


@lru_cache(maxsize=None)
def _codec_for(scheme: Scheme) -> Base85Codec:
    return SCHEMES[scheme].build_codec()


def get_codec(scheme: Union[Scheme, str]) -> Base85Codec:
    """Return the shared codec for *scheme*."""

    return _codec_for(resolve_scheme(scheme))


__all__ = ["SCHEMES", "Scheme", "SchemeCfg", "get_codec", "resolve_scheme", "scheme_cfg"]
