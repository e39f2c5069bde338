"""Base64 codec with the four RFC 4648 schemes.

WHY: Base64 is the most common way to move binary data through text-only
channels, but there are four incompatible flavours in everyday use
(standard vs URL-safe alphabet, padded vs unpadded). Silently accepting
the wrong flavour hides bugs, so each scheme is a distinct codec.

HOW: Base64Scheme enumerates the variants. _SCHEMES maps every scheme to
its alphabet pattern, alternate characters and padding rule. Decoding
checks the alphabet first, then hands the string to ``base64.b64decode``
with ``validate=True`` so padding mistakes are also rejected.

RULES:
- std / url schemes require correct "=" padding
- raw schemes reject any "=" character
- "-" and "_" are invalid under the standard alphabet, "+" and "/" are
  invalid under the URL-safe alphabet
- An unknown scheme raises UnknownSchemeError on decode and encode
"""

from __future__ import annotations

import base64
import binascii
import enum
import re
from dataclasses import dataclass, field, replace
from typing import Optional, Pattern

from binutil.codecs.base import Codec, preview
from binutil.errors import DecodeError, UnknownSchemeError


class Base64Scheme(str, enum.Enum):
    """Character set and padding variant of base64.

    Inherits from str so the scheme prints as its Go-style encoding name
    in error messages and the ``decoders`` listing.
    """

    STD = "StdEncoding"
    RAW_STD = "RawStdEncoding"
    URL = "URLEncoding"
    RAW_URL = "RawURLEncoding"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class _SchemeSpec:
    pattern: Pattern[str]
    altchars: Optional[bytes]
    padded: bool


_SCHEMES = {
    Base64Scheme.STD: _SchemeSpec(re.compile(r"[A-Za-z0-9+/]*={0,2}"), None, True),
    Base64Scheme.RAW_STD: _SchemeSpec(re.compile(r"[A-Za-z0-9+/]*"), None, False),
    Base64Scheme.URL: _SchemeSpec(re.compile(r"[A-Za-z0-9\-_]*={0,2}"), b"-_", True),
    Base64Scheme.RAW_URL: _SchemeSpec(re.compile(r"[A-Za-z0-9\-_]*"), b"-_", False),
}


@dataclass(frozen=True)
class Base64(Codec):
    """Encoder/decoder for base64 strings in one of the four schemes.

    Base64 is typically the first decoder or the final encoder of a
    pipeline; its binary form is simply the decoded bytes.
    """

    scheme: Base64Scheme = Base64Scheme.STD
    data: Optional[bytes] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return "Base64 ({})".format(self.scheme)

    @property
    def populated(self) -> bool:
        return self.data is not None

    def _spec(self) -> _SchemeSpec:
        spec = _SCHEMES.get(self.scheme)
        if spec is None:
            raise UnknownSchemeError("base64", self.scheme)
        return spec

    def decode_binary(self, data: bytes) -> "Base64":
        return replace(self, data=bytes(data))

    def decode_string(self, text: str) -> "Base64":
        spec = self._spec()
        if spec.pattern.fullmatch(text) is None:
            raise DecodeError(
                "illegal base64 data for {} scheme: {!r}".format(self.scheme, preview(text))
            )

        if spec.padded and text.endswith("=") and len(text.rstrip("=")) % 4 == 0:
            raise DecodeError(
                "illegal base64 data for {} scheme: padding after a complete quantum: {!r}".format(
                    self.scheme, preview(text))
            )
        if not spec.padded:
            text += "=" * (-len(text) % 4)

        try:
            data = base64.b64decode(text, altchars=spec.altchars, validate=True)
        except binascii.Error as err:
            raise DecodeError("illegal base64 data for {} scheme: {}".format(self.scheme, err)) from err
        return self.decode_binary(data)

    def encode_binary(self) -> bytes:
        self._require_data()
        return self.data

    def encode_string(self) -> str:
        self._require_data()
        spec = self._spec()
        out = base64.b64encode(self.data, altchars=spec.altchars).decode("ascii")
        if not spec.padded:
            out = out.rstrip("=")
        return out
