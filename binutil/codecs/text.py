"""Plain text codec with charset conversion.

WHY: Text is the usual entry point of a pipeline ("encode this string as
base64") and the usual exit when the bytes are known to be text. Some
inputs come from legacy charsets such as Latin-1, so the codec also
transcodes between UTF-8 and a named charset.

HOW: TextEncoding enumerates the supported charsets; its values are
Python codec names. UTF-8 and ASCII pass through unchanged: the string
form is the payload decoded as UTF-8 with ``surrogateescape`` so any byte
sequence survives a string round trip. Other charsets are transcoded:
decode_string() normalizes the text to a UTF-8 payload, encode_string()
reads the payload through the view's charset.

RULES:
- decode_binary() wraps bytes unchanged and keeps the charset tag
- decode_string() always yields a UTF-8 payload tagged UTF8
- For non-UTF-8 charsets, text not representable in the charset is a
  DecodeError, payload bytes not valid in the charset an EncodeError
- ASCII is not validated (pass-through, same as UTF-8)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional

from binutil.codecs.base import Codec
from binutil.errors import DecodeError, EncodeError, UnknownSchemeError


class TextEncoding(str, enum.Enum):
    """Charsets the text codec converts to and from."""

    UTF8 = "utf-8"
    ASCII = "ascii"
    LATIN1 = "latin1"

    def __str__(self) -> str:
        return self.value


_PASSTHROUGH = frozenset({TextEncoding.UTF8, TextEncoding.ASCII})


@dataclass(frozen=True)
class Text(Codec):
    encoding: TextEncoding = TextEncoding.UTF8
    data: Optional[bytes] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return "Text ({})".format(self.encoding)

    @property
    def populated(self) -> bool:
        return self.data is not None

    def _charset(self) -> TextEncoding:
        try:
            return TextEncoding(self.encoding)
        except ValueError:
            raise UnknownSchemeError("text", self.encoding) from None

    def decode_binary(self, data: bytes) -> "Text":
        return replace(self, data=bytes(data))

    def decode_string(self, text: str) -> "Text":
        charset = self._charset()
        if charset not in _PASSTHROUGH:
            try:
                text.encode(charset.value)
            except UnicodeEncodeError as err:
                raise DecodeError("text is not valid {}: {}".format(charset, err)) from err

        try:
            data = text.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError as err:
            raise DecodeError("text cannot be encoded as utf-8: {}".format(err)) from err
        return replace(self, encoding=TextEncoding.UTF8, data=data)

    def encode_binary(self) -> bytes:
        self._require_data()
        return self.data

    def encode_string(self) -> str:
        self._require_data()
        charset = self._charset()
        if charset in _PASSTHROUGH:
            return self.data.decode("utf-8", "surrogateescape")

        try:
            return self.data.decode(charset.value)
        except UnicodeDecodeError as err:
            raise EncodeError("data is not valid {}: {}".format(charset, err)) from err
