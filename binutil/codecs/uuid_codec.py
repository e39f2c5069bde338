"""RFC 4122 UUID codec.

WHY: UUIDs are stored as 16 bytes but read and logged as 36-character
hyphenated strings; converting between the two (and to hex or base64) is
a daily chore.

HOW: Wraps the standard library ``uuid.UUID``. The binary form is
``UUID.bytes``; the string form is ``str(UUID)``.

RULES:
- Binary input must be exactly 16 bytes
- String input is the hyphenated form, optionally wrapped in braces or
  prefixed with ``urn:uuid:``, or 32 bare hex digits; anything else
  (stray whitespace, signs, underscores) is a DecodeError
- String output is always the lowercase hyphenated form
- The version field is not validated; uuid4/uuid5 are aliases only
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import Optional

from binutil.codecs.base import Codec, preview
from binutil.errors import DecodeError

UUID_SIZE = 16

_HYPHENATED = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_UUID_PATTERN = re.compile(
    r"urn:uuid:{0}|\{{{0}\}}|{0}|[0-9a-f]{{32}}".format(_HYPHENATED),
    re.IGNORECASE,
)


@dataclass(frozen=True)
class UUID(Codec):
    value: Optional[uuid.UUID] = None

    @property
    def name(self) -> str:
        return "UUID"

    @property
    def populated(self) -> bool:
        return self.value is not None

    def decode_binary(self, data: bytes) -> "UUID":
        if len(data) != UUID_SIZE:
            raise DecodeError(
                "invalid UUID (got {} bytes, expected {})".format(len(data), UUID_SIZE)
            )
        return UUID(value=uuid.UUID(bytes=bytes(data)))

    def decode_string(self, text: str) -> "UUID":
        if _UUID_PATTERN.fullmatch(text) is None:
            raise DecodeError("invalid UUID format: {!r}".format(preview(text)))
        try:
            value = uuid.UUID(text.lower())
        except ValueError as err:
            raise DecodeError("invalid UUID {!r}: {}".format(preview(text), err)) from err
        return UUID(value=value)

    def encode_binary(self) -> bytes:
        self._require_data()
        return self.value.bytes

    def encode_string(self) -> str:
        self._require_data()
        return str(self.value)
