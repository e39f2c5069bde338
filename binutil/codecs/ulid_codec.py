"""ULID codec (Crockford base32 text, 16-byte binary).

WHY: ULIDs are sortable identifiers that share the 16-byte size of a
UUID, so they are frequently converted to UUID, hex or base64 form when
crossing system boundaries.

HOW: Wraps ``ulid.ULID`` from python-ulid. Text input is checked
against the strict ULID grammar before parsing so that the lenient
Crockford substitutions (I/L -> 1, O -> 0) and 128-bit overflow are
rejected instead of silently accepted.

RULES:
- Binary input must be exactly 16 bytes (48-bit timestamp + 80 bits of
  randomness, treated as opaque)
- Text input is exactly 26 Crockford base32 characters, case-insensitive,
  first character 0-7
- Text output is the canonical uppercase form
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ulid import ULID as _ULIDValue

from binutil.codecs.base import Codec, preview
from binutil.errors import DecodeError

ULID_SIZE = 16
ULID_TEXT_SIZE = 26

_ULID_PATTERN = re.compile(r"[0-7][0-9A-HJKMNP-TV-Z]{25}", re.IGNORECASE)


@dataclass(frozen=True)
class ULID(Codec):
    value: Optional[_ULIDValue] = None

    @property
    def name(self) -> str:
        return "ULID"

    @property
    def populated(self) -> bool:
        return self.value is not None

    def decode_binary(self, data: bytes) -> "ULID":
        if len(data) != ULID_SIZE:
            raise DecodeError(
                "invalid ULID (got {} bytes, expected {})".format(len(data), ULID_SIZE)
            )
        return ULID(value=_ULIDValue.from_bytes(bytes(data)))

    def decode_string(self, text: str) -> "ULID":
        if len(text) != ULID_TEXT_SIZE:
            raise DecodeError(
                "invalid ULID length {} (expected {})".format(len(text), ULID_TEXT_SIZE)
            )
        if _ULID_PATTERN.fullmatch(text) is None:
            raise DecodeError("invalid ULID characters: {!r}".format(preview(text)))

        try:
            value = _ULIDValue.from_str(text.upper())
        except ValueError as err:
            raise DecodeError("invalid ULID {!r}: {}".format(text, err)) from err
        return ULID(value=value)

    def encode_binary(self) -> bytes:
        self._require_data()
        return bytes(self.value)

    def encode_string(self) -> str:
        self._require_data()
        return str(self.value)
