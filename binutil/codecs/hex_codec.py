"""Hexadecimal codec.

WHY: Hex is the most readable textual form of raw bytes and the usual
bridge when inspecting identifiers or keys byte by byte.

HOW: Parsing goes through ``binascii.unhexlify`` which, unlike
``bytes.fromhex``, rejects whitespace. Output is always lowercase.

RULES:
- Input must have an even number of hex digits; either case is accepted
- Output is lowercase digit pairs, "" for a zero-length payload
- No scheme variants
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass, field, replace
from typing import Optional

from binutil.codecs.base import Codec, preview
from binutil.errors import DecodeError


@dataclass(frozen=True)
class Hex(Codec):
    data: Optional[bytes] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return "Hexadecimal"

    @property
    def populated(self) -> bool:
        return self.data is not None

    def decode_binary(self, data: bytes) -> "Hex":
        return replace(self, data=bytes(data))

    def decode_string(self, text: str) -> "Hex":
        try:
            data = binascii.unhexlify(text)
        except ValueError as err:
            # binascii.Error subclasses ValueError; non-ASCII str raises plain ValueError
            raise DecodeError("invalid hex data {!r}: {}".format(preview(text), err)) from err
        return self.decode_binary(data)

    def encode_binary(self) -> bytes:
        self._require_data()
        return self.data

    def encode_string(self) -> str:
        self._require_data()
        return self.data.hex()
