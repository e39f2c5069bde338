"""Abstract codec contract shared by every format family.

WHY: The pipeline threads data through an arbitrary chain of formats
(base64, hex, text, UUID, ULID). It can only do that generically if every
format exposes the same four operations: decode from binary, decode from
a string, encode to binary, encode to a string.

HOW: Codec is an ABC. Concrete codecs are frozen dataclasses; a decode
call never mutates the receiver, it returns a *new* codec value holding
the canonical payload (an "encoded view"). The unpopulated codec acts as
a template carrying only its variant tag (scheme, charset).

RULES:
- decode_binary() and decode_string() return a new Codec, never self
- encode_binary() and encode_string() raise NoDataError on a template
  that was never populated; a zero-length payload is valid and encodes
  to b"" / ""
- Parser failures are raised as DecodeError chained to the original error
- Codecs are immutable, so a view can be shared between threads freely
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from binutil.errors import NoDataError


class Codec(ABC):
    """Abstract base for all codecs.

    To add a new format:
    1. Create a new module in codecs/
    2. Subclass Codec as a frozen dataclass
    3. Implement the four operations and ``name``
    4. Add it to BUILTIN_CODECS in codecs/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Base64 (URL-safe)'."""

    @property
    @abstractmethod
    def populated(self) -> bool:
        """True once a decode call has produced this view."""

    @abstractmethod
    def decode_binary(self, data: bytes) -> "Codec":
        """Wrap raw bytes as the canonical payload of a new view."""

    @abstractmethod
    def decode_string(self, text: str) -> "Codec":
        """Parse the textual form into the canonical payload of a new view."""

    @abstractmethod
    def encode_binary(self) -> bytes:
        """Return the canonical binary payload."""

    @abstractmethod
    def encode_string(self) -> str:
        """Return the codec's designated textual projection of the payload."""

    def _require_data(self) -> None:
        if not self.populated:
            raise NoDataError()


def preview(text: str, limit: int = 32) -> str:
    """Shorten long inputs so error messages stay on one line."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
