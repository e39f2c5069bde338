"""Codec implementations and the builtin registration table.

WHY: The CLI and library callers refer to codecs by name ("b64", "uuid").
A single explicit table makes it trivial to add a format — create the
codec class, import it here, add one line — and avoids hidden
import-order dependencies between codec modules.

HOW: BUILTIN_CODECS lists (canonical name, factory, aliases) tuples.
Factories are zero-argument callables returning an unpopulated codec.
register_builtin_codecs() applies the table to a CodecRegistry; the
default registry calls it lazily on first use.

RULES:
- Canonical names are lowercase; they are what ``decoders`` lists
- Aliases resolve to the same factory but are never listed
- Codec modules must not register themselves on import
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Callable, List, Tuple

from binutil.codecs.base import Codec
from binutil.codecs.base64_codec import Base64, Base64Scheme
from binutil.codecs.hex_codec import Hex
from binutil.codecs.text import Text, TextEncoding
from binutil.codecs.ulid_codec import ULID
from binutil.codecs.uuid_codec import UUID

if TYPE_CHECKING:
    from binutil.core.registry import CodecRegistry

BUILTIN_CODECS: List[Tuple[str, Callable[[], Codec], Tuple[str, ...]]] = [
    ("base64", partial(Base64, Base64Scheme.STD), ("b64",)),
    ("base64-std", partial(Base64, Base64Scheme.STD), ("base64std", "b64std")),
    ("base64-raw", partial(Base64, Base64Scheme.RAW_STD), ("base64raw", "b64raw")),
    ("base64-url", partial(Base64, Base64Scheme.URL), ("base64url", "b64url")),
    ("base64-rawurl", partial(Base64, Base64Scheme.RAW_URL), ("base64rawurl", "b64rawurl")),
    ("hex", Hex, ()),
    ("text", partial(Text, TextEncoding.UTF8), ("txt",)),
    ("utf-8", partial(Text, TextEncoding.UTF8), ("utf8",)),
    ("ascii", partial(Text, TextEncoding.ASCII), ()),
    ("latin1", partial(Text, TextEncoding.LATIN1), ("latin-1", "iso-8859-1")),
    ("uuid", UUID, ("uuid4", "uuid5")),
    ("ulid", ULID, ()),
]


def register_builtin_codecs(registry: CodecRegistry) -> None:
    """Register every builtin codec family on ``registry``."""
    for name, factory, aliases in BUILTIN_CODECS:
        registry.register(name, factory, *aliases)


__all__ = [
    "BUILTIN_CODECS",
    "Base64",
    "Base64Scheme",
    "Codec",
    "Hex",
    "Text",
    "TextEncoding",
    "ULID",
    "UUID",
    "register_builtin_codecs",
]
