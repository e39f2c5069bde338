"""Thread-safe name -> codec factory registry.

WHY: Users name codecs on the command line ("b64", " UUID ") and library
callers build pipelines from lists of names. The registry resolves those
names to fresh, unpopulated codec instances.

HOW: CodecRegistry stores one _Entry per normalized name (stripped,
case-folded). Aliases share the canonical name's factory but are flagged
so names() can skip them. Every read and write holds ``self._lock``.
The process-wide default registry is created lazily, under its own lock,
and populated from the builtin table on first use.

RULES:
- Names are case-insensitive and surrounding whitespace is ignored
- Registering an existing name silently replaces it (last write wins)
- names() returns canonical names only, sorted, without duplicates
- new_codec() raises UnknownCodecError carrying the normalized name
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from binutil.codecs import register_builtin_codecs
from binutil.codecs.base import Codec
from binutil.errors import UnknownCodecError

CodecFactory = Callable[[], Codec]


def normalize_name(name: str) -> str:
    """Strip surrounding whitespace and case-fold a codec name."""
    return name.strip().lower()


@dataclass(frozen=True)
class _Entry:
    factory: CodecFactory
    alias: bool


class CodecRegistry:
    """Mapping of codec names (and aliases) to codec factories.

    WHY: Several independent codec families populate the registry and
    many callers read it; a lock keeps readers from ever observing a
    half-written entry regardless of registration order.

    RULES:
    - All public methods acquire self._lock
    - Factories are called outside the lock
    """

    def __init__(self) -> None:
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def register(self, name: str, factory: CodecFactory, *aliases: str) -> None:
        """Register ``factory`` under ``name`` and every alias."""
        with self._lock:
            self._entries[normalize_name(name)] = _Entry(factory=factory, alias=False)
            for alias in aliases:
                self._entries[normalize_name(alias)] = _Entry(factory=factory, alias=True)

    def new_codec(self, name: str) -> Codec:
        """Return a fresh, unpopulated codec for ``name``."""
        key = normalize_name(name)
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            raise UnknownCodecError(key)
        return entry.factory()

    def names(self) -> List[str]:
        """Sorted canonical names (aliases excluded)."""
        with self._lock:
            return sorted(key for key, entry in self._entries.items() if not entry.alias)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return normalize_name(name) in self._entries


# ---------------------------------------------------------------------------
# Process-wide default registry
# ---------------------------------------------------------------------------

_default_registry: Optional[CodecRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> CodecRegistry:
    """Return the process-wide registry, creating it on first use.

    The builtin codecs are registered before the registry is published,
    so no caller can see it partially populated.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                registry = CodecRegistry()
                register_builtin_codecs(registry)
                _default_registry = registry
    return _default_registry


def register(name: str, factory: CodecFactory, *aliases: str) -> None:
    """Register a codec factory on the default registry."""
    default_registry().register(name, factory, *aliases)


def new_codec(name: str) -> Codec:
    """Resolve ``name`` on the default registry."""
    return default_registry().new_codec(name)


def codec_names() -> List[str]:
    """Canonical codec names on the default registry, sorted."""
    return default_registry().names()
