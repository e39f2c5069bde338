"""Configuration constants and .env loading.

WHY: Centralizes the few tunable values (random-byte defaults, build
stamping, log level) so they are easy to find and override without
touching the CLI code.

HOW: python-dotenv loads a .env file on import. Constants are
module-level values read from the environment with ``os.getenv``.

RULES:
- Every value has a default; the tool works without a .env file
- BINUTIL_GIT_VERSION / BINUTIL_BUILD_DATE stamp the version string
- Integer overrides are validated by load_rand_size(), not at import
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the current working directory
load_dotenv()

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_RAND_SIZE = 16
"""Number of random bytes generated by ``binutil rand`` when unset."""

RAND_ENCODER = os.getenv("BINUTIL_RAND_ENCODER", "base64")
LOG_LEVEL = os.getenv("BINUTIL_LOG_LEVEL", "WARNING").upper()

PRETTY = "pretty"
"""Encoder name that selects the table view for generated identifiers."""

# ---------------------------------------------------------------------------
# Build stamping (set by the release process)
# ---------------------------------------------------------------------------

GIT_VERSION = os.getenv("BINUTIL_GIT_VERSION", "").strip()
BUILD_DATE = os.getenv("BINUTIL_BUILD_DATE", "").strip()


def load_rand_size() -> int:
    """Read the default ``rand`` size from BINUTIL_RAND_SIZE.

    RULES:
    - Unset or blank returns DEFAULT_RAND_SIZE
    - Non-integer or negative values raise ValueError
    """
    raw = os.getenv("BINUTIL_RAND_SIZE", "").strip()
    if not raw:
        return DEFAULT_RAND_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(
            "BINUTIL_RAND_SIZE must be an integer, got {!r}".format(raw)
        ) from None
    if size < 0:
        raise ValueError("BINUTIL_RAND_SIZE must not be negative, got {}".format(size))
    return size
