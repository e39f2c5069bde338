"""Shared test fixtures for the binutil test suite.

HOW: ``fresh_registry`` swaps the process-wide registry for a new one so
tests that register codecs do not leak into each other.
"""

import pytest

from binutil.core import registry as registry_module


@pytest.fixture
def fresh_registry(monkeypatch):
    """Reset the process-wide registry; it is rebuilt lazily on first use."""
    monkeypatch.setattr(registry_module, "_default_registry", None)
    return registry_module.default_registry()
