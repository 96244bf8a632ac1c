"""Shared test fixtures for the levelog test suite."""

import io

import pytest

from levelog import registry as _registry_mod
from levelog.registry import Registry


def pytest_configure(config):
    config.addinivalue_line("markers", "threaded: tests that start many threads")


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def bbuf():
    """A BytesIO buffer for capturing binary output."""
    return io.BytesIO()


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------
@pytest.fixture
def registry(buf):
    """A private Registry whose root writes to `buf` with default flags."""
    return Registry(out=buf)


@pytest.fixture
def bare_registry(buf):
    """A private Registry whose root writes to `buf` with no header flags.

    Lines come out as '<name> <tag><message>\\n', which keeps exact
    comparisons readable.
    """
    return Registry(out=buf, flags=0)


@pytest.fixture
def reset_singleton():
    """Save and restore the process-wide Registry around a test."""
    old = _registry_mod._registry
    yield
    _registry_mod._registry = old
