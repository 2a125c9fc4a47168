"""
Pytest configuration and shared fixtures for merkletree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from MERKLETREE_* environment variables
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import CANONICAL_RECORDS, make_tree  # noqa: E402

from merkletree.config import RuntimeConfig, set_default_config  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Clear env overrides and reset the global default config."""
    for name in (
        "MERKLETREE_LOG_LEVEL",
        "MERKLETREE_TRACE_BUILD",
        "MERKLETREE_RECORD_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def runtime_config():
    """Provide a default RuntimeConfig."""
    return RuntimeConfig()


@pytest.fixture
def canonical_tree():
    """Provide a tree built from the canonical four records."""
    return make_tree(CANONICAL_RECORDS)


@pytest.fixture
def empty_tree():
    """Provide a tree built from no records."""
    return make_tree([])


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
