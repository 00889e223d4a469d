"""Shared pytest configuration for the PathTrieLib test suite."""

import pytest

from pathtrielib import PathTrie
from pathtrielib.testing import TrieTestHelper


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running randomized tests (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def trie():
    """An empty PathTrie with default configuration."""
    return PathTrie()


@pytest.fixture
def helper(trie):
    """Invariant checker bound to the ``trie`` fixture."""
    return TrieTestHelper(trie)
