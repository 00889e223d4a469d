"""Testing utilities for PathTrieLib consumers."""

from .fixtures import TrieTestHelper, build_dfs_sample_trie

__all__ = ['TrieTestHelper', 'build_dfs_sample_trie']
