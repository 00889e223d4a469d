"""Tests for TrieNode, ABSENT and the fill result types."""

import copy
import pickle

import pytest

from pathtrielib import ABSENT, STOP, Continue, Stop, TrieNode


class TestAbsent:
    """ABSENT is a falsy singleton distinct from None."""

    def test_is_not_none(self):
        assert ABSENT is not None
        assert ABSENT != None  # noqa: E711

    def test_is_falsy(self):
        assert not ABSENT

    def test_is_a_singleton(self):
        assert type(ABSENT)() is ABSENT
        assert copy.deepcopy(ABSENT) is ABSENT
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT

    def test_repr(self):
        assert repr(ABSENT) == "ABSENT"


class TestFillResults:
    """Test Continue and STOP."""

    def test_continue_holds_value(self):
        assert Continue(3).value == 3
        assert Continue(ABSENT).value is ABSENT
        assert Continue(None) == Continue(None)

    def test_continue_is_frozen(self):
        with pytest.raises(AttributeError):
            Continue(1).value = 2

    def test_stop_is_a_singleton(self):
        assert Stop() is STOP
        assert repr(STOP) == "STOP"


class TestTrieNode:
    """Test node helpers."""

    def test_new_node_is_empty(self):
        node = TrieNode()
        assert node.value is ABSENT
        assert node.has_value() is False
        assert node.is_leaf() is True
        assert node.is_root() is True
        assert node.populated_descendants == 0
        assert node.path() == ()

    def test_path_follows_parents(self, trie):
        trie.set(['a', 'b', 'c'], 1)
        node = trie.get_node(['a', 'b', 'c'])
        assert node.path() == ('a', 'b', 'c')
        assert node.key == 'c'
        assert not node.is_root()
        assert node.has_value()
        assert not trie.get_node(['a']).is_leaf()

    def test_none_counts_as_a_value(self):
        node = TrieNode()
        node.value = None
        assert node.has_value() is True

    def test_uses_slots(self):
        assert hasattr(TrieNode, "__slots__")
        with pytest.raises(AttributeError):
            TrieNode().extra = 1

    def test_repr(self, trie):
        trie.set(['a'], 5)
        assert repr(trie.get_node(['a'])) == (
            "TrieNode(path=('a',), value=5, children=0, populated=0)"
        )
