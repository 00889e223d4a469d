"""Core building blocks for PathTrieLib.

This module contains the node type, the ABSENT marker, the fill result
types and the depth-first traversers used by PathTrie.
"""

from .node import ABSENT, TrieNode
from .fill import Continue, Stop, STOP
from .traverser import (
    TrieTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    create_traverser,
)

__all__ = [
    "ABSENT",
    "TrieNode",
    "Continue",
    "Stop",
    "STOP",
    "TrieTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "create_traverser",
]
