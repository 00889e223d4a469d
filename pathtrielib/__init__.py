"""PathTrieLib - Lightweight Path Trie for Python.

PathTrieLib indexes values by a sequence of key tokens (a "path") and keeps
only subtrees that hold at least one value.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from pathtrielib import PathTrie

    trie = PathTrie()
    trie.set(["users", 42], "alice")
    trie.count(["users"])             # 1
━━━━━━━━━━━━━━━━━━━━━━━━━━

"No value" is spelled ABSENT, so None can be stored like any other value.
"""

import logging

__version__ = "1.0.1"

from .config import (
    TrieConfig,
    VisitOrder,
    CountMode,
    DEFAULT_KEY_TYPES,
)
from .core import ABSENT, TrieNode, Continue, Stop, STOP
from .errors import (
    TrieError,
    TrieConfigError,
    InvalidKeyError,
    InvalidFillResultError,
    TrieInternalError,
)
from .trie import PathTrie
from .api import (
    from_items,
    iter_items,
    find_paths,
    get_leaf_paths,
    count_nodes,
    get_trie_stats,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "PathTrie",
    "TrieNode",
    "ABSENT",
    "Continue",
    "Stop",
    "STOP",
    # Config
    "TrieConfig",
    "VisitOrder",
    "CountMode",
    "DEFAULT_KEY_TYPES",
    # Errors
    "TrieError",
    "TrieConfigError",
    "InvalidKeyError",
    "InvalidFillResultError",
    "TrieInternalError",
    # API
    "from_items",
    "iter_items",
    "find_paths",
    "get_leaf_paths",
    "count_nodes",
    "get_trie_stats",
]
