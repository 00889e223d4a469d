"""TrieNode and the ABSENT marker for PathTrieLib.

The TrieNode is intentionally kept simple - it's a data container.
All mutation logic (counting, pruning) lives in PathTrie, which is the
only owner allowed to keep the node invariants consistent.
"""

from typing import Any, Dict, Hashable, Optional, Tuple


class _AbsentType:
    """Type of the ABSENT marker.

    ABSENT is distinct from every storable value, None included. A node
    holding ABSENT has no value: it is not counted and may be pruned.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_AbsentType, ())


ABSENT = _AbsentType()


class TrieNode:
    """A single node of a PathTrie.

    The parent owns its children through the ``children`` dict; the
    ``parent`` attribute is a navigational back-reference used to propagate
    counters and drive pruning upward.

    Attributes:
        key: Key under which this node is stored in its parent (None for root)
        value: Stored value, or ABSENT
        parent: Parent node (None only for the root)
        children: Insertion-ordered mapping of key -> child node
        populated_descendants: Number of descendants (any depth, excluding
            this node) whose value is not ABSENT
    """

    # Use __slots__ for memory efficiency and faster attribute access
    __slots__ = ('key', 'value', 'parent', 'children', 'populated_descendants')

    def __init__(self, key: Hashable = None, parent: Optional['TrieNode'] = None):
        self.key = key
        self.value: Any = ABSENT
        self.parent = parent
        self.children: Dict[Hashable, 'TrieNode'] = {}
        self.populated_descendants = 0

    def has_value(self) -> bool:
        """Check if this node holds a value (None counts as a value)."""
        return self.value is not ABSENT

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def path(self) -> Tuple[Hashable, ...]:
        """Return the key path from the root to this node.

        Walks the parent chain, so it costs O(depth).
        """
        keys = []
        node = self
        while node.parent is not None:
            keys.append(node.key)
            node = node.parent
        keys.reverse()
        return tuple(keys)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}(path={self.path()!r}, value={self.value!r}, "
            f"children={len(self.children)}, populated={self.populated_descendants})"
        )
