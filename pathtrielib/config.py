"""Configuration system for PathTrieLib.

This module defines how users tune a PathTrie: which keys are accepted,
and how paths are handed to callbacks. It also holds the enums naming
traversal orders and counting modes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, List, Union


class VisitOrder(Enum):
    """Depth-first visiting order.

    IN_ORDER is the tree in-order used by the trie: every child subtree
    is visited before the node itself.
    """
    PRE_ORDER = "pre-order"     # Node before children
    IN_ORDER = "in-order"       # Children before node


class CountMode(Enum):
    """What a count() call includes."""
    NODE_AND_CHILDREN = "node-and-children"   # The node itself plus descendants
    CHILDREN_ONLY = "children-only"           # Descendants only


# Primitive scalar key types accepted by a strict trie
DEFAULT_KEY_TYPES: Tuple[type, ...] = (str, int, float, bool, bytes)


@dataclass
class TrieConfig:
    """Complete configuration for a PathTrie.

    The defaults favour speed for reads and safety for callbacks: keys are
    not validated, and callbacks get an immutable tuple for each path.

    Keys are compared the way dict keys are. Keys that are equal and hash
    alike, such as ``1``, ``True`` and ``1.0``, address the same child, so
    the later write replaces the earlier value. Validation checks the type
    of a key only and does not keep such keys apart.
    """

    # Key validation on write operations (set, get_or_set, fill_path)
    validate_keys: bool = False
    key_types: Optional[Tuple[type, ...]] = DEFAULT_KEY_TYPES  # None = any hashable

    # Hand callbacks one shared, mutated list instead of a tuple per call
    reuse_path_buffer: bool = False

    @classmethod
    def strict(cls, key_types: Optional[Tuple[type, ...]] = DEFAULT_KEY_TYPES) -> 'TrieConfig':
        """Create config that rejects keys outside key_types.

        The default key types include bool, int and float. ``True``, ``1``
        and ``1.0`` are equal keys and share one node; pass a narrower
        ``key_types`` (for example ``(str,)``) where that matters.

        Args:
            key_types: Accepted key types (None = any hashable key)

        Returns:
            TrieConfig with key validation enabled
        """
        return cls(validate_keys=True, key_types=key_types)

    @classmethod
    def fast(cls) -> 'TrieConfig':
        """Create config tuned for large traversals.

        Callbacks receive a shared list that is only valid during the call.

        Returns:
            TrieConfig with path buffer reuse and no key validation
        """
        return cls(validate_keys=False, reuse_path_buffer=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.key_types is not None:
            if not isinstance(self.key_types, tuple):
                errors.append("key_types must be a tuple of types or None")
            elif not self.key_types:
                errors.append("key_types cannot be empty")
            elif not all(isinstance(t, type) for t in self.key_types):
                errors.append("key_types must only contain types")

        return errors


def parse_visit_order(order: Union[VisitOrder, str]) -> VisitOrder:
    """Parse visit order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        VisitOrder enum value
    """
    if isinstance(order, VisitOrder):
        return order

    order_map = {
        'pre-order': VisitOrder.PRE_ORDER,
        'preorder': VisitOrder.PRE_ORDER,
        'pre': VisitOrder.PRE_ORDER,
        'in-order': VisitOrder.IN_ORDER,
        'inorder': VisitOrder.IN_ORDER,
        'in': VisitOrder.IN_ORDER,
        'post-order': VisitOrder.IN_ORDER,
        'post': VisitOrder.IN_ORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown visit order: {order}")


def parse_count_mode(mode: Union[CountMode, str]) -> CountMode:
    """Parse count mode from string or enum.

    Args:
        mode: Mode as enum or string

    Returns:
        CountMode enum value
    """
    if isinstance(mode, CountMode):
        return mode

    if isinstance(mode, str):
        for candidate in CountMode:
            if candidate.value == mode.lower():
                return candidate

    raise ValueError(f"Unknown count mode: {mode}")
