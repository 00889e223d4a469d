"""The PathTrie: values indexed by sequences of key tokens.

A PathTrie keeps three things consistent after every public call:

- every node knows how many of its descendants hold a value, so counting
  and emptiness checks cost O(depth);
- a non-root node with no value and no children never survives (it is
  pruned together with any ancestor left in the same state);
- ABSENT, not None, is the only "no value" marker.

The trie is single-threaded by contract. Callers that share one across
threads must serialize access themselves.
"""

import logging
from typing import Any, Callable, Hashable, Iterator, List, Optional, Sequence, Tuple, Union

from .config import TrieConfig, VisitOrder, CountMode, parse_count_mode
from .core.fill import Continue, STOP
from .core.node import ABSENT, TrieNode
from .core.traverser import TrieVisitor, create_traverser
from .errors import (
    InvalidFillResultError,
    InvalidKeyError,
    TrieConfigError,
    TrieInternalError,
)

logger = logging.getLogger(__name__)


Path = Sequence[Hashable]

# get_or_set provider: called with the path, returns the value to store
TrieValueProvider = Callable[[Tuple[Hashable, ...]], Any]

# fill_path provider: (current value, prefix) -> Continue(value) or STOP
TriePathValueProvider = Callable[[Any, Sequence[Hashable]], Any]


class PathTrie:
    """A trie where every node holds a value or ABSENT.

    Only subtrees containing at least one value are kept in memory.
    Path keys follow dict semantics: equal keys such as ``1`` and ``True``
    name the same child.

    Example:
        >>> trie = PathTrie()
        >>> trie.set(["a", "b"], 1)
        >>> trie.get(["a", "b"])
        1
        >>> trie.count()
        1
    """

    def __init__(self, config: Optional[TrieConfig] = None):
        """Create an empty trie.

        Args:
            config: Trie configuration (defaults to TrieConfig())

        Raises:
            TrieConfigError: If the configuration is invalid
        """
        self.config = config or TrieConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise TrieConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        # Internal node that is never removed
        self._root = TrieNode()

    # ------------------------------------------------------------------
    # Point access
    # ------------------------------------------------------------------

    def get(self, path: Path, default: Any = ABSENT) -> Any:
        """Return the value stored under ``path``.

        Args:
            path: Key path
            default: Returned when there is no node or the node has no value

        Returns:
            The stored value (possibly None) or ``default``
        """
        node = self._find_node(path)
        if node is None or node.value is ABSENT:
            return default
        return node.value

    def set(self, path: Path, value: Any) -> None:
        """Store ``value`` under ``path``.

        Setting ABSENT clears the value and prunes nodes left empty; it
        never creates nodes.
        """
        if value is ABSENT:
            node = self._find_node(path)
            if node is not None:
                self._set_node_value(node, ABSENT)
                self._prune(node)
            return

        node = self._build_path(path)
        self._set_node_value(node, value)

    def get_or_set(self, path: Path, value_provider: TrieValueProvider) -> Any:
        """Return the value under ``path``, computing it if missing.

        ``value_provider`` is called at most once, and only when the node has
        no value. Its result (which may be ABSENT) is stored and returned.

        Args:
            path: Key path
            value_provider: Callable receiving the path as a tuple

        Returns:
            The existing value or the provider's result
        """
        node = self._build_path(path)
        if node.value is not ABSENT:
            return node.value

        try:
            new_value = value_provider(tuple(path))
            self._set_node_value(node, new_value)
        finally:
            # Drops the freshly built path if the provider gave ABSENT or raised
            self._prune(node)
        return new_value

    def delete(self, path: Path) -> None:
        """Remove the node under ``path`` and its whole subtree.

        Deleting the root path clears the trie but keeps the root node.

        Raises:
            TrieInternalError: If a parentless non-root node is found
        """
        node = self._find_node(path)
        if node is None:
            return

        if node.parent is None:
            if node is not self._root:
                logger.error("Parentless non-root node found at %r", tuple(path))
                raise TrieInternalError("Only the root node can have no parent")
            self._root.value = ABSENT
            self._root.children.clear()
            self._root.populated_descendants = 0
            logger.debug("Cleared trie root")
            return

        delta = (1 if node.value is not ABSENT else 0) + node.populated_descendants
        if delta > 0:
            self._update_ancestor_counts(node, -delta)

        parent = node.parent
        del parent.children[node.key]
        node.parent = None
        logger.debug("Deleted subtree at %r holding %d value(s)", tuple(path), delta)

        self._prune(parent)

    def clear(self) -> None:
        """Remove every node and value from the trie."""
        self.delete(())

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------

    def count(self, path: Path = (),
              mode: Union[CountMode, str] = CountMode.NODE_AND_CHILDREN) -> int:
        """Count values under ``path``.

        Args:
            path: Subtree root (default: whole trie)
            mode: NODE_AND_CHILDREN includes the node's own value,
                CHILDREN_ONLY counts descendants only

        Returns:
            Number of values, or 0 if there is no node at ``path``
        """
        mode = parse_count_mode(mode)
        node = self._find_node(path)
        if node is None:
            return 0
        if mode is CountMode.NODE_AND_CHILDREN and node.value is not ABSENT:
            return node.populated_descendants + 1
        return node.populated_descendants

    @property
    def is_empty(self) -> bool:
        """True if the trie holds no values."""
        return self.count() == 0

    # ------------------------------------------------------------------
    # Composite operations
    # ------------------------------------------------------------------

    def fill_path(self, path: Path, provider: TriePathValueProvider) -> None:
        """Fill every level of ``path`` with values chosen by ``provider``.

        The walk starts at the root (prefix ``()``) and goes one key at a
        time. At each level ``provider(current_value, prefix)`` is called
        before the node is created or changed, and must return either
        ``Continue(value)`` or ``STOP``. STOP ends the walk; levels already
        written keep their new values.

        Args:
            path: Key path to fill
            provider: Callable returning Continue(value) or STOP

        Raises:
            InvalidFillResultError: If the provider returns anything else
        """
        if self.config.validate_keys:
            self._validate_path(path)

        prefix: List[Hashable] = []
        node = self._root
        try:
            result = self._ask_provider(provider, node.value, prefix)
            if result is STOP:
                return
            self._set_node_value(node, result.value)

            for key in path:
                prefix.append(key)
                child = node.children.get(key)
                result = self._ask_provider(
                    provider, ABSENT if child is None else child.value, prefix
                )
                if result is STOP:
                    break
                if child is None:
                    child = TrieNode(key, node)
                    node.children[key] = child
                self._set_node_value(child, result.value)
                node = child
        finally:
            self._prune(node)

    def visit_dfs(self, order: Union[VisitOrder, str], visitor: TrieVisitor,
                  subtree_root_path: Path = ()) -> None:
        """Visit the subtree at ``subtree_root_path`` depth-first.

        Every node is reported, including nodes without a value. The
        visitor receives ``(value, absolute_path)``; returning ``False``
        stops the traversal at once. The trie must not be modified from
        inside the visitor.

        Args:
            order: VisitOrder.PRE_ORDER or VisitOrder.IN_ORDER (or string)
            visitor: Callback for each node
            subtree_root_path: Where to start (default: root)
        """
        traverser = create_traverser(order, self.config.reuse_path_buffer)
        node = self._find_node(subtree_root_path)
        if node is None:
            return
        traverser.visit(node, visitor, list(subtree_root_path))

    def iter_dfs(self, order: Union[VisitOrder, str] = VisitOrder.PRE_ORDER,
                 subtree_root_path: Path = ()) -> Iterator[Tuple[Tuple[Hashable, ...], Any]]:
        """Lazily iterate ``(path, value)`` pairs in depth-first order.

        Same order and coverage as visit_dfs. Stop by leaving the loop.
        The trie must not be modified while the iterator is in use; adding
        or removing a child under a node still being walked raises
        RuntimeError on the next step.
        """
        traverser = create_traverser(order)
        node = self._find_node(subtree_root_path)
        if node is None:
            return iter(())
        return (
            (node_path, visited.value)
            for node_path, visited in traverser.traverse(node, list(subtree_root_path))
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_node(self, path: Path) -> Optional[TrieNode]:
        """Return the internal node under ``path``.

        For testing and debugging only: the node hierarchy is consistent at
        the moment of the call but any later mutation may detach or replace
        the returned node. Never modify it.
        """
        return self._find_node(path)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, path: Path) -> bool:
        return self.get(path) is not ABSENT

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(count={self.count()})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _find_node(self, path: Path) -> Optional[TrieNode]:
        """Walk from the root following ``path``; never creates nodes."""
        node = self._root
        for key in path:
            node = node.children.get(key)
            if node is None:
                return None
        return node

    def _build_path(self, path: Path) -> TrieNode:
        """Walk ``path`` creating missing nodes (with ABSENT values)."""
        if self.config.validate_keys:
            self._validate_path(path)

        node = self._root
        for key in path:
            child = node.children.get(key)
            if child is None:
                child = TrieNode(key, node)
                node.children[key] = child
            node = child
        return node

    def _validate_path(self, path: Path) -> None:
        """Reject the whole path before any node is touched."""
        key_types = self.config.key_types
        for key in path:
            try:
                hash(key)
            except TypeError:
                raise InvalidKeyError(key, "key is not hashable") from None
            if key_types is not None and not isinstance(key, key_types):
                expected = ", ".join(t.__name__ for t in key_types)
                raise InvalidKeyError(key, f"expected one of: {expected}")

    def _ask_provider(self, provider: TriePathValueProvider, value: Any,
                      prefix: List[Hashable]) -> Any:
        snapshot = prefix if self.config.reuse_path_buffer else tuple(prefix)
        result = provider(value, snapshot)
        if result is STOP or isinstance(result, Continue):
            return result
        raise InvalidFillResultError(result, prefix)

    def _set_node_value(self, node: TrieNode, new_value: Any) -> None:
        """Assign a value and update ancestor counts. Does not prune."""
        had_value = node.value is not ABSENT
        has_value = new_value is not ABSENT
        node.value = new_value
        if had_value != has_value:
            self._update_ancestor_counts(node, 1 if has_value else -1)

    def _update_ancestor_counts(self, node: TrieNode, delta: int) -> None:
        """Add ``delta`` to populated_descendants of every ancestor.

        Raises:
            TrieInternalError: If a counter goes negative
        """
        parent = node.parent
        while parent is not None:
            parent.populated_descendants += delta
            if parent.populated_descendants < 0:
                logger.error(
                    "Negative populated descendant count at %r", parent.path()
                )
                raise TrieInternalError("Internal error: negative counter value")
            parent = parent.parent

    def _prune(self, node: TrieNode) -> None:
        """Detach ``node`` and its ancestors while they are empty.

        Only ancestors of ``node`` are examined; the root is never detached.
        """
        pruned = 0
        while node.parent is not None and node.value is ABSENT and not node.children:
            parent = node.parent
            del parent.children[node.key]
            node.parent = None
            node = parent
            pruned += 1
        if pruned:
            logger.debug("Pruned %d empty node(s)", pruned)
