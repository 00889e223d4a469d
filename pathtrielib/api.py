"""High-level API for PathTrieLib.

This module provides simple, functional interfaces for common trie
operations. These functions wrap PathTrie traversal for ease of use in
simple cases.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, Optional, Sequence, Tuple, Union

from .config import TrieConfig, VisitOrder
from .core.node import ABSENT
from .core.traverser import create_traverser
from .trie import PathTrie


def from_items(
    items: Iterable[Tuple[Sequence[Hashable], Any]],
    config: Optional[TrieConfig] = None
) -> PathTrie:
    """Build a trie from ``(path, value)`` pairs.

    Later pairs overwrite earlier ones for the same path.

    Args:
        items: Iterable of (path, value) pairs
        config: Optional trie configuration

    Returns:
        A populated PathTrie

    Example:
        >>> trie = from_items([(["a"], 1), (["a", "b"], 2)])
        >>> trie.count()
        2
    """
    trie = PathTrie(config)
    for path, value in items:
        trie.set(path, value)
    return trie


def iter_items(
    trie: PathTrie,
    path: Sequence[Hashable] = (),
    order: Union[VisitOrder, str] = VisitOrder.PRE_ORDER
) -> Iterator[Tuple[Tuple[Hashable, ...], Any]]:
    """Iterate over the values stored under ``path``.

    Nodes without a value are skipped.

    Args:
        trie: Trie to read
        path: Subtree root (default: whole trie)
        order: Depth-first order

    Yields:
        Tuples of (absolute path, value)

    Example:
        >>> for item_path, value in iter_items(trie, ["users"]):
        ...     print("/".join(item_path), value)
    """
    for item_path, value in trie.iter_dfs(order, path):
        if value is not ABSENT:
            yield (item_path, value)


def find_paths(
    trie: PathTrie,
    predicate: Callable[[Any], bool],
    path: Sequence[Hashable] = (),
    order: Union[VisitOrder, str] = VisitOrder.PRE_ORDER
) -> Iterator[Tuple[Hashable, ...]]:
    """Find paths whose value matches a predicate.

    Args:
        trie: Trie to search
        predicate: Function that returns True for matching values
        path: Subtree root (default: whole trie)
        order: Depth-first order

    Yields:
        Paths of matching values
    """
    for item_path, value in iter_items(trie, path, order):
        if predicate(value):
            yield item_path


def get_leaf_paths(
    trie: PathTrie,
    path: Sequence[Hashable] = ()
) -> Iterator[Tuple[Hashable, ...]]:
    """Get the paths of all leaf nodes under ``path``.

    In a pruned trie every non-root leaf holds a value.
    """
    node = trie.get_node(path)
    if node is None:
        return
    stack = [(tuple(path), node)]
    while stack:
        node_path, current = stack.pop()
        if current.is_leaf():
            yield node_path
            continue
        # Reversed so that leaves come out in insertion order
        for key, child in reversed(list(current.children.items())):
            stack.append((node_path + (key,), child))


def count_nodes(trie: PathTrie, path: Sequence[Hashable] = ()) -> int:
    """Count structural nodes under ``path``, with or without values.

    Unlike PathTrie.count() this walks the subtree: O(subtree size).
    """
    count = 0
    for _ in trie.iter_dfs(VisitOrder.PRE_ORDER, path):
        count += 1
    return count


def get_trie_stats(trie: PathTrie, path: Sequence[Hashable] = ()) -> Dict[str, Any]:
    """Get statistics about a trie or one of its subtrees.

    Args:
        trie: Trie to inspect
        path: Subtree root (default: whole trie)

    Returns:
        Dictionary with trie statistics; depths are relative to ``path``

    Example:
        >>> stats = get_trie_stats(trie)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Values: {stats['value_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'value_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    base_depth = len(path)
    node = trie.get_node(path)
    if node is None:
        stats['internal_nodes'] = 0
        stats['average_branching'] = 0
        return stats

    for node_path, current in create_traverser(VisitOrder.PRE_ORDER).traverse(node, list(path)):
        depth = len(node_path) - base_depth
        stats['total_nodes'] += 1

        if current.has_value():
            stats['value_nodes'] += 1
        if current.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every node except the subtree root is some internal node's child
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
