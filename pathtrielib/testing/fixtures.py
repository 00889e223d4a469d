"""Test fixtures for PathTrieLib consumers.

These fixtures provide controlled access to internal state for testing purposes
without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from ..core.node import ABSENT, TrieNode
from ..trie import PathTrie


class TrieTestHelper:
    """Public test fixture for trie invariant verification.

    Recomputes everything the trie keeps incrementally (value counts,
    pruning state, parent links) by brute force, so tests can compare the
    two after every mutation.

    Example:
        trie = PathTrie()
        helper = TrieTestHelper(trie)
        trie.set(["a", "b"], 1)
        assert helper.check_invariants() == []
        assert helper.brute_force_count(["a"]) == trie.count(["a"])
    """

    def __init__(self, trie: PathTrie):
        """Initialize with the trie under test.

        Args:
            trie: The PathTrie to inspect
        """
        self._trie = trie

    def get_node(self, path: Sequence[Hashable]) -> Optional[TrieNode]:
        """Return the internal node under ``path`` (None if missing)."""
        return self._trie.get_node(path)

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level trie state for testing.

        Returns:
            Dictionary containing:
            - total_nodes: Number of structural nodes, root included
            - value_nodes: Number of nodes holding a value
            - root_children: Number of top-level children
        """
        root = self._trie.get_node(())
        nodes = list(self._walk(root))
        return {
            'total_nodes': len(nodes),
            'value_nodes': sum(1 for node in nodes if node.value is not ABSENT),
            'root_children': len(root.children),
        }

    def brute_force_count(self, path: Sequence[Hashable] = (),
                          children_only: bool = False) -> int:
        """Count values under ``path`` by walking the whole subtree."""
        node = self._trie.get_node(path)
        if node is None:
            return 0
        count = sum(1 for n in self._walk(node) if n.value is not ABSENT)
        if children_only and node.value is not ABSENT:
            count -= 1
        return count

    def snapshot(self) -> Dict[Tuple[Hashable, ...], Any]:
        """Return every stored value keyed by its path."""
        root = self._trie.get_node(())
        return {
            node.path(): node.value
            for node in self._walk(root)
            if node.value is not ABSENT
        }

    def check_invariants(self) -> List[str]:
        """Check counting, pruning and linkage invariants.

        Returns:
            List of violations (empty if the trie is consistent)
        """
        violations = []
        root = self._trie.get_node(())

        if root.parent is not None:
            violations.append("root has a parent")

        for node in self._walk(root):
            path = node.path()
            expected = sum(
                1 for n in self._walk(node)
                if n is not node and n.value is not ABSENT
            )
            if node.populated_descendants != expected:
                violations.append(
                    f"{path!r}: populated_descendants={node.populated_descendants}, "
                    f"expected {expected}"
                )
            if node is not root and node.value is ABSENT and not node.children:
                violations.append(f"{path!r}: empty node was not pruned")
            for key, child in node.children.items():
                if child.parent is not node:
                    violations.append(f"{path + (key,)!r}: broken parent link")
                if child.key != key:
                    violations.append(f"{path + (key,)!r}: stored key {child.key!r}")

        return violations

    def _walk(self, node: TrieNode):
        """Yield ``node`` and all its descendants (iterative pre-order)."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(current.children.values())


def build_dfs_sample_trie(trie: Optional[PathTrie] = None) -> PathTrie:
    """Build the two-level sample trie used by traversal tests.

    Tree structure (values in parentheses):
    () (0)
    ├── 1 (1)
    │   ├── 11 (11)
    │   └── 12 (12)
    └── 2 (2)
        ├── 21 (21)
        └── 22 (22)
    """
    trie = trie if trie is not None else PathTrie()
    trie.set([], 0)
    trie.set(['1'], 1)
    trie.set(['2'], 2)
    trie.set(['1', '11'], 11)
    trie.set(['1', '12'], 12)
    trie.set(['2', '21'], 21)
    trie.set(['2', '22'], 22)
    return trie
