"""Depth-first traversal strategies for PathTrieLib.

Traversers walk a subtree of TrieNodes in pre-order or in-order (children
before node). Each offers two entry points:

- ``visit()``: callback style. The visitor returns ``False`` to halt, which
  abandons the whole walk so that no sibling or ancestor is visited
  afterwards.
- ``traverse()``: generator style. The consumer halts by leaving the loop.

Both keep an explicit stack of child iterators instead of recursing, so
depth is bounded by memory rather than the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterator, List, Sequence, Tuple, Union

from .node import TrieNode
from ..config import VisitOrder, parse_visit_order


# Visitor signature: (value, path) -> False to stop, anything else to go on
TrieVisitor = Callable[[Any, Sequence[Hashable]], Any]


class TrieTraverser(ABC):
    """Abstract base class for trie traversal strategies."""

    def __init__(self, reuse_path_buffer: bool = False):
        """Initialize traverser.

        Args:
            reuse_path_buffer: Pass visitors the shared path list instead
                of a tuple snapshot
        """
        self.reuse_path_buffer = reuse_path_buffer

    @abstractmethod
    def visit(self, node: TrieNode, visitor: TrieVisitor, path: List[Hashable]) -> bool:
        """Visit ``node`` and its descendants.

        Args:
            node: Subtree root
            visitor: Callback receiving (value, absolute path)
            path: Absolute path of ``node``; extended and restored in place

        Returns:
            False if the visitor asked to stop, True otherwise
        """
        pass

    @abstractmethod
    def traverse(self, node: TrieNode, path: List[Hashable]) -> Iterator[Tuple[Tuple[Hashable, ...], TrieNode]]:
        """Traverse the subtree lazily.

        Args:
            node: Subtree root
            path: Absolute path of ``node``

        Yields:
            Tuples of (absolute path, node)
        """
        pass

    def _call(self, visitor: TrieVisitor, node: TrieNode, path: List[Hashable]) -> bool:
        """Invoke the visitor; only an explicit False stops the walk."""
        snapshot = path if self.reuse_path_buffer else tuple(path)
        return visitor(node.value, snapshot) is not False


class PreOrderTraverser(TrieTraverser):
    """Depth-first pre-order traversal: node first, then children.

    Children are visited in insertion order.
    """

    def visit(self, node: TrieNode, visitor: TrieVisitor, path: List[Hashable]) -> bool:
        if not self._call(visitor, node, path):
            return False
        stack = [iter(node.children.items())]
        while stack:
            for key, child in stack[-1]:
                path.append(key)
                if not self._call(visitor, child, path):
                    return False
                stack.append(iter(child.children.items()))
                break
            else:
                stack.pop()
                if stack:
                    path.pop()
        return True

    def traverse(self, node: TrieNode, path: List[Hashable]) -> Iterator[Tuple[Tuple[Hashable, ...], TrieNode]]:
        yield (tuple(path), node)
        stack = [iter(node.children.items())]
        while stack:
            for key, child in stack[-1]:
                path.append(key)
                yield (tuple(path), child)
                stack.append(iter(child.children.items()))
                break
            else:
                stack.pop()
                if stack:
                    path.pop()


class InOrderTraverser(TrieTraverser):
    """Depth-first tree in-order traversal: all children first, then node.

    This is not binary in-order; a node is reported after its whole
    subtree, which makes it the right order for aggregation.
    """

    def visit(self, node: TrieNode, visitor: TrieVisitor, path: List[Hashable]) -> bool:
        stack = [(node, iter(node.children.items()))]
        while stack:
            current, children = stack[-1]
            for key, child in children:
                path.append(key)
                stack.append((child, iter(child.children.items())))
                break
            else:
                stack.pop()
                if not self._call(visitor, current, path):
                    return False
                if stack:
                    path.pop()
        return True

    def traverse(self, node: TrieNode, path: List[Hashable]) -> Iterator[Tuple[Tuple[Hashable, ...], TrieNode]]:
        stack = [(node, iter(node.children.items()))]
        while stack:
            current, children = stack[-1]
            for key, child in children:
                path.append(key)
                stack.append((child, iter(child.children.items())))
                break
            else:
                stack.pop()
                yield (tuple(path), current)
                if stack:
                    path.pop()


def create_traverser(order: Union[VisitOrder, str], reuse_path_buffer: bool = False) -> TrieTraverser:
    """Factory function to create appropriate traverser.

    Args:
        order: Visit order as enum or string
        reuse_path_buffer: See TrieTraverser

    Returns:
        TrieTraverser instance

    Raises:
        ValueError: If order is not recognized
    """
    traversers = {
        VisitOrder.PRE_ORDER: PreOrderTraverser,
        VisitOrder.IN_ORDER: InOrderTraverser,
    }
    return traversers[parse_visit_order(order)](reuse_path_buffer=reuse_path_buffer)
