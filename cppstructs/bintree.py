"""An unbalanced binary search tree with shape statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding a key, its data and links to its neighbours."""

    key: Any
    data: Any
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def _preorder(node: Optional[Node]) -> Iterator[Node]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        stack.extend(_children(current))


def _postorder(node: Optional[Node]) -> Iterator[Node]:
    stack = [(node, False)] if node is not None else []
    while stack:
        current, expanded = stack.pop()
        if expanded:
            yield current
        else:
            stack.append((current, True))
            stack.extend((child, False) for child in _children(current))


def max_height(node: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf chain."""
    height = 0
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [child for current in level for child in _children(current)]
    return height


def min_height(node: Optional[Node]) -> int:
    """Return the length of the shortest chain from the root to a missing child."""
    if node is None:
        return 0
    depth = 1
    level = [node]
    while True:
        if any(n.left is None or n.right is None for n in level):
            return depth
        level = [child for current in level for child in _children(current)]
        depth += 1


def size(node: Optional[Node]) -> int:
    """Return the number of nodes in the subtree rooted at ``node``."""
    return sum(1 for _ in _preorder(node))


def is_balanced(node: Optional[Node]) -> bool:
    """Return True if no node's subtree heights differ by more than one."""
    heights: dict[Node, int] = {}
    for current in _postorder(node):
        left = heights[current.left] if current.left is not None else 0
        right = heights[current.right] if current.right is not None else 0
        if abs(left - right) > 1:
            return False
        heights[current] = max(left, right) + 1
    return True


class BinarySearchTree:
    """A binary search tree mapping ordered keys to data."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert(self, key: Any, data: Any) -> None:
        """Insert ``key`` with ``data``; an existing key has its data replaced."""
        if self.root is None:
            self.root = Node(key, data)
            return
        current = self.root
        while True:
            if current.key == key:
                current.data = data
                return
            if key < current.key:
                if current.left is None:
                    current.left = Node(key, data, parent=current)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(key, data, parent=current)
                    return
                current = current.right

    def _locate(self, key: Any) -> Node:
        current = self.root
        while current is not None:
            if current.key == key:
                return current
            current = current.left if current.key > key else current.right
        raise KeyError(key)

    def _replace(self, node: Node, child: Optional[Node]) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def remove(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        node = self._locate(key)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.data = successor.key, successor.data
            node = successor
        child = node.left if node.left is not None else node.right
        self._replace(node, child)

    def find(self, key: Any) -> Any:
        """Return the data stored under ``key``; raise KeyError if absent."""
        return self._locate(key).data

    def edit(self, key: Any, data: Any) -> None:
        """Replace the data of an existing ``key``; raise KeyError if absent."""
        self._locate(key).data = data

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def max_height(self) -> int:
        return max_height(self.root)

    def min_height(self) -> int:
        return min_height(self.root)

    def is_balanced(self) -> bool:
        return is_balanced(self.root)

    def __len__(self) -> int:
        return size(self.root)

    def __contains__(self, key: Any) -> bool:
        try:
            self._locate(key)
        except KeyError:
            return False
        return True