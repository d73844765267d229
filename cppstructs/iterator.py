"""Stack-based in-order iteration over binary search tree nodes."""

from __future__ import annotations

import argparse
from typing import Iterator, Optional, Sequence

from cppstructs.bintree import BinarySearchTree, Node


class InorderIterator:
    """A cursor walking tree nodes in key order, or in reverse key order.

    The cursor keeps the chain of pending ancestors on a stack, so it stays
    valid while nodes are inserted behind or ahead of its position.
    """

    def __init__(self, root: Optional[Node] = None, reverse: bool = False) -> None:
        self.reverse = reverse
        self._stack: list[Node] = []
        self._descend(root)

    def _descend(self, node: Optional[Node]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self.reverse else node.left

    @property
    def _current(self) -> Optional[Node]:
        return self._stack[-1] if self._stack else None

    def node(self) -> Node:
        """Return the node under the cursor; raise IndexError past the end."""
        current = self._current
        if current is None:
            raise IndexError("Node out of range!")
        return current

    def advance(self) -> InorderIterator:
        """Move to the next node in order and return this iterator."""
        if self._stack:
            node = self._stack.pop()
            self._descend(node.left if self.reverse else node.right)
        return self

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        current = self._current
        if current is None:
            raise StopIteration
        self.advance()
        return current

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InorderIterator):
            return NotImplemented
        return self._current is other._current

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> InorderIterator:
        """Return an independent iterator at the same position."""
        clone = InorderIterator(None, self.reverse)
        clone._stack = list(self._stack)
        return clone

    def swap(self, other: InorderIterator) -> None:
        """Exchange positions with ``other``."""
        self._stack, other._stack = other._stack, self._stack
        self.reverse, other.reverse = other.reverse, self.reverse

    def __repr__(self) -> str:
        current = self._current
        where = "end" if current is None else f"key={current.key!r}"
        direction = "reverse" if self.reverse else "forward"
        return f"InorderIterator({where}, {direction})"


def begin(root: Optional[Node]) -> InorderIterator:
    """Return a forward iterator at the smallest key under ``root``."""
    return InorderIterator(root, reverse=False)


def end() -> InorderIterator:
    """Return the past-the-end forward iterator."""
    return InorderIterator(None, reverse=False)


def rbegin(root: Optional[Node]) -> InorderIterator:
    """Return a reverse iterator at the largest key under ``root``."""
    return InorderIterator(root, reverse=True)


def rend() -> InorderIterator:
    """Return the past-the-end reverse iterator."""
    return InorderIterator(None, reverse=True)


def _print_inorder(node: Optional[Node]) -> None:
    if node is not None:
        _print_inorder(node.left)
        print(node.data)
        _print_inorder(node.right)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Demonstrate in-order and reverse iteration over a search tree."
    )
    parser.parse_args(argv)

    tree = BinarySearchTree()
    for key, data in [
        (100, 10), (200, 20), (500, 50), (400, 40), (90, 9),
        (60, 6), (700, 70), (300, 30), (800, 80), (20, 2),
    ]:
        tree.insert(key, data)

    print("Iterator in-order using print function")
    _print_inorder(tree.root)

    print("Iterator in-order using loop")
    for node in begin(tree.root):
        print(node.data)

    print("Const iterator in-order")
    cursor = begin(tree.root)
    while cursor != end():
        print(cursor.node().data)
        cursor.advance()

    print("Iterator reverse in-order")
    for node in rbegin(tree.root):
        print(node.data)

    tree.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())