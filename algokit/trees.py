"""Binary search tree and Cartesian tree."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class BSTNode:
    """A node of an unbalanced binary search tree; duplicates go left."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None

    def insert(self, value: int) -> None:
        """Insert ``value`` below this node."""
        node = self
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(value)
                    return
                node = node.right

    def find(self, value: int) -> bool:
        """Return whether ``value`` is stored in the subtree rooted here."""
        node: BSTNode | None = self
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def _iter_inorder(self) -> Iterator[int]:
        pending: list[BSTNode] = []
        node: BSTNode | None = self
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def traverse_inorder(self) -> list[int]:
        """Return the values of the subtree in sorted (in-order) order."""
        return list(self._iter_inorder())


@dataclass
class CartesianTreeNode:
    """A node of a max-heap ordered Cartesian tree."""

    value: int
    left: CartesianTreeNode | None = None
    right: CartesianTreeNode | None = None


def build_cartesian_tree(values: Sequence[int]) -> CartesianTreeNode:
    """Build the Cartesian tree of ``values``; the root holds the first maximum."""
    if not values:
        raise ValueError("cannot build a Cartesian tree from an empty sequence")
    max_idx = max(range(len(values)), key=values.__getitem__)
    left_part = values[:max_idx]
    right_part = values[max_idx + 1 :]
    return CartesianTreeNode(
        value=values[max_idx],
        left=build_cartesian_tree(left_part) if left_part else None,
        right=build_cartesian_tree(right_part) if right_part else None,
    )