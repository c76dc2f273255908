"""Binary tree nodes, depth-first traversals and a binary search tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


def in_order(root: Node | None) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if root is not None:
        yield from in_order(root.left)
        yield root.data
        yield from in_order(root.right)


def pre_order(root: Node | None) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is not None:
        yield root.data
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def post_order(root: Node | None) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.data


def _min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Node | None, value: int) -> Node | None:
    if node is None:
        return None
    if value < node.data:
        node.left = _delete(node.left, value)
    elif value > node.data:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _min_node(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree of distinct integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert value; duplicates are ignored."""
        if self.root is None:
            self.root = Node(value)
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    return
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = Node(value)
                    return
                node = node.right
            else:
                return

    def delete(self, value: int) -> None:
        """Remove value if present; absent values are ignored."""
        self.root = _delete(self.root, value)

    def search(self, key: int) -> Node | None:
        """Return the node holding key, or None."""
        node = self.root
        while node is not None and node.data != key:
            node = node.left if key < node.data else node.right
        return node

    def minimum(self) -> int:
        """Return the smallest value; raise ValueError when empty."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        return _min_node(self.root).data

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __iter__(self) -> Iterator[int]:
        return in_order(self.root)


def _line(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the traversal demo or the binary-search-tree demo."""
    parser = argparse.ArgumentParser(description="Binary tree demos.")
    parser.add_argument("demo", nargs="?", default="bst", choices=["bst", "traversals"])
    args = parser.parse_args(argv)

    if args.demo == "traversals":
        root = Node(1, Node(2, Node(4), Node(5)), Node(3))
        print("Inorder Traversal:")
        print(_line(in_order(root)))
        print("Preorder Traversal:")
        print(_line(pre_order(root)))
        print("Postorder Traversal:")
        print(_line(post_order(root)))
        return 0

    tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
    print("\n Inorder traversal of the BST:")
    print(_line(tree))
    print("Deleting 20 ... ")
    tree.delete(20)
    print("Inorder traversal after deletion")
    print(_line(tree))
    key = 40
    if key in tree:
        print(f" Key {key} found in the BST.")
    else:
        print(f"key {key} not found in the BST.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())