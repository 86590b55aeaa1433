"""A binary search tree of unique keys."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from dsprimer.binary_tree import TreeNode, inorder


class BinarySearchTree:
    """Binary search tree; inserting a key already present does nothing."""

    def __init__(self) -> None:
        self._root: Optional[TreeNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[TreeNode]:
        """The root node, or None for an empty tree."""
        return self._root

    def insert(self, data: Any) -> None:
        """Store ``data`` in the tree unless it is already there."""
        parent: Optional[TreeNode] = None
        node = self._root
        while node is not None:
            if data == node.data:
                return
            parent = node
            node = node.left if data < node.data else node.right
        new_node = TreeNode(data)
        if parent is None:
            self._root = new_node
        elif data < parent.data:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1

    def search(self, target: Any) -> Optional[TreeNode]:
        """Return the node holding ``target``, or None if it is absent."""
        node = self._root
        while node is not None:
            if target == node.data:
                return node
            node = node.left if target < node.data else node.right
        return None

    def remove(self, target: Any) -> Optional[TreeNode]:
        """Remove ``target`` and return a detached node holding it, or None."""
        parent: Optional[TreeNode] = None
        node = self._root
        while node is not None and node.data != target:
            parent = node
            node = node.left if target < node.data else node.right
        if node is None:
            return None

        self._size -= 1
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            removed_data = node.data
            node.data = succ.data
            if succ_parent.left is succ:
                succ_parent.left = succ.right
            else:
                succ_parent.right = succ.right
            succ.data = removed_data
            succ.left = succ.right = None
            return succ

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.left = node.right = None
        return node

    def __contains__(self, target: Any) -> bool:
        return self.search(target) is not None

    def __iter__(self) -> Iterator[Any]:
        return inorder(self._root)

    def __len__(self) -> int:
        return self._size

    def show_all(self) -> str:
        """Print every key in ascending order on one line and return that line."""
        line = " ".join(map(str, self))
        print(line)
        return line