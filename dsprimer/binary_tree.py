"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class TreeNode:
    """A node of a binary tree holding ``data`` and two optional children."""

    __slots__ = ("data", "left", "right")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.left: Optional[TreeNode] = None
        self.right: Optional[TreeNode] = None

    def remove_left(self) -> Optional[TreeNode]:
        """Detach the left subtree and return it (None if there was none)."""
        child, self.left = self.left, None
        return child

    def remove_right(self) -> Optional[TreeNode]:
        """Detach the right subtree and return it (None if there was none)."""
        child, self.right = self.right, None
        return child

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


def preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the data of the tree rooted at ``node``: node, left, right."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.data
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the data of the tree rooted at ``node``: left, node, right."""
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.data
        current = current.right


def postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the data of the tree rooted at ``node``: left, right, node."""
    stack: list[tuple[TreeNode, bool]] = [(node, False)] if node is not None else []
    while stack:
        current, expanded = stack.pop()
        if expanded:
            yield current.data
            continue
        stack.append((current, True))
        if current.right is not None:
            stack.append((current.right, False))
        if current.left is not None:
            stack.append((current.left, False))