"""Binary tree nodes and traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node holding ``data`` with optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def postorder(node: TreeNode | None) -> list[Any]:
    """Values of the tree in post-order: left subtree, right subtree, root."""
    if node is None:
        return []
    return [*postorder(node.left), *postorder(node.right), node.data]