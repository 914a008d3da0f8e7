"""Binary tree nodes and recursive queries over them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

INT_MAX = 2**31 - 1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer and two optional children."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> Iterator[int]:
    """Values in node, left, right order."""
    if root is not None:
        yield root.val
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Values in left, node, right order."""
    if root is not None:
        yield from inorder(root.left)
        yield root.val
        yield from inorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[int]:
    """Values in left, right, node order."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.val


def _nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    if root is not None:
        yield root
        yield from _nodes(root.left)
        yield from _nodes(root.right)


def node_count(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(root))


def leaf_count(root: TreeNode | None) -> int:
    """Number of nodes with no children."""
    return sum(1 for node in _nodes(root) if node.left is None and node.right is None)


def height(root: TreeNode | None) -> int:
    """Nodes on the longest root-to-leaf path; an empty tree has height 0."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _balanced_height(root: TreeNode | None) -> int | None:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: TreeNode | None) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def tree_sum(root: TreeNode | None) -> int:
    """Sum of all values."""
    return sum(preorder(root))


def values_below(root: TreeNode | None, item: int) -> Iterator[int]:
    """Values smaller than item, in preorder."""
    return (value for value in preorder(root) if value < item)


def one_child_count(root: TreeNode | None) -> int:
    """Number of nodes with exactly one child."""
    return sum(
        1 for node in _nodes(root) if (node.left is None) != (node.right is None)
    )


def tree_max(root: TreeNode | None) -> int:
    """Largest value, where every missing subtree counts as 0."""
    if root is None:
        return 0
    return max(root.val, tree_max(root.left), tree_max(root.right))


def tree_min(root: TreeNode | None) -> int:
    """Smallest value, where every missing subtree counts as INT_MAX."""
    if root is None:
        return INT_MAX
    return min(root.val, tree_min(root.left), tree_min(root.right))


def increment(root: TreeNode | None) -> None:
    """Add one to every value in place."""
    for node in _nodes(root):
        node.val += 1


def mystery(root: TreeNode | None) -> int:
    """Largest leaf value, where every missing subtree counts as 0."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return root.val
    return max(mystery(root.left), mystery(root.right))