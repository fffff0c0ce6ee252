"""Binary trees and the classic problems built on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; equality is identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from a level-order listing where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            yield current
            current = current.right


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in in-order (left, root, right), using a stack."""
    return [node.val for node in _inorder_nodes(root)]


def inorder_traversal_recursive(root: TreeNode | None) -> list[int]:
    """Return the values in in-order, recursively."""
    if root is None:
        return []
    return (
        inorder_traversal_recursive(root.left)
        + [root.val]
        + inorder_traversal_recursive(root.right)
    )


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in pre-order (root, left, right), using a stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            result.append(current.val)
            current = current.left
        else:
            current = stack.pop().right
    return result


def preorder_traversal_recursive(root: TreeNode | None) -> list[int]:
    """Return the values in pre-order, recursively."""
    if root is None:
        return []
    return (
        [root.val]
        + preorder_traversal_recursive(root.left)
        + preorder_traversal_recursive(root.right)
    )


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether the in-order values are strictly increasing."""
    previous: int | None = None
    for node in _inorder_nodes(root):
        if previous is not None and node.val <= previous:
            return False
        previous = node.val
    return True


def _mirrors(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values grouped by level, top to bottom, left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    layer = [root]
    while layer:
        levels.append([node.val for node in layer])
        layer = [
            child
            for node in layer
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its pre-order and in-order listings."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    roots = iter(preorder)

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo >= hi:
            return None
        value = next(roots)
        try:
            split = inorder.index(value, lo, hi)
        except ValueError:
            raise ValueError(
                f"value {value!r} is not where the in-order listing expects it"
            ) from None
        node = TreeNode(value)
        node.left = build(lo, split)
        node.right = build(split + 1, hi)
        return node

    return build(0, len(inorder))


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values."""

    def build(start: int, end: int) -> TreeNode | None:
        if start == end:
            return None
        mid = start + (end - start) // 2
        return TreeNode(nums[mid], build(start, mid), build(mid + 1, end))

    return build(0, len(nums))


def flatten(root: TreeNode | None) -> None:
    """Turn the tree in place into a right-linked chain in pre-order."""
    current = root
    while current is not None:
        if current.left is not None:
            rightmost = current.left
            while rightmost.right is not None:
                rightmost = rightmost.right
            rightmost.right = current.right
            current.right = current.left
            current.left = None
        current = current.right


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1] for level in level_order(root)]


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the k-th smallest value (1-based) of a search tree."""
    if k >= 1:
        for position, node in enumerate(_inorder_nodes(root), start=1):
            if position == k:
                return node.val
    raise ValueError(f"the tree has no {k}-th smallest value")


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best