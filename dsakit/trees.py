"""Binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def in_order(root: Optional[Node]) -> list[int]:
    """Return values in left, root, right order."""
    if root is None:
        return []
    return in_order(root.left) + [root.data] + in_order(root.right)


def pre_order(root: Optional[Node]) -> list[int]:
    """Return values in root, left, right order."""
    if root is None:
        return []
    return [root.data] + pre_order(root.left) + pre_order(root.right)


def post_order(root: Optional[Node]) -> list[int]:
    """Return values in left, right, root order."""
    if root is None:
        return []
    return post_order(root.left) + post_order(root.right) + [root.data]


def nodes_at_level(root: Optional[Node], level: int) -> list[int]:
    """Return the values on ``level``, counting the root as level 1."""
    if root is None or level < 1:
        return []
    if level == 1:
        return [root.data]
    return nodes_at_level(root.left, level - 1) + nodes_at_level(root.right, level - 1)


def height(root: Optional[Node]) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def level_order_groups(root: Optional[Node]) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    if root is None:
        return []
    groups: list[list[int]] = []
    queue = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        groups.append(level)
    return groups


def level_order(root: Optional[Node]) -> list[int]:
    """Return the values in breadth-first order."""
    return [value for level in level_order_groups(root) for value in level]


def is_bst(root: Optional[Node]) -> bool:
    """Tell whether the tree is a binary search tree with distinct keys."""

    def check(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.data <= low:
            return False
        if high is not None and node.data >= high:
            return False
        return check(node.left, low, node.data) and check(node.right, node.data, high)

    return check(root, None, None)


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into a search tree and return its root; duplicates are ignored."""
    if root is None:
        return Node(value)
    if value < root.data:
        root.left = insert(root.left, value)
    elif value > root.data:
        root.right = insert(root.right, value)
    return root


def contains(root: Optional[Node], value: int) -> bool:
    """Tell whether a search tree holds ``value``."""
    node = root
    while node is not None:
        if node.data == value:
            return True
        node = node.left if value < node.data else node.right
    return False


def leaf_nodes(root: Optional[Node]) -> list[int]:
    """Return the leaf values from left to right."""
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [root.data]
    return leaf_nodes(root.left) + leaf_nodes(root.right)


def count_at_depth(root: Optional[Node], depth: int) -> int:
    """Return how many nodes sit at ``depth``, the root being depth 0."""
    if root is None or depth < 0:
        return 0
    if depth == 0:
        return 1
    return count_at_depth(root.left, depth - 1) + count_at_depth(root.right, depth - 1)


def build_level_order(values: Sequence[Optional[int]]) -> Optional[Node]:
    """Build a tree from values listed level by level, ``None`` marking a gap."""
    if not values or values[0] is None:
        return None
    root = Node(values[0])
    queue = deque([root])
    n = len(values)
    i = 1
    while queue and i < n:
        parent = queue.popleft()
        left_value = values[i]
        right_value = values[i + 1] if i + 1 < n else None
        parent.left = Node(left_value) if left_value is not None else None
        parent.right = Node(right_value) if right_value is not None else None
        if parent.left:
            queue.append(parent.left)
        if parent.right:
            queue.append(parent.right)
        i += 2
    return root


def top_view(root: Optional[Node]) -> list[int]:
    """Return the values seen from above, from leftmost to rightmost column."""
    if root is None:
        return []
    seen: dict[int, int] = {}
    queue = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        seen.setdefault(distance, node.data)
        if node.left:
            queue.append((node.left, distance - 1))
        if node.right:
            queue.append((node.right, distance + 1))
    return [seen[distance] for distance in sorted(seen)]