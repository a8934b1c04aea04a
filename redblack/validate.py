from __future__ import annotations

import logging
from typing import List, Optional

from .node import Color, Node

logger = logging.getLogger(__name__)


def validate(root: Optional[Node]) -> bool:
    """Check the red-black coloring rules of the tree under `root`.

    Checks that the root is black, that every path from the root down to a
    nil leaf crosses the same number of black nodes, and that no red node
    has a red parent. Key order is not checked here.
    """
    if root is None or root.is_nil:
        return True

    if not root.is_black:
        logger.debug("root %r is not black", root)
        return False

    if not _paths_balanced(root):
        return False

    return _no_red_red(root)


def _paths_balanced(root: Node) -> bool:
    expected: Optional[int] = None
    stack: List[tuple] = [(root, 0)]

    while stack:
        node, count = stack.pop()
        if node.is_black:
            count += 1
        if node.is_nil:
            if expected is None:
                expected = count
            elif count != expected:
                logger.debug(
                    "black count %d on path to leaf under %r, expected %d",
                    count,
                    node.parent,
                    expected,
                )
                return False
            continue
        stack.append((node.right, count))
        stack.append((node.left, count))

    return True


def _no_red_red(root: Node) -> bool:
    stack: List[tuple] = [(root, Color.BLACK)]

    while stack:
        node, parent_color = stack.pop()
        if node.is_red and parent_color is Color.RED:
            logger.debug("red node %r has a red parent", node)
            return False
        if not node.is_nil:
            stack.append((node.right, node.color))
            stack.append((node.left, node.color))

    return True


def black_height(root: Optional[Node]) -> int:
    """Black nodes on the leftmost path below `root`, excluding `root` itself.

    Only meaningful for a tree that passes `validate`. Nil leaves count, so a
    single black node has black-height 1.
    """
    if root is None or root.is_nil:
        return 0
    count = 0
    node = root.left
    while node is not None:
        if node.is_black:
            count += 1
        node = node.left
    return count


def height(root: Optional[Node]) -> int:
    """Number of real nodes on the longest root-to-leaf path."""
    if root is None or root.is_nil:
        return 0
    return 1 + max(height(root.left), height(root.right))
