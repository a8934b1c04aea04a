from __future__ import annotations

from typing import List, Optional

from .node import Node


def _format_recursive(node: Node, indent: int, step: int, lines: List[str]):
    if node is None or node.is_nil:
        return
    _format_recursive(node.right, indent + step, step, lines)
    lines.append("{}{} {}".format(" " * indent, node.key, node.color.value))
    _format_recursive(node.left, indent + step, step, lines)


def format_tree(root: Optional[Node], indent: int = 0, step: int = 5) -> str:
    """Render a tree sideways, one node per line.

    The right subtree is printed above its parent and the left subtree
    below, so reading the output rotated a quarter turn clockwise shows the
    tree top-down. Each line holds the key and its color tag ("B" or "R"),
    indented by `step` columns per level below `root`.
    """
    if root is None or root.is_nil:
        return "<empty tree>"
    lines: List[str] = []
    _format_recursive(root, indent, step, lines)
    return "\n".join(lines) + "\n"
