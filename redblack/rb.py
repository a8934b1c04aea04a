"""Insertion and deletion for red-black trees.

Both engines work on a bare root reference: they take the current root
(``None`` for an empty tree) and return the root after the operation, which
may be a different node when a rotation reaches the top of the tree.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import DuplicateKeyError
from .node import Color, Node, Side, replace_child, rotate

logger = logging.getLogger(__name__)


def _rotate(
    root: Node, pivot: Node, direction: Side, recolor: bool = False
) -> Node:
    rotate(pivot, direction, recolor)
    if pivot.parent is None:
        return pivot
    return root


def _leftmost(node: Node) -> Node:
    while not node.left.is_nil:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while not node.right.is_nil:
        node = node.right
    return node


def _is_empty(root: Optional[Node]) -> bool:
    return root is None or root.is_nil


def find(root: Optional[Node], key: Any) -> Optional[Node]:
    """Return the node holding `key`, or None."""
    cur = root
    while not _is_empty(cur):
        if key == cur.key:
            return cur
        elif key < cur.key:
            cur = cur.left
        else:
            cur = cur.right
    return None


def minimum(root: Optional[Node]) -> Optional[Node]:
    if _is_empty(root):
        return None
    return _leftmost(root)


def maximum(root: Optional[Node]) -> Optional[Node]:
    if _is_empty(root):
        return None
    return _rightmost(root)


def insert(root: Optional[Node], key: Any) -> Node:
    """Insert `key` and return the new root.

    Raises DuplicateKeyError, without modifying the tree, if `key` is
    already present.
    """
    if _is_empty(root):
        return Node.black(key)

    parent = root
    while True:
        if key == parent.key:
            raise DuplicateKeyError(key)
        side = Side.LEFT if key < parent.key else Side.RIGHT
        if parent.child(side).is_nil:
            break
        parent = parent.child(side)

    node = Node.red(key, parent)
    parent.set_child(side, node)
    return _repair_insert(root, node)


def _repair_insert(root: Node, node: Node) -> Node:
    while True:
        parent = node.parent
        if parent is None or not (node.is_red and parent.is_red):
            return root

        # A red parent is never the root, so the grandparent exists.
        grandparent = parent.parent
        uncle = parent.sibling()

        if uncle.is_black:
            if parent.side() is node.side():
                logger.debug("insert: straight-line rotation at %r", parent)
                root = _rotate(root, parent, node.side().opposite, recolor=True)
            else:
                logger.debug("insert: zig-zag rotation at %r", node)
                root = _rotate(root, node, parent.side())
                root = _rotate(root, node, node.side().opposite, recolor=True)
            return root

        logger.debug("insert: recoloring under %r", grandparent)
        parent.color = Color.BLACK
        uncle.color = Color.BLACK
        if grandparent.parent is not None:
            grandparent.color = Color.RED
        node = grandparent


def delete(root: Optional[Node], key: Any) -> Optional[Node]:
    """Remove `key` and return the new root (None once the tree is empty).

    Deleting a key that is not present leaves the tree unchanged.
    """
    node = find(root, key)
    if node is None:
        return root

    if not node.left.is_nil and not node.right.is_nil:
        successor = _leftmost(node.right)
        node.key = successor.key
        node = successor

    root = _delete_one_child(root, node)
    if root.is_nil:
        return None
    return root


def _delete_one_child(root: Node, node: Node) -> Node:
    child = node.left if node.right.is_nil else node.right
    parent = node.parent
    replace_child(parent, node, child)
    if parent is None:
        root = child

    node.parent = node.left = node.right = None

    if node.is_red:
        return root
    if child.is_red:
        child.color = Color.BLACK
        return root
    return _repair_delete(root, child)


def _repair_delete(root: Node, node: Node) -> Node:
    """Resolve the missing black on `node`'s side of the tree."""
    while True:
        parent = node.parent
        if parent is None:
            logger.debug("delete case 1: deficiency absorbed at root %r", node)
            return node

        side = node.side()
        sibling = parent.child(side.opposite)

        if sibling.is_red:
            logger.debug("delete case 2: red sibling %r", sibling)
            root = _rotate(root, sibling, side, recolor=True)
            sibling = parent.child(side.opposite)

        near = sibling.child(side)
        far = sibling.child(side.opposite)

        if near.is_black and far.is_black:
            sibling.color = Color.RED
            if parent.is_black:
                logger.debug("delete case 3: pushing deficiency up to %r", parent)
                node = parent
                continue
            logger.debug("delete case 4: red parent %r absorbs deficiency", parent)
            parent.color = Color.BLACK
            return root

        if far.is_black:
            logger.debug("delete case 5: rotating near nephew %r", near)
            root = _rotate(root, near, side.opposite, recolor=True)
            sibling = near
            far = sibling.child(side.opposite)

        logger.debug("delete case 6: rotating sibling %r", sibling)
        sibling.color = parent.color
        parent.color = Color.BLACK
        far.color = Color.BLACK
        return _rotate(root, sibling, side)
