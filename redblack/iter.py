from __future__ import annotations

from typing import Any, Iterator, List, Optional

from .node import Node, Side


class TreeIter(object):
    KEYS = 0
    NODES = 1

    def __init__(self, mode: int, root: Optional[Node], rev: bool):
        self._mode: int = mode
        self._rev: bool = rev
        self._root: Optional[Node] = root
        self._stack: List[Node] = []

        # descend toward the smallest key, or the largest when reversed
        self._first: Side = Side.RIGHT if rev else Side.LEFT
        self._push_path(root)

    def _push_path(self, node: Optional[Node]):
        while node is not None and not node.is_nil:
            self._stack.append(node)
            node = node.child(self._first)

    def __iter__(self) -> TreeIter:
        return self

    def __reversed__(self) -> TreeIter:
        return TreeIter(self._mode, self._root, not self._rev)

    def __next__(self):
        if not self._stack:
            raise StopIteration()

        cur_node = self._stack.pop()
        self._push_path(cur_node.child(self._first.opposite))

        if self._mode == TreeIter.KEYS:
            return cur_node.key
        elif self._mode == TreeIter.NODES:
            return cur_node


def iter_nodes(root: Optional[Node], reverse: bool = False) -> Iterator[Node]:
    """Real (non-nil) nodes in key order."""
    return TreeIter(TreeIter.NODES, root, reverse)


def iter_keys(root: Optional[Node], reverse: bool = False) -> Iterator[Any]:
    return TreeIter(TreeIter.KEYS, root, reverse)
