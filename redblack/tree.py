from __future__ import annotations

from collections.abc import Set
from typing import Any, Iterable, Iterator, Optional

from . import rb
from .display import format_tree
from .errors import KeyNotFoundError
from .iter import iter_keys
from .node import Node
from .validate import height, validate


class RBTree(Set):
    """An ordered set of unique keys backed by a red-black tree.

    Not safe for concurrent mutation; callers sharing a tree between
    threads must serialize writers themselves.
    """

    def __init__(self, keys: Iterable[Any] = ()):
        self._root: Optional[Node] = None
        self._len: int = 0

        for key in keys:
            self.insert(key)

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> RBTree:
        # set algebra (e.g. `a | b`) may yield a key more than once
        tree = cls()
        for key in it:
            if key not in tree:
                tree.insert(key)
        return tree

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, key: Any):
        """Add `key` to the tree.

        Raises DuplicateKeyError if the key is already present.
        """
        self._root = rb.insert(self._root, key)
        self._len += 1

    def delete(self, key: Any) -> bool:
        """Remove `key` if present. Returns whether a key was removed."""
        if rb.find(self._root, key) is None:
            return False
        self._root = rb.delete(self._root, key)
        self._len -= 1
        return True

    def remove(self, key: Any):
        if not self.delete(key):
            raise KeyNotFoundError(key)

    def _first_node(self) -> Node:
        node = rb.minimum(self._root)
        if node is None:
            raise IndexError("Tree is empty")
        return node

    def _last_node(self) -> Node:
        node = rb.maximum(self._root)
        if node is None:
            raise IndexError("Tree is empty")
        return node

    def min(self) -> Any:
        return self._first_node().key

    def max(self) -> Any:
        return self._last_node().key

    def pop_min(self) -> Any:
        key = self.min()
        self.remove(key)
        return key

    def pop_max(self) -> Any:
        key = self.max()
        self.remove(key)
        return key

    def validate(self) -> bool:
        return validate(self._root)

    def height(self) -> int:
        return height(self._root)

    def print(self) -> str:
        return format_tree(self._root)

    def __contains__(self, key: Any) -> bool:
        return rb.find(self._root, key) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter_keys(self._root)

    def __reversed__(self) -> Iterator[Any]:
        return iter_keys(self._root, reverse=True)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "{}([{}])".format(
            self.__class__.__name__, ", ".join(repr(k) for k in self)
        )
