from __future__ import annotations

from typing import Any


class RBTreeError(Exception):
    """Base class for errors raised by red-black tree operations."""


class DuplicateKeyError(RBTreeError, KeyError):
    """Raised when inserting a key that the tree already holds.

    The tree is left untouched.
    """

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return "duplicate key {!r}".format(self.key)


class KeyNotFoundError(RBTreeError, KeyError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return "key {!r} not found".format(self.key)
