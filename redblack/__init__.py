from . import errors
from . import node
from . import rb

from .errors import RBTreeError, DuplicateKeyError, KeyNotFoundError
from .node import Color, Node, Side, rotate
from .rb import insert, delete, find
from .validate import validate, black_height, height
from .iter import iter_keys, iter_nodes
from .display import format_tree
from .tree import RBTree

__all__ = [
    "RBTreeError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "Color",
    "Node",
    "Side",
    "rotate",
    "insert",
    "delete",
    "find",
    "validate",
    "black_height",
    "height",
    "iter_keys",
    "iter_nodes",
    "format_tree",
    "RBTree",
]
