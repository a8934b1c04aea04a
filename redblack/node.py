from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Color(Enum):
    RED = "R"
    BLACK = "B"


class Side(Enum):
    LEFT = 0
    RIGHT = 1

    @property
    def opposite(self) -> Side:
        if self is Side.LEFT:
            return Side.RIGHT
        return Side.LEFT


class Node(object):
    __slots__ = ("key", "color", "left", "right", "parent", "is_nil")

    def __init__(
        self,
        key: Any = None,
        color: Color = Color.BLACK,
        parent: Optional[Node] = None,
        is_nil: bool = False,
    ):
        self.key: Any = key
        self.color: Color = color
        self.parent: Optional[Node] = parent
        self.is_nil: bool = is_nil
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

        if not is_nil:
            self.left = Node.nil_leaf(self)
            self.right = Node.nil_leaf(self)

    @classmethod
    def nil_leaf(cls, parent: Optional[Node]) -> Node:
        """A black placeholder occupying an empty child slot of `parent`."""
        return cls(parent=parent, is_nil=True)

    @classmethod
    def black(cls, key: Any) -> Node:
        return cls(key, Color.BLACK)

    @classmethod
    def red(cls, key: Any, parent: Node) -> Node:
        return cls(key, Color.RED, parent)

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK

    def child(self, side: Side) -> Node:
        if side is Side.LEFT:
            return self.left
        return self.right

    def set_child(self, side: Side, child: Node):
        if side is Side.LEFT:
            self.left = child
        else:
            self.right = child
        child.parent = self

    def side(self) -> Side:
        """Which child slot of its parent this node occupies.

        Raises ValueError for a parentless node.
        """
        if self.parent is None:
            raise ValueError("node {} has no parent".format(self))
        if self.parent.left is self:
            return Side.LEFT
        return Side.RIGHT

    def sibling(self) -> Optional[Node]:
        parent = self.parent
        if parent is None:
            return None
        elif parent.left is self:
            return parent.right
        else:
            return parent.left

    def __repr__(self) -> str:
        if self.is_nil:
            return "<nil>"
        return "<{} {!r}>".format(self.color.value, self.key)


def replace_child(parent: Optional[Node], old: Node, new: Node):
    """Put `new` into whichever slot of `parent` holds `old`.

    With no parent, `new` simply becomes parentless (the caller owns the
    root reference).
    """
    new.parent = parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate(pivot: Node, direction: Side, recolor: bool = False):
    """Promote `pivot` into its parent's position.

    A right rotation lifts a left child and a left rotation lifts a right
    child. The old parent becomes `pivot`'s child on the `direction` side and
    takes over `pivot`'s inner child. The root reference is never touched:
    if `pivot` ends up parentless the caller must adopt it as the new root.

    With `recolor`, `pivot` becomes BLACK and the old parent RED.
    """
    parent = pivot.parent
    if parent is None:
        raise ValueError("cannot rotate the root node {}".format(pivot))
    if pivot.side() is direction:
        raise ValueError(
            "cannot rotate {} {}: it is the {} child of {}".format(
                pivot, direction.name.lower(), direction.name.lower(), parent
            )
        )

    replace_child(parent.parent, parent, pivot)

    inner = pivot.child(direction)
    parent.set_child(direction.opposite, inner)
    pivot.set_child(direction, parent)

    if recolor:
        pivot.color = Color.BLACK
        parent.color = Color.RED
