from redblack import rb
from redblack.node import Color, Node, Side
from redblack.validate import black_height, height, validate


def attach(parent, side, key, color):
    child = Node(key, color, parent)
    parent.set_child(side, child)
    return child


def test_empty_tree_is_valid():
    assert validate(None)
    assert black_height(None) == 0
    assert height(None) == 0


def test_red_root_rejected():
    root = Node(1, Color.RED)

    assert not validate(root)


def test_red_red_rejected():
    root = Node.black(10)
    five = attach(root, Side.LEFT, 5, Color.RED)
    attach(five, Side.LEFT, 3, Color.RED)

    assert not validate(root)

    five.left.color = Color.BLACK
    attach(root, Side.RIGHT, 15, Color.BLACK)
    five.set_child(Side.RIGHT, Node(7, Color.BLACK, five))
    assert validate(root)


def test_black_height_mismatch_rejected():
    root = Node.black(10)
    attach(root, Side.LEFT, 5, Color.BLACK)

    assert not validate(root)


def test_black_height_and_height():
    root = Node.black(1)
    assert black_height(root) == 1
    assert height(root) == 1

    root = None
    for k in range(1, 8):
        root = rb.insert(root, k)

    assert validate(root)
    assert height(root) == 4
    assert black_height(root) == 2


def test_validate_does_not_mutate():
    root = None
    for k in [5, 3, 8, 1]:
        root = rb.insert(root, k)
    colors = [(n.key, n.color) for n in (root, root.left, root.right, root.left.left)]

    assert validate(root)
    assert colors == [
        (n.key, n.color) for n in (root, root.left, root.right, root.left.left)
    ]
