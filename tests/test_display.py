from redblack import rb
from redblack.display import format_tree
from redblack.iter import iter_keys, iter_nodes


def build(keys):
    root = None
    for k in keys:
        root = rb.insert(root, k)
    return root


def test_format_tree():
    root = build([41, 38, 31, 12, 19, 8])
    root = rb.delete(root, 12)

    assert format_tree(root) == (
        "     41 B\n"
        "38 B\n"
        "          31 B\n"
        "     19 R\n"
        "          8 B\n"
    )


def test_format_tree_indent_and_step():
    root = build([2, 1, 3])

    assert format_tree(root, indent=2, step=2) == "    3 R\n  2 B\n    1 R\n"


def test_format_empty_tree():
    assert format_tree(None) == "<empty tree>"


def test_iter_nodes_skips_nil_leaves():
    root = build([5, 2, 8, 1])
    nodes = list(iter_nodes(root))

    assert [n.key for n in nodes] == [1, 2, 5, 8]
    assert not any(n.is_nil for n in nodes)
    assert [n.key for n in iter_nodes(root, reverse=True)] == [8, 5, 2, 1]


def test_iter_reversed():
    root = build(range(10))

    assert list(reversed(iter_keys(root))) == list(range(9, -1, -1))
    assert list(iter_keys(None)) == []
