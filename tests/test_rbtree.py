import re

import pytest

from algolab.rbtree import Color, RedBlackTree

SOURCE_KEYS = [30, 10, 20, 25, 40, 50]


def _strip(text):
    return re.sub(r"\x1b\[\d+m", "", text)


def _black_height(tree, node):
    if tree.is_nil(node):
        return 1
    if node.color is Color.RED:
        assert node.left.color is Color.BLACK
        assert node.right.color is Color.BLACK
    left = _black_height(tree, node.left)
    right = _black_height(tree, node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check_ordering(tree, node):
    if tree.is_nil(node):
        return
    if not tree.is_nil(node.left):
        assert node.left.key <= node.key
        assert node.left.parent is node
    if not tree.is_nil(node.right):
        assert node.right.key >= node.key
        assert node.right.parent is node
    _check_ordering(tree, node.left)
    _check_ordering(tree, node.right)


def _check_invariants(tree):
    if tree.root is not None:
        assert tree.root.color is Color.BLACK
        assert tree.is_nil(tree.root.parent)
    _black_height(tree, tree.root)
    _check_ordering(tree, tree.root)


def _build(keys):
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)
    return tree


def test_source_sequence_shape():
    tree = _build(SOURCE_KEYS)
    assert tree.root.key == 20
    assert tree.root.color is Color.BLACK
    _check_invariants(tree)


def test_iteration_is_sorted():
    tree = _build(SOURCE_KEYS)
    assert list(tree) == sorted(SOURCE_KEYS)
    assert len(tree) == len(SOURCE_KEYS)


@pytest.mark.parametrize("keys", [list(range(50)), list(range(50, 0, -1)),
                                  [7, 3, 18, 10, 22, 8, 11, 26, 2, 6, 13]])
def test_invariants_after_many_inserts(keys):
    tree = _build(keys)
    _check_invariants(tree)
    assert list(tree) == sorted(keys)


def test_search_and_contains():
    tree = _build(SOURCE_KEYS)
    assert tree.search(25).key == 25
    assert tree.search(99) is None
    assert 40 in tree
    assert 41 not in tree


def test_minimum_maximum_successor():
    tree = _build(SOURCE_KEYS)
    assert tree.minimum(tree.root).key == min(SOURCE_KEYS)
    assert tree.maximum(tree.root).key == max(SOURCE_KEYS)
    node = tree.search(25)
    assert tree.successor(node).key == 30
    assert tree.successor(tree.maximum(tree.root)) is None


def test_minimum_of_leaf_raises():
    tree = RedBlackTree()
    with pytest.raises(ValueError):
        tree.minimum(tree.root)


def test_delete_keeps_invariants():
    keys = list(range(1, 40))
    tree = _build(keys)
    remaining = set(keys)
    for key in [20, 1, 39, 10, 11, 12, 30, 5]:
        tree.delete(key)
        remaining.discard(key)
        _check_invariants(tree)
        assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)


def test_delete_everything():
    tree = _build(SOURCE_KEYS)
    for key in SOURCE_KEYS:
        tree.delete(key)
        _check_invariants(tree)
    assert tree.root is None
    assert list(tree) == []


def test_delete_missing_raises():
    tree = _build(SOURCE_KEYS)
    with pytest.raises(KeyError):
        tree.delete(99)


def test_rotations_preserve_order():
    tree = _build(SOURCE_KEYS)
    before = list(tree)
    old_root = tree.root
    tree.left_rotate(old_root)
    assert tree.root is not old_root
    assert list(tree) == before
    tree.right_rotate(tree.root)
    assert tree.root is old_root
    assert list(tree) == before


def test_rotation_without_child_raises():
    tree = _build([5])
    with pytest.raises(ValueError):
        tree.left_rotate(tree.root)
    with pytest.raises(ValueError):
        tree.right_rotate(tree.root)


def test_render_single_root():
    tree = _build([30])
    text = tree.render()
    assert _strip(text) == " " * 10 + "30"
    assert "\x1b[34m30\x1b[0m" in text


def test_render_red_child_one_row_down():
    tree = _build([30, 10])
    rows = _strip(tree.render()).split("\n")
    assert rows[0] == " " * 10 + "30"
    assert rows[1] == " " * 5 + "10"
    assert "\x1b[31m10\x1b[0m" in tree.render()


def test_render_empty():
    assert RedBlackTree().render() == ""