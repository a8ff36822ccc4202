import random

import pytest

from splkit.bst import BST, TraversalOrder
from splkit.cmpfn import pointer_compare

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def build(keys, base_type="int"):
    tree = BST(base_type)
    for key in keys:
        tree.insert(key)
    return tree


def keys_of(tree, order):
    return [node.key for node in tree.nodes(order)]


def assert_ordered(tree):
    keys = list(tree)
    assert keys == sorted(keys)
    assert len(keys) == len(tree)


def test_new_tree_is_empty():
    tree = BST("int")
    assert len(tree) == 0
    assert not tree
    assert list(tree) == []
    assert tree.root is None


def test_inorder_is_sorted():
    tree = build(KEYS)
    assert list(tree) == sorted(KEYS)
    assert keys_of(tree, TraversalOrder.INORDER) == sorted(KEYS)


def test_insert_existing_returns_same_node():
    tree = build(KEYS)
    node = tree.find(40)
    node.value = "payload"
    again = tree.insert(40)
    assert again is node
    assert again.value == "payload"
    assert len(tree) == len(KEYS)


def test_find_missing_returns_none():
    tree = build(KEYS)
    assert tree.find(99) is None
    assert 99 not in tree
    assert 65 in tree


def test_preorder_rebuilds_same_shape():
    tree = build(KEYS)
    preorder = keys_of(tree, TraversalOrder.PREORDER)
    assert preorder[0] == 50
    rebuilt = build(preorder)
    assert keys_of(rebuilt, TraversalOrder.PREORDER) == preorder
    assert keys_of(rebuilt, TraversalOrder.POSTORDER) == keys_of(
        tree, TraversalOrder.POSTORDER
    )


def test_postorder_ends_with_root():
    tree = build(KEYS)
    postorder = keys_of(tree, TraversalOrder.POSTORDER)
    assert postorder[-1] == tree.root.key
    assert sorted(postorder) == sorted(KEYS)


def test_children_respect_ordering():
    tree = build(KEYS)
    for node in tree.nodes(TraversalOrder.PREORDER):
        if node.left is not None:
            assert node.left.key < node.key
        if node.right is not None:
            assert node.right.key > node.key


@pytest.mark.parametrize("victim", [20, 30, 50, 70, 45, 35])
def test_remove_keeps_order(victim):
    tree = build(KEYS)
    tree.remove(victim)
    assert victim not in tree
    assert list(tree) == sorted(k for k in KEYS if k != victim)
    assert_ordered(tree)


def test_remove_missing_is_noop():
    tree = build(KEYS)
    tree.remove(12345)
    assert list(tree) == sorted(KEYS)


def test_remove_everything_randomly():
    rng = random.Random(7)
    keys = rng.sample(range(1000), 200)
    tree = build(keys)
    order = list(keys)
    rng.shuffle(order)
    remaining = set(keys)
    for key in order:
        tree.remove(key)
        remaining.discard(key)
        assert list(tree) == sorted(remaining)
    assert not tree


def test_remove_keeps_other_node_identity():
    tree = build(KEYS)
    survivor = tree.find(60)
    tree.remove(50)
    assert tree.find(60) is survivor


def test_clear():
    tree = build(KEYS)
    tree.clear()
    assert len(tree) == 0
    assert tree.find(50) is None


def test_copy_is_independent():
    tree = build(KEYS)
    tree.find(30).value = "v"
    duplicate = tree.copy()
    assert keys_of(duplicate, TraversalOrder.PREORDER) == keys_of(
        tree, TraversalOrder.PREORDER
    )
    assert duplicate.find(30).value == "v"
    assert duplicate.find(30) is not tree.find(30)
    tree.remove(30)
    assert 30 in duplicate
    assert len(duplicate) == len(KEYS)


def test_string_keys():
    words = ["pear", "apple", "fig", "banana"]
    tree = build(words, "string")
    assert list(tree) == sorted(words)
    assert tree.find("fig").key_string == "fig"


def test_custom_compare_reverses_order():
    tree = BST("int", lambda a, b: (a < b) - (a > b))
    for key in KEYS:
        tree.insert(key)
    assert list(tree) == sorted(KEYS, reverse=True)


def test_pointer_base_type_uses_identity():
    tree = BST("pointer")
    assert tree.compare is pointer_compare
    a, b = object(), object()
    tree.insert(a)
    tree.insert(b)
    assert a in tree and b in tree
    assert len(tree) == 2


def test_unknown_base_type_rejected():
    with pytest.raises(ValueError):
        BST("no such type")


def test_sorted_insertion_deep_tree():
    keys = list(range(3000))
    tree = build(keys)
    assert list(tree) == keys
    assert keys_of(tree, TraversalOrder.PREORDER) == keys
    assert keys_of(tree, TraversalOrder.POSTORDER) == keys[::-1]