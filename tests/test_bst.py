import pytest

from algopractice.bst import (
    BinarySearchTree,
    kth_smallest,
    in_order,
    post_order,
    pre_order,
)

VALUES = [50, 30, 20, 40, 70, 60, 80]


@pytest.fixture
def tree():
    bst = BinarySearchTree()
    for value in VALUES:
        bst.insert(value)
    return bst


def test_length_counts_inserts(tree):
    assert len(tree) == len(VALUES)


def test_empty_tree():
    bst = BinarySearchTree()
    assert len(bst) == 0
    assert bst.lookup(5) is False
    assert list(in_order(bst.root)) == []


def test_in_order_is_sorted(tree):
    assert list(in_order(tree.root)) == sorted(VALUES)


def test_pre_order(tree):
    assert list(pre_order(tree.root)) == [50, 30, 20, 40, 70, 60, 80]


def test_post_order(tree):
    assert list(post_order(tree.root)) == [20, 40, 30, 60, 80, 70, 50]


def test_traversals_visit_every_value(tree):
    assert sorted(pre_order(tree.root)) == sorted(VALUES)
    assert sorted(post_order(tree.root)) == sorted(VALUES)


def test_root_is_first_insert(tree):
    assert tree.root.value == VALUES[0]


def test_lookup_finds_present_values(tree):
    assert all(tree.lookup(value) for value in VALUES)


def test_lookup_misses_absent_value(tree):
    assert tree.lookup(700) is False
    assert 700 not in tree


def test_lookup_leaves_tree_intact(tree):
    tree.lookup(80)
    tree.lookup(20)
    assert tree.root.value == VALUES[0]
    assert list(in_order(tree.root)) == sorted(VALUES)


def test_contains(tree):
    assert 60 in tree


def test_duplicate_goes_right():
    bst = BinarySearchTree()
    bst.insert(5)
    bst.insert(5)
    assert bst.root.left is None
    assert bst.root.right.value == bst.root.value
    assert len(bst) == 2


@pytest.mark.parametrize("k", range(1, len(VALUES) + 1))
def test_kth_smallest_matches_sorted(tree, k):
    assert kth_smallest(tree.root, k) == sorted(VALUES)[k - 1]


@pytest.mark.parametrize("k", [0, len(VALUES) + 1])
def test_kth_smallest_out_of_range(tree, k):
    with pytest.raises(IndexError):
        kth_smallest(tree.root, k)


def test_kth_smallest_repeatable(tree):
    first = kth_smallest(tree.root, 1)
    second = kth_smallest(tree.root, 1)
    assert first == 20
    assert second == 20