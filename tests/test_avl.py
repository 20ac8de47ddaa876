import pytest

from algokit.avl import AVLTree

EXAMPLE = [9, 5, 10, 0, 6, 11, -1, 1, 2]


def test_example_preorder():
    tree = AVLTree(EXAMPLE)
    assert tree.preorder() == [9, 1, 0, -1, 5, 2, 6, 10, 11]


def test_example_after_deleting_ten():
    tree = AVLTree(EXAMPLE)
    tree.delete(10)
    assert tree.preorder() == [1, 0, -1, 9, 5, 2, 6, 11]
    assert 10 not in tree


def test_search_after_delete():
    tree = AVLTree(EXAMPLE)
    tree.delete(10)
    assert 6 in tree
    assert 7 not in tree


def test_left_rotation():
    assert AVLTree([1, 2, 3]).preorder() == [2, 1, 3]


def test_right_rotation():
    assert AVLTree([3, 2, 1]).preorder() == [2, 1, 3]


def test_ascending_inserts_stay_balanced():
    assert AVLTree(range(1, 8)).preorder() == [4, 2, 1, 3, 6, 5, 7]


def test_duplicate_insert_is_ignored():
    tree = AVLTree(EXAMPLE)
    before = tree.preorder()
    tree.insert(5)
    assert tree.preorder() == before


def test_deleting_missing_key_changes_nothing():
    tree = AVLTree(EXAMPLE)
    before = tree.preorder()
    tree.delete(42)
    assert tree.preorder() == before


def test_empty_tree():
    tree = AVLTree()
    assert tree.preorder() == []
    assert 1 not in tree
    tree.delete(1)
    assert tree.preorder() == []


@pytest.mark.parametrize("removed", [0, 5, 9, 11, -1, 2])
def test_delete_keeps_other_keys(removed):
    tree = AVLTree(EXAMPLE)
    tree.delete(removed)
    remaining = set(EXAMPLE) - {removed}
    assert sorted(tree.preorder()) == sorted(remaining)
    assert all(key in tree for key in remaining)
    assert removed not in tree


def test_delete_all_empties_tree():
    tree = AVLTree(range(20))
    for key in range(20):
        tree.delete(key)
    assert tree.preorder() == []