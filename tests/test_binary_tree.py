from algokit.binary_tree import BinaryNode, build_from_preorder, largest_bst


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.data] + _inorder(node.right)


def _preorder(node):
    if node is None:
        return []
    return [node.data] + _preorder(node.left) + _preorder(node.right)


MIXED = [50, 30, 5, None, None, 20, None, None,
         60, 45, None, None, 70, 65, None, None, 80, None, None]


def test_build_structure():
    root = build_from_preorder([1, 2, None, None, 3, None, None])
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left is None and root.right.right is None


def test_build_preorder_round_trip():
    root = build_from_preorder(MIXED)
    assert _preorder(root) == [v for v in MIXED if v is not None]


def test_build_empty_and_truncated():
    assert build_from_preorder([]) is None
    assert build_from_preorder([None]) is None
    root = build_from_preorder([7, 8])
    assert _preorder(root) == [7, 8]


def test_whole_tree_is_bst():
    root = build_from_preorder([4, 2, 1, None, None, 3, None, None, 6, None, None])
    best, size = largest_bst(root)
    assert best is root
    assert size == len(_inorder(root))


def test_largest_bst_inside_mixed_tree():
    root = build_from_preorder(MIXED)
    best, size = largest_bst(root)
    assert best.data == 60
    values = _inorder(best)
    assert size == len(values)
    assert values == sorted(set(values))
    assert size < len(_inorder(root))


def test_empty_tree():
    assert largest_bst(None) == (None, 0)


def test_single_node():
    node = BinaryNode(9)
    assert largest_bst(node) == (node, 1)