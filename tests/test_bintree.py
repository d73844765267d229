import pytest

from cppstructs.bintree import (
    BinarySearchTree,
    Node,
    is_balanced,
    max_height,
    min_height,
    size,
)


def _build(pairs):
    tree = BinarySearchTree()
    for key, data in pairs:
        tree.insert(key, data)
    return tree


def _check_parents(node):
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_parents(child)


def test_empty_tree_insert():
    tree = BinarySearchTree()
    tree.insert(1, 10)
    assert tree.root.key == 1
    assert tree.root.data == 10
    assert tree.root.left is None
    assert tree.root.right is None


def test_empty_tree_errors():
    tree = BinarySearchTree()
    with pytest.raises(KeyError):
        tree.remove(1)
    with pytest.raises(KeyError):
        tree.find(1)
    with pytest.raises(KeyError):
        tree.edit(1, 5)


def test_empty_tree_clear():
    tree = BinarySearchTree()
    tree.clear()
    assert tree.root is None
    assert len(tree) == 0


def test_empty_tree_height_and_size():
    assert max_height(None) == 0
    assert min_height(None) == 0
    assert size(None) == 0
    assert is_balanced(None) is True
    tree = BinarySearchTree()
    assert tree.max_height() == 0
    assert tree.min_height() == 0
    assert len(tree) == 0
    assert tree.is_balanced() is True


def test_size_one_insert():
    tree = _build([(1, 2)])
    tree.insert(2, 3)
    assert tree.root.right.key == 2
    assert tree.root.right.data == 3
    assert tree.root.left is None
    assert len(tree) == 2
    assert tree.is_balanced() is True


def test_size_one_remove():
    tree = _build([(1, 2)])
    tree.remove(1)
    assert tree.root is None


def test_size_one_find_and_edit():
    tree = _build([(1, 2)])
    assert tree.find(1) == 2
    tree.edit(1, 5)
    assert tree.root.data == 5
    assert tree.find(1) == 5


def test_size_one_clear():
    tree = _build([(1, 2)])
    tree.clear()
    assert tree.root is None


def test_size_one_height_and_size():
    tree = _build([(1, 2)])
    assert tree.max_height() == 1
    assert tree.min_height() == 1
    assert len(tree) == 1
    assert tree.is_balanced() is True


def test_insert_duplicate_and_remove_root():
    tree = _build([(1, 2), (2, 3), (5, 4), (5, 10)])
    tree.remove(1)
    assert tree.root.key == 2
    assert tree.root.data == 3
    assert tree.root.parent is None
    assert tree.root.left is None
    assert tree.root.right.key == 5
    assert tree.root.right.data == 10
    assert len(tree) == 2
    assert tree.is_balanced() is True


def test_find_and_height():
    tree = _build([(10, 2), (20, 3), (9, 1), (7, 6), (8, 8)])
    assert tree.find(8) == 8
    assert len(tree) == 5
    assert tree.max_height() == 4
    assert tree.min_height() == 2
    assert tree.is_balanced() is False


def test_clear_larger_tree():
    tree = _build([(10, 2), (20, 3), (9, 1), (7, 6), (8, 8)])
    tree.clear()
    assert tree.root is None
    assert 10 not in tree


def test_find_remove_find_clear():
    tree = _build([(1, 2), (2, 3), (5, 4), (5, 10)])
    assert tree.find(5) == 10
    tree.remove(5)
    with pytest.raises(KeyError):
        tree.find(5)
    tree.clear()
    for key in (1, 2, 5):
        with pytest.raises(KeyError):
            tree.find(key)
    tree.insert(2, 3)
    tree.insert(5, 4)
    assert tree.find(2) == 3
    assert tree.find(5) == 4


def test_errors_on_larger_tree():
    tree = _build([(10, 2), (20, 3), (9, 1), (7, 6), (8, 8)])
    with pytest.raises(KeyError):
        tree.remove(1)
    with pytest.raises(KeyError):
        tree.find(1)
    with pytest.raises(KeyError):
        tree.edit(1, 0)
    assert tree.find(9) == 1
    tree.remove(9)
    with pytest.raises(KeyError):
        tree.remove(9)


def test_remove_node_with_two_children_keeps_order_and_parents():
    keys = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]
    tree = _build((k, str(k)) for k in keys)
    tree.remove(30)
    tree.remove(50)
    remaining = [k for k in keys if k not in (30, 50)]
    assert len(tree) == len(remaining)
    for key in remaining:
        assert tree.find(key) == str(key)
    assert 30 not in tree
    assert 50 not in tree
    assert tree.root.parent is None
    _check_parents(tree.root)


def test_contains():
    tree = _build([(3, "c"), (1, "a")])
    assert 3 in tree
    assert 1 in tree
    assert 2 not in tree


def test_sorted_insertion_degenerates():
    count = 5000
    tree = _build((k, k) for k in range(count))
    assert tree.max_height() == count
    assert tree.min_height() == 1
    assert len(tree) == count
    assert tree.is_balanced() is False


def test_module_functions_on_nodes():
    root = Node(2, "b")
    root.left = Node(1, "a", parent=root)
    root.right = Node(3, "c", parent=root)
    assert size(root) == 3
    assert max_height(root) == 2
    assert min_height(root) == 2
    assert is_balanced(root) is True


def test_string_keys():
    tree = _build([("m", 1), ("c", 2), ("x", 3)])
    assert tree.root.left.key == "c"
    assert tree.root.right.key == "x"
    assert tree.find("x") == 3