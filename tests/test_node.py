import pytest

from bintree.node import Node, lowest_common_ancestor

BST_VALUES = [4, 2, 6, 1, 3, 5, 7]


@pytest.fixture
def perfect_tree():
    root = Node(4)
    left = root.insert_left(2)
    right = root.insert_right(6)
    left.insert_left(1)
    left.insert_right(3)
    right.insert_left(5)
    right.insert_right(7)
    return root


def build_chain(values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_left(value)
    return root, node


def test_new_node_fields():
    parent = Node(1)
    child = Node(2, parent)
    assert child.value == 2
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None and parent.right is None


def test_insert_left_pushes_existing_child_down():
    root = Node(10)
    old = root.insert_left(20)
    new = root.insert_left(30)
    assert root.left is new
    assert new.parent is root
    assert new.left is old
    assert old.parent is new


def test_insert_right_pushes_existing_child_down():
    root = Node(10)
    old = root.insert_right(20)
    new = root.insert_right(30)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_detach_removes_subtree(perfect_tree):
    left = perfect_tree.left
    left.detach()
    assert perfect_tree.left is None
    assert left.is_root()
    assert perfect_tree.size() == 4
    assert left.size() == 3


def test_detach_root_is_harmless(perfect_tree):
    perfect_tree.detach()
    assert perfect_tree.is_root()
    assert perfect_tree.size() == len(BST_VALUES)


def test_leaf_and_root(perfect_tree):
    assert perfect_tree.is_root()
    assert not perfect_tree.is_leaf()
    leaf = perfect_tree.left.left
    assert leaf.is_leaf()
    assert not leaf.is_root()


def test_traversals(perfect_tree):
    assert list(perfect_tree.inorder()) == sorted(BST_VALUES)
    pre = list(perfect_tree.preorder())
    post = list(perfect_tree.postorder())
    assert pre[0] == perfect_tree.value
    assert post[-1] == perfect_tree.value
    assert sorted(pre) == sorted(post) == sorted(BST_VALUES)


def test_traversal_of_left_chain():
    values = [5, 4, 3, 2]
    root, _ = build_chain(values)
    assert list(root.preorder()) == values
    assert list(root.postorder()) == values[::-1]
    assert list(root.inorder()) == values[::-1]


def test_height_and_depth_on_chain():
    values = [9, 8, 7, 6, 5]
    root, bottom = build_chain(values)
    assert root.height() == len(values) - 1
    assert bottom.depth() == len(values) - 1
    assert root.depth() == 0
    assert bottom.height() == 0


def test_height_with_single_child():
    root = Node(1)
    root.insert_right(2)
    assert root.height() == 1


def test_counts_are_consistent(perfect_tree):
    assert perfect_tree.size() == len(BST_VALUES)
    assert perfect_tree.leaves() + perfect_tree.internal_nodes() == perfect_tree.size()
    assert perfect_tree.leaves() == 4


def test_chain_counts():
    values = [1, 2, 3]
    root, _ = build_chain(values)
    assert root.leaves() == 1
    assert root.internal_nodes() == len(values) - 1


def test_balance():
    root, _ = build_chain([1, 2, 3])
    assert root.balance() == 2
    mirror = Node(1)
    mirror.insert_right(2).insert_right(3)
    assert mirror.balance() == -root.balance()


def test_balance_of_perfect(perfect_tree):
    assert perfect_tree.balance() == 0


def test_full_and_perfect(perfect_tree):
    assert perfect_tree.is_full()
    assert perfect_tree.is_perfect()
    perfect_tree.right.right.detach()
    assert not perfect_tree.is_full()
    assert not perfect_tree.is_perfect()


def test_full_but_not_perfect(perfect_tree):
    perfect_tree.right.left.detach()
    perfect_tree.right.right.detach()
    assert perfect_tree.is_full()
    assert not perfect_tree.is_perfect()


def test_single_node_is_full_and_perfect():
    node = Node(0)
    assert node.is_full()
    assert node.is_perfect()


def test_sibling_and_uncle(perfect_tree):
    left, right = perfect_tree.left, perfect_tree.right
    assert left.sibling() is right
    assert right.sibling() is left
    assert perfect_tree.sibling() is None
    assert left.left.uncle() is right
    assert right.right.uncle() is left
    assert left.uncle() is None


def test_sibling_missing():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_lowest_common_ancestor(perfect_tree):
    a = perfect_tree.left.left
    b = perfect_tree.left.right
    c = perfect_tree.right.left
    assert lowest_common_ancestor(a, b) is perfect_tree.left
    assert lowest_common_ancestor(a, c) is perfect_tree
    assert lowest_common_ancestor(a, perfect_tree.left) is perfect_tree.left
    assert lowest_common_ancestor(a, a) is a


def test_lowest_common_ancestor_none_cases(perfect_tree):
    other = Node(4)
    assert lowest_common_ancestor(perfect_tree, other) is None
    assert lowest_common_ancestor(None, perfect_tree) is None
    assert lowest_common_ancestor(perfect_tree, None) is None