import pytest

from dsprimer.search_tree import BinarySearchTree


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


@pytest.fixture
def search_tree():
    return build([9, 1, 6, 2, 8, 3, 5])


@pytest.fixture
def delete_tree():
    return build([5, 8, 1, 6, 4, 9, 3, 2, 7])


def _assert_valid(node, low=None, high=None):
    if node is None:
        return
    if low is not None:
        assert node.data > low
    if high is not None:
        assert node.data < high
    _assert_valid(node.left, low, node.data)
    _assert_valid(node.right, node.data, high)


@pytest.mark.parametrize("target", [1, 6])
def test_search_found(search_tree, target):
    node = search_tree.search(target)
    assert node.data == target


@pytest.mark.parametrize("target", [4, 7])
def test_search_missing(search_tree, target):
    assert search_tree.search(target) is None


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.root is None
    assert tree.search(3) is None
    assert list(tree) == []
    assert len(tree) == 0


def test_first_insert_becomes_root():
    tree = build([9, 1])
    assert tree.root.data == 9
    assert tree.root.left.data == 1


def test_iteration_is_sorted(search_tree):
    assert list(search_tree) == sorted([9, 1, 6, 2, 8, 3, 5])
    _assert_valid(search_tree.root)


def test_duplicate_insert_is_ignored(search_tree):
    before = list(search_tree)
    search_tree.insert(6)
    assert list(search_tree) == before
    assert len(search_tree) == len(before)


def test_contains(search_tree):
    assert 8 in search_tree
    assert 4 not in search_tree


def test_remove_sequence(delete_tree):
    remaining = {5, 8, 1, 6, 4, 9, 3, 2, 7}
    for target in (3, 8, 1, 6):
        removed = delete_tree.remove(target)
        remaining.discard(target)
        assert removed.data == target
        assert removed.left is None and removed.right is None
        assert list(delete_tree) == sorted(remaining)
        assert target not in delete_tree
        _assert_valid(delete_tree.root)
    assert len(delete_tree) == len(remaining)


def test_remove_missing_returns_none(delete_tree):
    before = list(delete_tree)
    assert delete_tree.remove(42) is None
    assert list(delete_tree) == before


def test_remove_from_empty_tree():
    assert BinarySearchTree().remove(1) is None


def test_remove_root_with_two_children(delete_tree):
    removed = delete_tree.remove(5)
    assert removed.data == 5
    assert delete_tree.root.data == 6
    assert 5 not in delete_tree
    _assert_valid(delete_tree.root)


def test_remove_root_with_one_child():
    tree = build([1, 2, 3])
    tree.remove(1)
    assert tree.root.data == 2
    assert list(tree) == [2, 3]


def test_remove_only_node():
    tree = build([4])
    removed = tree.remove(4)
    assert removed.data == 4
    assert tree.root is None
    assert list(tree) == []


def test_remove_leaf_and_left_only_child():
    tree = build([10, 5, 3])
    tree.remove(5)
    assert tree.root.left.data == 3
    tree.remove(3)
    assert tree.root.left is None
    assert list(tree) == [10]


def test_remove_all_leaves_empty_tree(delete_tree):
    for target in [5, 8, 1, 6, 4, 9, 3, 2, 7]:
        assert delete_tree.remove(target).data == target
        _assert_valid(delete_tree.root)
    assert delete_tree.root is None
    assert len(delete_tree) == 0


def test_show_all_prints_sorted_keys(delete_tree, capsys):
    delete_tree.show_all()
    out = capsys.readouterr().out
    assert out.split() == [str(v) for v in sorted([5, 8, 1, 6, 4, 9, 3, 2, 7])]


def test_sorted_insertion_handles_deep_tree():
    tree = build(range(3000))
    assert list(tree) == list(range(3000))
    assert tree.search(2999).data == 2999