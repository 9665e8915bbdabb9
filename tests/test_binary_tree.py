import pytest

from algos.binary_tree import BinaryTree, query_binary_tree


def test_len():
    tree = BinaryTree()
    assert len(tree) == 0
    tree.insert(2)
    assert len(tree) == 1
    tree.insert(1)
    assert len(tree) == 2
    tree.insert(2)
    assert len(tree) == 2


def test_has_str():
    tree = BinaryTree()
    tree.insert("foo")
    assert len(tree) == 1
    tree.insert("bar")
    assert "foo" in tree
    assert "baz" not in tree


def test_has_i32():
    tree = BinaryTree()

    def check(expected):
        assert [i in tree for i in range(len(expected))] == expected

    check([False, False, False, False, False])
    tree.insert(0)
    check([True, False, False, False, False])
    tree.insert(4)
    check([True, False, False, False, True])
    tree.insert(4)
    check([True, False, False, False, True])
    tree.insert(3)
    check([True, False, False, True, True])


def test_unbalanced():
    tree = BinaryTree()
    for i in range(100):
        tree.insert(i)
    assert len(tree) == 100
    assert 50 in tree


def test_query_binary_tree_matches_expected():
    report = query_binary_tree(5, 1_000, 10_000)
    assert report.found == report.expected
    assert report.num_queries == 10_000


def test_query_binary_tree_rejects_bad_step():
    with pytest.raises(ValueError):
        query_binary_tree(0, 100, 10)