import pytest

from nodeworks.bst import BinarySearchTree, TreeNode
from nodeworks.tree_views import (
    boundary,
    largest_per_level,
    next_links,
    populate_next,
    populate_next_complete,
    right_side_view,
    spiral_order,
)


def _tree(root):
    tree = BinarySearchTree()
    tree.root = root
    return tree


@pytest.fixture
def boundary_tree():
    return BinarySearchTree([50, 40, 70, 30, 43, 20, 23, 25, 41, 45, 80, 90, 85, 100])


def test_boundary_worked_example(boundary_tree):
    assert boundary(boundary_tree) == [
        50, 40, 30, 20, 23, 25, 41, 45, 85, 100, 90, 80, 70,
    ]


def test_boundary_visits_each_value_once(boundary_tree):
    result = boundary(boundary_tree)
    assert len(result) == len(set(result))
    assert set(result) <= set(boundary_tree)


def test_boundary_single_node():
    assert boundary(BinarySearchTree([7])) == [7]


@pytest.mark.parametrize(
    "fn", [boundary, right_side_view, spiral_order, largest_per_level, next_links]
)
def test_empty_tree_gives_empty_result(fn):
    assert fn(BinarySearchTree()) == []


def test_right_side_view():
    tree = BinarySearchTree([10, 5, 20, 4, 9, 7, 30, 40])
    assert right_side_view(tree) == [10, 20, 30, 40]


def test_right_side_view_left_leaning():
    tree = BinarySearchTree([20, 15, 50, 40, 13, 10, 5])
    assert right_side_view(tree) == [20, 50, 40, 10, 5]


def test_spiral_order():
    tree = BinarySearchTree([20, 10, 50, 7, 16, 40, 65])
    assert spiral_order(tree) == [20, 10, 50, 65, 40, 16, 7]


def test_spiral_order_keeps_every_value():
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80, 10, 45, 75])
    assert sorted(spiral_order(tree)) == list(tree)


def test_largest_per_level():
    tree = _tree(
        TreeNode(10, TreeNode(1, TreeNode(50), TreeNode(22)), TreeNode(20, TreeNode(60)))
    )
    assert largest_per_level(tree) == [10, 20, 60]


def test_largest_per_level_second_example():
    tree = _tree(
        TreeNode(
            35,
            TreeNode(20, TreeNode(15), TreeNode(5)),
            TreeNode(15, TreeNode(31), TreeNode(30)),
        )
    )
    assert largest_per_level(tree) == [35, 20, 31]


def test_populate_next_links_levels():
    tree = BinarySearchTree([50, 40, 80, 45, 41, 47, 90, 85, 100, 83, 200])
    populate_next(tree)
    assert next_links(tree) == [
        (50, None),
        (40, 80),
        (80, None),
        (45, 90),
        (90, None),
        (41, 47),
        (47, 85),
        (85, 100),
        (100, None),
        (83, 200),
        (200, None),
    ]


def test_next_links_before_population_are_empty():
    tree = BinarySearchTree([10, 5, 20])
    assert next_links(tree) == [(10, None), (5, None), (20, None)]


def test_populate_next_complete_matches_populate_next_on_perfect_tree():
    values = [100, 80, 120, 60, 90, 110, 150, 50, 70, 85, 95, 105, 115, 140, 200]
    first = BinarySearchTree(values)
    second = BinarySearchTree(values)
    populate_next_complete(first)
    populate_next(second)
    assert next_links(first) == next_links(second)
    assert next_links(first)[:3] == [(100, None), (80, 120), (120, None)]


def test_populate_next_complete_chains_each_level():
    values = [100, 80, 120, 60, 90, 110, 150]
    tree = BinarySearchTree(values)
    populate_next_complete(tree)
    chain = []
    node = tree.root.left.left
    while node is not None:
        chain.append(node.value)
        node = node.next
    assert chain == [60, 90, 110, 150]