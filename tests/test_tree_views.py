import pytest

from dsakit.tree import (
    Node,
    build_tree_level_order,
    build_tree_preorder,
    in_order,
    level_order,
    pre_order,
)
from dsakit.tree_views import (
    boundary,
    bottom_view,
    left_view,
    right_view,
    top_view,
    vertical_order,
    zigzag,
)

ALL_VIEWS = [boundary, bottom_view, top_view, left_view, right_view, vertical_order, zigzag]


def full_tree():
    return build_tree_level_order(
        [1, 2, 3, 4, 5, 6, 7, -1, -1, -1, -1, -1, -1, -1, -1]
    )


def example_tree():
    return build_tree_preorder([10, 5, 1, -1, -1, 2, -1, -1, 7, 2, -1, -1, 1, -1, -1])


def uneven_tree():
    return build_tree_level_order(
        [1, 2, 3, -1, 4, 5, -1, 6, -1, -1, 7, -1, -1, -1, -1]
    )


def left_chain():
    return Node(1, left=Node(2, left=Node(3, left=Node(4))))


def right_chain():
    return Node(1, right=Node(2, right=Node(3, right=Node(4))))


TREES = [full_tree, example_tree, uneven_tree, left_chain, right_chain]


def test_empty_tree_gives_empty_view():
    assert boundary(None) == []
    assert bottom_view(None) == []
    assert top_view(None) == []
    assert left_view(None) == []
    assert right_view(None) == []
    assert vertical_order(None) == []
    assert zigzag(None) == []


@pytest.mark.parametrize("view", ALL_VIEWS)
def test_single_node(view):
    assert view(Node(42)) == [42]


def test_full_tree_top_view():
    assert top_view(full_tree()) == [4, 2, 1, 3, 7]


def test_full_tree_boundary():
    assert boundary(full_tree()) == [1, 2, 4, 5, 6, 7, 3]


def test_full_tree_zigzag():
    assert zigzag(full_tree()) == [1, 3, 2, 4, 5, 6, 7]


@pytest.mark.parametrize("make", TREES)
def test_left_view_is_first_of_each_level(make):
    root = make()
    assert left_view(root) == [level[0] for level in level_order(root)]


@pytest.mark.parametrize("make", TREES)
def test_right_view_is_last_of_each_level(make):
    root = make()
    assert right_view(root) == [level[-1] for level in level_order(root)]


@pytest.mark.parametrize("make", TREES)
def test_zigzag_alternates_level_direction(make):
    root = make()
    expected = []
    for depth, level in enumerate(level_order(root)):
        expected.extend(level if depth % 2 == 0 else level[::-1])
    assert zigzag(root) == expected


@pytest.mark.parametrize("make", TREES)
def test_vertical_order_covers_every_node(make):
    root = make()
    assert sorted(vertical_order(root)) == sorted(in_order(root))


@pytest.mark.parametrize("make", TREES)
def test_top_and_bottom_views_have_same_width(make):
    root = make()
    assert len(top_view(root)) == len(bottom_view(root))


@pytest.mark.parametrize("make", TREES)
def test_boundary_starts_at_root(make):
    root = make()
    assert boundary(root)[0] == root.data


@pytest.mark.parametrize("make", TREES)
def test_views_start_with_root_where_it_must(make):
    root = make()
    assert left_view(root)[0] == root.data
    assert right_view(root)[0] == root.data
    assert zigzag(root)[0] == root.data


def test_left_chain_views():
    root = left_chain()
    order = pre_order(root)
    assert top_view(root) == order[::-1]
    assert bottom_view(root) == order[::-1]
    assert vertical_order(root) == order[::-1]
    assert boundary(root) == order
    assert left_view(root) == order
    assert right_view(root) == order


def test_right_chain_views():
    root = right_chain()
    order = pre_order(root)
    assert top_view(root) == order
    assert bottom_view(root) == order
    assert vertical_order(root) == order
    assert left_view(root) == order
    assert sorted(boundary(root)) == sorted(order)
    assert boundary(root)[1] == order[-1]


def test_bottom_view_prefers_later_node_in_same_column():
    root = full_tree()
    # Column 0 holds the root and both inner grandchildren; the last one wins.
    middle = bottom_view(root)[len(bottom_view(root)) // 2]
    assert middle == root.right.left.data
    assert top_view(root)[len(top_view(root)) // 2] == root.data


def test_vertical_order_keeps_level_order_within_column():
    root = full_tree()
    result = vertical_order(root)
    column = result[2:5]
    assert column == [root.data, root.left.right.data, root.right.left.data]


def test_boundary_of_example_tree_lists_every_node():
    root = example_tree()
    assert sorted(boundary(root)) == sorted(pre_order(root))
    assert boundary(root)[-1] == root.right.data