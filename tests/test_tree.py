import pytest

from indenty.tree import RoseTree, render_forest, walk_forest


@pytest.fixture()
def example_tree() -> RoseTree[int]:
    return RoseTree.node(0, [
        RoseTree.leaf(1),
        RoseTree.leaf(2),
        RoseTree.node(3, [RoseTree.leaf(4)])
    ])


def test_leaf():
    leaf = RoseTree.leaf('a')
    assert leaf.value == 'a'
    assert leaf.children == []
    assert leaf.is_leaf()


def test_equality(example_tree: RoseTree[int]):
    same_tree = RoseTree(0, [RoseTree(1), RoseTree(2), RoseTree(3, [RoseTree(4)])])
    assert example_tree == same_tree

    assert RoseTree.node(0, [RoseTree.leaf(1), RoseTree.leaf(2)]) != RoseTree.node(0, [RoseTree.leaf(2),
                                                                                       RoseTree.leaf(1)])
    assert RoseTree.leaf(0) != RoseTree.node(0, [RoseTree.leaf(1)])
    assert RoseTree.leaf(0) != 0


def test_node_copies_children():
    children = [RoseTree.leaf(1)]
    tree = RoseTree.node(0, children)
    children.append(RoseTree.leaf(2))
    assert tree.children == [RoseTree.leaf(1)]


def test_repr(example_tree: RoseTree[int]):
    assert repr(RoseTree.leaf('a')) == "RoseTree('a')"
    assert repr(example_tree) == 'RoseTree(0, [RoseTree(1), RoseTree(2), RoseTree(3, [RoseTree(4)])])'


def test_walk(example_tree: RoseTree[int]):
    assert list(example_tree.walk()) == [(0, 0), (1, 1), (1, 2), (1, 3), (2, 4)]
    assert list(example_tree.walk(depth=1))[0] == (1, 0)


def test_walk_forest(example_tree: RoseTree[int]):
    assert list(walk_forest([RoseTree.leaf(5), example_tree]))[:3] == [(0, 5), (0, 0), (1, 1)]


def test_size_and_height(example_tree: RoseTree[int]):
    assert example_tree.size() == 5
    assert example_tree.height() == 3
    assert RoseTree.leaf(1).height() == 1


def test_dict(example_tree: RoseTree[int]):
    as_dict = example_tree.to_dict()
    assert as_dict['value'] == 0
    assert as_dict['children'][2] == {'value': 3, 'children': [{'value': 4, 'children': []}]}
    assert RoseTree.from_dict(as_dict) == example_tree
    assert RoseTree.from_dict({'value': 'x'}) == RoseTree.leaf('x')


def test_from_prefixables():
    assert RoseTree.from_prefixables([('', 1), (' ', 2)]) == [RoseTree.node(1, [RoseTree.leaf(2)])]


def test_render_vertical(example_tree: RoseTree[int]):
    assert example_tree.render(vertical=True) == (
        '0\n'
        '  1\n'
        '  2\n'
        '  3\n'
        '    4'
    )


def test_render_horizontal(example_tree: RoseTree[int]):
    assert example_tree.render(vertical=False) == '0 => [1, 2, 3 => [4]]'


def test_render_horizontal_narrow(example_tree: RoseTree[int]):
    assert example_tree.render(vertical=False, width=10) == (
        '0 => [\n'
        '  1,\n'
        '  2,\n'
        '  3 => [4]\n'
        ']'
    )


def test_render_leaf():
    assert RoseTree.leaf('just me').render(vertical=False) == 'just me'
    assert RoseTree.leaf('just me').render(vertical=True) == 'just me'


def test_render_forest(example_tree: RoseTree[int]):
    forest = [example_tree, RoseTree.leaf(5)]
    assert render_forest(forest, vertical=False) == '0 => [1, 2, 3 => [4]]\n5'
    assert render_forest(forest, vertical=True).splitlines()[-2:] == ['    4', '5']
    assert render_forest([]) == ''


def test_render_keeps_spaces_in_values():
    tree = RoseTree.node('a ', [RoseTree.leaf('b  ')])
    assert tree.render(vertical=True) == 'a \n  b  '
    assert tree.render(vertical=False) == 'a  => [b  ]'
