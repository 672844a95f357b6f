"""
Tests for walking built property trees.
"""

import pytest

from proptreelib import (
    BreadthFirstWalker,
    CollectErrorsPolicy,
    DepthFirstPostOrderWalker,
    DepthFirstPreOrderWalker,
    PropertyTreeBuilder,
    WalkStrategy,
    create_walker,
)


@pytest.fixture
def tree():
    """
    Structure:
    root
    ├── a
    │   ├── [0]
    │   └── [1]
    └── b
        └── c
    """
    value = {"a": [1, 2], "b": {"c": "x"}}
    return PropertyTreeBuilder(error_policy=CollectErrorsPolicy()).build(value, 3)


def names(entries):
    return [node.name for node, _ in entries]


class TestWalkers:
    """Each walker visits every node once in its own order."""

    def test_breadth_first(self, tree):
        assert names(BreadthFirstWalker().walk(tree)) == ["root", "a", "b", "[0]", "[1]", "c"]

    def test_depth_first_pre_order(self, tree):
        assert names(DepthFirstPreOrderWalker().walk(tree)) == ["root", "a", "[0]", "[1]", "b", "c"]

    def test_depth_first_post_order(self, tree):
        assert names(DepthFirstPostOrderWalker().walk(tree)) == ["[0]", "[1]", "a", "c", "b", "root"]

    def test_paths(self, tree):
        paths = [path for _, path in BreadthFirstWalker().walk(tree)]
        assert paths[0] == ("root",)
        assert ("root", "a", "[1]") in paths
        assert ("root", "b", "c") in paths

    @pytest.mark.parametrize("walker_class", [
        BreadthFirstWalker,
        DepthFirstPreOrderWalker,
        DepthFirstPostOrderWalker,
    ])
    def test_max_depth(self, tree, walker_class):
        visited = names(walker_class().walk(tree, max_depth=1))
        assert sorted(visited) == ["a", "b", "root"]

    def test_max_depth_zero_yields_root(self, tree):
        assert names(BreadthFirstWalker().walk(tree, max_depth=0)) == ["root"]


class TestCreateWalker:
    """Factory accepts enums and names."""

    @pytest.mark.parametrize("strategy,expected", [
        (WalkStrategy.BREADTH_FIRST, BreadthFirstWalker),
        (WalkStrategy.DEPTH_FIRST_PRE, DepthFirstPreOrderWalker),
        (WalkStrategy.DEPTH_FIRST_POST, DepthFirstPostOrderWalker),
        ("bfs", BreadthFirstWalker),
        ("DFS", DepthFirstPreOrderWalker),
        ("depth_first_post", DepthFirstPostOrderWalker),
    ])
    def test_known_strategies(self, strategy, expected):
        assert isinstance(create_walker(strategy), expected)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown walk strategy"):
            create_walker("sideways")
