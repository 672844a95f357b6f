"""
Tests for the high-level API.
"""

import io

import pytest

from proptreelib import (
    CIRCULAR_REFERENCE_MARKER,
    CollectErrorsPolicy,
    InvalidDepthError,
    NodeKind,
    PythonValueAdapter,
    build_property_tree,
    count_nodes,
    find_nodes,
    format_property_tree,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    log_property_tree,
    walk_property_tree,
)


class Record:
    def __init__(self):
        self._hidden = 1
        self.shown = 2


def make_complex_object():
    """Sample object mixing every kind, with a cycle."""
    value = {
        "id": 123,
        "user": {
            "name": "Alice",
            "roles": ["admin", "editor"],
            "settings": {"theme": "dark", "notifications": True},
        },
        "data": [None, 2 ** 60],
        "method": lambda: "hello",
    }
    value["user"]["self"] = value["user"]
    return value


EXPECTED_COMPLEX = """\
└─ myObject (object)
   ├─ id (number): 123
   ├─ user (object)
   │  ├─ name (string): "Alice"
   │  ├─ roles (array)
   │  │  ├─ [0] (string): "admin"
   │  │  └─ [1] (string): "editor"
   │  ├─ settings (object)
   │  │  ├─ theme (string): "dark"
   │  │  └─ notifications (boolean): True
   │  └─ self (object): [Circular Reference]
   ├─ data (array)
   │  ├─ [0] (null): None
   │  └─ [1] (bigint): 1152921504606846976
   └─ method (function)"""


class TestBuildAndFormat:
    """build_property_tree + format_property_tree."""

    def test_complex_object(self):
        tree = build_property_tree(make_complex_object(), 3, "myObject")
        assert format_property_tree(tree) == EXPECTED_COMPLEX

    def test_invalid_depth(self):
        with pytest.raises(InvalidDepthError):
            build_property_tree({}, -1)

    def test_options_reach_adapter(self):
        assert [c.name for c in build_property_tree(Record(), 1).children] == ["shown"]
        tree = build_property_tree(Record(), 1, include_private=True)
        assert [c.name for c in tree.children] == ["_hidden", "shown"]

    def test_underscore_mapping_keys_rendered(self):
        tree = build_property_tree({"_id": 7, "name": "x"}, 1)
        assert format_property_tree(tree) == (
            "└─ root (object)\n"
            "   ├─ _id (number): 7\n"
            '   └─ name (string): "x"'
        )

    def test_unknown_option_rejected(self):
        with pytest.raises(TypeError, match="colour"):
            build_property_tree({}, 1, colour="red")

    def test_explicit_adapter_wins(self):
        adapter = PythonValueAdapter(include_private=True)
        tree = build_property_tree(Record(), 1, adapter=adapter)
        assert tree.children[0].name == "_hidden"

    def test_error_policy_passed_through(self):
        class Broken:
            @property
            def value(self):
                raise RuntimeError("x")

        policy = CollectErrorsPolicy()
        build_property_tree(Broken(), 1, error_policy=policy)
        assert len(policy.errors) == 1


class TestLogPropertyTree:
    """log_property_tree prints one block per call."""

    def test_prints_to_stdout(self, capsys):
        log_property_tree({"a": 1}, 1)
        assert capsys.readouterr().out == "└─ root (object)\n   └─ a (number): 1\n"

    def test_default_depth_is_three(self, capsys):
        log_property_tree(make_complex_object(), root_label="myObject")
        assert capsys.readouterr().out == EXPECTED_COMPLEX + "\n"

    def test_root_only(self, capsys):
        log_property_tree(make_complex_object(), 0)
        assert capsys.readouterr().out == "└─ root (object)\n"

    def test_primitive(self, capsys):
        log_property_tree("Just a string", 1)
        assert capsys.readouterr().out == '└─ root (string): "Just a string"\n'

    def test_custom_stream(self):
        stream = io.StringIO()
        log_property_tree([1], 1, file=stream)
        assert stream.getvalue() == "└─ root (array)\n   └─ [0] (number): 1\n"

    def test_invalid_depth_prints_nothing(self, capsys):
        with pytest.raises(InvalidDepthError):
            log_property_tree({}, 2.5)
        assert capsys.readouterr().out == ""


class TestTreeQueries:
    """Helpers that query an already-built tree."""

    @pytest.fixture
    def tree(self):
        return build_property_tree(make_complex_object(), 3, "obj")

    def test_count_nodes(self, tree):
        # root + 4 members + 4 user members + 2 roles + 2 settings + 2 data
        assert count_nodes(tree) == 15
        assert count_nodes(tree, max_depth=1) == 5

    def test_find_nodes(self, tree):
        strings = [n.name for n in find_nodes(tree, lambda n: n.kind is NodeKind.STRING)]
        assert strings == ["name", "[0]", "[1]", "theme"]

    def test_find_nodes_depth_first(self, tree):
        found = find_nodes(tree, lambda n: n.kind is NodeKind.ARRAY, strategy="dfs_pre")
        assert [n.name for n in found] == ["roles", "data"]

    def test_get_tree_paths(self, tree):
        paths = list(get_tree_paths(tree, strategy="dfs_pre"))
        assert paths[:4] == ["obj", "obj.id", "obj.user", "obj.user.name"]
        assert "obj.user.roles[1]" in paths
        assert "obj.data[0]" in paths

    def test_get_leaf_nodes(self, tree):
        leaves = {n.name for n in get_leaf_nodes(tree)}
        assert "self" in leaves
        assert "method" in leaves
        assert "user" not in leaves

    def test_get_tree_stats(self, tree):
        stats = get_tree_stats(tree)
        assert stats['total_nodes'] == 15
        assert stats['max_depth'] == 3
        assert stats['depths'] == {0: 1, 1: 4, 2: 6, 3: 4}
        assert stats['circular_references'] == 1
        assert stats['access_errors'] == 0
        assert stats['kinds']['string'] == 4
        assert stats['internal_nodes'] == 5
        assert stats['leaf_nodes'] == 10

    def test_walk_property_tree_paths(self, tree):
        entries = list(walk_property_tree(tree, max_depth=1))
        assert entries[0][1] == ("obj",)
        assert [node.value for node, _ in entries][1] == 123

    def test_circular_node_found(self, tree):
        (node,) = find_nodes(tree, lambda n: n.is_circular)
        assert node.value == CIRCULAR_REFERENCE_MARKER
