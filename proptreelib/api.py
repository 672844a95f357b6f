"""High-level API for PropTreeLib.

This module provides simple, functional interfaces for the common cases:
building a tree, formatting it, printing it, and querying a built tree.
These functions wrap the object-oriented builder and walkers.
"""

from dataclasses import fields
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Tuple, Union

from .config import BuildConfig, DEFAULT_MAX_DEPTH, DEFAULT_ROOT_LABEL, WalkStrategy
from .core.adapter import ValueAdapter
from .core.builder import PropertyTreeBuilder
from .core.node import NodeKind, PropertyTreeNode
from .core.renderer import render
from .core.walker import create_walker
from .error_policies import ErrorPolicy


def build_property_tree(
    value: Any,
    max_depth: int,
    root_label: str = DEFAULT_ROOT_LABEL,
    adapter: Optional[ValueAdapter] = None,
    error_policy: Optional[ErrorPolicy] = None,
    **options
) -> PropertyTreeNode:
    """Build the property tree of any value.

    Args:
        value: The value to inspect
        max_depth: Levels below the root that may be expanded (0 = root only)
        root_label: Name of the root node
        adapter: Reflection layer (defaults to PythonValueAdapter)
        error_policy: Receives absorbed access failures
        **options: Additional BuildConfig fields (include_private,
            include_properties)

    Returns:
        Root PropertyTreeNode

    Raises:
        InvalidDepthError: If max_depth is negative or not a whole number
        TypeError: If an option is not a BuildConfig field

    Example:
        >>> tree = build_property_tree({"a": 1}, max_depth=2)
        >>> tree.children[0].value
        1
    """
    config = _build_config(
        max_depth=max_depth,
        root_label=root_label,
        error_policy=error_policy,
        **options
    )
    builder = PropertyTreeBuilder.from_config(config, adapter=adapter)
    return builder.build(value, config.max_depth, config.root_label)


def format_property_tree(root: PropertyTreeNode) -> str:
    """Format a built tree (or any subtree) as a multi-line string."""
    return render(root)


def log_property_tree(
    value: Any,
    max_depth: int = DEFAULT_MAX_DEPTH,
    root_label: str = DEFAULT_ROOT_LABEL,
    file: Optional[TextIO] = None,
    **options
) -> None:
    """Build the property tree of a value and print it.

    Args:
        value: The value to inspect
        max_depth: See build_property_tree
        root_label: Name of the root node
        file: Output stream (defaults to sys.stdout)
        **options: See build_property_tree

    Raises:
        InvalidDepthError: If max_depth is invalid

    Example:
        >>> log_property_tree({"id": 1}, 1, "obj")
        └─ obj (object)
           └─ id (number): 1
    """
    tree = build_property_tree(value, max_depth, root_label, **options)
    print(format_property_tree(tree), file=file)


def walk_property_tree(
    root: PropertyTreeNode,
    strategy: Union[WalkStrategy, str] = WalkStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None
) -> Iterator[Tuple[PropertyTreeNode, Tuple[str, ...]]]:
    """Walk a built tree.

    Args:
        root: Root of the tree (or subtree) to walk
        strategy: Walk strategy (bfs, dfs_pre, dfs_post)
        max_depth: Deepest level to visit (None = unlimited)

    Yields:
        Tuples of (node, path) where path holds the names from root to node
    """
    walker = create_walker(strategy)
    yield from walker.walk(root, max_depth=max_depth)


def count_nodes(root: PropertyTreeNode, **kwargs) -> int:
    """Count nodes in a built tree.

    Args:
        root: Root of the tree
        **kwargs: Walk options (see walk_property_tree)
    """
    count = 0
    for _ in walk_property_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: PropertyTreeNode,
    predicate: Callable[[PropertyTreeNode], bool],
    **kwargs
) -> Iterator[PropertyTreeNode]:
    """Find nodes that match a predicate.

    Example:
        >>> tree = build_property_tree({"a": "x", "b": 2}, max_depth=1)
        >>> [n.name for n in find_nodes(tree, lambda n: n.kind is NodeKind.STRING)]
        ['a']
    """
    for node, _ in walk_property_tree(root, **kwargs):
        if predicate(node):
            yield node


def get_tree_paths(root: PropertyTreeNode, separator: str = ".", **kwargs) -> Iterator[str]:
    """Get the path of each node as labels joined by separator.

    List indices are appended without a separator, so the paths read like
    attribute access: ``root.user.roles[0]``.
    """
    for _, path in walk_property_tree(root, **kwargs):
        text = path[0]
        for name in path[1:]:
            text += name if _is_index_label(name) else separator + name
        yield text


def get_leaf_nodes(root: PropertyTreeNode, **kwargs) -> Iterator[PropertyTreeNode]:
    """Get all nodes without children."""
    for node, _ in walk_property_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(root: PropertyTreeNode, **kwargs) -> Dict[str, Any]:
    """Get statistics about a built tree.

    Returns:
        Dictionary with node counts per depth and per kind, plus the number
        of circular references and access errors
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
        'kinds': {},
        'circular_references': 0,
        'access_errors': 0,
    }

    for node, path in walk_property_tree(root, **kwargs):
        depth = len(path) - 1
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1
        if node.is_circular:
            stats['circular_references'] += 1
        if node.kind is NodeKind.ERROR:
            stats['access_errors'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1
        kind = node.kind.value
        stats['kinds'][kind] = stats['kinds'].get(kind, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _build_config(**kwargs) -> BuildConfig:
    """Build BuildConfig from keyword arguments.

    Raises:
        TypeError: For names that are not BuildConfig fields
    """
    known = {field.name for field in fields(BuildConfig)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise TypeError(f"Unknown build options: {', '.join(unknown)}")
    return BuildConfig(**kwargs)


def _is_index_label(name: str) -> bool:
    return name.startswith("[") and name.endswith("]")
