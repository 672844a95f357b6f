"""PropTreeLib - Object Property Tree Inspection Library.

PropTreeLib turns any Python value into a depth-limited tree of labeled nodes
and renders it as an indented text diagram. It is safe to use on values with
reference cycles or with properties that raise when read.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from proptreelib import log_property_tree

    log_property_tree(obj, max_depth=3, root_label="obj")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Building and formatting can also be done separately with
build_property_tree() and format_property_tree().
"""

__version__ = "0.1.0"

# Core components
from .core.node import (
    ACCESS_ERROR_MARKER,
    CIRCULAR_REFERENCE_MARKER,
    UNDEFINED,
    NodeKind,
    PropertyTreeNode,
)
from .core.adapter import MemberRead, ValueAdapter, PythonValueAdapter
from .core.builder import InvalidDepthError, PropertyTreeBuilder
from .core.renderer import render
from .core.walker import (
    TreeWalker,
    BreadthFirstWalker,
    DepthFirstPreOrderWalker,
    DepthFirstPostOrderWalker,
    create_walker,
)

# Configuration and error handling
from .config import BuildConfig, WalkStrategy
from .error_policies import ErrorPolicy, ContinueOnErrorsPolicy, CollectErrorsPolicy

# High-level API
from .api import (
    build_property_tree,
    format_property_tree,
    log_property_tree,
    walk_property_tree,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'ACCESS_ERROR_MARKER',
    'CIRCULAR_REFERENCE_MARKER',
    'UNDEFINED',
    'NodeKind',
    'PropertyTreeNode',
    'MemberRead',
    'ValueAdapter',
    'PythonValueAdapter',
    'InvalidDepthError',
    'PropertyTreeBuilder',
    'render',
    'TreeWalker',
    'BreadthFirstWalker',
    'DepthFirstPreOrderWalker',
    'DepthFirstPostOrderWalker',
    'create_walker',
    # Config
    'BuildConfig',
    'WalkStrategy',
    'ErrorPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    # API
    'build_property_tree',
    'format_property_tree',
    'log_property_tree',
    'walk_property_tree',
    'count_nodes',
    'find_nodes',
    'get_tree_paths',
    'get_leaf_nodes',
    'get_tree_stats',
]
