"""Core components: node model, value adapter, builder, renderer, walkers."""

from .node import (
    ACCESS_ERROR_MARKER,
    CIRCULAR_REFERENCE_MARKER,
    NO_VALUE,
    UNDEFINED,
    NodeKind,
    PropertyTreeNode,
)
from .adapter import MemberRead, ValueAdapter, PythonValueAdapter
from .builder import InvalidDepthError, PropertyTreeBuilder, WorkItem
from .renderer import render, format_node, format_value
from .walker import (
    TreeWalker,
    BreadthFirstWalker,
    DepthFirstPreOrderWalker,
    DepthFirstPostOrderWalker,
    create_walker,
)

__all__ = [
    'ACCESS_ERROR_MARKER',
    'CIRCULAR_REFERENCE_MARKER',
    'NO_VALUE',
    'UNDEFINED',
    'NodeKind',
    'PropertyTreeNode',
    'MemberRead',
    'ValueAdapter',
    'PythonValueAdapter',
    'InvalidDepthError',
    'PropertyTreeBuilder',
    'WorkItem',
    'render',
    'format_node',
    'format_value',
    'TreeWalker',
    'BreadthFirstWalker',
    'DepthFirstPreOrderWalker',
    'DepthFirstPostOrderWalker',
    'create_walker',
]
