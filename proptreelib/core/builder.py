"""Property tree construction for PropTreeLib.

The builder walks a value breadth-first with an explicit work queue, so the
call stack stays flat no matter how deep the inspection goes. Each queued
container carries its own copy of the visited set, scoped to the path from
the root, which lets sibling branches share objects without being reported
as cycles.
"""

import numbers
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Optional

from .adapter import MemberRead, PythonValueAdapter, ValueAdapter
from .node import (
    ACCESS_ERROR_MARKER,
    CIRCULAR_REFERENCE_MARKER,
    NodeKind,
    PropertyTreeNode,
)
from ..error_policies import ContinueOnErrorsPolicy, ErrorPolicy


# Label of the error node added when a container's members cannot be listed.
ENUMERATION_ERROR_LABEL = "<members>"


class InvalidDepthError(ValueError):
    """Raised when ``max_depth`` is negative or not a whole number."""

    def __init__(self, depth: Any):
        super().__init__(f"Invalid max_depth: {depth!r}. Must be a non-negative integer.")
        self.depth = depth


@dataclass
class WorkItem:
    """A container waiting for its members to be enumerated.

    Attributes:
        container: The list-like or composite value to expand
        depth: Depth at which the container was discovered (root = 0)
        parent: Node that receives the container's members as children
        visited: Identity -> object for every container on the path from the
            root, this one included. Holding the objects keeps their ids
            unique for the duration of the build.
    """

    container: Any
    depth: int
    parent: PropertyTreeNode
    visited: Dict[int, Any]


class PropertyTreeBuilder:
    """Builds a PropertyTreeNode tree from an arbitrary value.

    Example:
        >>> builder = PropertyTreeBuilder()
        >>> tree = builder.build({"a": 1, "b": [True]}, max_depth=2)
        >>> [child.name for child in tree.children]
        ['a', 'b']
    """

    def __init__(self,
                 adapter: Optional[ValueAdapter] = None,
                 error_policy: Optional[ErrorPolicy] = None):
        """Initialize builder.

        Args:
            adapter: Reflection layer (defaults to PythonValueAdapter)
            error_policy: Receives every absorbed access failure
                (defaults to a fresh ContinueOnErrorsPolicy per build)
        """
        self.adapter = adapter or PythonValueAdapter()
        self.error_policy = error_policy or ContinueOnErrorsPolicy()
        self._owns_policy = error_policy is None

    @classmethod
    def from_config(cls, config, adapter: Optional[ValueAdapter] = None) -> "PropertyTreeBuilder":
        """Create a builder from a BuildConfig.

        Args:
            config: BuildConfig supplying adapter options and error policy
            adapter: Explicit adapter, overrides the config's adapter options

        Returns:
            PropertyTreeBuilder instance
        """
        if adapter is None:
            adapter = PythonValueAdapter(
                include_private=config.include_private,
                include_properties=config.include_properties,
            )
        return cls(adapter=adapter, error_policy=config.error_policy)

    def build(self, value: Any, max_depth: int, root_label: str = "root") -> PropertyTreeNode:
        """Build the property tree of a value.

        Args:
            value: Any value
            max_depth: Number of levels below the root that may be expanded.
                ``0`` produces the root node only.
            root_label: Name of the root node

        Returns:
            Root PropertyTreeNode

        Raises:
            InvalidDepthError: If max_depth is negative or not a whole number
        """
        max_depth = validate_depth(max_depth)

        if self._owns_policy:
            # Default policy records one build only
            self.error_policy = ContinueOnErrorsPolicy()

        kind = self.adapter.classify(value)
        root = PropertyTreeNode(name=root_label, kind=kind)

        if kind.is_terminal:
            root.value = ACCESS_ERROR_MARKER if kind is NodeKind.ERROR else value
            return root

        if max_depth == 0 or kind is NodeKind.FUNCTION:
            return root

        root.children = []
        queue: Deque[WorkItem] = deque([
            WorkItem(
                container=value,
                depth=0,
                parent=root,
                visited={self.adapter.identity(value): value},
            )
        ])

        while queue:
            item = queue.popleft()
            self._expand(item, max_depth, queue)

        return root

    def _expand(self, item: WorkItem, max_depth: int, queue: Deque[WorkItem]) -> None:
        """Enumerate one container and attach its members to the parent node."""
        if item.parent.kind is NodeKind.ARRAY:
            members = self.adapter.iter_items(item.container)
        else:
            members = self.adapter.iter_properties(item.container)

        iterator = iter(members)
        while True:
            try:
                member = next(iterator)
            except StopIteration:
                break
            except Exception as error:
                # Listing the members failed; nothing more can be read
                self._attach_error(item, ENUMERATION_ERROR_LABEL, error)
                break

            if member.ok:
                self._process_child(item, member, max_depth, queue)
            else:
                self._attach_error(item, member.label, member.error)

    def _process_child(self,
                       item: WorkItem,
                       member: MemberRead,
                       max_depth: int,
                       queue: Deque[WorkItem]) -> None:
        """Create the node for one member and queue it for expansion if needed."""
        kind = self.adapter.classify(member.value)
        child = PropertyTreeNode(name=member.label, kind=kind)
        item.parent.children.append(child)

        if kind is NodeKind.ERROR:
            child.value = ACCESS_ERROR_MARKER
            return

        if kind.is_terminal:
            child.value = member.value
            return

        # Functions are never expanded
        if not kind.is_container:
            return

        identity = self.adapter.identity(member.value)
        if identity in item.visited:
            child.value = CIRCULAR_REFERENCE_MARKER
            return

        if item.depth + 1 >= max_depth:
            return

        child.children = []
        visited = dict(item.visited)
        visited[identity] = member.value
        queue.append(WorkItem(
            container=member.value,
            depth=item.depth + 1,
            parent=child,
            visited=visited,
        ))

    def _attach_error(self, item: WorkItem, label: str, error: BaseException) -> None:
        """Report an access failure and record it as an error node."""
        self.error_policy.handle(error, label, item.container)
        item.parent.children.append(PropertyTreeNode(
            name=label,
            kind=NodeKind.ERROR,
            value=ACCESS_ERROR_MARKER,
        ))


def validate_depth(max_depth: Any) -> int:
    """Return max_depth as an int, or raise InvalidDepthError.

    Whole floats such as ``2.0`` are accepted; booleans are not.
    """
    if isinstance(max_depth, bool) or not isinstance(max_depth, numbers.Real):
        raise InvalidDepthError(max_depth)
    if isinstance(max_depth, numbers.Integral):
        depth = int(max_depth)
    elif isinstance(max_depth, float) and max_depth.is_integer():
        depth = int(max_depth)
    else:
        raise InvalidDepthError(max_depth)
    if depth < 0:
        raise InvalidDepthError(max_depth)
    return depth
