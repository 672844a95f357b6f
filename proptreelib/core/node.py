"""PropertyTreeNode data model for PropTreeLib.

A PropertyTreeNode is a plain data container produced by the builder and
consumed by the renderer and walkers. It never holds a reference back to the
value it describes, except for terminal values which are stored verbatim.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


CIRCULAR_REFERENCE_MARKER = "[Circular Reference]"
ACCESS_ERROR_MARKER = "[Access Error]"


class _Undefined:
    """Singleton standing for a member that exists but holds no value.

    Python has no native "undefined", so unset ``__slots__`` members and
    properties without a getter are reported with this sentinel instead.
    """

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class _NoValue:
    """Marks a node attribute that was never assigned."""

    def __repr__(self) -> str:
        return "<no value>"


NO_VALUE = _NoValue()


class NodeKind(Enum):
    """Closed set of kinds a node can carry.

    The string values are printed verbatim by the renderer.
    """
    OBJECT = "object"           # Composite: key -> value container
    ARRAY = "array"             # List-like: ordered, integer-indexed
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"       # Never expanded
    SYMBOL = "symbol"           # Enum members
    BIGINT = "bigint"           # Integers beyond float precision
    UNDEFINED = "undefined"     # Absent value
    NULL = "null"               # None
    ERROR = "error"             # Synthetic, builder only

    @property
    def is_container(self) -> bool:
        """True for kinds that can be expanded into children."""
        return self in (NodeKind.OBJECT, NodeKind.ARRAY)

    @property
    def is_terminal(self) -> bool:
        """True for kinds whose node carries a value instead of children."""
        return self not in (NodeKind.OBJECT, NodeKind.ARRAY, NodeKind.FUNCTION)

    def __str__(self) -> str:
        return self.value


@dataclass
class PropertyTreeNode:
    """A node in a property tree.

    Attributes:
        name: Originating key, bracketed list index (``[0]``) or root label.
        kind: Kind computed once by the builder.
        value: Terminal value, or a marker string for circular references
            and access errors. ``NO_VALUE`` when not assigned; ``None`` is a
            legitimate value of kind ``null``.
        children: Child nodes in enumeration order. ``None`` when the node was
            not expanded; an empty list for an expanded container with no
            members.
    """

    name: str
    kind: NodeKind
    value: Any = NO_VALUE
    children: Optional[List["PropertyTreeNode"]] = None

    @property
    def has_value(self) -> bool:
        return self.value is not NO_VALUE

    @property
    def is_expanded(self) -> bool:
        return self.children is not None

    @property
    def is_marker(self) -> bool:
        """True when the value is a circular-reference or access-error marker."""
        if not self.has_value:
            return False
        return self.kind is NodeKind.ERROR or self.kind.is_container

    @property
    def is_circular(self) -> bool:
        return self.kind.is_container and self.value == CIRCULAR_REFERENCE_MARKER

    def is_leaf(self) -> bool:
        """True when the node has no child nodes to visit."""
        return not self.children
