"""Text rendering of property trees.

Rendering is a pure function of an already-built tree; the inspected value is
never touched again. The output format is fixed:

    └─ root (object)
       ├─ a (number): 1
       └─ b (string): "bee"
"""

from enum import Enum
from typing import Any, List, Optional

from .node import ACCESS_ERROR_MARKER, NodeKind, PropertyTreeNode


CONNECTOR_LAST = "└─ "
CONNECTOR_MIDDLE = "├─ "
INDENT_LAST = "   "
INDENT_MIDDLE = "│  "

MAX_TEXT_LENGTH = 50
ELLIPSIS = "..."


def render(root: PropertyTreeNode) -> str:
    """Render a tree as a multi-line string without a trailing newline.

    The root is always drawn as a last sibling.
    """
    return format_node(root, "", True)


def format_node(node: PropertyTreeNode, indent: str = "", is_last: bool = True) -> str:
    """Format a node and its subtree.

    Args:
        node: Node to format
        indent: Prefix accumulated from the ancestors
        is_last: Whether the node is the last of its siblings

    Returns:
        The node's line followed by the lines of its descendants
    """
    connector = CONNECTOR_LAST if is_last else CONNECTOR_MIDDLE
    line = f"{indent}{connector}{node.name} ({node.kind.value})"

    suffix = format_value(node)
    if suffix is not None:
        line += f": {suffix}"

    lines: List[str] = [line]

    if node.children:
        child_indent = indent + (INDENT_LAST if is_last else INDENT_MIDDLE)
        last_index = len(node.children) - 1
        for index, child in enumerate(node.children):
            lines.append(format_node(child, child_indent, index == last_index))

    return "\n".join(lines)


def format_value(node: PropertyTreeNode) -> Optional[str]:
    """Return the displayed value of a node, or None when it has no value."""
    if not node.has_value:
        return None
    if node.is_marker:
        return str(node.value)
    if node.kind is NodeKind.STRING:
        return format_text(node.value)
    return format_scalar(node.value)


def format_text(value: Any) -> str:
    """Escape newlines, truncate to MAX_TEXT_LENGTH and wrap in double quotes."""
    text = value if isinstance(value, str) else repr(value)
    text = text.replace("\n", "\\n")
    if len(text) > MAX_TEXT_LENGTH:
        text = text[:MAX_TEXT_LENGTH] + ELLIPSIS
    return f'"{text}"'


def format_scalar(value: Any) -> str:
    """Canonical text of a non-string terminal value."""
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    try:
        return str(value)
    except Exception:
        if isinstance(value, int):
            # Past the interpreter's limit on decimal digits
            return hex(value)
        return ACCESS_ERROR_MARKER
