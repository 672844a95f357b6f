"""Walk strategies over built property trees.

Walkers visit PropertyTreeNode instances produced by the builder. They never
look at the inspected value again, so walking is cheap and side-effect free.
Each visit yields the node together with its path: the names from the root
down to the node, root included.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Tuple, Union

from .node import PropertyTreeNode
from ..config import WalkStrategy


Path = Tuple[str, ...]


class TreeWalker(ABC):
    """Abstract base class for walk strategies."""

    @abstractmethod
    def walk(self,
             root: PropertyTreeNode,
             max_depth: Optional[int] = None) -> Iterator[Tuple[PropertyTreeNode, Path]]:
        """Walk the tree starting from root.

        Args:
            root: Starting node
            max_depth: Deepest level to visit (None = unlimited, root = 0)

        Yields:
            Tuples of (node, path)
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstWalker(TreeWalker):
    """Visits all nodes at depth N before any node at depth N+1."""

    def walk(self,
             root: PropertyTreeNode,
             max_depth: Optional[int] = None) -> Iterator[Tuple[PropertyTreeNode, Path]]:
        queue: Deque[Tuple[PropertyTreeNode, Path]] = deque([(root, (root.name,))])

        while queue:
            node, path = queue.popleft()
            yield (node, path)

            if self._should_explore(len(path) - 1, max_depth) and node.children:
                for child in node.children:
                    queue.append((child, path + (child.name,)))


class DepthFirstPreOrderWalker(TreeWalker):
    """Visits a parent before its children, the order lines are rendered in."""

    def walk(self,
             root: PropertyTreeNode,
             max_depth: Optional[int] = None) -> Iterator[Tuple[PropertyTreeNode, Path]]:
        stack = [(root, (root.name,))]

        while stack:
            node, path = stack.pop()
            yield (node, path)

            if self._should_explore(len(path) - 1, max_depth) and node.children:
                # Reversed so the first child is popped first
                for child in reversed(node.children):
                    stack.append((child, path + (child.name,)))


class DepthFirstPostOrderWalker(TreeWalker):
    """Visits children before their parent."""

    def walk(self,
             root: PropertyTreeNode,
             max_depth: Optional[int] = None) -> Iterator[Tuple[PropertyTreeNode, Path]]:

        def _walk_recursive(node: PropertyTreeNode, path: Path) -> Iterator[Tuple[PropertyTreeNode, Path]]:
            if self._should_explore(len(path) - 1, max_depth) and node.children:
                for child in node.children:
                    yield from _walk_recursive(child, path + (child.name,))
            yield (node, path)

        yield from _walk_recursive(root, (root.name,))


def create_walker(strategy: Union[WalkStrategy, str]) -> TreeWalker:
    """Create a walker instance by strategy.

    Args:
        strategy: WalkStrategy or its name (bfs, dfs_pre, dfs_post, ...)

    Returns:
        TreeWalker instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstWalker,
        'breadth_first': BreadthFirstWalker,
        'dfs': DepthFirstPreOrderWalker,
        'dfs_pre': DepthFirstPreOrderWalker,
        'depth_first_pre': DepthFirstPreOrderWalker,
        'dfs_post': DepthFirstPostOrderWalker,
        'depth_first_post': DepthFirstPostOrderWalker,
    }

    if isinstance(strategy, WalkStrategy):
        strategy = strategy.value

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown walk strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
