"""Configuration for PropTreeLib.

This module defines how users specify what a property tree should contain
and how built trees are walked.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


DEFAULT_MAX_DEPTH = 3
DEFAULT_ROOT_LABEL = "root"


class WalkStrategy(Enum):
    """Order in which a built tree is walked."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children (render order)
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


@dataclass
class BuildConfig:
    """Complete configuration for building a property tree.

    Depth validity is not checked here; the builder rejects invalid depths
    with InvalidDepthError before any traversal starts.
    """

    # Depth control
    max_depth: int = DEFAULT_MAX_DEPTH
    root_label: str = DEFAULT_ROOT_LABEL

    # Member enumeration
    include_private: bool = False       # Attribute names starting with "_"
    include_properties: bool = True     # Resolve property getters

    # Error handling
    error_policy: Optional[Any] = None  # ErrorPolicy, default ContinueOnErrorsPolicy

    # Convenience constructors for common configurations

    @classmethod
    def root_only(cls) -> 'BuildConfig':
        """Config that produces the root node and nothing else."""
        return cls(max_depth=0)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'BuildConfig':
        """Config for looking at immediate members only.

        Args:
            max_depth: How many levels to expand (default 1 = direct members)
        """
        return cls(max_depth=max_depth)

    @classmethod
    def deep(cls, max_depth: int = 10) -> 'BuildConfig':
        """Config for a thorough look, private members included.

        Args:
            max_depth: How many levels to expand
        """
        return cls(max_depth=max_depth, include_private=True)
